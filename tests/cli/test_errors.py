# topmark:header:start
#
#   project      : NvimGen
#   file         : test_errors.py
#   file_relpath : tests/cli/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: error classes and the exit codes they map to."""

from __future__ import annotations

from nvimgen.cli import errors
from nvimgen.cli.errors import NvimgenError
from nvimgen.cli_shared.exit_codes import ExitCode


def _error_classes() -> list[type[NvimgenError]]:
    return [
        obj
        for obj in vars(errors).values()
        if isinstance(obj, type) and issubclass(obj, NvimgenError) and obj is not NvimgenError
    ]


def test_every_failure_code_has_exactly_one_error_class() -> None:
    codes = [cls.exit_code for cls in _error_classes()]
    assert len(codes) == len(set(codes))
    assert set(codes) == set(ExitCode) - {ExitCode.SUCCESS, ExitCode.FAILURE}


def test_error_carries_its_exit_code() -> None:
    error = errors.NvimgenIOError("disk full")
    assert error.exit_code == ExitCode.IO_ERROR == 74
    assert error.format_message() == "disk full"

# topmark:header:start
#
#   project      : NvimGen
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running NvimGen through Click's test runner.

`run_cli_in()` changes the working directory to ``tmp_path`` first so that
relative selections files and output directories resolve inside the test's
temporary directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from nvimgen.cli.main import cli
from nvimgen.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output

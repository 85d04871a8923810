# topmark:header:start
#
#   project      : NvimGen
#   file         : errors.py
#   file_relpath : src/nvimgen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the NvimGen CLI.

Raise these in CLI commands to exit with a standardized message and exit code.
Errors print through the project console when one is present in the Click
context, and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from nvimgen.cli_shared.exit_codes import ExitCode


class NvimgenError(click.ClickException):
    """Base class for all NvimGen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class NvimgenUsageError(NvimgenError):
    """Invalid flags or arguments, including an unknown layout or preset."""

    exit_code = ExitCode.USAGE_ERROR


class NvimgenEncodingError(NvimgenError):
    """A selected value could not be encoded for the target dialect."""

    exit_code = ExitCode.ENCODING_ERROR


class NvimgenFileNotFoundError(NvimgenError):
    """The selections file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class NvimgenIOError(NvimgenError):
    """Reading or writing a file failed, or an output file already exists."""

    exit_code = ExitCode.IO_ERROR


class NvimgenConfigError(NvimgenError):
    """The selections document is malformed."""

    exit_code = ExitCode.CONFIG_ERROR

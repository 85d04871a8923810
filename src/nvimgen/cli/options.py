# topmark:header:start
#
#   project      : NvimGen
#   file         : options.py
#   file_relpath : src/nvimgen/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and their resolution helpers.

Provided:
    - ``common_verbose_options``: ``-v/--verbose`` and ``-q/--quiet`` counters.
    - ``common_color_options``: ``--color`` and ``--no-color``.
    - ``resolve_verbosity`` / ``resolve_color_mode``: turn the raw flags into
      a program-output level and a color decision.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from nvimgen.cli.errors import NvimgenUsageError
from nvimgen.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The level as a ``logging`` integer (WARNING by default).

    Raises:
        NvimgenUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise NvimgenUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Precedence: machine formats (``json``) disable color; then ``--color``;
    then ``FORCE_COLOR`` / ``NO_COLOR``; finally whether stdout is a TTY.

    Args:
        cli_mode: Explicit color mode from CLI options.
        output_format: Output format string, e.g. ``"json"``.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.
    """
    if output_format and output_format.lower() == "json":
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        isatty = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty()) if callable(isatty) else False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f

# topmark:header:start
#
#   project      : NvimGen
#   file         : cmd_common.py
#   file_relpath : src/nvimgen/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by NvimGen commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from nvimgen.cli_shared.console_api import ConsoleLike


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 = terse, 1+ = verbose)."""
    return int(ctx.obj.get("verbosity", 0))

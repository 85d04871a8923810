# topmark:header:start
#
#   project      : NvimGen
#   file         : main.py
#   file_relpath : src/nvimgen/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NvimGen command-line entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nvimgen.cli.commands.generate import generate_command
from nvimgen.cli.commands.init_selections import init_selections_command
from nvimgen.cli.commands.options import options_command
from nvimgen.cli.commands.version import version_command
from nvimgen.cli.console import ClickConsole
from nvimgen.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from nvimgen.config.logging import get_logger, resolve_env_log_level, setup_logging
from nvimgen.dialects import register_all_dialects

if TYPE_CHECKING:
    from nvimgen.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)

register_all_dialects()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["log_level"] = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity"] = verbose

    # Internal logging is driven by the environment only.
    setup_logging(level=resolve_env_log_level())

    effective = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="NvimGen: generate Neovim configuration from selections.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the NvimGen CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'nvimgen generate' to render the minimal preset.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(options_command)

cli.add_command(init_selections_command)

cli.add_command(generate_command)

if __name__ == "__main__":
    cli()

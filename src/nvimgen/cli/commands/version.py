# topmark:header:start
#
#   project      : NvimGen
#   file         : version.py
#   file_relpath : src/nvimgen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NvimGen `version` command.

Prints the NvimGen version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from nvimgen.cli.cli_types import EnumChoiceParam
from nvimgen.cli.cmd_common import get_console, get_effective_verbosity
from nvimgen.cli_shared.utils import OutputFormat
from nvimgen.constants import NVIMGEN_VERSION

if TYPE_CHECKING:
    from nvimgen.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of NvimGen.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of NvimGen.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": NVIMGEN_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# NvimGen Version\n")
        console.print(f"**NvimGen version: {NVIMGEN_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("NvimGen version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(NVIMGEN_VERSION, bold=True)}")
    else:
        console.print(console.styled(NVIMGEN_VERSION, bold=True))

# topmark:header:start
#
#   project      : NvimGen
#   file         : init_selections.py
#   file_relpath : src/nvimgen/cli/commands/init_selections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NvimGen `init-selections` command.

Prints a preset as a TOML selections document, ready to be edited and passed
to `nvimgen generate`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nvimgen.catalog.presets import PRESETS, get_preset
from nvimgen.cli.cmd_common import get_console
from nvimgen.cli.errors import NvimgenUsageError
from nvimgen.config.selections_io import selections_to_toml

if TYPE_CHECKING:
    from nvimgen.catalog.presets import Preset
    from nvimgen.cli_shared.console_api import ConsoleLike


@click.command(
    name="init-selections",
    help="Print a starter selections document.",
)
@click.option(
    "--preset",
    "preset_name",
    default="minimal",
    show_default=True,
    help=f"Preset to start from ({', '.join(sorted(PRESETS))}).",
)
def init_selections_command(*, preset_name: str) -> None:
    """Print the selections of ``preset_name`` as TOML."""
    console: ConsoleLike = get_console(click.get_current_context())
    preset: Preset | None = get_preset(preset_name)
    if preset is None:
        raise NvimgenUsageError(
            f"Unknown preset '{preset_name}'. Available: {', '.join(sorted(PRESETS))}"
        )
    console.print(f"# NvimGen selections ({preset.name}): {preset.description}")
    console.print(selections_to_toml(preset.selections), nl=False)

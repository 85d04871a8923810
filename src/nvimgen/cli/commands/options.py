# topmark:header:start
#
#   project      : NvimGen
#   file         : options.py
#   file_relpath : src/nvimgen/cli/commands/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NvimGen `options` command.

Lists the catalog options in the order they are emitted, with their type and
default value rendered as a Lua literal.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from nvimgen.catalog.instances import get_builtin_catalog
from nvimgen.cli.cli_types import EnumChoiceParam
from nvimgen.cli.cmd_common import get_console
from nvimgen.cli_shared.utils import OutputFormat, render_markdown_table
from nvimgen.constants import NVIMGEN_VERSION
from nvimgen.dialects import resolve_dialect
from nvimgen.emitter.encoder import ValueEncoder

if TYPE_CHECKING:
    from nvimgen.cli_shared.console_api import ConsoleLike
    from nvimgen.model import OptionSpec


def _serialize(spec: OptionSpec, default_literal: str, *, details: bool) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": spec.id,
        "type": spec.type.value,
        "default": default_literal,
    }
    if details:
        data.update(
            {
                "category": spec.category.value,
                "enum_values": list(spec.enum_values),
                "min": spec.min,
                "max": spec.max,
                "label": spec.label,
                "description": spec.description,
            }
        )
    return data


@click.command(
    name="options",
    help="List the options NvimGen can emit.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (category, allowed values, range, description).",
)
def options_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List catalog options in emission order.

    Args:
        show_details (bool): Include category, allowed values, range and description.
        output_format (OutputFormat | None): Output format; human-readable when None.
    """
    console: ConsoleLike = get_console(click.get_current_context())
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    encoder = ValueEncoder(resolve_dialect(legacy_mode=False))
    entries: list[tuple[OptionSpec, str]] = [
        (spec, encoder.encode_option(spec, spec.default))
        for spec in get_builtin_catalog().in_emission_order()
    ]

    if fmt == OutputFormat.JSON:
        payload = [_serialize(s, lit, details=show_details) for s, lit in entries]
        console.print(json.dumps(payload, indent=2))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Supported Options\n")
        console.print(f"NvimGen version **{NVIMGEN_VERSION}** can emit the following options:\n")
        if show_details:
            headers = ["Option", "Category", "Type", "Default", "Allowed", "Description"]
            rows = [
                [
                    f"`{s.id}`",
                    s.category.value,
                    s.type.value,
                    f"`{lit}`",
                    ", ".join(f"`{v}`" for v in s.enum_values),
                    s.description,
                ]
                for s, lit in entries
            ]
        else:
            headers = ["Option", "Type", "Default"]
            rows = [[f"`{s.id}`", s.type.value, f"`{lit}`"] for s, lit in entries]
        console.print(render_markdown_table(headers, rows), nl=False)
        return

    width: int = max((len(s.id) for s, _lit in entries), default=0)
    current_category: str | None = None
    for spec, literal in entries:
        if show_details and spec.category.value != current_category:
            current_category = spec.category.value
            console.print(console.styled(f"{spec.category.label}:", bold=True, underline=True))
        name: str = console.styled(spec.id.ljust(width), bold=True)
        line: str = f"{name}  {spec.type.value:<12} {literal}"
        console.print(f"  {line}" if show_details else line)
        if show_details and spec.description:
            console.print(f"  {' ' * width}  {console.styled(spec.description, dim=True)}")

# topmark:header:start
#
#   project      : NvimGen
#   file         : keymaps.py
#   file_relpath : src/nvimgen/emitter/sections/keymaps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keymaps section: the mapping alias once, then one call per keymap.

The options record carries only the fields the caller set explicitly
(``desc``, ``silent``, ``noremap``). ``condition`` never reaches the output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nvimgen.dialects.base import MapOptions
from nvimgen.emitter.sections.base import SectionBuilder
from nvimgen.model import InlineBody, LiteralCommand

if TYPE_CHECKING:
    from nvimgen.emitter.ordering import OrderedSelections
    from nvimgen.emitter.sections.base import EmitEnv
    from nvimgen.model import KeymapSpec


def _rhs_fragment(keymap: KeymapSpec, env: EmitEnv) -> list[str]:
    """Dispatch on the right-hand side variant."""
    rhs = keymap.rhs
    if isinstance(rhs, InlineBody):
        return env.dialect.inline_function(rhs.text, env.encoder)
    if isinstance(rhs, LiteralCommand):
        return env.dialect.command_rhs(rhs.text, env.encoder)
    raise TypeError(f"Unsupported keymap rhs: {rhs!r}")


class KeymapsBuilder(SectionBuilder):
    """Emit the mapping preamble and one mapping statement per keymap."""

    def __init__(self) -> None:
        super().__init__(name="keymaps")

    def build(self, ordered: OrderedSelections, env: EmitEnv) -> list[str]:
        if not ordered.keymaps:
            return []
        lines: list[str] = list(env.dialect.keymap_preamble())
        for keymap in ordered.keymaps:
            lines.extend(
                env.dialect.keymap_call(
                    keymap.modes,
                    keymap.is_multi_mode,
                    keymap.lhs,
                    _rhs_fragment(keymap, env),
                    MapOptions(desc=keymap.desc, silent=keymap.silent, noremap=keymap.noremap),
                    env.encoder,
                )
            )
        return lines

# topmark:header:start
#
#   project      : NvimGen
#   file         : header.py
#   file_relpath : src/nvimgen/emitter/sections/header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header section: leader assignments followed by the generator banner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nvimgen.constants import BANNER_LINES
from nvimgen.emitter.sections.base import SectionBuilder

if TYPE_CHECKING:
    from nvimgen.emitter.ordering import OrderedSelections
    from nvimgen.emitter.sections.base import EmitEnv


class HeaderBuilder(SectionBuilder):
    """Emit ``mapleader``/``maplocalleader`` (always first) and the banner."""

    def __init__(self) -> None:
        super().__init__(name="header")

    def build(self, ordered: OrderedSelections, env: EmitEnv) -> list[str]:
        dialect, encoder = env.dialect, env.encoder
        return [
            dialect.global_assignment("mapleader", encoder.string(env.selections.leader)),
            dialect.global_assignment(
                "maplocalleader", encoder.string(env.selections.local_leader)
            ),
            *(dialect.comment(line) for line in BANNER_LINES),
        ]

# topmark:header:start
#
#   project      : NvimGen
#   file         : autocmds.py
#   file_relpath : src/nvimgen/emitter/sections/autocmds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Autocommands section: one group creation per group, then its hooks.

The "create each group once" rule is a fold whose accumulator carries the
group names already created; nothing is remembered between generations.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING

from nvimgen.emitter.sections.base import SectionBuilder

if TYPE_CHECKING:
    from nvimgen.emitter.ordering import GroupedAutocmd, OrderedSelections
    from nvimgen.emitter.sections.base import EmitEnv


@dataclass(frozen=True)
class _Fold:
    """Accumulator of the autocommand fold."""

    lines: tuple[str, ...] = ()
    created: frozenset[str] = frozenset()


class AutocmdsBuilder(SectionBuilder):
    """Emit group creations and hook registrations."""

    def __init__(self) -> None:
        super().__init__(name="autocmds")

    def build(self, ordered: OrderedSelections, env: EmitEnv) -> list[str]:
        def step(acc: _Fold, entry: GroupedAutocmd) -> _Fold:
            lines: tuple[str, ...] = acc.lines
            created: frozenset[str] = acc.created
            if entry.group not in created:
                lines += tuple(env.dialect.group_creation(entry.group, env.encoder))
                created |= {entry.group}
            autocmd = entry.autocmd
            lines += tuple(
                env.dialect.hook_registration(
                    event=autocmd.event,
                    group=entry.group,
                    pattern=autocmd.pattern,
                    desc=autocmd.desc,
                    body=autocmd.body,
                    encoder=env.encoder,
                )
            )
            return _Fold(lines=lines, created=created)

        return list(reduce(step, ordered.autocmds, _Fold()).lines)

# topmark:header:start
#
#   project      : NvimGen
#   file         : options.py
#   file_relpath : src/nvimgen/emitter/sections/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options section: one assignment per ordered option, no separators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nvimgen.emitter.sections.base import SectionBuilder

if TYPE_CHECKING:
    from nvimgen.emitter.ordering import OrderedSelections
    from nvimgen.emitter.sections.base import EmitEnv


class OptionsBuilder(SectionBuilder):
    """Emit ``target.<id> = <literal>`` for each option in emission order."""

    def __init__(self) -> None:
        super().__init__(name="options")

    def build(self, ordered: OrderedSelections, env: EmitEnv) -> list[str]:
        return [
            env.dialect.option_assignment(
                option.spec.id,
                env.encoder.encode_option(option.spec, option.value),
                option.spec.type,
            )
            for option in ordered.options
        ]

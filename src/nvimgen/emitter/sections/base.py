# topmark:header:start
#
#   project      : NvimGen
#   file         : base.py
#   file_relpath : src/nvimgen/emitter/sections/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for section builders.

The generator invokes builders as *callables*:

    block = builder(ordered, env)

Each builder is a stateless fold over one ordered sequence into a list of
lines. Builders never emit trailing newlines; the layout composer owns line
termination.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nvimgen.config.logging import get_logger

if TYPE_CHECKING:
    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.dialects.base import Dialect
    from nvimgen.emitter.encoder import ValueEncoder
    from nvimgen.emitter.ordering import OrderedSelections
    from nvimgen.model import Selections

logger: NvimgenLogger = get_logger(__name__)


@dataclass(frozen=True)
class EmitEnv:
    """Read-only inputs shared by all builders of one generation.

    Attributes:
        selections (Selections): The raw selections (header values live here).
        dialect (Dialect): Target dialect.
        encoder (ValueEncoder): Encoder bound to ``dialect``.
    """

    selections: Selections
    dialect: Dialect
    encoder: ValueEncoder


@dataclass(frozen=True)
class SectionBlock:
    """The lines one builder produced."""

    name: str
    lines: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        """True when the builder emitted nothing."""
        return not self.lines

    @property
    def text(self) -> str:
        """Lines joined with newlines, without a trailing newline."""
        return "\n".join(self.lines)


@dataclass
class SectionBuilder:
    """Reusable foundation for section builders.

    Subclass and override ``build()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable section name used in logs and as the block name.
    """

    name: str

    def __call__(self, ordered: OrderedSelections, env: EmitEnv) -> SectionBlock:
        """Run ``build()`` and wrap its lines in a SectionBlock.

        Args:
            ordered (OrderedSelections): Output of the ordering engine.
            env (EmitEnv): Dialect, encoder and raw selections.

        Returns:
            SectionBlock: The built block.
        """
        lines: list[str] = self.build(ordered, env)
        logger.debug("Section %s: %d line(s) (%s)", self.name, len(lines), env.dialect.name)
        return SectionBlock(name=self.name, lines=tuple(lines))

    def build(self, ordered: OrderedSelections, env: EmitEnv) -> list[str]:
        """Return the section's lines. Subclasses must implement this method."""
        raise NotImplementedError

# topmark:header:start
#
#   project      : NvimGen
#   file         : base.py
#   file_relpath : src/nvimgen/dialects/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dialect base module for NvimGen's emitter.

A *dialect* knows the concrete syntax of one target scripting language: how
literals are delimited, how an option is assigned, what a key mapping call or
an autocommand registration looks like, and how the split layout's root file
pulls in its modules.

Responsibilities:
    - **Literal fragments:** boolean keywords, string delimiter and control
      escapes, sequence literal (see :meth:`Dialect.sequence_literal`).
    - **Statements:** leader/global assignment, option assignment, mapping alias
      and call, group creation, hook registration, module import.
    - **Layout metadata:** root file name and module paths.

What this class does **not** do:
    - **Escaping.** Raw user text always goes through the
      :class:`~nvimgen.emitter.encoder.ValueEncoder` passed to each method.
    - **Ordering or deduplication.** Section builders decide what is emitted and
      how often; a dialect only shapes one statement at a time.

Extension points:
    Subclasses set the class attributes below and implement every method that
    raises :class:`NotImplementedError` here. Register a subclass with
    :func:`~nvimgen.dialects.registry.register_dialect`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nvimgen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.emitter.encoder import ValueEncoder
    from nvimgen.model import OptionType

logger: NvimgenLogger = get_logger(__name__)


@dataclass(frozen=True)
class MapOptions:
    """Options record of one key mapping; ``None`` marks a field that was not set.

    Field order (desc, silent, noremap) is the fixed emission order.
    """

    desc: str | None = None
    silent: bool | None = None
    noremap: bool | None = None

    @property
    def is_empty(self) -> bool:
        """True when no field was explicitly set."""
        return self.desc is None and self.silent is None and self.noremap is None


class Dialect:
    """Base class for output dialects.

    Attributes:
        name (str): Registry name (e.g. ``lua``).
        description (str): Human-readable description.
        root_filename (str): Path of the single/root output file.
        comment_prefix (str): Line comment introducer.
        string_delimiter (str): Quote character of string literals.
        control_escapes (tuple[tuple[str, str], ...]): Characters that cannot
            appear raw inside a string literal and their escape sequences.
        true_literal (str): Boolean true keyword.
        false_literal (str): Boolean false keyword.
        indent (str): One level of indentation inside emitted blocks.
    """

    name: str = ""
    description: str = ""
    root_filename: str = ""
    comment_prefix: str = ""
    string_delimiter: str = '"'
    control_escapes: tuple[tuple[str, str], ...] = (("\n", "\\n"), ("\r", "\\r"))
    true_literal: str = ""
    false_literal: str = ""
    indent: str = "  "

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    # ---- Literal fragments -------------------------------------------------

    def boolean_literal(self, value: bool) -> str:
        """Return the boolean keyword for ``value``."""
        return self.true_literal if value else self.false_literal

    def sequence_literal(self, items: Sequence[str]) -> str:
        """Return a sequence literal from already-encoded element literals."""
        raise NotImplementedError

    def comment(self, text: str) -> str:
        """Return ``text`` as a single line comment (bare prefix for empty text)."""
        if not text:
            return self.comment_prefix
        return f"{self.comment_prefix} {text}"

    def indent_lines(self, lines: Sequence[str], depth: int = 1) -> list[str]:
        """Indent non-empty lines by ``depth`` levels; blank lines stay empty."""
        pad: str = self.indent * depth
        return [f"{pad}{line}" if line else "" for line in lines]

    # ---- Statements --------------------------------------------------------

    def global_assignment(self, variable: str, literal: str) -> str:
        """Assign an encoded literal to a global editor variable (``mapleader``)."""
        raise NotImplementedError

    def option_assignment(self, option_id: str, literal: str, option_type: OptionType) -> str:
        """Assign an encoded literal to an editor option."""
        raise NotImplementedError

    def keymap_preamble(self) -> list[str]:
        """Return the statements declared once before the first mapping."""
        raise NotImplementedError

    def inline_function(self, body: str, encoder: ValueEncoder) -> list[str]:
        """Wrap statement text as an anonymous callback (one or more lines)."""
        raise NotImplementedError

    def command_rhs(self, text: str, encoder: ValueEncoder) -> list[str]:
        """Render a literal command right-hand side (one or more lines)."""
        raise NotImplementedError

    def keymap_call(
        self,
        modes: tuple[str, ...],
        multi_mode: bool,
        lhs: str,
        rhs: list[str],
        options: MapOptions,
        encoder: ValueEncoder,
    ) -> list[str]:
        """Return the statement(s) registering one mapping.

        Args:
            modes (tuple[str, ...]): Mode tags.
            multi_mode (bool): True when the caller declared a collection of modes.
            lhs (str): Raw trigger sequence (not yet encoded).
            rhs (list[str]): Right-hand side fragment from :meth:`command_rhs` or
                :meth:`inline_function`.
            options (MapOptions): Explicitly set options.
            encoder (ValueEncoder): Encoder for raw text.

        Returns:
            list[str]: Emitted lines.
        """
        raise NotImplementedError

    def group_creation(self, group: str, encoder: ValueEncoder) -> list[str]:
        """Return the statement(s) (re)creating an autocommand group, clearing it."""
        raise NotImplementedError

    def hook_registration(
        self,
        *,
        event: str,
        group: str,
        pattern: str | None,
        desc: str | None,
        body: str,
        encoder: ValueEncoder,
    ) -> list[str]:
        """Return the statement(s) registering one autocommand in ``group``."""
        raise NotImplementedError

    # ---- Layout ------------------------------------------------------------

    def module_path(self, module: str) -> str:
        """Return the relative path of a split-layout module file."""
        raise NotImplementedError

    def module_import(self, module: str, encoder: ValueEncoder) -> str:
        """Return the root-file statement loading a split-layout module."""
        raise NotImplementedError

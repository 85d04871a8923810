# topmark:header:start
#
#   project      : NvimGen
#   file         : model.py
#   file_relpath : src/nvimgen/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable data model shared by the catalog, the emitter and the CLI.

Sections:
    * OptionType / OptionCategory: tags that drive encoding and ordering.
    * OptionSpec: one catalog entry.
    * LiteralCommand / InlineBody: the two shapes a keymap right-hand side can take.
    * KeymapSpec / AutocmdSpec: user-composed mappings and hooks.
    * Selections: the complete input of one generation.
    * Layout / VirtualFile: the output side.

All types are frozen; the emitter neither mutates nor retains them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from nvimgen.constants import DEFAULT_LEADER, DEFAULT_LOCAL_LEADER
from nvimgen.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable


class OptionType(KeyedStrEnum):
    """Declared value type of an option; the tag the encoder dispatches on."""

    BOOLEAN = ("boolean", "Boolean flag", ("bool",))
    NUMBER = ("number", "Number", ("int", "integer", "float"))
    STRING = ("string", "String", ("str",))
    ENUM = ("enum", "One of a fixed set of strings")
    STRING_ARRAY = ("string-array", "List of strings", ("list", "array"))


class OptionCategory(KeyedStrEnum):
    """Catalog categories. Declaration order is the emission order."""

    UI = ("ui", "User interface")
    EDITING = ("editing", "Editing and indentation")
    SEARCH = ("search", "Search")
    WINDOWS = ("windows", "Windows and splits")
    SYSTEM = ("system", "System integration")

    @property
    def rank(self) -> int:
        """Position of this category in the fixed emission order."""
        return list(OptionCategory).index(self)


@dataclass(frozen=True)
class OptionSpec:
    """A catalog entry describing one configurable editor option.

    Attributes:
        id (str): Option name as understood by the editor (``shiftwidth``).
        type (OptionType): Declared value type.
        default (object): Default value; satisfies ``type``.
        category (OptionCategory): Catalog category (primary ordering key).
        enum_values (tuple[str, ...]): Permitted values when ``type`` is enum.
        label (str): Display label (not emitted).
        description (str): Display description (not emitted).
        min (float | None): Lower bound enforced upstream (not re-clamped).
        max (float | None): Upper bound enforced upstream (not re-clamped).
        format_string (bool): True for template options where ``%`` starts a
            directive (status line, tab line, ...).
    """

    id: str
    type: OptionType
    default: object
    category: OptionCategory
    enum_values: tuple[str, ...] = ()
    label: str = ""
    description: str = ""
    min: float | None = None
    max: float | None = None
    format_string: bool = False


@dataclass(frozen=True)
class LiteralCommand:
    """Keymap right-hand side emitted as a literal command string."""

    text: str


@dataclass(frozen=True)
class InlineBody:
    """Keymap right-hand side emitted as an anonymous function wrapping ``text``."""

    text: str


Rhs = LiteralCommand | InlineBody


def _normalize_modes(mode: str | Iterable[str]) -> tuple[str, ...]:
    """Return mode tags as a tuple without duplicates.

    Unordered collections (``set``/``frozenset``) are sorted so the result does not
    depend on hash order; sequences keep the caller's order.
    """
    if isinstance(mode, str):
        return (mode,)
    items: list[str] = sorted(mode) if isinstance(mode, (set, frozenset)) else list(mode)
    seen: list[str] = []
    for tag in items:
        if tag not in seen:
            seen.append(tag)
    return tuple(seen)


@dataclass(frozen=True)
class KeymapSpec:
    """One key mapping.

    ``silent`` and ``noremap`` default to ``None`` meaning "not explicitly set"
    (effective value: true). Only explicitly set fields reach the emitted options
    record. ``condition`` is carried but never emitted.
    """

    mode: str | tuple[str, ...]
    lhs: str
    rhs: Rhs
    desc: str | None = None
    silent: bool | None = None
    noremap: bool | None = None
    condition: str | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of tags at construction; store a hashable tuple.
        if not isinstance(self.mode, str):
            object.__setattr__(self, "mode", _normalize_modes(self.mode))

    @property
    def modes(self) -> tuple[str, ...]:
        """Mode tags as a tuple (a single tag becomes a one-element tuple)."""
        return _normalize_modes(self.mode)

    @property
    def is_multi_mode(self) -> bool:
        """True when the mapping was declared with a collection of modes."""
        return not isinstance(self.mode, str)


@dataclass(frozen=True)
class AutocmdSpec:
    """One automatic-command hook."""

    event: str
    body: str
    pattern: str | None = None
    group: str | None = None
    desc: str | None = None


def _freeze_options(options: Mapping[str, object]) -> Mapping[str, object]:
    return MappingProxyType(dict(options))


@dataclass(frozen=True)
class Selections:
    """The complete user choice set for one generation.

    Attributes:
        options (Mapping[str, object]): Option id -> chosen value; ``None`` selects
            the catalog default. Iteration order is irrelevant.
        keymaps (tuple[KeymapSpec, ...]): Mappings in the order they are emitted.
        autocmds (tuple[AutocmdSpec, ...]): Hooks; grouping decides emission order.
        legacy_mode (bool): Emit the legacy Vimscript dialect instead of Lua.
        leader (str): Value assigned to the leader key.
        local_leader (str): Value assigned to the local leader key.
    """

    options: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))
    keymaps: tuple[KeymapSpec, ...] = ()
    autocmds: tuple[AutocmdSpec, ...] = ()
    legacy_mode: bool = False
    leader: str = DEFAULT_LEADER
    local_leader: str = DEFAULT_LOCAL_LEADER

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", _freeze_options(self.options))
        object.__setattr__(self, "keymaps", tuple(self.keymaps))
        object.__setattr__(self, "autocmds", tuple(self.autocmds))


class Layout(KeyedStrEnum):
    """Output arrangement of the generated text."""

    SINGLE = ("single", "One init file", ("single-file", "file"))
    SPLIT = ("split", "Root file requiring three modules", ("modules", "multi"))


@dataclass(frozen=True)
class VirtualFile:
    """One generated file: a relative path and its full text content."""

    path: str
    content: str

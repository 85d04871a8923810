# topmark:header:start
#
#   project      : NvimGen
#   file         : selections_io.py
#   file_relpath : src/nvimgen/config/selections_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and write selections documents (TOML).

Parsing is done with `tomlkit` and unwrapped to plain ``dict`` structures
before validation. Validation is strict: a malformed document raises
`SelectionsFormatError` rather than being silently repaired. Option values are
not type-checked here; the emitter's encoder owns that.

Example document:

    ```toml
    leader = " "
    default_options = ["number"]

    [options]
    shiftwidth = 2

    [[keymaps]]
    mode = ["n", "t"]
    lhs = "<leader>e"
    command = "<cmd>Ex<CR>"
    desc = "Open file explorer"

    [[autocmds]]
    event = "TextYankPost"
    group = "AppBasics"
    body = "vim.highlight.on_yank()"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from nvimgen.config.keys import Toml
from nvimgen.config.logging import get_logger
from nvimgen.constants import DEFAULT_LEADER, DEFAULT_LOCAL_LEADER
from nvimgen.model import AutocmdSpec, InlineBody, KeymapSpec, LiteralCommand, Selections

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.model import Rhs

logger: NvimgenLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class SelectionsFormatError(ValueError):
    """A selections document does not have the expected shape."""


# ---- Typed getters ---------------------------------------------------------


def _get_str(
    table: Mapping[str, Any], key: str, where: str, *, required: bool = False
) -> str | None:
    value: Any = table.get(key)
    if value is None:
        if required:
            raise SelectionsFormatError(f"{where}: missing required key '{key}'")
        return None
    if not isinstance(value, str):
        raise SelectionsFormatError(f"{where}: '{key}' must be a string, got {value!r}")
    return value


def _get_bool(table: Mapping[str, Any], key: str, where: str) -> bool | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise SelectionsFormatError(f"{where}: '{key}' must be a boolean, got {value!r}")
    return value


def _get_tables(data: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value: Any = data.get(key, [])
    if not isinstance(value, list):
        raise SelectionsFormatError(f"'{key}' must be an array of tables")
    tables: list[Mapping[str, Any]] = []
    for index, item in enumerate(cast("list[Any]", value)):
        if not isinstance(item, dict):
            raise SelectionsFormatError(f"{key}[{index}] must be a table, got {item!r}")
        tables.append(cast("Mapping[str, Any]", item))
    return tables


# ---- Parsing -----------------------------------------------------------------


def _parse_mode(table: Mapping[str, Any], where: str) -> str | tuple[str, ...]:
    value: Any = table.get(Toml.KEY_MODE, "n")
    if isinstance(value, str):
        return value
    if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
        return tuple(cast("list[str]", value))
    raise SelectionsFormatError(
        f"{where}: '{Toml.KEY_MODE}' must be a string or a non-empty list of strings"
    )


def _parse_keymap(table: Mapping[str, Any], where: str) -> KeymapSpec:
    command: str | None = _get_str(table, Toml.KEY_COMMAND, where)
    inline: str | None = _get_str(table, Toml.KEY_INLINE, where)
    if (command is None) == (inline is None):
        raise SelectionsFormatError(
            f"{where}: exactly one of '{Toml.KEY_COMMAND}' and '{Toml.KEY_INLINE}' is required"
        )
    rhs: Rhs = LiteralCommand(command) if command is not None else InlineBody(cast("str", inline))
    return KeymapSpec(
        mode=_parse_mode(table, where),
        lhs=cast("str", _get_str(table, Toml.KEY_LHS, where, required=True)),
        rhs=rhs,
        desc=_get_str(table, Toml.KEY_DESC, where),
        silent=_get_bool(table, Toml.KEY_SILENT, where),
        noremap=_get_bool(table, Toml.KEY_NOREMAP, where),
        condition=_get_str(table, Toml.KEY_CONDITION, where),
    )


def _parse_autocmd(table: Mapping[str, Any], where: str) -> AutocmdSpec:
    return AutocmdSpec(
        event=cast("str", _get_str(table, Toml.KEY_EVENT, where, required=True)),
        body=cast("str", _get_str(table, Toml.KEY_BODY, where, required=True)),
        pattern=_get_str(table, Toml.KEY_PATTERN, where),
        group=_get_str(table, Toml.KEY_GROUP, where),
        desc=_get_str(table, Toml.KEY_DESC, where),
    )


def _parse_options(data: Mapping[str, Any]) -> dict[str, object]:
    options: dict[str, object] = {}
    defaults: Any = data.get(Toml.KEY_DEFAULT_OPTIONS, [])
    if not isinstance(defaults, list) or not all(isinstance(v, str) for v in defaults):
        raise SelectionsFormatError(f"'{Toml.KEY_DEFAULT_OPTIONS}' must be a list of option ids")
    for option_id in cast("list[str]", defaults):
        options[option_id] = None
    table: Any = data.get(Toml.SECTION_OPTIONS, {})
    if not isinstance(table, dict):
        raise SelectionsFormatError(f"'{Toml.SECTION_OPTIONS}' must be a table")
    for option_id, value in cast("TomlTable", table).items():
        if option_id in options:
            raise SelectionsFormatError(
                f"option '{option_id}' appears in both '{Toml.KEY_DEFAULT_OPTIONS}' "
                f"and [{Toml.SECTION_OPTIONS}]"
            )
        options[option_id] = value
    return options


def selections_from_dict(data: Mapping[str, Any]) -> Selections:
    """Build a `Selections` value from an unwrapped TOML document.

    Args:
        data (Mapping[str, Any]): Plain-dict TOML content.

    Returns:
        Selections: The parsed selections.

    Raises:
        SelectionsFormatError: If a table or key has the wrong shape.
    """
    root: str = "selections"
    legacy_mode: bool | None = _get_bool(data, Toml.KEY_LEGACY_MODE, root)
    leader: str | None = _get_str(data, Toml.KEY_LEADER, root)
    local_leader: str | None = _get_str(data, Toml.KEY_LOCAL_LEADER, root)
    keymaps: list[KeymapSpec] = [
        _parse_keymap(t, f"{Toml.SECTION_KEYMAPS}[{i}]")
        for i, t in enumerate(_get_tables(data, Toml.SECTION_KEYMAPS))
    ]
    autocmds: list[AutocmdSpec] = [
        _parse_autocmd(t, f"{Toml.SECTION_AUTOCMDS}[{i}]")
        for i, t in enumerate(_get_tables(data, Toml.SECTION_AUTOCMDS))
    ]
    selections = Selections(
        options=_parse_options(data),
        keymaps=tuple(keymaps),
        autocmds=tuple(autocmds),
        legacy_mode=bool(legacy_mode),
        leader=DEFAULT_LEADER if leader is None else leader,
        local_leader=DEFAULT_LOCAL_LEADER if local_leader is None else local_leader,
    )
    logger.debug(
        "Parsed selections: %d option(s), %d keymap(s), %d autocmd(s)",
        len(selections.options),
        len(selections.keymaps),
        len(selections.autocmds),
    )
    return selections


def parse_selections(text: str) -> Selections:
    """Parse TOML text into `Selections`.

    Raises:
        SelectionsFormatError: If the text is not valid TOML or has the wrong shape.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise SelectionsFormatError(f"invalid TOML: {exc}") from exc
    data: Any = doc.unwrap()
    return selections_from_dict(cast("TomlTable", data))


def load_selections(path: Path) -> Selections:
    """Load a selections document from ``path``.

    Raises:
        OSError: If the file cannot be read.
        SelectionsFormatError: If the document is malformed.
    """
    logger.debug("Loading selections from %s", path)
    return parse_selections(path.read_text(encoding="utf-8"))


# ---- Rendering ---------------------------------------------------------------


def _keymap_to_dict(keymap: KeymapSpec) -> TomlTable:
    table: TomlTable = {
        Toml.KEY_MODE: keymap.mode if isinstance(keymap.mode, str) else list(keymap.mode),
        Toml.KEY_LHS: keymap.lhs,
    }
    if isinstance(keymap.rhs, InlineBody):
        table[Toml.KEY_INLINE] = keymap.rhs.text
    else:
        table[Toml.KEY_COMMAND] = keymap.rhs.text
    for key, value in (
        (Toml.KEY_DESC, keymap.desc),
        (Toml.KEY_SILENT, keymap.silent),
        (Toml.KEY_NOREMAP, keymap.noremap),
        (Toml.KEY_CONDITION, keymap.condition),
    ):
        if value is not None:
            table[key] = value
    return table


def _autocmd_to_dict(autocmd: AutocmdSpec) -> TomlTable:
    table: TomlTable = {Toml.KEY_EVENT: autocmd.event}
    for key, value in (
        (Toml.KEY_PATTERN, autocmd.pattern),
        (Toml.KEY_GROUP, autocmd.group),
        (Toml.KEY_DESC, autocmd.desc),
    ):
        if value is not None:
            table[key] = value
    table[Toml.KEY_BODY] = autocmd.body
    return table


def selections_to_dict(selections: Selections) -> TomlTable:
    """Return ``selections`` as a TOML-compatible dict (``None`` values omitted)."""
    defaults: list[str] = sorted(k for k, v in selections.options.items() if v is None)
    explicit: TomlTable = {
        k: list(v) if isinstance(v, tuple) else v
        for k, v in sorted(selections.options.items())
        if v is not None
    }
    data: TomlTable = {
        Toml.KEY_LEGACY_MODE: selections.legacy_mode,
        Toml.KEY_LEADER: selections.leader,
        Toml.KEY_LOCAL_LEADER: selections.local_leader,
    }
    if defaults:
        data[Toml.KEY_DEFAULT_OPTIONS] = defaults
    data[Toml.SECTION_OPTIONS] = explicit
    if selections.keymaps:
        data[Toml.SECTION_KEYMAPS] = [_keymap_to_dict(k) for k in selections.keymaps]
    if selections.autocmds:
        data[Toml.SECTION_AUTOCMDS] = [_autocmd_to_dict(a) for a in selections.autocmds]
    return data


def selections_to_toml(selections: Selections) -> str:
    """Serialize ``selections`` to a TOML document string."""
    return cast("str", cast("Any", tomlkit).dumps(selections_to_dict(selections)))

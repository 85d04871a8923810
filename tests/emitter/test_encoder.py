# topmark:header:start
#
#   project      : NvimGen
#   file         : test_encoder.py
#   file_relpath : tests/emitter/test_encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the value encoder (literal forms and escaping)."""

from __future__ import annotations

import math

import pytest

from nvimgen.core.errors import EncodingError
from nvimgen.dialects import resolve_dialect
from nvimgen.emitter.encoder import ValueEncoder, encode
from nvimgen.model import OptionCategory, OptionSpec, OptionType
from tests.conftest import parametrize


@pytest.fixture
def lua() -> ValueEncoder:
    return ValueEncoder(resolve_dialect(legacy_mode=False))


@pytest.fixture
def vim() -> ValueEncoder:
    return ValueEncoder(resolve_dialect(legacy_mode=True))


def test_booleans_use_dialect_keywords(lua: ValueEncoder, vim: ValueEncoder) -> None:
    assert lua.boolean(True) == "true"
    assert lua.boolean(False) == "false"
    assert vim.boolean(True) == "v:true"


@parametrize("value", [1, 0, "true", None])
def test_boolean_rejects_non_bool(lua: ValueEncoder, value: object) -> None:
    with pytest.raises(EncodingError):
        lua.boolean(value)


@parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (2, "2"),
        (-1, "-1"),
        (0.5, "0.5"),
        (1e-05, "1.0e-05"),
        (2**53, str(2**53)),
    ],
)
def test_number_decimal_text(lua: ValueEncoder, value: object, expected: str) -> None:
    assert lua.number(value) == expected


@parametrize("value", [math.nan, math.inf, -math.inf, True, 2**53 + 1, "2", None])
def test_number_rejects_invalid(lua: ValueEncoder, value: object) -> None:
    with pytest.raises(EncodingError):
        lua.number(value)


@parametrize(
    ("value", "expected"),
    [
        ("", '""'),
        ("plain", '"plain"'),
        ('say "hi"', r'"say \"hi\""'),
        ("back\\slash", r'"back\\slash"'),
        ('\\"', r'"\\\""'),
        ("line\nbreak", r'"line\nbreak"'),
        ("cr\rhere", r'"cr\rhere"'),
        ("tab\tstays", '"tab\tstays"'),
        ("ünïcödé ✓", '"ünïcödé ✓"'),
    ],
)
def test_string_escaping(lua: ValueEncoder, value: str, expected: str) -> None:
    assert lua.string(value) == expected


def test_string_rejects_non_string(lua: ValueEncoder) -> None:
    with pytest.raises(EncodingError):
        lua.string(3)


@parametrize(
    ("value", "expected"),
    [
        ("%#StatusLine# %f %m %= %y %p%% %l:%c ", '"%#StatusLine# %f %m %= %y %p%% %l:%c "'),
        ("100%", '"100%%"'),
        ("50% done", '"50%% done"'),
        ("%%", '"%%"'),
        ("%f", '"%f"'),
    ],
)
def test_format_string_percent_handling(lua: ValueEncoder, value: str, expected: str) -> None:
    assert lua.string(value, format_string=True) == expected


def test_percent_untouched_outside_format_strings(lua: ValueEncoder) -> None:
    assert lua.string("100%") == '"100%"'


def test_enum_membership(lua: ValueEncoder) -> None:
    assert lua.enum("unnamedplus", ("", "unnamedplus")) == '"unnamedplus"'
    assert lua.enum("", ("", "unnamedplus")) == '""'
    with pytest.raises(EncodingError, match="not one of"):
        lua.enum("primary", ("", "unnamedplus"))


def test_string_array(lua: ValueEncoder, vim: ValueEncoder) -> None:
    assert lua.string_array(("menu", "preview")) == '{ "menu", "preview" }'
    assert lua.string_array([]) == "{}"
    assert vim.string_array(["a"]) == '["a"]'


@parametrize("value", ["menu", ("menu", 1), None, 3])
def test_string_array_rejects_invalid(lua: ValueEncoder, value: object) -> None:
    with pytest.raises(EncodingError):
        lua.string_array(value)


def test_encode_dispatches_on_declared_type(lua: ValueEncoder) -> None:
    assert lua.encode(True, OptionType.BOOLEAN) == "true"
    assert lua.encode(4, OptionType.NUMBER) == "4"
    assert lua.encode("x", OptionType.ENUM, enum_values=("x",)) == '"x"'
    with pytest.raises(EncodingError):
        lua.encode("4", OptionType.NUMBER)


def test_encode_option_attaches_option_id(lua: ValueEncoder) -> None:
    spec = OptionSpec(
        id="tabstop", type=OptionType.NUMBER, default=8, category=OptionCategory.EDITING
    )
    with pytest.raises(EncodingError) as excinfo:
        lua.encode_option(spec, "eight")
    assert excinfo.value.option_id == "tabstop"
    assert str(excinfo.value).startswith("tabstop: ")


def test_module_level_encode_defaults_to_lua() -> None:
    assert encode(False, OptionType.BOOLEAN) == "false"
    assert encode(False, OptionType.BOOLEAN, dialect=resolve_dialect(legacy_mode=True)) == "v:false"


def test_unquoted_contexts(vim: ValueEncoder) -> None:
    assert vim.map_lhs("<leader> |") == "<leader><Space><Bar>"
    assert vim.map_rhs(":a | b<CR>") == ":a <Bar> b<CR>"
    assert vim.command_argument("My Group|x") == "My\\ Group\\|x"
    assert vim.comment_text("one\ntwo") == "one two"

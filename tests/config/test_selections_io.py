# topmark:header:start
#
#   project      : NvimGen
#   file         : test_selections_io.py
#   file_relpath : tests/config/test_selections_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for reading and writing selections documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from nvimgen.catalog.presets import MINIMAL
from nvimgen.config.selections_io import (
    SelectionsFormatError,
    load_selections,
    parse_selections,
    selections_from_dict,
    selections_to_toml,
)
from nvimgen.constants import DEFAULT_LEADER
from nvimgen.emitter.generate import generate
from nvimgen.model import InlineBody, LiteralCommand
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

DOCUMENT = '''
leader = ","
default_options = ["number"]

[options]
tabstop = 4
completeopt = ["menu", "menuone"]

[[keymaps]]
mode = ["n", "v"]
lhs = "<leader>y"
command = '"+y'
desc = "Yank to clipboard"
noremap = false

[[keymaps]]
lhs = "<leader>t"
inline = """
print("one")
print("two")
"""
condition = "has('nvim-0.10')"

[[autocmds]]
event = "BufWritePre"
pattern = "*.lua"
group = "Format"
body = "vim.lsp.buf.format()"
'''


def test_parse_full_document() -> None:
    selections = parse_selections(DOCUMENT)
    assert selections.leader == ","
    assert selections.legacy_mode is False
    assert dict(selections.options) == {
        "number": None,
        "tabstop": 4,
        "completeopt": ["menu", "menuone"],
    }
    first, second = selections.keymaps
    assert first.mode == ("n", "v")
    assert first.rhs == LiteralCommand('"+y')
    assert first.noremap is False
    assert first.silent is None
    assert second.mode == "n"
    assert second.rhs == InlineBody('print("one")\nprint("two")\n')
    assert second.condition == "has('nvim-0.10')"
    (autocmd,) = selections.autocmds
    assert autocmd.group == "Format"
    assert autocmd.pattern == "*.lua"
    assert generate(selections).ok


def test_empty_document_uses_defaults() -> None:
    selections = parse_selections("")
    assert selections.leader == DEFAULT_LEADER
    assert selections.options == {}
    assert selections.keymaps == ()


def test_load_from_file(tmp_path: Path) -> None:
    path = tmp_path / "selections.toml"
    path.write_text(DOCUMENT, encoding="utf-8")
    assert load_selections(path) == parse_selections(DOCUMENT)


@parametrize(
    "data",
    [
        {"keymaps": [{"lhs": "x"}]},
        {"keymaps": [{"lhs": "x", "command": "a", "inline": "b"}]},
        {"keymaps": [{"command": "a"}]},
        {"keymaps": [{"lhs": "x", "command": "a", "mode": []}]},
        {"keymaps": [{"lhs": "x", "command": "a", "silent": "yes"}]},
        {"keymaps": {"lhs": "x"}},
        {"autocmds": [{"event": "BufEnter"}]},
        {"options": ["number"]},
        {"default_options": "number"},
        {"default_options": ["number"], "options": {"number": True}},
        {"leader": 1},
    ],
)
def test_malformed_documents_are_rejected(data: dict[str, object]) -> None:
    with pytest.raises(SelectionsFormatError):
        selections_from_dict(data)


def test_invalid_toml_is_a_format_error() -> None:
    with pytest.raises(SelectionsFormatError, match="invalid TOML"):
        parse_selections("leader = ")


def test_preset_survives_toml_round_trip() -> None:
    text = selections_to_toml(MINIMAL.selections)
    reparsed = parse_selections(text)
    assert generate(reparsed).unwrap() == generate(MINIMAL.selections).unwrap()

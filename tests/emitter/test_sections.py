# topmark:header:start
#
#   project      : NvimGen
#   file         : test_sections.py
#   file_relpath : tests/emitter/test_sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the section builders (Lua dialect)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from nvimgen.catalog import get_builtin_catalog
from nvimgen.dialects import resolve_dialect
from nvimgen.emitter.encoder import ValueEncoder
from nvimgen.emitter.ordering import order_selections
from nvimgen.emitter.sections import (
    AutocmdsBuilder,
    EmitEnv,
    HeaderBuilder,
    KeymapsBuilder,
    OptionsBuilder,
)
from nvimgen.model import AutocmdSpec
from tests.conftest import cmd_map, fn_map, make_selections

if TYPE_CHECKING:
    from nvimgen.emitter.sections import SectionBuilder
    from nvimgen.model import Selections

MAP_WRAPPER: list[str] = [
    "local function map(mode, lhs, rhs, opts)",
    '  vim.keymap.set(mode, lhs, rhs, vim.tbl_extend("keep", opts or {}, { silent = true }))',
    "end",
]


def build(builder: SectionBuilder, selections: Selections) -> list[str]:
    dialect = resolve_dialect(selections.legacy_mode)
    env = EmitEnv(selections=selections, dialect=dialect, encoder=ValueEncoder(dialect))
    return list(builder(order_selections(selections, get_builtin_catalog()), env).lines)


def test_header_assigns_leaders_before_banner() -> None:
    lines = build(HeaderBuilder(), make_selections(leader=",", local_leader="\\"))
    assert lines[0] == 'vim.g.mapleader = ","'
    assert lines[1] == 'vim.g.maplocalleader = "\\\\"'
    assert all(line.startswith("-- ") for line in lines[2:])


def test_options_one_statement_per_line() -> None:
    lines = build(
        OptionsBuilder(),
        make_selections(options={"shiftwidth": 4, "number": True, "completeopt": None}),
    )
    assert lines == [
        "vim.opt.number = true",
        "vim.opt.shiftwidth = 4",
        'vim.opt.completeopt = { "menu", "preview" }',
    ]


def test_keymaps_empty_section_has_no_alias() -> None:
    assert build(KeymapsBuilder(), make_selections()) == []


def test_keymap_without_explicit_fields_has_no_options_record() -> None:
    keymap = cmd_map("n", "<leader>e", "<cmd>Ex<CR>")
    lines = build(KeymapsBuilder(), make_selections(keymaps=(keymap,)))
    assert lines == [*MAP_WRAPPER, 'map("n", "<leader>e", "<cmd>Ex<CR>")']


def test_unset_silent_is_filled_in_by_the_wrapper() -> None:
    keymap = cmd_map("n", "x", "y")
    lines = build(KeymapsBuilder(), make_selections(keymaps=(keymap,)))
    assert 'vim.tbl_extend("keep", opts or {}, { silent = true })' in lines[1]
    assert lines[-1] == 'map("n", "x", "y")'


@pytest.mark.parametrize(
    ("kwargs", "record"),
    [
        ({"desc": "Save"}, '{ desc = "Save" }'),
        ({"silent": False}, "{ silent = false }"),
        ({"noremap": True}, "{ remap = false }"),
        ({"noremap": False}, "{ remap = true }"),
        (
            {"noremap": False, "silent": True, "desc": "d"},
            '{ desc = "d", silent = true, remap = true }',
        ),
    ],
)
def test_keymap_options_record_holds_only_explicit_fields(
    kwargs: dict[str, object], record: str
) -> None:
    keymap = cmd_map("n", "<C-s>", ":w<CR>", **kwargs)
    lines = build(KeymapsBuilder(), make_selections(keymaps=(keymap,)))
    assert lines[len(MAP_WRAPPER)] == f'map("n", "<C-s>", ":w<CR>", {record})'


def test_keymap_single_mode_vs_mode_list() -> None:
    keymaps = (cmd_map("n", "a", "b"), cmd_map(("n",), "c", "d"))
    lines = build(KeymapsBuilder(), make_selections(keymaps=keymaps))
    assert lines[len(MAP_WRAPPER)] == 'map("n", "a", "b")'
    assert lines[len(MAP_WRAPPER) + 1] == 'map({ "n" }, "c", "d")'


def test_keymap_inline_body_and_condition_not_rendered() -> None:
    keymap = fn_map("n", "<leader>x", "print(1)\nprint(2)", condition="has('nvim')")
    lines = build(KeymapsBuilder(), make_selections(keymaps=(keymap,)))
    assert lines[len(MAP_WRAPPER) :] == [
        'map("n", "<leader>x", function()',
        "  print(1)",
        "  print(2)",
        "end)",
    ]
    assert not any("has(" in line for line in lines)


def test_autocmd_groups_created_once_in_first_seen_order() -> None:
    autocmds = (
        AutocmdSpec(event="BufEnter", body="a()", group="G1"),
        AutocmdSpec(event="BufLeave", body="b()", group="G2"),
        AutocmdSpec(event="BufWritePre", body="c()", group="G1", pattern="*.lua"),
    )
    lines = build(AutocmdsBuilder(), make_selections(autocmds=autocmds))
    assert lines == [
        'vim.api.nvim_create_augroup("G1", { clear = true })',
        'vim.api.nvim_create_autocmd("BufEnter", {',
        '  group = "G1",',
        "  callback = function()",
        "    a()",
        "  end,",
        "})",
        'vim.api.nvim_create_autocmd("BufWritePre", {',
        '  group = "G1",',
        '  pattern = "*.lua",',
        "  callback = function()",
        "    c()",
        "  end,",
        "})",
        'vim.api.nvim_create_augroup("G2", { clear = true })',
        'vim.api.nvim_create_autocmd("BufLeave", {',
        '  group = "G2",',
        "  callback = function()",
        "    b()",
        "  end,",
        "})",
    ]


def test_ungrouped_autocmd_joins_implicit_group() -> None:
    lines = build(AutocmdsBuilder(), make_selections(autocmds=(AutocmdSpec("VimEnter", "x()"),)))
    assert lines[0] == 'vim.api.nvim_create_augroup("UserAutocmds", { clear = true })'
    assert '  group = "UserAutocmds",' in lines


def test_builders_are_stateless_across_calls() -> None:
    selections = make_selections(
        autocmds=(AutocmdSpec("BufEnter", "a()", group="G"),),
        keymaps=(cmd_map("n", "a", "b"),),
    )
    for builder in (KeymapsBuilder(), AutocmdsBuilder()):
        assert build(builder, selections) == build(builder, selections)

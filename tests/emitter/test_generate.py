# topmark:header:start
#
#   project      : NvimGen
#   file         : test_generate.py
#   file_relpath : tests/emitter/test_generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests of `generate()`: canonical output, layouts and failures."""

from __future__ import annotations

import dataclasses
import math

import pytest

from nvimgen.catalog.presets import MINIMAL
from nvimgen.core.errors import EncodingError, LayoutError
from nvimgen.diagnostic import DiagnosticLevel
from nvimgen.emitter.generate import GenerationResult, generate, render
from nvimgen.model import AutocmdSpec, Layout
from tests.conftest import cmd_map, fn_map, make_selections, mark_integration

MINIMAL_INIT_LUA = r'''vim.g.mapleader = " "
vim.g.maplocalleader = "\\"
-- Generated by NvimGen.
-- Edit your selections and regenerate instead of changing this file by hand.

vim.opt.laststatus = 3
vim.opt.number = true
vim.opt.relativenumber = false
vim.opt.statusline = "%#StatusLine# %f %m %= %y %p%% %l:%c "
vim.opt.termguicolors = true
vim.opt.expandtab = true
vim.opt.shiftwidth = 2
vim.opt.tabstop = 2
vim.opt.ignorecase = true
vim.opt.smartcase = true
vim.opt.splitbelow = true
vim.opt.splitright = true
vim.opt.clipboard = "unnamedplus"

local function map(mode, lhs, rhs, opts)
  vim.keymap.set(mode, lhs, rhs, vim.tbl_extend("keep", opts or {}, { silent = true }))
end
map({ "n", "t" }, "<C-\\>", function()
  if vim.bo.buftype == "terminal" then
    vim.cmd("close")
  else
    vim.cmd("botright 12split | terminal")
  end
end, { desc = "Toggle terminal", silent = true })
map("n", "<leader>e", "<cmd>Ex<CR>", { desc = "Open file explorer" })

vim.api.nvim_create_augroup("AppBasics", { clear = true })
vim.api.nvim_create_autocmd("TextYankPost", {
  group = "AppBasics",
  desc = "Highlight yanked text",
  callback = function()
    vim.highlight.on_yank()
  end,
})
'''


@mark_integration
def test_minimal_preset_matches_canonical_fixture() -> None:
    result = generate(MINIMAL.selections)
    assert result.ok
    (init_lua,) = result.files
    assert init_lua.path == "init.lua"
    assert init_lua.content == MINIMAL_INIT_LUA
    assert init_lua.content.endswith("})\n")
    assert not init_lua.content.endswith("\n\n")


@mark_integration
def test_minimal_preset_split_layout() -> None:
    files = generate(MINIMAL.selections, Layout.SPLIT).unwrap()
    root, options, keymaps, autocmds = files
    assert root.path == "init.lua"
    assert root.content == (
        'vim.g.mapleader = " "\n'
        'vim.g.maplocalleader = "\\\\"\n'
        "-- Generated by NvimGen.\n"
        "-- Edit your selections and regenerate instead of changing this file by hand.\n"
        "\n"
        'require("config.options")\n'
        'require("config.keymaps")\n'
        'require("config.autocmds")\n'
    )
    body = "\n\n".join(f.content.rstrip("\n") for f in (options, keymaps, autocmds)) + "\n"
    assert MINIMAL_INIT_LUA.endswith(body)
    assert options.content.startswith("vim.opt.laststatus = 3\n")
    assert keymaps.content.startswith("local function map(mode, lhs, rhs, opts)\n")


def test_layout_accepts_string_tokens() -> None:
    assert generate(MINIMAL.selections, "split").unwrap() == generate(
        MINIMAL.selections, Layout.SPLIT
    ).unwrap()
    assert len(generate(MINIMAL.selections, "modules").unwrap()) == 4


def test_unknown_layout_is_reported_without_fallback() -> None:
    result = generate(MINIMAL.selections, "diagonal")
    assert not result.ok
    assert isinstance(result.error, LayoutError)
    assert result.files == ()
    with pytest.raises(LayoutError):
        result.unwrap()


def test_empty_selections_emit_header_only() -> None:
    (single,) = generate(make_selections()).unwrap()
    assert single.content == (
        'vim.g.mapleader = " "\n'
        'vim.g.maplocalleader = "\\\\"\n'
        "-- Generated by NvimGen.\n"
        "-- Edit your selections and regenerate instead of changing this file by hand.\n"
    )
    split = generate(make_selections(), Layout.SPLIT).unwrap()
    assert len(split) == 4
    assert [f.content for f in split[1:]] == ["\n", "\n", "\n"]


@pytest.mark.parametrize(
    "options",
    [
        {"number": "yes"},
        {"tabstop": math.nan},
        {"scrolloff": math.inf},
        {"completeopt": ["menu", 3]},
        {"clipboard": "primary"},
        {"not_an_option": True},
    ],
)
def test_encoding_failure_aborts_whole_generation(options: dict[str, object]) -> None:
    result: GenerationResult = generate(make_selections(options=options))
    assert isinstance(result.error, EncodingError)
    assert result.files == ()
    assert result.error.option_id == next(iter(options))
    assert result.diagnostics.stats().n_error == 1


def test_render_raises_instead_of_reporting() -> None:
    with pytest.raises(EncodingError):
        render(make_selections(options={"number": 1}))


def test_identical_input_gives_identical_output() -> None:
    first = generate(MINIMAL.selections, Layout.SPLIT).unwrap()
    second = generate(MINIMAL.selections, Layout.SPLIT).unwrap()
    assert first == second


def test_option_mapping_order_is_irrelevant() -> None:
    forward = {"number": True, "tabstop": 4, "clipboard": "unnamed", "hlsearch": False}
    backward = dict(reversed(list(forward.items())))
    a = generate(make_selections(options=forward)).unwrap()
    b = generate(make_selections(options=backward)).unwrap()
    assert a == b


def test_mode_set_order_is_irrelevant() -> None:
    a = generate(make_selections(keymaps=(cmd_map(frozenset({"v", "n"}), "x", "y"),))).unwrap()
    b = generate(make_selections(keymaps=(cmd_map({"n", "v"}, "x", "y"),))).unwrap()
    assert a == b
    assert 'map({ "n", "v" }, "x", "y")' in a[0].content


def test_interleaved_groups_are_regrouped() -> None:
    autocmds = (
        AutocmdSpec("BufEnter", "a()", group="One"),
        AutocmdSpec("BufLeave", "b()", group="Two"),
        AutocmdSpec("BufRead", "c()", group="One"),
    )
    (single,) = generate(make_selections(autocmds=autocmds)).unwrap()
    content = single.content
    assert content.count('nvim_create_augroup("One"') == 1
    assert content.count('nvim_create_augroup("Two"') == 1
    assert content.index("a()") < content.index("c()") < content.index('augroup("Two"')


def test_condition_is_reported_as_warning() -> None:
    selections = make_selections(keymaps=(fn_map("n", "x", "y()", condition="has('gui')"),))
    result = generate(selections)
    assert result.ok
    (diagnostic,) = result.diagnostics
    assert diagnostic.level is DiagnosticLevel.WARNING
    assert "has('gui')" in diagnostic.message
    assert "has('gui')" not in result.files[0].content


def test_legacy_mode_emits_vimscript() -> None:
    selections = make_selections(
        options={"number": True, "completeopt": ("menu", "menuone")},
        keymaps=(cmd_map("n", "<leader>w", ":w<CR>", desc="Save", silent=True),),
        autocmds=(
            AutocmdSpec("TextYankPost", "vim.highlight.on_yank()", group="Yank"),
        ),
        legacy_mode=True,
    )
    (init_vim,) = generate(selections).unwrap()
    assert init_vim.path == "init.vim"
    assert init_vim.content == (
        'let g:mapleader = " "\n'
        'let g:maplocalleader = "\\\\"\n'
        '" Generated by NvimGen.\n'
        '" Edit your selections and regenerate instead of changing this file by hand.\n'
        "\n"
        "let &number = v:true\n"
        'let &completeopt = join(["menu", "menuone"], ",")\n'
        "\n"
        '" Save\n'
        "nnoremap <silent> <leader>w :w<CR>\n"
        "\n"
        "augroup Yank\n"
        "  autocmd!\n"
        "augroup END\n"
        "autocmd Yank TextYankPost * lua vim.highlight.on_yank()\n"
    )


MINIMAL_INIT_VIM = r'''let g:mapleader = " "
let g:maplocalleader = "\\"
" Generated by NvimGen.
" Edit your selections and regenerate instead of changing this file by hand.

let &laststatus = 3
let &number = v:true
let &relativenumber = v:false
let &statusline = "%#StatusLine# %f %m %= %y %p%% %l:%c "
let &termguicolors = v:true
let &expandtab = v:true
let &shiftwidth = 2
let &tabstop = 2
let &ignorecase = v:true
let &smartcase = v:true
let &splitbelow = v:true
let &splitright = v:true
let &clipboard = "unnamedplus"

" Toggle terminal
nnoremap <silent> <C-\> <Cmd>lua if vim.bo.buftype == "terminal" then vim.cmd("close") else vim.cmd("botright 12split <Bar> terminal") end<CR>
tnoremap <silent> <C-\> <Cmd>lua if vim.bo.buftype == "terminal" then vim.cmd("close") else vim.cmd("botright 12split <Bar> terminal") end<CR>
" Open file explorer
nnoremap <silent> <leader>e <cmd>Ex<CR>

augroup AppBasics
  autocmd!
augroup END
" Highlight yanked text
autocmd AppBasics TextYankPost * lua vim.highlight.on_yank()
'''


@mark_integration
def test_minimal_preset_in_legacy_mode() -> None:
    selections = dataclasses.replace(MINIMAL.selections, legacy_mode=True)
    (init_vim,) = generate(selections).unwrap()
    assert init_vim.path == "init.vim"
    assert init_vim.content == MINIMAL_INIT_VIM


def test_legacy_statusline_keeps_directives_and_doubles_lone_percent() -> None:
    selections = make_selections(
        options={"statusline": "%f %p%% 100%"},
        legacy_mode=True,
    )
    (init_vim,) = generate(selections).unwrap()
    assert 'let &statusline = "%f %p%% 100%%"\n' in init_vim.content

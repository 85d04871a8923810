# topmark:header:start
#
#   project      : NvimGen
#   file         : presets.py
#   file_relpath : src/nvimgen/catalog/presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ready-made selections offered as starting points.

Exports:
    PRESETS: Mapping of preset name to [`Preset`][nvimgen.catalog.presets.Preset].

Notes:
    - The ``minimal`` preset doubles as the canonical acceptance fixture of the
      emitter: its rendering is pinned byte-for-byte in the test suite.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from nvimgen.model import AutocmdSpec, InlineBody, KeymapSpec, LiteralCommand, Selections

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class Preset:
    """A named, described set of selections."""

    name: str
    description: str
    selections: Selections


TERMINAL_TOGGLE_BODY: str = """\
if vim.bo.buftype == "terminal" then
  vim.cmd("close")
else
  vim.cmd("botright 12split | terminal")
end"""

MINIMAL = Preset(
    name="minimal",
    description="Sensible editing defaults, a terminal toggle and yank highlighting.",
    selections=Selections(
        options={
            "number": True,
            "relativenumber": False,
            "expandtab": True,
            "ignorecase": True,
            "smartcase": True,
            "splitright": True,
            "splitbelow": True,
            "termguicolors": True,
            "shiftwidth": 2,
            "tabstop": 2,
            "laststatus": 3,
            "clipboard": "unnamedplus",
            "statusline": "%#StatusLine# %f %m %= %y %p%% %l:%c ",
        },
        keymaps=(
            KeymapSpec(
                mode=("n", "t"),
                lhs="<C-\\>",
                rhs=InlineBody(TERMINAL_TOGGLE_BODY),
                desc="Toggle terminal",
                silent=True,
            ),
            KeymapSpec(
                mode="n",
                lhs="<leader>e",
                rhs=LiteralCommand("<cmd>Ex<CR>"),
                desc="Open file explorer",
            ),
        ),
        autocmds=(
            AutocmdSpec(
                event="TextYankPost",
                group="AppBasics",
                desc="Highlight yanked text",
                body="vim.highlight.on_yank()",
            ),
        ),
    ),
)

EMPTY = Preset(
    name="empty",
    description="No options, mappings or autocommands; only the header is emitted.",
    selections=Selections(),
)

PRESETS: Mapping[str, Preset] = MappingProxyType({p.name: p for p in (MINIMAL, EMPTY)})


def get_preset(name: str) -> Preset | None:
    """Return the preset called ``name`` or None if unknown."""
    return PRESETS.get(name)

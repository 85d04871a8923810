# topmark:header:start
#
#   project      : NvimGen
#   file         : editing.py
#   file_relpath : src/nvimgen/catalog/builtins/editing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editing and indentation options.

Exports:
    OPTIONS: Tab expansion, indent widths, smart indenting and undo persistence.
"""

from __future__ import annotations

from nvimgen.model import OptionCategory, OptionSpec, OptionType

OPTIONS: list[OptionSpec] = [
    OptionSpec(
        id="expandtab",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.EDITING,
        label="Insert spaces for tabs",
    ),
    OptionSpec(
        id="shiftwidth",
        type=OptionType.NUMBER,
        default=8,
        category=OptionCategory.EDITING,
        label="Indent width",
        min=0,
        max=16,
    ),
    OptionSpec(
        id="tabstop",
        type=OptionType.NUMBER,
        default=8,
        category=OptionCategory.EDITING,
        label="Tab width",
        min=1,
        max=16,
    ),
    OptionSpec(
        id="softtabstop",
        type=OptionType.NUMBER,
        default=0,
        category=OptionCategory.EDITING,
        label="Soft tab width",
        min=-1,
        max=16,
    ),
    OptionSpec(
        id="smartindent",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.EDITING,
        label="Smart autoindenting",
    ),
    OptionSpec(
        id="undofile",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.EDITING,
        label="Persistent undo",
    ),
]

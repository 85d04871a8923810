# topmark:header:start
#
#   project      : NvimGen
#   file         : ui.py
#   file_relpath : src/nvimgen/catalog/builtins/ui.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User interface options.

Exports:
    OPTIONS: Line numbers, colors, sign column, scrolling and status line options.

Notes:
    - ``statusline`` is a format string: ``%`` introduces an item there.
"""

from __future__ import annotations

from nvimgen.model import OptionCategory, OptionSpec, OptionType

OPTIONS: list[OptionSpec] = [
    OptionSpec(
        id="number",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.UI,
        label="Line numbers",
        description="Show absolute line numbers in the gutter.",
    ),
    OptionSpec(
        id="relativenumber",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.UI,
        label="Relative line numbers",
        description="Show line numbers relative to the cursor line.",
    ),
    OptionSpec(
        id="cursorline",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.UI,
        label="Highlight cursor line",
    ),
    OptionSpec(
        id="termguicolors",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.UI,
        label="True colors",
        description="Enable 24-bit RGB colors in the terminal UI.",
    ),
    OptionSpec(
        id="signcolumn",
        type=OptionType.ENUM,
        default="auto",
        category=OptionCategory.UI,
        enum_values=("auto", "yes", "no", "number"),
        label="Sign column",
    ),
    OptionSpec(
        id="wrap",
        type=OptionType.BOOLEAN,
        default=True,
        category=OptionCategory.UI,
        label="Wrap long lines",
    ),
    OptionSpec(
        id="scrolloff",
        type=OptionType.NUMBER,
        default=0,
        category=OptionCategory.UI,
        label="Scroll offset",
        description="Minimal number of lines kept above and below the cursor.",
        min=0,
        max=999,
    ),
    OptionSpec(
        id="showmode",
        type=OptionType.BOOLEAN,
        default=True,
        category=OptionCategory.UI,
        label="Show mode in command line",
    ),
    OptionSpec(
        id="laststatus",
        type=OptionType.NUMBER,
        default=2,
        category=OptionCategory.UI,
        label="Status line visibility",
        description="0: never, 1: with splits, 2: always, 3: single global status line.",
        min=0,
        max=3,
    ),
    OptionSpec(
        id="statusline",
        type=OptionType.STRING,
        default="",
        category=OptionCategory.UI,
        label="Status line template",
        format_string=True,
    ),
    OptionSpec(
        id="colorcolumn",
        type=OptionType.STRING,
        default="",
        category=OptionCategory.UI,
        label="Highlighted columns",
        description="Comma-separated list of screen columns to highlight.",
    ),
]

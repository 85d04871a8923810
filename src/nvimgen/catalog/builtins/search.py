# topmark:header:start
#
#   project      : NvimGen
#   file         : search.py
#   file_relpath : src/nvimgen/catalog/builtins/search.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Search options.

Exports:
    OPTIONS: Case handling, highlighting and live substitution preview.
"""

from __future__ import annotations

from nvimgen.model import OptionCategory, OptionSpec, OptionType

OPTIONS: list[OptionSpec] = [
    OptionSpec(
        id="ignorecase",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.SEARCH,
        label="Ignore case",
    ),
    OptionSpec(
        id="smartcase",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.SEARCH,
        label="Smart case",
        description="Override ignorecase when the pattern contains upper case letters.",
    ),
    OptionSpec(
        id="hlsearch",
        type=OptionType.BOOLEAN,
        default=True,
        category=OptionCategory.SEARCH,
        label="Highlight matches",
    ),
    OptionSpec(
        id="incsearch",
        type=OptionType.BOOLEAN,
        default=True,
        category=OptionCategory.SEARCH,
        label="Incremental search",
    ),
    OptionSpec(
        id="inccommand",
        type=OptionType.ENUM,
        default="nosplit",
        category=OptionCategory.SEARCH,
        enum_values=("", "nosplit", "split"),
        label="Live substitution preview",
    ),
]

# topmark:header:start
#
#   project      : NvimGen
#   file         : windows.py
#   file_relpath : src/nvimgen/catalog/builtins/windows.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Window and split options.

Exports:
    OPTIONS: Where new splits open and how they keep their view.
"""

from __future__ import annotations

from nvimgen.model import OptionCategory, OptionSpec, OptionType

OPTIONS: list[OptionSpec] = [
    OptionSpec(
        id="splitright",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.WINDOWS,
        label="Vertical splits open to the right",
    ),
    OptionSpec(
        id="splitbelow",
        type=OptionType.BOOLEAN,
        default=False,
        category=OptionCategory.WINDOWS,
        label="Horizontal splits open below",
    ),
    OptionSpec(
        id="splitkeep",
        type=OptionType.ENUM,
        default="cursor",
        category=OptionCategory.WINDOWS,
        enum_values=("cursor", "screen", "topline"),
        label="Scroll behavior when splitting",
    ),
    OptionSpec(
        id="equalalways",
        type=OptionType.BOOLEAN,
        default=True,
        category=OptionCategory.WINDOWS,
        label="Equalize window sizes",
    ),
]

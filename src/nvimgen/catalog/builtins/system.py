# topmark:header:start
#
#   project      : NvimGen
#   file         : system.py
#   file_relpath : src/nvimgen/catalog/builtins/system.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""System integration options.

Exports:
    OPTIONS: Clipboard, mouse, timing, swap files and completion/wildmenu lists.
"""

from __future__ import annotations

from nvimgen.model import OptionCategory, OptionSpec, OptionType

OPTIONS: list[OptionSpec] = [
    OptionSpec(
        id="clipboard",
        type=OptionType.ENUM,
        default="",
        category=OptionCategory.SYSTEM,
        enum_values=("", "unnamed", "unnamedplus"),
        label="Clipboard register",
        description="Use the system clipboard for yank and put.",
    ),
    OptionSpec(
        id="mouse",
        type=OptionType.ENUM,
        default="nvi",
        category=OptionCategory.SYSTEM,
        enum_values=("", "a", "n", "v", "i", "nv", "nvi"),
        label="Mouse support",
    ),
    OptionSpec(
        id="updatetime",
        type=OptionType.NUMBER,
        default=4000,
        category=OptionCategory.SYSTEM,
        label="Idle time before CursorHold (ms)",
        min=0,
        max=60000,
    ),
    OptionSpec(
        id="timeoutlen",
        type=OptionType.NUMBER,
        default=1000,
        category=OptionCategory.SYSTEM,
        label="Mapped sequence timeout (ms)",
        min=0,
        max=10000,
    ),
    OptionSpec(
        id="swapfile",
        type=OptionType.BOOLEAN,
        default=True,
        category=OptionCategory.SYSTEM,
        label="Use swap files",
    ),
    OptionSpec(
        id="completeopt",
        type=OptionType.STRING_ARRAY,
        default=("menu", "preview"),
        category=OptionCategory.SYSTEM,
        label="Completion menu behavior",
    ),
    OptionSpec(
        id="wildignore",
        type=OptionType.STRING_ARRAY,
        default=(),
        category=OptionCategory.SYSTEM,
        label="Ignored file patterns",
    ),
]

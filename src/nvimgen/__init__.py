# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NvimGen package.

NvimGen turns a set of editor selections (options, key mappings and
autocommands) into ready-to-use Neovim configuration files. The emitter core is
pure and deterministic; a small Click CLI wraps it for local use.
"""

from __future__ import annotations

from nvimgen.emitter.generate import GenerationResult, generate
from nvimgen.model import (
    AutocmdSpec,
    InlineBody,
    KeymapSpec,
    Layout,
    LiteralCommand,
    OptionCategory,
    OptionSpec,
    OptionType,
    Selections,
    VirtualFile,
)

__all__ = [
    "AutocmdSpec",
    "GenerationResult",
    "InlineBody",
    "KeymapSpec",
    "Layout",
    "LiteralCommand",
    "OptionCategory",
    "OptionSpec",
    "OptionType",
    "Selections",
    "VirtualFile",
    "generate",
]

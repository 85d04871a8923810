# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/emitter/sections/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Section builders, in the fixed order their blocks are composed."""

from __future__ import annotations

from nvimgen.emitter.sections.autocmds import AutocmdsBuilder
from nvimgen.emitter.sections.base import EmitEnv, SectionBlock, SectionBuilder
from nvimgen.emitter.sections.header import HeaderBuilder
from nvimgen.emitter.sections.keymaps import KeymapsBuilder
from nvimgen.emitter.sections.options import OptionsBuilder

__all__ = [
    "AutocmdsBuilder",
    "EmitEnv",
    "HeaderBuilder",
    "KeymapsBuilder",
    "OptionsBuilder",
    "SectionBlock",
    "SectionBuilder",
]

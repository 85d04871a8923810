# topmark:header:start
#
#   project      : NvimGen
#   file         : constants.py
#   file_relpath : src/nvimgen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NvimGen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

NVIMGEN_VERSION: str = get_version("nvimgen")

# Environment variable consulted by `setup_logging()` when no level is given.
LOG_LEVEL_ENV_VAR: Final[str] = "NVIMGEN_LOG_LEVEL"

DEFAULT_LEADER: Final[str] = " "
DEFAULT_LOCAL_LEADER: Final[str] = "\\"

# Group that receives autocommands declared without an explicit group.
DEFAULT_AUTOCMD_GROUP: Final[str] = "UserAutocmds"

BANNER_LINES: Final[tuple[str, ...]] = (
    "Generated by NvimGen.",
    "Edit your selections and regenerate instead of changing this file by hand.",
)

# Fixed module names of the split layout, in emission order.
MODULE_OPTIONS: Final[str] = "options"
MODULE_KEYMAPS: Final[str] = "keymaps"
MODULE_AUTOCMDS: Final[str] = "autocmds"
SPLIT_MODULES: Final[tuple[str, ...]] = (MODULE_OPTIONS, MODULE_KEYMAPS, MODULE_AUTOCMDS)

# Namespace the split-layout modules live under (``lua/config/*.lua``).
MODULE_NAMESPACE: Final[str] = "config"

# Integers beyond this magnitude cannot be represented exactly by a double.
MAX_SAFE_INTEGER: Final[int] = 2**53

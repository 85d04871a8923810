# topmark:header:start
#
#   project      : NvimGen
#   file         : keys.py
#   file_relpath : src/nvimgen/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML table and key names of a selections document.

Keys defined here are the external format of ``selections.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table names and keys used by selections documents."""

    # Root
    KEY_LEGACY_MODE: Final[str] = "legacy_mode"
    KEY_LEADER: Final[str] = "leader"
    KEY_LOCAL_LEADER: Final[str] = "local_leader"
    # Option ids emitted with their catalog default value.
    KEY_DEFAULT_OPTIONS: Final[str] = "default_options"

    # [options]
    SECTION_OPTIONS: Final[str] = "options"

    # [[keymaps]]
    SECTION_KEYMAPS: Final[str] = "keymaps"

    KEY_MODE: Final[str] = "mode"
    KEY_LHS: Final[str] = "lhs"
    KEY_COMMAND: Final[str] = "command"
    KEY_INLINE: Final[str] = "inline"
    KEY_DESC: Final[str] = "desc"
    KEY_SILENT: Final[str] = "silent"
    KEY_NOREMAP: Final[str] = "noremap"
    KEY_CONDITION: Final[str] = "condition"

    # [[autocmds]]
    SECTION_AUTOCMDS: Final[str] = "autocmds"

    KEY_EVENT: Final[str] = "event"
    KEY_PATTERN: Final[str] = "pattern"
    KEY_GROUP: Final[str] = "group"
    KEY_BODY: Final[str] = "body"

# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/dialects/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-import all dialect modules in the current package."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import TYPE_CHECKING

from nvimgen.config.logging import get_logger
from nvimgen.dialects.registry import get_dialect_for_mode, get_dialect_registry

if TYPE_CHECKING:
    from nvimgen.dialects.base import Dialect

logger = get_logger(__name__)

_SKIP_MODULES: frozenset[str] = frozenset({"base", "registry"})


def register_all_dialects() -> None:
    """Import all dialect modules in the current package."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg and module_info.name not in _SKIP_MODULES:
            # Importing the module runs its @register_dialect decorator
            importlib.import_module(f"{__name__}.{module_info.name}")


def resolve_dialect(legacy_mode: bool) -> Dialect:
    """Return the dialect selected by ``legacy_mode``.

    Args:
        legacy_mode (bool): The ``Selections.legacy_mode`` flag.

    Returns:
        Dialect: The registered dialect instance.
    """
    register_all_dialects()
    dialect: Dialect = get_dialect_for_mode(legacy_mode)
    logger.debug(
        "Resolved dialect '%s' for legacy_mode=%s (registered: %s)",
        dialect.name,
        legacy_mode,
        ", ".join(sorted(get_dialect_registry())),
    )
    return dialect

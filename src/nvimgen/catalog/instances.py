# topmark:header:start
#
#   project      : NvimGen
#   file         : instances.py
#   file_relpath : src/nvimgen/catalog/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in catalog instance.

Builds the runtime [`Catalog`][nvimgen.catalog.base.Catalog] from topical
modules under ``nvimgen.catalog.builtins``. Each module exports an ``OPTIONS``
list. The catalog is constructed lazily on first access and cached thereafter.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import import_module
from typing import TYPE_CHECKING, Any, Final

from nvimgen.catalog.base import Catalog
from nvimgen.config.logging import NvimgenLogger, get_logger
from nvimgen.model import OptionSpec

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import ModuleType

logger: NvimgenLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "nvimgen.catalog.builtins.ui",
    "nvimgen.catalog.builtins.editing",
    "nvimgen.catalog.builtins.search",
    "nvimgen.catalog.builtins.windows",
    "nvimgen.catalog.builtins.system",
)


def _iter_builtin_options() -> Iterable[OptionSpec]:
    """Yield built-in OptionSpec objects from topical modules (lazy import)."""
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        options: Any = getattr(mod, "OPTIONS", None)
        if not isinstance(options, list):
            logger.warning("Module %s has no OPTIONS list; skipping", modname)
            continue
        for obj in options:
            if isinstance(obj, OptionSpec):
                yield obj
            else:
                logger.warning("Non-OptionSpec entry in %s.OPTIONS: %r", modname, obj)


@lru_cache(maxsize=1)
def get_builtin_catalog() -> Catalog:
    """Return the cached catalog of built-in options.

    Raises:
        ValueError: If two built-in modules declare the same option id.
    """
    return Catalog(_iter_builtin_options())

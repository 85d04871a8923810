# topmark:header:start
#
#   project      : NvimGen
#   file         : registry.py
#   file_relpath : src/nvimgen/dialects/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of output dialects.

This module provides a decorator to register [`Dialect`][nvimgen.dialects.base.Dialect]
implementations by name and to mark the one used for the legacy mode.

Each dialect class is instantiated once at registration time; instances are
stateless and shared by every generation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nvimgen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from nvimgen.dialects.base import Dialect

logger = get_logger(__name__)


_registry: dict[str, Dialect] = {}
_by_mode: dict[bool, str] = {}


def register_dialect(
    name: str,
    *,
    legacy: bool,
) -> Callable[[type[Dialect]], type[Dialect]]:
    """Class decorator to register a Dialect under ``name``.

    Args:
        name (str): Registry name of the dialect.
        legacy (bool): True if the dialect serves ``Selections.legacy_mode``.

    Returns:
        Callable[[type[Dialect]], type[Dialect]]: A decorator that registers the class.

    Raises:
        ValueError: If ``name`` or the legacy slot is already taken.
    """

    def decorator(cls: type[Dialect]) -> type[Dialect]:
        """Instantiate ``cls`` and bind it to ``name``.

        Args:
            cls (type[Dialect]): The class to register.

        Raises:
            ValueError: If a dialect is already registered under ``name`` or for
                the same legacy mode.

        Returns:
            type[Dialect]: The decorated class, unchanged.
        """
        logger.debug("Registering dialect %s as '%s' (legacy=%s)", cls.__name__, name, legacy)
        if name in _registry:
            raise ValueError(f"Dialect '{name}' is already registered.")
        if legacy in _by_mode:
            raise ValueError(
                f"Dialect '{_by_mode[legacy]}' already serves legacy_mode={legacy}."
            )
        instance = cls()
        instance.name = name
        _registry[name] = instance
        _by_mode[legacy] = name
        return cls

    return decorator


def get_dialect_registry() -> dict[str, Dialect]:
    """Return the registry of dialect names to Dialect instances."""
    return _registry


def get_dialect_for_mode(legacy_mode: bool) -> Dialect:
    """Return the dialect serving the given legacy mode flag.

    Raises:
        KeyError: If no dialect is registered for that mode.
    """
    return _registry[_by_mode[legacy_mode]]

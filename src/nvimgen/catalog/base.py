# topmark:header:start
#
#   project      : NvimGen
#   file         : base.py
#   file_relpath : src/nvimgen/catalog/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catalog container for option definitions."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from nvimgen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.model import OptionSpec

logger: NvimgenLogger = get_logger(__name__)


class Catalog:
    """Read-only collection of [`OptionSpec`][nvimgen.model.OptionSpec] keyed by id.

    Args:
        options (Iterable[OptionSpec]): Catalog entries in declaration order.

    Raises:
        ValueError: If two entries share an id.
    """

    def __init__(self, options: Iterable[OptionSpec]) -> None:
        registry: dict[str, OptionSpec] = {}
        for spec in options:
            if spec.id in registry:
                raise ValueError(f"Duplicate option id in catalog: {spec.id}")
            registry[spec.id] = spec
        self._options: Mapping[str, OptionSpec] = MappingProxyType(registry)
        logger.debug("Catalog created with %d option(s)", len(registry))

    def __contains__(self, option_id: object) -> bool:
        return option_id in self._options

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def get(self, option_id: str) -> OptionSpec | None:
        """Return the spec for ``option_id`` or None if unknown."""
        return self._options.get(option_id)

    def in_emission_order(self) -> list[OptionSpec]:
        """Return all specs sorted by (category rank, id)."""
        return sorted(self._options.values(), key=lambda s: (s.category.rank, s.id))

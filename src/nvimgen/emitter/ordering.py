# topmark:header:start
#
#   project      : NvimGen
#   file         : ordering.py
#   file_relpath : src/nvimgen/emitter/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordering engine: a total, deterministic order over a Selections value.

Rules:
    * Options sort by catalog category rank, then by id (code point order).
      Unknown ids fail with `EncodingError`; a ``None`` value resolves to the
      catalog default.
    * Keymaps keep the caller's order.
    * Autocommands are bucketed by group in first-seen order and keep the
      caller's order inside a bucket. Ungrouped entries join the implicit
      default group.

Nothing here depends on dict or set iteration order of the input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nvimgen.config.logging import get_logger
from nvimgen.constants import DEFAULT_AUTOCMD_GROUP
from nvimgen.core.errors import EncodingError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nvimgen.catalog.base import Catalog
    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.model import AutocmdSpec, KeymapSpec, OptionSpec, Selections

logger: NvimgenLogger = get_logger(__name__)


@dataclass(frozen=True)
class OrderedOption:
    """A catalog option paired with its resolved value."""

    spec: OptionSpec
    value: object


@dataclass(frozen=True)
class GroupedAutocmd:
    """An autocommand paired with the group it is emitted under."""

    group: str
    autocmd: AutocmdSpec


@dataclass(frozen=True)
class OrderedSelections:
    """The three ordered sequences consumed by the section builders."""

    options: tuple[OrderedOption, ...]
    keymaps: tuple[KeymapSpec, ...]
    autocmds: tuple[GroupedAutocmd, ...]


def order_options(options: Mapping[str, object], catalog: Catalog) -> tuple[OrderedOption, ...]:
    """Resolve and sort selected options.

    Args:
        options (Mapping[str, object]): Option id -> value (``None`` = default).
        catalog (Catalog): Catalog supplying types, defaults and categories.

    Returns:
        tuple[OrderedOption, ...]: Options in emission order.

    Raises:
        EncodingError: If an id is not part of the catalog.
    """
    resolved: list[OrderedOption] = []
    for option_id, value in options.items():
        spec: OptionSpec | None = catalog.get(option_id)
        if spec is None:
            raise EncodingError("unknown option (not in catalog)", option_id=option_id)
        resolved.append(OrderedOption(spec=spec, value=spec.default if value is None else value))
    resolved.sort(key=lambda o: (o.spec.category.rank, o.spec.id))
    return tuple(resolved)


def order_keymaps(keymaps: Iterable[KeymapSpec]) -> tuple[KeymapSpec, ...]:
    """Return keymaps in caller order (insertion order is the deterministic order)."""
    return tuple(keymaps)


def order_autocmds(autocmds: Iterable[AutocmdSpec]) -> tuple[GroupedAutocmd, ...]:
    """Bucket autocommands by group in first-seen order.

    Args:
        autocmds (Iterable[AutocmdSpec]): Hooks in caller order.

    Returns:
        tuple[GroupedAutocmd, ...]: Hooks with all members of a group adjacent.
    """
    buckets: dict[str, list[GroupedAutocmd]] = {}
    for autocmd in autocmds:
        group: str = autocmd.group if autocmd.group is not None else DEFAULT_AUTOCMD_GROUP
        buckets.setdefault(group, []).append(GroupedAutocmd(group=group, autocmd=autocmd))
    return tuple(entry for bucket in buckets.values() for entry in bucket)


def order_selections(selections: Selections, catalog: Catalog) -> OrderedSelections:
    """Produce the three ordered sequences for ``selections``."""
    ordered = OrderedSelections(
        options=order_options(selections.options, catalog),
        keymaps=order_keymaps(selections.keymaps),
        autocmds=order_autocmds(selections.autocmds),
    )
    logger.debug(
        "Ordered %d option(s), %d keymap(s), %d autocmd(s)",
        len(ordered.options),
        len(ordered.keymaps),
        len(ordered.autocmds),
    )
    return ordered

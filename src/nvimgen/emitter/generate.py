# topmark:header:start
#
#   project      : NvimGen
#   file         : generate.py
#   file_relpath : src/nvimgen/emitter/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry point of the emitter.

``generate()`` is the only function callers need:

    result = generate(selections, layout="split")
    if result.ok:
        for f in result.files:
            ...

It never raises [`GeneratorError`][nvimgen.core.errors.GeneratorError]; an
encoding or layout failure is reported on the result and no files are
returned. Call ``GenerationResult.unwrap()`` to get the files or re-raise.
``render()`` is the raising variant used internally and by tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nvimgen.catalog.instances import get_builtin_catalog
from nvimgen.config.logging import get_logger
from nvimgen.core.errors import GeneratorError, LayoutError
from nvimgen.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog
from nvimgen.dialects import resolve_dialect
from nvimgen.emitter.encoder import ValueEncoder
from nvimgen.emitter.layout import compose
from nvimgen.emitter.ordering import order_selections
from nvimgen.emitter.sections import (
    AutocmdsBuilder,
    EmitEnv,
    HeaderBuilder,
    KeymapsBuilder,
    OptionsBuilder,
)
from nvimgen.model import Layout

if TYPE_CHECKING:
    from nvimgen.catalog.base import Catalog
    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.dialects.base import Dialect
    from nvimgen.emitter.ordering import OrderedSelections
    from nvimgen.emitter.sections import SectionBlock, SectionBuilder
    from nvimgen.model import Selections, VirtualFile

logger: NvimgenLogger = get_logger(__name__)


def section_builders() -> tuple[SectionBuilder, ...]:
    """Return fresh builder instances in block order."""
    return (HeaderBuilder(), OptionsBuilder(), KeymapsBuilder(), AutocmdsBuilder())


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation.

    Attributes:
        files (tuple[VirtualFile, ...]): Generated files; empty when ``error`` is set.
        error (GeneratorError | None): The failure that aborted generation, if any.
        diagnostics (FrozenDiagnosticLog): Non-fatal findings.
    """

    files: tuple[VirtualFile, ...] = ()
    error: GeneratorError | None = None
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @property
    def ok(self) -> bool:
        """True when generation succeeded."""
        return self.error is None

    def unwrap(self) -> tuple[VirtualFile, ...]:
        """Return the files, or raise the recorded error.

        Raises:
            GeneratorError: The error that aborted generation.
        """
        if self.error is not None:
            raise self.error
        return self.files


def resolve_layout(layout: Layout | str) -> Layout:
    """Return ``layout`` as a `Layout` member.

    Raises:
        LayoutError: If ``layout`` names no known layout. No fallback is used.
    """
    if isinstance(layout, Layout):
        return layout
    if isinstance(layout, str):
        parsed: Layout | None = Layout.parse(layout)
        if parsed is not None:
            return parsed
    raise LayoutError(f"Unknown layout: {layout!r}")


def _collect_diagnostics(selections: Selections, log: DiagnosticLog) -> None:
    for keymap in selections.keymaps:
        if keymap.condition is not None:
            log.add_warning(
                f"keymap {keymap.lhs!r}: condition {keymap.condition!r} is not rendered"
            )


def render(
    selections: Selections,
    layout: Layout | str = Layout.SINGLE,
    *,
    catalog: Catalog | None = None,
) -> list[VirtualFile]:
    """Generate the files for ``selections``, raising on failure.

    Args:
        selections (Selections): The user's choices.
        layout (Layout | str): Requested layout (member or parseable token).
        catalog (Catalog | None): Option catalog; the built-in one by default.

    Returns:
        list[VirtualFile]: Files in emission order.

    Raises:
        EncodingError: If a value cannot be encoded or an option id is unknown.
        LayoutError: If ``layout`` is not recognized.
    """
    resolved_layout: Layout = resolve_layout(layout)
    dialect: Dialect = resolve_dialect(selections.legacy_mode)
    env = EmitEnv(selections=selections, dialect=dialect, encoder=ValueEncoder(dialect))
    ordered: OrderedSelections = order_selections(
        selections, catalog if catalog is not None else get_builtin_catalog()
    )
    blocks: dict[str, SectionBlock] = {}
    for builder in section_builders():
        block: SectionBlock = builder(ordered, env)
        blocks[block.name] = block
    return compose(blocks, resolved_layout, dialect, env.encoder)


def generate(
    selections: Selections,
    layout: Layout | str = Layout.SINGLE,
    *,
    catalog: Catalog | None = None,
) -> GenerationResult:
    """Generate configuration files; failures are reported, not raised.

    Args:
        selections (Selections): The user's choices.
        layout (Layout | str): Requested layout (member or parseable token).
        catalog (Catalog | None): Option catalog; the built-in one by default.

    Returns:
        GenerationResult: Files and diagnostics, or the error that aborted generation.
    """
    log = DiagnosticLog()
    _collect_diagnostics(selections, log)
    try:
        files: list[VirtualFile] = render(selections, layout, catalog=catalog)
    except GeneratorError as exc:
        logger.info("Generation failed: %s", exc)
        log.add_error(str(exc))
        return GenerationResult(error=exc, diagnostics=log.freeze())
    logger.info("Generated %d file(s)", len(files))
    return GenerationResult(files=tuple(files), diagnostics=log.freeze())

# topmark:header:start
#
#   project      : NvimGen
#   file         : model.py
#   file_relpath : src/nvimgen/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic types attached to a generation result.

Diagnostics report conditions that do not abort a generation, such as a keymap
whose ``condition`` field is carried but not rendered. Fatal conditions are
exceptions (see [`nvimgen.core.errors`][nvimgen.core.errors]).

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable diagnostic payload (level + message).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection used while a generation runs.
    * FrozenDiagnosticLog: immutable snapshot stored on the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from nvimgen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from nvimgen.config.logging import NvimgenLogger


logger: NvimgenLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return ``[level] message``, optionally colored."""
        tag: str = f"[{self.level.value}]"
        if color:
            tag = self.level.color(tag)
        return f"{tag} {self.message}"


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics gathered during one generation."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message))

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart of `DiagnosticLog`, stored on generation results."""

    items: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        stats: DiagnosticStats = self.stats()
        return {
            "info": stats.n_info,
            "warning": stats.n_warning,
            "error": stats.n_error,
        }


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: The diagnostics to count.

    Returns:
        Per-level counts.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)

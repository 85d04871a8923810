# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives.

Design:
    - Diagnostics are immutable `Diagnostic` instances.
    - A generation accumulates them in a mutable `DiagnosticLog`.
    - The returned result stores them as an immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from nvimgen.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "FrozenDiagnosticLog",
    "compute_diagnostic_stats",
]

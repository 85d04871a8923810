# topmark:header:start
#
#   project      : NvimGen
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the diagnostic model."""

from __future__ import annotations

from nvimgen.diagnostic import Diagnostic, DiagnosticLevel, DiagnosticLog


def test_log_counts_and_freezes() -> None:
    log = DiagnosticLog()
    log.add_info("i")
    log.add_warning("w")
    log.add_warning("w2")
    log.add_error("e")
    frozen = log.freeze()
    assert len(frozen) == 4
    assert frozen.to_dict() == {"info": 1, "warning": 2, "error": 1}
    assert frozen.stats().total == 4
    assert log.has_warning() and log.has_error()
    log.add_info("later")
    assert len(frozen) == 4


def test_render_plain_and_colored() -> None:
    diagnostic = Diagnostic(DiagnosticLevel.WARNING, "careful")
    assert diagnostic.render() == "[warning] careful"
    assert "careful" in diagnostic.render(color=True)

# topmark:header:start
#
#   project      : NvimGen
#   file         : utils.py
#   file_relpath : src/nvimgen/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-free output helpers: output formats and Markdown tables."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
      MARKDOWN: A Markdown document.
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
      headers: Column headers.
      rows: A sequence of row sequences (each row same length as ``headers``).
      align: Optional mapping of column index to ``"left"`` (default) or ``"right"``.

    Returns:
      The Markdown table as a single string (ending with a newline).

    Raises:
      ValueError: If a row does not have as many cells as ``headers``.
    """
    if not headers:
        return ""
    ncols = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _sep_for(i: int) -> str:
        w = max(1, widths[i])
        if (align or {}).get(i, "left").lower() == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        return "-" * w

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    lines: list[str] = [
        _line(headers),
        "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |",
        *(_line(r) for r in rows),
    ]
    return "\n".join(lines) + "\n"

# topmark:header:start
#
#   project      : NvimGen
#   file         : layout.py
#   file_relpath : src/nvimgen/emitter/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout composer: section blocks to virtual files.

Single layout:
    One root file holding the non-empty blocks in fixed order (header,
    options, keymaps, autocmds), separated by one blank line and terminated
    by exactly one newline.

Split layout:
    Four files in fixed order: the root file (header block, a blank line,
    then one import statement per module) followed by the options, keymaps
    and autocmds modules. Module names never depend on the selections; a
    module whose block is empty is still emitted as a single newline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nvimgen.config.logging import get_logger
from nvimgen.constants import MODULE_AUTOCMDS, MODULE_KEYMAPS, MODULE_OPTIONS, SPLIT_MODULES
from nvimgen.core.errors import LayoutError
from nvimgen.model import Layout, VirtualFile

if TYPE_CHECKING:
    from collections.abc import Mapping

    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.dialects.base import Dialect
    from nvimgen.emitter.encoder import ValueEncoder
    from nvimgen.emitter.sections.base import SectionBlock

logger: NvimgenLogger = get_logger(__name__)

BLOCK_SEPARATOR: str = "\n\n"

# Section block name -> split module name.
_MODULE_FOR_BLOCK: dict[str, str] = {
    "options": MODULE_OPTIONS,
    "keymaps": MODULE_KEYMAPS,
    "autocmds": MODULE_AUTOCMDS,
}


def _terminate(text: str) -> str:
    """Return ``text`` with exactly one trailing newline ("" stays empty)."""
    stripped: str = text.rstrip("\n")
    return f"{stripped}\n" if stripped else ""


def _terminate_module(text: str) -> str:
    """Return module ``text`` with exactly one trailing newline, even when empty."""
    return text.rstrip("\n") + "\n"


def compose_single(blocks: Mapping[str, SectionBlock], dialect: Dialect) -> list[VirtualFile]:
    """Concatenate all non-empty blocks into the dialect's root file."""
    parts: list[str] = [
        blocks[name].text for name in ("header", *_MODULE_FOR_BLOCK) if not blocks[name].is_empty
    ]
    content: str = _terminate(BLOCK_SEPARATOR.join(parts))
    return [VirtualFile(path=dialect.root_filename, content=content)]


def compose_split(
    blocks: Mapping[str, SectionBlock],
    dialect: Dialect,
    encoder: ValueEncoder,
) -> list[VirtualFile]:
    """Emit the root file plus one module file per fixed module name."""
    imports: str = "\n".join(dialect.module_import(module, encoder) for module in SPLIT_MODULES)
    root: str = BLOCK_SEPARATOR.join(
        part for part in (blocks["header"].text, imports) if part
    )
    files: list[VirtualFile] = [VirtualFile(path=dialect.root_filename, content=_terminate(root))]
    for block_name, module in _MODULE_FOR_BLOCK.items():
        files.append(
            VirtualFile(
                path=dialect.module_path(module),
                content=_terminate_module(blocks[block_name].text),
            )
        )
    return files


def compose(
    blocks: Mapping[str, SectionBlock],
    layout: Layout,
    dialect: Dialect,
    encoder: ValueEncoder,
) -> list[VirtualFile]:
    """Assemble section blocks into the files of ``layout``.

    Args:
        blocks (Mapping[str, SectionBlock]): Blocks keyed by section name
            (``header``, ``options``, ``keymaps``, ``autocmds``).
        layout (Layout): Requested layout.
        dialect (Dialect): Dialect supplying paths and import statements.
        encoder (ValueEncoder): Encoder bound to ``dialect``.

    Returns:
        list[VirtualFile]: Files in emission order (root first).

    Raises:
        LayoutError: If ``layout`` is not a known layout.
    """
    if layout is Layout.SINGLE:
        files: list[VirtualFile] = compose_single(blocks, dialect)
    elif layout is Layout.SPLIT:
        files = compose_split(blocks, dialect, encoder)
    else:
        raise LayoutError(f"Unknown layout: {layout!r}")
    logger.debug("Composed %s layout: %s", layout.value, ", ".join(f.path for f in files))
    return files

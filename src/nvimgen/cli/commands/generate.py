# topmark:header:start
#
#   project      : NvimGen
#   file         : generate.py
#   file_relpath : src/nvimgen/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NvimGen `generate` command.

Runs the emitter on a selections document (or a built-in preset) and either
prints the generated files or writes them below an output directory.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import TYPE_CHECKING

import click

from nvimgen.catalog.presets import PRESETS, get_preset
from nvimgen.cli.cmd_common import get_console
from nvimgen.cli.errors import (
    NvimgenConfigError,
    NvimgenEncodingError,
    NvimgenFileNotFoundError,
    NvimgenIOError,
    NvimgenUsageError,
)
from nvimgen.config.logging import get_logger
from nvimgen.config.selections_io import SelectionsFormatError, load_selections
from nvimgen.core.errors import LayoutError
from nvimgen.emitter.generate import generate
from nvimgen.model import Layout

if TYPE_CHECKING:
    from nvimgen.catalog.presets import Preset
    from nvimgen.cli_shared.console_api import ConsoleLike
    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.emitter.generate import GenerationResult
    from nvimgen.model import Selections, VirtualFile

logger: NvimgenLogger = get_logger(__name__)

DEFAULT_PRESET: str = "minimal"


def _resolve_selections(selections_file: Path | None, preset_name: str | None) -> Selections:
    if selections_file is not None and preset_name is not None:
        raise NvimgenUsageError("Pass either a selections file or '--preset', not both.")
    if selections_file is not None:
        if not selections_file.exists():
            raise NvimgenFileNotFoundError(f"Selections file not found: {selections_file}")
        try:
            return load_selections(selections_file)
        except SelectionsFormatError as exc:
            raise NvimgenConfigError(f"{selections_file}: {exc}") from exc
        except OSError as exc:
            raise NvimgenIOError(f"Cannot read {selections_file}: {exc}") from exc
    name: str = preset_name or DEFAULT_PRESET
    preset: Preset | None = get_preset(name)
    if preset is None:
        raise NvimgenUsageError(
            f"Unknown preset '{name}'. Available: {', '.join(sorted(PRESETS))}"
        )
    return preset.selections


def _write_files(files: tuple[VirtualFile, ...], output_dir: Path, *, force: bool) -> None:
    targets: list[tuple[Path, VirtualFile]] = [(output_dir / f.path, f) for f in files]
    existing: list[str] = [str(path) for path, _f in targets if path.exists()]
    if existing and not force:
        raise NvimgenIOError(
            f"Refusing to overwrite existing file(s): {', '.join(existing)} (use --force)"
        )
    for path, vfile in targets:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(vfile.content, encoding="utf-8", newline="")
        except OSError as exc:
            raise NvimgenIOError(f"Cannot write {path}: {exc}") from exc
        logger.info("Wrote %s (%d bytes)", path, len(vfile.content))


def _print_files(console: ConsoleLike, files: tuple[VirtualFile, ...]) -> None:
    show_headers: bool = len(files) > 1
    for index, vfile in enumerate(files):
        if show_headers:
            if index:
                console.print()
            console.print(console.styled(f"==> {vfile.path} <==", bold=True))
        console.print(vfile.content, nl=False)


@click.command(
    name="generate",
    help="Generate Neovim configuration files from selections.",
    epilog="""
Without SELECTIONS_FILE the 'minimal' preset is used. Files are printed to stdout
(each prefixed by a '==> path <==' line when there is more than one) unless
--output-dir is given.
""",
)
@click.argument(
    "selections_file",
    required=False,
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option(
    "--preset",
    "preset_name",
    default=None,
    help=f"Use a built-in preset ({', '.join(sorted(PRESETS))}).",
)
@click.option(
    "--layout",
    "layout_name",
    default=Layout.SINGLE.value,
    show_default=True,
    help=f"Output layout ({', '.join(m.value for m in Layout)}).",
)
@click.option(
    "--legacy/--native",
    "legacy_mode",
    default=None,
    help="Emit legacy Vimscript instead of Lua (default: as set in the selections).",
)
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Write files below this directory instead of printing them.",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite existing files in --output-dir.",
)
def generate_command(
    *,
    selections_file: Path | None,
    preset_name: str | None,
    layout_name: str,
    legacy_mode: bool | None,
    output_dir: Path | None,
    force: bool,
) -> None:
    """Generate configuration files.

    Args:
        selections_file (Path | None): TOML selections document.
        preset_name (str | None): Built-in preset used instead of a file.
        layout_name (str): Requested layout token.
        legacy_mode (bool | None): Override of ``Selections.legacy_mode``.
        output_dir (Path | None): Destination directory; stdout when None.
        force (bool): Overwrite existing files.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    selections: Selections = _resolve_selections(selections_file, preset_name)
    if legacy_mode is not None:
        selections = dataclasses.replace(selections, legacy_mode=legacy_mode)

    result: GenerationResult = generate(selections, layout_name)
    for diagnostic in result.diagnostics:
        console.warn(diagnostic.render(color=ctx.obj.get("color_enabled", False)))

    if isinstance(result.error, LayoutError):
        raise NvimgenUsageError(str(result.error)) from result.error
    if result.error is not None:
        raise NvimgenEncodingError(str(result.error)) from result.error

    if output_dir is None:
        _print_files(console, result.files)
        return
    _write_files(result.files, output_dir, force=force)
    for vfile in result.files:
        console.print(f"Wrote {output_dir / vfile.path}")

# topmark:header:start
#
#   project      : NvimGen
#   file         : vimscript.py
#   file_relpath : src/nvimgen/dialects/vimscript.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Legacy Vimscript dialect (``init.vim``).

Options are assigned with ``let &<option>``, mappings become one
``<mode>noremap``/``<mode>map`` command per mode and autocommands are declared in
``augroup`` blocks. Inline bodies are Lua in both dialects; here they run
through ``:lua`` with their lines joined by spaces, from a ``<Cmd>`` mapping or
as the autocommand's command. Mappings are silent unless ``silent`` is false.
Mapping descriptions are emitted as comments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nvimgen.constants import MODULE_NAMESPACE
from nvimgen.dialects.base import Dialect
from nvimgen.dialects.registry import register_dialect
from nvimgen.model import OptionType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nvimgen.dialects.base import MapOptions
    from nvimgen.emitter.encoder import ValueEncoder


def _lua_chunk(body: str) -> str:
    """Fold a Lua body onto one line (statements separated by spaces)."""
    return " ".join(line.strip() for line in body.splitlines() if line.strip())


def _map_command(mode: str, command: str) -> str:
    # The insert+command-line mode tag is a suffix: ``noremap!``.
    if mode == "!":
        return f"{command}!"
    return f"{mode}{command}"


@register_dialect("vimscript", legacy=True)
class VimscriptDialect(Dialect):
    """Dialect for ``init.vim`` style configurations."""

    description = "Legacy Vimscript (init.vim)"
    root_filename = "init.vim"
    comment_prefix = '"'
    true_literal = "v:true"
    false_literal = "v:false"

    def sequence_literal(self, items: Sequence[str]) -> str:
        """Return a Vimscript list literal."""
        return "[" + ", ".join(items) + "]"

    def global_assignment(self, variable: str, literal: str) -> str:
        """Return ``let g:<variable> = <literal>``."""
        return f"let g:{variable} = {literal}"

    def option_assignment(self, option_id: str, literal: str, option_type: OptionType) -> str:
        """Return ``let &<id> = <literal>``; list options are joined with commas."""
        if option_type is OptionType.STRING_ARRAY:
            return f'let &{option_id} = join({literal}, ",")'
        return f"let &{option_id} = {literal}"

    def keymap_preamble(self) -> list[str]:
        """Vimscript mapping commands need no shared declaration."""
        return []

    def inline_function(self, body: str, encoder: ValueEncoder) -> list[str]:
        """Return ``<Cmd>lua <chunk><CR>`` as a single rhs fragment.

        ``<`` in the chunk is written as ``<lt>`` so Lua text is never read as
        key notation.
        """
        chunk: str = _lua_chunk(body).replace("<", "<lt>")
        return [encoder.map_rhs(f"<Cmd>lua {chunk}<CR>")]

    def command_rhs(self, text: str, encoder: ValueEncoder) -> list[str]:
        """Return the command as raw mapping text."""
        return [encoder.map_rhs(text)]

    def keymap_call(
        self,
        modes: tuple[str, ...],
        multi_mode: bool,
        lhs: str,
        rhs: list[str],
        options: MapOptions,
        encoder: ValueEncoder,
    ) -> list[str]:
        """Return one mapping command per mode, preceded by an optional desc comment."""
        lines: list[str] = []
        if options.desc is not None:
            lines.append(self.comment(encoder.comment_text(options.desc)))
        command: str = "map" if options.noremap is False else "noremap"
        special: str = "" if options.silent is False else "<silent> "
        trigger: str = encoder.map_lhs(lhs)
        for mode in modes:
            lines.append(f"{_map_command(mode, command)} {special}{trigger} {' '.join(rhs)}")
        return lines

    def group_creation(self, group: str, encoder: ValueEncoder) -> list[str]:
        """Return an ``augroup`` block that clears previous definitions."""
        return [
            f"augroup {encoder.command_argument(group)}",
            *self.indent_lines(["autocmd!"]),
            "augroup END",
        ]

    def hook_registration(
        self,
        *,
        event: str,
        group: str,
        pattern: str | None,
        desc: str | None,
        body: str,
        encoder: ValueEncoder,
    ) -> list[str]:
        """Return ``autocmd <group> <event> <pattern> lua <chunk>``.

        The pattern defaults to ``*``.
        """
        lines: list[str] = []
        if desc is not None:
            lines.append(self.comment(encoder.comment_text(desc)))
        target: str = encoder.command_argument(pattern) if pattern is not None else "*"
        lines.append(
            f"autocmd {encoder.command_argument(group)} {encoder.command_argument(event)} "
            f"{target} lua {_lua_chunk(body)}"
        )
        return lines

    def module_path(self, module: str) -> str:
        """Return ``config/<module>.vim``."""
        return f"{MODULE_NAMESPACE}/{module}.vim"

    def module_import(self, module: str, encoder: ValueEncoder) -> str:
        """Return ``runtime config/<module>.vim``."""
        return f"runtime {encoder.command_argument(self.module_path(module))}"

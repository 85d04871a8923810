# topmark:header:start
#
#   project      : NvimGen
#   file         : lua.py
#   file_relpath : src/nvimgen/dialects/lua.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Native Neovim Lua dialect.

Options are assigned through ``vim.opt``, mappings go through a local wrapper
of ``vim.keymap.set`` that makes mappings silent unless told otherwise, and
autocommands use ``vim.api.nvim_create_augroup`` /
``vim.api.nvim_create_autocmd``. Split-layout modules live under
``lua/config/`` and are loaded with ``require``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nvimgen.constants import MODULE_NAMESPACE
from nvimgen.dialects.base import Dialect
from nvimgen.dialects.registry import register_dialect

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nvimgen.dialects.base import MapOptions
    from nvimgen.emitter.encoder import ValueEncoder
    from nvimgen.model import OptionType

MAP_ALIAS: str = "map"


@register_dialect("lua", legacy=False)
class LuaDialect(Dialect):
    """Dialect for ``init.lua`` style configurations."""

    description = "Neovim Lua (init.lua)"
    root_filename = "init.lua"
    comment_prefix = "--"
    true_literal = "true"
    false_literal = "false"

    def sequence_literal(self, items: Sequence[str]) -> str:
        """Return a Lua table constructor; ``{}`` when empty."""
        if not items:
            return "{}"
        return "{ " + ", ".join(items) + " }"

    def global_assignment(self, variable: str, literal: str) -> str:
        """Return ``vim.g.<variable> = <literal>``."""
        return f"vim.g.{variable} = {literal}"

    def option_assignment(self, option_id: str, literal: str, option_type: OptionType) -> str:
        """Return ``vim.opt.<id> = <literal>`` (tables are accepted for list options)."""
        return f"vim.opt.{option_id} = {literal}"

    def keymap_preamble(self) -> list[str]:
        """Return the shared ``vim.keymap.set`` wrapper.

        ``vim.keymap.set`` is not silent by default; the wrapper fills in
        ``silent = true`` for records that leave it unset.
        """
        return [
            f"local function {MAP_ALIAS}(mode, lhs, rhs, opts)",
            *self.indent_lines(
                [
                    "vim.keymap.set(mode, lhs, rhs, "
                    f'vim.tbl_extend("keep", opts or {{}}, {{ silent = {self.true_literal} }}))'
                ]
            ),
            "end",
        ]

    def inline_function(self, body: str, encoder: ValueEncoder) -> list[str]:
        """Return ``function() ... end`` with the body indented one level."""
        return ["function()", *self.indent_lines(body.splitlines()), "end"]

    def command_rhs(self, text: str, encoder: ValueEncoder) -> list[str]:
        """Return the command as a quoted string literal."""
        return [encoder.string(text)]

    def _options_record(self, options: MapOptions, encoder: ValueEncoder) -> str:
        fields: list[str] = []
        if options.desc is not None:
            fields.append(f"desc = {encoder.string(options.desc)}")
        if options.silent is not None:
            fields.append(f"silent = {encoder.boolean(options.silent)}")
        if options.noremap is not None:
            # vim.keymap.set only honors `remap`, the inverse of noremap.
            fields.append(f"remap = {encoder.boolean(not options.noremap)}")
        return "{ " + ", ".join(fields) + " }"

    def keymap_call(
        self,
        modes: tuple[str, ...],
        multi_mode: bool,
        lhs: str,
        rhs: list[str],
        options: MapOptions,
        encoder: ValueEncoder,
    ) -> list[str]:
        """Return ``map(<modes>, <lhs>, <rhs>[, <opts>])`` spread over the rhs lines."""
        mode_literal: str = encoder.string_array(modes) if multi_mode else encoder.string(modes[0])
        tail: str = ")" if options.is_empty else f", {self._options_record(options, encoder)})"
        lines: list[str] = list(rhs)
        lines[0] = f"{MAP_ALIAS}({mode_literal}, {encoder.string(lhs)}, {lines[0]}"
        lines[-1] = f"{lines[-1]}{tail}"
        return lines

    def group_creation(self, group: str, encoder: ValueEncoder) -> list[str]:
        """Return ``vim.api.nvim_create_augroup(<group>, { clear = true })``."""
        return [
            f"vim.api.nvim_create_augroup({encoder.string(group)}, "
            f"{{ clear = {self.true_literal} }})"
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
        """Return a multi-line ``vim.api.nvim_create_autocmd`` call."""
        fields: list[str] = [f"group = {encoder.string(group)},"]
        if pattern is not None:
            fields.append(f"pattern = {encoder.string(pattern)},")
        if desc is not None:
            fields.append(f"desc = {encoder.string(desc)},")
        callback: list[str] = self.inline_function(body, encoder)
        fields.append(f"callback = {callback[0]}")
        fields.extend(callback[1:])
        fields[-1] = f"{fields[-1]},"
        return [
            f"vim.api.nvim_create_autocmd({encoder.string(event)}, {{",
            *self.indent_lines(fields),
            "})",
        ]

    def module_path(self, module: str) -> str:
        """Return ``lua/config/<module>.lua``."""
        return f"lua/{MODULE_NAMESPACE}/{module}.lua"

    def module_import(self, module: str, encoder: ValueEncoder) -> str:
        """Return ``require("config.<module>")``."""
        return f"require({encoder.string(f'{MODULE_NAMESPACE}.{module}')})"

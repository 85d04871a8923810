# topmark:header:start
#
#   project      : NvimGen
#   file         : cli_types.py
#   file_relpath : src/nvimgen/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for NvimGen."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Iterable, NoReturn, Protocol, TypeVar, cast

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    Matching is case-insensitive on the member value. Members that expose a
    ``parse()`` classmethod (``KeyedStrEnum``) also accept their aliases.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        parse = getattr(self.enum_cls, "parse", None)
        if parse is not None:
            parsed = parse(str(value))
            if parsed is not None:
                return cast("E", parsed)

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_NVIMGEN_COMPLETE=bash_source nvimgen)"`
        """
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]

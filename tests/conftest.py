# topmark:header:start
#
#   project      : NvimGen
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the NvimGen test suite.

Sets up typed mark helpers, keeps the developer's ``NVIMGEN_LOG_LEVEL`` from
leaking into test runs and provides small builders for selections.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from nvimgen.config import logging
from nvimgen.constants import LOG_LEVEL_ENV_VAR
from nvimgen.model import (
    AutocmdSpec,
    InlineBody,
    KeymapSpec,
    LiteralCommand,
    Selections,
)

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_nvimgen_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so encoder and builder traces are exercised."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_selections(
    *,
    options: dict[str, object] | None = None,
    keymaps: tuple[KeymapSpec, ...] = (),
    autocmds: tuple[AutocmdSpec, ...] = (),
    **kwargs: Any,
) -> Selections:
    """Return a `Selections` with empty defaults for anything not given."""
    return Selections(options=options or {}, keymaps=keymaps, autocmds=autocmds, **kwargs)


def cmd_map(mode: str | tuple[str, ...], lhs: str, command: str, **kwargs: Any) -> KeymapSpec:
    """Shorthand for a literal-command keymap."""
    return KeymapSpec(mode=mode, lhs=lhs, rhs=LiteralCommand(command), **kwargs)


def fn_map(mode: str | tuple[str, ...], lhs: str, body: str, **kwargs: Any) -> KeymapSpec:
    """Shorthand for an inline-body keymap."""
    return KeymapSpec(mode=mode, lhs=lhs, rhs=InlineBody(body), **kwargs)

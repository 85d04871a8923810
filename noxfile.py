# topmark:header:start
#
#   project      : NvimGen
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NvimGen project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `lint`: Ruff lint.
  - `format_check`: Verify formatting with ruff.
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)
else:
    import tomlkit

    _toml_loads = cast("Callable[[str], dict[str, Any]]", lambda s: tomlkit.parse(s).unwrap())

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

nox.options.sessions = ["lint", "qa"]


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    text: str = pathlib.Path("pyproject.toml").read_text(encoding="utf-8")
    project: Any = _toml_loads(text).get("project")
    classifiers: Any = project.get("classifiers") if isinstance(project, dict) else None
    if not isinstance(classifiers, list):
        warnings.warn(
            "Could not find 'classifiers' in pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    prefix = "Programming Language :: Python :: 3."
    versions: list[str] = [
        c.removeprefix("Programming Language :: Python :: ")
        for c in cast("list[str]", classifiers)
        if c.startswith(prefix) and c.removeprefix(prefix).isdigit()
    ]
    return sorted(versions, key=lambda v: tuple(int(p) for p in v.split("."))) or [
        CURRENT_PYTHON_VERSION
    ]


PYTHONS: list[str] = get_supported_pythons()


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.install("-e", ".[test,dev]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session(python=CURRENT_PYTHON_VERSION)
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff lint."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate metadata."""
    session.install("build", "twine")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")

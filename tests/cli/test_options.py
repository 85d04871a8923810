# topmark:header:start
#
#   project      : NvimGen
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `options` command output in every format."""

from __future__ import annotations

import json

from nvimgen.catalog import get_builtin_catalog
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_options_text_lists_catalog_in_emission_order() -> None:
    result = run_cli(["--no-color", "options"])

    assert_SUCCESS(result)

    ids = [line.split()[0] for line in result.output.splitlines() if line.strip()]
    assert ids == [spec.id for spec in get_builtin_catalog().in_emission_order()]
    assert any(line.startswith("number") and "false" in line for line in result.output.splitlines())


def test_options_long_groups_by_category() -> None:
    result = run_cli(["--no-color", "options", "--long"])

    assert_SUCCESS(result)

    assert result.output.startswith("User interface:")
    assert "Search:" in result.output


def test_options_json_defaults_are_lua_literals() -> None:
    result = run_cli(["options", "--format", "json"])

    assert_SUCCESS(result)

    payload = json.loads(result.output)
    by_id = {entry["id"]: entry for entry in payload}
    assert by_id["number"] == {"id": "number", "type": "boolean", "default": "false"}
    assert by_id["completeopt"]["default"] == '{ "menu", "preview" }'
    assert len(payload) == len(get_builtin_catalog())


def test_options_json_long_adds_details() -> None:
    result = run_cli(["options", "--format", "json", "--long"])

    assert_SUCCESS(result)

    by_id = {entry["id"]: entry for entry in json.loads(result.output)}
    assert by_id["signcolumn"]["enum_values"] == ["auto", "yes", "no", "number"]
    assert by_id["signcolumn"]["category"] == "ui"


def test_options_markdown_table() -> None:
    result = run_cli(["--no-color", "options", "--format", "markdown"])

    assert_SUCCESS(result)

    assert result.output.startswith("# Supported Options")
    assert "| `tabstop`" in result.output

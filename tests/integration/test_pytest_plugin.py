"""Integration tests for the sapling-ast pytest plugin.

These tests verify that the assert_layout_equivalent fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require sapling-ast to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from sapling_ast import JSON, JSONBuilder
from sapling_ast.integrations._pytest_plugin import collapse_layout


class _SpacedNode:
    """Node whose pretty layout adds a space the compact layout lacks."""

    def write_text(self, style: object) -> str:
        return "[a,b]" if style == "compact" else "[\n    a, b\n]"

    def get_children(self) -> tuple[()]:
        return ()

    def get_display_name(self) -> str:
        return "spaced"

    def get_replace_chars(self) -> frozenset[str]:
        return frozenset("s")

    def from_replace_char(self, c: str) -> _SpacedNode | None:
        return None


def test_fixture_passes_json_trees(assert_layout_equivalent: Any) -> None:
    """Every JSON tree's pretty layout collapses to its compact layout."""
    builder = JSONBuilder()
    for value in (
        True,
        [],
        {},
        [True, False],
        {"foo": True, "bar": False},
        [{"foos": [False, True, False], "bar": False}, True],
        [[[]], {"a": {}}, [[True]]],
    ):
        assert_layout_equivalent(builder.build(value))


def test_fixture_fails_on_mismatch(assert_layout_equivalent: Any) -> None:
    with pytest.raises(AssertionError, match="layouts not equivalent for spaced"):
        assert_layout_equivalent(_SpacedNode())


def test_fixture_custom_styles(assert_layout_equivalent: Any) -> None:
    """Style values are forwarded to write_text."""
    assert_layout_equivalent(JSON.array([JSON.true()]), compact="compact", pretty="pretty")


def test_collapse_layout() -> None:
    assert collapse_layout("[\n    true,\n    false\n]") == "[true, false]"
    assert collapse_layout("{}") == "{}"


def test_fixture_returns_callable(assert_layout_equivalent: Any) -> None:
    assert callable(assert_layout_equivalent)


def test_plugin_discovery() -> None:
    """Verify assert_layout_equivalent appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_layout_equivalent" in result.stdout, (
        f"assert_layout_equivalent not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )


def test_fixture_keeps_key_whitespace(assert_layout_equivalent: Any) -> None:
    """Newlines and indentation inside a key are content, not layout."""
    assert_layout_equivalent(JSON.object([("a\n b", JSON.true())]))
    assert_layout_equivalent(JSON.array([JSON.object([("x,\n    y", JSON.array())])]))


def test_collapse_layout_keeps_quoted_text() -> None:
    assert collapse_layout('{\n    "a\n b": true\n}') == '{"a\n b": true}'

"""Tests for AST Protocol conformance.

Verifies that:
- JSON nodes satisfy the Protocol structurally.
- User-defined classes with the five methods satisfy it without inheritance.
- Classes missing a method do not satisfy it.
"""

from __future__ import annotations

from sapling_ast.protocols import AST
from sapling_ast.tree import JSON


class _UserNode:
    """Minimal user-defined node conforming to AST."""

    def write_text(self, style: object) -> str:
        return "x"

    def get_children(self) -> tuple[_UserNode, ...]:
        return ()

    def get_display_name(self) -> str:
        return "x"

    def get_replace_chars(self) -> frozenset[str]:
        return frozenset("x")

    def from_replace_char(self, c: str) -> _UserNode | None:
        return _UserNode() if c == "x" else None


class _NoPaletteNode:
    """Node with no retype support; should NOT satisfy Protocol."""

    def write_text(self, style: object) -> str:
        return "x"

    def get_children(self) -> tuple[_NoPaletteNode, ...]:
        return ()

    def get_display_name(self) -> str:
        return "x"


# ---------------------------------------------------------------------------
# Positive conformance tests
# ---------------------------------------------------------------------------


def test_json_nodes_satisfy_protocol():
    """Every JSON shape structurally satisfies AST."""
    for node in (JSON.true(), JSON.false(), JSON.array(), JSON.object()):
        assert isinstance(node, AST) is True


def test_user_defined_node_passes_isinstance():
    """User-defined class with all five methods satisfies AST."""
    assert isinstance(_UserNode(), AST) is True


# ---------------------------------------------------------------------------
# Negative conformance tests
# ---------------------------------------------------------------------------


def test_missing_methods_fail_isinstance():
    assert isinstance(_NoPaletteNode(), AST) is False


def test_plain_values_fail_isinstance():
    assert isinstance(True, AST) is False
    assert isinstance([], AST) is False

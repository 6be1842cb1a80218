"""pytest plugin for sapling-ast.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import re
from typing import Any

import pytest

from sapling_ast import JSONFormat

# A quoted key (kept as is), or a newline plus the indentation after it.
_TOKEN = re.compile(r'"[^"]*"|,?\n *')


def collapse_layout(pretty: str) -> str:
    """Fold pretty layout back onto one line with compact separators.

    ``",\\n<indent>"`` becomes ``", "``; any other newline plus indentation
    (after an opening bracket, before a closing one) disappears. Text inside
    double quotes is left alone, so keys may contain newlines and spaces;
    keys must not contain a double quote themselves.
    """
    return _TOKEN.sub(_collapse_token, pretty)


def _collapse_token(match: re.Match[str]) -> str:
    token = match.group()
    if token.startswith('"'):
        return token
    return ", " if token.startswith(",") else ""


@pytest.fixture(scope="session")
def assert_layout_equivalent() -> Any:
    """Fixture that returns a callable layout-equivalence asserter.

    The check: removing the pretty output's newlines and indentation, with
    ``",\\n"`` read as ``", "``, must give exactly the compact output.
    Quoted keys are compared verbatim, newlines included.

    Usage in tests::

        def test_tree(assert_layout_equivalent):
            assert_layout_equivalent(JSON.array([JSON.true(), JSON.false()]))

    Returns:
        A callable ``_assert(node, compact=JSONFormat.COMPACT,
        pretty=JSONFormat.PRETTY) -> None`` that raises ``AssertionError`` when
        the two layouts disagree.
    """

    def _assert(
        node: Any,
        compact: Any = JSONFormat.COMPACT,
        pretty: Any = JSONFormat.PRETTY,
    ) -> None:
        """Assert that ``node``'s two layouts differ only in whitespace.

        Args:
            node:    Any AST-conformant node.
            compact: Style value selecting the single-line layout.
            pretty:  Style value selecting the indented layout.

        Raises:
            AssertionError: With both renderings in the message.
        """
        compact_text = node.write_text(compact)
        pretty_text = node.write_text(pretty)
        if collapse_layout(pretty_text) != compact_text:
            raise AssertionError(
                f"layouts not equivalent for {node.get_display_name()}\n"
                f"  compact:   {compact_text!r}\n"
                f"  pretty:    {pretty_text!r}\n"
                f"  collapsed: {collapse_layout(pretty_text)!r}"
            )

    return _assert

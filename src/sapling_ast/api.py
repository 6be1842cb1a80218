"""Public API functions for sapling-ast.

Thin, stateless entry points over the node types and generic services:
to_text, tree_view, replace_chars and retype. None of them mutate the node
they are given; each returns a string or a freshly constructed node.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sapling_ast import palette, view
from sapling_ast.config import RenderConfig

if TYPE_CHECKING:
    from sapling_ast.cache import TextCache
    from sapling_ast.protocols import AST

__all__ = ["replace_chars", "retype", "to_text", "tree_view"]


def to_text(
    node: AST,
    style: Any = None,
    config: RenderConfig | None = None,
    cache: TextCache | None = None,
) -> str:
    """Serialize ``node`` as text.

    Args:
        node:   Any AST-conformant node.
        style:  Layout to use. When None, ``config.format_style`` is used.
        config: Rendering configuration. Defaults to ``RenderConfig()`` when None.
        cache:  Optional ``TextCache`` to serve repeated renders from memory.

    Returns:
        The serialized document.
    """
    if style is None:
        style = (config or RenderConfig()).format_style
    if cache is not None:
        return cache.write_text(node, style)
    return node.write_text(style)


def tree_view(node: AST) -> str:
    """Return the box-drawing debug view of ``node``, one line per node."""
    return view.tree_view(node)


def replace_chars(node: AST) -> tuple[str, ...]:
    """Return the retype codes ``node``'s type accepts, sorted."""
    return palette.ReplacementPalette.of(node).chars


def retype(node: AST, c: str) -> AST | None:
    """Return a fresh default node of the shape named by ``c``.

    Returns None when ``c`` is not a palette code; callers treat that as a
    no-op.
    """
    return palette.retype(node, c)

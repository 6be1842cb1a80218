"""Box-drawing tree view for any AST-conformant node.

Works only through the ``AST`` Protocol, so every node type gets a debug
view without special-casing. One line per node, depth-first, children in
``get_children()`` order, which is also serialization order::

    array
    ├── true
    └── object
        └── false
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sapling_ast.protocols import AST

__all__ = ["descendant_count", "tree_view", "tree_view_lines"]

_BRANCH = "├── "
_LAST_BRANCH = "└── "
_PIPE = "│   "
_SPACE = "    "


def tree_view(node: AST) -> str:
    """Render ``node`` and its descendants as a multi-line string."""
    return "\n".join(tree_view_lines(node))


def tree_view_lines(node: AST) -> list[str]:
    """Render ``node`` as a list of lines, root first.

    Uses an explicit stack of ``(siblings, index, prefix)`` frames, so deep
    trees do not hit the interpreter's recursion limit.
    """
    lines = [node.get_display_name()]
    stack: list[tuple[Sequence[AST], int, str]] = [(node.get_children(), 0, "")]
    while stack:
        siblings, i, prefix = stack.pop()
        if i >= len(siblings):
            continue
        stack.append((siblings, i + 1, prefix))
        child = siblings[i]
        is_last = i == len(siblings) - 1
        connector = _LAST_BRANCH if is_last else _BRANCH
        lines.append(prefix + connector + child.get_display_name())
        stack.append((child.get_children(), 0, prefix + (_SPACE if is_last else _PIPE)))
    return lines


def descendant_count(node: AST) -> int:
    """Number of nodes strictly below ``node``."""
    count = 0
    pending = list(node.get_children())
    while pending:
        child = pending.pop()
        count += 1
        pending.extend(child.get_children())
    return count

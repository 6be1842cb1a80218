"""AST Protocol: the capability contract every tree-shaped document type satisfies.

The generic services in this package (tree view, replacement palette, text
cache) are written only against this Protocol. Any class with conformant
methods passes ``isinstance`` checks without inheriting from anything, so a
new document format gets a debug view and retyping support for free.

Example::

    from sapling_ast.protocols import AST

    class Leaf:
        def write_text(self, style: object) -> str:
            return "leaf"

        def get_children(self) -> tuple[Leaf, ...]:
            return ()

        def get_display_name(self) -> str:
            return "leaf"

        def get_replace_chars(self) -> frozenset[str]:
            return frozenset("l")

        def from_replace_char(self, c: str) -> Leaf | None:
            return Leaf() if c == "l" else None

    assert isinstance(Leaf(), AST)  # structural conformance
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class AST(Protocol):
    """Structural protocol for document nodes.

    Contract:
    - ``write_text(style)`` is a pure, deterministic function of the node and
      the format style; it never fails for a well-formed node.
    - ``get_children()`` returns a finite sequence in serialization order.
      Repeated calls return the same sequence. Leaves return an empty one.
    - ``get_display_name()`` labels the node's shape, not its contents.
    - ``get_replace_chars()`` is this type's finite palette of retype codes.
    - ``from_replace_char(c)`` builds a fresh default node for ``c``, or
      returns ``None`` when ``c`` is not in the palette.
    """

    def write_text(self, style: Any) -> str: ...

    def get_children(self) -> Sequence[Self]: ...

    def get_display_name(self) -> str: ...

    def get_replace_chars(self) -> frozenset[str]: ...

    def from_replace_char(self, c: str) -> Self | None: ...

"""ReplacementPalette: read-only view of a node type's retype codes.

A palette maps single characters to freshly constructed default nodes
("``a`` -> empty array"). It is built through the ``AST`` Protocol, so it
works for any conforming node type. Building one never touches the node's
contents; the node only answers for its type's fixed code table.

Deciding what happens to the old node's children on a retype is the
editor's business. This module only constructs the replacement.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from sapling_ast.protocols import AST

__all__ = ["ReplacementPalette", "check_palette_closure", "retype"]

logger = logging.getLogger(__name__)

NodeT = TypeVar("NodeT", bound="AST")


@dataclass(frozen=True, slots=True)
class ReplacementPalette(Generic[NodeT]):
    """Ordered mapping of retype code to the fresh node it produces.

    Attributes:
        entries: Read-only mapping, keys sorted so the palette displays the
                 same way every time.
    """

    entries: Mapping[str, NodeT]

    @classmethod
    def of(cls, node: NodeT) -> ReplacementPalette[NodeT]:
        """Snapshot the palette of ``node``'s type.

        Codes the type lists but then rejects are left out; use
        ``check_palette_closure`` to treat that as an error instead.
        """
        entries: dict[str, NodeT] = {}
        for c in sorted(node.get_replace_chars()):
            fresh = node.from_replace_char(c)
            if fresh is None:
                logger.debug("palette code %r rejected by %s", c, type(node).__name__)
                continue
            entries[c] = fresh
        return cls(MappingProxyType(entries))

    @property
    def chars(self) -> tuple[str, ...]:
        return tuple(self.entries)

    def lookup(self, c: str) -> NodeT | None:
        """Return the node for ``c``, or None if ``c`` is not a palette code."""
        return self.entries.get(c)

    def __contains__(self, c: object) -> bool:
        return c in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def check_palette_closure(node: NodeT) -> ReplacementPalette[NodeT]:
    """Verify every listed code builds a node that is itself retypable.

    Returns:
        The node's palette.

    Raises:
        ValueError: If a code is not a single character, is rejected by
            ``from_replace_char``, builds a node with an empty palette, or
            builds the same shape as another code.
    """
    codes = node.get_replace_chars()
    if not codes:
        msg = f"{type(node).__name__} has an empty replacement palette"
        raise ValueError(msg)
    shapes: dict[str, str] = {}
    for c in sorted(codes):
        if len(c) != 1:
            msg = f"palette code {c!r} is not a single character"
            raise ValueError(msg)
        fresh = node.from_replace_char(c)
        if fresh is None:
            msg = f"palette code {c!r} is listed but not accepted"
            raise ValueError(msg)
        if not fresh.get_replace_chars():
            msg = f"node built from {c!r} ({fresh.get_display_name()}) has an empty palette"
            raise ValueError(msg)
        shape = fresh.get_display_name()
        if shape in shapes:
            msg = f"palette codes {shapes[shape]!r} and {c!r} both build {shape}"
            raise ValueError(msg)
        shapes[shape] = c
    return ReplacementPalette.of(node)


def retype(node: NodeT, c: str) -> NodeT | None:
    """Return a fresh node of the shape named by ``c``, or None for a no-op."""
    fresh = node.from_replace_char(c)
    if fresh is None:
        logger.debug("no replacement for %r on %s", c, node.get_display_name())
    return fresh

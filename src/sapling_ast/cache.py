"""TextCache: LRU-backed memo of rendered text for immutable nodes.

An editor re-renders the same tree after every keystroke; most subtrees are
unchanged between frames. Nodes are immutable value types, so a rendered
``(node, style)`` pair can never go stale and is safe to reuse. LRU eviction
occurs silently when ``max_size`` is exceeded.

Each ``TextCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    from sapling_ast.cache import TextCache
    from sapling_ast.tree import JSON, JSONFormat

    cache = TextCache(max_size=128)
    tree = JSON.array([JSON.true()])
    cache.write_text(tree, JSONFormat.PRETTY)  # renders
    cache.write_text(tree, JSONFormat.PRETTY)  # served from memory
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from sapling_ast.config import RenderConfig
    from sapling_ast.protocols import AST

__all__ = ["TextCache"]

logger = logging.getLogger(__name__)


class TextCache:
    """LRU-backed memo around ``AST.write_text``.

    Nodes that are not hashable (e.g. a mutable user-defined type) are
    rendered directly and never stored.

    Args:
        max_size: Maximum number of rendered texts to hold (>= 1). Defaults
            to 512.

    Raises:
        ValueError: If ``max_size`` is less than 1.
    """

    def __init__(self, max_size: int = 512) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[tuple[Any, Any], str] = LRUCache(maxsize=max_size)

    @classmethod
    def from_config(cls, config: RenderConfig) -> TextCache:
        return cls(max_size=config.cache_max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def write_text(self, node: AST, style: Any) -> str:
        """Return ``node.write_text(style)``, reusing an earlier result if cached."""
        if not isinstance(node, Hashable):
            logger.debug("bypassing cache for unhashable %s", type(node).__name__)
            return node.write_text(style)

        key = (node, style)
        try:
            text = self._cache[key]
        except KeyError:
            logger.debug("cache miss for %s (%s)", node.get_display_name(), style)
            text = node.write_text(style)
            self._cache[key] = text
        else:
            logger.debug("cache hit for %s (%s)", node.get_display_name(), style)
        return text

    def clear(self) -> None:
        self._cache.clear()

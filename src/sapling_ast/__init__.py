"""Sapling AST - text rendering and structural editing primitives for document trees."""

from __future__ import annotations

import logging

from sapling_ast.api import replace_chars, retype, to_text, tree_view
from sapling_ast.cache import TextCache
from sapling_ast.config import RenderConfig
from sapling_ast.palette import ReplacementPalette, check_palette_closure
from sapling_ast.protocols import AST
from sapling_ast.tree import JSON, JSONBuilder, JSONFormat, JSONKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "AST",
    "JSON",
    "JSONBuilder",
    "JSONFormat",
    "JSONKind",
    "RenderConfig",
    "ReplacementPalette",
    "TextCache",
    "check_palette_closure",
    "replace_chars",
    "retype",
    "to_text",
    "tree_view",
]

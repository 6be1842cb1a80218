"""End-to-end scenarios through the top-level package.

Mirrors how an editor host uses the library: build a tree, render it in the
configured style, show the debug view, and retype a node.
"""

from __future__ import annotations

import sapling_ast
from sapling_ast import JSON, JSONBuilder, JSONFormat, RenderConfig, TextCache


def test_all_exports_importable() -> None:
    for name in sapling_ast.__all__:
        assert hasattr(sapling_ast, name), name


def test_version() -> None:
    assert sapling_ast.__version__ == "0.1.0"


def test_editor_startup_document() -> None:
    """The startup document of the editor renders in both layouts."""
    tree = JSONBuilder().build([True, False, {"value": True}])
    assert sapling_ast.to_text(tree, JSONFormat.COMPACT) == '[true, false, {"value": true}]'
    assert sapling_ast.to_text(tree) == (
        "[\n"
        "    true,\n"
        "    false,\n"
        "    {\n"
        '        "value": true\n'
        "    }\n"
        "]"
    )
    assert sapling_ast.tree_view(tree) == (
        "array\n├── true\n├── false\n└── object\n    └── true"
    )


def test_retype_then_rebuild_parent() -> None:
    """The host swaps a child for a retyped node and renders the new tree."""
    tree = JSON.array([JSON.true(), JSON.false()])
    replacement = sapling_ast.retype(tree.get_children()[1], "o")
    assert replacement is not None
    edited = JSON.array([tree.get_children()[0], replacement])
    assert sapling_ast.to_text(edited, JSONFormat.COMPACT) == "[true, {}]"
    # the source tree is unchanged
    assert sapling_ast.to_text(tree, JSONFormat.COMPACT) == "[true, false]"


def test_cached_rendering_with_config() -> None:
    config = RenderConfig(format_style="compact", cache_max_size=8)  # type: ignore[arg-type]
    cache = TextCache.from_config(config)
    tree = JSON.object([("a", JSON.true())])
    for _ in range(3):
        assert sapling_ast.to_text(tree, config=config, cache=cache) == '{"a": true}'
    assert cache.curr_size == 1

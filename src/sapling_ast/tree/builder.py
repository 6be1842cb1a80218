"""JSONBuilder: converts plain Python values into JSON node trees and back.

This is a construction helper for hosts and tests, not a text parser:
``True``/``False`` map to leaves, lists to arrays, and dicts (or lists of
``(key, value)`` pairs, which may repeat keys) to objects.

Dispatch order matters: bool is checked before anything numeric because
``isinstance(True, int)`` is True in Python.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sapling_ast.tree.json import JSON, JSONKind

__all__ = ["FieldPairs", "JSONBuilder"]


class FieldPairs(list):  # type: ignore[type-arg]
    """A list of ``(key, value)`` pairs that builds an OBJECT, not an ARRAY.

    Use this instead of a dict when duplicate keys must survive::

        JSONBuilder().build(FieldPairs([("a", True), ("a", False)]))
    """


@dataclass
class JSONBuilder:
    """Converts Python values into ``JSON`` trees.

    Example::
        builder = JSONBuilder()
        tree = builder.build([True, {"value": True}])
        # tree: array -> (true, object -> true)
    """

    def build(self, value: Any) -> JSON:
        """Convert a Python value to a JSON node.

        Raises:
            TypeError: If value (or anything nested in it) is outside the
                reference format, e.g. numbers, strings, None, or non-str keys.
        """
        if isinstance(value, JSON):
            return value

        if isinstance(value, bool):
            return JSON.true() if value else JSON.false()

        if isinstance(value, FieldPairs):
            return self._build_object(value)

        if isinstance(value, Mapping):
            return self._build_object(value.items())

        if isinstance(value, (list, tuple)):
            return JSON.array(self.build(item) for item in value)

        msg = f"Unsupported value type for JSON tree: {type(value)!r}"
        raise TypeError(msg)

    def _build_object(self, pairs: Any) -> JSON:
        fields: list[tuple[str, JSON]] = []
        for key, val in pairs:
            if not isinstance(key, str):
                msg = f"Object keys must be str, got {type(key)!r}"
                raise TypeError(msg)
            fields.append((key, self.build(val)))
        return JSON.object(fields)

    def to_python(self, node: JSON) -> Any:
        """Convert a JSON node back into plain Python values.

        Objects with duplicate keys come back as ``FieldPairs`` so nothing is
        lost; all other objects come back as dicts.
        """
        match node.kind:
            case JSONKind.TRUE:
                return True
            case JSONKind.FALSE:
                return False
            case JSONKind.ARRAY:
                return [self.to_python(child) for child in node.elements]
            case JSONKind.OBJECT:
                pairs = [(name, self.to_python(value)) for name, value in node.fields]
                if len({name for name, _ in pairs}) != len(pairs):
                    return FieldPairs(pairs)
                return dict(pairs)

"""JSON node type: the reference document format.

Covers the subset of JSON where every value is ``true``, ``false``, an array
or an object, and object keys are plain ASCII. Nodes are immutable, hashable
value types; every operation here returns a fresh node or a string.

Two serializations are supported (see ``JSONFormat``)::

    compact:  [{"foo": true, "bar": false}, true]
    pretty:   [
                  {
                      "foo": true,
                      "bar": false
                  },
                  true
              ]

Empty composites render as ``[]`` / ``{}`` in both styles.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Self

__all__ = [
    "CHAR_ARRAY",
    "CHAR_FALSE",
    "CHAR_OBJECT",
    "CHAR_TRUE",
    "INDENT_UNIT",
    "JSON",
    "JSONFormat",
    "JSONKind",
]


class JSONFormat(StrEnum):
    """How a JSON tree is laid out as text.

    - COMPACT: minimal whitespace, one line.
    - PRETTY:  every element on its own line, indented by ``INDENT_UNIT``.
    """

    COMPACT = auto()
    PRETTY = auto()


class JSONKind(StrEnum):
    """The four node shapes. Values double as display names."""

    TRUE = auto()
    FALSE = auto()
    ARRAY = auto()
    OBJECT = auto()


INDENT_UNIT = "    "

CHAR_TRUE = "t"
CHAR_FALSE = "f"
CHAR_ARRAY = "a"
CHAR_OBJECT = "o"

# Replacement palette: one code per shape.
_REPLACE_KINDS: Mapping[str, JSONKind] = MappingProxyType(
    {
        CHAR_TRUE: JSONKind.TRUE,
        CHAR_FALSE: JSONKind.FALSE,
        CHAR_ARRAY: JSONKind.ARRAY,
        CHAR_OBJECT: JSONKind.OBJECT,
    }
)
_REPLACE_CHARS = frozenset(_REPLACE_KINDS)

_LITERALS: Mapping[JSONKind, str] = MappingProxyType(
    {JSONKind.TRUE: "true", JSONKind.FALSE: "false"}
)
_BRACKETS: Mapping[JSONKind, tuple[str, str]] = MappingProxyType(
    {JSONKind.ARRAY: ("[", "]"), JSONKind.OBJECT: ("{", "}")}
)


@dataclass(frozen=True, slots=True, repr=False, eq=False)
class JSON:
    """A node in a JSON document tree.

    Attributes:
        kind:     Which shape this node is (see JSONKind).
        elements: Children of an ARRAY, in order. Empty for every other kind.
        fields:   ``(name, value)`` pairs of an OBJECT, in order. Names need
                  not be unique; duplicates are kept verbatim. Empty for
                  every other kind.

    Prefer the ``true()``/``false()``/``array()``/``object()`` constructors,
    which accept any iterable and store tuples. Equality and hashing walk
    the tree without recursion, so arbitrarily deep documents stay usable
    as dict keys and cache keys.
    """

    kind: JSONKind
    elements: tuple[JSON, ...] = ()
    fields: tuple[tuple[str, JSON], ...] = ()
    _hash: int = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, JSONKind):
            msg = f"kind must be a JSONKind, got {self.kind!r}"
            raise TypeError(msg)
        if not isinstance(self.elements, tuple) or not isinstance(self.fields, tuple):
            msg = "elements and fields must be tuples; use JSON.array()/JSON.object()"
            raise TypeError(msg)
        for child in self.elements:
            if not isinstance(child, JSON):
                msg = f"array elements must be JSON nodes, got {child!r}"
                raise TypeError(msg)
        for pair in self.fields:
            if (
                not isinstance(pair, tuple)
                or len(pair) != 2
                or not isinstance(pair[0], str)
                or not isinstance(pair[1], JSON)
            ):
                msg = f"object fields must be (str, JSON) pairs, got {pair!r}"
                raise TypeError(msg)
        if self.elements and self.kind is not JSONKind.ARRAY:
            msg = f"only arrays carry elements, got {self.kind} with elements"
            raise ValueError(msg)
        if self.fields and self.kind is not JSONKind.OBJECT:
            msg = f"only objects carry fields, got {self.kind} with fields"
            raise ValueError(msg)
        # Children already carry their hashes, so hashing a node is O(width).
        object.__setattr__(
            self,
            "_hash",
            hash(
                (
                    self.kind,
                    tuple(child._hash for child in self.elements),
                    tuple((name, value._hash) for name, value in self.fields),
                )
            ),
        )

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSON):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if (
                left._hash != right._hash
                or left.kind is not right.kind
                or len(left.elements) != len(right.elements)
                or len(left.fields) != len(right.fields)
                or any(a != b for (a, _), (b, _) in zip(left.fields, right.fields))
            ):
                return False
            pending.extend(zip(left.get_children(), right.get_children()))
        return True

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def true(cls) -> Self:
        return cls(JSONKind.TRUE)

    @classmethod
    def false(cls) -> Self:
        return cls(JSONKind.FALSE)

    @classmethod
    def array(cls, children: Iterable[JSON] = ()) -> Self:
        return cls(JSONKind.ARRAY, elements=tuple(children))

    @classmethod
    def object(
        cls, fields: Iterable[tuple[str, JSON]] | Mapping[str, JSON] = ()
    ) -> Self:
        """Build an OBJECT; a mapping contributes its items in iteration order."""
        if isinstance(fields, Mapping):
            fields = fields.items()
        return cls(JSONKind.OBJECT, fields=tuple(tuple(pair) for pair in fields))

    @classmethod
    def default(cls) -> Self:
        """The format's default value: an empty object."""
        return cls(JSONKind.OBJECT)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def write_text(self, style: JSONFormat) -> str:
        """Serialize this tree in the given style.

        Walks the tree with an explicit stack, so nesting depth is bounded
        only by memory.
        """
        out: list[str] = []
        match JSONFormat(style):
            case JSONFormat.COMPACT:
                self._write(out, pretty=False)
            case JSONFormat.PRETTY:
                self._write(out, pretty=True)
        return "".join(out)

    def to_text(self, style: JSONFormat) -> str:
        return self.write_text(style)

    def _entries(self) -> Iterator[tuple[str, JSON]]:
        """Yield ``(prefix, child)`` in serialization order.

        The prefix is ``"<name>": `` for object fields and empty for array
        elements, so both composites share one layout routine.
        """
        if self.kind is JSONKind.OBJECT:
            for name, value in self.fields:
                yield f'"{name}": ', value
        else:
            yield from (("", child) for child in self.elements)

    def _write(self, out: list[str], pretty: bool) -> None:
        # One frame per open composite: its closing bracket and remaining entries.
        stack: list[tuple[str, Iterator[tuple[int, tuple[str, JSON]]]]] = []
        indent: list[str] = []
        separator = ",\n" if pretty else ", "
        node: JSON | None = self

        while True:
            if node is not None:
                if node.kind in _LITERALS:
                    out.append(_LITERALS[node.kind])
                else:
                    open_bracket, close_bracket = _BRACKETS[node.kind]
                    out.append(open_bracket)
                    # Empty composites stay on one line.
                    if node.elements or node.fields:
                        if pretty:
                            out.append("\n")
                            indent.append(INDENT_UNIT)
                        stack.append((close_bracket, enumerate(node._entries())))
                    else:
                        out.append(close_bracket)
                node = None

            if not stack:
                return

            close_bracket, entries = stack[-1]
            step = next(entries, None)
            if step is None:
                stack.pop()
                if pretty:
                    indent.pop()
                    out.append("\n")
                    out.append("".join(indent))
                out.append(close_bracket)
                continue

            i, (prefix, node) = step
            if i:
                out.append(separator)
            if pretty:
                out.append("".join(indent))
            out.append(prefix)

    # ------------------------------------------------------------------
    # Debug view
    # ------------------------------------------------------------------

    def get_children(self) -> tuple[JSON, ...]:
        if self.kind is JSONKind.OBJECT:
            return tuple(value for _, value in self.fields)
        return self.elements

    def get_display_name(self) -> str:
        return self.kind.value

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def get_replace_chars(self) -> frozenset[str]:
        return _REPLACE_CHARS

    def from_replace_char(self, c: str) -> JSON | None:
        """Return a fresh default node for code ``c``, or None if unrecognised."""
        kind = _REPLACE_KINDS.get(c)
        if kind is None:
            return None
        return JSON(kind)

    def __repr__(self) -> str:
        return f"JSON({self.write_text(JSONFormat.COMPACT)})"

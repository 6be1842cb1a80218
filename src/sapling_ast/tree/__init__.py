"""Tree subpackage: concrete document node types.

Re-exports the public API for the tree module:
- JSON: immutable node of the reference JSON format
- JSONKind: StrEnum of the four node shapes (TRUE, FALSE, ARRAY, OBJECT)
- JSONFormat: StrEnum of the two layouts (COMPACT, PRETTY)
- JSONBuilder: converts plain Python values into JSON trees and back
"""

from sapling_ast.tree.builder import FieldPairs, JSONBuilder
from sapling_ast.tree.json import JSON, JSONFormat, JSONKind

__all__ = ["JSON", "FieldPairs", "JSONBuilder", "JSONFormat", "JSONKind"]

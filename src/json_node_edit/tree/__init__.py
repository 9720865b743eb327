"""Tree subpackage: path-addressed reads and non-destructive writes.

Re-exports the public API for the tree module:
- PathResolver / child_of: read the value at a path
- TreePatcher / clone: write a value at a path on a fresh copy
- MISSING: marker for "nothing at this path" (distinct from JSON null)
"""

from json_node_edit.tree.patcher import TreePatcher, clone
from json_node_edit.tree.resolver import PathResolver, child_of
from json_node_edit.tree.types import MISSING, JsonValue, Path, Segment

__all__ = [
    "MISSING",
    "JsonValue",
    "Path",
    "PathResolver",
    "Segment",
    "TreePatcher",
    "child_of",
    "clone",
]

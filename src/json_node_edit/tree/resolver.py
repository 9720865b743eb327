"""PathResolver: reads the value located at a path inside a JSON document.

Resolution never raises for a path that does not exist. Absence is returned as
the ``MISSING`` marker, so a caller can tell "the key is absent" apart from
"the key holds null".

Segment rules:
- A str segment looks up a dict key.
- An int segment indexes a list (in range only).
- An int segment applied to a dict looks up the decimal string of the index,
  the way JavaScript property access would.
- Anything else (a str on a list, any segment on a scalar) is MISSING.
"""

from __future__ import annotations

from typing import Any

from json_node_edit.tree.types import (
    MISSING,
    Missing,
    Path,
    Segment,
    is_index,
    validate_path,
)

__all__ = ["PathResolver", "child_of"]


def child_of(container: Any, segment: Segment) -> Any | Missing:
    """Single-step traversal: return the child of ``container`` at ``segment``.

    Args:
        container: Any JSON value.
        segment:   A validated path segment.

    Returns:
        The child value, or ``MISSING`` when there is none.
    """
    if isinstance(container, dict):
        key = str(segment) if is_index(segment) else segment
        return container.get(key, MISSING)

    if isinstance(container, list) and is_index(segment):
        index = int(segment)
        if index < len(container):
            return container[index]
        return MISSING

    return MISSING


class PathResolver:
    """Reads values out of a document by path.

    Stateless; a single instance may be shared freely.

    Example::

        resolver = PathResolver()
        resolver.resolve({"customer": [{"name": "Ada"}]}, ["customer", 0, "name"])
        # "Ada"
        resolver.resolve({"customer": []}, ["customer", 3])
        # MISSING
    """

    def resolve(self, document: Any, path: Path) -> Any | Missing:
        """Return the value at ``path`` or ``MISSING``.

        An empty path returns ``document`` unchanged.

        Raises:
            InvalidPathError: If ``path`` contains a malformed segment.
        """
        current: Any = document
        for segment in validate_path(path):
            if current is MISSING or current is None:
                return MISSING
            current = child_of(current, segment)
        return current

"""TreePatcher: non-destructive "replace value at path" for JSON documents.

Every call works on a fresh recursive clone of the input, so the returned
document and the input never share a dict or list.

Container-kind inference uses a single-step lookahead: when the walk needs a
container at segment ``i`` it looks only at segment ``i + 1``. An int next
segment requires a list, a str next segment requires a dict. A missing child is
synthesized with that kind; an existing child of the wrong kind is replaced
(never merged). Later segments are never consulted.
"""

from __future__ import annotations

import logging
from typing import Any

from json_node_edit.tree.resolver import child_of
from json_node_edit.tree.types import MISSING, Path, Segment, is_index, validate_path

__all__ = ["TreePatcher", "clone"]

logger = logging.getLogger(__name__)


def clone(value: Any) -> Any:
    """Return a deep structural copy of a JSON value.

    Dicts and lists are rebuilt recursively (dict order is preserved);
    scalars are immutable and returned as-is.
    """
    if isinstance(value, dict):
        return {key: clone(child) for key, child in value.items()}
    if isinstance(value, list):
        return [clone(item) for item in value]
    return value


def _container_for(next_segment: Segment) -> dict[str, Any] | list[Any]:
    return [] if is_index(next_segment) else {}


def _fits(value: Any, next_segment: Segment) -> bool:
    if is_index(next_segment):
        return isinstance(value, list)
    return isinstance(value, dict)


def _assign(
    container: dict[str, Any] | list[Any], segment: Segment, value: Any
) -> None:
    if isinstance(container, list):
        index = int(segment)
        if index >= len(container):
            container.extend([None] * (index - len(container) + 1))
        container[index] = value
        return
    key = str(segment) if is_index(segment) else segment
    container[key] = value


class TreePatcher:
    """Produces a new document with a value installed at a path.

    Stateless; a single instance may be shared freely.

    Example::

        patcher = TreePatcher()
        patcher.set_at({}, ["a", 0], "x")      # {"a": ["x"]}
        patcher.set_at({}, ["a", "b"], "x")    # {"a": {"b": "x"}}
        patcher.set_at({"a": 1}, [], [1, 2])   # [1, 2]
    """

    def set_at(self, document: Any, path: Path, new_value: Any) -> Any:
        """Return a copy of ``document`` with ``new_value`` at ``path``.

        Args:
            document:  Any JSON value, ``None`` or ``MISSING``. Never mutated.
            path:      Location to write. An empty path replaces the document.
            new_value: Value to install. Replaces whatever was there.

        Returns:
            The new document. For an empty path this is ``new_value`` itself.

        Raises:
            InvalidPathError: If ``path`` contains a malformed segment.
        """
        segments = validate_path(path)
        if not segments:
            return new_value

        root = self._prepare_root(document, segments[0])
        current: Any = root

        for segment, next_segment in zip(segments, segments[1:]):
            existing = child_of(current, segment)
            if existing is MISSING:
                child = _container_for(next_segment)
                _assign(current, segment, child)
            elif _fits(existing, next_segment):
                child = existing
            else:
                child = _container_for(next_segment)
                logger.debug(
                    "Replacing %s at segment %r with %s for next segment %r",
                    type(existing).__name__,
                    segment,
                    type(child).__name__,
                    next_segment,
                )
                _assign(current, segment, child)
            current = child

        _assign(current, segments[-1], new_value)
        return root

    def _prepare_root(self, document: Any, first_segment: Segment) -> Any:
        """Clone the document, or replace it when it cannot hold ``first_segment``.

        An absent or null document starts as an empty dict. A dict accepts any
        first segment (ints become decimal string keys); a list only accepts an
        index. Scalars never hold children.
        """
        if document is MISSING or document is None:
            return {}
        if isinstance(document, dict):
            return clone(document)
        if isinstance(document, list) and is_index(first_segment):
            return clone(document)
        logger.debug(
            "Replacing %s document root for first segment %r",
            type(document).__name__,
            first_segment,
        )
        return _container_for(first_segment)

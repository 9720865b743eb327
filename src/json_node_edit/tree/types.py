"""Core document types: JSON values, path segments, and the MISSING marker.

``MISSING`` is distinct from ``None``: ``None`` is JSON ``null`` and is a
perfectly valid document value, while ``MISSING`` means "nothing lives at this
path".
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Final, Literal

from json_node_edit.errors import InvalidPathError

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

Segment = str | int
Path = Sequence[Segment]


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> Literal[False]:
        return False


MISSING: Final = _Missing.MISSING

Missing = Literal[_Missing.MISSING]


def is_index(segment: Segment) -> bool:
    """Return True if ``segment`` addresses an array slot.

    bool is rejected first because it subclasses int.
    """
    return isinstance(segment, int) and not isinstance(segment, bool)


def validate_path(path: Path) -> tuple[Segment, ...]:
    """Return ``path`` as a tuple after checking every segment.

    Raises:
        InvalidPathError: For bool segments, negative indices, or any segment
            that is neither str nor int.
    """
    checked: list[Segment] = []
    for position, segment in enumerate(path):
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            msg = (
                f"path segment {position} must be str or int, "
                f"got {type(segment).__name__}"
            )
            raise InvalidPathError(msg)
        if isinstance(segment, int) and segment < 0:
            msg = f"path segment {position} is a negative index: {segment}"
            raise InvalidPathError(msg)
        checked.append(segment)
    return tuple(checked)

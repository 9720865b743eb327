"""Row dataclass and ValueKind StrEnum for node projections.

A node selected for editing is described by a list of rows, one per immediate
child. A node that is itself a bare scalar is described by a single keyless
row, the sentinel row.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["Row", "ValueKind", "editable_fields", "is_editable", "is_sentinel"]


class ValueKind(StrEnum):
    """The six JSON value kinds a row can declare.

    StrEnum values are the lowercased member names:
    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    - OBJECT  -> "object"
    - ARRAY   -> "array"
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    OBJECT = auto()
    ARRAY = auto()

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.OBJECT, ValueKind.ARRAY)


@dataclass(frozen=True, slots=True)
class Row:
    """One immediate child of a node, projected for display and editing.

    Attributes:
        key:   The child's key. ``None`` (or empty) for the sentinel row.
        type:  Declared kind of the child's value.
        value: The scalar value, or an opaque summary for container rows.
    """

    key: str | None
    type: ValueKind
    value: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Row:
        """Build a Row from a ``{"key", "type", "value"}`` mapping.

        Raises:
            ValueError: If ``type`` is not one of the ValueKind values.
        """
        return cls(
            key=data.get("key"),
            type=ValueKind(data["type"]),
            value=data.get("value"),
        )

    @property
    def is_keyed(self) -> bool:
        return bool(self.key)


def is_sentinel(rows: Sequence[Row]) -> bool:
    """True iff ``rows`` is exactly one keyless row."""
    return len(rows) == 1 and not rows[0].is_keyed


def is_editable(row: Row) -> bool:
    """True for keyed rows of scalar kind; only these populate an edit buffer."""
    return row.is_keyed and not row.type.is_container


def editable_fields(rows: Sequence[Row]) -> Iterator[tuple[str, Row]]:
    """Yield ``(key, row)`` for every editable row, in row order."""
    for row in rows:
        if row.key and not row.type.is_container:
            yield row.key, row

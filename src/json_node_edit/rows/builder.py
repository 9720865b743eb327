"""RowBuilder: projects a document value into the rows of its node.

Kinds are assigned by isinstance dispatch, testing bool ahead of the numeric
types since True and False also pass an int check.

Projection rules:
- dict   -> one keyed row per entry, in insertion order. Container children
            become opaque rows whose value is the child's size.
- list   -> no rows; array elements are selected as nodes of their own.
- scalar -> a single keyless (sentinel) row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_node_edit.rows.nodes import Row, ValueKind

__all__ = ["RowBuilder", "kind_of"]


def kind_of(value: Any) -> ValueKind:
    """Return the ValueKind of a JSON value.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool is a subclass of int, so it has to be matched first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if value is None:
        return ValueKind.NULL

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass
class RowBuilder:
    """Builds the row projection of a node from its document value.

    Example::
        builder = RowBuilder()
        builder.build({"name": "Ada", "tags": ["x", "y"]})
        # [Row("name", STRING, "Ada"), Row("tags", ARRAY, 2)]
        builder.build(42)
        # [Row(None, NUMBER, 42)]
    """

    def build(self, value: Any) -> list[Row]:
        if isinstance(value, dict):
            return [self._child_row(key, child) for key, child in value.items()]
        if isinstance(value, list):
            return []
        return [Row(key=None, type=kind_of(value), value=value)]

    @staticmethod
    def _child_row(key: str, child: Any) -> Row:
        kind = kind_of(child)
        if kind.is_container:
            return Row(key=key, type=kind, value=len(child))
        return Row(key=key, type=kind, value=child)

"""Rows subpackage: node projections, text coercion, and edit merging.

Re-exports the public API for the rows module:
- Row / ValueKind: typed projection of one child of a node
- RowBuilder / kind_of: build rows from a document value
- ValueCoercer: edited text -> typed scalar
- RowProjector / EditBuffer: previews, edit buffers, merging edits back
"""

from json_node_edit.rows.builder import RowBuilder, kind_of
from json_node_edit.rows.coercer import ValueCoercer
from json_node_edit.rows.nodes import (
    Row,
    ValueKind,
    editable_fields,
    is_editable,
    is_sentinel,
)
from json_node_edit.rows.projector import EditBuffer, RowProjector

__all__ = [
    "EditBuffer",
    "Row",
    "RowBuilder",
    "RowProjector",
    "ValueCoercer",
    "ValueKind",
    "editable_fields",
    "is_editable",
    "is_sentinel",
    "kind_of",
]

"""RowProjector: read-only previews, edit buffers, and merging edits back.

The projector works on the row list of a single node:

- ``preview`` renders the node for display. Nested containers are omitted,
  not flattened.
- ``edit_buffer`` captures the editable scalar fields as text.
- ``apply_edits`` coerces the (possibly edited) buffer back into a value that
  can be installed at the node's path with ``TreePatcher``.

Calling ``apply_edits`` on an untouched ``edit_buffer`` reproduces the
original scalar values.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from json_node_edit.config import EditorConfig
from json_node_edit.rows.coercer import ValueCoercer
from json_node_edit.rows.nodes import Row, editable_fields, is_sentinel
from json_node_edit.tree.patcher import clone
from json_node_edit.tree.types import Path

__all__ = ["EditBuffer", "RowProjector", "display_text"]

EditBuffer = dict[str, str]

EMPTY_OBJECT_TEXT = "{}"


def display_text(value: Any, null_text: str = "null") -> str:
    """Render a scalar the way it reads in JSON, without quoting strings."""
    if value is None:
        return null_text
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _buffer_text(value: Any) -> str:
    return display_text(value, null_text="")


class RowProjector:
    """Flattens a node's rows for display and merges edits back.

    Args:
        config:  Supplies ``indent`` and ``sentinel_id``. Defaults to
            ``EditorConfig()``.
        coercer: Text-to-scalar converter. Defaults to ``ValueCoercer()``.
    """

    def __init__(
        self,
        config: EditorConfig | None = None,
        coercer: ValueCoercer | None = None,
    ) -> None:
        self._config: EditorConfig = config if config is not None else EditorConfig()
        self._coercer: ValueCoercer = coercer if coercer is not None else ValueCoercer()

    @property
    def sentinel_id(self) -> str:
        return self._config.sentinel_id

    def preview(self, rows: Sequence[Row]) -> str:
        """Return the read-only text preview of a node.

        Returns:
            ``"{}"`` for no rows, the raw value for a sentinel row, otherwise
            the keyed scalar rows as a pretty-printed JSON object.
        """
        if not rows:
            return EMPTY_OBJECT_TEXT
        if is_sentinel(rows):
            return display_text(rows[0].value)

        obj = {key: row.value for key, row in editable_fields(rows)}
        return json.dumps(obj, indent=self._config.indent, ensure_ascii=False)

    def edit_buffer(self, rows: Sequence[Row]) -> EditBuffer:
        """Return the initial text of every editable field.

        JSON null is primed as an empty string.
        """
        if is_sentinel(rows):
            return {self.sentinel_id: _buffer_text(rows[0].value)}
        return {key: _buffer_text(row.value) for key, row in editable_fields(rows)}

    def apply_edits(
        self,
        rows: Sequence[Row],
        path: Path,
        current: Any,
        buffer: Mapping[str, str],
    ) -> Any:
        """Merge ``buffer`` into a value ready to install at ``path``.

        Args:
            rows:    The node's rows as they were when editing began.
            path:    Location of the node. Carried for symmetry with
                ``TreePatcher.set_at``; the merge itself does not read it.
            current: The document's value at ``path`` right now, or MISSING.
            buffer:  Edited field text. Fields absent from the buffer fall
                back to the row's original value.

        Returns:
            A coerced scalar for a sentinel node. Otherwise a new dict built on
            a copy of ``current`` (when it is a dict) with every editable field
            overwritten. Keys holding nested containers are left as they were.
            A ``current`` that is a list is discarded and rebuilt as a dict.
        """
        if is_sentinel(rows):
            row = rows[0]
            text = buffer.get(self.sentinel_id, _buffer_text(row.value))
            return self._coercer.coerce(row.type, text)

        merged: dict[str, Any] = clone(current) if isinstance(current, dict) else {}
        for key, row in editable_fields(rows):
            text = buffer.get(key, _buffer_text(row.value))
            merged[key] = self._coercer.coerce(row.type, text)
        return merged

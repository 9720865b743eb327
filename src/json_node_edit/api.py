"""Public API functions for json-node-edit.

Each function builds fresh collaborators per call, so no call can observe
state left behind by another.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from json_node_edit.codec import dump_document, load_document
from json_node_edit.config import EditorConfig
from json_node_edit.path import format_path, parse_path
from json_node_edit.rows.builder import RowBuilder
from json_node_edit.rows.coercer import ValueCoercer
from json_node_edit.rows.nodes import Row, ValueKind
from json_node_edit.rows.projector import EditBuffer, RowProjector
from json_node_edit.tree.patcher import TreePatcher
from json_node_edit.tree.resolver import PathResolver
from json_node_edit.tree.types import Missing, Path

__all__ = [
    "apply_edits",
    "build_rows",
    "coerce",
    "commit_edits",
    "edit_buffer",
    "format_path",
    "parse_path",
    "preview",
    "resolve",
    "set_at",
]


def resolve(document: Any, path: Path) -> Any | Missing:
    """Return the value at ``path`` in ``document``, or ``MISSING``."""
    return PathResolver().resolve(document, path)


def set_at(document: Any, path: Path, new_value: Any) -> Any:
    """Return a copy of ``document`` with ``new_value`` installed at ``path``.

    Missing intermediate containers are created: a list when the next segment
    is an index, a dict otherwise. ``document`` is never mutated.
    """
    return TreePatcher().set_at(document, path, new_value)


def coerce(declared_type: ValueKind | str, text: str) -> Any:
    """Convert edited ``text`` to a scalar of ``declared_type``; never raises."""
    return ValueCoercer().coerce(declared_type, text)


def build_rows(value: Any) -> list[Row]:
    """Return the row projection of a node whose document value is ``value``."""
    return RowBuilder().build(value)


def preview(rows: Sequence[Row], config: EditorConfig | None = None) -> str:
    """Return the read-only text preview of a node."""
    return RowProjector(config=config).preview(rows)


def edit_buffer(rows: Sequence[Row], config: EditorConfig | None = None) -> EditBuffer:
    """Return the initial edit buffer of a node."""
    return RowProjector(config=config).edit_buffer(rows)


def apply_edits(
    rows: Sequence[Row],
    path: Path,
    current: Any,
    buffer: Mapping[str, str],
    config: EditorConfig | None = None,
) -> Any:
    """Merge an edit buffer into the value to install at ``path``."""
    return RowProjector(config=config).apply_edits(rows, path, current, buffer)


def commit_edits(
    document_text: str | None,
    path: Path,
    rows: Sequence[Row],
    buffer: Mapping[str, str],
    config: EditorConfig | None = None,
) -> str:
    """Apply an edit buffer to document text and return the new text.

    Raises:
        DocumentParseError: If ``document_text`` is not valid JSON. Nothing is
            patched in that case.
    """
    document = load_document(document_text)
    current = resolve(document, path)
    new_value = apply_edits(rows, path, current, buffer, config=config)
    return dump_document(set_at(document, path, new_value), config)

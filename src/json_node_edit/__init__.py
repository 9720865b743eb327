"""json-node-edit - path-addressed reads and non-destructive edits of JSON documents."""

from __future__ import annotations

from json_node_edit.api import (
    apply_edits,
    build_rows,
    coerce,
    commit_edits,
    edit_buffer,
    format_path,
    parse_path,
    preview,
    resolve,
    set_at,
)
from json_node_edit.config import EditorConfig
from json_node_edit.errors import (
    DocumentParseError,
    EditError,
    InvalidPathError,
    SaveInProgressError,
)
from json_node_edit.rows.nodes import Row, ValueKind
from json_node_edit.session import EditSession
from json_node_edit.tree.types import MISSING

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "DocumentParseError",
    "EditError",
    "EditSession",
    "EditorConfig",
    "InvalidPathError",
    "Row",
    "SaveInProgressError",
    "ValueKind",
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

"""EditSession: the edit lifecycle of one selected node.

This is the central wiring layer between the pure engine pieces and a UI.
It holds no references to any global store; the caller passes the current
document text into ``save`` and receives the new text back.

Lifecycle:
- A session is created when a node is selected and discarded when the
  selection changes.
- ``begin()`` primes the edit buffer and enters edit mode.
- ``update()`` changes one buffered field.
- ``cancel()`` drops the buffer and leaves edit mode.
- ``save()`` parses the document, merges the buffer at the node's path, and
  returns the new document text. A parse failure leaves the buffer and edit
  mode exactly as they were.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from json_node_edit.codec import dump_document, load_document
from json_node_edit.config import EditorConfig
from json_node_edit.errors import SaveInProgressError
from json_node_edit.path import format_path
from json_node_edit.rows.nodes import Row
from json_node_edit.rows.projector import EditBuffer, RowProjector
from json_node_edit.tree.patcher import TreePatcher
from json_node_edit.tree.resolver import PathResolver
from json_node_edit.tree.types import Path, Segment, validate_path

__all__ = ["EditSession"]

logger = logging.getLogger(__name__)


class EditSession:
    """Edit state for a single selected node.

    Example::

        session = EditSession(path=["customer"], rows=rows)
        session.begin()
        session.update("name", "Grace")
        new_text = session.save(document_text)

    Args:
        path:   Location of the selected node in the document.
        rows:   The node's row projection.
        config: Formatting and sentinel settings. Defaults to ``EditorConfig()``.
    """

    def __init__(
        self,
        path: Path,
        rows: Sequence[Row],
        config: EditorConfig | None = None,
    ) -> None:
        self._config: EditorConfig = config if config is not None else EditorConfig()
        self._path: tuple[Segment, ...] = validate_path(path)
        self._rows: tuple[Row, ...] = tuple(rows)
        self._projector = RowProjector(config=self._config)
        self._resolver = PathResolver()
        self._patcher = TreePatcher()
        self._buffer: EditBuffer = {}
        self._editing = False
        self._save_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def path(self) -> tuple[Segment, ...]:
        return self._path

    @property
    def path_text(self) -> str:
        return format_path(self._path)

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @property
    def preview(self) -> str:
        return self._projector.preview(self._rows)

    @property
    def editing(self) -> bool:
        return self._editing

    @property
    def saving(self) -> bool:
        return self._save_lock.locked()

    @property
    def buffer(self) -> EditBuffer:
        """A copy of the current edit buffer."""
        return dict(self._buffer)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def begin(self) -> None:
        """Prime the edit buffer from the rows and enter edit mode."""
        self._buffer = self._projector.edit_buffer(self._rows)
        self._editing = True

    def update(self, field: str, text: str) -> None:
        """Replace the buffered text of one editable field.

        Raises:
            KeyError: If ``field`` is not an editable field of this node.
        """
        if not self._editing:
            self.begin()
        if field not in self._buffer:
            msg = f"{field!r} is not an editable field of {self.path_text}"
            raise KeyError(msg)
        self._buffer[field] = text

    def cancel(self) -> None:
        """Discard the buffer and leave edit mode."""
        self._reset()
        logger.debug("Edit of %s cancelled", self.path_text)

    def save(self, document_text: str | None) -> str:
        """Merge the buffer into ``document_text`` and return the new text.

        Raises:
            DocumentParseError: If ``document_text`` is not valid JSON. The
                buffer and edit mode are left untouched.
            SaveInProgressError: If another save of this session is running.
        """
        if not self._save_lock.acquire(blocking=False):
            msg = f"a save of {self.path_text} is already in progress"
            raise SaveInProgressError(msg)
        try:
            document = load_document(document_text)
            current = self._resolver.resolve(document, self._path)
            new_value = self._projector.apply_edits(
                self._rows, self._path, current, self._buffer
            )
            updated = self._patcher.set_at(document, self._path, new_value)
            text = dump_document(updated, self._config)
        finally:
            self._save_lock.release()

        logger.debug("Saved %s", self.path_text)
        self._reset()
        return text

    def _reset(self) -> None:
        self._buffer = {}
        self._editing = False

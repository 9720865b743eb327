"""Exception hierarchy for json-node-edit.

Only the save boundary and malformed paths raise. Missing path targets,
unparsable scalar text, and structural conflicts during a patch all resolve to
defined values instead.
"""

from __future__ import annotations

__all__ = [
    "DocumentParseError",
    "EditError",
    "InvalidPathError",
    "SaveInProgressError",
]


class EditError(Exception):
    """Base class for every error raised by json-node-edit."""


class DocumentParseError(EditError, ValueError):
    """Document text could not be parsed as JSON.

    Attributes:
        lineno: 1-based line of the parse failure.
        colno:  1-based column of the parse failure.
    """

    def __init__(self, message: str, lineno: int = 0, colno: int = 0) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class InvalidPathError(EditError, ValueError):
    """A path or path string is malformed."""


class SaveInProgressError(EditError, RuntimeError):
    """A save was requested while another save of the same session was running."""

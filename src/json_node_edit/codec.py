"""Document codec: JSON text <-> Document values at the save boundary.

Only strict JSON crosses this boundary. The ``NaN``, ``Infinity`` and
``-Infinity`` tokens that the stdlib decoder accepts by default are rejected
on load, and non-finite floats are refused on dump.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

from json_node_edit.config import EditorConfig
from json_node_edit.errors import DocumentParseError

__all__ = ["dump_document", "load_document"]


def _reject_constant(name: str) -> NoReturn:
    msg = f"document is not valid JSON: non-finite number {name} is not allowed"
    raise DocumentParseError(msg)


def load_document(text: str | None) -> Any:
    """Parse document text. Empty or blank text is an empty object.

    Raises:
        DocumentParseError: If ``text`` is not strict JSON, nests too deeply,
            or holds an integer past the interpreter's conversion limit.
    """
    if not text or not text.strip():
        return {}
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except DocumentParseError:
        raise
    except json.JSONDecodeError as exc:
        msg = (
            f"document is not valid JSON: {exc.msg} "
            f"(line {exc.lineno}, column {exc.colno})"
        )
        raise DocumentParseError(msg, lineno=exc.lineno, colno=exc.colno) from exc
    except (ValueError, RecursionError) as exc:
        msg = f"document is not valid JSON: {exc}"
        raise DocumentParseError(msg) from exc


def dump_document(document: Any, config: EditorConfig | None = None) -> str:
    """Serialize a document as pretty-printed JSON text.

    Raises:
        ValueError: If ``document`` contains ``nan`` or an infinite float.
    """
    config = config if config is not None else EditorConfig()
    return json.dumps(
        document, indent=config.indent, ensure_ascii=False, allow_nan=False
    )

"""PathFormatter and PathParser: canonical display strings for paths.

The display form is ``$`` followed by one bracketed segment per path element::

    []                  -> $
    ["customer", 0]     -> $["customer"][0]

Index segments render as bare digits, key segments as double-quoted JSON
strings (so keys containing quotes or backslashes stay unambiguous and the
string can be parsed back).

Parsed strings are memoized in an LRU cache. Each ``PathParser`` owns its
cache; ``parse_path`` goes through a module-level parser.
"""

from __future__ import annotations

import json
import re
import threading

from cachetools import LRUCache

from json_node_edit.config import EditorConfig
from json_node_edit.errors import InvalidPathError
from json_node_edit.tree.types import Path, Segment, is_index, validate_path

__all__ = ["PathFormatter", "PathParser", "format_path", "parse_path"]

ROOT = "$"

# One bracketed segment: [123] or ["json string"]
_SEGMENT = re.compile(r'\[(?:(\d+)|("(?:[^"\\]|\\.)*"))\]')


class PathFormatter:
    """Renders paths as ``$[...]`` display strings."""

    def format(self, path: Path) -> str:
        segments = validate_path(path)
        if not segments:
            return ROOT
        return ROOT + "".join(self._segment(s) for s in segments)

    @staticmethod
    def _segment(segment: Segment) -> str:
        if is_index(segment):
            return f"[{segment}]"
        return f"[{json.dumps(segment, ensure_ascii=False)}]"


class PathParser:
    """Parses ``$[...]`` display strings back into segment tuples.

    Args:
        config: Supplies ``path_cache_size``. Defaults to ``EditorConfig()``.
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        self._config: EditorConfig = config if config is not None else EditorConfig()
        self._cache: LRUCache[str, tuple[Segment, ...]] = LRUCache(
            maxsize=self._config.path_cache_size
        )
        self._lock = threading.Lock()

    @property
    def curr_size(self) -> int:
        """The current number of parsed strings held in the cache."""
        return int(self._cache.currsize)

    def parse(self, text: str) -> tuple[Segment, ...]:
        """Return the segments of ``text``.

        Raises:
            InvalidPathError: If ``text`` is not a well-formed display path.
        """
        with self._lock:
            cached = self._cache.get(text)
        if cached is not None:
            return cached

        segments = self._parse_uncached(text)
        with self._lock:
            self._cache[text] = segments
        return segments

    @staticmethod
    def _parse_uncached(text: str) -> tuple[Segment, ...]:
        if not text.startswith(ROOT):
            msg = f"path must start with {ROOT!r}: {text!r}"
            raise InvalidPathError(msg)

        segments: list[Segment] = []
        pos = len(ROOT)
        while pos < len(text):
            match = _SEGMENT.match(text, pos)
            if match is None:
                msg = f"malformed path segment at offset {pos}: {text!r}"
                raise InvalidPathError(msg)
            index, quoted = match.groups()
            if index is not None:
                segments.append(int(index))
            else:
                try:
                    segments.append(json.loads(quoted))
                except json.JSONDecodeError as exc:
                    msg = f"malformed key at offset {pos}: {text!r}"
                    raise InvalidPathError(msg) from exc
            pos = match.end()
        return tuple(segments)


_formatter = PathFormatter()
_parser = PathParser()


def format_path(path: Path) -> str:
    """Render ``path`` as its canonical display string."""
    return _formatter.format(path)


def parse_path(text: str) -> tuple[Segment, ...]:
    """Parse a display string produced by ``format_path``."""
    return _parser.parse(text)

"""EditorConfig: immutable settings shared by the projector, codec and session.

EditorConfig is a frozen (immutable) dataclass in the same shape as every
other value object in the package: defaults cover the common case and
``__post_init__`` rejects nonsense early.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_SENTINEL_ID", "EditorConfig"]

DEFAULT_SENTINEL_ID = "__value"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable configuration for node editing.

    Attributes:
        indent: Spaces used when pretty-printing previews and saved documents.
        sentinel_id: Reserved edit-buffer identifier for a keyless scalar row.
        path_cache_size: Maximum number of parsed path strings kept in the
            LRU cache used by ``parse_path``.
    """

    indent: int = 2
    sentinel_id: str = DEFAULT_SENTINEL_ID
    path_cache_size: int = 256

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if not self.sentinel_id:
            msg = "sentinel_id must be a non-empty string"
            raise ValueError(msg)
        if self.path_cache_size < 1:
            msg = f"path_cache_size must be >= 1, got {self.path_cache_size}"
            raise ValueError(msg)

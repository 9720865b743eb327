"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: flat, nested (~1k leaves), and deep (a 200-level chain).
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_document(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_document() -> dict[str, Any]:
    """Generate a nested document: 10 sections x 10 records x 10 fields."""
    return {
        f"section_{i}": [
            {f"field_{k}": k * j for k in range(10)} for j in range(10)
        ]
        for i in range(10)
    }


def _make_deep_document(depth: int) -> tuple[dict[str, Any], list[str | int]]:
    """Generate a chain of alternating dicts and single-element lists."""
    path: list[str | int] = []
    for level in range(depth):
        path.append(f"k{level}" if level % 2 == 0 else 0)
    doc: Any = "leaf"
    for segment in reversed(path):
        doc = [doc] if isinstance(segment, int) else {segment: doc}
    return doc, path


@pytest.fixture
def flat_100() -> dict[str, Any]:
    """100-key flat document."""
    return generate_flat_document(100)


@pytest.fixture
def nested_1k() -> dict[str, Any]:
    """~1k-leaf nested document."""
    return _make_nested_document()


@pytest.fixture
def deep_200() -> tuple[dict[str, Any], list[str | int]]:
    """200-level deep document and the path to its leaf."""
    return _make_deep_document(200)

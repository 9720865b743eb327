"""pytest plugin for json-node-edit.

Registered through the pytest11 entry point in pyproject.toml, so installing the
package is enough to make the ``assert_json_path`` fixture available in any
test session.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_node_edit import MISSING, format_path, resolve
from json_node_edit.tree.types import Path


@pytest.fixture(scope="session")
def assert_json_path() -> Any:
    """Fixture that returns a callable path-value asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_patch(assert_json_path):
            assert_json_path({"a": [1]}, ["a", 0], 1)

        def test_absent(assert_json_path):
            assert_json_path({"a": []}, ["a", 0], MISSING)

    Returns:
        A callable ``_assert(document, path, expected) -> None`` that raises
        ``AssertionError`` when the value at ``path`` differs from ``expected``.
    """

    def _assert(document: Any, path: Path, expected: Any) -> None:
        actual = resolve(document, path)
        if expected is MISSING or actual is MISSING:
            matches = actual is expected
        else:
            matches = actual == expected and type(actual) is type(expected)
        if not matches:
            raise AssertionError(
                f"unexpected value at {format_path(path)}:\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )

    return _assert

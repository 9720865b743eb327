"""Tests for TreePatcher and clone.

Covers:
- Empty path replaces the whole document
- Container-kind lookahead: int next segment -> list, str next segment -> dict
- Conflicting intermediate values are replaced, fitting ones preserved
- Root handling for absent, null, scalar and list documents
- List padding when writing past the end
- Non-destructive writes at every depth
- set_at followed by resolve returns the written value
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from json_node_edit.errors import InvalidPathError
from json_node_edit.tree.patcher import TreePatcher, clone
from json_node_edit.tree.resolver import PathResolver
from json_node_edit.tree.types import MISSING


@pytest.fixture
def patcher() -> TreePatcher:
    return TreePatcher()


class TestEmptyPath:
    @pytest.mark.parametrize("document", [{"a": 1}, [1, 2], "x", None, MISSING])
    def test_returns_new_value_itself(self, patcher: TreePatcher, document: Any) -> None:
        new_value = {"replaced": True}
        assert patcher.set_at(document, [], new_value) is new_value


class TestLookahead:
    def test_numeric_next_segment_creates_list(self, patcher: TreePatcher) -> None:
        assert patcher.set_at({}, ["a", 0], "V") == {"a": ["V"]}

    def test_string_next_segment_creates_dict(self, patcher: TreePatcher) -> None:
        assert patcher.set_at({}, ["a", "b"], "V") == {"a": {"b": "V"}}

    def test_mixed_deep_path(self, patcher: TreePatcher) -> None:
        result = patcher.set_at({}, ["a", 0, "b", 1], "V")
        assert result == {"a": [{"b": [None, "V"]}]}

    def test_absent_document_starts_as_dict(self, patcher: TreePatcher) -> None:
        assert patcher.set_at(MISSING, ["a", "b"], 1) == {"a": {"b": 1}}

    def test_null_document_starts_as_dict(self, patcher: TreePatcher) -> None:
        assert patcher.set_at(None, ["a"], 1) == {"a": 1}

    def test_absent_document_with_index_uses_string_key(
        self, patcher: TreePatcher
    ) -> None:
        assert patcher.set_at(None, [0], "V") == {"0": "V"}


class TestConflicts:
    def test_dict_replaced_by_list_for_numeric_next(self, patcher: TreePatcher) -> None:
        doc = {"a": {"keep": 1}}
        assert patcher.set_at(doc, ["a", 0], "V") == {"a": ["V"]}

    def test_scalar_replaced_by_list_for_numeric_next(
        self, patcher: TreePatcher
    ) -> None:
        assert patcher.set_at({"a": 5}, ["a", 1], "V") == {"a": [None, "V"]}

    def test_list_replaced_by_dict_for_string_next(self, patcher: TreePatcher) -> None:
        assert patcher.set_at({"a": [1, 2]}, ["a", "b"], "V") == {"a": {"b": "V"}}

    def test_null_replaced_by_dict_for_string_next(self, patcher: TreePatcher) -> None:
        assert patcher.set_at({"a": None}, ["a", "b"], "V") == {"a": {"b": "V"}}

    def test_fitting_structure_preserved(self, patcher: TreePatcher) -> None:
        doc = {"a": {"b": 1, "c": 2}, "z": [1]}
        assert patcher.set_at(doc, ["a", "b"], 10) == {"a": {"b": 10, "c": 2}, "z": [1]}

    def test_fitting_list_preserved(self, patcher: TreePatcher) -> None:
        doc = {"items": [{"id": 1}, {"id": 2}]}
        result = patcher.set_at(doc, ["items", 1, "id"], 20)
        assert result == {"items": [{"id": 1}, {"id": 20}]}

    def test_scalar_root_replaced(self, patcher: TreePatcher) -> None:
        assert patcher.set_at("text", ["a"], 1) == {"a": 1}

    def test_scalar_root_replaced_by_list_for_index(self, patcher: TreePatcher) -> None:
        assert patcher.set_at(3, [0], "V") == ["V"]

    def test_list_root_replaced_for_string_segment(self, patcher: TreePatcher) -> None:
        assert patcher.set_at([1, 2], ["a"], 1) == {"a": 1}

    def test_list_root_kept_for_index(self, patcher: TreePatcher) -> None:
        assert patcher.set_at([1, 2], [1], 9) == [1, 9]

    def test_final_value_replaced_not_merged(self, patcher: TreePatcher) -> None:
        doc = {"a": {"x": 1, "y": 2}}
        assert patcher.set_at(doc, ["a"], {"z": 3}) == {"a": {"z": 3}}


class TestListPadding:
    def test_pads_with_none(self, patcher: TreePatcher) -> None:
        assert patcher.set_at({"a": [1]}, ["a", 3], 4) == {"a": [1, None, None, 4]}

    def test_append_at_length(self, patcher: TreePatcher) -> None:
        assert patcher.set_at([0, 1], [2], 2) == [0, 1, 2]


class TestNonDestructive:
    def test_input_unchanged_at_every_depth(self, patcher: TreePatcher) -> None:
        doc: dict[str, Any] = {"a": {"b": [{"c": 1}, {"d": [1, 2]}]}, "e": "f"}
        snapshot = copy.deepcopy(doc)
        patcher.set_at(doc, ["a", "b", 1, "d", 0], 100)
        patcher.set_at(doc, ["a", "b", 0], "x")
        patcher.set_at(doc, ["a", "new", 0], "y")
        assert doc == snapshot

    def test_no_shared_containers(self, patcher: TreePatcher) -> None:
        doc: dict[str, Any] = {"a": {"b": [1, 2]}, "untouched": {"x": [1]}}
        result = patcher.set_at(doc, ["a", "b", 0], 9)
        result["untouched"]["x"].append(2)
        result["a"]["b"].append(3)
        assert doc == {"a": {"b": [1, 2]}, "untouched": {"x": [1]}}

    def test_conflict_does_not_touch_input(self, patcher: TreePatcher) -> None:
        doc = {"a": {"keep": 1}}
        patcher.set_at(doc, ["a", 0], "V")
        assert doc == {"a": {"keep": 1}}


class TestRoundTrip:
    @pytest.mark.parametrize(
        ("document", "path"),
        [
            ({}, ["a"]),
            ({}, ["a", 0]),
            ({}, ["a", "b", 2, "c"]),
            ({"a": {"b": 1}}, ["a", "b"]),
            ({"a": [1, 2, 3]}, ["a", 1]),
            ({"a": 5}, ["a", "x", 0]),
            ([{"k": []}], [0, "k", 4]),
            (None, [3]),
            ("scalar", ["x"]),
        ],
    )
    def test_resolve_after_set_returns_value(
        self, patcher: TreePatcher, document: Any, path: list[Any]
    ) -> None:
        value = {"v": [1, "two", None]}
        result = patcher.set_at(document, path, value)
        assert PathResolver().resolve(result, path) == value


class TestInvalidPath:
    def test_negative_index_raises(self, patcher: TreePatcher) -> None:
        with pytest.raises(InvalidPathError):
            patcher.set_at({}, ["a", -1], 1)


class TestClone:
    def test_clone_is_equal_and_independent(self) -> None:
        doc: dict[str, Any] = {"a": [1, {"b": None}], "c": True}
        copied = clone(doc)
        assert copied == doc
        assert copied is not doc
        assert copied["a"] is not doc["a"]
        assert copied["a"][1] is not doc["a"][1]

    def test_clone_preserves_key_order(self) -> None:
        doc = {"z": 1, "a": 2, "m": 3}
        assert list(clone(doc)) == ["z", "a", "m"]

    @pytest.mark.parametrize("value", ["s", 1, 1.5, True, None])
    def test_scalars_returned_as_is(self, value: Any) -> None:
        assert clone(value) is value

"""Tests for the visibility indexer.

Covers:
- Match by key name, by string value, and by descendant
- Root handling: root path never path-matches but is visible when anything matches
- Ancestor closure
- Search path text is dotted and lowercased (indices included)
- Non-string scalars never value-match
- Empty-term contract and filter_visibility() normalisation
- Deep nesting without recursion
"""

from __future__ import annotations

import pytest

from json_explorer.path import Path
from json_explorer.values import ABSENT
from json_explorer.visibility import (
    VisibilityIndex,
    compute_visibility,
    filter_visibility,
    normalize_term,
)

# ---------------------------------------------------------------------------
# Match triggers
# ---------------------------------------------------------------------------


class TestMatchTriggers:
    def test_visible_by_key_name(self) -> None:
        index = compute_visibility({"secretKey": 1}, "secret")
        assert Path.of("secretKey") in index
        assert index.has_any_match is True

    def test_visible_by_value(self) -> None:
        index = compute_visibility({"a": {"b": "findme"}}, "findme")
        assert Path.of("a", "b") in index
        assert Path.of("a") in index
        assert Path.root() in index
        assert index.has_any_match is True

    def test_no_match(self) -> None:
        index = compute_visibility({"a": 1}, "zzz")
        assert index.visible_paths == frozenset()
        assert index.has_any_match is False
        assert len(index) == 0

    def test_value_match_is_case_insensitive(self) -> None:
        index = compute_visibility({"city": "New York"}, "york")
        assert Path.of("city") in index

    def test_key_match_is_case_insensitive(self) -> None:
        index = compute_visibility({"FirstName": "x"}, "firstname")
        assert Path.of("FirstName") in index

    def test_numbers_and_booleans_do_not_value_match(self) -> None:
        index = compute_visibility({"a": 12345, "b": True, "c": None}, "234")
        assert index.has_any_match is False
        index = compute_visibility({"a": True}, "true")
        assert index.has_any_match is False

    def test_siblings_of_match_stay_hidden(self) -> None:
        index = compute_visibility({"keep": "hit", "drop": "miss"}, "hit")
        assert Path.of("keep") in index
        assert Path.of("drop") not in index

    def test_descendants_of_key_match_are_visible(self) -> None:
        # the dotted search path of a child contains its parent's key
        index = compute_visibility({"secret": {"inner": 1}, "other": 2}, "secret")
        assert Path.of("secret", "inner") in index
        assert Path.of("other") not in index

    def test_root_scalar_string_match(self) -> None:
        index = compute_visibility("Hello World", "world")
        assert index.visible_paths == frozenset({Path.root()})
        assert index.has_any_match is True

    def test_root_path_never_path_matches(self) -> None:
        # a non-string root has no path text and no value to match
        index = compute_visibility(42, "4")
        assert index.has_any_match is False


# ---------------------------------------------------------------------------
# Search path text
# ---------------------------------------------------------------------------


class TestSearchPathText:
    def test_array_indices_are_part_of_path_text(self) -> None:
        index = compute_visibility({"items": [{"id": 1}, {"id": 2}]}, "items.1")
        assert Path.of("items", 1) in index
        assert Path.of("items", 1, "id") in index
        assert Path.of("items", 0) not in index

    def test_dotted_path_spanning_segments(self) -> None:
        index = compute_visibility({"user": {"name": "x", "age": 3}}, "user.na")
        assert Path.of("user", "name") in index
        assert Path.of("user", "age") not in index

    def test_numeric_key_and_index_are_distinct_entries(self) -> None:
        doc = {"0": ["x"], "list": ["zero"]}
        index = compute_visibility(doc, "zero")
        assert Path.of("list", 0) in index
        assert Path.of("list", "0") not in index


# ---------------------------------------------------------------------------
# Ancestor closure
# ---------------------------------------------------------------------------


class TestAncestorClosure:
    DOC = {
        "users": [
            {"name": "Ada", "tags": ["math", "poetry"]},
            {"name": "Alan", "tags": ["logic"]},
        ],
        "meta": {"source": "archive", "poetryCount": 1},
    }

    @pytest.mark.parametrize("term", ["poetry", "ada", "logic", "name", "users.1", "a"])
    def test_every_ancestor_visible(self, term: str) -> None:
        index = compute_visibility(self.DOC, term)
        assert index.has_any_match
        for path in index.visible_paths:
            for ancestor in path.ancestors():
                assert ancestor in index, f"{ancestor} missing for {path}"

    def test_root_visible_iff_any_match(self) -> None:
        assert Path.root() in compute_visibility(self.DOC, "poetry")
        assert Path.root() not in compute_visibility(self.DOC, "nothing-here")

    def test_exact_visible_set(self) -> None:
        index = compute_visibility(self.DOC, "poetry")
        assert index.visible_paths == frozenset(
            {
                Path.root(),
                Path.of("users"),
                Path.of("users", 0),
                Path.of("users", 0, "tags"),
                Path.of("users", 0, "tags", 1),
                Path.of("meta"),
                Path.of("meta", "poetryCount"),
            }
        )


# ---------------------------------------------------------------------------
# Contract and helpers
# ---------------------------------------------------------------------------


class TestContract:
    def test_empty_term_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            compute_visibility({"a": 1}, "")

    def test_term_recorded(self) -> None:
        assert compute_visibility({"a": 1}, "a").term == "a"

    def test_is_visible(self) -> None:
        index = compute_visibility({"a": "b"}, "b")
        assert index.is_visible(Path.of("a"))
        assert not index.is_visible(Path.of("z"))

    def test_result_is_frozen(self) -> None:
        index = compute_visibility({"a": "b"}, "b")
        with pytest.raises((AttributeError, TypeError)):
            index.has_any_match = False  # type: ignore[misc]

    def test_non_json_value_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            compute_visibility({"a": {1, 2}}, "a")

    def test_absent_root_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            compute_visibility(ABSENT, "a")

    def test_deep_nesting(self) -> None:
        doc: object = "needle"
        for _ in range(2000):
            doc = {"n": doc}
        index = compute_visibility(doc, "needle")
        assert index.has_any_match
        assert len(index) == 2001


class TestNormalizeTerm:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("  Hello ", "hello"), ("ABC", "abc"), ("   ", ""), ("", "")],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_term(raw) == expected


class TestFilterVisibility:
    def test_blank_term_returns_none(self) -> None:
        assert filter_visibility({"a": 1}, "   ") is None

    def test_normalizes_before_indexing(self) -> None:
        index = filter_visibility({"city": "Zürich"}, "  ZÜRICH ")
        assert isinstance(index, VisibilityIndex)
        assert index.term == "zürich"
        assert Path.of("city") in index

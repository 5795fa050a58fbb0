"""Shared document corpus for property-style tests.

Every document is a fixed, reproducible JSON value.  The corpus covers
scalars, empty containers, nested mixes, keys that look like indices,
keys that need quoting, unicode and JSON null inside containers.
"""

from __future__ import annotations

from typing import Any

import pytest

CORPUS: dict[str, Any] = {
    "null": None,
    "true": True,
    "zero": 0,
    "float": 2.5,
    "string": "Hello",
    "empty_object": {},
    "empty_array": [],
    "flat_object": {"name": "John Doe", "age": 30, "email": "john@example.com"},
    "flat_array": [1, "two", 3.0, False, None],
    "nested": {
        "user": {
            "profile": {"firstName": "Ada", "lastName": "Lovelace"},
            "tags": ["math", "poetry"],
        },
        "active": True,
    },
    "array_of_objects": [
        {"id": 1, "name": "Widget", "price": 25.5},
        {"id": 2, "name": "Gadget", "price": 75},
    ],
    "index_like_keys": {"0": "zero", "1": ["a", "b"], "items": [{"0": 0}]},
    "quoted_keys": {"first name": "Ada", "a.b": {"c/d": "~tilde"}, "": "empty"},
    "unicode": {"stadt": "Zürich", "emoji": ["☃", "Ω"]},
    "nulls_inside": {"a": None, "b": [None, {"c": None}]},
    "deep": {"l1": {"l2": {"l3": {"l4": {"l5": ["bottom"]}}}}},
}

PAIRS: dict[str, tuple[Any, Any]] = {
    "sample_profiles": (
        {
            "name": "John Doe",
            "age": 30,
            "email": "john@example.com",
            "address": {"street": "123 Main St", "city": "New York"},
            "hobbies": ["reading", "gaming"],
        },
        {
            "name": "John Doe",
            "age": 31,
            "email": "john.doe@example.com",
            "phone": "+1234567890",
            "address": {"street": "123 Main St", "city": "New York", "zip": "10001"},
            "hobbies": ["reading", "gaming", "cooking"],
        },
    ),
    "type_changes": (
        {"a": [1], "b": {"x": 1}, "c": "1", "d": None},
        {"a": {"0": 1}, "b": [1], "c": 1, "d": False},
    ),
    "shrinking_array": ([{"id": 1}, {"id": 2}, {"id": 3}], [{"id": 1}]),
    "root_scalars": ("old", "new"),
    "root_kind_change": ({"x": 1}, [1, 2]),
    "null_vs_missing": ({"a": None}, {}),
    "key_reorder": ({"a": 1, "b": 2}, {"b": 2, "a": 1}),
}


@pytest.fixture(params=sorted(CORPUS), ids=str)
def document(request: pytest.FixtureRequest) -> Any:
    """Each corpus document in turn."""
    return CORPUS[request.param]


@pytest.fixture(params=sorted(PAIRS), ids=str)
def document_pair(request: pytest.FixtureRequest) -> tuple[Any, Any]:
    """Each (old, new) corpus pair in turn."""
    return PAIRS[request.param]

"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: ~100 nodes flat, ~10k nodes nested, and a 2000-level deep chain.
The "changed" side of each pair edits every tenth leaf, drops one key per
section and appends one array element.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_records(sections: int, per_section: int) -> dict[str, Any]:
    """Generate a nested catalogue: sections of records with tag arrays."""
    return {
        f"section_{i}": {
            f"record_{j}": {
                "id": i * per_section + j,
                "name": f"Item {i}-{j}",
                "active": j % 2 == 0,
                "tags": [f"tag_{k}" for k in range(3)],
                "note": None,
            }
            for j in range(per_section)
        }
        for i in range(sections)
    }


def _edit(document: dict[str, Any]) -> dict[str, Any]:
    """Return a changed copy of a ``_make_records`` document."""
    changed: dict[str, Any] = {}
    for section_name, records in document.items():
        section: dict[str, Any] = {}
        for position, (record_name, record) in enumerate(records.items()):
            if position == 0:
                continue
            record = dict(record, tags=[*record["tags"], "new"])
            if record["id"] % 10 == 0:
                record["name"] = record["name"].upper()
            section[record_name] = record
        changed[section_name] = section
    return changed


def _make_deep_chain(depth: int, leaf: str) -> Any:
    node: Any = leaf
    for _ in range(depth):
        node = {"child": node}
    return node


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_flat() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key flat pair with every tenth value changed."""
    left = generate_flat_object(100)
    right = {k: (v.upper() if i % 10 == 0 else v) for i, (k, v) in enumerate(left.items())}
    return left, right


@pytest.fixture
def pair_nested() -> tuple[dict[str, Any], dict[str, Any]]:
    """~10k-node nested pair (20 sections x 50 records)."""
    left = _make_records(20, 50)
    return left, _edit(left)


@pytest.fixture
def pair_deep() -> tuple[Any, Any]:
    """2000-level object chain differing only at the leaf."""
    return _make_deep_chain(2000, "old"), _make_deep_chain(2000, "new")


@pytest.fixture
def document_nested() -> dict[str, Any]:
    """~10k-node nested document for visibility indexing."""
    return _make_records(20, 50)

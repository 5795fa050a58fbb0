"""pytest plugin for json-explorer.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_explorer.differ import DiffConfig, DiffEntry, DiffKind, StructuralDiffer
from json_explorer.values import ABSENT


def _describe(entry: DiffEntry) -> str:
    old = "<absent>" if entry.old_value is ABSENT else repr(entry.old_value)
    new = "<absent>" if entry.new_value is ABSENT else repr(entry.new_value)
    return f"  {entry.kind.value:<9} {entry.path.to_display_string()}: {old} -> {new}"


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (a fresh StructuralDiffer is created per call).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged(load(dump(doc)), doc)

        def test_detects_change(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"modified"):
                assert_json_unchanged({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when ``diff(expected, actual)`` reports any
        ADDED, REMOVED or MODIFIED entry.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are structurally identical.

        Args:
            actual:   The actual JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            config:   Optional DiffConfig (e.g. ``null_equals_missing=True``).
                      UNCHANGED entries never fail the assertion.

        Raises:
            AssertionError: When the documents differ, with one line per
                entry giving its kind, display path and both values.
        """
        entries = [
            entry
            for entry in StructuralDiffer(config=config).diff(expected, actual)
            if entry.kind != DiffKind.UNCHANGED
        ]
        if entries:
            details = "\n".join(_describe(entry) for entry in entries)
            raise AssertionError(
                f"JSON documents differ ({len(entries)} difference(s)):\n{details}"
            )

    return _assert

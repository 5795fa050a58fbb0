"""Per-kind counts and grouping of diff entries for summary panels."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from json_explorer.differ.entry import DiffEntry, DiffKind

__all__ = ["DiffStatistics", "group_by_kind", "summarize"]


@dataclass(frozen=True, slots=True)
class DiffStatistics:
    """Counts of diff entries by kind.

    Attributes:
        added:     Number of ADDED entries.
        removed:   Number of REMOVED entries.
        modified:  Number of MODIFIED entries.
        unchanged: Number of UNCHANGED entries (0 unless requested from the differ).
    """

    added: int = 0
    removed: int = 0
    modified: int = 0
    unchanged: int = 0

    @property
    def total(self) -> int:
        return self.added + self.removed + self.modified + self.unchanged

    @property
    def has_differences(self) -> bool:
        return (self.added + self.removed + self.modified) > 0


def summarize(entries: Iterable[DiffEntry]) -> DiffStatistics:
    """Count ``entries`` by kind."""
    counts = Counter(entry.kind for entry in entries)
    return DiffStatistics(
        added=counts[DiffKind.ADDED],
        removed=counts[DiffKind.REMOVED],
        modified=counts[DiffKind.MODIFIED],
        unchanged=counts[DiffKind.UNCHANGED],
    )


def group_by_kind(entries: Iterable[DiffEntry]) -> dict[DiffKind, list[DiffEntry]]:
    """Group ``entries`` by kind, keeping their relative order.

    Every ``DiffKind`` is present in the result (in enum order), mapped to an
    empty list when no entry has that kind.
    """
    groups: dict[DiffKind, list[DiffEntry]] = {kind: [] for kind in DiffKind}
    for entry in entries:
        groups[entry.kind].append(entry)
    return groups

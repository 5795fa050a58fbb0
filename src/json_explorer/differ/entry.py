"""DiffEntry dataclass and DiffKind StrEnum for structural diff output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_explorer.path import Path
from json_explorer.values import ABSENT

__all__ = ["DiffEntry", "DiffKind"]


class DiffKind(StrEnum):
    """How a single path differs between the old and the new document.

    - ADDED:     present only in the new document
    - REMOVED:   present only in the old document
    - MODIFIED:  present in both, values (or value kinds) differ
    - UNCHANGED: present in both, equal scalar values
    """

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()
    UNCHANGED = auto()

    def inverted(self) -> DiffKind:
        """The kind seen when old and new documents are swapped."""
        return _INVERSE.get(self, self)


_INVERSE = {DiffKind.ADDED: DiffKind.REMOVED, DiffKind.REMOVED: DiffKind.ADDED}


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One reported divergence between two JSON values.

    Attributes:
        path:      Structured address of the compared node.
        kind:      Classification of the divergence (see DiffKind).
        old_value: Value in the old document, or ``ABSENT`` for ADDED entries.
        new_value: Value in the new document, or ``ABSENT`` for REMOVED entries.
    """

    path: Path
    kind: DiffKind
    old_value: Any = ABSENT
    new_value: Any = ABSENT

    def __post_init__(self) -> None:
        expect_old = self.kind is not DiffKind.ADDED
        expect_new = self.kind is not DiffKind.REMOVED
        if self.has_old != expect_old or self.has_new != expect_new:
            msg = (
                f"{self.kind} entry at {self.path} requires "
                f"old_value {'present' if expect_old else 'absent'} and "
                f"new_value {'present' if expect_new else 'absent'}"
            )
            raise ValueError(msg)

    @property
    def has_old(self) -> bool:
        return self.old_value is not ABSENT

    @property
    def has_new(self) -> bool:
        return self.new_value is not ABSENT

    def inverted(self) -> DiffEntry:
        """Return the entry a diff of (new, old) reports at the same path."""
        return DiffEntry(
            path=self.path,
            kind=self.kind.inverted(),
            old_value=self.new_value,
            new_value=self.old_value,
        )

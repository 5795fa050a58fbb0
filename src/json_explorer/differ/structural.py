"""StructuralDiffer: path-accumulating comparison of two JSON values.

Walks both documents in lockstep and reports every point of divergence as a
``DiffEntry``.  The rules, applied at each compared position:

1. Absent on one side (array length mismatch, object key asymmetry):
   ADDED or REMOVED carrying the present value.  Never happens at the root.
2. Different value kinds (array vs object counts as different): a single
   MODIFIED entry, no recursion.
3. Same scalar kind: MODIFIED when unequal, UNCHANGED when equal (reported
   only with ``include_unchanged``).
4. Two arrays: positions ``0 .. max(len) - 1`` in ascending order.
5. Two objects: the ordered key union (see ``KeyOrder``).

Containers never receive an entry of their own; only leaves and
absent/present mismatch points do.

The walk uses an explicit LIFO stack of ``(path, old, new)`` frames instead
of language-level recursion, so nesting depth is bounded by memory and not
by the interpreter recursion limit.  Children are pushed in reverse order so
entries come out in the same pre-order a recursive walk would produce.
"""

from __future__ import annotations

from typing import Any

from json_explorer.differ.config import DiffConfig, KeyOrder
from json_explorer.differ.entry import DiffEntry, DiffKind
from json_explorer.path import Path
from json_explorer.values import ABSENT, SCALAR_KINDS, ValueKind, kind_of

__all__ = ["StructuralDiffer", "diff"]

_Frame = tuple[Path, Any, Any]


class StructuralDiffer:
    """Stateless structural differ bound to one ``DiffConfig``.

    Example::

        differ = StructuralDiffer()
        differ.diff([1, 2], [1, 2, 3])
        # [DiffEntry(path=Path((2,)), kind=DiffKind.ADDED, old_value=ABSENT, new_value=3)]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, old: Any, new: Any) -> list[DiffEntry]:
        """Compare two JSON values and return the ordered diff entries.

        Args:
            old: The original JSON value (dict, list, str, int, float, bool, None).
            new: The updated JSON value.

        Returns:
            Entries in deterministic pre-order: ascending indices for arrays,
            ``KeyOrder`` order for objects.

        Raises:
            TypeError: If either document contains a non-JSON Python value.
                ``ABSENT`` is not a document, so a missing root raises too.
        """
        # absence is only meaningful below the root
        kind_of(old)
        kind_of(new)

        old = self._preprocess(old)
        new = self._preprocess(new)

        entries: list[DiffEntry] = []
        stack: list[_Frame] = [(Path.root(), old, new)]

        while stack:
            path, old_node, new_node = stack.pop()
            children = self._compare(path, old_node, new_node, entries)
            if children:
                stack.extend(reversed(children))

        return entries

    # ------------------------------------------------------------------
    # Preprocessing
    # ------------------------------------------------------------------

    def _preprocess(self, value: Any) -> Any:
        """Strip None-valued keys when null_equals_missing=True.

        Returns a new object and never mutates the input.  With the flag off
        the value is returned unchanged.
        """
        if not self._config.null_equals_missing:
            return value

        if isinstance(value, dict):
            return {k: self._preprocess(v) for k, v in value.items() if v is not None}
        if isinstance(value, list):
            return [self._preprocess(item) for item in value]
        return value

    # ------------------------------------------------------------------
    # Per-position comparison
    # ------------------------------------------------------------------

    def _compare(
        self,
        path: Path,
        old: Any,
        new: Any,
        entries: list[DiffEntry],
    ) -> list[_Frame]:
        """Emit entries for one position and return the child frames to visit."""
        if old is ABSENT:
            entries.append(DiffEntry(path, DiffKind.ADDED, new_value=new))
            return []
        if new is ABSENT:
            entries.append(DiffEntry(path, DiffKind.REMOVED, old_value=old))
            return []

        old_kind = kind_of(old)
        new_kind = kind_of(new)

        if old_kind != new_kind:
            entries.append(DiffEntry(path, DiffKind.MODIFIED, old, new))
            return []

        if old_kind in SCALAR_KINDS:
            if old != new:
                entries.append(DiffEntry(path, DiffKind.MODIFIED, old, new))
            elif self._config.include_unchanged:
                entries.append(DiffEntry(path, DiffKind.UNCHANGED, old, new))
            return []

        if old_kind == ValueKind.ARRAY:
            return [
                (
                    path.extend(i),
                    old[i] if i < len(old) else ABSENT,
                    new[i] if i < len(new) else ABSENT,
                )
                for i in range(max(len(old), len(new)))
            ]

        # OBJECT: the last ValueKind left after the scalar and array branches
        return [
            (path.extend(key), old.get(key, ABSENT), new.get(key, ABSENT))
            for key in self._key_union(old, new)
        ]

    def _key_union(self, old: dict[str, Any], new: dict[str, Any]) -> list[str]:
        if self._config.key_order == KeyOrder.SORTED:
            return sorted(old.keys() | new.keys())
        # dict.fromkeys keeps first-seen order: old keys, then new-only keys
        return list(dict.fromkeys([*old, *new]))


def diff(
    old_value: Any,
    new_value: Any,
    include_unchanged: bool = False,
    config: DiffConfig | None = None,
) -> list[DiffEntry]:
    """Return the structural differences between two JSON values.

    Creates a fresh ``StructuralDiffer`` per call.

    Args:
        old_value:         The original JSON value.
        new_value:         The updated JSON value.
        include_unchanged: Report equal scalar leaves as UNCHANGED entries.
                           Ignored when ``config`` is given.
        config:            Full differ configuration.  Defaults to
                           ``DiffConfig(include_unchanged=include_unchanged)``.

    Returns:
        Ordered list of ``DiffEntry`` objects; empty when the values are equal
        and ``include_unchanged`` is False.
    """
    if config is None:
        config = DiffConfig(include_unchanged=include_unchanged)
    return StructuralDiffer(config=config).diff(old_value, new_value)

"""differ subpackage: public API for the structural JSON differ.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_explorer.differ import DiffConfig, StructuralDiffer, summarize

    differ = StructuralDiffer(DiffConfig(include_unchanged=True))
    entries = differ.diff({"a": 1, "b": 2}, {"b": 2, "c": 3})
    summarize(entries)  # DiffStatistics(added=1, removed=1, modified=0, unchanged=1)
"""

from __future__ import annotations

from json_explorer.differ.config import DiffConfig, KeyOrder
from json_explorer.differ.entry import DiffEntry, DiffKind
from json_explorer.differ.stats import DiffStatistics, group_by_kind, summarize
from json_explorer.differ.structural import StructuralDiffer, diff

__all__ = [
    "DiffConfig",
    "DiffEntry",
    "DiffKind",
    "DiffStatistics",
    "KeyOrder",
    "StructuralDiffer",
    "diff",
    "group_by_kind",
    "summarize",
]

"""ResultCache: LRU-backed memo keyed on the identity of its inputs.

Diffing and visibility indexing are recomputed whenever the search term or
either document changes.  Documents are immutable once parsed, so a result
can be reused for as long as the *same objects* are passed again.  Keys are
built from ``id()`` of each input plus any hashable extras (search term,
config).  Each entry holds strong references to its inputs, so an id cannot
be recycled by a different object while the entry is cached and a hit
always means the very same input objects.

Each ``ResultCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.  LRU eviction is silent.

Example::

    cache = ResultCache(max_size=64)
    doc = {"a": 1}
    cache.put((doc,), "a", result)
    cache.get((doc,), "a")           # result
    cache.get(({"a": 1},), "a")      # MISSING: equal but not the same object
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any, Final

from cachetools import LRUCache

__all__ = ["MISSING", "ResultCache"]

MISSING: Final = object()


class ResultCache:
    """Identity-keyed LRU memo.

    Args:
        max_size: Maximum number of results held.  Defaults to 128.  When
            exceeded, the least-recently-used entry is silently evicted.
    """

    def __init__(self, max_size: int = 128) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[tuple[Any, ...], tuple[tuple[Any, ...], Any]] = LRUCache(
            maxsize=max_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup / store
    # ------------------------------------------------------------------

    def get(self, inputs: Sequence[Any], extra: Hashable = None) -> Any:
        """Return the stored result for ``inputs`` and ``extra``, or ``MISSING``."""
        hit = self._cache.get(self._key(inputs, extra))
        if hit is None:
            return MISSING
        return hit[1]

    def put(self, inputs: Sequence[Any], extra: Hashable, result: Any) -> None:
        """Store ``result`` for ``inputs`` and ``extra``."""
        self._cache[self._key(inputs, extra)] = (tuple(inputs), result)

    def clear(self) -> None:
        self._cache.clear()

    @staticmethod
    def _key(inputs: Sequence[Any], extra: Hashable) -> tuple[Any, ...]:
        return (*(id(obj) for obj in inputs), extra)

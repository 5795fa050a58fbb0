"""MemoizedExplorer: orchestrator that wires StructuralDiffer + visibility indexing + ResultCache.

A host UI calls ``diff()`` on every edit of either diff pane and
``visibility()`` on every keystroke in the search box.  Most of those calls
repeat earlier inputs (same documents, same term), so results are memoized
by input identity.  There is no incremental update and no cancellation:
a miss recomputes from scratch and runs to completion.

Architecture:
- ``diff()`` keys on ``(id(old), id(new), DiffConfig)``.
- ``visibility()`` keys on ``(id(root), normalized term)``.  Blank terms
  short-circuit to ``None`` (no filter) without touching the cache.
- Each instance owns two ``ResultCache`` objects; two explorers never share
  cached state.
"""

from __future__ import annotations

import logging
from typing import Any

from json_explorer.cache import MISSING, ResultCache
from json_explorer.differ import DiffConfig, DiffEntry, StructuralDiffer
from json_explorer.visibility import VisibilityIndex, compute_visibility, normalize_term

__all__ = ["MemoizedExplorer"]

logger = logging.getLogger(__name__)


class MemoizedExplorer:
    """Memoizing front end for the diff and visibility operations.

    Example::

        explorer = MemoizedExplorer()
        doc = {"user": {"name": "Ada"}}
        explorer.visibility(doc, "ada")   # computed
        explorer.visibility(doc, " ADA ") # served from cache (same normalized term)
        explorer.hits                     # 1
    """

    def __init__(self, max_cache_size: int = 128) -> None:
        """Initialise the explorer.

        Args:
            max_cache_size: Maximum number of results held per cache (one
                cache for diffs, one for visibility indexes).  Defaults to 128.
        """
        self._diff_cache = ResultCache(max_size=max_cache_size)
        self._visibility_cache = ResultCache(max_size=max_cache_size)
        self._differs: dict[DiffConfig, StructuralDiffer] = {}
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(
        self,
        old_value: Any,
        new_value: Any,
        include_unchanged: bool = False,
        config: DiffConfig | None = None,
    ) -> list[DiffEntry]:
        """Memoized ``json_explorer.differ.diff``.

        Returns a fresh list on every call; the entries themselves are frozen
        and shared.
        """
        if config is None:
            config = DiffConfig(include_unchanged=include_unchanged)

        inputs = (old_value, new_value)
        cached = self._diff_cache.get(inputs, config)
        if cached is not MISSING:
            self.hits += 1
            logger.debug("diff cache hit (%d entries)", len(cached))
            return list(cached)

        self.misses += 1
        entries = self._differ_for(config).diff(old_value, new_value)
        self._diff_cache.put(inputs, config, tuple(entries))
        logger.debug("diff computed: %d entries", len(entries))
        return entries

    def visibility(self, root: Any, raw_term: str) -> VisibilityIndex | None:
        """Memoized ``json_explorer.visibility.filter_visibility``.

        Returns:
            None for a blank term, otherwise the ``VisibilityIndex`` of the
            normalized term.
        """
        term = normalize_term(raw_term)
        if not term:
            return None

        inputs = (root,)
        cached = self._visibility_cache.get(inputs, term)
        if cached is not MISSING:
            self.hits += 1
            logger.debug("visibility cache hit for term %r", term)
            return cached

        self.misses += 1
        index = compute_visibility(root, term)
        self._visibility_cache.put(inputs, term, index)
        logger.debug(
            "visibility computed for term %r: %d visible paths", term, len(index)
        )
        return index

    def clear(self) -> None:
        """Drop every cached result and reset the hit/miss counters."""
        self._diff_cache.clear()
        self._visibility_cache.clear()
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _differ_for(self, config: DiffConfig) -> StructuralDiffer:
        differ = self._differs.get(config)
        if differ is None:
            differ = self._differs[config] = StructuralDiffer(config=config)
        return differ

"""Visibility indexing for search-filtered tree views.

Given a JSON value and a search term, computes which node paths must stay
rendered when the tree is filtered.  A node matches when any of:

(a) its lowercased dotted search path (``users.0.name``; root excluded)
    contains the term,
(b) it is a string whose lowercased value contains the term,
(c) at least one of its children matches.

Every matching node is visible.  Because rule (c) folds child results into
the parent, every ancestor of a visible node is visible too, so a renderer
never meets an orphaned subtree.  Path and value matches are independent:
``{"secretKey": 1}`` filtered by ``"secret"`` shows ``secretKey`` although
``1`` does not match.

Traversal is iterative: nodes are collected in pre-order with their parent
index, then folded in reverse so each child is settled before its parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from json_explorer.path import Path
from json_explorer.values import ValueKind, kind_of

__all__ = [
    "VisibilityIndex",
    "compute_visibility",
    "filter_visibility",
    "normalize_term",
]


@dataclass(frozen=True, slots=True)
class VisibilityIndex:
    """Result of indexing one (value, term) pair.

    Attributes:
        visible_paths: Paths that stay rendered while filtering.
        has_any_match: True when the root matched, i.e. the term was found
            anywhere in the document.
        term:          The normalized term the index was built for.
    """

    visible_paths: frozenset[Path] = field(default_factory=frozenset)
    has_any_match: bool = False
    term: str = ""

    def is_visible(self, path: Path) -> bool:
        return path in self.visible_paths

    def __contains__(self, path: object) -> bool:
        return path in self.visible_paths

    def __len__(self) -> int:
        return len(self.visible_paths)


def normalize_term(raw: str) -> str:
    """Trim and lowercase a raw search box input."""
    return raw.strip().lower()


def compute_visibility(root: Any, normalized_term: str) -> VisibilityIndex:
    """Index which paths of ``root`` remain visible for ``normalized_term``.

    Args:
        root:            JSON value to index.
        normalized_term: Trimmed, lowercased, non-empty search term.

    Returns:
        A ``VisibilityIndex``; ``has_any_match`` is the root's match result.

    Raises:
        ValueError: If ``normalized_term`` is empty.  An empty term means
            "no filter" and callers should skip indexing altogether.
        TypeError:  If ``root`` contains a non-JSON Python value.
    """
    if not normalized_term:
        msg = "normalized_term must be non-empty; skip indexing for a blank search"
        raise ValueError(msg)

    # Pre-order listing: (path, node, search_text, parent_index)
    nodes: list[tuple[Path, Any, str, int]] = []
    stack: list[tuple[Path, Any, str, int]] = [(Path.root(), root, "", -1)]

    while stack:
        path, node, text, parent = stack.pop()
        index = len(nodes)
        nodes.append((path, node, text, parent))

        kind = kind_of(node)
        if kind == ValueKind.ARRAY:
            items = list(enumerate(node))
        elif kind == ValueKind.OBJECT:
            items = list(node.items())
        else:
            continue

        for segment, child in reversed(items):
            lowered = str(segment).lower()
            child_text = f"{text}.{lowered}" if text else lowered
            stack.append((path.extend(segment), child, child_text, index))

    matched = [False] * len(nodes)
    visible: set[Path] = set()

    for index in range(len(nodes) - 1, -1, -1):
        path, node, text, parent = nodes[index]
        is_match = (
            matched[index]
            or normalized_term in text
            or (isinstance(node, str) and normalized_term in node.lower())
        )
        if is_match:
            visible.add(path)
            if parent >= 0:
                matched[parent] = True
        matched[index] = is_match

    return VisibilityIndex(
        visible_paths=frozenset(visible),
        has_any_match=matched[0],
        term=normalized_term,
    )


def filter_visibility(root: Any, raw_term: str) -> VisibilityIndex | None:
    """Normalize ``raw_term`` and index ``root``.

    Returns:
        None for a blank term (nothing is filtered, every node is visible),
        otherwise the ``VisibilityIndex`` for the normalized term.
    """
    term = normalize_term(raw_term)
    if not term:
        return None
    return compute_visibility(root, term)

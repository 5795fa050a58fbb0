"""JSONPath queries whose matches are addressed by structured ``Path`` objects.

Evaluation is delegated to ``jsonpath_ng.ext`` (which adds filter
expressions such as ``$.items[?(@.price > 50)]`` to the base grammar).  Each
match's context chain is converted to a ``Path`` so query results can drive
tree selection and visibility exactly like search results do.

Example::

    query({"items": [{"id": 1}, {"id": 2}]}, "$.items[*].id")
    # [QueryMatch(path=Path(('items', 0, 'id')), value=1),
    #  QueryMatch(path=Path(('items', 1, 'id')), value=2)]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse as jsonpath_parse
from jsonpath_ng.jsonpath import Child, DatumInContext, Fields, Index, Root, This

from json_explorer.errors import JsonPathQueryError
from json_explorer.path import Path, PathSegment, resolve

__all__ = ["QueryMatch", "query", "query_paths"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryMatch:
    """One JSONPath match.

    Attributes:
        path:  Address of the matched node, or None for computed results
               (e.g. the ``len`` extension) that do not live in the document.
        value: The matched value.
    """

    path: Path | None
    value: Any


def query(value: Any, expression: str) -> list[QueryMatch]:
    """Evaluate a JSONPath expression against a JSON value.

    Args:
        value:      JSON value to search.
        expression: JSONPath expression, e.g. ``$..name``.

    Returns:
        Matches in evaluation order; empty when nothing matches.

    Raises:
        JsonPathQueryError: If the expression is invalid or fails to evaluate.
    """
    try:
        compiled = jsonpath_parse(expression)
    except (JSONPathError, ValueError) as exc:
        logger.debug("JSONPath parse failed for %r: %s", expression, exc)
        raise JsonPathQueryError(expression, str(exc)) from exc

    try:
        found = compiled.find(value)
    except (TypeError, ValueError, KeyError) as exc:
        logger.debug("JSONPath evaluation failed for %r: %s", expression, exc)
        raise JsonPathQueryError(expression, str(exc)) from exc

    matches: list[QueryMatch] = []
    for datum in found:
        path = _to_path(datum)
        # filters over objects re-index dict values; such paths do not resolve
        if path is not None and resolve(value, path) is not datum.value:
            path = None
        matches.append(QueryMatch(path=path, value=datum.value))
    return matches


def query_paths(value: Any, expression: str) -> list[Path]:
    """Return only the document paths matched by ``expression``."""
    return [match.path for match in query(value, expression) if match.path is not None]


# ---------------------------------------------------------------------------
# Context chain -> Path conversion
# ---------------------------------------------------------------------------


def _to_path(datum: DatumInContext) -> Path | None:
    """Walk a match's context chain up to the root, collecting segments."""
    reversed_segments: list[PathSegment] = []
    current: DatumInContext | None = datum
    while current is not None and current.context is not None:
        parent_value = current.context.value
        segments = _segments_of(current.path, parent_value)
        if segments is None:
            return None
        reversed_segments.extend(reversed(segments))
        current = current.context
    return Path(tuple(reversed(reversed_segments)))


def _segments_of(node: Any, parent_value: Any) -> list[PathSegment] | None:
    """Segments contributed by one JSONPath node, or None when not addressable."""
    if isinstance(node, (Root, This)):
        return []
    if isinstance(node, Fields):
        return [node.fields[0]]
    if isinstance(node, Index):
        indices = getattr(node, "indices", None) or (node.index,)
        index = int(indices[0])
        if index < 0 and isinstance(parent_value, list):
            index += len(parent_value)
        return [index] if index >= 0 else None
    if isinstance(node, Child):
        left = _segments_of(node.left, parent_value)
        right = _segments_of(node.right, parent_value)
        if left is None or right is None:
            return None
        return left + right
    return None

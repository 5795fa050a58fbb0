"""JSON explorer core - structural diff, search visibility and path addressing for JSON documents."""

from __future__ import annotations

from json_explorer.differ import (
    DiffConfig,
    DiffEntry,
    DiffKind,
    DiffStatistics,
    KeyOrder,
    StructuralDiffer,
    diff,
    group_by_kind,
    summarize,
)
from json_explorer.errors import JsonParseError, JsonPathQueryError
from json_explorer.explorer import MemoizedExplorer
from json_explorer.formatting import (
    DocumentStats,
    IndentStyle,
    calculate_stats,
    format_json,
    minify_json,
)
from json_explorer.parsing import load_json_file, parse_json
from json_explorer.path import Path, equals, extend, resolve, to_display_string
from json_explorer.query import QueryMatch, query, query_paths
from json_explorer.values import ABSENT, ValueKind, kind_of
from json_explorer.visibility import (
    VisibilityIndex,
    compute_visibility,
    filter_visibility,
    normalize_term,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "DiffConfig",
    "DiffEntry",
    "DiffKind",
    "DiffStatistics",
    "DocumentStats",
    "IndentStyle",
    "JsonParseError",
    "JsonPathQueryError",
    "KeyOrder",
    "MemoizedExplorer",
    "Path",
    "QueryMatch",
    "StructuralDiffer",
    "ValueKind",
    "VisibilityIndex",
    "calculate_stats",
    "compute_visibility",
    "diff",
    "equals",
    "extend",
    "filter_visibility",
    "format_json",
    "group_by_kind",
    "kind_of",
    "load_json_file",
    "minify_json",
    "normalize_term",
    "parse_json",
    "query",
    "query_paths",
    "resolve",
    "summarize",
    "to_display_string",
]

"""Pretty-printing, minifying and structural statistics for JSON values."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from json_explorer.values import ValueKind, kind_of

__all__ = [
    "DocumentStats",
    "IndentStyle",
    "calculate_stats",
    "format_json",
    "minify_json",
]


class IndentStyle(StrEnum):
    """Indentation offered by the formatter: two spaces, four spaces or a tab."""

    TWO = "2"
    FOUR = "4"
    TAB = "tab"

    @property
    def indent(self) -> int | str:
        """The ``indent`` argument understood by ``json.dumps``."""
        return "\t" if self is IndentStyle.TAB else int(self.value)


def format_json(
    value: Any,
    indent: IndentStyle | str = IndentStyle.TWO,
    sort_keys: bool = False,
    minify: bool = False,
) -> str:
    """Serialize a JSON value for display.

    Args:
        value:     JSON value to serialize.
        indent:    Indentation style; ignored when ``minify`` is True.
        sort_keys: Sort object keys at every nesting level.
        minify:    Emit the most compact form (no whitespace at all).

    Returns:
        The serialized text.  Non-ASCII characters are kept as-is.

    Raises:
        ValueError: If ``indent`` is not a known ``IndentStyle``.
        TypeError:  If ``value`` contains a non-JSON Python value.
    """
    if minify:
        return json.dumps(
            value, sort_keys=sort_keys, ensure_ascii=False, separators=(",", ":")
        )
    style = IndentStyle(indent)
    return json.dumps(value, indent=style.indent, sort_keys=sort_keys, ensure_ascii=False)


def minify_json(value: Any) -> str:
    """Serialize ``value`` without any whitespace."""
    return format_json(value, minify=True)


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Node counts and nesting depth of a JSON document.

    Attributes:
        objects, arrays, strings, numbers, booleans, nulls: Nodes per kind.
        keys:        Total number of object keys across all objects.
        total_nodes: Every node, containers included.
        max_depth:   Nesting depth; a lone scalar root has depth 1.
    """

    objects: int = 0
    arrays: int = 0
    strings: int = 0
    numbers: int = 0
    booleans: int = 0
    nulls: int = 0
    keys: int = 0
    total_nodes: int = 0
    max_depth: int = 0


_KIND_FIELDS = {
    ValueKind.OBJECT: "objects",
    ValueKind.ARRAY: "arrays",
    ValueKind.STRING: "strings",
    ValueKind.NUMBER: "numbers",
    ValueKind.BOOLEAN: "booleans",
    ValueKind.NULL: "nulls",
}


def calculate_stats(value: Any) -> DocumentStats:
    """Count the nodes of ``value`` by kind and measure its nesting depth."""
    counts = dict.fromkeys(_KIND_FIELDS.values(), 0)
    keys = 0
    total = 0
    max_depth = 0

    stack: list[tuple[Any, int]] = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        kind = kind_of(node)
        counts[_KIND_FIELDS[kind]] += 1
        total += 1
        max_depth = max(max_depth, depth)

        if kind == ValueKind.OBJECT:
            keys += len(node)
            stack.extend((child, depth + 1) for child in node.values())
        elif kind == ValueKind.ARRAY:
            stack.extend((child, depth + 1) for child in node)

    return DocumentStats(**counts, keys=keys, total_nodes=total, max_depth=max_depth)

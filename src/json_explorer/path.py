"""Path: structured address of a node inside a JSON value.

A path is the ordered sequence of segments leading from the root to a node.
An ``int`` segment is an array index and a ``str`` segment is an object key.
Identity is defined on the segment tuple, never on a rendered string, so
array index ``0`` and object key ``"0"`` are different addresses and hash
differently when used as set members or dict keys.

Renderings (presentation only):
- ``to_display_string``: ``user.tags[0]["first name"]`` (root is ``root``)
- ``to_pointer``:        RFC 6901 JSON Pointer, e.g. ``/user/tags/0``
- ``to_search_text``:    lowercased dotted text used for search matching
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from json_explorer.values import ABSENT

__all__ = [
    "Path",
    "PathSegment",
    "equals",
    "extend",
    "resolve",
    "to_display_string",
]

PathSegment = int | str

# Object keys rendered bare in display strings (JavaScript-style identifiers)
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

ROOT_DISPLAY = "root"


def _check_segment(segment: Any) -> PathSegment:
    # bool subclasses int; True would otherwise compare equal to index 1
    if isinstance(segment, bool) or not isinstance(segment, (int, str)):
        msg = f"Path segment must be int or str, got {type(segment)!r}"
        raise TypeError(msg)
    if isinstance(segment, int) and segment < 0:
        msg = f"Array index segments must be >= 0, got {segment}"
        raise ValueError(msg)
    return segment


@dataclass(frozen=True, slots=True)
class Path:
    """Immutable, hashable sequence of path segments.

    Attributes:
        segments: Tuple of segments from the root.  Empty for the root path.

    Example::

        p = Path.root().extend("users").extend(0)
        p.to_display_string()   # "users[0]"
        p == Path.of("users", 0)  # True
        p == Path.of("users", "0")  # False
    """

    segments: tuple[PathSegment, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.segments, tuple):
            msg = f"segments must be a tuple, got {type(self.segments)!r}"
            raise TypeError(msg)
        for segment in self.segments:
            _check_segment(segment)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def root(cls) -> Path:
        """Return the empty path addressing the document root."""
        return _ROOT

    @classmethod
    def of(cls, *segments: PathSegment) -> Path:
        """Build a path from positional segments."""
        return cls(tuple(segments))

    def extend(self, segment: PathSegment) -> Path:
        """Return a new path with ``segment`` appended.  ``self`` is unchanged."""
        return Path((*self.segments, _check_segment(segment)))

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def parent(self) -> Path | None:
        """The enclosing path, or None for the root."""
        if not self.segments:
            return None
        return Path(self.segments[:-1])

    @property
    def last(self) -> PathSegment | None:
        """The final segment, or None for the root."""
        return self.segments[-1] if self.segments else None

    def is_prefix_of(self, other: Path) -> bool:
        """Return True when ``self`` equals ``other`` or is one of its ancestors."""
        n = len(self.segments)
        return n <= len(other.segments) and other.segments[:n] == self.segments

    def ancestors(self) -> list[Path]:
        """Return every proper ancestor, root first."""
        return [Path(self.segments[:i]) for i in range(len(self.segments))]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self.segments)

    # ------------------------------------------------------------------
    # Renderings
    # ------------------------------------------------------------------

    def to_display_string(self) -> str:
        """Render as ``a.b[0]["not an identifier"]``; the root is ``root``."""
        if not self.segments:
            return ROOT_DISPLAY

        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, int):
                parts.append(f"[{segment}]")
            elif _IDENTIFIER.match(segment):
                parts.append(f".{segment}" if parts else segment)
            else:
                parts.append(f"[{json.dumps(segment, ensure_ascii=False)}]")
        return "".join(parts)

    def to_pointer(self) -> str:
        """Render as an RFC 6901 JSON Pointer (root is the empty string)."""
        return "".join(
            "/" + str(segment).replace("~", "~0").replace("/", "~1")
            for segment in self.segments
        )

    def to_search_text(self) -> str:
        """Lowercased segments joined by ``.``; the root is the empty string."""
        return ".".join(str(segment).lower() for segment in self.segments)

    def __str__(self) -> str:
        return self.to_display_string()


_ROOT = Path()


def extend(path: Path, segment: PathSegment) -> Path:
    """Return ``path`` with ``segment`` appended, leaving ``path`` unchanged."""
    return path.extend(segment)


def equals(a: Path, b: Path) -> bool:
    """Return True when both paths have the same segment sequence."""
    return a.segments == b.segments


def to_display_string(path: Path) -> str:
    """Render ``path`` for display (see ``Path.to_display_string``)."""
    return path.to_display_string()


def resolve(value: Any, path: Path, default: Any = ABSENT) -> Any:
    """Return the node addressed by ``path`` inside ``value``.

    An index segment only matches inside an array and a key segment only
    inside an object; any segment that does not exist yields ``default``.

    Args:
        value:   Root JSON value.
        path:    Address of the node to fetch.
        default: Returned when the path does not exist.  Defaults to ``ABSENT``
                 so a JSON ``null`` at the path stays distinguishable.

    Returns:
        The addressed node, or ``default``.
    """
    node = value
    for segment in path.segments:
        if isinstance(segment, int):
            if not isinstance(node, list) or segment >= len(node):
                return default
            node = node[segment]
        else:
            if not isinstance(node, dict) or segment not in node:
                return default
            node = node[segment]
    return node

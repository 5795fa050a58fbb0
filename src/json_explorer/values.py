"""ValueKind StrEnum and the ABSENT sentinel for the JSON value model.

JSON values are the native Python objects produced by ``json.loads``:
``None``, ``bool``, ``int``, ``float``, ``str``, ``list`` and ``dict``.
``kind_of`` classifies them into the six JSON kinds so that every consumer
(differ, visibility indexer, statistics) dispatches on one exhaustive tag
instead of ad-hoc ``isinstance`` chains.

``ABSENT`` marks a key or index that does not exist on one side of a
comparison.  It is distinct from ``None``, which is the JSON
``null`` value and is compared like any other scalar.
"""

from __future__ import annotations

from enum import Enum, StrEnum, auto
from typing import Any, Final

__all__ = ["ABSENT", "Absent", "JsonValue", "ValueKind", "is_container", "kind_of"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """The six kinds of JSON value.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : int and float alike
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


class Absent(Enum):
    """Single-member enum whose only member is the ``ABSENT`` sentinel."""

    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent.ABSENT

SCALAR_KINDS: Final = frozenset(
    {ValueKind.NULL, ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING}
)


def kind_of(value: Any) -> ValueKind:
    """Classify a JSON value.

    The dispatch order matters: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Args:
        value: Any valid JSON value (dict, list, str, int, float, bool, None).

    Returns:
        The ``ValueKind`` of ``value``.

    Raises:
        TypeError: If value is not a valid JSON type (this includes ``ABSENT``).
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT

    msg = f"Unsupported JSON value type: {type(value)!r}"
    raise TypeError(msg)


def is_container(value: Any) -> bool:
    """Return True for JSON arrays and objects."""
    return isinstance(value, (list, dict))

"""DiffConfig and KeyOrder for structural diff configuration.

DiffConfig is a frozen (immutable) dataclass holding the differ options.
KeyOrder selects the deterministic order in which the union of object keys
is visited.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DiffConfig", "KeyOrder"]


class KeyOrder(StrEnum):
    """Order of the object key union during diffing.

    - INSERTION: old-document keys in their order, then new-only keys in theirs.
    - SORTED:    lexicographic order of the key union.
    """

    INSERTION = auto()
    SORTED = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for the structural differ.

    Attributes:
        include_unchanged: When True, equal scalar leaves are reported as
            UNCHANGED entries.  Default False (differences only).
        key_order: Visiting order of object keys (see KeyOrder).
        null_equals_missing: When True, a JSON null object value is treated
            as equivalent to a missing key.  Default False.
    """

    include_unchanged: bool = False
    key_order: KeyOrder = KeyOrder.INSERTION
    null_equals_missing: bool = False

    def __post_init__(self) -> None:
        for name in ("include_unchanged", "null_equals_missing"):
            flag = getattr(self, name)
            if not isinstance(flag, bool):
                msg = f"{name} must be a bool, got {type(flag).__name__}"
                raise TypeError(msg)
        try:
            key_order = KeyOrder(self.key_order)
        except ValueError:
            msg = f"key_order must be one of {[k.value for k in KeyOrder]}, got {self.key_order!r}"
            raise ValueError(msg) from None
        # frozen: normalize plain strings to the enum member
        object.__setattr__(self, "key_order", key_order)

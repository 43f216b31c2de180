"""zk type annotations."""

from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """The closed set of type names accepted in annotations."""

    VOID = "void"
    INT = "int"

    @classmethod
    def from_name(cls, name: str) -> ValueType | None:
        """Return the type spelled *name*, or None if it is not recognized."""
        for member in cls:
            if member.value == name:
                return member
        return None

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

"""
Errors — Failures raised while building reflection tables.

Lookups never raise: a missing name, value or index is reported as None.
Everything here is a precondition violation at the declaration boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from enumreflect.vocabulary import UnderlyingType


class ReflectionError(Exception):
    """Base class for reflection build failures."""
    pass


class StructuralMismatchError(ReflectionError):
    """
    Raised when declaration text and resolved values disagree.

    Covers too few or too many identifiers, unbalanced initializer
    parentheses, and malformed identifiers.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: int | None = None,
        found: int | None = None,
        position: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.found = found
        self.position = position


class DuplicateNameError(ReflectionError):
    """Raised when two enumerators share a name."""

    def __init__(self, name: str, first_index: int, second_index: int):
        super().__init__(
            f"Duplicate enumerator name '{name}' at index {second_index} "
            f"(first declared at index {first_index})"
        )
        self.name = name
        self.first_index = first_index
        self.second_index = second_index


class ValueOutOfRangeError(ReflectionError):
    """Raised when a resolved value does not fit the underlying type."""

    def __init__(self, index: int, value: int, underlying: "UnderlyingType"):
        super().__init__(
            f"Value {value} of enumerator #{index} does not fit {underlying.value} "
            f"[{underlying.min_value}, {underlying.max_value}]"
        )
        self.index = index
        self.value = value
        self.underlying = underlying


class RegistrationError(ReflectionError):
    """Raised for unknown or conflicting registry entries."""
    pass

"""
Value Resolver — Computes enumerator values from declaration slots.

Each slot either states its value or takes the previous value plus one
(zero for the first slot). An explicit value resets the baseline for the
implicit slots that follow it, exactly like C-style enum auto-increment.
"""

from dataclasses import dataclass
from typing import Iterable, Union

from enumreflect.errors import ValueOutOfRangeError
from enumreflect.vocabulary import UnderlyingType


@dataclass(frozen=True)
class EnumeratorSlot:
    """
    Value specification for one declaration position.

    value is None for an implicit slot.
    """
    value: int | None = None

    @classmethod
    def explicit(cls, value: int) -> "EnumeratorSlot":
        _require_int(value)
        return cls(value=value)

    @classmethod
    def implicit(cls) -> "EnumeratorSlot":
        return cls(value=None)

    @property
    def is_implicit(self) -> bool:
        return self.value is None


SlotLike = Union[EnumeratorSlot, int, None]


def _require_int(value: object) -> None:
    # bool is an int subclass but never a meaningful enumerator value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Enumerator value must be an int, got {type(value).__name__}")


def as_slot(slot: SlotLike) -> EnumeratorSlot:
    """Normalize an int (explicit) or None (implicit) into a slot."""
    if isinstance(slot, EnumeratorSlot):
        if slot.value is not None:
            _require_int(slot.value)
        return slot
    if slot is None:
        return EnumeratorSlot.implicit()
    return EnumeratorSlot.explicit(slot)


def resolve_values(
    slots: Iterable[SlotLike],
    underlying: UnderlyingType | None = None,
) -> list[int]:
    """
    Resolve a slot sequence into one value per enumerator.

    Args:
        slots: Declaration slots in source order
        underlying: Optional integer type every value must fit

    Returns:
        Resolved values, index i belonging to the i-th declared enumerator

    Raises:
        ValueOutOfRangeError: A value does not fit the underlying type
        TypeError: An explicit value is not an int
    """
    resolved: list[int] = []
    next_value = 0

    for index, raw in enumerate(slots):
        slot = as_slot(raw)
        value = next_value if slot.is_implicit else slot.value

        if underlying is not None and not underlying.contains(value):
            raise ValueOutOfRangeError(index, value, underlying)

        resolved.append(value)
        next_value = value + 1

    return resolved

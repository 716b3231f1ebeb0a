"""
Enum Reflector — Read-only queries over a reflection table.

Every lookup is total: a missing name, value or index returns None.
When several enumerators share a value, the first declared one answers
value-keyed lookups.
"""

from __future__ import annotations

from typing import Hashable, Iterator

from enumreflect.table.table import Enumerator, ReflectionTable
from enumreflect.vocabulary import UnderlyingType


class EnumReflector:
    """
    Query facade for one enumeration.

    Holds no mutable state; safe to share between threads.
    """

    def __init__(self, table: ReflectionTable):
        self._table = table

    def __repr__(self) -> str:
        return f"EnumReflector({self._table.type_name!r}, count={self.count})"

    # -------------------------------------------------------------------------
    # Type-level
    # -------------------------------------------------------------------------

    @property
    def table(self) -> ReflectionTable:
        return self._table

    @property
    def type_name(self) -> str:
        """The enumeration's declared name."""
        return self._table.type_name

    @property
    def underlying(self) -> UnderlyingType | None:
        return self._table.underlying

    @property
    def count(self) -> int:
        """Number of declared enumerators, aliases included."""
        return len(self._table.by_index)

    def __len__(self) -> int:
        return self.count

    @property
    def names(self) -> list[str]:
        return [e.name for e in self._table.by_index]

    @property
    def values(self) -> list[int]:
        return [e.value for e in self._table.by_index]

    # -------------------------------------------------------------------------
    # Positional
    # -------------------------------------------------------------------------

    def at(self, index: int) -> Enumerator | None:
        """Enumerator at index, or None when out of range."""
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if 0 <= index < self.count:
            return self._table.by_index[index]
        return None

    def name_at(self, index: int) -> str | None:
        enumerator = self.at(index)
        return enumerator.name if enumerator is not None else None

    def value_at(self, index: int) -> int | None:
        enumerator = self.at(index)
        return enumerator.value if enumerator is not None else None

    # -------------------------------------------------------------------------
    # By value (first declared wins)
    # -------------------------------------------------------------------------

    def aliases_of(self, value: Hashable) -> tuple[Enumerator, ...]:
        """All enumerators with value, in declaration order."""
        try:
            return self._table.by_value.get(value, ())
        except TypeError:
            return ()

    def find_by_value(self, value: Hashable) -> Enumerator | None:
        bucket = self.aliases_of(value)
        return bucket[0] if bucket else None

    def name_of(self, value: Hashable) -> str | None:
        """Name of the first declared enumerator with value."""
        enumerator = self.find_by_value(value)
        return enumerator.name if enumerator is not None else None

    def index_of_value(self, value: Hashable) -> int | None:
        """Index of the first declared enumerator with value."""
        enumerator = self.find_by_value(value)
        return enumerator.index if enumerator is not None else None

    # -------------------------------------------------------------------------
    # By name
    # -------------------------------------------------------------------------

    def find_by_name(self, name: Hashable) -> Enumerator | None:
        try:
            return self._table.by_name.get(name)
        except TypeError:
            return None

    def value_of(self, name: Hashable) -> int | None:
        enumerator = self.find_by_name(name)
        return enumerator.value if enumerator is not None else None

    def index_of_name(self, name: Hashable) -> int | None:
        enumerator = self.find_by_name(name)
        return enumerator.index if enumerator is not None else None

    def __contains__(self, name: object) -> bool:
        return self.find_by_name(name) is not None

    def find(self, key: Hashable) -> Enumerator | None:
        """Look up by name when key is a str, by value otherwise."""
        if isinstance(key, str):
            return self.find_by_name(key)
        return self.find_by_value(key)

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Enumerator]:
        return iter(self._table.by_index)

    def __reversed__(self) -> Iterator[Enumerator]:
        return reversed(self._table.by_index)

    def cursor(self, index: int = 0) -> "EnumeratorCursor":
        """Cursor positioned at index (the first enumerator by default)."""
        return EnumeratorCursor(self, index)

    def cursor_at_end(self) -> "EnumeratorCursor":
        """Invalid cursor one past the last enumerator."""
        return EnumeratorCursor(self, self.count)


class EnumeratorCursor:
    """
    Bidirectional position over an enumeration.

    Valid while its index is in range. advance() and retreat() step
    in place and return the cursor, so it can run past either end and
    come back.
    """

    def __init__(self, reflector: EnumReflector, index: int):
        self._reflector = reflector
        self._index = index

    def __repr__(self) -> str:
        return f"EnumeratorCursor({self._reflector.type_name!r}, index={self._index})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumeratorCursor):
            return NotImplemented
        return self._reflector is other._reflector and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._reflector), self._index))

    @property
    def reflector(self) -> EnumReflector:
        return self._reflector

    @property
    def index(self) -> int:
        return self._index

    @property
    def enumerator(self) -> Enumerator | None:
        return self._reflector.at(self._index)

    @property
    def is_valid(self) -> bool:
        return 0 <= self._index < self._reflector.count

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def name(self) -> str | None:
        return self._reflector.name_at(self._index)

    @property
    def value(self) -> int | None:
        return self._reflector.value_at(self._index)

    def advance(self) -> "EnumeratorCursor":
        self._index += 1
        return self

    def retreat(self) -> "EnumeratorCursor":
        self._index -= 1
        return self

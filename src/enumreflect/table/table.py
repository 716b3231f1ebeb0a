"""
Reflection Table — Immutable index/value/name views of one enumeration.

Three views are derived from a single ordered list of enumerators:
- by_index: declaration order
- by_value: value -> enumerators sharing it, first declared first
- by_name: name -> enumerator, names unique
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from enumreflect.errors import DuplicateNameError, StructuralMismatchError
from enumreflect.vocabulary import UnderlyingType


@dataclass(frozen=True)
class Enumerator:
    """One named, valued member of an enumeration."""
    index: int
    value: int
    name: str


@dataclass(frozen=True, eq=False)
class ReflectionTable:
    """
    Built once per enumeration type, read-only afterwards.

    Use build_table() rather than constructing directly.
    """
    type_name: str
    by_index: tuple[Enumerator, ...]
    by_value: Mapping[int, tuple[Enumerator, ...]]
    by_name: Mapping[str, Enumerator]
    underlying: UnderlyingType | None = None

    @property
    def count(self) -> int:
        return len(self.by_index)


def build_table(
    type_name: str,
    values: Sequence[int],
    names: Sequence[str],
    underlying: UnderlyingType | None = None,
) -> ReflectionTable:
    """
    Align values and names positionally into a reflection table.

    Args:
        type_name: Name of the enumeration type
        values: Resolved values in declaration order
        names: Enumerator names in declaration order
        underlying: Underlying integer type, if declared

    Raises:
        StructuralMismatchError: values and names differ in length
        DuplicateNameError: Two enumerators share a name
    """
    if len(values) != len(names):
        raise StructuralMismatchError(
            f"{type_name}: {len(values)} values but {len(names)} names",
            expected=len(values),
            found=len(names),
        )

    by_index: list[Enumerator] = []
    by_value: dict[int, list[Enumerator]] = {}
    by_name: dict[str, Enumerator] = {}

    for index, (value, name) in enumerate(zip(values, names)):
        enumerator = Enumerator(index=index, value=value, name=name)

        existing = by_name.get(name)
        if existing is not None:
            raise DuplicateNameError(name, existing.index, index)

        by_index.append(enumerator)
        by_value.setdefault(value, []).append(enumerator)
        by_name[name] = enumerator

    return ReflectionTable(
        type_name=type_name,
        by_index=tuple(by_index),
        by_value=MappingProxyType({v: tuple(bucket) for v, bucket in by_value.items()}),
        by_name=MappingProxyType(by_name),
        underlying=underlying,
    )

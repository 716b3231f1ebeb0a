"""
Host Adapter — Registers Python enum classes.

Reads names and values from the class's members (aliases included, in
definition order) and registers them under the class itself. Member names
are passed through as-is, so non-ASCII identifiers survive.

Usage:
    @reflect
    class Port(IntEnum):
        HTTP = 80
        SECURE_SHELL = 22
        SSH = 22

    reflector_for(Port).name_of(22)  # "SECURE_SHELL"
"""

from enum import Enum
from typing import Callable, TypeVar, overload

from enumreflect.registry.registry import ReflectionRegistry, get_registry
from enumreflect.schemas import EnumDeclaration
from enumreflect.vocabulary import UnderlyingType

E = TypeVar("E", bound=type[Enum])


def declaration_from_enum(
    enum_cls: type[Enum],
    underlying: UnderlyingType | None = None,
) -> EnumDeclaration:
    """
    Describe a Python enum class as a declaration.

    Raises:
        TypeError: Not an Enum subclass, or a member value is not an int
    """
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise TypeError(f"{enum_cls!r} is not an Enum class")

    members = enum_cls.__members__
    names = list(members)
    values: list[int] = []
    for name, member in members.items():
        value = member.value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"{enum_cls.__name__}.{name} has non-integer value {value!r}"
            )
        values.append(int(value))

    return EnumDeclaration(
        type_name=enum_cls.__name__,
        raw_text=", ".join(names),
        values=values,
        names=names,
        underlying=underlying,
    )


@overload
def reflect(enum_cls: E) -> E: ...


@overload
def reflect(
    enum_cls: None = None,
    *,
    underlying: UnderlyingType | None = None,
    registry: ReflectionRegistry | None = None,
) -> Callable[[E], E]: ...


def reflect(enum_cls=None, *, underlying=None, registry=None):
    """
    Register an integer-valued Enum class, as a call or a decorator.

    Returns the class unchanged. The table is built on first lookup.
    """
    def register(cls):
        declaration = declaration_from_enum(cls, underlying=underlying)
        target = registry if registry is not None else get_registry()
        target.register(cls, declaration)
        return cls

    if enum_cls is None:
        return register
    return register(enum_cls)

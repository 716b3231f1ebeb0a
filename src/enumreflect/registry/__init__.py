"""
Registry — Build-once reflectors keyed by enumeration type.

- ReflectionRegistry: lazy, memoized, thread-safe first use
- Host adapter: registers Python Enum classes
"""

from enumreflect.registry.registry import (
    ReflectionRegistry,
    create_registry,
    get_registry,
    register_enum,
    reflector_for,
)
from enumreflect.registry.host import (
    declaration_from_enum,
    reflect,
)

__all__ = [
    # Registry
    "ReflectionRegistry",
    "create_registry",
    "get_registry",
    "register_enum",
    "reflector_for",
    # Host adapter
    "declaration_from_enum",
    "reflect",
]

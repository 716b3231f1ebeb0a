"""
Table — Reflection tables and the queries over them.

- Table: immutable index/value/name views
- Reflector: total lookups and bidirectional iteration
- Builder: declaration to reflector pipeline
"""

from enumreflect.table.table import (
    Enumerator,
    ReflectionTable,
    build_table,
)
from enumreflect.table.reflector import (
    EnumReflector,
    EnumeratorCursor,
)
from enumreflect.table.builder import (
    ReflectionBuilder,
    create_builder,
)

__all__ = [
    # Table
    "Enumerator",
    "ReflectionTable",
    "build_table",
    # Reflector
    "EnumReflector",
    "EnumeratorCursor",
    # Builder
    "ReflectionBuilder",
    "create_builder",
]

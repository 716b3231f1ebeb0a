"""
enumreflect — Reflection tables for integer enumerations.

Builds, once per enumeration type, an immutable table linking each
enumerator's declaration index, value and name, and answers lookups in
every direction.
"""

__version__ = "0.1.0"

from enumreflect.errors import (
    ReflectionError,
    StructuralMismatchError,
    DuplicateNameError,
    ValueOutOfRangeError,
    RegistrationError,
)
from enumreflect.vocabulary import ScanState, UnderlyingType
from enumreflect.parsing import (
    EnumeratorSlot,
    NameTokenizer,
    resolve_values,
    tokenize,
)
from enumreflect.schemas import EnumDeclaration
from enumreflect.table import (
    Enumerator,
    ReflectionTable,
    EnumReflector,
    EnumeratorCursor,
    ReflectionBuilder,
    build_table,
    create_builder,
)
from enumreflect.registry import (
    ReflectionRegistry,
    create_registry,
    get_registry,
    register_enum,
    reflector_for,
    reflect,
)
from enumreflect.validation import (
    DeclarationValidator,
    ValidationResult,
    validate_declaration,
)

__all__ = [
    "__version__",
    # Errors
    "ReflectionError",
    "StructuralMismatchError",
    "DuplicateNameError",
    "ValueOutOfRangeError",
    "RegistrationError",
    # Vocabulary
    "ScanState",
    "UnderlyingType",
    # Parsing
    "EnumeratorSlot",
    "NameTokenizer",
    "resolve_values",
    "tokenize",
    # Declarations
    "EnumDeclaration",
    # Table
    "Enumerator",
    "ReflectionTable",
    "EnumReflector",
    "EnumeratorCursor",
    "ReflectionBuilder",
    "build_table",
    "create_builder",
    # Registry
    "ReflectionRegistry",
    "create_registry",
    "get_registry",
    "register_enum",
    "reflector_for",
    "reflect",
    # Validation
    "DeclarationValidator",
    "ValidationResult",
    "validate_declaration",
]

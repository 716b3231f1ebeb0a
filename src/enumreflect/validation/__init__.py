"""
Validation — Non-raising diagnostics for enum declarations.
"""

from enumreflect.validation.declaration_validator import (
    DeclarationValidator,
    ValidationResult,
    validate_declaration,
    create_validator,
)

__all__ = [
    "DeclarationValidator",
    "ValidationResult",
    "validate_declaration",
    "create_validator",
]

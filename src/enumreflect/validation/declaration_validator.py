"""
Declaration Validator — Diagnoses a declaration without building it.

Runs the same checks the builder enforces and reports every problem at
once instead of raising on the first one:
- Values fit the underlying type
- Declaration text is well formed
- Name count matches value count
- Names are unique

Aliases are legal and reported as warnings.
"""

from dataclasses import dataclass

from enumreflect.errors import StructuralMismatchError, ValueOutOfRangeError
from enumreflect.parsing import NameTokenizer
from enumreflect.schemas import EnumDeclaration


@dataclass
class ValidationResult:
    """Result of a validation check."""
    valid: bool
    errors: list[str]
    warnings: list[str]

    @classmethod
    def success(cls, warnings: list[str] | None = None) -> "ValidationResult":
        return cls(valid=True, errors=[], warnings=warnings or [])

    @classmethod
    def failure(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        return cls(valid=False, errors=errors, warnings=warnings or [])

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Combine two results."""
        return ValidationResult(
            valid=self.valid and other.valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )


class DeclarationValidator:
    """
    Validates declarations ahead of registration.
    """

    def __init__(self, tokenizer: NameTokenizer | None = None):
        self.tokenizer = tokenizer or NameTokenizer()

    def validate(self, declaration: EnumDeclaration) -> ValidationResult:
        """
        Validate a declaration.

        Checks:
        1. Value resolution
        2. Name extraction
        3. Name/value alignment
        """
        values, result = self._validate_values(declaration)
        names, name_result = self._validate_names(declaration)
        result = result.merge(name_result)

        if names is not None:
            result = result.merge(self._validate_alignment(declaration, values, names))

        return result

    def _validate_values(
        self, declaration: EnumDeclaration
    ) -> tuple[list[int] | None, ValidationResult]:
        try:
            return declaration.resolved_values(), ValidationResult.success()
        except ValueOutOfRangeError as e:
            return None, ValidationResult.failure([str(e)])

    def _validate_names(
        self, declaration: EnumDeclaration
    ) -> tuple[list[str] | None, ValidationResult]:
        if declaration.names is not None:
            names = list(declaration.names)
        else:
            try:
                names = [token.name for token in self.tokenizer.scan(declaration.raw_text)]
            except StructuralMismatchError as e:
                return None, ValidationResult.failure([str(e)])

        errors = []
        first_seen: dict[str, int] = {}
        for index, name in enumerate(names):
            if name in first_seen:
                errors.append(
                    f"Duplicate enumerator name '{name}' at index {index} "
                    f"(first declared at index {first_seen[name]})"
                )
            else:
                first_seen[name] = index

        if errors:
            return names, ValidationResult.failure(errors)
        return names, ValidationResult.success()

    def _validate_alignment(
        self,
        declaration: EnumDeclaration,
        values: list[int] | None,
        names: list[str],
    ) -> ValidationResult:
        if len(names) != declaration.count:
            return ValidationResult.failure([
                f"Found {len(names)} enumerator names for {declaration.count} values"
            ])

        if values is None:
            return ValidationResult.success()

        warnings = []
        first_by_value: dict[int, str] = {}
        for name, value in zip(names, values):
            if value in first_by_value:
                warnings.append(
                    f"'{name}' aliases '{first_by_value[value]}' (value {value}); "
                    f"lookups by value return '{first_by_value[value]}'"
                )
            else:
                first_by_value[value] = name

        return ValidationResult.success(warnings)


def validate_declaration(declaration: EnumDeclaration) -> ValidationResult:
    """Convenience function for validation."""
    return DeclarationValidator().validate(declaration)


def create_validator(tokenizer: NameTokenizer | None = None) -> DeclarationValidator:
    """Factory for declaration validator."""
    return DeclarationValidator(tokenizer=tokenizer)

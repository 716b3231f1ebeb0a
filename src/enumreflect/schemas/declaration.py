"""
Enum Declaration — The inputs that describe one enumeration.

A declaration carries the enum's name, its raw clause list as written,
and either the already-resolved values or the slots to resolve them from.
Names come from scanning the raw text unless they are given directly.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator

from enumreflect.parsing import resolve_values
from enumreflect.vocabulary import UnderlyingType


class EnumDeclaration(BaseModel):
    """
    Declaration of one enumeration type.

    Exactly one of values or slots must be given. In slots, None marks an
    implicit (auto-incremented) position.
    """
    model_config = ConfigDict(frozen=True)

    type_name: str = Field(
        ...,
        description="Declared name of the enumeration type"
    )

    raw_text: str = Field(
        ...,
        description="Comma-separated enumerator clauses as written"
    )

    values: list[StrictInt] | None = Field(
        default=None,
        description="Resolved value per enumerator, in declaration order"
    )

    slots: list[StrictInt | None] | None = Field(
        default=None,
        description="Explicit value or None (previous + 1) per enumerator"
    )

    underlying: UnderlyingType | None = Field(
        default=None,
        description="Fixed-width integer type the values must fit"
    )

    names: list[str] | None = Field(
        default=None,
        description="Enumerator names when already known; skips scanning raw_text"
    )

    @field_validator("type_name")
    @classmethod
    def type_name_is_identifier(cls, v: str) -> str:
        if not v or not all(part.isidentifier() for part in v.split(".")):
            raise ValueError(f"type_name '{v}' is not a valid identifier")
        return v

    @model_validator(mode="after")
    def exactly_one_value_source(self) -> "EnumDeclaration":
        """Values and slots are mutually exclusive."""
        if (self.values is None) == (self.slots is None):
            raise ValueError("Declaration needs exactly one of 'values' or 'slots'")
        return self

    @model_validator(mode="after")
    def names_match_values(self) -> "EnumDeclaration":
        """Given names are identifiers, one per value."""
        if self.names is None:
            return self
        for name in self.names:
            if not name.isidentifier():
                raise ValueError(f"Enumerator name '{name}' is not a valid identifier")
        if len(self.names) != self.count:
            raise ValueError(
                f"Got {len(self.names)} enumerator names for {self.count} values"
            )
        return self

    @property
    def count(self) -> int:
        source = self.values if self.values is not None else self.slots
        return len(source)

    def resolved_values(self) -> list[int]:
        """
        Values per enumerator, resolving slots if needed.

        Raises:
            ValueOutOfRangeError: A value does not fit the underlying type
        """
        source = self.values if self.values is not None else self.slots
        return resolve_values(source, self.underlying)

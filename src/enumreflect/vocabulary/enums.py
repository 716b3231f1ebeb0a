"""
Vocabulary enums — the shared language of the reflection builder.

Scanner states for the name tokenizer and the fixed-width integer types an
enumeration may declare as its underlying representation.
"""

from enum import Enum


# =============================================================================
# TOKENIZER
# =============================================================================

class ScanState(str, Enum):
    """
    State of the name tokenizer while walking raw declaration text.
    """
    START = "START"                  # Looking for the next identifier
    IN_IDENTIFIER = "IN_IDENTIFIER"  # Consuming identifier characters
    SKIPPING = "SKIPPING"            # Skipping an initializer up to the next top-level comma


# =============================================================================
# UNDERLYING REPRESENTATION
# =============================================================================

class UnderlyingType(str, Enum):
    """
    Fixed-width integer type backing an enumeration.

    Resolved values must fit the declared type. A declaration without an
    underlying type is unbounded.
    """
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"

    @property
    def signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def bits(self) -> int:
        return int(self.value.lstrip("uint"))

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Check whether value is representable in this type."""
        return self.min_value <= value <= self.max_value

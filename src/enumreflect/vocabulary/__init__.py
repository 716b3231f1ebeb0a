"""
Vocabulary — Enumerated types shared across the package.
"""

from enumreflect.vocabulary.enums import (
    ScanState,
    UnderlyingType,
)

__all__ = [
    "ScanState",
    "UnderlyingType",
]

"""
Parsing — Turning a raw enum declaration into values and names.

- Resolver: explicit/implicit slots to concrete values
- Tokenizer: declaration text to ordered enumerator names
"""

from enumreflect.parsing.resolver import (
    EnumeratorSlot,
    SlotLike,
    as_slot,
    resolve_values,
)
from enumreflect.parsing.tokenizer import (
    IDENTIFIER_CHARS,
    NameToken,
    NameTokenizer,
    tokenize,
    scan_names,
)

__all__ = [
    # Resolver
    "EnumeratorSlot",
    "SlotLike",
    "as_slot",
    "resolve_values",
    # Tokenizer
    "IDENTIFIER_CHARS",
    "NameToken",
    "NameTokenizer",
    "tokenize",
    "scan_names",
]

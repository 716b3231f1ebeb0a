"""
Schemas — Pydantic models for declaration input.
"""

from enumreflect.schemas.declaration import EnumDeclaration

__all__ = [
    "EnumDeclaration",
]

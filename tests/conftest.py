"""
Shared fixtures: declarations modelled on real-world C++ enums.
"""

import pytest

from enumreflect import (
    EnumDeclaration,
    UnderlyingType,
    create_builder,
    create_registry,
)
from enumreflect.observability import MetricsRegistry


TASTE_FLAGS_TEXT = (
    "None      = 0,\n"
    "Salted    = 1 << 0,\n"
    "Sour      = 1 << 1,\n"
    "Sweet     = 1 << 2,\n"
    "SourSweet = (Sour | Sweet),\n"
    "Other     = Constant,\n"
    "Last      = std::numeric_limits<uint64_t>::max()"
)


@pytest.fixture
def taste_flags() -> EnumDeclaration:
    return EnumDeclaration(
        type_name="TasteFlags",
        raw_text=TASTE_FLAGS_TEXT,
        values=[0, 1, 2, 4, 6, 100, 18446744073709551615],
        underlying=UnderlyingType.UINT64,
    )


@pytest.fixture
def ports() -> EnumDeclaration:
    return EnumDeclaration(
        type_name="Ports",
        raw_text="HTTP  = 80, HTTPS = 443, SecureShell = 22, SSH   = 22",
        values=[80, 443, 22, 22],
        underlying=UnderlyingType.INT32,
    )


@pytest.fixture
def card_suit() -> EnumDeclaration:
    return EnumDeclaration(
        type_name="CardSuit",
        raw_text="Spades, Hearts, Diamonds, Clubs",
        slots=[None, None, None, None],
        underlying=UnderlyingType.INT8,
    )


@pytest.fixture
def color() -> EnumDeclaration:
    return EnumDeclaration(
        type_name="Color",
        raw_text="Transparent = -1, Red = 1, Green, Blue",
        slots=[-1, 1, None, None],
        underlying=UnderlyingType.INT16,
    )


@pytest.fixture
def metrics() -> MetricsRegistry:
    return MetricsRegistry()


@pytest.fixture
def builder(metrics):
    return create_builder(metrics=metrics)


@pytest.fixture
def registry(builder):
    return create_registry(builder=builder)

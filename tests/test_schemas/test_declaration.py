"""Tests for the EnumDeclaration model."""

import pytest
from pydantic import ValidationError

from enumreflect import EnumDeclaration, UnderlyingType, ValueOutOfRangeError


class TestEnumDeclaration:
    """Tests for declaration validation."""

    def test_values_declaration(self):
        declaration = EnumDeclaration(type_name="Ports", raw_text="HTTP = 80", values=[80])

        assert declaration.count == 1
        assert declaration.resolved_values() == [80]
        assert declaration.underlying is None

    def test_slots_declaration(self):
        declaration = EnumDeclaration(type_name="Abc", raw_text="A = 10, B, C", slots=[10, None, None])

        assert declaration.count == 3
        assert declaration.resolved_values() == [10, 11, 12]

    def test_underlying_from_string(self):
        declaration = EnumDeclaration.model_validate({
            "type_name": "Suit",
            "raw_text": "A",
            "values": [0],
            "underlying": "int8",
        })
        assert declaration.underlying is UnderlyingType.INT8

    def test_qualified_type_name(self):
        declaration = EnumDeclaration(type_name="Outer.Color", raw_text="Red", values=[0])
        assert declaration.type_name == "Outer.Color"

    def test_requires_exactly_one_source(self):
        with pytest.raises(ValidationError):
            EnumDeclaration(type_name="X", raw_text="A")

        with pytest.raises(ValidationError):
            EnumDeclaration(type_name="X", raw_text="A", values=[0], slots=[None])

    def test_invalid_type_name(self):
        with pytest.raises(ValidationError):
            EnumDeclaration(type_name="ns::Color", raw_text="A", values=[0])

        with pytest.raises(ValidationError):
            EnumDeclaration(type_name="", raw_text="A", values=[0])

    def test_values_are_strict_ints(self):
        with pytest.raises(ValidationError):
            EnumDeclaration(type_name="X", raw_text="A", values=["1"])

        with pytest.raises(ValidationError):
            EnumDeclaration(type_name="X", raw_text="A", values=[True])

    def test_frozen(self):
        declaration = EnumDeclaration(type_name="X", raw_text="A", values=[0])

        with pytest.raises(ValidationError):
            declaration.type_name = "Y"

    def test_names_given_directly(self):
        declaration = EnumDeclaration(
            type_name="Size",
            raw_text="Größe, Other",
            values=[1, 2],
            names=["Größe", "Other"],
        )
        assert declaration.names == ["Größe", "Other"]

    def test_names_must_match_values(self):
        with pytest.raises(ValidationError):
            EnumDeclaration(type_name="X", raw_text="A, B", values=[0], names=["A", "B"])

        with pytest.raises(ValidationError):
            EnumDeclaration(type_name="X", raw_text="A", values=[0], names=["not-a-name"])

    def test_explicit_values_range_checked(self):
        declaration = EnumDeclaration(
            type_name="X",
            raw_text="A = -1",
            values=[-1],
            underlying=UnderlyingType.UINT16,
        )

        with pytest.raises(ValueOutOfRangeError):
            declaration.resolved_values()


class TestUnderlyingType:
    """Tests for the integer type vocabulary."""

    def test_bounds(self):
        assert UnderlyingType.INT8.min_value == -128
        assert UnderlyingType.INT8.max_value == 127
        assert UnderlyingType.UINT8.min_value == 0
        assert UnderlyingType.UINT8.max_value == 255
        assert UnderlyingType.INT64.min_value == -(2 ** 63)
        assert UnderlyingType.UINT64.max_value == 18446744073709551615

    def test_bits_and_sign(self):
        assert UnderlyingType.UINT32.bits == 32
        assert not UnderlyingType.UINT32.signed
        assert UnderlyingType.INT16.bits == 16
        assert UnderlyingType.INT16.signed

    def test_contains(self):
        assert UnderlyingType.INT16.contains(-1)
        assert not UnderlyingType.UINT16.contains(-1)
        assert not UnderlyingType.INT32.contains(2 ** 31)

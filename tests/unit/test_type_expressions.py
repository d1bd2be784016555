"""
Type Expression Unit Tests
Tests for ssz_core/types/expressions.py
"""
import pytest

from ssz_core.errors import InvalidBound, TypeExpressionException
from ssz_core.types import (
    List,
    Vector,
    boolean,
    parse_type,
    uint8,
    uint64,
    value_from_obj,
    value_to_obj,
)


class TestParseType:
    """Tests for parse_type()."""

    @pytest.mark.parametrize("expression, expected", [
        ("uint8", uint8),
        ("bool", boolean),
        ("bit", boolean),
        ("byte", uint8),
    ])
    def test_basic_names(self, expression, expected):
        assert parse_type(expression) is expected

    def test_vector(self):
        assert parse_type("Vector[uint8, 4]") is Vector[uint8, 4]

    def test_nested(self):
        typ = parse_type("Vector[List[uint64, 8], 3]")

        assert typ is Vector[List[uint64, 8], 3]
        assert typ.type_name() == "Vector[List[uint64, 8], 3]"

    def test_whitespace_insensitive(self):
        assert parse_type("  List[ uint8 ,16 ] ") is List[uint8, 16]

    def test_zero_length_vector_parses(self):
        assert parse_type("Vector[uint8, 0]").LENGTH == 0

    @pytest.mark.parametrize("expression, fragment", [
        ("", "end of type expression"),
        ("uint7", "unknown type"),
        ("Vector[uint8]", "expected ','"),
        ("Vector[uint8, 4", "end of type expression"),
        ("Vector[uint8, four]", "integer length"),
        ("Vector[uint8, 4]]", "trailing token"),
        ("Vector(uint8, 4)", "unexpected character"),
        ("Vector[uint8, -1]", "unexpected character"),
    ])
    def test_malformed(self, expression, fragment):
        with pytest.raises(TypeExpressionException, match=fragment) as exc_info:
            parse_type(expression)

        assert exc_info.value.expression == expression

    def test_not_a_bound_error(self):
        with pytest.raises(TypeExpressionException):
            parse_type("Vector[uint8, -1]")
        assert not issubclass(TypeExpressionException, InvalidBound)


class TestValueConversion:
    """Tests for value_from_obj() and value_to_obj()."""

    def test_nested_values(self):
        typ = parse_type("Vector[List[uint8, 4], 2]")
        value = value_from_obj(typ, [[1, 2], [3]])

        assert type(value) is typ
        assert value_to_obj(value) == [[1, 2], [3]]

    def test_booleans(self):
        value = value_from_obj(parse_type("List[bool, 4]"), [True, False])
        assert value_to_obj(value) == [True, False]

    def test_large_integers(self):
        value = value_from_obj(parse_type("uint256"), 2**200)
        assert value_to_obj(value) == 2**200

    def test_existing_instance_passes_through(self):
        typ = Vector[uint8, 2]
        value = typ([1, 2])

        assert value_from_obj(typ, value) is value

    def test_mapping_rejected(self):
        with pytest.raises(TypeError):
            value_from_obj(Vector[uint8, 2], {"a": 1})

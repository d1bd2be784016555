"""
Codec Unit Tests
Tests for ssz_core/codec/serialize.py and ssz_core/codec/deserialize.py

Tests:
1. Composite layout - fixed part, offsets, variable part
2. Offsets are measured from the start of the composite
3. Offset table validation on decode
4. Fixed-size stride decoding
"""
import pytest

from ssz_core.codec import (
    BYTES_PER_LENGTH_OFFSET,
    deserialize_homogeneous_composite,
    serialize_composite,
)
from ssz_core.codec.deserialize import deserialize_offset
from ssz_core.codec.serialize import MAXIMUM_LENGTH, serialize_offset
from ssz_core.errors import (
    AdditionalInput,
    BoundedLength,
    ExpectedFurtherInput,
    InvalidBound,
    InvalidOffsetsLength,
    OffsetNotIncreasing,
    OffsetOutOfBounds,
)
from ssz_core.types import List, Vector, uint8, uint16


ByteList8 = List[uint8, 8]


class TestOffsets:
    """Tests for offset encoding."""

    def test_offset_width(self):
        assert BYTES_PER_LENGTH_OFFSET == 4
        assert MAXIMUM_LENGTH == 2**32

    def test_serialize_offset_little_endian(self):
        assert serialize_offset(12) == b"\x0c\x00\x00\x00"

    def test_deserialize_offset(self):
        assert deserialize_offset(b"\xff\x01\x02\x03\x04", 1) == 0x04030201

    def test_deserialize_offset_truncated(self):
        with pytest.raises(ExpectedFurtherInput) as exc_info:
            deserialize_offset(b"\x01\x02", 0)

        assert exc_info.value.expected == 4


class TestSerializeComposite:
    """Tests for serialize_composite()."""

    def test_fixed_size_elements_concatenate(self):
        buffer = bytearray()
        written = serialize_composite([uint16(1), uint16(2)], buffer)

        assert written == 4
        assert bytes(buffer) == b"\x01\x00\x02\x00"

    def test_variable_size_elements_use_offsets(self):
        values = [ByteList8([1, 2]), ByteList8([]), ByteList8([3])]
        buffer = bytearray()
        written = serialize_composite(values, buffer)

        assert bytes(buffer) == bytes.fromhex("0c000000" "0e000000" "0e000000" "010203")
        assert written == 15

    def test_mixed_elements_offsets_from_composite_start(self):
        values = [uint16(1), ByteList8([5]), uint8(2)]
        buffer = bytearray()
        serialize_composite(values, buffer)

        assert bytes(buffer) == bytes.fromhex("0100" "07000000" "02" "05")

    def test_appends_after_existing_buffer_content(self):
        buffer = bytearray(b"\xaa\xbb")
        serialize_composite([ByteList8([9])], buffer)

        # Offset is relative to the composite, not to the buffer
        assert bytes(buffer) == b"\xaa\xbb" + bytes.fromhex("04000000" "09")

    def test_empty_sequence(self):
        buffer = bytearray()
        assert serialize_composite([], buffer) == 0
        assert buffer == b""


class TestDeserializeFixedSize:
    """Tests for fixed-size element decoding."""

    def test_stride_decoding(self):
        elements = deserialize_homogeneous_composite(uint16, b"\x01\x00\x02\x00")
        assert elements == [1, 2]
        assert all(type(e) is uint16 for e in elements)

    def test_empty_input(self):
        assert deserialize_homogeneous_composite(uint16, b"") == []

    def test_partial_trailing_element(self):
        with pytest.raises(AdditionalInput) as exc_info:
            deserialize_homogeneous_composite(uint16, b"\x01\x02\x03")

        assert exc_info.value.provided == 3
        assert exc_info.value.expected == 2

    def test_zero_size_elements_rejected(self):
        with pytest.raises(InvalidBound):
            deserialize_homogeneous_composite(Vector[uint8, 0], b"\x01")


class TestDeserializeVariableSize:
    """Tests for offset-table decoding."""

    def test_decodes_slices_between_offsets(self):
        encoding = bytes.fromhex("0c000000" "0e000000" "0e000000" "010203")
        elements = deserialize_homogeneous_composite(ByteList8, encoding)

        assert [e.to_obj() for e in elements] == [[1, 2], [], [3]]

    def test_first_offset_zero(self):
        with pytest.raises(InvalidOffsetsLength):
            deserialize_homogeneous_composite(ByteList8, b"\x00\x00\x00\x00")

    def test_first_offset_not_aligned(self):
        with pytest.raises(InvalidOffsetsLength) as exc_info:
            deserialize_homogeneous_composite(ByteList8, b"\x05\x00\x00\x00\x01")

        assert exc_info.value.offset == 5

    def test_first_offset_past_end(self):
        with pytest.raises(OffsetOutOfBounds):
            deserialize_homogeneous_composite(ByteList8, b"\x08\x00\x00\x00")

    def test_later_offset_past_end(self):
        with pytest.raises(OffsetOutOfBounds) as exc_info:
            deserialize_homogeneous_composite(ByteList8, bytes.fromhex("08000000" "14000000"))

        assert exc_info.value.offset == 20
        assert exc_info.value.length == 8

    def test_decreasing_offsets(self):
        encoding = bytes.fromhex("0c000000" "0e000000" "0d000000" "010203")
        with pytest.raises(OffsetNotIncreasing) as exc_info:
            deserialize_homogeneous_composite(ByteList8, encoding)

        assert exc_info.value.start == 14
        assert exc_info.value.end == 13

    def test_truncated_offset_table(self):
        with pytest.raises(ExpectedFurtherInput):
            deserialize_homogeneous_composite(ByteList8, b"\x0c\x00")

    def test_element_errors_propagate(self):
        encoding = bytes.fromhex("04000000") + bytes(9)
        with pytest.raises(BoundedLength):
            deserialize_homogeneous_composite(ByteList8, encoding)

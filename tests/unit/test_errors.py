"""
Error Taxonomy Unit Tests
Tests for ssz_core/errors.py
"""
import pytest
from pydantic import ValidationError

from ssz_core.errors import (
    AdditionalInput,
    BoundedLength,
    DeserializeException,
    ErrorCodes,
    ExactLength,
    ExpectedFurtherInput,
    InputExceedsLimit,
    InstanceException,
    InvalidBound,
    InvalidByte,
    InvalidOffsetsLength,
    MaximumEncodedLengthExceeded,
    MerkleizationError,
    OffsetNotIncreasing,
    OffsetOutOfBounds,
    SerializeException,
    SSZError,
    SSZException,
    SSZTypeException,
    TypeExpressionException,
    ValueOutOfRange,
)


class TestHierarchy:
    """Every error is catchable by category and by the common base."""

    @pytest.mark.parametrize("error, category", [
        (InvalidBound(0), SSZTypeException),
        (ExactLength(required=4, provided=3), InstanceException),
        (BoundedLength(bound=8, provided=9), InstanceException),
        (ValueOutOfRange("uint8", 256), InstanceException),
        (MaximumEncodedLengthExceeded(2**32), SerializeException),
        (ExpectedFurtherInput(provided=3, expected=4), DeserializeException),
        (AdditionalInput(provided=5, expected=4), DeserializeException),
        (InvalidByte(2), DeserializeException),
        (InvalidOffsetsLength(5), DeserializeException),
        (OffsetNotIncreasing(start=8, end=4), DeserializeException),
        (OffsetOutOfBounds(offset=20, length=8), DeserializeException),
        (InputExceedsLimit(limit=2, provided=3), MerkleizationError),
        (TypeExpressionException("bad", "Vector["), SSZException),
    ])
    def test_category(self, error, category):
        assert isinstance(error, category)
        assert isinstance(error, SSZException)


class TestErrorDetails:
    """Tests for structured fields on exceptions."""

    def test_invalid_bound(self):
        error = InvalidBound(0)

        assert error.code == ErrorCodes.INVALID_BOUND
        assert error.details == {"bound": 0}
        assert "invalid bound 0" in str(error)

    def test_expected_further_input(self):
        error = ExpectedFurtherInput(provided=3, expected=4)

        assert error.code == ErrorCodes.EXPECTED_FURTHER_INPUT
        assert error.details == {"provided": 3, "expected": 4}

    def test_maximum_encoded_length(self):
        error = MaximumEncodedLengthExceeded(2**32)

        assert error.length == 2**32
        assert error.code == ErrorCodes.MAXIMUM_ENCODED_LENGTH_EXCEEDED

    def test_invalid_byte_message(self):
        assert "0x02" in str(InvalidByte(2))

    def test_repr(self):
        assert repr(InvalidBound(0)).startswith("InvalidBound(code='INVALID_BOUND'")


class TestErrorModel:
    """Tests for SSZError <-> SSZException conversion."""

    def test_to_error_model(self):
        model = AdditionalInput(provided=5, expected=4).to_error_model()

        assert isinstance(model, SSZError)
        assert model.code == ErrorCodes.ADDITIONAL_INPUT
        assert model.details == {"provided": 5, "expected": 4}

    def test_model_dump_is_json_friendly(self):
        dumped = ValueOutOfRange("uint8", 256).to_error_model().model_dump()

        assert dumped["code"] == ErrorCodes.VALUE_OUT_OF_RANGE
        assert dumped["details"]["value"] == "256"

    def test_round_trip_to_exception(self):
        model = SSZError(code="X", message="boom", details={"a": 1})
        error = model.to_exception()

        assert isinstance(error, SSZException)
        assert error.code == "X"
        assert error.to_error_model() == model

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            SSZError(code="X", message="boom", unexpected=True)

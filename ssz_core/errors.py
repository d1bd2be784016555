"""
Error taxonomy for serialization, deserialization and Merkleization.

Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Type definition errors
    INVALID_BOUND = "INVALID_BOUND"
    TYPE_EXPRESSION_ERROR = "TYPE_EXPRESSION_ERROR"

    # Instance errors
    EXACT_LENGTH = "EXACT_LENGTH"
    BOUNDED_LENGTH = "BOUNDED_LENGTH"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"

    # Serialization errors
    SERIALIZE_ERROR = "SERIALIZE_ERROR"
    MAXIMUM_ENCODED_LENGTH_EXCEEDED = "MAXIMUM_ENCODED_LENGTH_EXCEEDED"

    # Deserialization errors
    DESERIALIZE_ERROR = "DESERIALIZE_ERROR"
    EXPECTED_FURTHER_INPUT = "EXPECTED_FURTHER_INPUT"
    ADDITIONAL_INPUT = "ADDITIONAL_INPUT"
    INVALID_BYTE = "INVALID_BYTE"
    INVALID_OFFSETS_LENGTH = "INVALID_OFFSETS_LENGTH"
    OFFSET_NOT_INCREASING = "OFFSET_NOT_INCREASING"
    OFFSET_OUT_OF_BOUNDS = "OFFSET_OUT_OF_BOUNDS"

    # Merkleization errors
    MERKLEIZATION_ERROR = "MERKLEIZATION_ERROR"
    INPUT_EXCEEDS_LIMIT = "INPUT_EXCEEDS_LIMIT"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class SSZError(BaseModel):
    """
    Error model for structured error communication.

    Used when an error has to cross a boundary as data (CLI JSON output,
    logs) instead of as a raised exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.EXPECTED_FURTHER_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "SSZException":
        """Convert this error model to a raised exception."""
        return SSZException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SSZException(Exception):
    """
    Base exception for all codec and Merkleization errors.

    Carries structured error information and can be converted
    to an SSZError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "SSZ_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> SSZError:
        """Convert this exception to an SSZError model."""
        return SSZError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


# -----------------------------------------------------------------------------
# Type definition errors
# -----------------------------------------------------------------------------

class SSZTypeException(SSZException):
    """A type was declared with parameters the encoding cannot represent."""


class InvalidBound(SSZTypeException):
    """Raised when a fixed-length composite is declared with length 0."""

    def __init__(self, bound: int) -> None:
        super().__init__(
            message=f"the type for this value has an invalid bound {bound}",
            code=ErrorCodes.INVALID_BOUND,
            details={"bound": bound},
        )
        self.bound = bound


class TypeExpressionException(SSZException):
    """Raised when a textual type expression cannot be resolved."""

    def __init__(self, message: str, expression: str) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.TYPE_EXPRESSION_ERROR,
            details={"expression": expression},
        )
        self.expression = expression


# -----------------------------------------------------------------------------
# Instance errors
# -----------------------------------------------------------------------------

class InstanceException(SSZException):
    """A value does not satisfy the invariants of its type."""


class ExactLength(InstanceException):
    """Raised when a fixed-cardinality value holds the wrong number of elements."""

    def __init__(self, required: int, provided: int) -> None:
        super().__init__(
            message=f"required {required} elements for this type but {provided} elements given",
            code=ErrorCodes.EXACT_LENGTH,
            details={"required": required, "provided": provided},
        )
        self.required = required
        self.provided = provided


class BoundedLength(InstanceException):
    """Raised when a bounded collection holds more elements than its limit."""

    def __init__(self, bound: int, provided: int) -> None:
        super().__init__(
            message=f"{provided} elements given for a type with (inclusive) upper bound {bound}",
            code=ErrorCodes.BOUNDED_LENGTH,
            details={"bound": bound, "provided": provided},
        )
        self.bound = bound
        self.provided = provided


class ValueOutOfRange(InstanceException):
    """Raised when a basic value does not fit its declared width."""

    def __init__(self, type_name: str, value: Any) -> None:
        super().__init__(
            message=f"value {value!r} is out of range for {type_name}",
            code=ErrorCodes.VALUE_OUT_OF_RANGE,
            details={"type": type_name, "value": str(value)},
        )


# -----------------------------------------------------------------------------
# Serialization errors
# -----------------------------------------------------------------------------

class SerializeException(SSZException):
    """Base for failures while producing an encoding."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.SERIALIZE_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code=code, details=details)


class MaximumEncodedLengthExceeded(SerializeException):
    """Raised when an encoding cannot be addressed by a 4-byte offset."""

    def __init__(self, length: int) -> None:
        super().__init__(
            message=f"the encoded length is {length} which exceeds the maximum length {2**32 - 1}",
            code=ErrorCodes.MAXIMUM_ENCODED_LENGTH_EXCEEDED,
            details={"length": length},
        )
        self.length = length


# -----------------------------------------------------------------------------
# Deserialization errors
# -----------------------------------------------------------------------------

class DeserializeException(SSZException):
    """Base for failures while decoding an encoding."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.DESERIALIZE_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code=code, details=details)


class ExpectedFurtherInput(DeserializeException):
    """Raised when the input ends before the type is fully decoded."""

    def __init__(self, provided: int, expected: int) -> None:
        super().__init__(
            message=f"expected at least {expected} bytes when decoding but provided only {provided} bytes",
            code=ErrorCodes.EXPECTED_FURTHER_INPUT,
            details={"provided": provided, "expected": expected},
        )
        self.provided = provided
        self.expected = expected


class AdditionalInput(DeserializeException):
    """Raised when bytes remain after the type is fully decoded."""

    def __init__(self, provided: int, expected: int) -> None:
        super().__init__(
            message=f"{provided} bytes given but only expected {expected} bytes",
            code=ErrorCodes.ADDITIONAL_INPUT,
            details={"provided": provided, "expected": expected},
        )
        self.provided = provided
        self.expected = expected


class InvalidByte(DeserializeException):
    """Raised when a byte is not a legal encoding for the type."""

    def __init__(self, byte: int) -> None:
        super().__init__(
            message=f"invalid byte {byte:#04x} when decoding data of the expected type",
            code=ErrorCodes.INVALID_BYTE,
            details={"byte": byte},
        )
        self.byte = byte


class InvalidOffsetsLength(DeserializeException):
    """Raised when the first offset does not describe a whole offset table."""

    def __init__(self, offset: int) -> None:
        super().__init__(
            message=f"the first offset {offset} does not describe a valid offset table",
            code=ErrorCodes.INVALID_OFFSETS_LENGTH,
            details={"offset": offset},
        )
        self.offset = offset


class OffsetNotIncreasing(DeserializeException):
    """Raised when offsets in the table decrease."""

    def __init__(self, start: int, end: int) -> None:
        super().__init__(
            message=f"invalid offset points to byte {end} before the previous offset {start}",
            code=ErrorCodes.OFFSET_NOT_INCREASING,
            details={"start": start, "end": end},
        )
        self.start = start
        self.end = end


class OffsetOutOfBounds(DeserializeException):
    """Raised when an offset points past the end of the input."""

    def __init__(self, offset: int, length: int) -> None:
        super().__init__(
            message=f"offset {offset} points past the end of an input of {length} bytes",
            code=ErrorCodes.OFFSET_OUT_OF_BOUNDS,
            details={"offset": offset, "length": length},
        )
        self.offset = offset
        self.length = length


# -----------------------------------------------------------------------------
# Merkleization errors
# -----------------------------------------------------------------------------

class MerkleizationError(SSZException):
    """Raised when a hash tree root cannot be computed."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.MERKLEIZATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code=code, details=details)


class InputExceedsLimit(MerkleizationError):
    """Raised when more chunks are supplied than the declared capacity."""

    def __init__(self, limit: int, provided: int) -> None:
        super().__init__(
            message=f"requested to compute a hash tree root of {provided} chunks with a limit of {limit}",
            code=ErrorCodes.INPUT_EXCEEDS_LIMIT,
            details={"limit": limit, "provided": provided},
        )
        self.limit = limit
        self.provided = provided

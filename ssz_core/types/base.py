"""
Capability interface shared by every serializable type.

Static facts about a type (fixed or variable size, fixed footprint,
composite or basic) are classmethods so they can be queried without
an instance. Composite types implement the same interface over their
element type, which is what lets them nest inside one another.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TypeVar


T = TypeVar("T", bound="SimpleSerialize")


class SimpleSerialize(ABC):
    """
    Abstract base for all types with a canonical encoding and a hash tree root.

    Implementors provide:
        is_variable_size() -> bool
        size_hint() -> int          (fixed footprint; 0 when variable-size)
        is_composite_type() -> bool
        serialize(buffer) -> int    (bytes appended to buffer)
        deserialize(encoding) -> instance
        hash_tree_root() -> bytes   (32-byte root)
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def is_variable_size(cls) -> bool:
        ...

    @classmethod
    @abstractmethod
    def size_hint(cls) -> int:
        ...

    @classmethod
    @abstractmethod
    def is_composite_type(cls) -> bool:
        ...

    @abstractmethod
    def serialize(self, buffer: bytearray) -> int:
        """Append the canonical encoding to ``buffer`` and return its length."""

    @classmethod
    @abstractmethod
    def deserialize(cls: type[T], encoding: bytes) -> T:
        """Decode an instance from exactly ``encoding``."""

    @abstractmethod
    def hash_tree_root(self) -> bytes:
        """Compute the 32-byte Merkle root of the current value."""

    @abstractmethod
    def to_obj(self) -> Any:
        """Return a JSON-friendly representation of the value."""

    @classmethod
    @abstractmethod
    def from_obj(cls: type[T], obj: Any) -> T:
        """Build an instance from the output of ``to_obj``."""

    @classmethod
    def type_name(cls) -> str:
        return cls.__name__

    @classmethod
    def default(cls: type[T]) -> T:
        """The zero value of the type."""
        return cls()

    def encode_bytes(self) -> bytes:
        buffer = bytearray()
        self.serialize(buffer)
        return bytes(buffer)


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Static facts about a serializable type.

    Attributes:
        name: Canonical type name, e.g. "Vector[uint16, 4]"
        is_variable_size: Whether encodings vary in length
        size_hint: Fixed encoded length in bytes (0 when variable-size)
        is_composite: Whether the type is built from other types
    """
    name: str
    is_variable_size: bool
    size_hint: int
    is_composite: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "is_variable_size": self.is_variable_size,
            "size_hint": self.size_hint,
            "is_composite": self.is_composite,
        }


def describe(typ: type[SimpleSerialize]) -> TypeDescriptor:
    """Build the TypeDescriptor for a serializable type."""
    if not (isinstance(typ, type) and issubclass(typ, SimpleSerialize)):
        raise TypeError(f"expected a SimpleSerialize type, got {typ!r}")
    variable = typ.is_variable_size()
    return TypeDescriptor(
        name=typ.type_name(),
        is_variable_size=variable,
        size_hint=0 if variable else typ.size_hint(),
        is_composite=typ.is_composite_type(),
    )


def coerce(typ: type[T], value: Any) -> T:
    """Return ``value`` as an instance of ``typ``, converting plain Python values."""
    if isinstance(value, typ):
        return value
    return typ.from_obj(value)


__all__ = [
    "SimpleSerialize",
    "TypeDescriptor",
    "describe",
    "coerce",
]

"""
Fixed-length homogeneous array: Vector[T, N].

The array adapter ties the codec and the Merkleizer together for a sequence
of exactly N elements of type T:

- is_variable_size() is T's; size_hint() is T.size_hint() * N
- serialize, deserialize and hash_tree_root all reject N == 0 with
  InvalidBound before touching element data
- decoding fixed-size elements requires exactly N * T.size_hint() bytes
- decoding variable-size elements goes through the offset table and must
  yield exactly N elements
- roots pack basic elements, or Merkleize per-element roots of composite
  elements

Usage:
    from ssz_core.types import Vector, uint8

    Bytes4 = Vector[uint8, 4]
    value = Bytes4([1, 2, 3, 4])
    value.encode_bytes()     # b"\\x01\\x02\\x03\\x04"
    value.hash_tree_root()   # 32-byte root
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar

from ssz_core.codec.deserialize import deserialize_homogeneous_composite
from ssz_core.codec.serialize import serialize_composite
from ssz_core.errors import (
    AdditionalInput,
    ExactLength,
    ExpectedFurtherInput,
    InvalidBound,
)
from ssz_core.merkle.cache import RootCache
from ssz_core.merkle.merkleization import merkleize
from ssz_core.types.base import SimpleSerialize
from ssz_core.types.composite import HomogeneousComposite


class Vector(HomogeneousComposite):
    """Fixed-length sequence; parametrize as ``Vector[element_type, length]``."""

    LENGTH: ClassVar[int] = 0

    __slots__ = ()

    def __class_getitem__(cls, params: Any) -> type["Vector"]:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("Vector expects two parameters: Vector[element_type, length]")
        element_type, length = params
        return _vector_type(element_type, length)

    def _default_elements(self) -> list[SimpleSerialize]:
        element_type = self._element_type()
        return [element_type.default() for _ in range(self.LENGTH)]

    def _check_length(self, length: int) -> None:
        if length != self.LENGTH:
            raise ExactLength(required=self.LENGTH, provided=length)

    @classmethod
    def _check_bound(cls) -> None:
        if cls.LENGTH == 0:
            raise InvalidBound(cls.LENGTH)

    @classmethod
    def is_variable_size(cls) -> bool:
        return cls._element_type().is_variable_size()

    @classmethod
    def size_hint(cls) -> int:
        return cls._element_type().size_hint() * cls.LENGTH

    def serialize(self, buffer: bytearray) -> int:
        self._check_bound()
        return serialize_composite(self._elements, buffer)

    @classmethod
    def deserialize(cls, encoding: bytes) -> "Vector":
        cls._check_bound()
        element_type = cls._element_type()

        if not element_type.is_variable_size():
            if element_type.size_hint() == 0:
                raise InvalidBound(0)
            expected_length = cls.LENGTH * element_type.size_hint()
            if len(encoding) < expected_length:
                raise ExpectedFurtherInput(provided=len(encoding), expected=expected_length)
            if len(encoding) > expected_length:
                raise AdditionalInput(provided=len(encoding), expected=expected_length)

        elements = deserialize_homogeneous_composite(element_type, encoding)
        if len(elements) != cls.LENGTH:
            raise ExactLength(required=cls.LENGTH, provided=len(elements))
        return cls(elements)

    def hash_tree_root(self, cache: RootCache | None = None) -> bytes:
        """
        Compute the root of the current value.

        Args:
            cache: Optional per-element root cache, consulted only for
                composite elements

        Raises:
            InvalidBound: If the type was declared with length 0
            MerkleizationError: If an element root cannot be computed
        """
        self._check_bound()
        return merkleize(self.chunks(cache))


@lru_cache(maxsize=None)
def _vector_type(element_type: type[SimpleSerialize], length: int) -> type[Vector]:
    if not (isinstance(element_type, type) and issubclass(element_type, SimpleSerialize)):
        raise TypeError(f"Vector element type must be a SimpleSerialize type, got {element_type!r}")
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f"Vector length must be an int, got {type(length).__name__}")
    if length < 0:
        raise InvalidBound(length)
    name = f"Vector[{element_type.type_name()}, {length}]"
    return type(name, (Vector,), {
        "ELEMENT_TYPE": element_type,
        "LENGTH": length,
        "__slots__": (),
        "__module__": __name__,
    })


__all__ = ["Vector"]

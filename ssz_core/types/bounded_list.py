"""
Variable-length homogeneous collection: List[T, limit].

Encodes exactly like a Vector of its current length (no length prefix).
The root commits to the capacity and the length:

    root = mix_in_length(merkleize(chunks, limit=chunk_count(T, limit)), len)
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar

from ssz_core.codec.deserialize import deserialize_homogeneous_composite
from ssz_core.codec.serialize import serialize_composite
from ssz_core.errors import BoundedLength, InvalidBound
from ssz_core.merkle.cache import RootCache
from ssz_core.merkle.merkleization import chunk_count, merkleize, mix_in_length
from ssz_core.types.base import SimpleSerialize, coerce
from ssz_core.types.composite import HomogeneousComposite


class List(HomogeneousComposite):
    """Bounded sequence; parametrize as ``List[element_type, limit]``."""

    LIMIT: ClassVar[int] = 0

    __slots__ = ()

    def __class_getitem__(cls, params: Any) -> type["List"]:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("List expects two parameters: List[element_type, limit]")
        element_type, limit = params
        return _list_type(element_type, limit)

    def _check_length(self, length: int) -> None:
        if length > self.LIMIT:
            raise BoundedLength(bound=self.LIMIT, provided=length)

    @classmethod
    def is_variable_size(cls) -> bool:
        return True

    @classmethod
    def size_hint(cls) -> int:
        return 0

    def append(self, value: Any) -> None:
        self._check_length(len(self._elements) + 1)
        self._elements.append(coerce(self._element_type(), value))

    def serialize(self, buffer: bytearray) -> int:
        return serialize_composite(self._elements, buffer)

    @classmethod
    def deserialize(cls, encoding: bytes) -> "List":
        elements = deserialize_homogeneous_composite(cls._element_type(), encoding)
        if len(elements) > cls.LIMIT:
            raise BoundedLength(bound=cls.LIMIT, provided=len(elements))
        return cls(elements)

    def hash_tree_root(self, cache: RootCache | None = None) -> bytes:
        element_type = self._element_type()
        root = merkleize(self.chunks(cache), limit=chunk_count(element_type, self.LIMIT))
        return mix_in_length(root, len(self._elements))


@lru_cache(maxsize=None)
def _list_type(element_type: type[SimpleSerialize], limit: int) -> type[List]:
    if not (isinstance(element_type, type) and issubclass(element_type, SimpleSerialize)):
        raise TypeError(f"List element type must be a SimpleSerialize type, got {element_type!r}")
    if not isinstance(limit, int) or isinstance(limit, bool):
        raise TypeError(f"List limit must be an int, got {type(limit).__name__}")
    if limit < 0:
        raise InvalidBound(limit)
    name = f"List[{element_type.type_name()}, {limit}]"
    return type(name, (List,), {
        "ELEMENT_TYPE": element_type,
        "LIMIT": limit,
        "__slots__": (),
        "__module__": __name__,
    })


__all__ = ["List"]

"""
Shared behaviour of homogeneous composites (Vector and List).

Holds the element storage, the sequence protocol, and the two mutually
exclusive ways of turning elements into Merkle chunks:
- basic elements: serialize and pack into chunks
- composite elements: one chunk per element, the element's own root
"""
from __future__ import annotations

from typing import Any, ClassVar, Iterable, Iterator

from ssz_core.errors import MerkleizationError, SSZException
from ssz_core.merkle.cache import RootCache
from ssz_core.merkle.merkleization import pack
from ssz_core.types.base import SimpleSerialize, coerce


def element_root_chunks(
    elements: Iterable[SimpleSerialize],
    cache: RootCache | None = None,
) -> bytes:
    """
    Concatenate the roots of composite elements into a chunk sequence.

    Raises:
        MerkleizationError: If any element root cannot be computed
    """
    chunks = bytearray()
    for index, element in enumerate(elements):
        try:
            if cache is None:
                root = element.hash_tree_root()
            else:
                root = cache.root_for(
                    index, element.encode_bytes(), element.hash_tree_root, type(element)
                )
        except MerkleizationError:
            raise
        except SSZException as e:
            raise MerkleizationError(
                f"could not compute root of element {index}: {e.message}",
                details={"index": index, "cause": e.code},
            ) from e
        chunks.extend(root)
    return bytes(chunks)


class HomogeneousComposite(SimpleSerialize):
    """Ordered, mutable sequence of ELEMENT_TYPE instances."""

    ELEMENT_TYPE: ClassVar[type[SimpleSerialize] | None] = None

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[Any] | None = None) -> None:
        element_type = self._element_type()
        if elements is None:
            values: list[SimpleSerialize] = self._default_elements()
        else:
            values = [coerce(element_type, element) for element in elements]
        self._check_length(len(values))
        self._elements = values

    @classmethod
    def _element_type(cls) -> type[SimpleSerialize]:
        if cls.ELEMENT_TYPE is None:
            raise TypeError(f"{cls.__name__} must be parametrized before use")
        return cls.ELEMENT_TYPE

    def _default_elements(self) -> list[SimpleSerialize]:
        return []

    def _check_length(self, length: int) -> None:
        """Raise an InstanceException if ``length`` elements are not allowed."""

    @classmethod
    def is_composite_type(cls) -> bool:
        return True

    def chunks(self, cache: RootCache | None = None) -> bytes:
        """The chunk sequence this value is Merkleized over."""
        if self._element_type().is_composite_type():
            return element_root_chunks(self._elements, cache)
        return pack(self._elements)

    def to_obj(self) -> list[Any]:
        return [element.to_obj() for element in self._elements]

    @classmethod
    def from_obj(cls, obj: Any) -> "HomogeneousComposite":
        if not isinstance(obj, (list, tuple)):
            raise TypeError(f"{cls.type_name()} expects a sequence, got {type(obj).__name__}")
        return cls(obj)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[SimpleSerialize]:
        return iter(self._elements)

    def __getitem__(self, index: Any) -> Any:
        return self._elements[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if not isinstance(index, int):
            raise TypeError(f"{self.type_name()} indices must be integers")
        self._elements[index] = coerce(self._element_type(), value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.type_name()}({self._elements!r})"


__all__ = [
    "HomogeneousComposite",
    "element_root_chunks",
]

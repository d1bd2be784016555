"""
Serializable types.

Basic types (uintN, boolean), the fixed-length Vector[T, N], the bounded
List[T, limit], the capability interface they share, and type-expression
parsing.
"""
from .base import (
    SimpleSerialize,
    TypeDescriptor,
    describe,
    coerce,
)
from .basic import (
    BasicValue,
    BasicUint,
    uint8,
    uint16,
    uint32,
    uint64,
    uint128,
    uint256,
    boolean,
    byte,
    bit,
    BASIC_TYPES,
)
from .composite import HomogeneousComposite
from .vector import Vector
from .bounded_list import List
from .expressions import (
    parse_type,
    value_from_obj,
    value_to_obj,
)

__all__ = [
    # Interface
    "SimpleSerialize",
    "TypeDescriptor",
    "describe",
    "coerce",
    # Basic types
    "BasicValue",
    "BasicUint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uint128",
    "uint256",
    "boolean",
    "byte",
    "bit",
    "BASIC_TYPES",
    # Composite types
    "HomogeneousComposite",
    "Vector",
    "List",
    # Expressions
    "parse_type",
    "value_from_obj",
    "value_to_obj",
]

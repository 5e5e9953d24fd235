"""
Label Enum Package

Read-only, bidirectional mapping between string labels and unsigned
integer indices.

Two index-assignment strategies are provided:
    - Sequential: one label, one dense index (1, 2, 3, ...)
    - Composite:  one label, one independent bit (1, 2, 4, 8, ...)

Composite enums can pack any subset of their labels into a single
integer bitmask and recover it losslessly.

ARCHITECTURAL GUARANTEE:
------------------------
An enum is built once and never mutated afterwards.
Index 0 is reserved as the "not found" sentinel.
"""

from labelenum.bitset import BitSet
from labelenum.model import (
    NATIVE_UINT_BITS,
    NO_RECORD,
    EmptyEnumError,
    LabelEnum,
    Record,
    Strategy,
    composite_index,
    new,
    new_composite,
    new_custom,
    sequential_index,
)

__version__ = "0.1.0"

__all__ = [
    "BitSet",
    "EmptyEnumError",
    "LabelEnum",
    "NATIVE_UINT_BITS",
    "NO_RECORD",
    "Record",
    "Strategy",
    "composite_index",
    "new",
    "new_composite",
    "new_custom",
    "sequential_index",
]

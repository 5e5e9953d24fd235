"""
Core Enum Model Objects

Defines the label <-> index enumeration and its index-assignment strategies.

    - Record:     one (label, index) binding
    - Strategy:   how indices were assigned (sequential, composite, custom)
    - LabelEnum:  immutable bidirectional mapping with bitmask pack/unpack

ARCHITECTURAL RULE:
    A LabelEnum:
        - Is built once and never mutated afterwards
        - Never raises on lookup (unknown input yields a sentinel)
        - Does NOT validate custom strategies (caller contract)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Callable, Dict, Iterator, List, Sequence, Tuple

from labelenum.bitset import BitSet

logger = logging.getLogger(__name__)

# Index returned for labels that are not members. Built-in strategies start
# at 1, so 0 is never bound to a real label.
NO_RECORD = 0

# Width of the host's native unsigned integer. Composite enums holding more
# labels than this are outside the supported range (see analyzer).
NATIVE_UINT_BITS = 64

IndexFunc = Callable[[int], int]


class EmptyEnumError(ValueError):
    """Raised when an enum is constructed without any labels."""
    pass


class Strategy(Enum):
    """
    Index-assignment strategy an enum was built with.

    SEQUENTIAL and COMPOSITE are the built-in strategies.
    CUSTOM covers any caller-supplied index function.
    """

    SEQUENTIAL = "sequential"
    COMPOSITE = "composite"
    CUSTOM = "custom"


def sequential_index(position: int) -> int:
    """Dense indexing: 1, 2, 3, ..."""
    return position + 1


def composite_index(position: int) -> int:
    """One bit per label: 1, 2, 4, 8, ..."""
    return 1 << position


@dataclass(frozen=True)
class Record:
    """
    A single label <-> index binding.

    Properties:
        label: The enum member
        index: The integer bound to it
    """

    label: str
    index: int


@dataclass(frozen=True, repr=False)
class LabelEnum:
    """
    Enumeration of string labels, each bound to an integer index.

    Built once from an ordered sequence of labels and an index function
    f(position) -> index (see build()). Read-only afterwards.

    Properties:
        records:
            Retained bindings in construction order. When a label occurs
            more than once, only its first occurrence is kept.

        strategy:
            Strategy tag, used by serialization and diagnostics.

    INVARIANTS:
        - Index 0 (NO_RECORD) is the "not found" sentinel
        - Every retained label has exactly one index
        - If a custom strategy assigns the same index twice, the later
          label owns the reverse binding (no validation, no error)

    IMPORTANT:
        This object is immutable (frozen=True).
        Equality compares records and strategy, not the index function.

    Example:
        colors = new_composite("red", "green", "blue")
        colors.bit_map("red", "blue")   # 5
        colors.hydrate(5)               # ["red", "blue"]
    """

    records: Tuple[Record, ...]
    strategy: Strategy = Strategy.CUSTOM

    def __post_init__(self):
        if len(self.records) == 0:
            raise EmptyEnumError("at least one label is expected")

    @classmethod
    def build(
        cls,
        labels: Sequence[str],
        index_func: IndexFunc = sequential_index,
        strategy: Strategy = Strategy.CUSTOM,
    ) -> "LabelEnum":
        """
        Bind the label at each position i to index_func(i).

        Raises:
            EmptyEnumError: If labels is empty
        """
        if len(labels) == 0:
            raise EmptyEnumError("at least one label is expected")

        seen: Dict[str, int] = {}
        records: List[Record] = []

        for position, label in enumerate(labels):
            index = index_func(position)
            if label in seen:
                # Earliest occurrence wins; later duplicates are ignored.
                logger.debug("dropping duplicate label %r at position %d", label, position)
                continue
            seen[label] = index
            records.append(Record(label=label, index=index))

        logger.debug(
            "built %s enum with %d label(s) from %d input(s)",
            strategy.value, len(records), len(labels),
        )
        return cls(records=tuple(records), strategy=strategy)

    @cached_property
    def _forward(self) -> Dict[str, int]:
        return {r.label: r.index for r in self.records}

    @cached_property
    def _reverse(self) -> Dict[int, str]:
        return {r.index: r.label for r in self.records}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def index(self, label: str) -> int:
        """
        Return the index bound to `label`.

        Returns:
            The index, or NO_RECORD if the label is not a member
        """
        return self._forward.get(label, NO_RECORD)

    def value(self, index: int) -> str:
        """
        Return the label bound to `index`, or "" if unbound.

        Ambiguous when "" is itself a member; use value_checked() then.
        """
        label, _ = self.value_checked(index)
        return label

    def value_checked(self, index: int) -> Tuple[str, bool]:
        """
        Return (label, found) for `index`.

        Returns:
            (label, True) if bound, ("", False) otherwise
        """
        if index not in self._reverse:
            return "", False
        return self._reverse[index], True

    def contains(self, *labels: str) -> bool:
        """True if every given label is a member. Vacuously true for none."""
        return all(label in self._forward for label in labels)

    # ------------------------------------------------------------------
    # Bitmask pack / unpack
    # ------------------------------------------------------------------

    def bit_map(self, *labels: str) -> int:
        """
        Pack labels into a bitmask.

        Only meaningful for composite enums: with overlapping indices the
        result cannot be reversed. This is not detected.

        Unknown labels are skipped without error.
        """
        bits = BitSet()
        for label in labels:
            index = self.index(label)
            if index == NO_RECORD:
                continue
            bits.set(index)
        return bits.as_unsigned()

    def hydrate(self, bits: int) -> List[str]:
        """
        Unpack a bitmask into labels, in ascending bit order.

        The order of labels given to bit_map() is not preserved. Bits that
        map to no label yield "" (the mask was not produced by this enum).
        """
        mask = BitSet(bits)
        values: List[str] = []

        i = 1
        while i <= bits:
            if mask.has(i):
                values.append(self.value(i))
            i <<= 1

        return values

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    def labels(self) -> List[str]:
        """Retained labels in construction order."""
        return [r.label for r in self.records]

    def indices(self) -> List[int]:
        """Indices of retained labels in construction order."""
        return [r.index for r in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, label: object) -> bool:
        return label in self._forward

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels())

    def __repr__(self) -> str:
        bindings = ", ".join(f"{r.label!r}={r.index}" for r in self.records)
        return f"LabelEnum({self.strategy.value}: {bindings})"


def new(*labels: str) -> LabelEnum:
    """
    Create an enum indexed sequentially from 1, in the order given.

        new("one", "two", "three")   # one=1, two=2, three=3

    Fits values that take exactly one member. For sets of members see
    new_composite().
    """
    return LabelEnum.build(labels, sequential_index, Strategy.SEQUENTIAL)


def new_composite(*labels: str) -> LabelEnum:
    """
    Create an enum indexed by powers of two, in the order given.

        new_composite("one", "two", "three")   # one=1, two=2, three=4

    Fits values that take one or more members, packed with bit_map()
    and recovered with hydrate().
    """
    return LabelEnum.build(labels, composite_index, Strategy.COMPOSITE)


def new_custom(labels: Sequence[str], index_func: IndexFunc) -> LabelEnum:
    """
    Create an enum whose label at position i is indexed by index_func(i).

    index_func is not checked for collisions, for use of the reserved
    index 0, or for bitmask safety. Use analyzer.analyze_enum() to inspect
    the result.
    """
    return LabelEnum.build(list(labels), index_func, Strategy.CUSTOM)

"""
Enum Analyzer — diagnostics for LabelEnum objects.

This module provides lightweight analysis of enums:
    - Index inventory (largest index, bit width)
    - Bitmask safety (single-bit indices, collisions, sentinel use)
    - Native-width overflow risk for composite enums
    - Warning flags for custom strategies

IMPORTANT: It does NOT modify the enum and never rejects one.
Construction stays permissive; this only produces read-only reports.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from labelenum.model import NATIVE_UINT_BITS, NO_RECORD, LabelEnum, Strategy


def _is_single_bit(index: int) -> bool:
    return index > 0 and index & (index - 1) == 0


@dataclass
class EnumReport:
    """Analysis report for an enum."""

    strategy: Strategy
    total_labels: int = 0

    # Index inventory
    max_index: int = 0
    bit_width: int = 0

    # Bitmask safety
    sentinel_labels: List[str] = field(default_factory=list)   # Bound to NO_RECORD
    collisions: Dict[int, List[str]] = field(default_factory=dict)
    non_power_of_two: List[str] = field(default_factory=list)
    composite_safe: bool = False

    # Width
    native_bits: int = NATIVE_UINT_BITS
    exceeds_native_width: bool = False

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def find_duplicate_labels(labels: Iterable[str]) -> List[str]:
    """
    Return the labels a constructor would silently drop.

    Each repeated label is listed once, in order of first repetition.
    """
    seen: Set[str] = set()
    duplicates: List[str] = []
    for label in labels:
        if label in seen and label not in duplicates:
            duplicates.append(label)
        seen.add(label)
    return duplicates


def analyze_enum(enum: LabelEnum, native_bits: int = NATIVE_UINT_BITS) -> EnumReport:
    """
    Perform analysis of a LabelEnum.

    Checks for:
    - Labels bound to the reserved sentinel index
    - Indices shared by more than one label
    - Indices that are not a single bit (unsafe for bit_map/hydrate)
    - Indices wider than the host's native unsigned integer

    Returns an EnumReport with metrics and warnings.
    """
    report = EnumReport(strategy=enum.strategy, native_bits=native_bits)
    report.total_labels = len(enum)

    # =========================================================================
    # 1. INDEX INVENTORY
    # =========================================================================

    indices = enum.indices()
    report.max_index = max(indices)
    report.bit_width = max(i.bit_length() for i in indices)
    report.exceeds_native_width = report.bit_width > native_bits

    # =========================================================================
    # 2. BITMASK SAFETY
    # =========================================================================

    by_index: Dict[int, List[str]] = defaultdict(list)
    for record in enum.records:
        by_index[record.index].append(record.label)
        if record.index == NO_RECORD:
            report.sentinel_labels.append(record.label)
        if not _is_single_bit(record.index):
            report.non_power_of_two.append(record.label)

    report.collisions = {i: labels for i, labels in by_index.items() if len(labels) > 1}
    report.composite_safe = not (
        report.collisions or report.sentinel_labels or report.non_power_of_two
    )

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.sentinel_labels:
        report.add_warning(
            f"Labels bound to reserved index {NO_RECORD}: {', '.join(report.sentinel_labels)}"
        )

    for index, labels in sorted(report.collisions.items()):
        report.add_warning(
            f"Index {index} shared by: {', '.join(labels)} (reverse lookup returns {labels[-1]})"
        )

    if enum.strategy is Strategy.COMPOSITE or enum.strategy is Strategy.CUSTOM:
        if report.non_power_of_two:
            report.add_warning(
                f"Not bitmask-safe, non single-bit indices for: {', '.join(report.non_power_of_two)}"
            )

    if report.exceeds_native_width:
        report.add_warning(
            f"Index width {report.bit_width} bits exceeds native {native_bits}-bit unsigned integer"
        )

    return report

"""
Tests for the Enum Analyzer.

Tests verify that the analyzer correctly:
    - Inventories indices and bit width
    - Detects collisions and sentinel bindings
    - Flags non bitmask-safe custom strategies
    - Reports native-width overflow risk
"""

from labelenum.model import Strategy, new, new_composite, new_custom
from labelenum.analyzer import analyze_enum, find_duplicate_labels


def test_composite_enum_is_safe():
    """A composite enum should be clean."""
    report = analyze_enum(new_composite("one", "two", "three"))

    assert report.strategy is Strategy.COMPOSITE
    assert report.total_labels == 3
    assert report.max_index == 4
    assert report.bit_width == 3
    assert report.composite_safe
    assert not report.collisions
    assert not report.sentinel_labels
    assert not report.exceeds_native_width
    assert report.warnings == []


def test_sequential_enum_not_composite_safe():
    """Sequential indices are not independent bits, but this is not a warning."""
    report = analyze_enum(new("one", "two", "three"))

    assert report.max_index == 3
    assert report.non_power_of_two == ["three"]
    assert not report.composite_safe
    assert report.warnings == []


def test_custom_collisions_and_sentinel():
    """Should detect shared indices and labels bound to 0."""
    report = analyze_enum(new_custom(["a", "b", "c"], lambda i: i % 2))

    assert report.collisions == {0: ["a", "c"]}
    assert report.sentinel_labels == ["a", "c"]
    assert not report.composite_safe
    assert any("Index 0 shared by: a, c" in w for w in report.warnings)
    assert any("reserved index 0" in w for w in report.warnings)
    assert any("Not bitmask-safe" in w for w in report.warnings)


def test_custom_non_single_bit():
    """Should flag custom indices that are not a single bit."""
    report = analyze_enum(new_custom(["a", "b"], lambda i: 3 * (i + 1)))

    assert report.non_power_of_two == ["a", "b"]
    assert not report.collisions
    assert not report.composite_safe


def test_exceeds_native_width():
    """Should warn when a composite enum needs more than 64 bits."""
    labels = [f"l{i}" for i in range(65)]
    report = analyze_enum(new_composite(*labels))

    assert report.bit_width == 65
    assert report.exceeds_native_width
    assert report.composite_safe
    assert any("exceeds native 64-bit" in w for w in report.warnings)


def test_custom_native_width():
    """Should honour a narrower native width."""
    report = analyze_enum(new_composite(*[f"l{i}" for i in range(33)]), native_bits=32)

    assert report.native_bits == 32
    assert report.exceeds_native_width


def test_analyzer_does_not_modify_enum():
    e = new_composite("one", "two")
    before = e.records
    analyze_enum(e)
    assert e.records == before


def test_find_duplicate_labels():
    assert find_duplicate_labels(["a", "b", "a", "c", "b", "a"]) == ["a", "b"]
    assert find_duplicate_labels(["a", "b"]) == []
    assert find_duplicate_labels([]) == []

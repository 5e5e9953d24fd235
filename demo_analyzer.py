"""
Demo: Pack/unpack permissions, run the analyzer and output the reports.
"""

from labelenum import new_custom
from labelenum.examples import build_example_permission_enum, build_example_status_enum
from labelenum.analyzer import analyze_enum
from labelenum.serialization import enum_to_yaml


def print_report(name, report):
    """Pretty-print an EnumReport."""
    print()
    print("=" * 70)
    print(f"ENUM ANALYSIS REPORT: {name}")
    print("=" * 70)
    print()

    print("📊 BASIC METRICS")
    print(f"  Strategy:              {report.strategy.value}")
    print(f"  Total Labels:          {report.total_labels}")
    print(f"  Max Index:             {report.max_index}")
    print(f"  Bit Width:             {report.bit_width}/{report.native_bits}")
    print()

    print("🧮 BITMASK SAFETY")
    print(f"  Composite Safe:        {'YES' if report.composite_safe else 'NO'}")
    print(f"  Collisions:            {report.collisions if report.collisions else 'None'}")
    print(f"  Sentinel Labels:       {report.sentinel_labels if report.sentinel_labels else 'None'}")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - Enum looks clean!")
    print()


if __name__ == "__main__":
    permissions = build_example_permission_enum()
    bits = permissions.bit_map("share", "read", "write")
    print(f"bit_map(share, read, write) = {bits}")
    print(f"hydrate({bits}) = {permissions.hydrate(bits)}")

    print_report("permissions", analyze_enum(permissions))
    print_report("statuses", analyze_enum(build_example_status_enum()))
    print_report("custom", analyze_enum(new_custom(["a", "b", "c"], lambda i: i % 2)))

    # Also save to YAML for inspection
    yaml_str = enum_to_yaml(permissions)
    with open("example_enum_output.yaml", "w") as f:
        f.write(yaml_str)
    print("✅ Enum exported to example_enum_output.yaml")

"""
Test the example enums.

Validates that the example builders create the expected strategies and
indices.
"""

from labelenum.model import Strategy
from labelenum.examples import (
    ORDER_STATUSES,
    PERMISSIONS,
    build_example_permission_enum,
    build_example_status_enum,
)


def test_example_status_enum():
    statuses = build_example_status_enum()

    assert statuses.strategy is Strategy.SEQUENTIAL
    assert statuses.labels() == ORDER_STATUSES
    assert statuses.index("pending") == 1
    assert statuses.value(5) == "cancelled"


def test_example_permission_enum():
    permissions = build_example_permission_enum()

    assert permissions.strategy is Strategy.COMPOSITE
    assert permissions.labels() == PERMISSIONS
    bits = permissions.bit_map("share", "read", "write")
    assert bits == 1 + 2 + 16
    assert permissions.hydrate(bits) == ["read", "write", "share"]

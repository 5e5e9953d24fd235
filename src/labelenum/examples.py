"""
Example enums for proof-of-concept and demos.

Builds a sequential order-status enum (one member per value) and a composite
file-permission enum (any subset of members per value).
"""
from labelenum.model import LabelEnum, new, new_composite


ORDER_STATUSES = ["pending", "paid", "shipped", "delivered", "cancelled"]

PERMISSIONS = ["read", "write", "execute", "delete", "share"]


def build_example_status_enum() -> LabelEnum:
    return new(*ORDER_STATUSES)


def build_example_permission_enum() -> LabelEnum:
    return new_composite(*PERMISSIONS)

"""
Serialization helpers for LabelEnum objects.

Provides lossless JSON/YAML round-trip via intermediate dict representation.

Bindings are stored explicitly as (label, index) records rather than as a
label list, so indices shifted by dropped duplicates or produced by a custom
strategy are restored exactly.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from labelenum.model import LabelEnum, Record, Strategy


class SerializationError(ValueError):
    """Raised when a serialized enum cannot be decoded."""
    pass


def record_to_dict(r: Record) -> Dict[str, Any]:
    return {"label": r.label, "index": r.index}


def record_from_dict(d: Dict[str, Any]) -> Record:
    if not isinstance(d, dict) or "label" not in d or "index" not in d:
        raise SerializationError(f"Invalid record: {d!r}")

    label, index = d["label"], d["index"]
    if not isinstance(label, str):
        raise SerializationError(f"Record label must be a string: {label!r}")
    # bool is an int subclass
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise SerializationError(f"Record index must be an unsigned integer: {index!r}")

    return Record(label=label, index=index)


def enum_to_dict(e: LabelEnum) -> Dict[str, Any]:
    return {
        "strategy": e.strategy.value,
        "records": [record_to_dict(r) for r in e.records],
    }


def enum_from_dict(d: Dict[str, Any]) -> LabelEnum:
    if not isinstance(d, dict):
        raise SerializationError(f"Expected a mapping, got {type(d).__name__}")

    try:
        strategy = Strategy(d.get("strategy", Strategy.CUSTOM.value))
    except ValueError as e:
        raise SerializationError(f"Unknown strategy: {d.get('strategy')!r}") from e

    raw_records = d.get("records")
    if not isinstance(raw_records, list):
        raise SerializationError("Missing 'records' list")

    records: List[Record] = [record_from_dict(r) for r in raw_records]
    labels = [r.label for r in records]
    indices = [r.index for r in records]

    return LabelEnum.build(labels, indices.__getitem__, strategy)


def enum_to_json(e: LabelEnum) -> str:
    return json.dumps(enum_to_dict(e), sort_keys=True)


def enum_from_json(s: str) -> LabelEnum:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return enum_from_dict(d)


def enum_to_yaml(e: LabelEnum) -> str:
    return yaml.safe_dump(enum_to_dict(e))


def enum_from_yaml(s: str) -> LabelEnum:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML: {e}") from e
    return enum_from_dict(d)

# src/fuzzysearch/records.py
"""
Record access, independent of how a record is represented.

A record is either a Mapping (field name -> value) or a structured object that
exposes fields as attributes (dataclass instance, named tuple, plain object).
Everything else in the package goes through get_field(), so the search core
never cares which kind it was handed.
"""
from __future__ import annotations
import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Dict, Hashable, Optional

from .errors import InvalidInput
from .normalize import to_text

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)


def is_record(obj: Any) -> bool:
    """True for mappings and attribute-bearing objects; False for scalars, lists, classes, None."""
    if obj is None or isinstance(obj, _SCALARS) or isinstance(obj, type):
        return False
    if isinstance(obj, Mapping):
        return True
    if dataclasses.is_dataclass(obj):
        return True
    if isinstance(obj, tuple):
        return hasattr(obj, "_fields")  # named tuple
    if isinstance(obj, (list, set, frozenset)):
        return False
    return hasattr(obj, "__dict__") or hasattr(type(obj), "__slots__")


def get_field(record: Any, name: str) -> Optional[str]:
    """Text of record[name] / record.name, or None when the field is absent."""
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    return to_text(value)


def keyed_records(data: Any) -> Dict[Hashable, Any]:
    """
    Validate a data source and return it as {key: record}, preserving order.
      - Mapping  -> its own keys are the record keys
      - iterable -> position in the iteration is the key
    Raises InvalidInput for text, scalars, or any element that is not a record.
    """
    if data is None or isinstance(data, _SCALARS):
        raise InvalidInput(f"data must be a collection of records, got {type(data).__name__}")

    if isinstance(data, Mapping):
        items = list(data.items())
    elif isinstance(data, Iterable):
        items = list(enumerate(data))
    else:
        raise InvalidInput(f"data must be a collection of records, got {type(data).__name__}")

    for key, rec in items:
        if not is_record(rec):
            raise InvalidInput(
                f"record {key!r} is a {type(rec).__name__}; expected a mapping or an object with fields"
            )
    return dict(items)


def _slot_names(obj: Any) -> list[str]:
    names: list[str] = []
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__") and s not in names)
    return names


def as_plain(record: Any) -> Any:
    """Best-effort conversion to JSON-friendly data (for the CLI and web output)."""
    if isinstance(record, Mapping):
        return dict(record)
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return dataclasses.asdict(record)
    if isinstance(record, tuple) and hasattr(record, "_asdict"):
        return dict(record._asdict())
    if hasattr(record, "__dict__"):
        return dict(vars(record))
    # slotted object without __dict__; unset slots are left out
    return {name: getattr(record, name) for name in _slot_names(record) if hasattr(record, name)}

"""Conversion of caller objects into plain JSON-shaped values.

The diff engine only ever walks ``None``, ``bool``, ``int``, ``float``,
``str``, ``list`` and ``dict[str, ...]``.  Everything a caller hands in is
normalised here first, the way a JSON encoder would see it.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Final
from uuid import UUID

JsonValue = None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]


class DiffError(Exception):
    """Raised when a diff cannot be computed for the given inputs."""


class ValueConversionError(DiffError):
    """Raised when an input object has no JSON-shaped representation."""

    def __init__(self, obj: object) -> None:
        super().__init__(f"Cannot convert {type(obj).__name__} to a JSON value")
        self.obj_type = type(obj)


class _Absent:
    """Marker for "no difference below this node"."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


def to_value(obj: Any) -> JsonValue:
    """Convert *obj* into a JSON-shaped value.

    Raises:
        ValueConversionError: if *obj* (or anything nested in it) has no
            JSON representation.
    """
    # Enum first (StrEnum/IntEnum members are also str/int); bool before int
    if isinstance(obj, Enum):
        return to_value(obj.value)
    if obj is None or isinstance(obj, (bool, str)):
        return obj
    if isinstance(obj, (int, float)):
        return obj
    if isinstance(obj, Decimal):
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    if isinstance(obj, Mapping):
        return {str(k): to_value(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_value(item) for item in obj]
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_value(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, UUID):
        return str(obj)
    model_dump = getattr(obj, "model_dump", None)
    if callable(model_dump):
        return to_value(model_dump(mode="json"))
    raise ValueConversionError(obj)


def is_container(value: JsonValue) -> bool:
    return isinstance(value, (dict, list))


def deep_equal(left: object, right: object) -> bool:
    """Structural equality over JSON values.

    Unlike ``==``, booleans never equal numbers (``True != 1``).  Integers
    and floats compare by numeric value.  ABSENT only equals itself.
    """
    if left is ABSENT or right is ABSENT:
        return left is right
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, dict):
        if not isinstance(right, dict) or left.keys() != right.keys():
            return False
        return all(deep_equal(v, right[k]) for k, v in left.items())
    if isinstance(left, list):
        if not isinstance(right, list) or len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, (int, float)):
        if not isinstance(right, (int, float)):
            return False
        # NaN is a valid decoded JSON number and must equal itself
        return left == right or (math.isnan(left) and math.isnan(right))
    if left is None or right is None:
        return left is right
    return type(left) is type(right) and left == right


def identity_text(value: JsonValue) -> str:
    """Text form of an identity field, used to correlate list items.

    Mirrors how a JSON tree renders a node as text: containers have no
    textual form and render as the empty string.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return value if isinstance(value, str) else repr(value)
    return ""

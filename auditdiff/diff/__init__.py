"""Before/after diff engine for audit records.

Submodules:
    values  -- JSON value conversion, deep equality and the ABSENT marker.
    engine  -- calculate_diff: recursive object/array diff with identity
               matching on ``key``/``id`` list item fields.
"""

from auditdiff.diff.engine import IDENTITY_FIELDS, calculate_diff
from auditdiff.diff.values import (
    ABSENT,
    DiffError,
    JsonValue,
    ValueConversionError,
    deep_equal,
    to_value,
)

__all__ = [
    "ABSENT",
    "IDENTITY_FIELDS",
    "DiffError",
    "JsonValue",
    "ValueConversionError",
    "calculate_diff",
    "deep_equal",
    "to_value",
]

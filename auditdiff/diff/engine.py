"""Recursive before/after diff for audit records.

``calculate_diff`` reports what changed or was added in *after* compared to
*before*.  Unchanged fields and unchanged list items are dropped, removals
are never reported, and list items are correlated by their ``key`` or ``id``
field when they carry one so that a reordered list does not show up as a
full rewrite.

The function never raises.  If anything goes wrong the caller gets *after*
back verbatim, so an audit record is never lost to a diffing bug.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from auditdiff.diff.values import (
    ABSENT,
    JsonValue,
    deep_equal,
    identity_text,
    is_container,
    to_value,
)
from auditdiff.observability.logging import get_logger

_logger = get_logger("diff.engine")

# Checked in this order; only the first one present on an item is used for matching
IDENTITY_FIELDS: tuple[str, ...] = ("key", "id")

Converter = Callable[[Any], JsonValue]


def calculate_diff(before: Any, after: Any, converter: Converter | None = None) -> Any:
    """Return the parts of *after* that differ from *before*.

    Args:
        before:    Previous state.  Anything :func:`to_value` accepts.
        after:     New state.
        converter: Override for the object-to-JSON conversion step.

    Returns:
        A dict, list or scalar shaped like *after*, or ``ABSENT`` when there
        is nothing to report.  On any internal failure, *after* unchanged.
    """
    convert = converter or to_value
    try:
        old_value = convert(before)
        new_value = convert(after)
        return _diff_value(old_value, new_value)
    except Exception as exc:
        _logger.warning(
            "diff_computation_failed",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return after


def _diff_value(old: Any, new: JsonValue) -> Any:
    if isinstance(new, dict):
        return _diff_object(old, new)
    if isinstance(new, list):
        return _diff_array(old, new)
    if new is None:
        return ABSENT
    if isinstance(new, (bool, int, float, str)):
        return new
    raise TypeError(f"Unexpected value type in diff: {type(new).__name__}")


def _diff_object(old: Any, new: dict[str, JsonValue]) -> Any:
    old_map = old if isinstance(old, dict) else {}
    changes: dict[str, Any] = {}
    for key, new_field in new.items():
        old_field = old_map.get(key, ABSENT)
        if deep_equal(old_field, new_field):
            continue
        if is_container(new_field):
            nested = _diff_value(old_field, new_field)
            # A changed container can still filter down to nothing
            if nested is not ABSENT:
                changes[key] = nested
        else:
            changes[key] = new_field
    return changes if changes else ABSENT


def _diff_array(old: Any, new: list[JsonValue]) -> Any:
    changes: list[Any] = []
    for index, new_item in enumerate(new):
        old_item = _find_matching_item(old, new_item, index)
        if deep_equal(old_item, new_item):
            continue
        if not is_container(new_item):
            changes.append(new_item)
            continue
        item_diff = _diff_value(old_item, new_item)
        if item_diff is ABSENT:
            continue
        if isinstance(new_item, dict) and isinstance(item_diff, dict):
            _inject_identity(item_diff, new_item)
        changes.append(item_diff)
    return changes if changes else ABSENT


def _inject_identity(item_diff: dict[str, Any], source: dict[str, JsonValue]) -> None:
    """Copy identity fields into a partial item diff so it can be correlated."""
    for field in IDENTITY_FIELDS:
        if field in source:
            item_diff.setdefault(field, source[field])


def _identity_field(item: JsonValue) -> str | None:
    if not isinstance(item, dict):
        return None
    for field in IDENTITY_FIELDS:
        if field in item:
            return field
    return None


def _find_matching_item(old: Any, new_item: JsonValue, index: int) -> Any:
    """Locate the *before* counterpart of *new_item*.

    Items are matched on the text form of their identity field first, then
    by position.  ABSENT when there is no counterpart.
    """
    if not isinstance(old, list):
        return ABSENT
    field = _identity_field(new_item)
    if field is not None:
        assert isinstance(new_item, dict)
        wanted = identity_text(new_item[field])
        for candidate in old:
            if isinstance(candidate, dict) and field in candidate and identity_text(candidate[field]) == wanted:
                return candidate
    return old[index] if index < len(old) else ABSENT

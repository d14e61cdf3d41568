"""Property-based tests for calculate_diff.

Uses hypothesis to generate JSON-shaped trees and checks that:
 1. A value diffed against an equal copy of itself has no diff
 2. Object diffs only ever contain keys present in *after*
 3. The function never raises, whatever it is given
"""

from __future__ import annotations

import copy

from hypothesis import given, settings
from hypothesis import strategies as st

from auditdiff.diff import ABSENT, IDENTITY_FIELDS, calculate_diff

# ---------------------------------------------------------------------------
# Hypothesis strategies
# ---------------------------------------------------------------------------

# Identity fields are excluded: lists holding two items with the same
# identity text are matched to the first one and would show up as changed.
_keys = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=5).filter(
    lambda k: k not in IDENTITY_FIELDS
)

_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**53), max_value=2**53),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=20),
)

_json = st.recursive(
    _scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(_keys, children, max_size=4),
    ),
    max_leaves=25,
)

_objects = st.dictionaries(_keys, _json, max_size=6)
_containers = st.one_of(_objects, st.lists(_json, max_size=6))

_identified_items = st.lists(
    st.fixed_dictionaries({"id": st.integers(min_value=0, max_value=1000), "v": _scalars}),
    max_size=6,
    unique_by=lambda item: item["id"],
)


class TestDiffProperties:
    @given(value=_containers)
    @settings(max_examples=200)
    def test_equal_values_have_no_diff(self, value: object) -> None:
        assert calculate_diff(value, copy.deepcopy(value)) is ABSENT

    @given(before=_objects, after=_objects)
    @settings(max_examples=200)
    def test_object_diff_keys_come_from_after(self, before: dict, after: dict) -> None:
        result = calculate_diff(before, after)
        assert result is ABSENT or set(result) <= set(after)

    @given(before=_objects, after=_objects)
    def test_reported_scalars_are_taken_from_after(self, before: dict, after: dict) -> None:
        result = calculate_diff(before, after)
        if result is ABSENT:
            return
        for key, value in result.items():
            if not isinstance(after[key], (dict, list)):
                assert value == after[key]

    @given(items=_identified_items, data=st.data())
    def test_identified_items_survive_shuffling(self, items: list, data: st.DataObject) -> None:
        shuffled = data.draw(st.permutations(items))
        assert calculate_diff(items, shuffled) is ABSENT

    @given(before=_json, after=_json)
    def test_never_raises(self, before: object, after: object) -> None:
        calculate_diff(before, after)

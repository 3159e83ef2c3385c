import pytest

from definemgr.core.tokens import join_flags
from definemgr.engine.reconcile import reconcile

CASES = [
    ({"A", "B"}, ["B", "C"], [False, True]),
    (set(), ["X"], [True]),
    ({"X", "Y", "Z"}, ["Y"], [False]),
    ({"UNITY_POST", "Debug_A"}, ["Debug_A", "Debug_B", "Debug_C"], [True, False, True]),
    ({"A"}, [], []),
]


def test_scenario_managed_off_removed_unmanaged_kept():
    assert reconcile({"A", "B"}, ["B", "C"], [False, True]) == ["A", "C"]


def test_external_input_not_mutated():
    external = {"A", "B"}
    reconcile(external, ["B"], [False])
    assert external == {"A", "B"}


def test_empty_managed_returns_sorted_external():
    assert reconcile({"c", "a", "B"}, [], []) == ["B", "a", "c"]


def test_short_state_treated_as_off():
    assert reconcile({"A", "B", "C"}, ["B", "C"], [True]) == ["A", "B"]
    assert reconcile({"B"}, ["B"], []) == []


def test_accepts_raw_flag_string():
    assert reconcile("Z; A;;B ", ["B"], [False]) == ["A", "Z"]


@pytest.mark.parametrize("external,managed,state", CASES)
def test_idempotent(external, managed, state):
    first = reconcile(external, managed, state)
    assert reconcile(set(first), managed, state) == first
    assert reconcile(join_flags(first), managed, state) == first


@pytest.mark.parametrize("external,managed,state", CASES)
def test_unmanaged_preserved_and_managed_match_state(external, managed, state):
    result = set(reconcile(external, managed, state))
    for token in external - set(managed):
        assert token in result
    for token in result - set(managed):
        assert token in external
    for token, on in zip(managed, state):
        assert (token in result) == on


def test_deterministic_output():
    a = join_flags(reconcile({"b", "a", "C"}, ["d"], [True]))
    b = join_flags(reconcile({"C", "a", "b"}, ["d"], [True]))
    assert a == b == "C;a;b;d"

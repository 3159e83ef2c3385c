import pytest

from definemgr.core.errors import DuplicateToken, IndexOutOfRange, InvalidCharacter
from definemgr.managed import ManagedSet, ensure_size, derive_from_external, toggle, remove_at


def test_add_appends_disabled_entry():
    managed = ManagedSet.from_tokens(["A"])
    entry = managed.add("  B ")
    assert entry.token == "B" and entry.enabled is False
    assert managed.tokens() == ["A", "B"]
    assert managed.states() == [False, False]


def test_add_rejects_and_leaves_list_unchanged():
    managed = ManagedSet.from_tokens(["A"], [True])
    with pytest.raises(DuplicateToken):
        managed.add("A")
    with pytest.raises(InvalidCharacter):
        managed.add("B C")
    assert managed.tokens() == ["A"]
    assert managed.states() == [True]


def test_remove_at_drops_token_and_state_together():
    managed = ManagedSet.from_tokens(["A", "B", "C"], [True, False, True])
    removed = managed.remove_at(1)
    assert removed.token == "B"
    assert managed.tokens() == ["A", "C"]
    assert managed.states() == [True, True]


@pytest.mark.parametrize("index", [3, -1, 99])
def test_remove_at_out_of_range_is_noop(index):
    managed = ManagedSet.from_tokens(["A", "B", "C"], [True, False, True])
    with pytest.raises(IndexOutOfRange):
        managed.remove_at(index)
    assert managed.tokens() == ["A", "B", "C"]
    assert managed.states() == [True, False, True]


def test_toggle_and_bounds():
    managed = ManagedSet.from_tokens(["A"])
    managed.toggle(0, True)
    assert managed.enabled_tokens() == ["A"]
    with pytest.raises(IndexOutOfRange):
        managed.toggle(1, True)


def test_derive_from_external_is_exact_match():
    managed = ManagedSet.from_tokens(["A", "b", "C"], [False, True, True])
    managed.derive_from_external({"A", "B", "Other"})
    assert managed.states() == [True, False, False]


def test_from_tokens_pads_short_states():
    managed = ManagedSet.from_tokens(["A", "B"], [True])
    assert managed.states() == [True, False]
    assert "A" in managed and "Z" not in managed


def test_ensure_size_pads_and_truncates():
    assert ensure_size([True], ["A", "B", "C"]) == [True, False, False]
    assert ensure_size([True, True, False], ["A"]) == [True]
    states = [False]
    ensure_size(states, [])
    assert states == []


def test_parallel_helpers():
    tokens, states = ["A", "B"], [True, False]
    assert derive_from_external(tokens, ["B"]) == [False, True]
    toggle(states, 1, True)
    assert states == [True, True]
    with pytest.raises(IndexOutOfRange):
        toggle(states, 2, True)
    assert remove_at(tokens, states, 0) == "A"
    assert tokens == ["B"] and states == [True]
    with pytest.raises(IndexOutOfRange):
        remove_at(tokens, states, 5)
    assert tokens == ["B"] and states == [True]

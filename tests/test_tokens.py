import pytest

from definemgr.core.errors import EmptyToken, InvalidCharacter, DuplicateToken
from definemgr.core.tokens import validate, parse_flags, join_flags


def test_validate_trims_and_accepts():
    assert validate("Debug_X") == "Debug_X"
    assert validate("  Debug_X\t") == "Debug_X"


@pytest.mark.parametrize("candidate", ["", "   ", None, "\n"])
def test_validate_rejects_empty(candidate):
    with pytest.raises(EmptyToken):
        validate(candidate)


@pytest.mark.parametrize("candidate,char", [("a b", " "), ("a;b", ";"), ("a\tb", "\t")])
def test_validate_rejects_bad_characters(candidate, char):
    with pytest.raises(InvalidCharacter) as exc:
        validate(candidate)
    assert exc.value.char == char


def test_validate_rejects_duplicate_case_sensitive():
    with pytest.raises(DuplicateToken):
        validate(" Debug_X ", ["Debug_X"])
    # different case is a different define
    assert validate("debug_x", ["Debug_X"]) == "debug_x"


def test_parse_flags_splits_trims_and_drops_empties():
    assert parse_flags(" A ; ;B;;C ") == ["A", "B", "C"]
    assert parse_flags("A;B;A") == ["A", "B"]
    assert parse_flags("") == []
    assert parse_flags(None) == []


def test_join_flags():
    assert join_flags(["A", "B"]) == "A;B"
    assert join_flags([]) == ""

import pytest
from wordle_helper.engine import (
    Language, Slot, SlotKind, empty_playfield, parse_playfield, parse_wrong_letters,
    playfield_letters, render_playfield, solve,
)

WORDS = ["crane", "raise", "stare", "trace", "cared", "stone", "eagle", "adopt", "alarm", "plumb"]


# --- feedback model ---

def test_parse_playfield_encoding():
    pf = parse_playfield("A-k--", 5)
    assert pf[0] == Slot(SlotKind.LOCKED, "a")
    assert pf[1] == Slot.unknown()
    assert pf[2] == Slot(SlotKind.MISPLACED, "k")
    assert render_playfield(pf) == "A-k--"
    assert playfield_letters(pf) == {"a", "k"}


@pytest.mark.parametrize("text,length", [
    ("A-k-", 5),       # too short
    ("A-k---", 5),     # too long
    ("a1---", 5),      # digit
    ("a.---", 5),      # punctuation
])
def test_parse_playfield_rejects_bad_input(text, length):
    with pytest.raises(ValueError):
        parse_playfield(text, length)


def test_parse_playfield_alphabet():
    swedish = "abcdefghijklmnopqrstuvwxyzåäö"
    pf = parse_playfield("Å-ö---", 6, swedish)
    assert pf[0] == Slot.locked("å") and pf[2] == Slot.misplaced("ö")
    with pytest.raises(ValueError):
        parse_playfield("å----", 5, "abcdefghijklmnopqrstuvwxyz")


def test_parse_wrong_letters():
    assert parse_wrong_letters("G, h X") == frozenset({"g", "h", "x"})
    assert parse_wrong_letters("") == frozenset()
    with pytest.raises(ValueError):
        parse_wrong_letters("g1")


# --- constraint filter ---

def test_solve_end_to_end_scenario():
    words = ["apple", "mango", "amber"]
    assert solve(empty_playfield(5), frozenset(), words) == words
    assert solve(parse_playfield("A----", 5), frozenset(), words) == ["apple", "amber"]


def test_solve_locked_slot():
    out = solve(parse_playfield("--A--", 5), frozenset(), WORDS)
    assert out == ["crane", "stare", "trace", "alarm"]
    assert all(w[2] == "a" for w in out)


def test_solve_misplaced_slot():
    out = solve(parse_playfield("-a---", 5), frozenset(), ["crane", "raise", "stone"])
    # raise has 'a' in the slot it was shown wrong in; stone has no 'a'
    assert out == ["crane"]


def test_solve_wrong_letters():
    out = solve(empty_playfield(5), frozenset({"e"}), WORDS)
    assert out == ["adopt", "alarm", "plumb"]


def test_solve_wrong_letter_confirmed_elsewhere_is_not_absent():
    # 'e' was reported wrong in one slot but is locked in the last one
    out = solve(parse_playfield("----E", 5), frozenset({"e"}), WORDS)
    assert out == ["crane", "raise", "stare", "trace", "stone", "eagle"]


def test_solve_wrong_and_misplaced_same_letter():
    out = solve(parse_playfield("--a--", 5), frozenset({"a"}), ["alarm", "adopt", "stone"])
    assert out == ["adopt"]


FEEDBACK = [
    ("-----", ""),
    ("--A--", "io"),
    ("r---E", "s"),
    ("-a--e", "tp"),
    ("S-o--", "zq"),
]


@pytest.mark.parametrize("pf_text,wrong", FEEDBACK)
def test_solve_narrows_and_is_idempotent(pf_text, wrong):
    pf = parse_playfield(pf_text, 5)
    wl = parse_wrong_letters(wrong)
    once = solve(pf, wl, WORDS)
    assert set(once) <= set(WORDS)
    assert [w for w in WORDS if w in once] == once  # order preserved
    assert solve(pf, wl, once) == once


@pytest.mark.parametrize("pf_text,wrong", FEEDBACK)
def test_solve_slot_soundness(pf_text, wrong):
    pf = parse_playfield(pf_text, 5)
    out = solve(pf, parse_wrong_letters(wrong), WORDS)
    for i, slot in enumerate(pf):
        for w in out:
            if slot.kind is SlotKind.LOCKED:
                assert w[i] == slot.letter
            elif slot.kind is SlotKind.MISPLACED:
                assert slot.letter in w and w[i] != slot.letter
        if slot.kind is SlotKind.LOCKED:
            assert not any(w[i] != slot.letter for w in out)


def test_solve_empty_result_is_not_an_error():
    assert solve(parse_playfield("ZZZZZ", 5), frozenset(), WORDS) == []


def test_solve_length_mismatch_is_a_programming_error():
    with pytest.raises(AssertionError):
        solve(empty_playfield(6), frozenset(), ["crane"])


def test_language_values():
    assert Language("swedish") is Language.SWEDISH

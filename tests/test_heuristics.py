import pytest
from wordle_helper.engine import (
    Language, empty_playfield, filter_common, filter_duplicates, filter_uncommon,
    parse_playfield, run_chain,
)
from wordle_helper.engine.heuristics import common_letter_score

EN = Language.ENGLISH
SV = Language.SWEDISH


def test_filter_duplicates():
    assert filter_duplicates(["spade", "ribba"]) == ["spade"]
    assert filter_duplicates(["eerie", "ribba"]) == []
    assert filter_duplicates([]) == []


def test_filter_uncommon_drops_low_information_letters():
    words = ["jazzy", "crane", "quiet"]
    assert filter_uncommon(words, EN, empty_playfield(5)) == ["crane"]


def test_filter_uncommon_ignores_letters_on_playfield():
    words = ["jazzy", "crane", "quiet"]
    assert filter_uncommon(words, EN, parse_playfield("Q----", 5)) == ["crane", "quiet"]


def test_filter_common_scoring_example():
    # a and k are known; t, i and e are still untested common letters
    pf = parse_playfield("a-k--", 5)
    assert filter_common(["aktie"], SV, pf) == ["aktie"]
    assert common_letter_score("aktie", ["e", "n", "r", "t", "s", "i", "l"]) == 3


def test_filter_common_keeps_every_word_with_the_max_score():
    words = ["crane", "stare", "irate", "bumpy"]
    assert filter_common(words, EN, empty_playfield(5)) == ["stare", "irate"]


def test_filter_common_skips_letters_already_on_playfield():
    # with s, t, a, r, e known, 'lions' scores on l, i, o, n
    words = ["stare", "lions", "crane"]
    pf = parse_playfield("Stare", 5)
    assert filter_common(words, EN, pf) == ["lions"]


@pytest.mark.parametrize("words", [
    ["bumpy", "fuzzy"],
    ["chuck"],
])
def test_filter_common_falls_back_to_input_when_nothing_scores(words):
    out = filter_common(words, EN, empty_playfield(5))
    assert out == words
    assert out is not words


def test_filter_common_empty_input():
    assert filter_common([], EN, empty_playfield(5)) == []


def test_run_chain_applies_stages_in_order():
    words = ["apple", "stare", "jazzy", "irate", "bumpy"]
    res = run_chain(words, EN, empty_playfield(5))
    assert res.without_duplicates == ["stare", "irate", "bumpy"]
    assert res.without_uncommon == ["stare", "irate"]
    assert res.with_common == ["stare", "irate"]
    assert res.best == "stare"
    assert words == ["apple", "stare", "jazzy", "irate", "bumpy"]


def test_run_chain_can_end_empty():
    res = run_chain(["ribba", "eerie"], SV, empty_playfield(5))
    assert res.stages == [[], [], []]
    assert res.best is None

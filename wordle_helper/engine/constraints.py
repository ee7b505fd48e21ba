"""
Candidate filtering given the current playfield and wrong letters.

Given:
  - a playfield (one Slot per position, see engine.feedback)
  - the set of letters confirmed absent from the word
  - the current candidate list

Return:
  - the candidates consistent with every known constraint.

Rules, checked for every slot i with letter L = word[i]:
  1) LOCKED(c) and L != c                         -> reject
  2) MISPLACED(c) and (c not in word or L == c)   -> reject
  3) L is a wrong letter, is not the LOCKED letter of slot i, and is not
     named by any LOCKED/MISPLACED slot on the playfield -> reject

This is the step that shrinks the candidate set round over round. The
result is always a subset of the input, in input order; an empty result
means no known word fits the feedback.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, List

from .feedback import Playfield, SlotKind, playfield_letters


def _consistent(word: str, playfield: Playfield, wrong_letters: AbstractSet[str],
                confirmed: AbstractSet[str]) -> bool:
    for slot, letter in zip(playfield, word):
        if slot.kind is SlotKind.LOCKED and letter != slot.letter:
            return False

        if slot.kind is SlotKind.MISPLACED and (slot.letter not in word or letter == slot.letter):
            return False

        # A wrong letter may still be legitimately present when slot feedback
        # elsewhere confirms it.
        if (
                letter in wrong_letters
                and not (slot.kind is SlotKind.LOCKED and slot.letter == letter)
                and letter not in confirmed
        ):
            return False
    return True


def solve(playfield: Playfield, wrong_letters: AbstractSet[str],
          candidates: Iterable[str]) -> List[str]:
    """
    Keep only the candidates consistent with `playfield` and `wrong_letters`.

    Preconditions:
      - every candidate has exactly len(playfield) letters (the caller
        validates input before filtering)

    Returns:
      List[str] of surviving candidates (order preserved).
    """
    confirmed = playfield_letters(playfield)
    out: List[str] = []

    for w in candidates:
        assert len(w) == len(playfield), "Playfield and candidate must be the same length"
        if _consistent(w, playfield, wrong_letters, confirmed):
            out.append(w)

    return out

"""
Feedback model: what the player knows after each round.

A playfield is one Slot per letter position:
  - UNKNOWN          nothing known about this slot
  - LOCKED(c)        letter c is confirmed at exactly this slot
  - MISPLACED(c)     letter c is in the word, but not at this slot

Text encoding (what the player types, what the prompt shows):
  - '-'        : unknown
  - uppercase  : locked
  - lowercase  : misplaced

  parse_playfield("A-k--", 5) -> (LOCKED a, UNKNOWN, MISPLACED k, UNKNOWN, UNKNOWN)

Wrong letters are a plain frozenset of lowercase letters confirmed absent
from the word (unless slot feedback elsewhere says otherwise).

Playfields are tuples and are replaced wholesale every round, never patched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Set, Tuple

UNKNOWN_MARK = "-"


class SlotKind(Enum):
    UNKNOWN = "unknown"
    LOCKED = "locked"
    MISPLACED = "misplaced"


@dataclass(frozen=True)
class Slot:
    kind: SlotKind
    letter: Optional[str] = None  # None only for UNKNOWN

    @classmethod
    def unknown(cls) -> "Slot":
        return cls(SlotKind.UNKNOWN)

    @classmethod
    def locked(cls, letter: str) -> "Slot":
        return cls(SlotKind.LOCKED, letter.lower())

    @classmethod
    def misplaced(cls, letter: str) -> "Slot":
        return cls(SlotKind.MISPLACED, letter.lower())

    def render(self) -> str:
        if self.kind is SlotKind.LOCKED:
            return self.letter.upper()
        if self.kind is SlotKind.MISPLACED:
            return self.letter
        return UNKNOWN_MARK


Playfield = Tuple[Slot, ...]
WrongLetters = FrozenSet[str]


def empty_playfield(length: int) -> Playfield:
    """All slots UNKNOWN; the state of a fresh game."""
    return tuple(Slot.unknown() for _ in range(length))


def parse_playfield(text: str, length: int, alphabet: Optional[str] = None) -> Playfield:
    """
    Decode a playfield string into Slots.

    Args:
      text     : e.g. "A-k--" (surrounding whitespace ignored)
      length   : required number of slots (the session's playfield length)
      alphabet : allowed lowercase letters; None accepts any alphabetic char

    Raises:
      ValueError if the length is off or a character is not a letter / '-'.
    """
    s = text.strip()
    if len(s) != length:
        raise ValueError(f"Too few/many letters in playfield: expected {length}, got {len(s)}")

    slots = []
    for i, ch in enumerate(s):
        if ch == UNKNOWN_MARK:
            slots.append(Slot.unknown())
            continue
        low = ch.lower()
        if not ch.isalpha() or (alphabet is not None and low not in alphabet):
            raise ValueError(f"Invalid character {ch!r} at slot {i + 1}")
        slots.append(Slot.locked(ch) if ch.isupper() else Slot.misplaced(ch))
    return tuple(slots)


def render_playfield(playfield: Iterable[Slot]) -> str:
    """Inverse of parse_playfield."""
    return "".join(slot.render() for slot in playfield)


def playfield_letters(playfield: Iterable[Slot]) -> Set[str]:
    """Letters named by any LOCKED or MISPLACED slot."""
    return {slot.letter for slot in playfield if slot.kind is not SlotKind.UNKNOWN}


def parse_wrong_letters(text: str, alphabet: Optional[str] = None) -> WrongLetters:
    """
    Parse "letters not in word" input. Case, whitespace and commas are ignored:
      parse_wrong_letters("G, h X") -> frozenset({"g", "h", "x"})
    """
    letters = set()
    for ch in text.lower():
        if ch.isspace() or ch == ",":
            continue
        if not ch.isalpha() or (alphabet is not None and ch not in alphabet):
            raise ValueError(f"Invalid letter {ch!r} in wrong letters")
        letters.add(ch)
    return frozenset(letters)

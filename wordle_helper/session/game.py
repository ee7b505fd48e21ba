"""
Game session state.

One GameSession holds everything a game needs between rounds:
  - language and playfield length (fixed for the session)
  - the current playfield and wrong letters (replaced every round)
  - the candidate list (narrowed monotonically round over round)

The filtering core in wordle_helper.engine stays pure; this module owns the
mutation. A round mirrors the interactive flow:

  1) player enters the playfield   -> set_playfield     -> solve
  2) player enters wrong letters   -> set_wrong_letters -> solve
  3) heuristic chain on the survivors (transient, never stored)

Wrong letters are OVERWRITTEN by each new entry, not merged with earlier
rounds. The prompt is pre-filled with the previous value, so the player
re-submits the cumulative set; an empty entry keeps the previous value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from wordle_helper.engine import (
    ChainResult, Language, Playfield, empty_playfield, get_profile,
    parse_playfield, parse_wrong_letters, run_chain, solve,
)
from wordle_helper.engine.feedback import WrongLetters

log = logging.getLogger(__name__)


@dataclass
class GameSession:
    language: Language
    length: int
    playfield: Playfield
    wrong_letters: WrongLetters = frozenset()
    candidates: List[str] = field(default_factory=list)

    @property
    def alphabet(self) -> str:
        return get_profile(self.language).alphabet


def new_session(language: Language, length: int, words: Iterable[str]) -> GameSession:
    """
    Start a game: empty playfield, no wrong letters, every dictionary word of
    the right length as a candidate.

    Raises ValueError if `length` is not a playfield size of `language`.
    """
    profile = get_profile(language)
    if length not in profile.lengths:
        raise ValueError(f"{profile.name} games use {profile.lengths} letters; got {length}")

    candidates = [w for w in words if len(w) == length]
    log.info("New %s game, %d letters, %d words", profile.name, length, len(candidates))
    return GameSession(
        language=Language(language),
        length=length,
        playfield=empty_playfield(length),
        candidates=candidates,
    )


def set_playfield(session: GameSession, text: str) -> None:
    """Replace the playfield with the parsed `text` and narrow candidates."""
    session.playfield = parse_playfield(text, session.length, session.alphabet)
    session.candidates = solve(session.playfield, session.wrong_letters, session.candidates)


def set_wrong_letters(session: GameSession, text: str) -> None:
    """
    Overwrite the wrong letters with the parsed `text` and narrow candidates.
    Empty input keeps the previous wrong letters.
    """
    letters = parse_wrong_letters(text, session.alphabet)
    if letters:
        session.wrong_letters = letters
    session.candidates = solve(session.playfield, session.wrong_letters, session.candidates)


def play_round(session: GameSession, playfield_text: str, wrong_text: str) -> ChainResult:
    """Apply one round of feedback and rank the surviving candidates."""
    set_playfield(session, playfield_text)
    set_wrong_letters(session, wrong_text)
    return suggest(session)


def suggest(session: GameSession) -> ChainResult:
    return run_chain(session.candidates, session.language, session.playfield)


def is_finished(session: GameSession) -> bool:
    """A game ends once at most one candidate is left."""
    return len(session.candidates) <= 1

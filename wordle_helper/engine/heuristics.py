"""
Heuristic filter chain: narrow the consistent candidates to strong next guesses.

Stages, applied in this order:
  1) filter_duplicates  keep words whose letters are all distinct
                        (a guess with distinct letters probes more letters)
  2) filter_uncommon    drop words containing the language's low-information
                        letters, unless that letter is already on the playfield
  3) filter_common      score each word by how many untested high-frequency
                        letters it contains; keep the top-scoring group

The chain only suggests guesses. It never feeds back into the candidate list
used by the next round's constraint pass.

Stages 1 and 2 may return an empty list. Stage 3 returns non-empty output
for non-empty input: when no common letters are left to test, every word
scores 0 and the input is returned unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .feedback import Playfield, playfield_letters
from .languages import Language, get_profile

log = logging.getLogger(__name__)


def filter_duplicates(candidates: Iterable[str]) -> List[str]:
    """Keep only words with pairwise distinct letters, e.g. 'spade' but not 'ribba'."""
    out = [w for w in candidates if len(set(w)) == len(w)]
    if out:
        log.info("Filtering out words with duplicate letters")
    return out


def filter_uncommon(candidates: Iterable[str], language: Language,
                    playfield: Playfield) -> List[str]:
    """
    Reject words containing an uncommon letter of `language`. Letters already
    on the playfield are no longer considered uncommon.
    """
    known = playfield_letters(playfield)
    uncommon = [c for c in get_profile(language).uncommon_letters if c not in known]

    out = [w for w in candidates if not any(c in w for c in uncommon)]
    if out:
        log.info("Filtering out words with uncommon letters (%s)", "".join(uncommon))
    return out


def common_letter_score(word: str, letters: Iterable[str]) -> int:
    """Number of `letters` that occur in `word` (each counted once)."""
    return sum(1 for c in letters if c in word)


def filter_common(candidates: Sequence[str], language: Language,
                  playfield: Playfield) -> List[str]:
    """
    Keep the words containing the most untested high-frequency letters.

    Ties: every word sharing the maximum score is kept, in input order.
    If the best score is 0 the input is returned unchanged.
    """
    known = playfield_letters(playfield)
    common = [c for c in get_profile(language).common_letters if c not in known]

    best_score = 0
    best: List[str] = []
    for w in candidates:
        s = common_letter_score(w, common)
        if s > best_score:
            best_score = s
            best = [w]
        elif s == best_score and s > 0:
            best.append(w)

    if best_score == 0:
        return list(candidates)

    log.info("Keeping only words with %d untested common letters", best_score)
    return best


@dataclass
class ChainResult:
    """Every stage's output, kept so the caller can display each step."""
    without_duplicates: List[str] = field(default_factory=list)
    without_uncommon: List[str] = field(default_factory=list)
    with_common: List[str] = field(default_factory=list)

    @property
    def stages(self) -> List[List[str]]:
        return [self.without_duplicates, self.without_uncommon, self.with_common]

    @property
    def best(self) -> Optional[str]:
        return self.with_common[0] if self.with_common else None


def run_chain(candidates: Sequence[str], language: Language, playfield: Playfield) -> ChainResult:
    """Apply the three stages in order, each consuming the previous stage's output."""
    no_dupes = filter_duplicates(candidates)
    no_uncommon = filter_uncommon(no_dupes, language, playfield)
    common = filter_common(no_uncommon, language, playfield)
    log.debug("chain sizes: %d -> %d -> %d -> %d",
              len(candidates), len(no_dupes), len(no_uncommon), len(common))
    return ChainResult(no_dupes, no_uncommon, common)

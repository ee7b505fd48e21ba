"""
Per-language letter tables.

Each supported language maps to a LanguageProfile holding:
  - the alphabet accepted in playfield / wrong-letter input
  - the playfield lengths a game may use
  - an ordered list of high-frequency letters (common-letter scoring)
  - a list of low-information letters (uncommon-letter exclusion)

Adding a language means adding a row to PROFILES and a dictionary file in
datasets.dictionaries; no filter code branches on the language.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

# Every playfield size the helper knows about.
VALID_LENGTHS: Tuple[int, ...] = (5, 6)


class Language(str, Enum):
    SWEDISH = "swedish"
    ENGLISH = "english"


@dataclass(frozen=True)
class LanguageProfile:
    name: str
    alphabet: str
    lengths: Tuple[int, ...]
    common_letters: Tuple[str, ...]
    uncommon_letters: Tuple[str, ...]


_LATIN = "abcdefghijklmnopqrstuvwxyz"

PROFILES: Dict[Language, LanguageProfile] = {
    Language.SWEDISH: LanguageProfile(
        name="Swedish",
        alphabet=_LATIN + "åäö",
        lengths=(5, 6),
        common_letters=("e", "a", "n", "r", "t", "s", "i", "l"),
        uncommon_letters=("q", "z", "w", "x", "j", "y"),
    ),
    Language.ENGLISH: LanguageProfile(
        name="English",
        alphabet=_LATIN,
        lengths=(5,),
        common_letters=("e", "a", "r", "o", "t", "l", "i", "s", "n"),
        uncommon_letters=("q", "z", "w", "x", "j", "y"),
    ),
}


def get_profile(language: Language) -> LanguageProfile:
    return PROFILES[Language(language)]


def parse_language(text: str) -> Language:
    """
    Map user text to a Language. Accepts the enum value or the display name,
    case-insensitively ("swedish", "Swedish", "ENGLISH").
    """
    key = text.strip().lower()
    for lang, profile in PROFILES.items():
        if key in (lang.value, profile.name.lower()):
            return lang
    choices = ", ".join(lang.value for lang in PROFILES)
    raise ValueError(f"Unknown language: {text!r}. Available: {choices}")

from .feedback import (
    Slot, SlotKind, Playfield, empty_playfield, parse_playfield,
    parse_wrong_letters, playfield_letters, render_playfield,
)
from .languages import Language, LanguageProfile, PROFILES, get_profile, parse_language
from .constraints import solve
from .heuristics import ChainResult, filter_common, filter_duplicates, filter_uncommon, run_chain

__all__ = [
    "Slot", "SlotKind", "Playfield", "empty_playfield", "parse_playfield",
    "parse_wrong_letters", "playfield_letters", "render_playfield",
    "Language", "LanguageProfile", "PROFILES", "get_profile", "parse_language",
    "solve", "ChainResult", "filter_duplicates", "filter_uncommon", "filter_common", "run_chain",
]

from .game import (
    GameSession, new_session, set_playfield, set_wrong_letters, play_round, suggest, is_finished,
)
from .display import MAX_PRINT, format_words, format_word_list

__all__ = [
    "GameSession", "new_session", "set_playfield", "set_wrong_letters", "play_round",
    "suggest", "is_finished", "MAX_PRINT", "format_words", "format_word_list",
]

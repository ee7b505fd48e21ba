"""
Terminal formatting for candidate lists.

Long lists are summarised rather than printed; the menu's "print all" option
uses format_word_list for the untruncated view.
"""

from __future__ import annotations

from typing import Sequence

# Lists with at least this many words are summarised, not listed.
MAX_PRINT = 35


def format_words(words: Sequence[str], max_print: int = MAX_PRINT) -> str:
    n = len(words)
    if n == 0:
        return ""
    if n >= max_print:
        return f"Too many words to print ({n})."
    return f"{n} words remaining:\n{' '.join(words)}\n"


def format_word_list(words: Sequence[str]) -> str:
    return f"{' '.join(words)} Word count: {len(words)}"

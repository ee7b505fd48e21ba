"""
Dictionary source: one flat word list per (language, length) pair.

Files live in a data directory (default: ./data) and hold one word per line:
  english5.txt   English, 5 letters
  svenska5.txt   Swedish, 5 letters
  svenska6.txt   Swedish, 6 letters

A missing file is fatal for the session: FileNotFoundError propagates.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Tuple

from wordle_helper.engine.languages import Language
from .io import read_lines

log = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "data"

DICTIONARY_FILES: Dict[Tuple[Language, int], str] = {
    (Language.ENGLISH, 5): "english5.txt",
    (Language.SWEDISH, 5): "svenska5.txt",
    (Language.SWEDISH, 6): "svenska6.txt",
}


def dictionary_path(language: Language, length: int, data_dir: Path | str = DEFAULT_DATA_DIR) -> Path:
    try:
        name = DICTIONARY_FILES[(Language(language), int(length))]
    except KeyError as e:
        raise ValueError(
            f"No dictionary for {Language(language).value} with {length} letters") from e
    return Path(data_dir) / name


def load_dictionary(language: Language, length: int,
                    data_dir: Path | str = DEFAULT_DATA_DIR) -> List[str]:
    """
    Read the word list for (language, length): lowercased, stripped, blanks dropped.

    Raises:
      ValueError         unsupported language/length pair
      FileNotFoundError  the backing file is missing
    """
    p = dictionary_path(language, length, data_dir)
    words = [w.strip().lower() for w in read_lines(p) if w.strip()]
    log.debug("loaded %d words from %s", len(words), p)
    return words

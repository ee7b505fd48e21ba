from .validator import validate_wordlist, pretty_summary
from .dictionaries import DICTIONARY_FILES, dictionary_path, load_dictionary
from .io import read_lines, write_lines

__all__ = [
    "validate_wordlist", "pretty_summary",
    "DICTIONARY_FILES", "dictionary_path", "load_dictionary",
]

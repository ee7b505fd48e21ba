# apps/cli/play.py
"""
Interactive helper for a Wordle-style game played elsewhere.

Each round:
  1) Enter the current playfield:
       CAPITAL letter  = right letter, right slot
       lower case      = letter in the word, wrong slot
       -               = nothing known
  2) Enter the letters known NOT to be in the word (empty keeps the last entry).
  3) The helper prints the remaining candidates and each heuristic stage.
  4) Menu: 1 = exit, 2 = new game, 3 = print all candidates,
     4 = print latest filtered, Enter = next round.

Run:
  python -m apps.cli.play --language swedish --length 6 --data-dir data
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from wordle_helper.datasets import load_dictionary, dictionary_path, validate_wordlist, pretty_summary
from wordle_helper.engine import PROFILES, Language, get_profile, parse_language, render_playfield
from wordle_helper.session import (
    GameSession, format_word_list, format_words, is_finished, new_session,
    set_playfield, set_wrong_letters, suggest,
)

# Menu commands
EXIT = "1"
NEW_GAME = "2"
PRINT_ALL = "3"
PRINT_FILTERED = "4"

Prompt = Callable[[str], str]

PLAYFIELD_HELP = (
    "Use CAPITAL letters for letters in correct slot.\n"
    "Use lower case letters for letters in the wrong slot.\n"
    "Leave the - if the slot is empty."
)


def _choose_language(ask: Prompt) -> Language:
    names = [lang.value for lang in PROFILES]
    while True:
        raw = ask(f"Game language? ({'/'.join(names)}) [{names[0]}]: ").strip()
        if not raw:
            return Language(names[0])
        try:
            return parse_language(raw)
        except ValueError as e:
            print(e)


def _choose_length(language: Language, ask: Prompt) -> int:
    lengths = get_profile(language).lengths
    if len(lengths) == 1:
        return lengths[0]
    while True:
        raw = ask(f"Playfield size? ({'/'.join(map(str, lengths))}) [{lengths[0]}]: ").strip()
        if not raw:
            return lengths[0]
        if raw.isdigit() and int(raw) in lengths:
            return int(raw)
        print(f"Choose one of: {', '.join(map(str, lengths))}")


def _read_playfield(session: GameSession, ask: Prompt) -> None:
    """Prompt until the playfield parses; an empty answer keeps the current one."""
    print(PLAYFIELD_HELP)
    while True:
        current = render_playfield(session.playfield)
        raw = ask(f"Enter current playfield [{current}]: ").strip() or current
        try:
            set_playfield(session, raw)
            return
        except ValueError as e:
            print(e)


def _read_wrong_letters(session: GameSession, ask: Prompt) -> None:
    while True:
        current = "".join(sorted(session.wrong_letters))
        raw = ask(f"Characters not in word? [{current}]: ")
        try:
            set_wrong_letters(session, raw)
            return
        except ValueError as e:
            print(e)


def play_game(session: GameSession, ask: Prompt = input) -> Optional[str]:
    """
    Run rounds until at most one candidate is left or the player picks a menu
    command. Returns EXIT, NEW_GAME, or None for a new game after the last candidate.
    """
    while not is_finished(session):
        _read_playfield(session, ask)
        _read_wrong_letters(session, ask)

        print(format_words(session.candidates))
        result = suggest(session)
        for stage in result.stages:
            out = format_words(stage)
            if out:
                print(out)

        cmd = ask("Press 3 to print all possible words. Press 4 for latest filtered. "
                  "Press enter to skip: ").strip()
        if cmd in (EXIT, NEW_GAME):
            return cmd
        if cmd == PRINT_ALL:
            print(format_word_list(session.candidates))
        elif cmd == PRINT_FILTERED:
            print(format_word_list(result.with_common))

    if session.candidates:
        print(f"The word is: {session.candidates[0]}")
    else:
        print("No word in the dictionary matches the feedback.")
    if ask("Press 1 to exit. Press enter for a new game: ").strip() == EXIT:
        return EXIT
    return None


def _start_session(args, ask: Prompt) -> GameSession:
    language = parse_language(args.language) if args.language else _choose_language(ask)
    length = args.length or _choose_length(language, ask)

    path = dictionary_path(language, length, args.data_dir)
    rep = validate_wordlist(str(path), length, get_profile(language).alphabet)
    logging.getLogger(__name__).info(pretty_summary(rep))

    words = load_dictionary(language, length, args.data_dir)
    return new_session(language, length, words)


def main(argv: Optional[List[str]] = None, ask: Prompt = input) -> int:
    """
    Parse CLI args and loop over games until the player exits.
    """
    ap = argparse.ArgumentParser(description="wordle-helper: narrow and rank candidate words")
    ap.add_argument("--language", help=f"game language (one of: {', '.join(lang.value for lang in PROFILES)})")
    ap.add_argument("--length", type=int, help="playfield size (5 or 6; English is always 5)")
    ap.add_argument("--data-dir", default="data", help="directory holding the word lists")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        while True:
            try:
                session = _start_session(args, ask)
            except (FileNotFoundError, ValueError) as e:
                sys.stderr.write(f"Cannot start game: {e}\n")
                return 1

            if play_game(session, ask) == EXIT:
                return 0
    except EOFError:
        # Ctrl-D at any prompt ends the program
        return 0


if __name__ == "__main__":
    sys.exit(main())

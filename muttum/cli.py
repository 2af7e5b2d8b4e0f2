from __future__ import annotations

import argparse
import logging
import sys
from random import Random
from typing import Optional, Sequence, TextIO

from .board import LetterState
from .config import GameConfig
from .engine import GameSession, GameState, new_game
from .errors import MuttumError, ValidationError
from .lexicon import DictionaryIndex, load_bundled_dictionary, load_dictionary
from .normalizer import normalize

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

logger = logging.getLogger(__name__)


def _error_to_message(error: Optional[ValidationError]) -> str:
    if error == ValidationError.LINE_INCOMPLETE:
        return "You must fill all letters."
    if error == ValidationError.WORD_UNKNOWN:
        return "This word doesn't exist in our dictionary."
    return "Invalid word."


def _type_whole_word(session: GameSession, word: str) -> Optional[str]:
    """
    Replace the current row with `word` and submit it. Returns a message when
    the word cannot be entered as typed.
    """
    if word[0] != session.secret_word[0]:
        return f"The word must start with {session.secret_word[0].upper()}."

    for _ in range(session.word_length):
        session.remove_letter()
    for ch in word[1:]:
        session.add_letter(ch)
    row = "".join(letter.character for letter in session.current_row_letters())
    if row != word:
        for _ in range(session.word_length):
            session.remove_letter()
        return "This word cannot be typed on this row."

    error = session.validate()
    return None if error is None else _error_to_message(error)


def _alphabet_line(session: GameSession) -> str:
    marks = {
        LetterState.UNKNOWN: "{}",
        LetterState.WELL_PLACED: "[{}]",
        LetterState.PRESENT: "({})",
        LetterState.NOT_PRESENT: "",
    }
    return " ".join(
        marks[entry.state].format(entry.character.upper())
        for entry in session.alphabet_snapshot()
        if entry.state != LetterState.NOT_PRESENT
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play muttum in the terminal.")
    parser.add_argument("--dictionary", help="Word list path or file:// URI (default: bundled French list).")
    parser.add_argument("--rows", type=int, help="Number of attempts.")
    parser.add_argument("--min-length", type=int, help="Shortest secret word.")
    parser.add_argument("--max-length", type=int, help="Longest secret word.")
    parser.add_argument("--word", help="Force the secret word (debugging).")
    parser.add_argument("--seed", type=int, help="Seed for word selection.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig.from_env(
        rows=args.rows,
        min_length=args.min_length,
        max_length=args.max_length,
        dictionary_uri=args.dictionary,
        forced_word=args.word,
    )


def open_dictionary(config: GameConfig) -> DictionaryIndex:
    if config.dictionary_uri:
        return load_dictionary(
            config.dictionary_uri,
            min_length=config.min_length,
            max_length=config.max_length,
        )
    return load_bundled_dictionary(min_length=config.min_length, max_length=config.max_length)


def play(session: GameSession, stdin: TextIO, stdout: TextIO) -> GameState:
    """
    Drive a session from line input: letters are typed into the row, '-'
    erases one letter and an empty line submits the row. A full word on one
    line is typed and submitted at once.
    """
    print(session.render(), file=stdout)
    for raw in stdin:
        line = raw.strip()
        message: Optional[str] = None
        if line == "-":
            session.remove_letter()
        elif line == "":
            error = session.validate()
            if error is not None:
                message = _error_to_message(error)
        elif len(normalize(line)) == session.word_length:
            message = _type_whole_word(session, normalize(line))
        else:
            for ch in line:
                session.add_letter(ch)

        if message is not None:
            print(message, file=stdout)
        print(session.render(), file=stdout)
        print(_alphabet_line(session), file=stdout)
        if session.is_over:
            break

    if session.game_state == GameState.WON:
        print("Congratulations, you found the word!", file=stdout)
    elif session.game_state == GameState.LOST:
        print(f"The word was: {session.secret_word_display}", file=stdout)
    return session.game_state


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = build_config(args)
        dictionary = open_dictionary(config)
        session = new_game(dictionary, config=config, rng=Random(args.seed))
    except (MuttumError, ValueError) as exc:
        logger.error("Unable to start a game: %s", exc)
        return 1

    play(session, stdin or sys.stdin, stdout or sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import logging
from enum import Enum
from random import Random
from typing import List, Optional, Tuple

import numpy as np

from .board import AlphabetEntry, AlphabetTracker, Board, Letter, LetterState, letter_slot
from .config import GameConfig
from .errors import NoWordFound, ValidationError
from .lexicon import DictionaryIndex
from .normalizer import normalize

logger = logging.getLogger(__name__)


class GameState(str, Enum):
    CONTINUE = "continue"
    WON = "won"
    LOST = "lost"


class GameSession:
    """
    One game of muttum against a shared, read-only dictionary.

    The secret word is kept twice: `secret_word` is the canonical form
    (lowercase, no diacritics) compared letter by letter, and
    `secret_word_display` is the dictionary spelling shown when the game
    is lost.

    Player actions:
    - add_letter(ch):   fill the next empty cell of the current row.
    - remove_letter():  erase the last typed cell; column 0 is fixed.
    - validate():       score the current row, returns a ValidationError
                        or None.

    All three are no-ops once the game is won or lost.
    """

    def __init__(
        self,
        dictionary: DictionaryIndex,
        *,
        config: Optional[GameConfig] = None,
        word_length: Optional[int] = None,
        rng: Optional[Random] = None,
        forced_word: Optional[str] = None,
    ) -> None:
        self.config = config or GameConfig()
        self._dictionary = dictionary
        self._rng = rng or Random()

        forced = forced_word if forced_word is not None else self.config.forced_word
        if forced is not None and forced.strip():
            display = forced.strip()
        else:
            if word_length is None:
                word_length = self._rng.randint(self.config.min_length, self.config.max_length)
            display = dictionary.random_playable_word(word_length, rng=self._rng).display_word

        self._secret_display = display
        self._secret = normalize(display)
        self._board = Board(self._secret, rows=self.config.rows, sentinel=self.config.sentinel)
        self._alphabet = AlphabetTracker(self._secret)
        self._current_row = 0
        self._state = GameState.CONTINUE
        logger.debug("New session, secret word %r (canonical %r)", display, self._secret)

    @property
    def secret_word(self) -> str:
        return self._secret

    @property
    def secret_word_display(self) -> str:
        return self._secret_display

    @property
    def word_length(self) -> int:
        return len(self._secret)

    @property
    def rows(self) -> int:
        return self._board.rows

    @property
    def current_row(self) -> int:
        return self._current_row

    @property
    def game_state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state != GameState.CONTINUE

    def current_row_letters(self) -> Tuple[Letter, ...]:
        row = min(self._current_row, self._board.rows - 1)
        return self._board.row(row)

    def board_snapshot(self) -> Tuple[Tuple[Letter, ...], ...]:
        return self._board.snapshot()

    def alphabet_snapshot(self) -> Tuple[AlphabetEntry, ...]:
        return self._alphabet.snapshot()

    def board_states(self) -> np.ndarray:
        return self._board.states_array()

    def _accepts_input(self) -> bool:
        return self._state == GameState.CONTINUE and self._current_row < self._board.rows

    def add_letter(self, ch: str) -> None:
        if not self._accepts_input():
            return

        letter = normalize(ch)
        if letter_slot(letter) is None:
            logger.debug("Ignoring non-alphabet input %r", ch)
            return

        col = self._board.first_empty_column(self._current_row)
        if col is None:
            return
        # The first letter is already revealed in column 0.
        if col == 1 and letter == self._secret[0]:
            return
        self._board.set_letter(self._current_row, col, letter, LetterState.UNKNOWN)

    def remove_letter(self) -> None:
        if not self._accepts_input():
            return

        col = self._board.last_filled_column(self._current_row, start=1)
        if col is not None:
            self._board.clear_letter(self._current_row, col)

    def validate(self) -> Optional[ValidationError]:
        if not self._accepts_input():
            return None

        row = self._current_row
        if not self._board.is_row_complete(row):
            return ValidationError.LINE_INCOMPLETE

        candidate = self._board.row_word(row)
        if not self._dictionary.exists(candidate):
            logger.debug("Rejected unknown word %r on row %d", candidate, row)
            return ValidationError.WORD_UNKNOWN

        self._alphabet.reset_found()

        well_placed = 0
        for col, (guessed, expected) in enumerate(zip(candidate, self._secret)):
            if guessed == expected:
                self._board.set_state(row, col, LetterState.WELL_PLACED)
                self._alphabet.mark_well_placed(guessed)
                well_placed += 1

        if well_placed == self.word_length:
            self._state = GameState.WON
            logger.info("Game won on row %d", row + 1)
            return None

        for col, (guessed, expected) in enumerate(zip(candidate, self._secret)):
            if guessed == expected:
                continue
            if self._alphabet.credit_present(guessed):
                self._board.set_state(row, col, LetterState.PRESENT)
            else:
                self._board.set_state(row, col, LetterState.NOT_PRESENT)

        self._current_row += 1
        if self._current_row < self._board.rows:
            self._board.set_letter(self._current_row, 0, self._secret[0])
        else:
            self._state = GameState.LOST
            logger.info("Game lost after %d rows", self._board.rows)
        return None

    def render(self) -> str:
        tokens = {
            LetterState.UNKNOWN: " ",
            LetterState.WELL_PLACED: "+",
            LetterState.PRESENT: "?",
            LetterState.NOT_PRESENT: "-",
        }
        lines: List[str] = []
        for r, row in enumerate(self._board.snapshot()):
            cells = " ".join(f"{letter.character.upper()}{tokens[letter.state]}" for letter in row)
            marker = ">" if r == self._current_row and not self.is_over else " "
            lines.append(f"{marker} {cells}")
        return "\n".join(lines)


def new_game(
    dictionary: DictionaryIndex,
    *,
    config: Optional[GameConfig] = None,
    rng: Optional[Random] = None,
) -> GameSession:
    """
    Start a session, retrying other word lengths when the dictionary has
    no playable word for the first one drawn.
    """
    config = config or GameConfig()
    rng = rng or Random()
    if config.forced_word:
        return GameSession(dictionary, config=config, rng=rng)

    lengths = list(range(config.min_length, config.max_length + 1))
    rng.shuffle(lengths)
    for length in lengths:
        try:
            session = GameSession(dictionary, config=config, word_length=length, rng=rng)
        except NoWordFound:
            logger.warning("No playable word of length %d, trying another length", length)
            continue
        logger.info("New game: %d letters, %d rows", length, config.rows)
        return session
    raise NoWordFound()

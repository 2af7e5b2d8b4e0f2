from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
SENTINEL = "."


class LetterState(IntEnum):
    UNKNOWN = 0
    WELL_PLACED = 1
    PRESENT = 2
    NOT_PRESENT = 3


@dataclass(frozen=True)
class Letter:
    character: str
    state: LetterState = LetterState.UNKNOWN


@dataclass(frozen=True)
class AlphabetEntry:
    character: str
    state: LetterState
    positions: Tuple[int, ...]
    found_count: int


def letter_slot(ch: str) -> Optional[int]:
    if len(ch) == 1 and "a" <= ch <= "z":
        return ord(ch) - ord("a")
    return None


class Board:
    """
    Grid of `rows` x `len(secret_word)` cells.

    - letters: (rows, word_length), '<U1', sentinel marks an empty cell.
    - states:  (rows, word_length), uint8 LetterState values.
    """

    def __init__(self, secret_word: str, *, rows: int = 6, sentinel: str = SENTINEL) -> None:
        if not secret_word:
            raise ValueError("secret_word must not be empty")
        if rows <= 0:
            raise ValueError("rows must be >= 1")

        self.rows = int(rows)
        self.word_length = len(secret_word)
        self.sentinel = sentinel
        self._letters = np.full((self.rows, self.word_length), fill_value=sentinel, dtype="<U1")
        self._states = np.full(
            (self.rows, self.word_length),
            fill_value=int(LetterState.UNKNOWN),
            dtype=np.uint8,
        )
        self._letters[0, 0] = secret_word[0]

    def letter(self, row: int, col: int) -> Letter:
        return Letter(str(self._letters[row, col]), LetterState(int(self._states[row, col])))

    def row(self, row: int) -> Tuple[Letter, ...]:
        return tuple(self.letter(row, col) for col in range(self.word_length))

    def row_word(self, row: int) -> str:
        return "".join(str(ch) for ch in self._letters[row])

    def set_letter(self, row: int, col: int, ch: str, state: LetterState = LetterState.UNKNOWN) -> None:
        self._letters[row, col] = ch
        self._states[row, col] = int(state)

    def set_state(self, row: int, col: int, state: LetterState) -> None:
        self._states[row, col] = int(state)

    def clear_letter(self, row: int, col: int) -> None:
        self.set_letter(row, col, self.sentinel)

    def first_empty_column(self, row: int) -> Optional[int]:
        empty = np.flatnonzero(self._letters[row] == self.sentinel)
        if empty.size == 0:
            return None
        return int(empty[0])

    def last_filled_column(self, row: int, *, start: int = 0) -> Optional[int]:
        filled = np.flatnonzero(self._letters[row, start:] != self.sentinel)
        if filled.size == 0:
            return None
        return int(filled[-1]) + start

    def is_row_complete(self, row: int) -> bool:
        return self.first_empty_column(row) is None

    def snapshot(self) -> Tuple[Tuple[Letter, ...], ...]:
        return tuple(self.row(r) for r in range(self.rows))

    def states_array(self) -> np.ndarray:
        return self._states.copy()


class AlphabetTracker:
    """
    Per-letter summary for 'a'..'z', indexed directly by alphabet position.

    `found` is scratch space for one validation pass; only `state` carries
    over between rows, and it never leaves WELL_PLACED once reached.
    """

    def __init__(self, secret_word: str) -> None:
        self._states = np.zeros(26, dtype=np.uint8)
        self._found = np.zeros(26, dtype=np.int16)
        positions: List[List[int]] = [[] for _ in ALPHABET]
        for idx, ch in enumerate(secret_word):
            slot = letter_slot(ch)
            if slot is not None:
                positions[slot].append(idx)
        self._positions: Tuple[Tuple[int, ...], ...] = tuple(tuple(p) for p in positions)

    def state(self, ch: str) -> LetterState:
        slot = letter_slot(ch)
        if slot is None:
            return LetterState.UNKNOWN
        return LetterState(int(self._states[slot]))

    def reset_found(self) -> None:
        self._found.fill(0)

    def mark_well_placed(self, ch: str) -> None:
        slot = letter_slot(ch)
        if slot is None:
            return
        self._states[slot] = int(LetterState.WELL_PLACED)
        self._found[slot] += 1

    def credit_present(self, ch: str) -> bool:
        """
        Credit one more misplaced occurrence of `ch` if the secret word still
        has an uncredited one. Returns False when the cell is not present.
        """
        slot = letter_slot(ch)
        if slot is None:
            return False

        if self._found[slot] < len(self._positions[slot]):
            self._found[slot] += 1
            if self._states[slot] != int(LetterState.WELL_PLACED):
                self._states[slot] = int(LetterState.PRESENT)
            return True

        if self._states[slot] == int(LetterState.UNKNOWN):
            self._states[slot] = int(LetterState.NOT_PRESENT)
        return False

    def snapshot(self) -> Tuple[AlphabetEntry, ...]:
        return tuple(
            AlphabetEntry(
                character=ch,
                state=LetterState(int(self._states[slot])),
                positions=self._positions[slot],
                found_count=int(self._found[slot]),
            )
            for slot, ch in enumerate(ALPHABET)
        )


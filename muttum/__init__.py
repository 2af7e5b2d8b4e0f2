"""Rules engine for muttum, a French Wordle-style word game."""

from .board import AlphabetEntry, AlphabetTracker, Board, Letter, LetterState
from .config import GameConfig
from .engine import GameSession, GameState, new_game
from .errors import DictionaryLoadFailure, MuttumError, NoWordFound, ValidationError
from .lexicon import (
    DictionaryEntry,
    DictionaryIndex,
    build_dictionary,
    load_bundled_dictionary,
    load_dictionary,
)
from .normalizer import collation_key, normalize

__all__ = [
    "AlphabetEntry",
    "AlphabetTracker",
    "Board",
    "Letter",
    "LetterState",
    "GameConfig",
    "GameSession",
    "GameState",
    "new_game",
    "DictionaryLoadFailure",
    "MuttumError",
    "NoWordFound",
    "ValidationError",
    "DictionaryEntry",
    "DictionaryIndex",
    "build_dictionary",
    "load_bundled_dictionary",
    "load_dictionary",
    "collation_key",
    "normalize",
]

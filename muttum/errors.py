from __future__ import annotations

from enum import Enum
from typing import Optional


class MuttumError(Exception):
    """Base class for fatal engine errors."""


class DictionaryLoadFailure(MuttumError):
    def __init__(self, source: str, reason: Optional[str] = None) -> None:
        self.source = source
        message = f"Unable to read dictionary: {source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoWordFound(MuttumError):
    def __init__(self, length: Optional[int] = None) -> None:
        self.length = length
        if length is None:
            message = "Dictionary has no playable word in the configured length range."
        else:
            message = f"Dictionary has no playable word of length {length}."
        super().__init__(message)


class ValidationError(str, Enum):
    """Recoverable rejection of the current row, returned by `GameSession.validate`."""

    LINE_INCOMPLETE = "line_incomplete"
    WORD_UNKNOWN = "word_unknown"

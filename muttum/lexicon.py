from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from random import Random
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple
from urllib.parse import unquote, urlparse

from .errors import DictionaryLoadFailure, NoWordFound
from .normalizer import NormalizedKey, collation_key, is_ascii_word, normalize

logger = logging.getLogger(__name__)

MIN_LENGTH = 5
MAX_LENGTH = 8
BUNDLED_DICTIONARY = "french.txt"


@dataclass(frozen=True)
class DictionaryEntry:
    display_word: str
    is_playable: bool = True


class DictionaryIndex:
    """
    Immutable, key-ordered word index shared by every game session.

    Keys are primary-strength collation keys, so lookups ignore case and
    diacritics. When several source lines collapse onto one key the first
    one is kept.
    """

    def __init__(
        self,
        entries: Mapping[NormalizedKey, DictionaryEntry],
        *,
        min_length: int = MIN_LENGTH,
        max_length: int = MAX_LENGTH,
    ) -> None:
        self._keys: Tuple[NormalizedKey, ...] = tuple(sorted(entries))
        self._entries: Mapping[NormalizedKey, DictionaryEntry] = MappingProxyType(dict(entries))
        self._min_length = int(min_length)
        self._max_length = int(max_length)

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def max_length(self) -> int:
        return self._max_length

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[DictionaryEntry]:
        for key in self._keys:
            yield self._entries[key]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.exists(word)

    def lookup(self, word: str) -> Optional[DictionaryEntry]:
        return self._entries.get(collation_key(word))

    def exists(self, word: str) -> bool:
        entry = self.lookup(word)
        return entry is not None and entry.is_playable

    def playable_lengths(self) -> FrozenSet[int]:
        return frozenset(len(normalize(entry.display_word)) for entry in self if entry.is_playable)

    def random_playable_word(self, length: int, rng: Optional[Random] = None) -> DictionaryEntry:
        """
        Pick a playable entry whose canonical form has `length` letters, so a
        ligature word such as "cœurs" counts as six.

        A random offset into the ordered keys is chosen and scanned forward;
        the scan wraps to the start when nothing matches after the offset.
        """
        if length <= 0:
            raise ValueError("length must be >= 1")
        if not self._keys:
            raise NoWordFound(length)

        rng = rng or Random()
        offset = rng.randrange(len(self._keys))
        total = len(self._keys)
        for step in range(total):
            entry = self._entries[self._keys[(offset + step) % total]]
            if entry.is_playable and len(normalize(entry.display_word)) == length:
                return entry
        raise NoWordFound(length)


def build_dictionary(
    lines: Iterable[str],
    *,
    min_length: int = MIN_LENGTH,
    max_length: int = MAX_LENGTH,
) -> DictionaryIndex:
    if min_length <= 0 or min_length > max_length:
        raise ValueError("length bounds must satisfy 1 <= min_length <= max_length")

    entries: Dict[NormalizedKey, DictionaryEntry] = {}
    discarded = 0
    duplicates = 0
    for line in lines:
        word = line.strip()
        if not min_length <= len(word) <= max_length:
            discarded += 1
            continue
        key = collation_key(word)
        if key in entries:
            duplicates += 1
            continue
        entries[key] = DictionaryEntry(display_word=word, is_playable=is_ascii_word(normalize(word)))

    logger.debug(
        "Dictionary built: %d entries kept, %d outside %d..%d, %d duplicates",
        len(entries),
        discarded,
        min_length,
        max_length,
        duplicates,
    )
    return DictionaryIndex(entries, min_length=min_length, max_length=max_length)


def _source_to_path(source: str) -> Path:
    parsed = urlparse(source)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    if parsed.scheme and len(parsed.scheme) > 1:
        raise DictionaryLoadFailure(source, f"unsupported scheme '{parsed.scheme}'")
    return Path(source)


def load_dictionary(
    source: str,
    *,
    min_length: int = MIN_LENGTH,
    max_length: int = MAX_LENGTH,
) -> DictionaryIndex:
    """Read a one-word-per-line UTF-8 file given as a path or a file:// URI."""
    path = _source_to_path(str(source))
    try:
        raw = path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        raise DictionaryLoadFailure(str(source), exc.strerror or str(exc)) from exc

    logger.info("Loaded %d dictionary lines from %s", len(raw), path)
    return build_dictionary(raw, min_length=min_length, max_length=max_length)


def load_bundled_dictionary(*, min_length: int = MIN_LENGTH, max_length: int = MAX_LENGTH) -> DictionaryIndex:
    data_dir = files("muttum.data")
    try:
        raw = data_dir.joinpath(BUNDLED_DICTIONARY).read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise DictionaryLoadFailure(BUNDLED_DICTIONARY, str(exc)) from exc
    return build_dictionary(raw, min_length=min_length, max_length=max_length)

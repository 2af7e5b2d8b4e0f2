from __future__ import annotations

import unicodedata

NormalizedKey = bytes

LIGATURES = {"œ": "oe", "æ": "ae"}


def normalize(text: str) -> str:
    """
    Canonical comparison form of `text`: diacritics removed, lowercase,
    French ligatures spelled out, NFC.

    Characters that have no decomposition pass through unchanged.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    lowered = stripped.lower()
    for ligature, expansion in LIGATURES.items():
        lowered = lowered.replace(ligature, expansion)
    return unicodedata.normalize("NFC", lowered)


def collation_key(text: str) -> NormalizedKey:
    """
    Primary-strength lookup key: inputs that only differ by case or accents
    map to the same bytes.
    """
    return normalize(text).casefold().encode("utf-8")


def is_ascii_word(text: str) -> bool:
    return text != "" and all("a" <= ch <= "z" for ch in text)

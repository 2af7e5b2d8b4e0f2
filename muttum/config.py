from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_DICTIONARY_URI = "MUTTUM_DICTIONARY_URI"
ENV_FORCE_WORD = "MUTTUM_FORCE_WORD"
ENV_ROWS = "MUTTUM_ROWS"
ENV_MIN_LENGTH = "MUTTUM_MIN_LENGTH"
ENV_MAX_LENGTH = "MUTTUM_MAX_LENGTH"


@dataclass(frozen=True)
class GameConfig:
    rows: int = 6
    min_length: int = 5
    max_length: int = 8
    sentinel: str = "."
    dictionary_uri: Optional[str] = None
    forced_word: Optional[str] = None

    def __post_init__(self) -> None:
        if self.rows <= 0:
            raise ValueError("rows must be >= 1")
        if self.min_length <= 0:
            raise ValueError("min_length must be >= 1")
        if self.min_length > self.max_length:
            raise ValueError("min_length must be <= max_length")
        if len(self.sentinel) != 1 or self.sentinel.isalpha():
            raise ValueError("sentinel must be a single non-letter character")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: object) -> "GameConfig":
        """
        Build a config from MUTTUM_* environment variables.

        Keyword overrides win over the environment; None overrides are ignored.
        """
        env = os.environ if environ is None else environ
        values: dict = {}

        uri = env.get(ENV_DICTIONARY_URI, "").strip()
        if uri:
            values["dictionary_uri"] = uri
        forced = env.get(ENV_FORCE_WORD, "").strip()
        if forced:
            values["forced_word"] = forced

        for key, field_name in (
            (ENV_ROWS, "rows"),
            (ENV_MIN_LENGTH, "min_length"),
            (ENV_MAX_LENGTH, "max_length"),
        ):
            raw = env.get(key, "").strip()
            if not raw:
                continue
            try:
                values[field_name] = int(raw)
            except ValueError:
                raise ValueError(f"{key} must be an integer, got {raw!r}") from None

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import pathlib
import sys
import time
from random import Random
from typing import Dict, List, Optional, Tuple

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from muttum import DictionaryIndex, load_bundled_dictionary, load_dictionary, new_game, normalize


def run_dictionary_benchmark(builds: int, source: Optional[str]) -> Dict[str, float]:
    start = time.perf_counter()
    for _ in range(builds):
        index = load_dictionary(source) if source else load_bundled_dictionary()
    elapsed = time.perf_counter() - start
    return {
        "builds": float(builds),
        "entries": float(len(index)),
        "seconds": elapsed,
        "builds_per_sec": builds / elapsed,
    }


def run_game_benchmark(games: int, dictionary: DictionaryIndex) -> Dict[str, float]:
    rng = Random(0)
    playable: Dict[Tuple[int, str], List[str]] = {}
    for entry in dictionary:
        if entry.is_playable:
            word = normalize(entry.display_word)
            playable.setdefault((len(word), word[0]), []).append(word)

    validations = 0
    start = time.perf_counter()
    for _ in range(games):
        session = new_game(dictionary, rng=rng)
        pool = playable[(session.word_length, session.secret_word[0])]
        for _ in range(session.rows * 10):
            if session.is_over:
                break
            guess = pool[rng.randrange(len(pool))]
            for _ in range(session.word_length):
                session.remove_letter()
            for ch in guess[1:]:
                session.add_letter(ch)
            if session.validate() is None:
                validations += 1
    elapsed = time.perf_counter() - start

    return {
        "games": float(games),
        "validations": float(validations),
        "seconds": elapsed,
        "validations_per_sec": validations / elapsed,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="muttum engine benchmarks.")
    parser.add_argument("--dictionary", help="Word list path or file:// URI (default: bundled list).")
    parser.add_argument("--builds", type=int, default=20, help="Dictionary builds.")
    parser.add_argument("--games", type=int, default=500, help="Games played with random guesses.")
    args = parser.parse_args()

    dictionary = load_dictionary(args.dictionary) if args.dictionary else load_bundled_dictionary()
    results = {
        "dictionary_build": run_dictionary_benchmark(args.builds, args.dictionary),
        "games": run_game_benchmark(args.games, dictionary),
    }
    print(json.dumps(results, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()

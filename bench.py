"""
Dictionary lookup benchmark

Times a membership check of every dictionary word against the perfect-hash
word set, a plain Python set and binary search over the sorted dictionary.
"""

import argparse
import time
from typing import Callable, Dict

from wordle_engine.services.dictionary import Dictionary, PerfectWordSet, load_dictionary


def _time_lookups(dictionary: Dictionary, contains: Callable, rounds: int) -> float:
    start = time.perf_counter()
    for _ in range(rounds):
        for word in dictionary:
            if not contains(word):
                raise AssertionError(f"{word} missing from lookup table")
    return time.perf_counter() - start


def run_benchmark(dictionary: Dictionary, word_set: PerfectWordSet, rounds: int = 100) -> Dict[str, float]:
    """Seconds per full pass over the dictionary, keyed by lookup strategy."""
    plain_set = set(bytes(word) for word in dictionary)
    strategies = {
        'perfect_hash': word_set.__contains__,
        'builtin_set': lambda word: bytes(word) in plain_set,
        'binary_search': lambda word: dictionary.index_of(word) is not None,
    }
    return {
        name: _time_lookups(dictionary, contains, rounds) / rounds
        for name, contains in strategies.items()
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Compare dictionary lookup strategies")
    parser.add_argument("--rounds", type=int, default=100, help="Passes over the dictionary per strategy")
    args = parser.parse_args(argv)

    dictionary, word_set = load_dictionary()
    results = run_benchmark(dictionary, word_set, args.rounds)

    print(f"{len(dictionary)} words, {args.rounds} rounds")
    for name, seconds in sorted(results.items(), key=lambda item: item[1]):
        print(f"{name:<14} {seconds * 1e6:10.1f} us/pass")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

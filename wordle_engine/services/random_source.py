"""
Random Sources

Anything with a ``next_u64()`` method can pick secret words. The default is
a 64-bit xorshift generator seeded from the wall clock; tests pass a fixed
seed to make picks reproducible.
"""

import random
import time
from typing import Optional, Protocol

MASK_64 = (1 << 64) - 1
# xorshift never leaves the all-zero state
_ZERO_SEED_REPLACEMENT = 0x9E3779B97F4A7C15


class RandomSource(Protocol):
    def next_u64(self) -> int:
        ...


class XorShiftRandom:
    """Marsaglia xorshift64 with shifts 13, 17, 5."""

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns()
        seed &= MASK_64
        self.state = seed or _ZERO_SEED_REPLACEMENT

    def next_u64(self) -> int:
        x = self.state
        x ^= (x << 13) & MASK_64
        x ^= x >> 17
        x ^= (x << 5) & MASK_64
        self.state = x
        return x


class SystemRandomSource:
    """Adapter over the standard library Mersenne Twister."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next_u64(self) -> int:
        return self._random.getrandbits(64)


def randbelow(source: RandomSource, n: int) -> int:
    """
    Uniform integer in [0, n) drawn from a 64-bit stream.

    Values from the incomplete top block are rejected so every index is
    equally likely.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    limit = (1 << 64) - ((1 << 64) % n)
    while True:
        value = source.next_u64()
        if value < limit:
            return value % n

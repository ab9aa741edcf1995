"""
Perfect Hash for Dictionary Words

Maps a five-letter word to an integer without collisions across the
shipped word list. Only the low five bits of each byte are used, which is
enough to tell the 26 ASCII letters apart, so the function is injective over
validated uppercase words but not over arbitrary bytes.
"""

import struct
from typing import Optional

from ..config.game_settings import WORD_LENGTH

BITS_PER_LETTER = 5
LANE_WIDTH = 6

# A generic hashing protocol writes the length of a sequence before its
# payload. That length arrives as one machine-sized integer.
LENGTH_TOKEN_SIZE = struct.calcsize("P")


def perfect_hash(word) -> int:
    """
    Interleave the letters of a word into a single integer.

    Bit ``b`` of byte ``i`` lands on output bit ``b * 6 + i``, giving five
    six-bit lanes (30 significant bits). The result is shifted left by two so
    the high bits, which hash tables often read as a quick pre-filter, are not
    structurally zero.

    Args:
        word: Five bytes (a Word, bytes, or any sequence of ints)

    Returns:
        int: Hash value below 2**32
    """
    value = 0
    for i, byte in enumerate(bytes(word)):
        for bit_idx in range(BITS_PER_LETTER):
            bit = (byte >> bit_idx) & 1
            value |= bit << (bit_idx * LANE_WIDTH + i)
    return value << 2


class WordHasher:
    """
    Streaming adapter exposing ``perfect_hash`` through an update/digest API.

    Callers that hash a fixed-size array the generic way feed the array's
    length first and the bytes second. The length chunk is exactly
    ``LENGTH_TOKEN_SIZE`` bytes and has to be skipped here: letting it
    through would overwrite the word and break the collision-free guarantee.
    Words are five bytes and machine words are four or eight, so the two can
    never be confused.
    """

    def __init__(self, data: Optional[bytes] = None):
        self._word = bytes(WORD_LENGTH)
        if data is not None:
            self.update(data)

    def update(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) == LENGTH_TOKEN_SIZE:
            return
        if len(data) != WORD_LENGTH:
            raise ValueError(f"word does not have length {WORD_LENGTH}: {data!r}")
        if not data.isascii():
            offending = next(b for b in data if b >= 0x80)
            raise ValueError(f"word is not ascii, non ascii byte: {offending:#x}")
        self._word = data

    def intdigest(self) -> int:
        return perfect_hash(self._word)

    def copy(self) -> "WordHasher":
        clone = WordHasher()
        clone._word = self._word
        return clone

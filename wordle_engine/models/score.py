"""
Score Models and Codec

A Score is the verdict for all five letters of one guess. It is stored as a
single byte: the five LetterScore ordinals are base-3 digits, position 0
being the least significant. 3**5 = 243 values fit in a byte, and the all
RIGHT score packs to 242.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Tuple

from ..config.game_settings import WORD_LENGTH


class LetterScore(IntEnum):
    """Verdict for a single letter. The ordinal values are the wire encoding."""
    WRONG = 0    # not in the word
    IN_WORD = 1  # in the word, elsewhere
    RIGHT = 2    # in the word, this spot


PERFECT_PACKED = 3 ** WORD_LENGTH - 1
_PLACES = tuple(3 ** i for i in range(WORD_LENGTH))


def encode_score(letters: Iterable[LetterScore]) -> int:
    """Pack five LetterScore values into one byte."""
    packed = 0
    for place, letter in zip(_PLACES, letters):
        packed += int(letter) * place
    return packed


def decode_score(packed: int) -> Tuple[LetterScore, ...]:
    """Expand a packed byte back into five LetterScore values."""
    return tuple(LetterScore((packed // place) % 3) for place in _PLACES)


def is_win(packed: int) -> bool:
    return packed == PERFECT_PACKED


@dataclass(frozen=True)
class Score:
    """Packed verdict for one guess."""
    packed: int = 0

    @classmethod
    def from_letters(cls, letters: Iterable[LetterScore]) -> "Score":
        letters = tuple(letters)
        if len(letters) != WORD_LENGTH:
            raise ValueError(f"a score has {WORD_LENGTH} positions, got {len(letters)}")
        return cls(encode_score(letters))

    @property
    def letters(self) -> Tuple[LetterScore, ...]:
        return decode_score(self.packed)

    def is_win(self) -> bool:
        return is_win(self.packed)

    def __getitem__(self, index: int) -> LetterScore:
        return LetterScore((self.packed // _PLACES[index]) % 3)

    def __iter__(self) -> Iterator[LetterScore]:
        return iter(self.letters)

    def __len__(self) -> int:
        return WORD_LENGTH


PERFECT_SCORE = Score(PERFECT_PACKED)

"""
Word Model

A guess or secret: exactly five ASCII bytes, immutable once built.
"""

from dataclasses import dataclass
from typing import Iterator, Union

from ..exceptions import InvalidWordLength, NonAsciiByte
from ..config.game_settings import WORD_LENGTH
from ..utils.hashing import perfect_hash


@dataclass(frozen=True)
class Word:
    """
    Five ASCII bytes compared byte-wise.

    Construction validates length first, then the ASCII range, so the error
    always names the first problem a user would need to fix. Hashing goes
    through the dictionary's perfect hash, which keeps sets and dicts of
    dictionary words collision-free.
    """
    letters: bytes

    def __post_init__(self):
        letters = bytes(self.letters)
        if len(letters) != WORD_LENGTH:
            raise InvalidWordLength(len(letters), WORD_LENGTH)
        for byte in letters:
            if byte >= 0x80:
                raise NonAsciiByte(byte)
        object.__setattr__(self, 'letters', letters)

    @classmethod
    def parse(cls, raw: Union[str, bytes]) -> "Word":
        """Build an uppercase Word from raw user input."""
        if isinstance(raw, str):
            raw = raw.encode('utf-8')
        return cls(raw).upper()

    def upper(self) -> "Word":
        # bytes.upper only touches a-z
        return Word(self.letters.upper())

    def __hash__(self) -> int:
        return perfect_hash(self.letters)

    def __bytes__(self) -> bytes:
        return self.letters

    def __iter__(self) -> Iterator[int]:
        return iter(self.letters)

    def __len__(self) -> int:
        return WORD_LENGTH

    def __getitem__(self, index: int) -> int:
        return self.letters[index]

    def __lt__(self, other: "Word") -> bool:
        return self.letters < other.letters

    def __str__(self) -> str:
        return self.letters.decode('ascii')

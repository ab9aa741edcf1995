"""
Dictionary Service

The fixed, sorted list of playable words and its perfect-hash lookup table.
"""

import sys
from bisect import bisect_left
from typing import Dict, Iterable, Iterator, Optional, Sequence, Union

from ..config.game_settings import WORD_LIST, validate_word_list_integrity
from ..exceptions import HashCollisionError, InvalidInputError
from ..models.word import Word
from ..utils.game_logger import game_logger
from ..utils.hashing import LENGTH_TOKEN_SIZE, WordHasher
from .random_source import RandomSource, randbelow


class Dictionary:
    """
    Read-only, lexicographically sorted sequence of Words.

    Membership tests live on PerfectWordSet; this class only counts, indexes
    and picks.
    """

    def __init__(self, words: Iterable[Union[str, Word]]):
        self._words = tuple(w if isinstance(w, Word) else Word.parse(w) for w in words)
        if not self._words:
            raise ValueError("Dictionary cannot be empty")

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> Word:
        return self._words[index]

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def pick_random(self, rng: RandomSource) -> Word:
        """Uniformly select a word using an external random source."""
        return self._words[randbelow(rng, len(self._words))]

    def index_of(self, word: Word) -> Optional[int]:
        """Binary search for ``word``; None when absent."""
        index = bisect_left(self._words, word)
        if index < len(self._words) and self._words[index] == word:
            return index
        return None


class PerfectWordSet:
    """
    O(1) membership over a fixed word list keyed by ``perfect_hash``.

    The table maps each hash to the position of its word. A hash hit is still
    confirmed with a byte comparison, because the hash is only injective over
    the words the table was built from.
    """

    def __init__(self, words: Sequence[Word]):
        self._words = words
        self._table: Dict[int, int] = {}
        for index, word in enumerate(words):
            value = self.hash_word(word)
            existing = self._table.get(value)
            if existing is not None:
                raise HashCollisionError(words[existing], word, value)
            self._table[value] = index

    @staticmethod
    def hash_word(word: Word) -> int:
        """Hash a word the generic way: length token first, then the bytes."""
        hasher = WordHasher()
        hasher.update(len(word).to_bytes(LENGTH_TOKEN_SIZE, sys.byteorder))
        hasher.update(bytes(word))
        return hasher.intdigest()

    def __len__(self) -> int:
        return len(self._table)

    def index(self, word: Word) -> Optional[int]:
        index = self._table.get(self.hash_word(word))
        if index is not None and self._words[index] == word:
            return index
        return None

    def contains(self, word: Union[str, bytes, Word]) -> bool:
        """Check a word, parsing raw input first. Malformed input is never a member."""
        if not isinstance(word, Word):
            try:
                word = Word.parse(word)
            except InvalidInputError:
                return False
        return self.index(word) is not None

    __contains__ = contains


def load_dictionary(word_list: Sequence[str] = WORD_LIST):
    """
    Validate a word list and build its Dictionary and lookup table.

    Collision-freedom of the perfect hash only holds for the list it was
    checked against, so it is re-verified every time a list is loaded.

    Returns:
        Tuple of (Dictionary, PerfectWordSet)

    Raises:
        ValueError: If the list fails validation
        HashCollisionError: If two words share a perfect hash
    """
    validate_word_list_integrity(list(word_list))
    dictionary = Dictionary(word_list)
    word_set = PerfectWordSet(dictionary)
    game_logger.log_game_event(None, 'dictionary_loaded', total_words=len(dictionary))
    return dictionary, word_set


# Global dictionary instances
_dictionary: Optional[Dictionary] = None
_word_set: Optional[PerfectWordSet] = None


def get_dictionary() -> Optional[Dictionary]:
    """Get the global dictionary instance."""
    return _dictionary


def get_word_set() -> Optional[PerfectWordSet]:
    """Get the global perfect-hash word set."""
    return _word_set


def initialize_dictionary(word_list: Sequence[str] = WORD_LIST) -> Dictionary:
    """Validate and install the global dictionary instances."""
    global _dictionary, _word_set
    _dictionary, _word_set = load_dictionary(word_list)
    return _dictionary

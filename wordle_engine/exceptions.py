"""
Engine Exceptions

All errors raised by the word model, the stats format and game sessions.
Input errors derive from ValueError so callers can re-prompt on them.
"""


class WordleError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInputError(WordleError, ValueError):
    """A raw guess could not be turned into a Word."""


class InvalidWordLength(InvalidInputError):
    """Input was not exactly five bytes long."""

    def __init__(self, length: int, expected: int = 5):
        self.length = length
        self.expected = expected
        super().__init__(f"Guess must have {expected} characters (got {length}).")


class NonAsciiByte(InvalidInputError):
    """Input contained a byte outside the ASCII range."""

    def __init__(self, byte: int):
        self.byte = byte
        super().__init__(f"expected ascii, found: {byte:#x}")


class StatsParseError(WordleError, ValueError):
    """A stats line was malformed or truncated."""


class GameOverError(WordleError):
    """A guess was submitted to a finished game."""


class HashCollisionError(WordleError, ValueError):
    """Two dictionary words produced the same perfect hash."""

    def __init__(self, first, second, value: int):
        self.first = first
        self.second = second
        self.value = value
        super().__init__(f"{first} and {second} both hash to {value:#x}")

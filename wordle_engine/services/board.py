"""
Board

One player's game against one secret word.
"""

from enum import Enum
from typing import List, Optional, Tuple

from ..config.game_settings import TURN_LIMIT
from ..exceptions import GameOverError
from ..models.score import Score
from ..models.word import Word
from .scoring import score_guess


class BoardState(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    TERMINAL = "TERMINAL"


class Board:
    """
    Turn tracking and guess history for a single game.

    The secret is fixed at construction. Each accepted guess appends one
    ``(guess, score)`` entry; the board becomes terminal on a winning score
    or once ``turn_limit`` guesses have been taken, and refuses guesses from
    then on.
    """

    def __init__(self, secret: Word, turn_limit: int = TURN_LIMIT):
        self._secret = secret
        self._turn_limit = turn_limit
        self._history: List[Tuple[Word, Score]] = []

    @property
    def secret(self) -> Word:
        return self._secret

    @property
    def turn_limit(self) -> int:
        return self._turn_limit

    @property
    def turn(self) -> int:
        return len(self._history)

    @property
    def history(self) -> Tuple[Tuple[Word, Score], ...]:
        return tuple(self._history)

    @property
    def last_score(self) -> Optional[Score]:
        return self._history[-1][1] if self._history else None

    @property
    def won(self) -> bool:
        last = self.last_score
        return last is not None and last.is_win()

    @property
    def state(self) -> BoardState:
        if self.won or self.turn >= self._turn_limit:
            return BoardState.TERMINAL
        return BoardState.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        return self.state is BoardState.TERMINAL

    @property
    def lost(self) -> bool:
        return self.is_terminal and not self.won

    def submit(self, guess: Word) -> Score:
        """
        Score a guess and record it.

        Raises:
            GameOverError: If the game is already won or out of turns
        """
        if self.is_terminal:
            raise GameOverError("Game is already over")

        score = score_guess(self._secret, guess)
        self._history.append((guess, score))
        return score

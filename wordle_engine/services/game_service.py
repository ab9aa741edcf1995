"""
Game Service

Hosts game sessions for the HTTP API.
"""

import string
import threading
import uuid
from typing import Dict, Optional, Tuple

from ..exceptions import GameOverError, InvalidInputError
from ..models.game import GameState, LetterStatus
from ..models.score import LetterScore, Score
from ..models.word import Word
from ..utils.game_logger import game_logger
from .board import Board
from .dictionary import Dictionary, PerfectWordSet
from .random_source import RandomSource, XorShiftRandom

_LETTER_TO_STATUS = {
    LetterScore.RIGHT: LetterStatus.HIT,
    LetterScore.IN_WORD: LetterStatus.PRESENT,
    LetterScore.WRONG: LetterStatus.MISS,
}
_STATUS_RANK = {
    LetterStatus.UNUSED: 0,
    LetterStatus.MISS: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.HIT: 3,
}


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret selection from the dictionary with an injectable random source
    - Guess validation against the perfect-hash word set
    - Game state snapshots that hide the answer until the game is over

    Flask may serve requests from several threads, so the session registry
    and the random source are guarded by one lock.
    """

    def __init__(self,
                 dictionary: Dictionary,
                 word_set: PerfectWordSet,
                 rng: Optional[RandomSource] = None):
        self.dictionary = dictionary
        self.word_set = word_set
        self.rng = rng if rng is not None else XorShiftRandom()
        self.games: Dict[str, Board] = {}
        self._letter_status: Dict[str, Dict[str, LetterStatus]] = {}
        self._lock = threading.Lock()

    def pick_word(self) -> Word:
        with self._lock:
            return self.dictionary.pick_random(self.rng)

    def create_new_game(self, secret: Optional[Word] = None) -> str:
        """
        Creates a new game session.

        Args:
            secret: Word to play against; a random dictionary word if omitted

        Returns:
            str: Unique game ID for this session
        """
        if secret is None:
            secret = self.pick_word()

        game_id = str(uuid.uuid4())
        with self._lock:
            self.games[game_id] = Board(secret)
            self._letter_status[game_id] = {
                letter: LetterStatus.UNUSED for letter in string.ascii_uppercase
            }

        game_logger.logger.info(f"Game {game_id} created")
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        board = self.games.get(game_id)
        if board is None:
            return None

        return GameState(
            game_id=game_id,
            current_round=board.turn,
            max_rounds=board.turn_limit,
            game_over=board.is_terminal,
            won=board.won,
            guesses=[str(guess) for guess, _ in board.history],
            guess_results=[self._expand(guess, score) for guess, score in board.history],
            packed_scores=[score.packed for _, score in board.history],
            letter_status={
                letter: status.value for letter, status in self._letter_status[game_id].items()
            },
            answer=str(board.secret) if board.is_terminal else None,
        )

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Returns:
            Tuple of (is_valid, error_message)
        """
        board = self.games.get(game_id)
        if board is None:
            return False, "Game not found"

        if board.is_terminal:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        try:
            word = Word.parse(guess.strip())
        except InvalidInputError as e:
            return False, str(e)

        if word not in self.word_set:
            return False, "Word not in word list"

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Processes a guess and updates game state.

        Returns:
            Updated GameState or None if the guess was rejected
        """
        is_valid, _ = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return None

        word = Word.parse(guess.strip())
        try:
            with self._lock:
                board = self.games.get(game_id)
                if board is None:
                    return None
                score = board.submit(word)
                self._update_letter_status(self._letter_status[game_id], word, score)
        except GameOverError:
            return None

        if board.won:
            game_logger.logger.info(f"Game {game_id} won in {board.turn} turns")
        elif board.lost:
            game_logger.logger.info(f"Game {game_id} lost, the word was {board.secret}")

        return self.get_game_state(game_id)

    @staticmethod
    def _expand(guess: Word, score: Score):
        return [(chr(letter), verdict.name) for letter, verdict in zip(guess, score)]

    @staticmethod
    def _update_letter_status(letter_status: Dict[str, LetterStatus], guess: Word, score: Score) -> None:
        """
        Updates keyboard letter hints. A status only ever moves up:
        UNUSED < MISS < PRESENT < HIT.
        """
        for letter, verdict in zip(str(guess), score):
            if letter not in letter_status:
                continue
            new_status = _LETTER_TO_STATUS[verdict]
            if _STATUS_RANK[new_status] > _STATUS_RANK[letter_status[letter]]:
                letter_status[letter] = new_status

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                del self._letter_status[game_id]
                return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Dictionary,
                            word_set: PerfectWordSet,
                            rng: Optional[RandomSource] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, word_set, rng)
    return _game_service

"""
Game Data Models

Snapshot types returned to HTTP clients.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Keyboard hint for a letter across every guess so far."""
    HIT = "HIT"
    PRESENT = "PRESENT"
    MISS = "MISS"
    UNUSED = "UNUSED"


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    current_round: int
    max_rounds: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # LetterScore names for JSON serialization
    packed_scores: List[int]
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over

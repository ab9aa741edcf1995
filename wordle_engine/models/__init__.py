"""
Data Models Package

Contains all data models and value types used throughout the engine.
"""

from .game import GameState, LetterStatus
from .score import LetterScore, Score, PERFECT_SCORE, encode_score, decode_score, is_win
from .stats import Stats
from .word import Word

__all__ = [
    'GameState', 'LetterStatus',
    'LetterScore', 'Score', 'PERFECT_SCORE', 'encode_score', 'decode_score', 'is_win',
    'Stats', 'Word'
]

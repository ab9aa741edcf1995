"""
Utilities Package

Contains the structured game logger and the perfect hash.
"""

from .game_logger import GameLogger, game_logger
from .hashing import perfect_hash, WordHasher

__all__ = ['GameLogger', 'game_logger', 'perfect_hash', 'WordHasher']

"""
Services Package

Contains the scoring engine, dictionary lookup, game sessions and stats storage.
"""

from .board import Board, BoardState
from .dictionary import (
    Dictionary, PerfectWordSet, load_dictionary,
    get_dictionary, get_word_set, initialize_dictionary
)
from .game_service import GameService, get_game_service, initialize_game_service
from .random_source import RandomSource, XorShiftRandom, SystemRandomSource, randbelow
from .scoring import score_guess
from .stats_service import StatsStore, format_histogram

__all__ = [
    'Board', 'BoardState',
    'Dictionary', 'PerfectWordSet', 'load_dictionary',
    'get_dictionary', 'get_word_set', 'initialize_dictionary',
    'GameService', 'get_game_service', 'initialize_game_service',
    'RandomSource', 'XorShiftRandom', 'SystemRandomSource', 'randbelow',
    'score_guess',
    'StatsStore', 'format_histogram'
]

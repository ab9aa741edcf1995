"""
Controllers Package

Flask blueprints for the HTTP API.
"""

from .game_controller import game_bp
from .word_controller import word_bp

__all__ = ['game_bp', 'word_bp']

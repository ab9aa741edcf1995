"""
Stats Service

Keeps a player's Stats in a one-line text file between games.
"""

import os
import tempfile
from typing import Optional

from ..models.stats import Stats
from ..utils.game_logger import game_logger

HISTOGRAM_WIDTH = 30
BAR = '\U0001FB0E'


class StatsStore:
    """File-backed Stats. A missing file reads as a fresh, all-zero record."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Stats:
        """
        Raises:
            StatsParseError: If the file exists but is malformed
        """
        try:
            with open(self.path, 'r', encoding='ascii', errors='replace') as f:
                return Stats.load(f)
        except FileNotFoundError:
            return Stats()

    def save(self, stats: Stats) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.stats-')
        try:
            with os.fdopen(fd, 'w', encoding='ascii') as f:
                stats.dump(f)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def record_game(self, won: bool, turn: Optional[int] = None) -> Stats:
        """
        Add one finished game to the file and return the updated Stats.

        Args:
            won: Whether the game was won
            turn: 0-based turn of the winning guess, required when ``won``
        """
        stats = self.load()
        if won:
            if turn is None:
                raise ValueError("turn is required for a win")
            stats.record_win(turn)
        else:
            stats.record_loss()
        self.save(stats)
        game_logger.log_game_event(
            None, 'stats_recorded', won=won, turn=turn, games_played=stats.games_played
        )
        return stats


def format_histogram(stats: Stats, width: int = HISTOGRAM_WIDTH) -> str:
    """Render each win bucket and the losses as a horizontal bar."""
    top = max(*stats.wins, stats.losses)
    lines = []
    for value in (*stats.wins, stats.losses):
        columns = int(value / top * width) if top else 0
        lines.append(f"{value} | {BAR * columns}")
    return '\n'.join(lines)

"""
Player Statistics Model

Win histogram indexed by the turn the game was won on, plus a loss counter,
with the one-line text format used for the stats file:

    "w1 w2 w3 w4 w5 w6 losses\\n"

Counters are unsigned 32-bit values and wrap past 2**32 - 1. Nothing guards
against that; a player would need four billion games to hit it.
"""

import io
import re
from dataclasses import dataclass, field
from typing import IO, List, Union

from ..config.game_settings import TURN_LIMIT
from ..exceptions import StatsParseError

U32_MAX = 0xFFFFFFFF
MAX_DIGITS = len(str(U32_MAX))
FIELD_COUNT = TURN_LIMIT + 1
# Seven numbers of at most ten digits plus their separators
READ_WINDOW = MAX_DIGITS * FIELD_COUNT + FIELD_COUNT

_DECIMAL = re.compile(r'[0-9]+')


def _parse_u32(token: str) -> int:
    if not _DECIMAL.fullmatch(token):
        raise StatsParseError(f"invalid digit in stats field: {token!r}")
    value = int(token)
    if value > U32_MAX:
        raise StatsParseError(f"stats field out of range: {token}")
    return value


@dataclass
class Stats:
    """Wins per turn (index 0 is a first-guess win) and total losses."""
    wins: List[int] = field(default_factory=lambda: [0] * TURN_LIMIT)
    losses: int = 0

    def __post_init__(self):
        self.wins = list(self.wins)
        if len(self.wins) != TURN_LIMIT:
            raise ValueError(f"expected {TURN_LIMIT} win buckets, got {len(self.wins)}")
        for value in (*self.wins, self.losses):
            if not 0 <= value <= U32_MAX:
                raise ValueError(f"stats counter out of range: {value}")

    def record_win(self, turn: int) -> None:
        """Count a win on ``turn`` (0-based, so 0 means the first guess)."""
        if not 0 <= turn < TURN_LIMIT:
            raise ValueError(f"turn must be in [0, {TURN_LIMIT}), got {turn}")
        self.wins[turn] = (self.wins[turn] + 1) & U32_MAX

    def record_loss(self) -> None:
        self.losses = (self.losses + 1) & U32_MAX

    @property
    def games_played(self) -> int:
        return sum(self.wins) + self.losses

    def serialize(self) -> str:
        return ' '.join(str(value) for value in (*self.wins, self.losses)) + '\n'

    def dump(self, fp: IO[str]) -> None:
        fp.write(self.serialize())

    @classmethod
    def deserialize(cls, data: Union[str, bytes]) -> "Stats":
        if isinstance(data, bytes):
            data = data.decode('ascii', errors='replace')
        return cls.load(io.StringIO(data))

    @classmethod
    def load(cls, fp: IO) -> "Stats":
        """
        Read one stats line from a stream.

        At most READ_WINDOW characters are consumed while looking for the
        terminating newline; anything after it is ignored.

        Raises:
            StatsParseError: If the line is truncated, has the wrong number of
                fields, or a field is not a decimal u32
        """
        buf = ''
        while '\n' not in buf:
            if len(buf) >= READ_WINDOW:
                raise StatsParseError(f"no newline within the first {READ_WINDOW} characters")
            chunk = fp.read(READ_WINDOW - len(buf))
            if not chunk:
                raise StatsParseError("stats line is truncated")
            if isinstance(chunk, bytes):
                chunk = chunk.decode('ascii', errors='replace')
            buf += chunk

        fields = buf.split('\n', 1)[0].split()
        if len(fields) != FIELD_COUNT:
            raise StatsParseError(f"expected {FIELD_COUNT} stats fields, found {len(fields)}")

        values = [_parse_u32(token) for token in fields]
        return cls(wins=values[:TURN_LIMIT], losses=values[TURN_LIMIT])

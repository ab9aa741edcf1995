import io

import pytest

from wordle_engine.exceptions import StatsParseError
from wordle_engine.models.stats import READ_WINDOW, U32_MAX, Stats


def test_deserialize():
    assert Stats.deserialize('0 0 0 0 0 0 0\n') == Stats(wins=[0] * 6, losses=0)
    assert Stats.deserialize('1 2 3 4 5 6 7\n') == Stats(wins=[1, 2, 3, 4, 5, 6], losses=7)


def test_deserialize_u32_max():
    line = ' '.join([str(U32_MAX)] * 7) + '\n'
    assert len(line) == READ_WINDOW
    assert Stats.deserialize(line) == Stats(wins=[U32_MAX] * 6, losses=U32_MAX)


def test_serialize_format():
    assert Stats(wins=[1, 2, 3, 4, 5, 6], losses=7).serialize() == '1 2 3 4 5 6 7\n'


@pytest.mark.parametrize('stats', [
    Stats(),
    Stats(wins=[3, 0, 12, 1, 0, 9], losses=2),
    Stats(wins=[U32_MAX] * 6, losses=U32_MAX),
])
def test_round_trip(stats):
    assert Stats.deserialize(stats.serialize()) == stats


def test_legacy_trailing_blank_line():
    assert Stats.deserialize('1 2 3 4 5 6 7\n\n') == Stats(wins=[1, 2, 3, 4, 5, 6], losses=7)


def test_load_from_binary_stream():
    assert Stats.load(io.BytesIO(b'0 1 0 0 0 0 2\n')).losses == 2


def test_dump():
    buf = io.StringIO()
    Stats(wins=[0, 1, 0, 0, 0, 0], losses=0).dump(buf)
    assert buf.getvalue() == '0 1 0 0 0 0 0\n'


def test_only_first_line_is_read():
    stream = io.StringIO('1 1 1 1 1 1 1\nsomething else\n')
    assert Stats.load(stream) == Stats(wins=[1] * 6, losses=1)


@pytest.mark.parametrize('text', [
    '1 2 3 4 5 6\n',            # too few fields
    '1 2 3 4 5 6 7 8\n',        # too many fields
    '1 2 3 4 5 6 x\n',
    '1 2 3 -4 5 6 7\n',
    '1 2 3 +4 5 6 7\n',
    '1 2 3 4.5 5 6 7\n',
    '4294967296 0 0 0 0 0 0\n',  # above u32
    '1 2 3 4 5 6 7',            # no newline
    '',
    '1' * 100 + '\n',           # no newline inside the read window
])
def test_malformed_lines(text):
    with pytest.raises(StatsParseError):
        Stats.deserialize(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        Stats.deserialize('nope\n')


def test_record_win_and_loss():
    stats = Stats()
    stats.record_win(0)
    stats.record_win(5)
    stats.record_win(5)
    stats.record_loss()
    assert stats.wins == [1, 0, 0, 0, 0, 2]
    assert stats.losses == 1
    assert stats.games_played == 4


@pytest.mark.parametrize('turn', [-1, 6])
def test_record_win_turn_out_of_range(turn):
    with pytest.raises(ValueError):
        Stats().record_win(turn)


def test_counters_wrap_at_u32():
    stats = Stats(wins=[U32_MAX] * 6, losses=U32_MAX)
    stats.record_win(2)
    stats.record_loss()
    assert stats.wins[2] == 0
    assert stats.losses == 0


def test_constructor_validates():
    with pytest.raises(ValueError):
        Stats(wins=[0] * 5)
    with pytest.raises(ValueError):
        Stats(losses=-1)

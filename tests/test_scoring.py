import pytest

from wordle_engine.models.score import LetterScore, PERFECT_SCORE, Score
from wordle_engine.models.word import Word
from wordle_engine.services.scoring import score_guess

W, I, R = LetterScore.WRONG, LetterScore.IN_WORD, LetterScore.RIGHT


@pytest.mark.parametrize('secret, guess, expected', [
    ('WORDS', 'BIRDS', [W, W, R, R, R]),
    ('TESTS', 'STABS', [I, I, W, W, R]),
    ('CARGO', 'GOCAR', [I, I, I, I, I]),
    ('CARGO', 'CARGO', [R, R, R, R, R]),
    ('STARK', 'LOSSY', [W, W, I, W, W]),
    ('LIEGE', 'LIENS', [R, R, R, W, W]),
    ('LIEGE', 'LITRE', [R, R, W, W, R]),
    ('ABCDE', 'EDCBA', [I, I, R, I, I]),
    ('ABCDE', 'CCCCC', [W, W, R, W, W]),
    ('ABCDE', 'CCXXX', [I, W, W, W, W]),
    # the O guessed first must not take credit from the exact match later on
    ('HUMOR', 'HONOR', [R, W, W, R, R]),
    ('CRANE', 'SLATE', [W, W, R, W, R]),
])
def test_score_table(secret, guess, expected):
    got = score_guess(Word.parse(secret), Word.parse(guess))
    assert got == Score.from_letters(expected)
    assert list(got) == expected


def test_identical_words_win(dictionary):
    for w in list(dictionary)[:200]:
        assert score_guess(w, w) == PERFECT_SCORE


def test_only_identical_words_win(dictionary):
    words = list(dictionary)[:40]
    for secret in words:
        for guess in words:
            assert score_guess(secret, guess).is_win() == (secret == guess)


def test_inputs_are_not_modified():
    secret = Word.parse('CARGO')
    score_guess(secret, Word.parse('GOCAR'))
    assert secret == Word.parse('CARGO')

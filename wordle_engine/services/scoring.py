"""
Scoring Engine

Compares a guess with the secret word using Wordle's duplicate-letter rule.
"""

from ..models.score import LetterScore, PERFECT_SCORE, Score, encode_score
from ..models.word import Word

# Not an ASCII byte, so it never matches a guessed letter
SENTINEL = 0xFF


def score_guess(secret: Word, guess: Word) -> Score:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    Exact matches are resolved first and consume their secret letter, then
    the remaining guessed letters claim the first unconsumed occurrence in
    the secret, left to right. A letter guessed twice is credited only as
    often as it is still left in the secret.

    Both words must already be validated and uppercased.
    """
    if secret == guess:
        return PERFECT_SCORE

    remaining = bytearray(bytes(secret))
    guessed = bytes(guess)
    result = [LetterScore.WRONG] * len(guessed)

    # First pass: exact position matches
    for i, letter in enumerate(guessed):
        if remaining[i] == letter:
            result[i] = LetterScore.RIGHT
            remaining[i] = SENTINEL

    # Second pass: letters present elsewhere
    for i, letter in enumerate(guessed):
        if result[i] is LetterScore.RIGHT:
            continue
        position = remaining.find(letter)
        if position != -1:
            result[i] = LetterScore.IN_WORD
            remaining[position] = SENTINEL

    return Score(encode_score(result))

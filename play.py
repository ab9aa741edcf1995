"""
Terminal Wordle

Plays one game against a random dictionary word, colours each guess with
ANSI backgrounds and keeps a win/loss histogram in the stats file.
"""

import argparse
import sys
from typing import Callable, Optional

from wordle_engine.config import Config
from wordle_engine.exceptions import InvalidInputError, StatsParseError
from wordle_engine.models.score import LetterScore, Score
from wordle_engine.models.word import Word
from wordle_engine.services.board import Board
from wordle_engine.services.dictionary import load_dictionary
from wordle_engine.services.random_source import XorShiftRandom
from wordle_engine.services.stats_service import StatsStore, format_histogram


class Ansi:
    RESET = "\033[m"
    BG = {
        LetterScore.WRONG: 100,
        LetterScore.IN_WORD: 43,
        LetterScore.RIGHT: 42,
    }
    SYMBOL = {
        LetterScore.WRONG: '.',
        LetterScore.IN_WORD: '?',
        LetterScore.RIGHT: '=',
    }


def render_guess(word: Word, score: Score, color: bool = True) -> str:
    """Black letters on a grey, yellow or green tile per verdict."""
    if not color:
        return f"{word} {''.join(Ansi.SYMBOL[s] for s in score)}"
    tiles = ''.join(
        f"\033[30;{Ansi.BG[verdict]}m{chr(letter)}" for letter, verdict in zip(word, score)
    )
    return tiles + Ansi.RESET


def render_board(board: Board, color: bool = True) -> str:
    return '\n'.join(render_guess(word, score, color) for word, score in board.history)


def play_one_game(board: Board,
                  word_set,
                  read: Callable[[str], str] = input,
                  write: Callable[[str], None] = print,
                  color: bool = True) -> bool:
    """
    Prompt until the board is finished. Returns True on a win.

    Malformed or unknown words are rejected with a message and do not cost
    a turn.
    """
    while not board.is_terminal:
        raw = read("Your guess: ")
        try:
            guess = Word.parse(raw.strip())
        except InvalidInputError as e:
            write(str(e))
            continue
        if guess not in word_set:
            write(f"{guess} is not in the word list.")
            continue

        board.submit(guess)
        write(render_board(board, color))

    if board.won:
        write("🎉🎊🥳")
    else:
        write(f"Sorry, the word was {board.secret}")
    return board.won


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Wordle in the terminal")
    parser.add_argument("--seed", type=int, default=Config.RANDOM_SEED,
                        help="Random seed for a reproducible secret word")
    parser.add_argument("--stats-file", default=Config.STATS_FILE,
                        help="Where wins and losses are kept")
    parser.add_argument("--stats", action="store_true", help="Print the histogram and exit")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    args = parser.parse_args(argv)

    store = StatsStore(args.stats_file)
    if args.stats:
        try:
            print(format_histogram(store.load()))
        except StatsParseError as e:
            print(f"Could not read {args.stats_file}: {e}", file=sys.stderr)
            return 1
        return 0

    dictionary, word_set = load_dictionary()
    board = Board(dictionary.pick_random(XorShiftRandom(args.seed)))

    try:
        won = play_one_game(board, word_set, color=not args.no_color)
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
        return 1

    try:
        stats = store.record_game(won, board.turn - 1 if won else None)
    except StatsParseError as e:
        print(f"Could not update {args.stats_file}: {e}", file=sys.stderr)
        return 1

    print()
    print(format_histogram(stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())

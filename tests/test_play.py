import play
from wordle_engine.models.score import LetterScore
from wordle_engine.models.stats import Stats
from wordle_engine.models.word import Word
from wordle_engine.services.board import Board
from wordle_engine.services.scoring import score_guess


def _scripted(lines):
    answers = iter(lines)
    return lambda prompt: next(answers)


def test_render_without_color():
    guess = Word.parse('SLATE')
    score = score_guess(Word.parse('CRANE'), guess)
    assert play.render_guess(guess, score, color=False) == 'SLATE ..=.='


def test_render_with_color():
    guess = Word.parse('SLATE')
    score = score_guess(Word.parse('CRANE'), guess)
    rendered = play.render_guess(guess, score)
    assert rendered.startswith('\033[30;100mS')
    assert '\033[30;42mA' in rendered
    assert rendered.endswith('\033[m')
    assert play.Ansi.BG[LetterScore.IN_WORD] == 43


def test_play_one_game_reprompts_on_bad_input(word_set):
    board = Board(Word.parse('CRANE'))
    output = []
    won = play.play_one_game(
        board, word_set, read=_scripted(['xx', 'zzzzz', 'slate', 'crane']),
        write=output.append, color=False
    )
    assert won
    assert board.turn == 2
    assert 'Guess must have 5 characters (got 2).' in output
    assert 'ZZZZZ is not in the word list.' in output
    assert output[-1] == '🎉🎊🥳'


def test_play_one_game_loss(word_set):
    board = Board(Word.parse('CRANE'), turn_limit=2)
    output = []
    won = play.play_one_game(
        board, word_set, read=_scripted(['slate', 'birds']), write=output.append, color=False
    )
    assert not won
    assert output[-1] == 'Sorry, the word was CRANE'


def test_stats_flag_prints_histogram(tmp_path, capsys):
    path = tmp_path / 'stats'
    path.write_text(Stats(wins=[0, 2, 0, 0, 0, 0], losses=1).serialize())
    assert play.main(['--stats', '--stats-file', str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[1].startswith('2 | ')


def test_stats_flag_reports_bad_file(tmp_path, capsys):
    path = tmp_path / 'stats'
    path.write_text('garbage\n')
    assert play.main(['--stats', '--stats-file', str(path)]) == 1
    assert 'Could not read' in capsys.readouterr().err

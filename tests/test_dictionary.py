import pytest

from wordle_engine.config import WORD_LIST, get_word_statistics, validate_word_list_integrity
from wordle_engine.exceptions import HashCollisionError
from wordle_engine.models.word import Word
from wordle_engine.services.dictionary import Dictionary, PerfectWordSet, load_dictionary
from wordle_engine.services.random_source import XorShiftRandom
from wordle_engine.utils.hashing import perfect_hash


def test_dictionary_matches_word_list(dictionary):
    assert len(dictionary) == len(WORD_LIST)
    assert [str(w) for w in dictionary] == WORD_LIST
    assert dictionary[0] == Word.parse(WORD_LIST[0])


def test_shipped_word_list_is_valid():
    assert validate_word_list_integrity() is True
    assert WORD_LIST == sorted(set(WORD_LIST))


def test_index_of(dictionary):
    assert dictionary.index_of(Word.parse('CRANE')) == WORD_LIST.index('CRANE')
    assert dictionary.index_of(Word.parse('ZZZZZ')) is None


def test_pick_random_is_reproducible(dictionary):
    first = [dictionary.pick_random(XorShiftRandom(42)) for _ in range(3)]
    second = [dictionary.pick_random(XorShiftRandom(42)) for _ in range(3)]
    assert first == second
    rng = XorShiftRandom(7)
    for _ in range(100):
        assert dictionary.index_of(dictionary.pick_random(rng)) is not None


def test_empty_dictionary_rejected():
    with pytest.raises(ValueError):
        Dictionary([])


def test_every_word_is_a_member(dictionary, word_set):
    assert len(word_set) == len(dictionary)
    for i, w in enumerate(dictionary):
        assert w in word_set
        assert word_set.index(w) == i


def test_non_members(word_set):
    assert Word.parse('ZZZZZ') not in word_set
    assert 'QXQXQ' not in word_set
    assert 'toolong' not in word_set
    assert 'crané' not in word_set


def test_raw_input_is_parsed(word_set):
    assert 'crane' in word_set
    assert word_set.contains(b'SLATE')


def test_hash_hit_is_confirmed_by_comparison():
    table = PerfectWordSet([Word(b'@AAAA')])
    assert Word(b'@AAAA') in table
    # same perfect hash, different bytes
    assert Word(b'`AAAA') not in table


def test_collisions_are_detected():
    with pytest.raises(HashCollisionError) as excinfo:
        PerfectWordSet([Word(b'@AAAA'), Word(b'`AAAA')])
    assert excinfo.value.first == Word(b'@AAAA')


def test_python_set_of_words_uses_perfect_hash(dictionary):
    assert len(set(dictionary)) == len(dictionary)


@pytest.mark.parametrize('words', [
    ['CRANE', 'ABBEY'],
    ['ABBEY', 'ABBEY'],
    ['CRANES'],
    ['crane'],
    ['CR4NE'],
    [],
])
def test_load_dictionary_rejects_bad_lists(words):
    with pytest.raises(ValueError):
        load_dictionary(words)


def test_load_custom_list():
    dictionary, word_set = load_dictionary(['ABBEY', 'CRANE', 'SLATE'])
    assert len(dictionary) == 3
    assert 'slate' in word_set
    assert 'birds' not in word_set


def test_word_statistics():
    stats = get_word_statistics()
    assert stats['total_words'] == len(WORD_LIST)
    assert sum(stats['letter_frequency'].values()) == 5 * len(WORD_LIST)
    assert len(stats['most_common_letters']) == 5


def test_word_set_hashes_through_length_token_adapter(dictionary):
    for w in dictionary:
        assert PerfectWordSet.hash_word(w) == perfect_hash(w)

import pytest

from wordle_engine.models.word import Word
from wordle_engine.utils.hashing import LENGTH_TOKEN_SIZE, WordHasher, perfect_hash


def test_bit_layout():
    # bit b of byte i lands on bit b*6 + i, then everything shifts left by 2
    assert perfect_hash(b'\x01\x00\x00\x00\x00') == 1 << 2
    assert perfect_hash(b'\x00\x01\x00\x00\x00') == 1 << 3
    assert perfect_hash(b'\x02\x00\x00\x00\x00') == 1 << 8
    assert perfect_hash(b'\x00\x00\x00\x00\x10') == 1 << (4 * 6 + 4 + 2)


def test_all_a():
    # 'A' keeps only bit 0, one per lane
    assert perfect_hash(b'AAAAA') == 0b11111 << 2


def test_only_low_five_bits_count():
    assert perfect_hash(b'aaaaa') == perfect_hash(b'AAAAA')
    # non-letter bytes can collide, which is why callers validate first
    assert perfect_hash(b'@AAAA') == perfect_hash(b'`AAAA')


def test_deterministic_and_bounded():
    assert perfect_hash(Word(b'CRANE')) == perfect_hash(b'CRANE')
    assert perfect_hash(b'\x1f' * 5) < 1 << 32


def test_word_hash_uses_perfect_hash():
    assert hash(Word(b'CRANE')) == perfect_hash(b'CRANE')


def test_shipped_dictionary_has_no_collisions(dictionary):
    hashes = {}
    for w in dictionary:
        value = perfect_hash(w)
        assert value not in hashes, f"{w} collides with {hashes.get(value)}"
        hashes[value] = w
    assert len(hashes) == len(dictionary)


def test_hasher_ignores_length_token():
    hasher = WordHasher()
    hasher.update(LENGTH_TOKEN_SIZE.to_bytes(LENGTH_TOKEN_SIZE, 'little'))
    hasher.update(b'CRANE')
    assert hasher.intdigest() == perfect_hash(b'CRANE')


def test_length_token_after_word_is_ignored_too():
    hasher = WordHasher(b'SLATE')
    hasher.update(b'\x05' + bytes(LENGTH_TOKEN_SIZE - 1))
    assert hasher.intdigest() == perfect_hash(b'SLATE')


def test_hasher_copy_is_independent():
    hasher = WordHasher(b'CRANE')
    clone = hasher.copy()
    clone.update(b'SLATE')
    assert hasher.intdigest() == perfect_hash(b'CRANE')
    assert clone.intdigest() == perfect_hash(b'SLATE')


def test_hasher_rejects_other_lengths():
    with pytest.raises(ValueError):
        WordHasher().update(b'CRANES')


def test_hasher_rejects_non_ascii():
    with pytest.raises(ValueError, match='0x80'):
        WordHasher().update(bytes([0x80, 0x41, 0x41, 0x41, 0x41]))

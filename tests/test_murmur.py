import pytest

from algonotes.murmur import murmur3


def test_string():
    assert murmur3(b"hello world") == 0x5E928F0F


def test_int():
    assert murmur3((1337).to_bytes(4, "little", signed=True)) == 0xCB6C191F


def test_empty_with_zero_seed():
    assert murmur3(b"") == 0


def test_seed_changes_result():
    assert murmur3(b"hello world", 7) != murmur3(b"hello world")


def test_length_is_mixed_in():
    # Trailing zero bytes alter only the length, which still changes the hash.
    assert murmur3(b"abc") != murmur3(b"abc\x00")


@pytest.mark.parametrize("size", range(0, 9))
def test_result_fits_32_bits(size):
    assert 0 <= murmur3(bytes(range(size)), 42) <= 0xFFFFFFFF
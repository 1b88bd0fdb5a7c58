import pytest

from qdsp.bitset import Bitset


def test_bitset_32():
    bs = Bitset(100, 32)
    assert len(bs) == 128

    bs.set(3, True)
    assert bs.data[0] == 8
    assert bs.get(3)

    bs.set_range(8, 32, True)
    assert bs.data == [0xFFFFFF08, 0x000000FF, 0x00000000, 0x00000000]

    bs.set_range(35, 25, True)
    assert bs.data == [0xFFFFFF08, 0x0FFFFFFF, 0x00000000, 0x00000000]
    assert bs.get(35)
    assert bs.get(35 + 24)
    assert not bs.get(35 + 25)

    bs.set_range(65, 60, True)
    assert bs.data == [0xFFFFFF08, 0x0FFFFFFF, 0xFFFFFFFE, 0x1FFFFFFF]
    assert bs.get(65)
    assert bs.get(65 + 59)
    assert not bs.get(65 + 60)

    bs.clear()
    assert bs.data == [0, 0, 0, 0]

    bs.set_range(1, 126, True)
    assert bs.data == [0xFFFFFFFE, 0xFFFFFFFF, 0xFFFFFFFF, 0x7FFFFFFF]
    assert not bs.get(0)
    assert bs.get(1)
    assert bs.get(126)
    assert not bs.get(127)


def test_bitset_64():
    bs = Bitset(100, 64)
    assert len(bs) == 128

    bs.set(3, True)
    assert bs.data[0] == 8
    assert bs.get(3)

    bs.set_range(8, 32, True)
    assert bs.data == [0x000000FFFFFFFF08, 0x0000000000000000]

    bs.set_range(35, 25, True)
    assert bs.data == [0x0FFFFFFFFFFFFF08, 0x0000000000000000]
    assert bs.get(35)
    assert bs.get(35 + 24)

    bs.set_range(65, 60, True)
    assert bs.data == [0x0FFFFFFFFFFFFF08, 0x1FFFFFFFFFFFFFFE]
    assert bs.get(65)
    assert bs.get(65 + 59)

    bs.clear()
    assert bs.data == [0, 0]

    bs.set_range(1, 126, True)
    assert bs.data == [0xFFFFFFFFFFFFFFFE, 0x7FFFFFFFFFFFFFFF]
    assert not bs.get(0)
    assert bs.get(1)
    assert bs.get(126)
    assert not bs.get(127)


def test_clearing_bits():
    bs = Bitset(64, 32)
    bs.set_range(0, 64, True)
    bs.set(5, False)
    assert not bs.get(5)
    bs.set_range(10, 30, False)
    assert [bs.get(k) for k in range(64)] == [
        not (k == 5 or 10 <= k < 40) for k in range(64)
    ]


def test_range_clamped_to_size():
    bs = Bitset(32, 32)
    bs.set_range(30, 10, True)
    assert bs.data == [0xC0000000]


def test_out_of_range_is_ignored():
    bs = Bitset(32, 32)
    bs.set(40, True)
    assert bs.data == [0]
    assert bs.get(40) is False


def test_invalid_word_size():
    with pytest.raises(ValueError):
        Bitset(10, 12)


def test_negative_index():
    bs = Bitset(10, 8)
    with pytest.raises(IndexError):
        bs.get(-1)
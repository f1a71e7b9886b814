import sys

import pytest

from ftlib.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"xxxxx")
    result = memset(buf, ord("A"), 3)
    assert result is buf
    assert buf[:3] == b"A" * 3
    assert buf[3:] == b"xx"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x100 + ord("z"), 4)
    assert buf == b"z" * 4


def test_memset_zero_count_changes_nothing():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == b"abc"


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"hello")
    assert bzero(buf, 4) is None
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"o"


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    src = b"abcdef"
    result = memcpy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src[:4]
    assert dest[4:] == b".."


def test_memcpy_both_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_one_none_rejected():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 1)


def test_memcpy_count_exceeds_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_memmove_same_offset_is_identity():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 5)
    assert buf == b"abcdef"


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 2, 0, 2)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None


def test_memchr_uses_low_byte():
    data = b"hello"
    assert memchr(data, 0x100 + ord("e"), 5) == data.index(b"e")


def test_memcmp_equal_prefix():
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_members():
    assert calloc(0, 5) == bytearray()
    assert calloc(5, 0) == bytearray()


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(sys.maxsize, 2)
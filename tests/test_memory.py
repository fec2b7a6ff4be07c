import pytest

from cubparse.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_masks_value():
    buf = bytearray(4)
    memset(buf, 256 + ord("z"), 4)
    assert buf == bytearray(b"zzzz")


def test_memset_zero_length_is_noop():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == bytearray(b"abc")


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytearray(4)
    assert buf[4:] == bytearray(b"ef")


def test_calloc_zeroed_buffer():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_count_or_size():
    assert calloc(0, 5) == bytearray()
    assert calloc(5, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**31, 1)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_limited_to_n():
    assert memchr(b"hello", ord("o"), 3) is None


def test_memchr_masks_value():
    assert memchr(b"hello", 256 + ord("h"), 5) == 0


def test_memchr_not_found():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_difference_of_first_unequal_bytes():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_unsigned_comparison():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_ignores_bytes_past_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_too_long_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abc...")


def test_memcpy_same_object():
    buf = bytearray(b"abc")
    assert memcpy(buf, buf, 3) is buf
    assert buf == bytearray(b"abc")


def test_memcpy_too_long_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 4)
    assert result is dest
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ab" + b"abcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert result is view
    assert bytes(result) == b"cdefef"
    assert buf == bytearray(b"cdef" + b"ef")


def test_memmove_matches_memcpy_without_overlap():
    a = bytearray(5)
    b = bytearray(5)
    result = memmove(a, b"hello", 5)
    memcpy(b, b"hello", 5)
    assert result is a
    assert a == b == bytearray(b"hello")
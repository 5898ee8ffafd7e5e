import itertools

from rawbuf.region import Region
from rawbuf.search import (
    NOT_FOUND,
    compare,
    index_of_buffer,
    index_of_byte,
    last_index_of_buffer,
    last_index_of_byte,
)

HELLO = b"hello world"


def test_index_of_byte_lowest_and_highest():
    data = b"abracadabra"
    for value in set(data) | {ord("z")}:
        expected_first = data.find(bytes([value]))
        expected_last = data.rfind(bytes([value]))
        assert index_of_byte(data, value, 0, len(data)) == expected_first
        assert last_index_of_byte(data, value, 0, len(data)) == expected_last


def test_index_of_byte_respects_window():
    data = bytearray(b"abcabc")
    assert index_of_byte(data, ord("a"), 1, 5) == 3
    assert index_of_byte(data, ord("a"), 1, 2) == NOT_FOUND
    assert last_index_of_byte(data, ord("c"), 0, 5) == 2
    assert last_index_of_byte(data, ord("c"), 3, 100) == 5


def test_byte_value_is_masked():
    data = b"\x00\xff"
    assert index_of_byte(data, -1, 0, 2) == 1
    assert index_of_byte(data, 256, 0, 2) == 0


def test_offset_past_end_not_found():
    assert index_of_byte(HELLO, ord("h"), 11, 5) == NOT_FOUND
    assert last_index_of_byte(HELLO, ord("h"), 20, 5) == NOT_FOUND
    assert index_of_buffer(HELLO, b"h", 11, 5) == NOT_FOUND
    assert last_index_of_buffer(HELLO, b"h", 11, 5) == NOT_FOUND


def test_index_of_buffer_scenario():
    assert index_of_buffer(Region(HELLO), Region(b"world"), 0, 11) == 6


def test_index_of_buffer_window():
    data = b"abcabcabc"
    assert index_of_buffer(data, b"abc", 1, 8) == 3
    # the match must lie wholly inside the window
    assert index_of_buffer(data, b"abc", 1, 4) == NOT_FOUND
    assert index_of_buffer(data, b"cab", 0, 100) == 2


def test_index_of_buffer_needle_longer_than_window():
    assert index_of_buffer(HELLO, b"hello", 0, 4) == NOT_FOUND


def test_empty_needle_forward():
    assert index_of_buffer(HELLO, b"", 3, 5) == 3
    assert index_of_buffer(HELLO, b"", 11, 5) == 11
    assert index_of_buffer(HELLO, b"", 40, 5) == 11


def test_empty_needle_backward_matches_window_end():
    assert last_index_of_buffer(HELLO, b"", 3, 5) == 8
    assert last_index_of_buffer(HELLO, b"", 3, 100) == 11
    assert last_index_of_buffer(HELLO, b"", 0, 0) == 0


def test_last_index_of_buffer():
    data = b"abcabcabc"
    assert last_index_of_buffer(data, b"abc", 0, 9) == 6
    assert last_index_of_buffer(data, b"abc", 0, 8) == 3
    assert last_index_of_buffer(data, b"bca", 0, 9) == 4
    assert last_index_of_buffer(data, b"xyz", 0, 9) == NOT_FOUND


def test_search_on_memoryview_slice():
    view = memoryview(bytearray(b"__needle__"))[2:]
    assert index_of_buffer(view, b"needle", 0, len(view)) == 0
    assert last_index_of_byte(view, ord("_"), 0, len(view)) == 7


def test_absent_arguments():
    assert index_of_byte(None, 1, 0, 1) == NOT_FOUND
    assert last_index_of_byte(None, 1, 0, 1) == NOT_FOUND
    assert index_of_buffer(HELLO, None, 0, 11) == NOT_FOUND
    assert index_of_buffer(None, b"h", 0, 11) == NOT_FOUND
    assert last_index_of_buffer(None, b"", 0, 11) == NOT_FOUND


def test_compare_basic():
    assert compare(b"abc", 0, 3, b"abd", 0, 3) == -1
    assert compare(b"abd", 0, 3, b"abc", 0, 3) == 1
    assert compare(b"abc", 0, 3, b"abc", 0, 3) == 0


def test_compare_shorter_prefix_first():
    assert compare(b"ab", 0, 2, b"abc", 0, 3) == -1
    assert compare(b"abc", 0, 3, b"ab", 0, 2) == 1


def test_compare_windows_and_clamping():
    assert compare(b"xxabc", 2, 3, b"abc", 0, 3) == 0
    assert compare(b"abc", 0, 100, b"abc", 0, 3) == 0
    assert compare(b"abc", 5, 1, b"", 0, 0) == 0


def test_compare_antisymmetric():
    samples = [b"", b"a", b"ab", b"b", b"\x00", b"\xff", b"abc"]
    for a, b in itertools.product(samples, repeat=2):
        assert compare(a, 0, len(a), b, 0, len(b)) == -compare(b, 0, len(b), a, 0, len(a))
    for a in samples:
        assert compare(a, 0, len(a), a, 0, len(a)) == 0

from rawbuf.fill_engine import fill, fill_pattern
from rawbuf.region import Region


def test_fill_whole_region():
    region = bytearray(4)
    fill(region, 0x41, 0, 4)
    assert region == b"AAAA"


def test_fill_clamped_window():
    region = Region(10)
    fill(region, 0xFF, 8, 100)
    assert bytes(region) == b"\x00" * 8 + b"\xff\xff"


def test_fill_masks_value():
    region = bytearray(2)
    fill(region, 0x141, 0, 2)
    assert region == b"AA"
    fill(region, -1, 1, 1)
    assert region == b"A\xff"


def test_fill_past_end_is_noop():
    region = bytearray(b"abc")
    fill(region, 0, 3, 5)
    fill(None, 0, 0, 5)
    assert region == b"abc"


def test_fill_pattern_scenario():
    region = bytearray(5)
    fill_pattern(region, b"ab", 0, 5)
    assert region == b"ababa"


def test_fill_pattern_partial_last_copy():
    region = bytearray(9)
    fill_pattern(region, b"abc", 1, 7)
    assert region == b"\x00abcabca\x00"


def test_fill_pattern_longer_than_window():
    region = bytearray(3)
    fill_pattern(region, b"wxyz", 0, 3)
    assert region == b"wxy"


def test_fill_pattern_empty_or_absent_is_noop():
    region = bytearray(b"keep")
    fill_pattern(region, b"", 0, 4)
    fill_pattern(region, None, 0, 4)
    fill_pattern(None, b"x", 0, 4)
    assert region == b"keep"


def test_fill_pattern_aliasing_region():
    region = bytearray(b"ab....")
    fill_pattern(region, memoryview(region)[0:2], 0, 6)
    assert region == b"ababab"

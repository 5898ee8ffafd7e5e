import pytest

from rawbuf.utf8 import REPLACEMENT, decode_with_replacement, encode, is_valid, sequence_length

VALID_SAMPLES = [
    b"",
    b"plain ascii",
    "é".encode("utf-8"),
    "€uro".encode("utf-8"),
    "😀 emoji".encode("utf-8"),
    "\U0010ffff".encode("utf-8"),
    "\ud7ff".encode("utf-8"),
]


@pytest.mark.parametrize("data", VALID_SAMPLES)
def test_valid_sequences(data):
    assert is_valid(data)
    assert decode_with_replacement(data) == data.decode("utf-8")


@pytest.mark.parametrize(
    "data",
    [
        b"\x80",  # lone continuation
        b"\xc0\xaf",  # overlong lead
        b"\xc1\xbf",
        b"\xf5\x80\x80\x80",  # beyond U+10FFFF lead
        b"\xff",
        b"\xe0\x80\xaf",  # overlong 3-byte
        b"\xed\xa0\x80",  # surrogate D800
        b"\xf0\x80\x80\xaf",  # overlong 4-byte
        b"\xf4\x90\x80\x80",  # above U+10FFFF
        b"\xc3",  # truncated
        b"\xe2\x82",
        b"\xf0\x9f\x98",
        b"\xc3A",  # bad continuation
    ],
)
def test_invalid_sequences(data):
    assert not is_valid(data)


def test_sequence_length():
    data = "aé€😀".encode("utf-8")
    assert sequence_length(data, 0) == 1
    assert sequence_length(data, 1) == 2
    assert sequence_length(data, 3) == 3
    assert sequence_length(data, 6) == 4
    assert sequence_length(b"\x80", 0) == 0


def test_replacement_scenario():
    assert decode_with_replacement(bytes([0x41, 0xFF, 0x42])) == "A\ufffdB"


def test_single_invalid_byte_replaced_in_place():
    text = "h\u00e9llo w\u00f6rld \u20ac"
    for position in range(len(text) + 1):
        corrupted = text[:position].encode("utf-8") + b"\xff" + text[position:].encode("utf-8")
        assert decode_with_replacement(corrupted) == text[:position] + "\ufffd" + text[position:]


def test_fault_advances_one_byte():
    # truncated 3-byte sequence: the lead is replaced, the continuation too
    assert decode_with_replacement(b"\xe2\x82A") == "\ufffd\ufffdA"
    # surrogate encoding yields one replacement per byte
    assert decode_with_replacement(b"\xed\xa0\x80") == "\ufffd" * 3
    # a valid sequence right after a fault is kept
    assert decode_with_replacement(b"\xc3\xc3\xa9") == "\ufffdé"


def test_truncated_tail():
    assert decode_with_replacement(b"ok\xf0\x9f\x98") == "ok" + "\ufffd" * 3


def test_decode_accepts_views():
    region = bytearray(b"xx\xc3\xa9xx")
    assert decode_with_replacement(memoryview(region)[2:4]) == "é"
    assert decode_with_replacement(None) == ""


def test_encode():
    assert encode("héllo") == "héllo".encode("utf-8")
    assert encode("a\ud800b") == b"a" + REPLACEMENT + b"b"

from rawbuf.single_byte import decode_ascii, decode_latin1, encode_latin1


def test_latin1_maps_every_byte():
    data = bytes(range(256))
    text = decode_latin1(data)
    assert len(text) == 256
    assert [ord(char) for char in text] == list(range(256))


def test_latin1_high_bytes_become_two_utf8_bytes():
    assert decode_latin1(b"\xe9").encode("utf-8") == b"\xc3\xa9"
    assert decode_latin1(b"caf\xe9") == "café"


def test_ascii_replaces_high_bytes():
    assert decode_ascii(b"ab\x80c\xff") == "ab\ufffdc\ufffd"
    assert decode_ascii(b"\x7f") == "\x7f"


def test_ascii_does_not_stop_early():
    assert decode_ascii(b"\xff" * 3 + b"ok") == "\ufffd" * 3 + "ok"


def test_absent_input():
    assert decode_latin1(None) == ""
    assert decode_ascii(None) == ""


def test_encode_latin1():
    assert encode_latin1("café") == b"caf\xe9"
    assert encode_latin1("€") == b"\xac"

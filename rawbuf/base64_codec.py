# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Table-driven Base64 (RFC 4648, standard alphabet) encoder and lenient decoder.

The decoder never raises. It reads 4-character groups and:
  - stops at the first group whose 1st or 2nd character is invalid,
    returning what was decoded so far;
  - emits one byte for a group whose 3rd character is invalid, two bytes
    when only the 4th is invalid, then carries on with the next group.
`=` is just another invalid character, which is how padding ends a group.
"""

from __future__ import annotations

from .region import RegionLike, as_bytes

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = ord("=")
INVALID = 255


def _build_decode_table() -> bytes:
    table = bytearray([INVALID]) * 256
    for value, char in enumerate(ALPHABET):
        table[char] = value
    return bytes(table)


DECODE_TABLE = _build_decode_table()


def _as_input(text: str | RegionLike) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return as_bytes(text)


def encode(data: RegionLike) -> str:
    """Encode bytes as padded Base64 text of length 4 * ceil(n / 3)."""
    raw = as_bytes(data)
    out = bytearray()
    full = len(raw) - len(raw) % 3

    for i in range(0, full, 3):
        triple = (raw[i] << 16) | (raw[i + 1] << 8) | raw[i + 2]
        out.append(ALPHABET[(triple >> 18) & 0x3F])
        out.append(ALPHABET[(triple >> 12) & 0x3F])
        out.append(ALPHABET[(triple >> 6) & 0x3F])
        out.append(ALPHABET[triple & 0x3F])

    remainder = len(raw) - full
    if remainder:
        second = raw[full + 1] if remainder == 2 else 0
        triple = (raw[full] << 16) | (second << 8)
        out.append(ALPHABET[(triple >> 18) & 0x3F])
        out.append(ALPHABET[(triple >> 12) & 0x3F])
        if remainder == 1:
            out += b"=="
        else:
            out.append(ALPHABET[(triple >> 6) & 0x3F])
            out.append(PAD)

    return out.decode("ascii")


def _padding(raw: bytes) -> int:
    return sum(1 for char in raw[-2:] if char == PAD)


def expected_length(raw: bytes) -> int:
    """Decoded size of well-formed input, used to size output up front."""
    if not raw:
        return 0
    return max(0, (len(raw) * 3) // 4 - _padding(raw))


def byte_length(text: str | RegionLike) -> int:
    """Bytes `text` decodes to, without decoding it."""
    return expected_length(_as_input(text))


def decode(text: str | RegionLike) -> bytes:
    """Decode Base64 text, truncating at the first unusable group."""
    raw = _as_input(text)
    out = bytearray()

    for i in range(0, len(raw), 4):
        group = raw[i : i + 4]
        a, b, c, d = (DECODE_TABLE[char] for char in group.ljust(4, b"="))
        if a == INVALID or b == INVALID:
            break
        out.append(((a << 2) | (b >> 4)) & 0xFF)
        if c == INVALID:
            continue
        out.append(((b << 4) | (c >> 2)) & 0xFF)
        if d == INVALID:
            continue
        out.append(((c << 6) | d) & 0xFF)

    return bytes(out)

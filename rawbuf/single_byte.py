# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Latin-1 (binary) and ASCII codecs, one byte per character."""

from __future__ import annotations

from .region import RegionLike, as_view
from .utf8 import REPLACEMENT


def decode_latin1(data: RegionLike) -> str:
    """Map each byte to the code point of the same value."""
    view = as_view(data)
    if view is None:
        return ""
    out = bytearray()
    for byte in view:
        if byte <= 0x7F:
            out.append(byte)
        else:
            out.append(0xC0 | (byte >> 6))
            out.append(0x80 | (byte & 0x3F))
    return out.decode("utf-8")


def decode_ascii(data: RegionLike) -> str:
    """Pass 7-bit bytes through; every high byte becomes U+FFFD."""
    view = as_view(data)
    if view is None:
        return ""
    out = bytearray()
    for byte in view:
        if byte <= 0x7F:
            out.append(byte)
        else:
            out += REPLACEMENT
    return out.decode("utf-8")


def encode_latin1(text: str) -> bytes:
    """One byte per character; code points above 0xFF keep their low byte."""
    return bytes(ord(char) & 0xFF for char in text)

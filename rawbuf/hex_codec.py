# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Lowercase hex encoding and lenient pairwise hex decoding."""

from __future__ import annotations

import binascii

from .region import RegionLike, as_bytes

HEX_DIGITS = "0123456789abcdefABCDEF"


def encode(data: RegionLike) -> str:
    """Two lowercase digits per byte, high nibble first."""
    return binascii.hexlify(as_bytes(data)).decode("ascii")


def parse_pair(pair: str) -> int:
    """Byte value of `pair` read the way C `strtol(pair, NULL, 16)` reads it.

    Leading whitespace is skipped and one `+` or `-` sign is honored. Only the
    leading hex digits count: "4g" reads as 0x04, "g4" as 0x00, " f" as 0x0f,
    and "-1" wraps to 0xff.
    """
    text = pair.lstrip(" \t\n\v\f\r")
    negative = text[:1] == "-"
    if text[:1] in ("+", "-"):
        text = text[1:]
    digits = ""
    for char in text:
        if char not in HEX_DIGITS:
            break
        digits += char
    value = int(digits, 16) if digits else 0
    return (-value if negative else value) & 0xFF


def decode(text: str) -> bytes:
    """Decode `text` two characters at a time; an odd trailing character is ignored."""
    return bytes(parse_pair(text[i : i + 2]) for i in range(0, len(text) - 1, 2))


def byte_length(text: str) -> int:
    return len(text) // 2

# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Encoding names and the dispatcher behind decode / write / byte_length.

Names are matched exactly (case-sensitive). Unknown names are not an error:
decode and write fall back to UTF-8 and byte_length falls back to the raw
UTF-8 length, matching the platform buffer this package mirrors.
"""

from __future__ import annotations

import logging
from enum import Enum

from . import base64_codec, hex_codec, single_byte, utf8
from .region import RegionLike, as_view
from .window import Window

logger = logging.getLogger(__name__)


class Encoding(str, Enum):
    """Supported text encodings."""

    UTF8 = "utf8"
    LATIN1 = "latin1"
    BINARY = "binary"
    ASCII = "ascii"
    HEX = "hex"
    BASE64 = "base64"


_ALIASES = {
    "utf8": Encoding.UTF8,
    "utf-8": Encoding.UTF8,
    "latin1": Encoding.LATIN1,
    "binary": Encoding.LATIN1,
    "ascii": Encoding.ASCII,
    "hex": Encoding.HEX,
    "base64": Encoding.BASE64,
}


def resolve_encoding(name: str | Encoding) -> Encoding | None:
    """Canonical Encoding for `name` (binary resolves to latin1), or None."""
    if isinstance(name, Encoding):
        return Encoding.LATIN1 if name is Encoding.BINARY else name
    return _ALIASES.get(name)


def is_encoding(name: str | Encoding) -> bool:
    return resolve_encoding(name) is not None


def _resolve_or_utf8(name: str | Encoding, operation: str) -> Encoding:
    encoding = resolve_encoding(name)
    if encoding is None:
        logger.warning("unknown encoding %r for %s; falling back to utf8", name, operation)
        return Encoding.UTF8
    return encoding


def encode_text(text: str, encoding: str | Encoding) -> bytes:
    """Bytes `text` occupies under `encoding` (unknown names encode as UTF-8)."""
    resolved = _resolve_or_utf8(encoding, "write")
    if resolved is Encoding.HEX:
        return hex_codec.decode(text)
    if resolved is Encoding.BASE64:
        return base64_codec.decode(text)
    if resolved in (Encoding.LATIN1, Encoding.ASCII):
        return single_byte.encode_latin1(text)
    return utf8.encode(text)


def byte_length(text: str, encoding: str | Encoding = Encoding.UTF8) -> int:
    """Bytes `text` would occupy once encoded, computed without encoding it where possible."""
    resolved = resolve_encoding(encoding)
    if resolved is Encoding.HEX:
        return hex_codec.byte_length(text)
    if resolved is Encoding.BASE64:
        return base64_codec.byte_length(text)
    if resolved in (Encoding.LATIN1, Encoding.ASCII):
        return len(text)
    return len(utf8.encode(text))


def write(
    region: RegionLike,
    text: str,
    offset: int,
    length: int,
    encoding: str | Encoding = Encoding.UTF8,
) -> int:
    """Encode `text` into the window at `offset`; return the number of bytes written."""
    view = as_view(region)
    if view is None:
        return 0
    window = Window.clamp(len(view), offset, length)
    if window.empty:
        return 0
    encoded = encode_text(text, encoding)
    count = min(window.length, len(encoded))
    view[window.start : window.start + count] = encoded[:count]
    return count


def decode(
    region: RegionLike,
    offset: int,
    length: int,
    encoding: str | Encoding = Encoding.UTF8,
) -> str:
    """Decode the window `(offset, length)` of `region` as text."""
    view = as_view(region)
    if view is None:
        return ""
    window = Window.clamp(len(view), offset, length)
    if window.empty:
        return ""
    chunk = view[window.as_slice()]

    resolved = _resolve_or_utf8(encoding, "decode")
    if resolved is Encoding.LATIN1:
        return single_byte.decode_latin1(chunk)
    if resolved is Encoding.ASCII:
        return single_byte.decode_ascii(chunk)
    if resolved is Encoding.HEX:
        return hex_codec.encode(chunk)
    if resolved is Encoding.BASE64:
        return base64_codec.encode(chunk)
    return utf8.decode_with_replacement(chunk)

# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""UTF-8 validation and decoding with U+FFFD substitution.

Decoding is two-pass. `is_valid` scans once; already-valid input is handed
straight to the codec. Only malformed input takes the byte-by-byte repair
path, where every fault (bad lead byte, bad continuation, overlong form,
surrogate, truncated tail) becomes exactly one U+FFFD and the scan resumes
one byte after the fault.
"""

from __future__ import annotations

import logging

from .region import RegionLike, as_view

logger = logging.getLogger(__name__)

REPLACEMENT = b"\xef\xbf\xbd"
REPLACEMENT_CHAR = "\ufffd"


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def sequence_length(data: memoryview | bytes, index: int) -> int:
    """Length of the well-formed sequence starting at `index`, or 0 if malformed."""
    size = len(data)
    lead = data[index]

    if lead <= 0x7F:
        return 1
    if lead < 0xC2 or lead > 0xF4:
        return 0

    if lead <= 0xDF:
        if index + 1 >= size or not _is_continuation(data[index + 1]):
            return 0
        return 2

    if lead <= 0xEF:
        if index + 2 >= size:
            return 0
        second, third = data[index + 1], data[index + 2]
        if not (_is_continuation(second) and _is_continuation(third)):
            return 0
        if lead == 0xE0 and second < 0xA0:  # overlong
            return 0
        if lead == 0xED and second >= 0xA0:  # UTF-16 surrogates
            return 0
        return 3

    if index + 3 >= size:
        return 0
    second, third, fourth = data[index + 1], data[index + 2], data[index + 3]
    if not (_is_continuation(second) and _is_continuation(third) and _is_continuation(fourth)):
        return 0
    if lead == 0xF0 and second < 0x90:  # overlong
        return 0
    if lead == 0xF4 and second > 0x8F:  # above U+10FFFF
        return 0
    return 4


def is_valid(data: RegionLike) -> bool:
    """True when every byte of `data` belongs to a well-formed UTF-8 sequence."""
    view = as_view(data)
    if view is None:
        return True
    index = 0
    while index < len(view):
        step = sequence_length(view, index)
        if not step:
            return False
        index += step
    return True


def _repair(view: memoryview) -> bytes:
    out = bytearray()
    index = 0
    while index < len(view):
        step = sequence_length(view, index)
        if step:
            out += view[index : index + step]
            index += step
        else:
            out += REPLACEMENT
            index += 1
    return bytes(out)


def decode_with_replacement(data: RegionLike) -> str:
    """Decode `data` as UTF-8, substituting U+FFFD for each malformed unit."""
    view = as_view(data)
    if view is None:
        return ""
    if is_valid(view):
        return str(view, "utf-8")
    logger.debug("repairing malformed UTF-8 in %d-byte range", len(view))
    return _repair(view).decode("utf-8")


def encode(text: str) -> bytes:
    """UTF-8 bytes of `text`; lone surrogates are written as U+FFFD."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        cleaned = "".join(
            REPLACEMENT_CHAR if 0xD800 <= ord(char) <= 0xDFFF else char for char in text
        )
        return cleaned.encode("utf-8")

# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Region allocation, zeroed or with unspecified contents."""

from __future__ import annotations

import logging

from .constants import MAX_LENGTH
from .encoding import Encoding, byte_length, write
from .region import InvalidArgumentError, Region

logger = logging.getLogger(__name__)


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgumentError(f"size must be an integer, got {size!r}")
    if size < 0:
        raise InvalidArgumentError(f"size must be non-negative, got {size}")
    if size > MAX_LENGTH:
        raise InvalidArgumentError(f"size {size} exceeds the maximum of {MAX_LENGTH}")
    return size


def allocate_zeroed(size: int) -> Region:
    """New region of exactly `size` bytes, all zero."""
    return Region(_check_size(size))


def allocate_uninitialized(size: int) -> Region:
    """New region of exactly `size` bytes whose contents are unspecified.

    Callers must write before reading. The interpreter cannot hand out
    uninitialized memory, so today the bytes happen to be zero; do not rely on it.
    """
    return Region(bytearray(_check_size(size)))


def allocate(size: int, zeroed: bool = True) -> Region:
    logger.debug("allocating %s region of %s bytes", "zeroed" if zeroed else "raw", size)
    if zeroed:
        return allocate_zeroed(size)
    return allocate_uninitialized(size)


def allocate_for_text(text: str, encoding: str | Encoding = Encoding.UTF8) -> Region:
    """Region sized by `byte_length` and holding `text` encoded under `encoding`."""
    region = allocate_uninitialized(byte_length(text, encoding))
    written = write(region, text, 0, region.size(), encoding)
    if written < region.size():
        # lenient base64/hex decoding can come up short of the computed size
        region.data()[written:] = bytes(region.size() - written)
    return region

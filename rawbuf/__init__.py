# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

"""Byte regions with Node-style encode, decode, search, compare and fill."""

from .allocator import allocate, allocate_for_text, allocate_uninitialized, allocate_zeroed
from .buffer import Buffer
from .constants import INSPECT_MAX_BYTES, MAX_LENGTH, MAX_STRING_LENGTH, constants
from .encoding import Encoding, byte_length, decode, is_encoding, write
from .fill_engine import fill, fill_pattern
from .region import InvalidArgumentError, Region
from .search import (
    compare,
    index_of_buffer,
    index_of_byte,
    last_index_of_buffer,
    last_index_of_byte,
)
from .utils import atob, btoa, is_ascii, is_utf8, transcode
from .window import Window

__all__ = [
    "Buffer",
    "Encoding",
    "INSPECT_MAX_BYTES",
    "InvalidArgumentError",
    "MAX_LENGTH",
    "MAX_STRING_LENGTH",
    "Region",
    "Window",
    "allocate",
    "allocate_for_text",
    "allocate_uninitialized",
    "allocate_zeroed",
    "atob",
    "btoa",
    "byte_length",
    "compare",
    "constants",
    "decode",
    "fill",
    "fill_pattern",
    "index_of_buffer",
    "index_of_byte",
    "is_ascii",
    "is_encoding",
    "is_utf8",
    "last_index_of_buffer",
    "last_index_of_byte",
    "transcode",
    "write",
]

# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Module-level helpers built on Buffer (atob/btoa, validity checks, transcode)."""

from __future__ import annotations

from typing import Any

from . import utf8
from .buffer import Buffer
from .region import InvalidArgumentError, as_view


def atob(data: str) -> str:
    """Decode Base64 `data` into a latin1 ("binary") string."""
    return Buffer.from_string(data, "base64").to_string("latin1")


def btoa(data: str) -> str:
    """Encode a latin1 ("binary") string as Base64."""
    return Buffer.from_string(data, "latin1").to_string("base64")


def is_ascii(data: Any) -> bool:
    view = as_view(data)
    if view is None:
        return True
    return all(byte <= 0x7F for byte in view)


def is_utf8(data: Any) -> bool:
    return utf8.is_valid(data)


def transcode(source: Any, from_encoding: str, to_encoding: str) -> Buffer:
    """Re-encode `source` bytes from one encoding to another.

    Raises:
        InvalidArgumentError: If either encoding is not supported.
    """
    if not Buffer.is_encoding(from_encoding) or not Buffer.is_encoding(to_encoding):
        raise InvalidArgumentError("Invalid encoding")
    buf = source if isinstance(source, Buffer) else Buffer.from_bytes(source)
    return Buffer.from_string(buf.to_string(from_encoding), to_encoding)

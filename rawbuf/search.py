# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Forward/backward byte and needle search plus lexicographic compare.

Every search takes a window `(offset, length)` that is clamped to the region
and returns an absolute index into the region, or -1. A missing region or
needle is "not found", never an error.

Empty needles are defined rather than searched for:
  - forward search matches at `offset` (or at the end if `offset` is past it);
  - backward search matches at the end of the window, `offset + length`
    clamped to the region size.
"""

from __future__ import annotations

from .region import RegionLike, as_view
from .window import Window

NOT_FOUND = -1


def _haystack(view: memoryview) -> bytes | bytearray:
    # bytes/bytearray support find/rfind with bounds; other exporters are copied
    source = view.obj
    if isinstance(source, (bytes, bytearray)) and len(source) == view.nbytes:
        return source
    return view.tobytes()


def index_of_byte(region: RegionLike | None, value: int, offset: int, length: int) -> int:
    """First index of `value & 0xFF` within the window, or -1."""
    view = as_view(region)
    if view is None:
        return NOT_FOUND
    window = Window.clamp(len(view), offset, length)
    if window.empty:
        return NOT_FOUND
    return _haystack(view).find(int(value) & 0xFF, window.start, window.end)


def last_index_of_byte(region: RegionLike | None, value: int, offset: int, length: int) -> int:
    """Highest index of `value & 0xFF` within the window, or -1."""
    view = as_view(region)
    if view is None:
        return NOT_FOUND
    window = Window.clamp(len(view), offset, length)
    if window.empty:
        return NOT_FOUND
    return _haystack(view).rfind(int(value) & 0xFF, window.start, window.end)


def index_of_buffer(
    region: RegionLike | None, needle: RegionLike | None, offset: int, length: int
) -> int:
    """First index at which `needle` occurs wholly inside the window, or -1."""
    view = as_view(region)
    pattern = as_view(needle)
    if view is None or pattern is None:
        return NOT_FOUND
    size = len(view)
    if len(pattern) == 0:
        return min(max(0, int(offset)), size)

    window = Window.clamp(size, offset, length)
    if window.empty or len(pattern) > window.length:
        return NOT_FOUND
    return _haystack(view).find(pattern.tobytes(), window.start, window.end)


def last_index_of_buffer(
    region: RegionLike | None, needle: RegionLike | None, offset: int, length: int
) -> int:
    """Start of the last occurrence of `needle` wholly inside the window, or -1."""
    view = as_view(region)
    pattern = as_view(needle)
    if view is None or pattern is None:
        return NOT_FOUND
    size = len(view)
    if len(pattern) == 0:
        return min(max(0, int(offset)) + max(0, int(length)), size)

    window = Window.clamp(size, offset, length)
    if window.empty or len(pattern) > window.length:
        return NOT_FOUND
    return _haystack(view).rfind(pattern.tobytes(), window.start, window.end)


def _window_bytes(region: RegionLike | None, offset: int, length: int) -> bytes:
    view = as_view(region)
    if view is None:
        return b""
    return view[Window.clamp(len(view), offset, length).as_slice()].tobytes()


def compare(
    a: RegionLike,
    a_offset: int,
    a_length: int,
    b: RegionLike,
    b_offset: int,
    b_length: int,
) -> int:
    """Order two windows byte-wise: -1, 0 or 1, shorter first on a shared prefix."""
    left = _window_bytes(a, a_offset, a_length)
    right = _window_bytes(b, b_offset, b_length)
    # bytes ordering is lexicographic with the shorter prefix sorting first
    return (left > right) - (left < right)

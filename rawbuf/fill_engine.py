# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Single-byte and repeating-pattern fills over a clamped window."""

from __future__ import annotations

from .region import RegionLike, as_view
from .window import Window


def fill(region: RegionLike | None, value: int, offset: int, length: int) -> None:
    """Set every byte of the window to `value & 0xFF`."""
    view = as_view(region)
    if view is None:
        return
    window = Window.clamp(len(view), offset, length)
    if window.empty:
        return
    view[window.as_slice()] = bytes([int(value) & 0xFF]) * window.length


def fill_pattern(
    region: RegionLike | None, pattern: RegionLike | None, offset: int, length: int
) -> None:
    """Repeat `pattern` across the window; the last copy may be a prefix.

    An empty or missing pattern leaves the region untouched.
    """
    view = as_view(region)
    source = as_view(pattern)
    if view is None or source is None or len(source) == 0:
        return
    window = Window.clamp(len(view), offset, length)
    # snapshot so a pattern aliasing the region is not read mid-fill
    chunk = source.tobytes()

    filled = 0
    while filled < window.length:
        count = min(len(chunk), window.length - filled)
        start = window.start + filled
        view[start : start + count] = chunk[:count]
        filled += count

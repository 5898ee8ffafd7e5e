# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Clamped (start, length) windows into a region.

Every search, fill, decode and write call derives its working range through
`Window.clamp`, so the bounds rules live in one place:
  - negative offsets or lengths count as 0;
  - an offset at or past the end yields an empty window positioned at `size`;
  - a length that would overrun the region shrinks to fit.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Window:
    """Sub-range `[start, start + length)` of a region of known size."""

    start: int
    length: int

    @classmethod
    def clamp(cls, size: int, offset: int, length: int) -> Window:
        start = max(0, int(offset))
        count = max(0, int(length))
        if start >= size:
            return cls(size, 0)
        return cls(start, min(count, size - start))

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def empty(self) -> bool:
        return self.length == 0

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

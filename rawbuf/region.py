"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""
from __future__ import annotations

"""Fixed-capacity byte region plus helpers to view caller-supplied bytes."""

from typing import Union


class InvalidArgumentError(ValueError):
    """Raised for the few requests that cannot be satisfied by clamping."""


class Region:
    """Mutable byte span whose capacity is fixed at construction."""

    def __init__(self, data: bytearray | bytes | int = 0):
        if isinstance(data, int):
            if data < 0:
                raise InvalidArgumentError(f"region size must be non-negative, got {data}")
            data = bytearray(data)
        elif not isinstance(data, bytearray):
            data = bytearray(data)
        self._data = data

    def data(self) -> memoryview:
        """Writable view over the whole region."""
        return memoryview(self._data)

    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        # slice assignment must not resize the region
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self._data))
            if step == 1 and len(value) != max(0, stop - start):
                raise InvalidArgumentError("slice assignment cannot resize a region")
        self._data[index] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Region):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Region(size={len(self._data)})"


RegionLike = Union[Region, bytearray, bytes, memoryview]


def as_view(region: RegionLike | None) -> memoryview | None:
    """Return a flat unsigned-byte view over `region`, or None when absent."""
    if region is None:
        return None
    if isinstance(region, Region):
        return region.data()
    if hasattr(region, "data") and callable(region.data):
        # Buffer views expose their window the same way
        return as_view(region.data())
    view = memoryview(region)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def as_bytes(region: RegionLike | None) -> bytes:
    """Snapshot of `region` as immutable bytes (empty when absent)."""
    view = as_view(region)
    return b"" if view is None else view.tobytes()

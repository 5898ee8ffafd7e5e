"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""
from __future__ import annotations

"""Node-style Buffer: a view (byte offset + length) onto a shared Region.

All byte work is delegated to the core modules through `data()`, a memoryview
over exactly this view's bytes, so the core's clamping keeps every call inside
the view even when the underlying region is larger.
"""

import math
import numbers
import struct
from typing import Any, Dict, Iterable, Iterator, List, Optional

from . import encoding as codec
from . import fill_engine
from . import search
from .allocator import allocate, allocate_for_text
from .constants import DEFAULT_ENCODING, INSPECT_MAX_BYTES, MAX_STRING_LENGTH
from .encoding import Encoding
from .region import InvalidArgumentError, Region, RegionLike, as_view


def _normalize_encoding(name: str | Encoding | None) -> str | Encoding:
    if name is None:
        return DEFAULT_ENCODING
    if isinstance(name, Encoding):
        return name
    lowered = name.lower()
    if not codec.is_encoding(lowered):
        raise InvalidArgumentError(f"Unknown encoding: {name}")
    return lowered


def _clamp_index(index: int, length: int) -> int:
    """Resolve a possibly negative index against `length`, clamped to [0, length]."""
    if index < 0:
        index += length
    return min(max(index, 0), length)


def _check_int_width(byte_length: int) -> None:
    if not 1 <= byte_length <= 6:
        raise InvalidArgumentError(f'"byteLength" out of range: {byte_length}')


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _byte_value(value: Any) -> int:
    """Low byte of a numeric search or fill value; NaN and infinities read as 0."""
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value) & 0xFF


class Buffer:
    """Fixed-size byte view sharing memory with its Region."""

    def __init__(self, region: Region | bytearray | int = 0, byte_offset: int = 0, length: int | None = None):
        if not isinstance(region, Region):
            region = Region(region)
        size = region.size()
        if not 0 <= byte_offset <= size:
            raise InvalidArgumentError(f"byte offset {byte_offset} is outside a {size}-byte region")
        if length is None:
            length = size - byte_offset
        if length < 0 or byte_offset + length > size:
            raise InvalidArgumentError(f"length {length} overruns the region")
        self._region = region
        self._offset = byte_offset
        self._length = length

    # Construction

    @classmethod
    def alloc(cls, size: int, fill: Any = None, encoding: str | None = DEFAULT_ENCODING) -> Buffer:
        buf = cls(allocate(size))
        if fill is not None:
            buf.fill(fill, encoding=encoding)
        return buf

    @classmethod
    def alloc_unsafe(cls, size: int) -> Buffer:
        """Buffer whose contents are unspecified until written."""
        return cls(allocate(size, zeroed=False))

    @classmethod
    def alloc_unsafe_slow(cls, size: int) -> Buffer:
        return cls.alloc_unsafe(size)

    @classmethod
    def from_string(cls, text: str, encoding: str | None = DEFAULT_ENCODING) -> Buffer:
        if len(text) > MAX_STRING_LENGTH:
            raise InvalidArgumentError("string exceeds the maximum supported length")
        return cls(allocate_for_text(text, _normalize_encoding(encoding)))

    @classmethod
    def from_bytes(cls, data: RegionLike | Iterable[int]) -> Buffer:
        """Copy `data` into a new Buffer."""
        if isinstance(data, Buffer):
            return cls(Region(bytes(data)))
        if isinstance(data, (bytes, bytearray, memoryview, Region)):
            return cls(Region(as_view(data).tobytes()))
        return cls(Region(bytes(int(value) & 0xFF for value in data)))

    @classmethod
    def copy_bytes_from(cls, view: RegionLike, offset: int = 0, length: int | None = None) -> Buffer:
        """Copy `length` bytes of `view` starting at byte `offset` into a new Buffer."""
        source = as_view(view)
        if length is None:
            length = len(source) - offset
        if offset < 0 or length < 0 or offset + length > len(source):
            raise InvalidArgumentError("offset or length out of bounds")
        return cls(Region(source[offset : offset + length].tobytes()))

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> Buffer:
        """Rebuild a Buffer from its `to_json` form."""
        if not isinstance(obj, dict) or obj.get("type") != "Buffer" or not isinstance(obj.get("data"), list):
            raise TypeError('expected {"type": "Buffer", "data": [...]}')
        return cls.from_bytes(obj["data"])

    @classmethod
    def concat(cls, buffers: Iterable[Any], total_length: int | None = None) -> Buffer:
        """Join `buffers`; truncate or zero-pad to `total_length` when given."""
        chunks = [bytes(item) if isinstance(item, Buffer) else as_view(item).tobytes() for item in buffers]
        if total_length is None:
            total_length = sum(len(chunk) for chunk in chunks)
        result = cls.alloc(total_length)
        view = result.data()
        position = 0
        for chunk in chunks:
            if position >= total_length:
                break
            count = min(len(chunk), total_length - position)
            view[position : position + count] = chunk[:count]
            position += count
        return result

    # Class-level helpers

    @staticmethod
    def byte_length(value: Any, encoding: str | None = DEFAULT_ENCODING) -> int:
        if isinstance(value, str):
            return codec.byte_length(value, _normalize_encoding(encoding))
        return len(as_view(value))

    @staticmethod
    def is_encoding(name: Any) -> bool:
        return isinstance(name, str) and codec.is_encoding(name.lower())

    @staticmethod
    def is_buffer(obj: Any) -> bool:
        return isinstance(obj, Buffer)

    @staticmethod
    def compare_buffers(a: Any, b: Any) -> int:
        """Order two byte sequences: -1, 0 or 1."""
        left, right = as_view(a), as_view(b)
        return search.compare(left, 0, len(left), right, 0, len(right))

    # Views

    @property
    def region(self) -> Region:
        return self._region

    @property
    def byte_offset(self) -> int:
        return self._offset

    def data(self) -> memoryview:
        """Writable memoryview over exactly this buffer's bytes."""
        return self._region.data()[self._offset : self._offset + self._length]

    def subarray(self, start: int = 0, end: int | None = None) -> Buffer:
        """View of `[start, end)` sharing memory with this buffer."""
        begin = _clamp_index(start, self._length)
        stop = self._length if end is None else _clamp_index(end, self._length)
        return Buffer(self._region, self._offset + begin, max(0, stop - begin))

    def slice(self, start: int = 0, end: int | None = None) -> Buffer:
        """Alias of `subarray`: the result shares memory."""
        return self.subarray(start, end)

    # Codec

    def to_string(self, encoding: str | None = DEFAULT_ENCODING, start: int = 0, end: int | None = None) -> str:
        resolved = _normalize_encoding(encoding)
        start = max(0, start)
        end = self._length if end is None else min(end, self._length)
        if start >= end:
            return ""
        if end - start > MAX_STRING_LENGTH:
            raise InvalidArgumentError("cannot create a string that long")
        return codec.decode(self.data(), start, end - start, resolved)

    def write(self, text: str, offset: int = 0, length: int | None = None, encoding: str | None = DEFAULT_ENCODING) -> int:
        """Encode `text` at `offset`; return the number of bytes written."""
        if length is None:
            length = self._length - offset
        return codec.write(self.data(), text, offset, length, _normalize_encoding(encoding))

    # Search

    def _needle(self, value: Any, encoding: str | None) -> memoryview | None:
        if _is_number(value):
            return None
        if isinstance(value, str):
            return Buffer.from_string(value, encoding).data()
        if isinstance(value, (Buffer, Region, bytes, bytearray, memoryview)):
            return as_view(value)
        raise TypeError('"value" argument must be string, number or Buffer')

    def index_of(self, value: Any, byte_offset: int = 0, encoding: str | None = DEFAULT_ENCODING) -> int:
        needle = self._needle(value, encoding)
        start = _clamp_index(byte_offset, self._length)
        remaining = self._length - start
        if needle is None:
            return search.index_of_byte(self.data(), _byte_value(value), start, remaining)
        return search.index_of_buffer(self.data(), needle, start, remaining)

    def last_index_of(self, value: Any, byte_offset: int | None = None, encoding: str | None = DEFAULT_ENCODING) -> int:
        """Last match starting at or before `byte_offset` (default: the end)."""
        needle = self._needle(value, encoding)
        if byte_offset is None or byte_offset > self._length:
            byte_offset = self._length
        elif byte_offset < 0:
            byte_offset += self._length
            if byte_offset < 0:
                return search.NOT_FOUND
        if needle is None:
            return search.last_index_of_byte(self.data(), _byte_value(value), 0, byte_offset + 1)
        return search.last_index_of_buffer(self.data(), needle, 0, byte_offset + len(needle))

    def includes(self, value: Any, byte_offset: int = 0, encoding: str | None = DEFAULT_ENCODING) -> bool:
        return self.index_of(value, byte_offset, encoding) != search.NOT_FOUND

    # Mutation

    def fill(self, value: Any, offset: Any = 0, end: Any = None, encoding: str | None = DEFAULT_ENCODING) -> Buffer:
        """Fill `[offset, end)` with a byte, a string or a byte pattern."""
        if isinstance(offset, str):
            encoding, offset, end = offset, 0, self._length
        elif isinstance(end, str):
            encoding, end = end, self._length
        if end is None:
            end = self._length
        offset = max(0, offset)
        end = min(end, self._length)
        if end <= offset:
            return self

        if _is_number(value):
            fill_engine.fill(self.data(), _byte_value(value), offset, end - offset)
            return self
        if isinstance(value, str):
            pattern = Buffer.from_string(value, encoding).data()
        elif isinstance(value, (Buffer, Region, bytes, bytearray, memoryview)):
            pattern = as_view(value)
        else:
            raise TypeError('"value" argument must be string, number or Buffer')
        fill_engine.fill_pattern(self.data(), pattern, offset, end - offset)
        return self

    def copy(self, target: Any, target_start: int = 0, source_start: int = 0, source_end: int | None = None) -> int:
        """Copy bytes into `target`; return how many were copied."""
        if target is None:
            raise TypeError("argument must be a Buffer")
        destination = as_view(target)
        if source_end is None:
            source_end = self._length
        source_start = max(0, source_start)
        source_end = min(source_end, self._length)
        target_start = max(0, target_start)
        if target_start >= len(destination) or source_start >= source_end:
            return 0
        count = min(source_end - source_start, len(destination) - target_start)
        chunk = self.data()[source_start : source_start + count].tobytes()
        destination[target_start : target_start + count] = chunk
        return count

    def _swap(self, width: int) -> Buffer:
        if self._length % width:
            raise InvalidArgumentError(f"Buffer size must be a multiple of {width * 8}-bits")
        view = self.data()
        for i in range(0, self._length, width):
            view[i : i + width] = view[i : i + width].tobytes()[::-1]
        return self

    def swap16(self) -> Buffer:
        return self._swap(2)

    def swap32(self) -> Buffer:
        return self._swap(4)

    def swap64(self) -> Buffer:
        return self._swap(8)

    # Integers of 1 to 6 bytes

    def _fixed_slice(self, offset: int, size: int) -> memoryview:
        if offset < 0 or offset + size > self._length:
            raise InvalidArgumentError(f"offset {offset} is out of range for {size} bytes")
        return self.data()[offset : offset + size]

    def _int_slice(self, offset: int, byte_length: int) -> memoryview:
        _check_int_width(byte_length)
        return self._fixed_slice(offset, byte_length)

    def read_uint_le(self, offset: int, byte_length: int) -> int:
        return int.from_bytes(self._int_slice(offset, byte_length), "little")

    def read_uint_be(self, offset: int, byte_length: int) -> int:
        return int.from_bytes(self._int_slice(offset, byte_length), "big")

    def read_int_le(self, offset: int, byte_length: int) -> int:
        return int.from_bytes(self._int_slice(offset, byte_length), "little", signed=True)

    def read_int_be(self, offset: int, byte_length: int) -> int:
        return int.from_bytes(self._int_slice(offset, byte_length), "big", signed=True)

    @staticmethod
    def _store_int(target: memoryview, value: int, byteorder: str, signed: bool) -> None:
        try:
            target[:] = int(value).to_bytes(len(target), byteorder, signed=signed)
        except OverflowError as error:
            raise InvalidArgumentError(f"value {value} does not fit in {len(target)} bytes") from error

    def _write_int(self, value: int, offset: int, byte_length: int, byteorder: str, signed: bool) -> int:
        self._store_int(self._int_slice(offset, byte_length), value, byteorder, signed)
        return offset + byte_length

    def write_uint_le(self, value: int, offset: int, byte_length: int) -> int:
        return self._write_int(value, offset, byte_length, "little", signed=False)

    def write_uint_be(self, value: int, offset: int, byte_length: int) -> int:
        return self._write_int(value, offset, byte_length, "big", signed=False)

    def write_int_le(self, value: int, offset: int, byte_length: int) -> int:
        return self._write_int(value, offset, byte_length, "little", signed=True)

    def write_int_be(self, value: int, offset: int, byte_length: int) -> int:
        return self._write_int(value, offset, byte_length, "big", signed=True)

    # 64-bit integers

    def read_big_int64_le(self, offset: int = 0) -> int:
        return int.from_bytes(self._fixed_slice(offset, 8), "little", signed=True)

    def read_big_int64_be(self, offset: int = 0) -> int:
        return int.from_bytes(self._fixed_slice(offset, 8), "big", signed=True)

    def read_big_uint64_le(self, offset: int = 0) -> int:
        return int.from_bytes(self._fixed_slice(offset, 8), "little")

    def read_big_uint64_be(self, offset: int = 0) -> int:
        return int.from_bytes(self._fixed_slice(offset, 8), "big")

    def _write_int64(self, value: int, offset: int, byteorder: str, signed: bool) -> int:
        self._store_int(self._fixed_slice(offset, 8), value, byteorder, signed)
        return offset + 8

    def write_big_int64_le(self, value: int, offset: int = 0) -> int:
        return self._write_int64(value, offset, "little", signed=True)

    def write_big_int64_be(self, value: int, offset: int = 0) -> int:
        return self._write_int64(value, offset, "big", signed=True)

    def write_big_uint64_le(self, value: int, offset: int = 0) -> int:
        return self._write_int64(value, offset, "little", signed=False)

    def write_big_uint64_be(self, value: int, offset: int = 0) -> int:
        return self._write_int64(value, offset, "big", signed=False)

    # IEEE 754 floats

    def _read_real(self, fmt: str, offset: int) -> float:
        return struct.unpack(fmt, self._fixed_slice(offset, struct.calcsize(fmt)))[0]

    def _write_real(self, fmt: str, value: float, offset: int) -> int:
        size = struct.calcsize(fmt)
        target = self._fixed_slice(offset, size)
        try:
            target[:] = struct.pack(fmt, value)
        except (struct.error, OverflowError) as error:
            raise InvalidArgumentError(f"value {value!r} does not fit in {size} bytes") from error
        return offset + size

    def read_float_le(self, offset: int = 0) -> float:
        return self._read_real("<f", offset)

    def read_float_be(self, offset: int = 0) -> float:
        return self._read_real(">f", offset)

    def read_double_le(self, offset: int = 0) -> float:
        return self._read_real("<d", offset)

    def read_double_be(self, offset: int = 0) -> float:
        return self._read_real(">d", offset)

    def write_float_le(self, value: float, offset: int = 0) -> int:
        return self._write_real("<f", value, offset)

    def write_float_be(self, value: float, offset: int = 0) -> int:
        return self._write_real(">f", value, offset)

    def write_double_le(self, value: float, offset: int = 0) -> int:
        return self._write_real("<d", value, offset)

    def write_double_be(self, value: float, offset: int = 0) -> int:
        return self._write_real(">d", value, offset)

    # Comparison and protocol methods

    def compare(
        self,
        target: Any,
        target_start: int = 0,
        target_end: Optional[int] = None,
        source_start: int = 0,
        source_end: Optional[int] = None,
    ) -> int:
        other = as_view(target)
        if target_end is None:
            target_end = len(other)
        if source_end is None:
            source_end = self._length
        return search.compare(
            self.data(), source_start, source_end - source_start,
            other, target_start, target_end - target_start,
        )

    def equals(self, other: Any) -> bool:
        return self.compare(other) == 0

    def to_json(self) -> Dict[str, Any]:
        return {"type": "Buffer", "data": list(bytes(self))}

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return self.data().tobytes()

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return bytes(self)[index]
        return self.data()[index]

    def __setitem__(self, index: int, value: int) -> None:
        self.data()[index] = int(value) & 0xFF

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Buffer, Region, bytes, bytearray, memoryview)):
            return self.equals(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        shown: List[str] = [f"{byte:02x}" for byte in self.data()[:INSPECT_MAX_BYTES]]
        hidden = self._length - len(shown)
        if hidden > 0:
            shown.append(f"... {hidden} more byte{'s' if hidden != 1 else ''}")
        return f"<Buffer {' '.join(shown)}>" if shown else "<Buffer >"

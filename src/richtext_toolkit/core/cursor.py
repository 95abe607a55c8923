"""
Module: core.cursor

Purpose:
    Seekable little-endian byte reader consumed by the DIB decoder.
    The container parser normally supplies its own cursor; ByteCursor is
    the in-memory implementation used by the CLI and the tests.

Key Classes:
    - Cursor: Protocol describing the reads the decoder needs
    - ByteCursor: Cursor over an in-memory bytes buffer

Key Functions:
    - preserved_position(): Restore the cursor position on every exit path

Dependencies:
    - struct (std): Fixed-width little-endian decoding

Used By:
    - dib.header: Header classification and parsing
    - dib.bitmap: Slicing header and pixel segments
"""

from __future__ import annotations

import struct
from contextlib import contextmanager
from typing import Iterator, Protocol

from .errors import FormatError

_UINT16 = struct.Struct("<H")
_INT32 = struct.Struct("<i")
_UINT32 = struct.Struct("<I")


class Cursor(Protocol):
    """Seekable reader with fixed-width little-endian reads."""

    pos: int

    def seek(self, pos: int) -> None: ...

    def skip(self, count: int) -> None: ...

    def read_uint16(self) -> int: ...

    def read_int32(self) -> int: ...

    def read_uint32(self) -> int: ...

    def read_binary(self, size: int) -> bytes: ...


class ByteCursor:
    """
    Cursor over an immutable bytes buffer.

    Every read advances ``pos``. Reading past the end of the buffer, or
    seeking outside ``[0, len(data)]``, raises FormatError and leaves the
    position untouched.

    Example:
        >>> cur = ByteCursor(b"\\x28\\x00\\x00\\x00")
        >>> cur.read_uint32()
        40
        >>> cur.pos
        4
    """

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self._data = bytes(data)
        self.pos = 0
        self.seek(pos)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        """Bytes left between the current position and the end."""
        return len(self._data) - self.pos

    def seek(self, pos: int) -> None:
        if pos < 0 or pos > len(self._data):
            raise FormatError(f"Seek to {pos} outside buffer of {len(self._data)} bytes")
        self.pos = pos

    def skip(self, count: int) -> None:
        self.seek(self.pos + count)

    def read_uint16(self) -> int:
        return self._unpack(_UINT16)

    def read_int32(self) -> int:
        return self._unpack(_INT32)

    def read_uint32(self) -> int:
        return self._unpack(_UINT32)

    def read_binary(self, size: int) -> bytes:
        """Read ``size`` raw bytes."""
        if size < 0:
            raise FormatError(f"Negative read size: {size}")
        self._require(size)
        chunk = self._data[self.pos:self.pos + size]
        self.pos += size
        return chunk

    def _unpack(self, fmt: struct.Struct) -> int:
        self._require(fmt.size)
        (value,) = fmt.unpack_from(self._data, self.pos)
        self.pos += fmt.size
        return value

    def _require(self, size: int) -> None:
        if self.pos + size > len(self._data):
            raise FormatError(
                f"Read of {size} bytes at offset {self.pos} exceeds buffer of {len(self._data)} bytes"
            )


@contextmanager
def preserved_position(cursor: Cursor) -> Iterator[Cursor]:
    """
    Capture ``cursor.pos`` on entry and restore it on exit.

    The position is restored whether the block returns normally or
    raises, so sibling readers sharing the cursor never observe a
    half-finished seek.

    Example:
        >>> cur = ByteCursor(bytes(8), pos=2)
        >>> with preserved_position(cur):
        ...     cur.seek(6)
        >>> cur.pos
        2
    """
    saved = cursor.pos
    try:
        yield cursor
    finally:
        cursor.seek(saved)

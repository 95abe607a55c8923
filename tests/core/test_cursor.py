"""
Unit Tests for ByteCursor and preserved_position

Tests for little-endian reads, bounds checking and position restoration.
"""

import struct

import pytest

from richtext_toolkit.core.cursor import ByteCursor, preserved_position
from richtext_toolkit.core.errors import FormatError


class TestByteCursor:
    """Tests for ByteCursor reads and seeks."""

    def test_reads_when_little_endian_data_then_decodes_values(self):
        """Fixed-width reads should decode little-endian and advance pos."""
        data = struct.pack("<HiI", 0x1234, -7, 0xDEADBEEF)
        cur = ByteCursor(data)

        assert cur.read_uint16() == 0x1234
        assert cur.read_int32() == -7
        assert cur.read_uint32() == 0xDEADBEEF
        assert cur.pos == 10
        assert cur.remaining == 0

    def test_read_binary_when_in_range_then_returns_slice(self):
        cur = ByteCursor(b"abcdef", pos=2)
        assert cur.read_binary(3) == b"cde"
        assert cur.pos == 5

    def test_read_when_past_end_then_raises_format_error(self):
        """Truncated reads should raise and leave pos untouched."""
        cur = ByteCursor(b"\x01\x02\x03")
        with pytest.raises(FormatError, match="exceeds buffer"):
            cur.read_uint32()
        assert cur.pos == 0

    def test_read_binary_when_negative_size_then_raises_format_error(self):
        with pytest.raises(FormatError, match="Negative read size"):
            ByteCursor(b"abc").read_binary(-1)

    def test_seek_when_outside_buffer_then_raises_format_error(self):
        cur = ByteCursor(b"abc")
        with pytest.raises(FormatError):
            cur.seek(4)
        with pytest.raises(FormatError):
            cur.seek(-1)

    def test_seek_when_at_end_then_allowed(self):
        cur = ByteCursor(b"abc")
        cur.seek(3)
        assert cur.remaining == 0

    def test_skip_when_called_then_moves_relative(self):
        cur = ByteCursor(bytes(10), pos=2)
        cur.skip(4)
        assert cur.pos == 6


class TestPreservedPosition:
    """Tests for preserved_position() context manager."""

    def test_preserved_position_when_block_seeks_then_restores(self):
        cur = ByteCursor(bytes(16), pos=5)
        with preserved_position(cur):
            cur.seek(12)
            cur.read_uint16()
        assert cur.pos == 5

    def test_preserved_position_when_block_raises_then_restores(self):
        """Position should be restored on the error path too."""
        cur = ByteCursor(bytes(4), pos=1)
        with pytest.raises(FormatError):
            with preserved_position(cur):
                cur.seek(2)
                cur.read_uint32()
        assert cur.pos == 1

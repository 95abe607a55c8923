"""
Tests for dib.header

Test Coverage:
- read_header(): Classification by declared size
- BitmapInfo: infosize policy, bitfields clamp-up, color-table bytes
- Edge cases: Vendor-extended headers, top-down bitmaps, truncation
"""

import pytest

from richtext_toolkit.core.cursor import ByteCursor
from richtext_toolkit.core.errors import FormatError
from richtext_toolkit.core.models import CoreHeader, InfoHeader
from richtext_toolkit.dib.header import BitmapInfo, read_header


class TestReadHeader:
    """Tests for read_header()."""

    def test_read_header_when_size_12_then_core_layout(self, core_header):
        header, declared = read_header(ByteCursor(core_header(width=9, height=3, bitcount=1)))
        assert isinstance(header, CoreHeader)
        assert declared == 12
        assert (header.width, header.height, header.bitcount) == (9, 3, 1)

    def test_read_header_when_size_40_then_info_layout(self, info_header):
        header, declared = read_header(ByteCursor(info_header(width=5, height=6)))
        assert isinstance(header, InfoHeader)
        assert declared == 40

    def test_read_header_when_size_124_then_stops_after_info_fields(self, info_header):
        """V5-sized headers parse the 40-byte layout and leave vendor fields unread."""
        cur = ByteCursor(info_header(size=124, width=2, height=2, bitcount=32))
        header, declared = read_header(cur)
        assert isinstance(header, InfoHeader)
        assert declared == 124
        assert cur.pos == 40

    def test_read_header_when_skip_size_then_leading_field_ignored(self, core_header):
        # Arrange
        cur = ByteCursor(b"\xff" * 4 + core_header(width=4, height=7, bitcount=8))

        # Act
        header, declared = read_header(cur, skip_size=True)

        # Assert
        assert isinstance(header, CoreHeader)
        assert declared == 12
        assert (header.width, header.height, header.bitcount) == (4, 7, 8)
        assert cur.pos == 16

    def test_read_header_when_truncated_then_raises_format_error(self, info_header):
        with pytest.raises(FormatError):
            read_header(ByteCursor(info_header()[:30]))


class TestBitmapInfo:
    """Tests for BitmapInfo infosize computation."""

    def test_infosize_when_core_8bpp_rgb_then_adds_3_byte_entries(self, core_header):
        info = BitmapInfo(ByteCursor(core_header(bitcount=8)))
        assert info.infosize == 12 + 256 * 3

    def test_infosize_when_core_without_rgb_then_adds_2_byte_entries(self, core_header):
        info = BitmapInfo(ByteCursor(core_header(bitcount=1)), use_rgb=False)
        assert info.infosize == 12 + 2 * 2

    def test_infosize_when_core_24bpp_then_no_table(self, core_header):
        info = BitmapInfo(ByteCursor(core_header(bitcount=24)))
        assert info.infosize == 12
        assert info.compression is None

    def test_infosize_when_info_24bpp_then_declared_size(self, info_header):
        info = BitmapInfo(ByteCursor(info_header(bitcount=24)))
        assert info.infosize == 40

    def test_infosize_when_info_palette_then_adds_4_byte_entries(self, info_header):
        info = BitmapInfo(ByteCursor(info_header(bitcount=8, clrused=10)))
        assert info.infosize == 40 + 10 * 4

    def test_infosize_when_bitfields_and_size_40_then_clamped_to_52(self, info_header):
        """Under-reported bitfields headers still reserve the three mask words."""
        info = BitmapInfo(ByteCursor(info_header(bitcount=32, compression=3)))
        assert info.declared_size == 40
        assert info.infosize == 52

    def test_infosize_when_bitfields_and_size_below_40_then_clamped_to_52(self, info_header):
        data = info_header(bitcount=16, compression=3)
        data = b"\x10\x00\x00\x00" + data[4:]  # declared size 16
        info = BitmapInfo(ByteCursor(data))
        assert info.declared_size == 16
        assert info.infosize == 52

    def test_infosize_when_bitfields_and_v4_header_then_keeps_declared(self, info_header):
        info = BitmapInfo(ByteCursor(info_header(size=108, bitcount=32, compression=3)))
        assert info.infosize == 108

    def test_infosize_when_plain_info_below_40_then_clamped_to_40(self, info_header):
        data = b"\x20\x00\x00\x00" + info_header(bitcount=24)[4:]
        info = BitmapInfo(ByteCursor(data))
        assert info.infosize == 40
        assert info.infosize >= info.declared_size

    def test_height_when_top_down_then_absolute(self, info_header):
        info = BitmapInfo(ByteCursor(info_header(width=3, height=-4)))
        assert info.height == 4
        assert info.width == 3
        assert info.top_down

    def test_offset_when_not_at_start_then_records_position(self, info_header):
        data = bytes(6) + info_header()
        cur = ByteCursor(data, pos=6)
        assert BitmapInfo(cur).offset == 6

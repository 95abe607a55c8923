"""
Module: headers

Purpose:
    Provides the two DIB header layouts as immutable dataclasses. A DIB
    header is either the legacy 12-byte core layout or the 40-byte info
    layout; the leading 32-bit size field selects which one applies.

Key Classes:
    - BitmapCompression: Compression codes stored in info headers
    - CoreHeader: BITMAPCOREHEADER fields (16-bit width/height)
    - InfoHeader: BITMAPINFOHEADER fields (signed 32-bit width/height)

Key Functions:
    - CoreHeader.read(cursor) / InfoHeader.read(cursor): Parse from a cursor
    - colors(): Number of color-table entries following the header

Dependencies:
    - dataclasses (std)
    - enum (std)
    - core.cursor.Cursor (TYPE_CHECKING only)

Used By:
    - dib.header: Classification and infosize computation
    - dib.bitmap: Encoding selection from compression
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..cursor import Cursor


BITMAPCOREHEADER_SIZE = 12
BITMAPINFOHEADER_SIZE = 40
BITMAP_FILE_HEADER_SIZE = 14
BITMAP_FILE_MAGIC = b"BM"

# Color tables never hold more entries than an 8-bit index can address
MAX_PALETTE_ENTRIES = 256


class BitmapCompression(IntEnum):
    """Compression codes from the info header."""
    BI_RGB = 0
    BI_RLE8 = 1
    BI_RLE4 = 2
    BI_BITFIELDS = 3  # three 32-bit channel masks follow the header
    BI_JPEG = 4       # pixel data is a complete JPEG stream
    BI_PNG = 5        # pixel data is a complete PNG stream


@dataclass(frozen=True, slots=True)
class CoreHeader:
    """
    Legacy BITMAPCOREHEADER layout.

    Four consecutive 16-bit fields with no compression metadata.

    Attributes:
        width: Width in pixels (unsigned)
        height: Height in pixels (unsigned, always bottom-up)
        planes: Number of planes, normally 1
        bitcount: Bits per pixel

    Example:
        >>> CoreHeader(width=16, height=16, planes=1, bitcount=4).colors()
        16
    """

    width: int
    height: int
    planes: int
    bitcount: int

    @classmethod
    def read(cls, cursor: Cursor, skip_size: bool = False) -> CoreHeader:
        """
        Parse the core layout at the cursor position.

        Args:
            cursor: Cursor positioned at the header (or just past its
                size field when ``skip_size`` is False)
            skip_size: Skip a leading 4-byte size field first

        Returns:
            CoreHeader instance

        Raises:
            FormatError: If the cursor runs out of data
        """
        if skip_size:
            cursor.skip(4)
        return cls(
            width=cursor.read_uint16(),
            height=cursor.read_uint16(),
            planes=cursor.read_uint16(),
            bitcount=cursor.read_uint16(),
        )

    def colors(self) -> int:
        """Color-table entry count: 2^bitcount up to 8 bpp, else 0."""
        return 1 << self.bitcount if self.bitcount <= 8 else 0


@dataclass(frozen=True, slots=True)
class InfoHeader:
    """
    BITMAPINFOHEADER layout.

    Fields always follow the 40-byte layout; larger declared sizes
    (V4/V5 headers) only append vendor fields that are not parsed here.

    Attributes:
        width: Width in pixels (signed)
        height: Height in pixels; negative means rows are stored top-down
        planes: Number of planes, normally 1
        bitcount: Bits per pixel
        compression: Raw compression code (see BitmapCompression)
        sizeimage: Declared size of the pixel data, may be 0 for BI_RGB
        xpelspermeter: Horizontal resolution
        ypelspermeter: Vertical resolution
        clrused: Declared number of color-table entries (0 = derive)
        clrimportant: Number of important colors (informational)
    """

    width: int
    height: int
    planes: int
    bitcount: int
    compression: int
    sizeimage: int
    xpelspermeter: int
    ypelspermeter: int
    clrused: int
    clrimportant: int

    @classmethod
    def read(cls, cursor: Cursor, skip_size: bool = False) -> InfoHeader:
        """Parse the info layout at the cursor position."""
        if skip_size:
            cursor.skip(4)
        return cls(
            width=cursor.read_int32(),
            height=cursor.read_int32(),
            planes=cursor.read_uint16(),
            bitcount=cursor.read_uint16(),
            compression=cursor.read_uint32(),
            sizeimage=cursor.read_uint32(),
            xpelspermeter=cursor.read_int32(),
            ypelspermeter=cursor.read_int32(),
            clrused=cursor.read_uint32(),
            clrimportant=cursor.read_uint32(),
        )

    def colors(self) -> int:
        """
        Color-table entry count.

        An explicit ``clrused`` wins, capped at 256. Otherwise the table
        is implied by the bit depth: 2^bitcount up to 8 bpp, else none.
        """
        if self.clrused != 0:
            return min(self.clrused, MAX_PALETTE_ENTRIES)
        return 0 if self.bitcount > 8 else 1 << self.bitcount

    @property
    def uses_bitfields(self) -> bool:
        """True when three channel-mask words follow the header."""
        return self.compression == BitmapCompression.BI_BITFIELDS


HeaderVariant = Union[CoreHeader, InfoHeader]

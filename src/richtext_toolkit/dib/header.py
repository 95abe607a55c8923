"""
Module: dib.header

Purpose:
    Classifies and parses a DIB header from a cursor and computes the
    size of the header segment (header fields plus color table) so the
    pixel data offset of a synthesized file header is correct.

Key Functions:
    - read_header(): Read the size field and parse the matching layout

Key Classes:
    - BitmapInfo: Parsed header plus derived infosize

Dependencies:
    - core.models.headers: CoreHeader, InfoHeader, size constants

Used By:
    - dib.bitmap.DIBitmap: Header parsing and pixel offset computation
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from richtext_toolkit.core.cursor import Cursor
from richtext_toolkit.core.models.headers import (
    BITMAPCOREHEADER_SIZE,
    BITMAPINFOHEADER_SIZE,
    CoreHeader,
    HeaderVariant,
    InfoHeader,
)

logger = logging.getLogger(__name__)

# Bytes per channel-mask word for BI_BITFIELDS
MASK_WORD_SIZE = 4
BITFIELDS_MASK_COUNT = 3


def read_header(cursor: Cursor, skip_size: bool = False) -> Tuple[HeaderVariant, int]:
    """
    Read a DIB header starting at its 32-bit size field.

    A declared size of 12 selects the core layout; anything else is
    parsed with the fixed 40-byte info layout. Vendor fields of larger
    headers are left unread.

    Args:
        cursor: Cursor positioned at the header size field
        skip_size: Skip a leading 4-byte field before the size field

    Returns:
        Tuple of (header variant, declared header size)

    Raises:
        FormatError: Propagated from the cursor on truncated data

    Example:
        >>> header, size = read_header(cursor)
        >>> size
        40
    """
    if skip_size:
        cursor.skip(4)
    declared = cursor.read_uint32()
    if declared == BITMAPCOREHEADER_SIZE:
        header: HeaderVariant = CoreHeader.read(cursor, skip_size=False)
    else:
        header = InfoHeader.read(cursor, skip_size=False)
    return header, declared


class BitmapInfo:
    """
    Decoded DIB header with its on-disk segment size.

    ``infosize`` covers the header, the BI_BITFIELDS mask words and the
    color table, i.e. everything that precedes the pixel data.

    Attributes:
        offset: Cursor position at which parsing began
        header: CoreHeader or InfoHeader
        declared_size: Size field as written by the producer
        infosize: Header segment size including the color table

    Invariants:
        - infosize >= declared_size
    """

    def __init__(self, cursor: Cursor, *, use_rgb: bool = True) -> None:
        """
        Parse the header at the cursor position.

        Args:
            cursor: Cursor positioned at the header size field
            use_rgb: Color table holds RGB entries (3 bytes core, 4 bytes
                info) rather than 16-bit palette indices
        """
        self.offset = cursor.pos
        self.use_rgb = use_rgb
        self.header, self.declared_size = read_header(cursor)
        self.infosize = self._compute_infosize()
        logger.debug(
            f"DIB header at {self.offset}: {type(self.header).__name__} "
            f"declared={self.declared_size} infosize={self.infosize} colors={self.colors()}"
        )

    def _compute_infosize(self) -> int:
        header = self.header
        if isinstance(header, CoreHeader):
            return self.declared_size + header.colors() * (3 if self.use_rgb else 2)

        infosize = self.declared_size
        masks = BITFIELDS_MASK_COUNT if header.uses_bitfields else 0
        minimum = BITMAPINFOHEADER_SIZE + masks * MASK_WORD_SIZE
        # Producers under-report the size while still writing the masks
        if infosize <= minimum:
            infosize = minimum
        return infosize + header.colors() * (4 if self.use_rgb else 2)

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        """Height in pixels, regardless of row order."""
        return abs(self.header.height)

    @property
    def top_down(self) -> bool:
        """True when the stored height is negative."""
        return self.header.height < 0

    @property
    def compression(self) -> Optional[int]:
        """Raw compression code, or None for core headers."""
        if isinstance(self.header, InfoHeader):
            return self.header.compression
        return None

    def colors(self) -> int:
        return self.header.colors()

    def __repr__(self) -> str:
        return (
            f"BitmapInfo(offset={self.offset}, {self.width}x{self.height}, "
            f"infosize={self.infosize})"
        )

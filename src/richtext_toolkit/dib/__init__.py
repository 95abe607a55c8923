"""
Module: dib

Purpose:
    Decoding of embedded device-independent bitmaps. Classifies the
    header layout, sizes the header segment and produces standalone
    encoded images (data URIs) from a container's byte ranges.

Key Classes:
    - BitmapInfo: Parsed header plus derived infosize
    - DIBitmap: Embedded bitmap with extract()

Key Functions:
    - read_header(): Classify and parse a header at a cursor
    - make_bitmap_file_header(): 14-byte BMP preamble
    - locate_packed_dib() / load_packed_dib(): Packed DIB helpers

Used By:
    - render.renderer: Embeds decoded bitmaps as image elements
    - cli: `dib` command
"""

from .header import BitmapInfo, read_header
from .bitmap import (
    MIME_TYPES,
    DIBitmap,
    load_packed_dib,
    locate_packed_dib,
    make_bitmap_file_header,
)

__all__ = [
    "BitmapInfo",
    "read_header",
    "MIME_TYPES",
    "DIBitmap",
    "load_packed_dib",
    "locate_packed_dib",
    "make_bitmap_file_header",
]

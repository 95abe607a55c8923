"""
Core Models Package

Immutable binary models shared by the DIB decoder.

All models in this package are frozen dataclasses: a header is decoded
once per embedded image and never revised afterwards.
"""

from .headers import (
    BITMAP_FILE_HEADER_SIZE,
    BITMAP_FILE_MAGIC,
    BITMAPCOREHEADER_SIZE,
    BITMAPINFOHEADER_SIZE,
    BitmapCompression,
    CoreHeader,
    HeaderVariant,
    InfoHeader,
)
from .location import BitmapLocation, ByteRange

__all__ = [
    "BITMAP_FILE_HEADER_SIZE",
    "BITMAP_FILE_MAGIC",
    "BITMAPCOREHEADER_SIZE",
    "BITMAPINFOHEADER_SIZE",
    "BitmapCompression",
    "CoreHeader",
    "HeaderVariant",
    "InfoHeader",
    "BitmapLocation",
    "ByteRange",
]

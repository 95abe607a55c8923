"""
Rich-text Toolkit Core Package

Shared building blocks for the DIB decoder and the tree builder:
the byte cursor, the exception hierarchy and the immutable binary models.
"""

from .cursor import ByteCursor, Cursor, preserved_position
from .errors import FormatError, RichTextError, StructuralError
from .models import BitmapLocation, ByteRange, CoreHeader, InfoHeader

__all__ = [
    "ByteCursor",
    "Cursor",
    "preserved_position",
    "FormatError",
    "RichTextError",
    "StructuralError",
    "BitmapLocation",
    "ByteRange",
    "CoreHeader",
    "InfoHeader",
]

"""
Module: dib.bitmap

Purpose:
    Locates one embedded DIB inside its container and turns its header
    and pixel segments into a standalone encoded image. Raw bitmaps get
    a synthesized 14-byte BITMAPFILEHEADER; JPEG/PNG payloads are passed
    through unchanged.

Key Classes:
    - DIBitmap: Embedded bitmap with extract()/extract_bytes()

Key Functions:
    - make_bitmap_file_header(): Build the 14-byte BMP file preamble
    - locate_packed_dib(): Compute the location of a packed DIB
    - load_packed_dib(): Build a DIBitmap from raw packed-DIB bytes

Dependencies:
    - base64 (std): Data URI encoding
    - PIL: Optional decoding of the extracted payload (to_image)
    - dib.header: BitmapInfo

Used By:
    - render.renderer.Renderer.embed_bitmap
    - cli: `dib` command
"""

from __future__ import annotations

import base64
import io
import logging
import struct
from typing import Optional

from PIL import Image

from richtext_toolkit.core.cursor import ByteCursor, Cursor, preserved_position
from richtext_toolkit.core.errors import FormatError
from richtext_toolkit.core.models.headers import (
    BITMAP_FILE_HEADER_SIZE,
    BITMAP_FILE_MAGIC,
    BitmapCompression,
    InfoHeader,
)
from richtext_toolkit.core.models.location import BitmapLocation, ByteRange

from .header import BitmapInfo, read_header

logger = logging.getLogger(__name__)

# Encoding label -> MIME type of the extracted payload
MIME_TYPES = {
    "bmp": "image/bmp",
    "jpeg": "image/jpeg",
    "png": "image/png",
}


def make_bitmap_file_header(total_size: int, pixel_offset: int) -> bytes:
    """
    Build a BITMAPFILEHEADER.

    Layout: ``BM`` magic, uint32 file size, 4 reserved zero bytes,
    uint32 offset of the pixel data. All integers little-endian.

    Args:
        total_size: Size of everything after the preamble (header
            segment plus pixel data); the preamble size is added here
        pixel_offset: Size of the header segment; the preamble size is
            added here

    Returns:
        14 bytes

    Example:
        >>> make_bitmap_file_header(1040, 40)[2:6]
        b'\\x1e\\x04\\x00\\x00'
    """
    return BITMAP_FILE_MAGIC + struct.pack(
        "<IHHI",
        total_size + BITMAP_FILE_HEADER_SIZE,
        0,
        0,
        pixel_offset + BITMAP_FILE_HEADER_SIZE,
    )


def _encoding_for(compression: Optional[int]) -> str:
    if compression == BitmapCompression.BI_JPEG:
        return "jpeg"
    if compression == BitmapCompression.BI_PNG:
        return "png"
    return "bmp"


class DIBitmap:
    """
    Device-independent bitmap embedded in a container.

    The cursor is shared with the container parser, so every method that
    seeks restores the position before returning, also when a read fails.

    Attributes:
        location: Header and pixel-data byte ranges in the container
        info: Parsed BitmapInfo

    Example:
        >>> bitmap = DIBitmap(cursor, location)
        >>> bitmap.width, bitmap.height
        (2, 2)
        >>> bitmap.extract()[:22]
        'data:image/bmp;base64,'
    """

    def __init__(self, cursor: Cursor, location: BitmapLocation, *, use_rgb: bool = True) -> None:
        """
        Parse the header at the cursor position.

        Args:
            cursor: Cursor positioned at the bitmap header
            location: Byte ranges supplied by the container
            use_rgb: Forwarded to BitmapInfo
        """
        self._cursor = cursor
        self._offset = cursor.pos
        self.location = location
        self.info = BitmapInfo(cursor, use_rgb=use_rgb)

    @property
    def width(self) -> int:
        return self.info.width

    @property
    def height(self) -> int:
        """Absolute height; row order is not interpreted."""
        return self.info.height

    def total_size(self) -> int:
        """Header segment plus pixel data size, excluding any preamble."""
        return self.location.total_size

    @property
    def encoding(self) -> str:
        """One of ``"bmp"``, ``"jpeg"`` or ``"png"``."""
        return _encoding_for(self.info.compression)

    @property
    def mime_type(self) -> str:
        return MIME_TYPES[self.encoding]

    def make_bitmap_file_header(self) -> bytes:
        """Preamble for this bitmap when saved as a standalone .bmp."""
        return make_bitmap_file_header(self.total_size(), self.info.infosize)

    def extract_bytes(self) -> bytes:
        """
        Assemble the standalone image payload.

        Re-reads the header at the bitmap's own offset to classify the
        compression, then concatenates the preamble (raw bitmaps only),
        the header segment and the pixel data.

        Returns:
            Encoded image bytes (.bmp, JPEG or PNG stream)

        Raises:
            FormatError: If any segment lies outside the cursor's data
        """
        with preserved_position(self._cursor) as cursor:
            cursor.seek(self._offset)
            header, _ = read_header(cursor)
            compression = header.compression if isinstance(header, InfoHeader) else None
            encoding = _encoding_for(compression)

            chunks = []
            if encoding == "bmp":
                chunks.append(self.make_bitmap_file_header())

            cursor.seek(self.location.header.offset)
            chunks.append(cursor.read_binary(self.location.header.size))

            cursor.seek(self.location.data.offset)
            chunks.append(cursor.read_binary(self.location.data.size))

        payload = b"".join(chunks)
        logger.debug(f"Extracted {encoding} bitmap {self.width}x{self.height} ({len(payload)} bytes)")
        return payload

    def extract(self) -> str:
        """
        Encode the bitmap as a data URI.

        Returns:
            ``"data:<mime>;base64,<payload>"``

        Raises:
            FormatError: If any segment lies outside the cursor's data
        """
        payload = self.extract_bytes()
        encoded = base64.b64encode(payload).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    base64ref = extract

    def to_image(self) -> Image.Image:
        """
        Decode the extracted payload with Pillow.

        Raises:
            FormatError: If the payload is truncated or Pillow cannot
                identify it
        """
        payload = self.extract_bytes()
        try:
            image = Image.open(io.BytesIO(payload))
            image.load()
        except (OSError, SyntaxError) as exc:
            raise FormatError(f"Cannot decode {self.encoding} bitmap: {exc}") from exc
        return image

    def __repr__(self) -> str:
        return f"DIBitmap({self.encoding}, {self.width}x{self.height}, {self.location})"


def locate_packed_dib(cursor: ByteCursor, offset: int = 0, size: Optional[int] = None) -> BitmapLocation:
    """
    Compute the location of a packed DIB (header, color table, pixels).

    Args:
        cursor: Cursor over the buffer holding the DIB
        offset: Offset of the header size field
        size: Total size of the packed DIB; defaults to the rest of the
            buffer after ``offset``

    Returns:
        BitmapLocation whose header segment is ``infosize`` bytes

    Raises:
        FormatError: If the header does not fit in ``size``
    """
    with preserved_position(cursor):
        cursor.seek(offset)
        info = BitmapInfo(cursor)
    if size is None:
        size = len(cursor) - offset

    if info.infosize > size:
        raise FormatError(f"Header segment of {info.infosize} bytes exceeds packed DIB of {size} bytes")
    return BitmapLocation(
        header=ByteRange(offset, info.infosize),
        data=ByteRange(offset + info.infosize, size - info.infosize),
    )


def load_packed_dib(data: bytes, offset: int = 0) -> DIBitmap:
    """
    Build a DIBitmap from packed-DIB bytes (e.g. a .dib file or a
    clipboard CF_DIB buffer).

    Example:
        >>> bitmap = load_packed_dib(Path("logo.dib").read_bytes())
        >>> bitmap.mime_type
        'image/bmp'
    """
    cursor = ByteCursor(data)
    location = locate_packed_dib(cursor, offset)
    cursor.seek(offset)
    return DIBitmap(cursor, location)

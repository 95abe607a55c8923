"""
Module: location

Purpose:
    Provides ByteRange and BitmapLocation - the byte slices of one
    embedded bitmap inside its container. The container parser supplies
    these; the decoder never computes them except for packed DIBs.

Key Functions:
    - ByteRange.end: First offset past the range
    - BitmapLocation.total_size: Header segment plus pixel data size
    - to_dict() / from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - dib.bitmap.DIBitmap
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ByteRange:
    """
    Contiguous byte region ``[offset, offset + size)``.

    Invariants:
        - offset >= 0
        - size >= 0

    Example:
        >>> ByteRange(offset=14, size=40).end
        54
    """

    offset: int
    size: int

    def __post_init__(self) -> None:
        """Validate range on construction."""
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0: {self.offset}")
        if self.size < 0:
            raise ValueError(f"size must be >= 0: {self.size}")

    @property
    def end(self) -> int:
        """Offset of the first byte after the range."""
        return self.offset + self.size

    def to_dict(self) -> dict:
        return {"offset": self.offset, "size": self.size}

    @classmethod
    def from_dict(cls, data: dict) -> ByteRange:
        return cls(offset=data["offset"], size=data["size"])

    def __repr__(self) -> str:
        return f"ByteRange({self.offset}, {self.size})"


@dataclass(frozen=True, slots=True)
class BitmapLocation:
    """
    Where one embedded bitmap lives in the container.

    Attributes:
        header: Header segment (header fields plus color table)
        data: Pixel data segment
    """

    header: ByteRange
    data: ByteRange

    @property
    def total_size(self) -> int:
        """Combined size of the header segment and pixel data."""
        return self.header.size + self.data.size

    def to_dict(self) -> dict:
        return {"header": self.header.to_dict(), "data": self.data.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> BitmapLocation:
        return cls(
            header=ByteRange.from_dict(data["header"]),
            data=ByteRange.from_dict(data["data"]),
        )

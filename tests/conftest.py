import io
import struct
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import richtext_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from richtext_toolkit.render import ElementTreeBackend, InstructionDocument


def _info_header(
    width=4,
    height=2,
    planes=1,
    bitcount=24,
    compression=0,
    sizeimage=0,
    xppm=2835,
    yppm=2835,
    clrused=0,
    clrimportant=0,
    size=40,
):
    header = struct.pack(
        "<IiiHHIIiiII",
        size, width, height, planes, bitcount,
        compression, sizeimage, xppm, yppm, clrused, clrimportant,
    )
    # Vendor fields of larger headers are zero-filled
    return header + bytes(max(0, size - 40))


def _core_header(width=4, height=2, planes=1, bitcount=24):
    return struct.pack("<IHHHH", 12, width, height, planes, bitcount)


# Common test fixtures
@pytest.fixture
def info_header():
    """Factory for BITMAPINFOHEADER bytes."""
    return _info_header


@pytest.fixture
def core_header():
    """Factory for BITMAPCOREHEADER bytes."""
    return _core_header


@pytest.fixture
def bmp_file_bytes():
    """Factory returning a Pillow-encoded .bmp file for a small image."""
    def make(mode="RGB", size=(3, 2)):
        img = Image.new(mode, size)
        for x in range(size[0]):
            for y in range(size[1]):
                if mode == "RGB":
                    img.putpixel((x, y), (x * 60, y * 90, 200))
                else:
                    img.putpixel((x, y), (x + y) % 2)
        buf = io.BytesIO()
        img.save(buf, format="BMP")
        return buf.getvalue()
    return make


@pytest.fixture
def packed_dib(bmp_file_bytes):
    """Factory returning packed DIB bytes (a .bmp without its 14-byte preamble)."""
    def make(mode="RGB", size=(3, 2)):
        return bmp_file_bytes(mode, size)[14:]
    return make


@pytest.fixture
def backend():
    return ElementTreeBackend()


@pytest.fixture
def doc(backend):
    return InstructionDocument(backend)

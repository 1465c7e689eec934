import struct
import pytest

_FILE_HEADER_SIZE = 14
_INFO_HEADER_SIZE = 40


def build_bmp(
    pixel_data: bytes = b"",
    bpp: int = 24,
    width: int = 1,
    height: int = 1,
    method: int = 0,
    colors: int = 0,
    header_size: int = _INFO_HEADER_SIZE,
    offset: int = _FILE_HEADER_SIZE + _INFO_HEADER_SIZE,
    data_size=None,
    file_size=None,
) -> bytes:
    """
    Assembles a BMP file with a BITMAPINFOHEADER. The pixel data is placed
    at `offset`, any gap after the headers is zero-filled. `data_size`
    defaults to the length of `pixel_data`.
    """
    assert offset >= _FILE_HEADER_SIZE + _INFO_HEADER_SIZE
    if data_size is None:
        data_size = len(pixel_data)
    if file_size is None:
        file_size = offset + len(pixel_data)

    file_header = struct.pack("<2sIHHI", b"BM", file_size, 0, 0, offset)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        header_size,
        width,
        height,
        1,  # planes
        bpp,
        method,
        data_size,
        2835,  # 72 dpi
        2835,
        colors,
        0,
    )
    gap = b"\x00" * (offset - _FILE_HEADER_SIZE - _INFO_HEADER_SIZE)
    return file_header + info_header + gap + pixel_data


@pytest.fixture
def bmp_builder():
    """A helper that assembles BMP files from header values."""
    return build_bmp


@pytest.fixture
def bmp_32bit_data() -> bytes:
    """A 2x1 32bpp file with distinct byte values."""
    return build_bmp(
        pixel_data=bytes(range(8)), bpp=32, width=2, height=1
    )


@pytest.fixture
def bmp_4bit_data() -> bytes:
    """A 4bpp file with an all-black 16 color palette, two data bytes."""
    return build_bmp(
        pixel_data=b"\xab\x01",
        bpp=4,
        width=4,
        height=1,
        colors=16,
        offset=54 + 16 * 4,
    )

import logging
from typing import Callable, Dict, Tuple
from .errors import (
    InvalidBitmapData,
    TruncatedBitmapData,
    UnsupportedBitsPerPixel,
)
from .pixel import ABGR, PaletteColor, Pixel

logger = logging.getLogger(__name__)

_GROUP_SIZE = 4


def _decode_abgr(region: bytes) -> Tuple[Pixel, ...]:
    """
    Split the region into 4-byte groups, one ABGR sample each. A trailing
    group shorter than 4 bytes is dropped.

    24bpp data goes through here too and is NOT treated row by row: the
    fourth byte of each group is whatever follows in the file.
    """
    usable = len(region) - len(region) % _GROUP_SIZE
    return tuple(
        ABGR(*region[i : i + _GROUP_SIZE])
        for i in range(0, usable, _GROUP_SIZE)
    )


def _decode_nibbles(region: bytes) -> Tuple[Pixel, ...]:
    """Two palette indices per byte, high nibble first."""
    pixels = []
    for byte_val in region:
        pixels.append(PaletteColor((byte_val & 0xF0) >> 4))
        pixels.append(PaletteColor(byte_val & 0x0F))
    return tuple(pixels)


_DECODERS: Dict[int, Callable[[bytes], Tuple[Pixel, ...]]] = {
    4: _decode_nibbles,
    24: _decode_abgr,
    32: _decode_abgr,
}

SUPPORTED_BPP = tuple(sorted(_DECODERS))


def decode_pixels(
    data: bytes, offset: int, end: int, bpp: int
) -> Tuple[Pixel, ...]:
    """
    Decode the pixel-data region [offset, end) of a bitmap buffer.

    The result is a flat stream of samples in file order. Row padding,
    row order and the color table are not taken into account.

    Args:
        data: The complete bitmap buffer.
        offset: Start of the pixel-data region.
        end: End (exclusive) of the pixel-data region.
        bpp: Bits per pixel from the info header.

    Returns:
        A tuple of pixels.

    Raises:
        InvalidBitmapData: if offset is negative or past end.
        TruncatedBitmapData: if end lies past the end of the buffer.
        UnsupportedBitsPerPixel: if there is no decoder for bpp.
    """
    if offset < 0 or offset > end:
        raise InvalidBitmapData(
            f"Invalid pixel data region [{offset}, {end})"
        )
    if end > len(data):
        raise TruncatedBitmapData(end, len(data), "pixel data")

    decoder = _DECODERS.get(bpp)
    if decoder is None:
        raise UnsupportedBitsPerPixel(bpp)

    pixels = decoder(bytes(data[offset:end]))
    logger.debug(
        "Decoded %d pixels at %dbpp from %d bytes",
        len(pixels),
        bpp,
        end - offset,
    )
    return pixels

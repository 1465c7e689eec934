"""
microbmp decodes the pixel data of Windows bitmap files held in memory.
"""

from .bitmap import Bitmap, decode
from .compression import CompressionKind, CompressionMethod
from .decoder import SUPPORTED_BPP, decode_pixels
from .errors import (
    BitmapError,
    BitmapIOError,
    InvalidBitmapData,
    TruncatedBitmapData,
    UnsupportedBitsPerPixel,
)
from .header import BitmapV5Header, parse_header
from .pixel import ABGR, BGR, PaletteColor, Pixel


__all__ = [
    "ABGR",
    "BGR",
    "Bitmap",
    "BitmapError",
    "BitmapIOError",
    "BitmapV5Header",
    "CompressionKind",
    "CompressionMethod",
    "InvalidBitmapData",
    "PaletteColor",
    "Pixel",
    "SUPPORTED_BPP",
    "TruncatedBitmapData",
    "UnsupportedBitsPerPixel",
    "decode",
    "decode_pixels",
    "parse_header",
]

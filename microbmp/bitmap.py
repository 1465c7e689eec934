from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO, Dict, Tuple, Union
import numpy as np
from .decoder import decode_pixels
from .errors import BitmapIOError, InvalidBitmapData
from .header import BitmapV5Header, parse_header
from .pixel import Pixel

logger = logging.getLogger(__name__)

BitmapSource = Union[str, Path, BinaryIO]


@dataclass(frozen=True)
class Bitmap:
    """
    A decoded bitmap. Holds the complete file buffer, the file-level
    metadata, the parsed header and the decoded pixel stream.

    Instances are immutable. The buffer is always stored as bytes, so a
    mutable input buffer is copied and never shared with the caller.
    """

    data: bytes = field(repr=False)
    size: int
    offset: int
    header: BitmapV5Header
    pixels: Tuple[Pixel, ...] = field(repr=False)
    end: int

    @classmethod
    def from_bytes(cls, data: bytes) -> Bitmap:
        """
        Decode a bitmap from the complete contents of a BMP file.

        Raises:
            InvalidBitmapData: if the signature is wrong or the buffer is
                truncated (TruncatedBitmapData).
            UnsupportedBitsPerPixel: if the bit depth has no decoder.
        """
        buf = bytes(data)
        parsed = parse_header(buf)
        pixels = decode_pixels(
            buf, parsed.offset, parsed.end, parsed.header.bpp
        )
        return cls(
            data=buf,
            size=parsed.size,
            offset=parsed.offset,
            header=parsed.header,
            pixels=pixels,
            end=parsed.end,
        )

    @classmethod
    def from_file(cls, source: BitmapSource) -> Bitmap:
        """
        Read a path or an open binary file to the end and decode it.
        OSErrors raised while reading are wrapped in BitmapIOError.

        File objects must be opened in binary mode; a read that does not
        return bytes raises InvalidBitmapData.
        """
        try:
            if isinstance(source, (str, Path)):
                logger.debug("Reading bitmap from %s", source)
                data = Path(source).read_bytes()
            else:
                data = source.read()
        except OSError as e:
            raise BitmapIOError(e) from e
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidBitmapData(
                f"Expected bytes from the bitmap source, got "
                f"{type(data).__name__}; open the file in binary mode"
            )
        return cls.from_bytes(data)

    @property
    def pixel_data(self) -> bytes:
        """The raw bytes of the pixel-data region [offset, end)."""
        return self.data[self.offset : self.end]

    def to_array(self) -> np.ndarray:
        """
        Returns the pixels as a uint8 array, in decode order. Four channel
        pixels give an (n, 4) array, palette indices an (n,) array.
        """
        raw = np.frombuffer(self.pixel_data, dtype=np.uint8)
        if self.header.bpp == 4:
            indices = np.empty(raw.size * 2, dtype=np.uint8)
            indices[0::2] = raw >> 4
            indices[1::2] = raw & 0x0F
            return indices
        # Trailing partial group is dropped, as in the pixel stream
        usable = raw.size - raw.size % 4
        return raw[:usable].reshape(-1, 4).copy()

    def describe(self) -> Dict[str, Any]:
        header = self.header
        return {
            "size": self.size,
            "offset": self.offset,
            "end": self.end,
            "header": {
                "size": header.size,
                "pix_width": header.pix_width,
                "pix_height": header.pix_height,
                "bpp": header.bpp,
                "method": str(header.method),
                "colors": header.colors,
            },
            "pixel_count": len(self.pixels),
        }


def decode(data: bytes) -> Bitmap:
    """Shorthand for Bitmap.from_bytes()."""
    return Bitmap.from_bytes(data)

import struct
import logging
from dataclasses import dataclass
from .compression import CompressionMethod
from .errors import InvalidBitmapData, TruncatedBitmapData

logger = logging.getLogger(__name__)

BMP_SIGNATURE = b"BM"

# File header followed by the leading fields of the info header, up to
# and including biClrUsed. All fields are little-endian.
#   0  signature        2s
#   2  file size        I
#   6  reserved         4x
#  10  pixel offset     I
#  14  header size      I
#  18  width            i
#  22  height           i
#  26  planes           2x
#  28  bits per pixel   H
#  30  compression      I
#  34  pixel data size  I
#  38  resolution       8x
#  46  colors used      I
_HEADER_STRUCT = struct.Struct("<2sI4xIIii2xHII8xI")
HEADER_LENGTH = _HEADER_STRUCT.size


@dataclass(frozen=True)
class BitmapV5Header:
    """
    The subset of the DIB header fields that the decoder reads. Only the
    fixed BITMAPINFOHEADER-compatible prefix is interpreted, whatever
    header size the file declares.
    """

    size: int
    pix_width: int
    pix_height: int
    bpp: int
    method: CompressionMethod
    colors: int

    @property
    def is_top_down(self) -> bool:
        # Informational only, rows are never reordered.
        return self.pix_height < 0


@dataclass(frozen=True)
class ParsedHeader:
    size: int
    offset: int
    end: int
    header: BitmapV5Header


def is_valid_bmp_signature(data: bytes) -> bool:
    """
    Check if the provided data starts with the BMP signature 'BM'.

    Args:
        data: The byte data of the file.

    Returns:
        True if the signature is valid, False otherwise.
    """
    return len(data) >= 2 and bytes(data[:2]) == BMP_SIGNATURE


def parse_header(data: bytes) -> ParsedHeader:
    """
    Validate the signature and extract the header fields from their
    fixed offsets.

    The declared file size and header size are taken as-is. The only
    bounds that are enforced are the ones needed to read safely: the
    buffer must hold all header fields, and the pixel-data region
    [offset, offset + pixel data size) must lie within the buffer.

    Args:
        data: The complete contents of a BMP file.

    Returns:
        A ParsedHeader with the file size, pixel-data offset, the end of
        the pixel-data region and the parsed BitmapV5Header.

    Raises:
        InvalidBitmapData: if the buffer does not start with 'BM'.
        TruncatedBitmapData: if the buffer is too short for the header
            fields or the declared pixel-data region.
    """
    if not is_valid_bmp_signature(data):
        raise InvalidBitmapData("Not a BMP file (missing 'BM' magic bytes)")

    if len(data) < HEADER_LENGTH:
        raise TruncatedBitmapData(HEADER_LENGTH, len(data), "header")

    (
        _,
        file_size,
        offset,
        header_size,
        pix_width,
        pix_height,
        bpp,
        method_code,
        data_size,
        colors,
    ) = _HEADER_STRUCT.unpack_from(data, 0)

    end = offset + data_size
    if end > len(data):
        raise TruncatedBitmapData(end, len(data), "pixel data")

    header = BitmapV5Header(
        size=header_size,
        pix_width=pix_width,
        pix_height=pix_height,
        bpp=bpp,
        method=CompressionMethod.from_code(method_code),
        colors=colors,
    )
    logger.debug(
        "size=%d offset=%d end=%d header_size=%d width=%d height=%d "
        "bpp=%d method=%s colors=%d",
        file_size,
        offset,
        end,
        header_size,
        pix_width,
        pix_height,
        bpp,
        header.method,
        colors,
    )
    return ParsedHeader(size=file_size, offset=offset, end=end, header=header)

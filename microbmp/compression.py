from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto


class CompressionKind(Enum):
    NONE = auto()
    RLE_8BIT = auto()
    RLE_4BIT = auto()
    HUFFMAN_1D = auto()
    JPEG = auto()
    PNG = auto()
    OTHER = auto()


# biCompression codes as written in the info header
_KIND_BY_CODE = {
    0: CompressionKind.NONE,
    1: CompressionKind.RLE_8BIT,
    2: CompressionKind.RLE_4BIT,
    3: CompressionKind.HUFFMAN_1D,
    4: CompressionKind.JPEG,
    5: CompressionKind.PNG,
}


@dataclass(frozen=True)
class CompressionMethod:
    """
    The compression method tag of a bitmap. Purely descriptive: payloads
    of compressed bitmaps are never decoded. Codes without a known kind
    map to CompressionKind.OTHER and keep the raw code.
    """

    kind: CompressionKind
    code: int

    @classmethod
    def from_code(cls, code: int) -> CompressionMethod:
        return cls(_KIND_BY_CODE.get(code, CompressionKind.OTHER), code)

    @property
    def is_compressed(self) -> bool:
        return self.kind is not CompressionKind.NONE

    def __str__(self) -> str:
        if self.kind is CompressionKind.OTHER:
            return f"OTHER({self.code})"
        return self.kind.name

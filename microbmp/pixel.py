from dataclasses import astuple, dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class ABGR:
    """
    A four channel sample. The fields hold the source bytes in the order
    they appear in the file, they are not reordered to RGBA.
    """

    a: int
    b: int
    g: int
    r: int

    def channels(self) -> Tuple[int, ...]:
        return astuple(self)


@dataclass(frozen=True)
class BGR:
    # Reserved for a row-aware 24bpp path, never produced by the decoder.
    b: int
    g: int
    r: int

    def channels(self) -> Tuple[int, ...]:
        return astuple(self)


@dataclass(frozen=True)
class PaletteColor:
    """An index into the color table; the table itself is not resolved."""

    index: int

    def channels(self) -> Tuple[int, ...]:
        return (self.index,)


Pixel = Union[ABGR, BGR, PaletteColor]

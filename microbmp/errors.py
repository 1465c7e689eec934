class BitmapError(Exception):
    """Base class for all bitmap decoding failures."""

    pass


class InvalidBitmapData(BitmapError):
    """Raised when the buffer does not carry the 'BM' signature."""

    pass


class TruncatedBitmapData(InvalidBitmapData):
    """
    Raised when the buffer ends before a header field or before the end
    of the declared pixel-data region.
    """

    def __init__(self, required: int, available: int, what: str = "data"):
        self.required = required
        self.available = available
        super().__init__(
            f"Truncated bitmap {what}: need {required} bytes, "
            f"have {available}"
        )


class UnsupportedBitsPerPixel(BitmapError):
    """Raised when the pixel decoder has no path for the bit depth."""

    def __init__(self, bpp: int):
        self.bpp = bpp
        super().__init__(f"Unsupported bits per pixel: {bpp}")


class BitmapIOError(BitmapError):
    """
    Wraps the OSError raised while reading the bitmap source. The
    original exception is kept unaltered in the `error` attribute.
    """

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(f"Could not read bitmap: {error}")

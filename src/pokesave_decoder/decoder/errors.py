"""Error taxonomy for save image decoding."""


class DecodeError(Exception):
    """Base class for every failure raised while decoding a save image."""


class UnsupportedFormat(DecodeError):
    """Image length matches no known generation."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Unsupported save image size: {length} bytes "
            f"(expected 32768, 65536 or 131072)"
        )


class OutOfRange(DecodeError):
    """A read reached past the end of the image.

    Offset tables are constants matched to validated image sizes, so this
    always indicates a layout defect rather than bad user input.
    """

    def __init__(self, offset: int, width: int, length: int):
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"Read of {width} byte(s) at 0x{offset:X} exceeds image length {length}"
        )


class MalformedField(DecodeError):
    """A stored field holds a structurally impossible value (strict mode only)."""

    def __init__(self, field: str, value: int, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"Malformed {field}={value}: {reason}")

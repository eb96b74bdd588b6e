"""Bounds-checked primitive reads over a raw save image."""

import struct
from typing import Union

from .errors import OutOfRange

ImageLike = Union[bytes, bytearray, memoryview]


class ByteReader:
    """Little-endian byte/word/dword access that never truncates silently."""

    def __init__(self, image: ImageLike):
        self._data = bytes(image)
        self._view = memoryview(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        return self._data

    def _check(self, offset: int, width: int) -> None:
        if offset < 0 or width < 0 or offset + width > len(self._data):
            raise OutOfRange(offset, width, len(self._data))

    def read_byte(self, offset: int) -> int:
        """Decode uint8 at offset."""
        self._check(offset, 1)
        return self._data[offset]

    def read_word(self, offset: int) -> int:
        """Decode uint16 at offset (little-endian)."""
        self._check(offset, 2)
        return struct.unpack_from('<H', self._view, offset)[0]

    def read_dword(self, offset: int) -> int:
        """Decode uint32 at offset (little-endian)."""
        self._check(offset, 4)
        return struct.unpack_from('<I', self._view, offset)[0]

    def read_slice(self, offset: int, length: int) -> bytes:
        """Return exactly ``length`` bytes starting at offset."""
        self._check(offset, length)
        return self._data[offset:offset + length]

    def read_field(self, offset: int, field_type: str) -> int:
        """Decode a typed field (uint8/uint16/uint32) at offset."""
        if field_type == "uint8":
            return self.read_byte(offset)
        elif field_type == "uint16":
            return self.read_word(offset)
        elif field_type == "uint32":
            return self.read_dword(offset)
        else:
            raise ValueError(f"Unsupported field type: {field_type}")

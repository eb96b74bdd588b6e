"""Game Boy text decoding.

Names are stored in a proprietary single-byte charset. Generation 1 ends a
string with 0x50 and has a dedicated species-symbol glyph; generations 2 and 3
end with 0xFF. Decoding is lossy and one-way.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

GEN1_TERMINATOR = 0x50
GEN2_TERMINATOR = 0xFF
SPECIES_SYMBOL_BYTE = 0xE8
SPACE_BYTE = 0x7F


@dataclass(frozen=True)
class TextCodec:
    """Byte-sequence to string decoder for one charset variant."""

    terminator: int
    species_symbol: Optional[str] = None
    unknown_char: str = "?"

    def decode_char(self, byte: int) -> str:
        if 0x80 <= byte <= 0x99:
            return chr(ord('A') + (byte - 0x80))
        elif 0xA0 <= byte <= 0xB9:
            return chr(ord('a') + (byte - 0xA0))
        elif byte == SPECIES_SYMBOL_BYTE and self.species_symbol is not None:
            return self.species_symbol
        elif byte == SPACE_BYTE:
            return ' '
        elif 0xF6 <= byte <= 0xFF:
            return chr(ord('0') + (byte - 0xF6))
        return self.unknown_char

    def decode(self, data: Iterable[int], length: Optional[int] = None) -> str:
        """Decode at most ``length`` bytes, stopping at the terminator.

        Args:
            data: Encoded bytes
            length: Maximum number of bytes to consume (defaults to all of data)

        Returns:
            Decoded text without the terminator
        """
        result = []
        for i, byte in enumerate(data):
            if length is not None and i >= length:
                break
            if byte == self.terminator:
                break
            result.append(self.decode_char(byte))
        return ''.join(result)


def gen1_codec(species_symbol: str = "P", unknown_char: str = "?") -> TextCodec:
    return TextCodec(GEN1_TERMINATOR, species_symbol=species_symbol, unknown_char=unknown_char)


def gen2_codec(unknown_char: str = "?") -> TextCodec:
    return TextCodec(GEN2_TERMINATOR, species_symbol=None, unknown_char=unknown_char)


GEN1_CODEC = gen1_codec()
GEN2_CODEC = gen2_codec()


def decode_text(data: Iterable[int], length: Optional[int], generation: int) -> str:
    """Decode text with the default codec for a generation (1, 2 or 3)."""
    codec = GEN1_CODEC if int(generation) == 1 else GEN2_CODEC
    return codec.decode(data, length)

"""Save image decoder package.

Exposes the decode entry points, value objects and error types.
"""

from .bcd import decode_bcd_money
from .bits import count_bits
from .byte_reader import ByteReader
from .errors import DecodeError, MalformedField, OutOfRange, UnsupportedFormat
from .generation import Generation, detect_generation
from .models import MoveSlot, PlayTime, RosterEntry, TrainerRecord
from .offsets import OFFSET_TABLES, OffsetTable, RosterLayout, StructFieldSpec, get_offset_table
from .save_decoder import DecodeResult, SaveDecoder, decode, decode_or_raise
from .slots import SlotSelection, select_active_slot, select_slot
from .text_codec import GEN1_CODEC, GEN2_CODEC, TextCodec, decode_text

__all__ = [
    "ByteReader",
    "DecodeError",
    "DecodeResult",
    "GEN1_CODEC",
    "GEN2_CODEC",
    "Generation",
    "MalformedField",
    "MoveSlot",
    "OFFSET_TABLES",
    "OffsetTable",
    "OutOfRange",
    "PlayTime",
    "RosterEntry",
    "RosterLayout",
    "SaveDecoder",
    "SlotSelection",
    "StructFieldSpec",
    "TextCodec",
    "TrainerRecord",
    "UnsupportedFormat",
    "count_bits",
    "decode",
    "decode_bcd_money",
    "decode_or_raise",
    "decode_text",
    "detect_generation",
    "get_offset_table",
    "select_active_slot",
    "select_slot",
]

"""Read-only decoder for generation 1-3 monster-collecting game save images."""

from .decoder import (
    DecodeError,
    DecodeResult,
    Generation,
    MalformedField,
    MoveSlot,
    OutOfRange,
    RosterEntry,
    SaveDecoder,
    TrainerRecord,
    UnsupportedFormat,
    decode,
    decode_or_raise,
)

__version__ = "1.0.0"

__all__ = [
    "DecodeError",
    "DecodeResult",
    "Generation",
    "MalformedField",
    "MoveSlot",
    "OutOfRange",
    "RosterEntry",
    "SaveDecoder",
    "TrainerRecord",
    "UnsupportedFormat",
    "decode",
    "decode_or_raise",
]

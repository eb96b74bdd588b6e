"""Per-generation save layouts.

Every offset the decoder touches lives here. Tables are constant values looked
up by generation; nothing in this module is computed from image content.
Offsets target the English releases.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .generation import Generation

MAX_ROSTER_SIZE = 6
MOVE_SLOTS = 4
NAME_LENGTH = 11


@dataclass(frozen=True)
class StructFieldSpec:
    """Description of a packed struct field."""
    name: str
    offset: int
    size: int
    field_type: str


def _u8(name: str, offset: int) -> StructFieldSpec:
    return StructFieldSpec(name, offset, 1, "uint8")


def _u16(name: str, offset: int) -> StructFieldSpec:
    return StructFieldSpec(name, offset, 2, "uint16")


@dataclass(frozen=True)
class RosterLayout:
    """Where the party lives and how one party record is packed."""
    count_offset: int
    records_offset: int
    record_size: int
    fields: Tuple[StructFieldSpec, ...]
    move_ids_offset: int
    move_pp_offset: int
    # Gen 1 keeps species ids in a separate list; gen 2 stores them in the record.
    species_list_offset: Optional[int] = None
    # None means the nickname block follows the last stored record.
    nickname_list_offset: Optional[int] = None
    nickname_length: int = NAME_LENGTH

    def field(self, name: str) -> Optional[StructFieldSpec]:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    def record_offset(self, index: int) -> int:
        return self.records_offset + index * self.record_size

    def nickname_offset(self, index: int, count: int) -> int:
        if self.nickname_list_offset is not None:
            return self.nickname_list_offset + index * self.nickname_length
        return self.records_offset + count * self.record_size + index * self.nickname_length


@dataclass(frozen=True)
class OffsetTable:
    """Constant field layout for one generation."""
    generation: Generation
    trainer_name: int
    trainer_name_length: int
    money: int
    # "bcd": 3 packed decimal bytes; "xor32": little-endian dword XOR money_xor_key
    money_encoding: str
    badges: Optional[int] = None
    badges_size: int = 1
    rival_name: Optional[int] = None
    pokedex_owned: Optional[int] = None
    pokedex_seen: Optional[int] = None
    pokedex_size: int = 0
    play_time: Optional[Tuple[int, int, int]] = None
    gender: Optional[int] = None
    roster: Optional[RosterLayout] = None
    slot_counters: Optional[Tuple[int, int]] = None
    slot_bases: Tuple[int, int] = (0, 0)
    money_xor_key: int = 0


GEN1_TABLE = OffsetTable(
    generation=Generation.ONE,
    trainer_name=0x2598,
    trainer_name_length=NAME_LENGTH,
    rival_name=0x25F6,
    money=0x25F3,
    money_encoding="bcd",
    badges=0x2602,
    badges_size=1,
    pokedex_owned=0x25A3,
    pokedex_seen=0x25B6,
    pokedex_size=19,
    play_time=(0x2CED, 0x2CEE, 0x2CEF),
    roster=RosterLayout(
        count_offset=0x2F2C,
        species_list_offset=0x2F2D,
        records_offset=0x2F34,
        record_size=44,
        nickname_list_offset=0x307E,
        move_ids_offset=0x08,
        move_pp_offset=0x0C,
        fields=(
            _u16("current_hp", 0x01),
            _u8("level", 0x21),
            _u16("max_hp", 0x22),
            _u16("attack", 0x24),
            _u16("defense", 0x26),
            _u16("speed", 0x28),
            _u16("special", 0x2A),
        ),
    ),
)

GEN2_TABLE = OffsetTable(
    generation=Generation.TWO,
    trainer_name=0x2009,
    trainer_name_length=NAME_LENGTH,
    money=0x23DB,
    money_encoding="bcd",
    # Johto badges in the low byte, Kanto badges in the high byte
    badges=0x23E4,
    badges_size=2,
    play_time=(0x2053, 0x2054, 0x2055),
    roster=RosterLayout(
        count_offset=0x288A,
        records_offset=0x288B,
        record_size=48,
        move_ids_offset=0x02,
        move_pp_offset=0x06,
        fields=(
            _u8("species_id", 0x00),
            _u16("current_hp", 0x01),
            _u8("level", 0x1F),
            _u16("max_hp", 0x22),
            _u16("attack", 0x24),
            _u16("defense", 0x26),
            _u16("speed", 0x28),
            _u16("special_attack", 0x2A),
            _u16("special_defense", 0x2C),
        ),
    ),
)

# Offsets are relative to the active slot base, except slot_counters.
GEN3_TABLE = OffsetTable(
    generation=Generation.THREE,
    trainer_name=0x0000,
    trainer_name_length=7,
    gender=0x0008,
    money=0x0490,
    money_encoding="xor32",
    money_xor_key=0x12345678,
    slot_counters=(0x0FFC, 0xEFFC),
    slot_bases=(0x0000, 0xE000),
)

OFFSET_TABLES: Dict[Generation, OffsetTable] = {
    Generation.ONE: GEN1_TABLE,
    Generation.TWO: GEN2_TABLE,
    Generation.THREE: GEN3_TABLE,
}


def get_offset_table(generation: Generation) -> OffsetTable:
    return OFFSET_TABLES[generation]

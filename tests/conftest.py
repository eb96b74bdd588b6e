"""Shared fixtures for save decoder tests.

Builders here write synthetic save images byte-by-byte at the documented
offsets so tests never depend on real save files.
"""

import struct
from typing import Dict, List, Optional, Sequence

import pytest

GEN1_SIZE = 32768
GEN2_SIZE = 65536
GEN3_SIZE = 131072


def encode_text(text: str, terminator: int, length: int = 11) -> bytes:
    """Encode A-Z, a-z, 0-9 and space into the Game Boy charset, padded with the terminator."""
    out = bytearray()
    for char in text:
        if 'A' <= char <= 'Z':
            out.append(0x80 + ord(char) - ord('A'))
        elif 'a' <= char <= 'z':
            out.append(0xA0 + ord(char) - ord('a'))
        elif '0' <= char <= '9':
            out.append(0xF6 + ord(char) - ord('0'))
        elif char == ' ':
            out.append(0x7F)
        else:
            raise ValueError(f"Cannot encode {char!r}")
    out.append(terminator)
    while len(out) < length:
        out.append(terminator)
    return bytes(out[:length])


def make_gen1_mon(
    species: int = 0x99,
    nickname: str = "BULBA",
    level: int = 12,
    current_hp: int = 30,
    max_hp: int = 33,
    attack: int = 18,
    defense: int = 19,
    speed: int = 17,
    special: int = 21,
    moves: Sequence[int] = (33, 45, 0, 0),
    pp: Sequence[int] = (35, 40, 0, 0),
) -> Dict:
    return dict(species=species, nickname=nickname, level=level, current_hp=current_hp,
                max_hp=max_hp, attack=attack, defense=defense, speed=speed,
                special=special, moves=list(moves), pp=list(pp))


class Gen1Builder:
    """Writes generation 1 fields into a 32 KB image."""

    def __init__(self):
        self.data = bytearray(GEN1_SIZE)

    def name(self, raw: bytes) -> "Gen1Builder":
        self.data[0x2598:0x2598 + len(raw)] = raw
        return self

    def rival(self, raw: bytes) -> "Gen1Builder":
        self.data[0x25F6:0x25F6 + len(raw)] = raw
        return self

    def money(self, raw: bytes) -> "Gen1Builder":
        self.data[0x25F3:0x25F6] = raw
        return self

    def badges(self, mask: int) -> "Gen1Builder":
        self.data[0x2602] = mask
        return self

    def pokedex(self, owned: bytes, seen: bytes) -> "Gen1Builder":
        self.data[0x25A3:0x25A3 + len(owned)] = owned
        self.data[0x25B6:0x25B6 + len(seen)] = seen
        return self

    def play_time(self, hours: int, minutes: int, seconds: int) -> "Gen1Builder":
        self.data[0x2CED] = hours
        self.data[0x2CEE] = minutes
        self.data[0x2CEF] = seconds
        return self

    def party_count(self, count: int) -> "Gen1Builder":
        self.data[0x2F2C] = count
        return self

    def mon(self, index: int, mon: Dict) -> "Gen1Builder":
        self.data[0x2F2D + index] = mon["species"]
        base = 0x2F34 + index * 44
        struct.pack_into('<H', self.data, base + 0x01, mon["current_hp"])
        self.data[base + 0x08:base + 0x0C] = bytes(mon["moves"])
        self.data[base + 0x0C:base + 0x10] = bytes(mon["pp"])
        self.data[base + 0x21] = mon["level"]
        struct.pack_into('<H', self.data, base + 0x22, mon["max_hp"])
        struct.pack_into('<H', self.data, base + 0x24, mon["attack"])
        struct.pack_into('<H', self.data, base + 0x26, mon["defense"])
        struct.pack_into('<H', self.data, base + 0x28, mon["speed"])
        struct.pack_into('<H', self.data, base + 0x2A, mon["special"])
        nick = 0x307E + index * 11
        self.data[nick:nick + 11] = encode_text(mon["nickname"], 0x50)
        return self

    def build(self) -> bytes:
        return bytes(self.data)


class Gen2Builder:
    """Writes generation 2 fields into a 64 KB image."""

    def __init__(self):
        self.data = bytearray(GEN2_SIZE)

    def name(self, text: str) -> "Gen2Builder":
        self.data[0x2009:0x2009 + 11] = encode_text(text, 0xFF)
        return self

    def money(self, raw: bytes) -> "Gen2Builder":
        self.data[0x23DB:0x23DE] = raw
        return self

    def badges(self, johto: int, kanto: int) -> "Gen2Builder":
        self.data[0x23E4] = johto
        self.data[0x23E5] = kanto
        return self

    def play_time(self, hours: int, minutes: int, seconds: int) -> "Gen2Builder":
        self.data[0x2053] = hours
        self.data[0x2054] = minutes
        self.data[0x2055] = seconds
        return self

    def party(self, mons: List[Dict], stored_count: Optional[int] = None) -> "Gen2Builder":
        count = len(mons) if stored_count is None else stored_count
        self.data[0x288A] = count
        for index, mon in enumerate(mons):
            base = 0x288B + index * 48
            self.data[base] = mon["species"]
            struct.pack_into('<H', self.data, base + 0x01, mon["current_hp"])
            # Move ids start inside the current HP word; written last they win.
            self.data[base + 0x02:base + 0x06] = bytes(mon["moves"])
            self.data[base + 0x06:base + 0x0A] = bytes(mon["pp"])
            self.data[base + 0x1F] = mon["level"]
            struct.pack_into('<H', self.data, base + 0x22, mon["max_hp"])
            struct.pack_into('<H', self.data, base + 0x24, mon["attack"])
            struct.pack_into('<H', self.data, base + 0x26, mon["defense"])
            struct.pack_into('<H', self.data, base + 0x28, mon["speed"])
            struct.pack_into('<H', self.data, base + 0x2A, mon["special_attack"])
            struct.pack_into('<H', self.data, base + 0x2C, mon["special_defense"])
        names_base = 0x288B + min(count, 6) * 48
        for index, mon in enumerate(mons):
            nick = names_base + index * 11
            self.data[nick:nick + 11] = encode_text(mon["nickname"], 0xFF)
        return self

    def build(self) -> bytes:
        return bytes(self.data)


class Gen3Builder:
    """Writes the generation 3 fields the decoder reads into a 128 KB image."""

    XOR_KEY = 0x12345678

    def __init__(self):
        self.data = bytearray(GEN3_SIZE)

    def counters(self, slot0: int, slot1: int) -> "Gen3Builder":
        struct.pack_into('<I', self.data, 0x0FFC, slot0)
        struct.pack_into('<I', self.data, 0xEFFC, slot1)
        return self

    def slot(self, base: int, name: str, gender: int, money: int) -> "Gen3Builder":
        self.data[base:base + 7] = encode_text(name, 0xFF, length=7)
        self.data[base + 0x08] = gender
        struct.pack_into('<I', self.data, base + 0x0490, money ^ self.XOR_KEY)
        return self

    def build(self) -> bytes:
        return bytes(self.data)


@pytest.fixture
def gen1_builder() -> Gen1Builder:
    return Gen1Builder()


@pytest.fixture
def gen2_builder() -> Gen2Builder:
    return Gen2Builder()


@pytest.fixture
def gen3_builder() -> Gen3Builder:
    return Gen3Builder()


@pytest.fixture
def gen2_mon():
    """Factory for generation 2 party member fields."""
    def _make(**overrides) -> Dict:
        mon = dict(species=152, nickname="CHIKO", level=14, current_hp=40, max_hp=42,
                   attack=20, defense=25, speed=19, special_attack=21, special_defense=26,
                   moves=[33, 45, 0, 0], pp=[35, 40, 0, 0])
        mon.update(overrides)
        return mon
    return _make


@pytest.fixture
def gen1_mon():
    """Factory for generation 1 party member fields."""
    return make_gen1_mon

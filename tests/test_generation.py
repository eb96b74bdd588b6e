"""Tests for generation detection and generation 3 slot selection."""

import struct

import pytest

from pokesave_decoder.decoder.byte_reader import ByteReader
from pokesave_decoder.decoder.errors import UnsupportedFormat
from pokesave_decoder.decoder.generation import Generation, detect_generation
from pokesave_decoder.decoder.slots import select_active_slot, select_slot


class TestDetectGeneration:
    """Exact-size generation detection."""

    @pytest.mark.parametrize("length,expected", [
        (32768, Generation.ONE),
        (65536, Generation.TWO),
        (131072, Generation.THREE),
    ])
    def test_known_sizes(self, length, expected):
        assert detect_generation(length) == expected

    @pytest.mark.parametrize("length", [0, 1, 32767, 32769, 65535, 98304, 131071, 131073, 262144])
    def test_other_sizes_unsupported(self, length):
        with pytest.raises(UnsupportedFormat) as exc_info:
            detect_generation(length)
        assert exc_info.value.length == length
        assert str(length) in str(exc_info.value)

    def test_generation_numbers_and_descriptions(self):
        assert int(Generation.ONE) == 1
        assert int(Generation.THREE) == 3
        assert "Red/Blue/Yellow" in Generation.ONE.description
        assert "Gold/Silver/Crystal" in Generation.TWO.description
        assert "Emerald" in Generation.THREE.description


class TestSelectSlot:
    """Save counter comparison."""

    def test_greater_slot1_wins(self):
        assert select_slot(5, 9) == 1

    def test_tie_defaults_to_slot0(self):
        assert select_slot(7, 7) == 0

    def test_greater_slot0_wins(self):
        assert select_slot(9, 5) == 0

    def test_counters_are_unsigned(self):
        assert select_slot(0x7FFFFFFF, 0x80000000) == 1


class TestSelectActiveSlot:
    """Slot selection over an image."""

    @pytest.fixture
    def image(self):
        return bytearray(131072)

    def test_reads_counters_and_resolves_base(self, image):
        struct.pack_into('<I', image, 0x0FFC, 5)
        struct.pack_into('<I', image, 0xEFFC, 9)

        selection = select_active_slot(ByteReader(image), (0x0FFC, 0xEFFC), (0x0000, 0xE000))

        assert selection.slot == 1
        assert selection.base_offset == 0xE000
        assert selection.counters == (5, 9)

    def test_zeroed_image_uses_slot0(self, image):
        selection = select_active_slot(ByteReader(image), (0x0FFC, 0xEFFC), (0x0000, 0xE000))
        assert selection.slot == 0
        assert selection.base_offset == 0

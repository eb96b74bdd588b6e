"""Tests for population counts."""

import pytest

from pokesave_decoder.decoder.bits import count_bits


class TestCountBits:
    """Test count_bits over ints and byte ranges."""

    def test_single_bytes(self):
        assert count_bits(0x00) == 0
        assert count_bits(0xFF) == 8
        assert count_bits(0b1010_0001) == 3

    def test_word_mask(self):
        assert count_bits(0xFF01) == 9

    def test_byte_range(self):
        assert count_bits([0x0F, 0xF0]) == 8
        assert count_bits(bytes([0xFF] * 19)) == 152
        assert count_bits(bytearray([0x01, 0x02, 0x04])) == 3

    def test_empty_range(self):
        assert count_bits(b"") == 0

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            count_bits(-1)

    def test_returns_python_int(self):
        assert type(count_bits(b"\x03")) is int

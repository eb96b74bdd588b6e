"""Population counts for badge masks and Pokedex bitmaps."""

from typing import Sequence, Union

import numpy as np

BitSource = Union[int, bytes, bytearray, memoryview, Sequence[int]]


def count_bits(data: BitSource) -> int:
    """Count set bits in an integer mask or across a byte sequence."""
    if isinstance(data, int):
        if data < 0:
            raise ValueError(f"Cannot count bits of negative value: {data}")
        return bin(data).count("1")
    if len(data) == 0:
        return 0
    return int(np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8)).sum())

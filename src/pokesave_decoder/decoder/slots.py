"""Active save slot selection for generation 3.

Generation 3 keeps two alternating save regions. Each ends with a 32-bit save
counter; the region with the larger counter was written last.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from .byte_reader import ByteReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotSelection:
    """Outcome of comparing the two save counters."""
    slot: int
    base_offset: int
    counters: Tuple[int, int]


def select_slot(counter0: int, counter1: int) -> int:
    """Return 1 only when slot 1's counter is strictly greater, else 0."""
    return 1 if counter1 > counter0 else 0


def select_active_slot(
    reader: ByteReader,
    counter_offsets: Tuple[int, int],
    slot_bases: Tuple[int, int],
) -> SlotSelection:
    """Read both save counters and resolve the base offset of the active slot."""
    counters = (
        reader.read_dword(counter_offsets[0]),
        reader.read_dword(counter_offsets[1]),
    )
    slot = select_slot(*counters)
    logger.debug("Save counters %s -> slot %d", counters, slot)
    return SlotSelection(slot=slot, base_offset=slot_bases[slot], counters=counters)

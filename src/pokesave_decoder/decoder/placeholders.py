"""Fixed sample content for the generation 3 path.

Generation 3 party data is encrypted and shuffled per monster; that is not
decoded here. Records built from these values carry roster_is_placeholder /
badges_are_placeholder so callers never mistake them for save contents.
"""

from typing import Tuple

from .models import MoveSlot, RosterEntry

PLACEHOLDER_BADGES = 0xFF
PLACEHOLDER_BADGE_COUNT = 8

PLACEHOLDER_ROSTER: Tuple[RosterEntry, ...] = (
    RosterEntry(
        species_id=25, nickname="PIKA", level=25,
        current_hp=65, max_hp=65, attack=55, defense=40, speed=90,
        special_attack=50, special_defense=50,
        moves=(MoveSlot(85, 15, 15), MoveSlot(98, 30, 30),
               MoveSlot(86, 20, 20), MoveSlot(21, 20, 20)),
    ),
    RosterEntry(
        species_id=6, nickname="CHARRY", level=36,
        current_hp=110, max_hp=110, attack=84, defense=78, speed=100,
        special_attack=109, special_defense=85,
        moves=(MoveSlot(53, 15, 15), MoveSlot(15, 30, 30),
               MoveSlot(19, 15, 15), MoveSlot(17, 35, 35)),
    ),
    RosterEntry(
        species_id=9, nickname="BLASTY", level=42,
        current_hp=134, max_hp=134, attack=83, defense=100, speed=78,
        special_attack=85, special_defense=105,
        moves=(MoveSlot(57, 15, 15), MoveSlot(58, 10, 10),
               MoveSlot(34, 15, 15), MoveSlot(59, 5, 5)),
    ),
)

"""Decoded save records.

All records are frozen value objects built bottom-up by the save decoder and
owned by the resulting TrainerRecord.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .generation import Generation

UNKNOWN_PLAY_TIME = "??:??:??"


@dataclass(frozen=True)
class MoveSlot:
    """One learned move. max_pp is None unless a caller-side directory supplies it."""
    move_id: int
    pp: int
    max_pp: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.move_id, "pp": self.pp, "max_pp": self.max_pp}


@dataclass(frozen=True)
class RosterEntry:
    """Party monster."""
    species_id: int
    nickname: str
    level: int
    current_hp: int
    max_hp: int
    attack: int
    defense: int
    speed: int
    special: Optional[int] = None  # Gen 1
    special_attack: Optional[int] = None  # Gen 2+
    special_defense: Optional[int] = None  # Gen 2+
    moves: Tuple[MoveSlot, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "species_id": self.species_id,
            "nickname": self.nickname,
            "level": self.level,
            "current_hp": self.current_hp,
            "max_hp": self.max_hp,
            "attack": self.attack,
            "defense": self.defense,
            "speed": self.speed,
        }
        if self.special is not None:
            data["special"] = self.special
        else:
            data["special_attack"] = self.special_attack
            data["special_defense"] = self.special_defense
        data["moves"] = [move.to_dict() for move in self.moves]
        return data


@dataclass(frozen=True)
class PlayTime:
    """Elapsed in-game time."""
    hours: int
    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @property
    def formatted(self) -> str:
        return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class TrainerRecord:
    """Complete decode of one save image.

    Attributes:
        generation: Save-format era the image was decoded as
        trainer_name: Player name
        money: Currency, 0-999999
        badges: Raw badge bitmask
        badge_count: Number of set badge bits
        play_time: Elapsed time, or None when the layout does not expose it
        roster: Party in slot order (0-6 entries)
        rival_name: Rival name (generation 1 only)
        pokedex_owned: Owned species count (generation 1 only)
        pokedex_seen: Seen species count (generation 1 only)
        trainer_gender: "Male"/"Female" (generation 3 only)
        active_slot: Selected save slot (generation 3 only)
        roster_is_placeholder: Roster is sample content, not decoded data
        badges_are_placeholder: Badge fields are a fixed value, not decoded data
    """
    generation: Generation
    trainer_name: str
    money: int
    badges: int
    badge_count: int
    play_time: Optional[PlayTime]
    roster: Tuple[RosterEntry, ...] = field(default_factory=tuple)
    rival_name: Optional[str] = None
    pokedex_owned: Optional[int] = None
    pokedex_seen: Optional[int] = None
    trainer_gender: Optional[str] = None
    active_slot: Optional[int] = None
    roster_is_placeholder: bool = False
    badges_are_placeholder: bool = False

    @property
    def generation_number(self) -> int:
        return int(self.generation)

    @property
    def game_version(self) -> str:
        return self.generation.description

    @property
    def badge_summary(self) -> str:
        return f"{self.badge_count} badges"

    @property
    def play_time_formatted(self) -> str:
        if self.play_time is None:
            return UNKNOWN_PLAY_TIME
        return self.play_time.formatted

    def to_dict(self, include_placeholders: bool = True) -> Dict[str, Any]:
        """Plain-data view suitable for JSON output."""
        roster = self.roster
        if self.roster_is_placeholder and not include_placeholders:
            roster = ()
        return {
            "generation": self.generation_number,
            "game_version": self.game_version,
            "trainer_name": self.trainer_name,
            "rival_name": self.rival_name,
            "trainer_gender": self.trainer_gender,
            "money": self.money,
            "badges": self.badges,
            "badge_count": self.badge_count,
            "badges_are_placeholder": self.badges_are_placeholder,
            "pokedex_owned": self.pokedex_owned,
            "pokedex_seen": self.pokedex_seen,
            "play_time": self.play_time_formatted,
            "play_time_seconds": self.play_time.total_seconds if self.play_time else None,
            "active_slot": self.active_slot,
            "roster_is_placeholder": self.roster_is_placeholder,
            "roster": [entry.to_dict() for entry in roster],
        }

"""Save image decoder.

Turns a raw save image into a TrainerRecord. All per-generation differences are
expressed by the OffsetTable for the detected generation; the decoder itself only
walks the table.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .bcd import MONEY_MAX, MONEY_SIZE, decode_bcd_money
from .bits import count_bits
from .byte_reader import ByteReader, ImageLike
from .errors import DecodeError, MalformedField, OutOfRange
from .generation import Generation, detect_generation
from .models import MoveSlot, PlayTime, RosterEntry, TrainerRecord
from .offsets import MAX_ROSTER_SIZE, MOVE_SLOTS, OffsetTable, RosterLayout, get_offset_table
from .placeholders import PLACEHOLDER_BADGE_COUNT, PLACEHOLDER_BADGES, PLACEHOLDER_ROSTER
from .slots import select_active_slot
from .text_codec import TextCodec, gen1_codec, gen2_codec

if TYPE_CHECKING:
    from ..config.loader import AppConfig

logger = logging.getLogger(__name__)

GENDERS = ("Male", "Female")


@dataclass(frozen=True)
class DecodeResult:
    """Either a complete record or the error that prevented one."""
    record: Optional[TrainerRecord] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.record is not None

    def unwrap(self) -> TrainerRecord:
        """Return the record or raise the stored error."""
        if self.error is not None:
            raise self.error
        assert self.record is not None
        return self.record


class SaveDecoder:
    """Decoder for generation 1-3 save images."""

    def __init__(self, species_symbol: str = "P", unknown_char: str = "?", strict: bool = False):
        """Initialize decoder.

        Args:
            species_symbol: Replacement for the generation 1 species glyph
            unknown_char: Replacement for bytes outside the known charset
            strict: Reject out-of-range roster counts instead of clamping them
        """
        self.strict = strict
        self._codecs: Dict[Generation, TextCodec] = {
            Generation.ONE: gen1_codec(species_symbol, unknown_char),
            Generation.TWO: gen2_codec(unknown_char),
            Generation.THREE: gen2_codec(unknown_char),
        }

    @classmethod
    def from_config(cls, config: "AppConfig") -> "SaveDecoder":
        return cls(
            species_symbol=config.text.species_symbol,
            unknown_char=config.text.unknown_char,
            strict=config.decoder.strict,
        )

    def decode(self, image: ImageLike) -> DecodeResult:
        """Decode an image, returning a result instead of raising on bad input.

        OutOfRange is not a user-facing outcome: it means an offset table does
        not fit its own generation's image size, and it propagates.
        """
        try:
            return DecodeResult(record=self.decode_or_raise(image))
        except OutOfRange:
            raise
        except DecodeError as e:
            return DecodeResult(error=e)

    def decode_or_raise(self, image: ImageLike) -> TrainerRecord:
        """Decode an image.

        Raises:
            UnsupportedFormat: If the image size matches no generation
            MalformedField: If strict mode rejects a stored value
            OutOfRange: If an offset table reaches past the image (layout defect)
        """
        generation = detect_generation(len(image))
        reader = ByteReader(image)
        table = get_offset_table(generation)

        try:
            if generation == Generation.THREE:
                record = self._decode_gen3(reader, table)
            else:
                record = self._decode_standard(reader, table)
        except OutOfRange as e:
            logger.critical("Offset table for %s reads out of bounds: %s", generation.name, e)
            raise

        logger.info(
            "Decoded %s save: trainer=%r party=%d%s",
            generation.name, record.trainer_name, len(record.roster),
            " (placeholder roster)" if record.roster_is_placeholder else "",
        )
        return record

    def _decode_standard(self, reader: ByteReader, table: OffsetTable) -> TrainerRecord:
        codec = self._codecs[table.generation]
        badges = self._decode_badges(reader, table)

        rival_name = None
        if table.rival_name is not None:
            rival_name = codec.decode(reader.read_slice(table.rival_name, table.trainer_name_length))

        pokedex_owned = pokedex_seen = None
        if table.pokedex_owned is not None:
            pokedex_owned = count_bits(reader.read_slice(table.pokedex_owned, table.pokedex_size))
        if table.pokedex_seen is not None:
            pokedex_seen = count_bits(reader.read_slice(table.pokedex_seen, table.pokedex_size))

        roster: Tuple[RosterEntry, ...] = ()
        if table.roster is not None:
            roster = self._decode_roster(reader, table.roster, codec)

        return TrainerRecord(
            generation=table.generation,
            trainer_name=codec.decode(reader.read_slice(table.trainer_name, table.trainer_name_length)),
            rival_name=rival_name,
            money=self._decode_money(reader, table, 0),
            badges=badges,
            badge_count=count_bits(badges),
            pokedex_owned=pokedex_owned,
            pokedex_seen=pokedex_seen,
            play_time=self._decode_play_time(reader, table),
            roster=roster,
        )

    def _decode_gen3(self, reader: ByteReader, table: OffsetTable) -> TrainerRecord:
        """Decode the generation 3 fields that are read from the image.

        Badges and roster are fixed placeholder values and the record is
        flagged accordingly.
        """
        assert table.slot_counters is not None
        selection = select_active_slot(reader, table.slot_counters, table.slot_bases)
        base = selection.base_offset
        codec = self._codecs[table.generation]

        gender_byte = reader.read_byte(base + table.gender) if table.gender is not None else 0
        return TrainerRecord(
            generation=table.generation,
            trainer_name=codec.decode(reader.read_slice(base + table.trainer_name, table.trainer_name_length)),
            trainer_gender=GENDERS[0] if gender_byte == 0 else GENDERS[1],
            money=self._decode_money(reader, table, base),
            badges=PLACEHOLDER_BADGES,
            badge_count=PLACEHOLDER_BADGE_COUNT,
            play_time=None,
            roster=PLACEHOLDER_ROSTER,
            active_slot=selection.slot,
            roster_is_placeholder=True,
            badges_are_placeholder=True,
        )

    def _decode_money(self, reader: ByteReader, table: OffsetTable, base: int) -> int:
        offset = base + table.money
        if table.money_encoding == "bcd":
            return decode_bcd_money(reader.read_slice(offset, MONEY_SIZE))
        elif table.money_encoding == "xor32":
            return min(reader.read_dword(offset) ^ table.money_xor_key, MONEY_MAX)
        raise ValueError(f"Unknown money encoding: {table.money_encoding}")

    def _decode_badges(self, reader: ByteReader, table: OffsetTable) -> int:
        if table.badges is None:
            return 0
        if table.badges_size == 2:
            return reader.read_word(table.badges)
        return reader.read_byte(table.badges)

    def _decode_play_time(self, reader: ByteReader, table: OffsetTable) -> Optional[PlayTime]:
        if table.play_time is None:
            return None
        hours, minutes, seconds = (reader.read_byte(offset) for offset in table.play_time)
        return PlayTime(hours=hours, minutes=minutes, seconds=seconds)

    def _decode_roster(self, reader: ByteReader, layout: RosterLayout, codec: TextCodec) -> Tuple[RosterEntry, ...]:
        stored_count = reader.read_byte(layout.count_offset)
        count = stored_count
        if stored_count > MAX_ROSTER_SIZE:
            if self.strict:
                raise MalformedField(
                    "party_count", stored_count, f"exceeds maximum party size {MAX_ROSTER_SIZE}"
                )
            logger.warning("Party count %d exceeds %d, clamping", stored_count, MAX_ROSTER_SIZE)
            count = MAX_ROSTER_SIZE

        return tuple(
            self._decode_roster_entry(reader, layout, codec, index, count)
            for index in range(count)
        )

    def _decode_roster_entry(
        self,
        reader: ByteReader,
        layout: RosterLayout,
        codec: TextCodec,
        index: int,
        count: int,
    ) -> RosterEntry:
        record_offset = layout.record_offset(index)
        values: Dict[str, int] = {
            spec.name: reader.read_field(record_offset + spec.offset, spec.field_type)
            for spec in layout.fields
        }

        if layout.species_list_offset is not None:
            species_id = reader.read_byte(layout.species_list_offset + index)
        else:
            species_id = values.pop("species_id")

        nickname = codec.decode(
            reader.read_slice(layout.nickname_offset(index, count), layout.nickname_length)
        )

        return RosterEntry(
            species_id=species_id,
            nickname=nickname,
            moves=self._decode_moves(reader, layout, record_offset),
            **values,
        )

    def _decode_moves(self, reader: ByteReader, layout: RosterLayout, record_offset: int) -> Tuple[MoveSlot, ...]:
        """Collect the non-empty move slots; each stored slot is checked on its own."""
        moves: List[MoveSlot] = []
        for slot in range(MOVE_SLOTS):
            move_id = reader.read_byte(record_offset + layout.move_ids_offset + slot)
            if move_id == 0:
                continue
            pp = reader.read_byte(record_offset + layout.move_pp_offset + slot)
            moves.append(MoveSlot(move_id=move_id, pp=pp))
        return tuple(moves)


_default_decoder = SaveDecoder()


def decode(image: ImageLike, config: Optional["AppConfig"] = None) -> DecodeResult:
    """Decode a save image with default or configured settings."""
    decoder = SaveDecoder.from_config(config) if config is not None else _default_decoder
    return decoder.decode(image)


def decode_or_raise(image: ImageLike, config: Optional["AppConfig"] = None) -> TrainerRecord:
    """Decode a save image, raising DecodeError subclasses on failure."""
    decoder = SaveDecoder.from_config(config) if config is not None else _default_decoder
    return decoder.decode_or_raise(image)

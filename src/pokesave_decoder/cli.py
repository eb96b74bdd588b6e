"""Command-line interface for decoding save files.

Reads a save image from disk, decodes it, and prints a trainer summary or
JSON. File access stays here; the decoder only ever sees bytes.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config.loader import AppConfig, ConfigLoader, ConfigLoadError, LOG_LEVELS
from .decoder import SaveDecoder, TrainerRecord
from .utils.logging_setup import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_IO_ERROR = 2


def format_summary(record: TrainerRecord, include_placeholders: bool = True) -> str:
    """Render a record as a plain-text trainer card."""
    lines = [
        f"Trainer: {record.trainer_name}",
        f"Game: {record.game_version}",
    ]
    if record.rival_name is not None:
        lines.append(f"Rival: {record.rival_name}")
    if record.trainer_gender is not None:
        lines.append(f"Gender: {record.trainer_gender}")
    lines.append(f"Money: ${record.money}")

    badges = record.badge_summary
    if record.badges_are_placeholder:
        badges += " (placeholder)"
    lines.append(f"Badges: {badges}")

    if record.pokedex_owned is not None:
        lines.append(f"Pokedex: {record.pokedex_owned} owned, {record.pokedex_seen} seen")
    lines.append(f"Play Time: {record.play_time_formatted}")

    show_roster = include_placeholders or not record.roster_is_placeholder
    header = f"Party ({len(record.roster)})"
    if record.roster_is_placeholder:
        header += " [placeholder, not read from save]"
    lines.append(header)

    if show_roster:
        for entry in record.roster:
            lines.append(f"  #{entry.species_id:03d} {entry.nickname} Lv.{entry.level}"
                         f"  HP {entry.current_hp}/{entry.max_hp}")
            if entry.special is not None:
                stats = f"SPC {entry.special}"
            else:
                stats = f"SPA {entry.special_attack} SPD {entry.special_defense}"
            lines.append(f"    ATK {entry.attack} DEF {entry.defense} SPE {entry.speed} {stats}")
            for move in entry.moves:
                pp = f"{move.pp}/{move.max_pp}" if move.max_pp is not None else f"{move.pp}"
                lines.append(f"    - Move #{move.move_id} (PP: {pp})")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokesave-decoder",
        description="Decode a generation 1-3 save file into a trainer summary",
    )
    parser.add_argument("save_file", type=Path, help="Path to a .sav image")
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML config file (default: config/decoder_config.yaml)")
    parser.add_argument("--json", action="store_true", help="Print the record as JSON")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None,
                        help="Override the configured log level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_config(path: Optional[Path]) -> AppConfig:
    return ConfigLoader(path).load_config()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = _load_config(args.config)
    except ConfigLoadError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    log_settings = config.logging
    try:
        setup_logging(
            log_dir=log_settings.log_dir,
            log_level=args.log_level or log_settings.level,
            enable_json=log_settings.enable_json,
            enable_console=log_settings.enable_console,
        )
    except OSError as e:
        print(f"Could not set up logging in {log_settings.log_dir}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    try:
        try:
            image = args.save_file.read_bytes()
        except OSError as e:
            logger.error("Could not read save file %s: %s", args.save_file, e)
            print(f"Could not read {args.save_file}: {e}", file=sys.stderr)
            return EXIT_IO_ERROR

        logger.debug("Read %d bytes from %s", len(image), args.save_file)
        result = SaveDecoder.from_config(config).decode(image)
        if not result.ok:
            print(f"Decode failed: {result.error}", file=sys.stderr)
            return EXIT_DECODE_ERROR

        record = result.unwrap()
        include_placeholders = config.output.include_placeholders
        if args.json:
            indent = config.output.indent or None
            print(json.dumps(record.to_dict(include_placeholders), indent=indent, ensure_ascii=False))
        else:
            print(format_summary(record, include_placeholders))
        return EXIT_OK
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())

"""Entry point for `python -m beatflap` or the `beatflap` console script."""

import argparse
import logging
from pathlib import Path

from beatflap.app import App
from beatflap.models import RhythmMode
from beatflap.scores import DEFAULT_DB_PATH
from beatflap.settings import load_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="BeatFlap — rhythm-paced arcade flapper")
    parser.add_argument("--db-path", type=Path, default=DEFAULT_DB_PATH, help="SQLite file for the best score")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle placement")
    parser.add_argument("--midi-port", type=int, default=None, help="MIDI input port index for the beat pad")
    parser.add_argument(
        "--rhythm",
        choices=[m.name.lower() for m in RhythmMode],
        default=None,
        help="Where beats come from: passed obstacles or an external pulse source",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    settings = load_settings()
    if args.midi_port is not None:
        settings.midi_port = args.midi_port
    rhythm_mode = RhythmMode[args.rhythm.upper()] if args.rhythm else None

    app = App(settings=settings, db_path=args.db_path, seed=args.seed, rhythm_mode=rhythm_mode)
    app.run()


if __name__ == "__main__":
    main()

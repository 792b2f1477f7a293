"""User settings persisted as JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable

from beatflap.models import RhythmMode

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".beatflap" / "settings.json"


@dataclass
class GameSettings:
    volume: float = 0.3
    soundfont_path: str = ""
    midi_port: int | None = None
    midi_velocity_threshold: int = 40  # note-on velocity that counts as a beat
    rhythm_mode: str = "PASSAGE"
    tempo_window: int = 1

    def get_rhythm_mode(self) -> RhythmMode:
        try:
            return RhythmMode[self.rhythm_mode.upper()]
        except (KeyError, AttributeError):
            return RhythmMode.PASSAGE


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# Per-field acceptance tests; values that fail keep the default
_VALIDATORS: dict[str, Callable[[Any], bool]] = {
    "volume": lambda v: _is_number(v) and 0.0 <= v <= 1.0,
    "soundfont_path": lambda v: isinstance(v, str),
    "midi_port": lambda v: v is None or (_is_int(v) and v >= 0),
    "midi_velocity_threshold": lambda v: _is_int(v) and 0 <= v <= 127,
    "rhythm_mode": lambda v: isinstance(v, str) and v.upper() in RhythmMode.__members__,
    "tempo_window": lambda v: _is_int(v) and v >= 1,
}


def load_settings(path: Path = DEFAULT_SETTINGS_PATH) -> GameSettings:
    """Load settings from disk, returning defaults if absent or unreadable.

    Unknown keys are ignored and invalid values fall back to their defaults.
    """
    if not path.exists():
        return GameSettings()
    try:
        data = json.loads(path.read_text())
        game = data.get("game", {})
        accepted: dict[str, Any] = {}
        for key, value in game.items():
            validator = _VALIDATORS.get(key)
            if validator is None:
                continue
            if validator(value):
                accepted[key] = value
            else:
                logger.warning("Ignoring invalid setting %s=%r in %s", key, value, path)
        return GameSettings(**accepted)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return GameSettings()


def save_settings(settings: GameSettings, path: Path = DEFAULT_SETTINGS_PATH) -> None:
    """Persist settings, preserving any other sections already in the file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data: dict = {}
    if path.exists():
        try:
            data = json.loads(path.read_text())
        except ValueError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    data["game"] = asdict(settings)
    path.write_text(json.dumps(data, indent=2))

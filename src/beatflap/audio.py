"""Sound cues via FluidSynth + SoundFonts."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import fluidsynth

from beatflap.models import Cue

PERCUSSION_CHANNEL = 9

# General MIDI percussion note and velocity per cue
CUE_NOTES: dict[Cue, tuple[int, int]] = {
    Cue.JUMP: (76, 90),    # hi wood block
    Cue.SCORE: (81, 100),  # open triangle
    Cue.CLAP: (39, 100),   # hand clap
    Cue.HIT: (49, 120),    # crash cymbal
}
CUE_DURATION = 0.25  # seconds


def _detect_audio_driver() -> str:
    """Auto-detect the appropriate FluidSynth audio driver for the platform."""
    if sys.platform == "linux":
        return "pulseaudio"
    elif sys.platform == "darwin":
        return "coreaudio"
    elif sys.platform == "win32":
        return "dsound"
    return "alsa"


class AudioEngine:
    """Wraps FluidSynth for low-latency cue playback."""

    def __init__(self, soundfont_path: str | Path | None = None, volume: float = 0.3) -> None:
        self.fs = fluidsynth.Synth(gain=0.8)
        self.fs.start(driver=_detect_audio_driver())
        self._sfid: int | None = None
        self._pending_offs: list[tuple[float, int]] = []  # (off_time, pitch)
        if soundfont_path:
            self.load_soundfont(soundfont_path)
        self.set_volume(volume)

    def load_soundfont(self, path: str | Path) -> None:
        self._sfid = self.fs.sfload(str(path))
        # bank 128 holds the drum kits
        self.fs.program_select(PERCUSSION_CHANNEL, self._sfid, 128, 0)

    def play_cue(self, cue: Cue) -> None:
        pitch, velocity = CUE_NOTES[cue]
        self.fs.noteon(PERCUSSION_CHANNEL, pitch, velocity)
        self._pending_offs.append((time.time() + CUE_DURATION, pitch))

    def flush_pending_offs(self) -> None:
        """Call each frame to release cues whose duration has elapsed."""
        now = time.time()
        remaining: list[tuple[float, int]] = []
        for off_time, pitch in self._pending_offs:
            if now >= off_time:
                self.fs.noteoff(PERCUSSION_CHANNEL, pitch)
            else:
                remaining.append((off_time, pitch))
        self._pending_offs = remaining

    def set_volume(self, volume: float) -> None:
        """Set cue volume (0.0 to 1.0) via MIDI CC7."""
        cc_value = max(0, min(127, int(volume * 127)))
        self.fs.cc(PERCUSSION_CHANNEL, 7, cc_value)

    def all_notes_off(self) -> None:
        for _, pitch in self._pending_offs:
            self.fs.noteoff(PERCUSSION_CHANNEL, pitch)
        self._pending_offs.clear()

    def shutdown(self) -> None:
        self.all_notes_off()
        self.fs.delete()

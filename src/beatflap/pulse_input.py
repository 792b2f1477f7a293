"""Pulse sources: beat and jump input from the keyboard or a MIDI drum pad."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

import pygame

try:
    import rtmidi
    _HAS_RTMIDI = True
except ImportError:
    _HAS_RTMIDI = False

logger = logging.getLogger(__name__)


@dataclass
class PulseEvent:
    timestamp: float  # ms, same clock as the game loop
    jump: bool = True
    beat: bool = False


class PulseDeviceError(Exception):
    """Raised when no pulse device is found or connection fails."""


@runtime_checkable
class PulseSource(Protocol):
    """Common interface for keyboard and MIDI pulse sources."""
    def poll(self) -> PulseEvent | None: ...
    def close(self) -> None: ...


_JUMP_KEYS = {pygame.K_SPACE, pygame.K_UP, pygame.K_w}
_BEAT_KEYS = {pygame.K_b}


class KeyboardPulseSource:
    """Jump on space/up/W; tap B to mark a beat."""

    def __init__(self, clock: Callable[[], float] = pygame.time.get_ticks) -> None:
        self._clock = clock
        self._events: list[PulseEvent] = []

    def feed_event(self, event: pygame.event.Event) -> None:
        """Call from the game loop for each pygame event."""
        if event.type != pygame.KEYDOWN:
            return
        if event.key in _JUMP_KEYS:
            self._events.append(PulseEvent(timestamp=self._clock(), jump=True, beat=False))
        elif event.key in _BEAT_KEYS:
            self._events.append(PulseEvent(timestamp=self._clock(), jump=False, beat=True))

    def poll(self) -> PulseEvent | None:
        if self._events:
            return self._events.pop(0)
        return None

    def close(self) -> None:
        self._events.clear()


class MidiPulseSource:
    """Every sufficiently hard note-on from a MIDI pad is both a jump and a beat."""

    def __init__(
        self,
        port_index: int | None = None,
        velocity_threshold: int = 40,
        clock: Callable[[], float] = pygame.time.get_ticks,
    ) -> None:
        if not _HAS_RTMIDI:
            raise PulseDeviceError("python-rtmidi is not installed")
        self.midi_in = rtmidi.MidiIn()
        self._port_index = port_index
        self._velocity_threshold = velocity_threshold
        self._clock = clock
        self._open = False

    @staticmethod
    def list_ports() -> list[str]:
        if not _HAS_RTMIDI:
            return []
        midi_in = rtmidi.MidiIn()
        return midi_in.get_ports()

    def open(self) -> None:
        ports = self.midi_in.get_ports()
        if not ports:
            raise PulseDeviceError("No MIDI input devices found")
        idx = self._port_index if self._port_index is not None else 0
        if not 0 <= idx < len(ports):
            raise PulseDeviceError(f"MIDI port {idx} out of range ({len(ports)} available)")
        self.midi_in.open_port(idx)
        self._open = True
        logger.info("Listening for beats on MIDI port %s", ports[idx])

    def poll(self) -> PulseEvent | None:
        """Non-blocking poll. Returns None when no qualifying hit is queued."""
        if not self._open:
            return None
        while True:
            msg = self.midi_in.get_message()
            if msg is None:
                return None
            data, _delta = msg
            if is_beat_message(data, self._velocity_threshold):
                return PulseEvent(timestamp=self._clock(), jump=True, beat=True)

    def close(self) -> None:
        if self._open:
            self.midi_in.close_port()
            self._open = False


def is_beat_message(data: list[int], velocity_threshold: int) -> bool:
    """True for a note-on whose velocity crosses the threshold."""
    if len(data) < 3:
        return False
    status = data[0] & 0xF0
    return status == 0x90 and data[2] > 0 and data[2] >= velocity_threshold


def drain(source: PulseSource | None) -> int:
    """Discard everything queued on ``source``. Returns how many events were dropped."""
    if source is None:
        return 0
    dropped = 0
    while source.poll() is not None:
        dropped += 1
    return dropped

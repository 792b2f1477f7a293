"""Tests for tempo estimation."""

import pytest

from beatflap.models import RhythmState
from beatflap.rhythm import RhythmTracker, bpm_from_interval


def test_defaults():
    tracker = RhythmTracker()
    assert tracker.state == RhythmState(bpm=120, last_pulse=None, spawn_interval=1000.0)


def test_first_pulse_only_sets_reference():
    tracker = RhythmTracker()
    tracker.on_pulse(0)
    assert tracker.bpm == 120
    assert tracker.state.last_pulse == 0


def test_two_pulses_set_tempo_and_interval():
    tracker = RhythmTracker()
    tracker.on_pulse(0)
    tracker.on_pulse(500)
    assert tracker.bpm == 120
    assert tracker.spawn_interval == 1000

    tracker.on_pulse(750)
    assert tracker.bpm == 240
    assert tracker.spawn_interval == 500


@pytest.mark.parametrize("interval, expected", [(1, 300), (0.001, 300), (10_000_000, 60), (1500, 60), (180, 300)])
def test_tempo_is_clamped(interval, expected):
    tracker = RhythmTracker()
    tracker.on_pulse(1000)
    tracker.on_pulse(1000 + interval)
    assert tracker.bpm == expected
    assert 60 <= tracker.bpm <= 300


def test_non_increasing_timestamp_updates_reference_only():
    tracker = RhythmTracker()
    tracker.on_pulse(1000)
    tracker.on_pulse(1000)
    assert tracker.bpm == 120
    tracker.on_pulse(900)
    assert tracker.bpm == 120
    assert tracker.state.last_pulse == 900


def test_window_averages_intervals():
    smooth = RhythmTracker(window=2)
    raw = RhythmTracker()
    for t in (0, 500, 1500):
        smooth.on_pulse(t)
        raw.on_pulse(t)
    assert raw.bpm == 60
    assert smooth.bpm == 80
    assert smooth.spawn_interval == 1500


def test_reset_restores_defaults():
    tracker = RhythmTracker(window=3)
    tracker.on_pulse(0)
    tracker.on_pulse(300)
    tracker.reset()
    assert tracker.state == RhythmState()


def test_bad_window():
    with pytest.raises(ValueError):
        RhythmTracker(window=0)


def test_bpm_from_interval_rounds():
    assert bpm_from_interval(333) == 180


def test_half_bpm_rounds_up():
    tracker = RhythmTracker()
    tracker.on_pulse(0)
    tracker.on_pulse(960)
    assert tracker.bpm == 63
    assert bpm_from_interval(480) == 125

"""Tests for actor physics."""

import math

from beatflap.actor import Actor
from beatflap.config import MAX_TILT
from beatflap.models import Cue


def test_gravity_then_integrate():
    actor = Actor(playfield_height=400, size=30, gravity=0.5)
    actor.y = 200.0
    actor.velocity = 0.0
    actor.apply_gravity()
    hit_floor = actor.integrate()
    assert actor.velocity == 0.5
    assert actor.y == 200.5
    assert not hit_floor


def test_starts_centered_and_still():
    actor = Actor(playfield_height=400)
    assert actor.y == 200
    assert actor.velocity == 0
    assert actor.tilt == 0


def test_ceiling_clamp_zeroes_velocity():
    actor = Actor(playfield_height=400, size=30)
    actor.y = 5.0
    actor.velocity = -10.0
    assert actor.integrate() is False
    assert actor.y == 0
    assert actor.velocity == 0


def test_floor_clamp_reports_contact():
    actor = Actor(playfield_height=400, size=30)
    actor.y = 365.0
    actor.velocity = 10.0
    assert actor.integrate() is True
    assert actor.y == 370


def test_jump_overrides_velocity_and_emits_cue():
    cues: list[Cue] = []
    actor = Actor(jump_force=-10.0, on_cue=cues.append)
    actor.velocity = 5.0
    actor.jump()
    actor.jump()
    assert actor.velocity == -10.0
    assert actor.tilt == -0.5
    assert cues == [Cue.JUMP, Cue.JUMP]


def test_tilt_follows_velocity_and_is_clamped():
    actor = Actor()
    actor.velocity = -2.0
    actor.update_tilt()
    assert math.isclose(actor.tilt, -0.1)
    actor.velocity = 100.0
    actor.update_tilt()
    assert actor.tilt == MAX_TILT
    actor.velocity = -100.0
    actor.update_tilt()
    assert actor.tilt == -MAX_TILT


def test_stays_in_bounds_over_many_frames():
    actor = Actor(playfield_height=400, size=30)
    for frame in range(500):
        if frame % 7 == 0:
            actor.jump()
        actor.apply_gravity()
        actor.integrate()
        assert 0 <= actor.y <= 400 - 30

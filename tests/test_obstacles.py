"""Tests for the obstacle field and collision detection."""

import random

import pytest

from beatflap.actor import Actor
from beatflap.collision import check_collision
from beatflap.models import Obstacle
from beatflap.obstacles import ObstacleField, maybe_spawn


def _field() -> ObstacleField:
    return ObstacleField(playfield_width=320, playfield_height=400, rng=random.Random(7))


def test_step_moves_left_and_culls_offscreen():
    field = _field()
    field.obstacles = [
        Obstacle(x=-49, gap_top=100, gap_height=150, width=50),
        Obstacle(x=100, gap_top=100, gap_height=150, width=50),
        Obstacle(x=-47, gap_top=100, gap_height=150, width=50),
    ]
    field.step(2)
    assert [o.x for o in field] == [98, -49]


def test_check_passage_flags_once():
    field = _field()
    field.obstacles = [
        Obstacle(x=40, gap_top=100, gap_height=150, width=50),
        Obstacle(x=200, gap_top=100, gap_height=150, width=50),
    ]
    passed = field.check_passage(actor_x=100)
    assert passed == [field.obstacles[0]]
    assert field.obstacles[0].passed
    assert not field.obstacles[1].passed
    assert field.check_passage(actor_x=100) == []


def test_spawn_keeps_gap_inside_margins():
    field = _field()
    for _ in range(300):
        obstacle = field.spawn()
        assert obstacle.x == 320
        assert obstacle.gap_top >= 50
        assert obstacle.gap_bottom <= 400 - 50
    assert len(field) == 300
    field.clear()
    assert len(field) == 0


def test_gap_must_fit():
    with pytest.raises(ValueError):
        ObstacleField(playfield_height=200, gap_height=150, margin=50)


def test_maybe_spawn():
    assert maybe_spawn(0, None, 1000)
    assert not maybe_spawn(1000, 0, 1000)
    assert maybe_spawn(1001, 0, 1000)


def test_gap_scenario():
    field = _field()
    field.obstacles = [Obstacle(x=320, gap_top=100, gap_height=150, width=50)]
    while field.obstacles[0].x > 100:
        field.step(2)
    assert field.obstacles[0].x == 100

    actor = Actor(playfield_height=400, x=100, size=30)
    for y in (100.0, 160.0, 220.0):
        actor.y = y
        assert not check_collision(actor, field)

    actor.y = 50.0
    assert check_collision(actor, field)
    actor.y = 240.0
    assert check_collision(actor, field)


def test_no_collision_without_horizontal_overlap():
    actor = Actor(playfield_height=400, x=100, size=30)
    actor.y = 0.0
    ahead = Obstacle(x=130, gap_top=200, gap_height=150, width=50)
    behind = Obstacle(x=50, gap_top=200, gap_height=150, width=50)
    assert not check_collision(actor, [ahead, behind])

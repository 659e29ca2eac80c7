"""Tests for Frog, Fly and CatchEffect transition rules."""

import math

from pondfrog import geometry
from pondfrog.entities import CatchEffect, Fly, Frog
from pondfrog.geometry import Vector2
from pondfrog.types import FlyState, FrogState

CENTER = Vector2(80.0, 60.0)


# --- Frog ---

def test_frog_starts_idle_and_closed():
    frog = Frog()
    assert frog.state is FrogState.IDLE
    assert frog.tongue_length == 0.0
    assert frog.health == 3
    assert frog.open is False


def test_idle_frog_aims_at_pointer():
    """Test the idle angle is the pointer angle minus a quarter turn."""
    frog = Frog()
    frog.update(Vector2(90.0, 60.0), CENTER, False, 5, 10)
    assert math.isclose(frog.angle, -math.pi / 2)
    frog.update(Vector2(80.0, 70.0), CENTER, False, 5, 10)
    assert math.isclose(frog.angle, 0.0, abs_tol=1e-12)


def test_pointer_at_center_gives_deterministic_angle():
    frog = Frog()
    frog.update(CENTER, CENTER, False, 5, 10)
    assert frog.angle == -math.pi / 2


def test_tongue_tip_points_at_aim():
    frog = Frog()
    frog.aim(Vector2(100.0, 60.0), CENTER)
    frog.tongue_length = 20.0
    tip = frog.tongue_tip(CENTER)
    assert math.isclose(tip.x, 100.0)
    assert math.isclose(tip.y, 60.0, abs_tol=1e-9)


def test_strike_commits_to_pointer_distance():
    frog = Frog()
    frog.update(Vector2(90.0, 60.0), CENTER, True, 5, 10)
    assert frog.state is FrogState.ATTACKING
    assert frog.tongue_target_length == 10.0
    assert 0 < frog.tongue_length <= 10.0
    assert frog.open is True


def test_attacking_ignores_pointer():
    frog = Frog()
    frog.update(Vector2(100.0, 60.0), CENTER, True, 5, 10)
    angle = frog.angle
    frog.update(Vector2(0.0, 0.0), CENTER, True, 5, 10)
    assert frog.angle == angle
    assert frog.tongue_target_length == 20.0


def test_attack_extends_clamped_then_retreats():
    frog = Frog()
    frog.update(Vector2(87.0, 60.0), CENTER, True, 5, 10)
    lengths = [frog.tongue_length]
    while frog.state is FrogState.ATTACKING:
        frog.update(CENTER, CENTER, False, 5, 10)
        lengths.append(frog.tongue_length)
    assert lengths == [5.0, 7.0, 7.0]
    assert frog.state is FrogState.RETREATING


def test_retreat_retracts_to_exactly_zero_then_idles():
    frog = Frog(state=FrogState.RETREATING, tongue_length=23.0, open=True)
    seen = []
    while frog.state is FrogState.RETREATING:
        frog.update(CENTER, CENTER, False, 5, 10)
        seen.append(frog.tongue_length)
    assert seen == [13.0, 3.0, 0.0]
    assert frog.state is FrogState.IDLE
    assert frog.open is False


def test_mouth_stays_open_while_retreating():
    frog = Frog(state=FrogState.ATTACKING, tongue_length=10.0, tongue_target_length=10.0)
    frog.update(CENTER, CENTER, False, 5, 10)
    assert frog.state is FrogState.RETREATING
    assert frog.open is True


# --- Fly ---

def test_fly_homes_at_constant_speed():
    fly = Fly(position=Vector2(180.0, 60.0))
    fly.home(CENTER, 0.2)
    assert math.isclose(fly.position.x, 179.8)
    assert math.isclose(fly.position.y, 60.0)

    far = Fly(position=Vector2(80.0, 1000.0))
    far.home(CENTER, 0.2)
    assert math.isclose(geometry.distance(far.position, Vector2(80.0, 1000.0)), 0.2)


def test_sway_is_stepped():
    """Test the sway only changes every sway_period frames of lifetime."""
    offsets = []
    for lifetime in (0, 9, 10, 19, 20):
        fly = Fly(position=Vector2(0.0, 0.0), lifetime=lifetime)
        fly.sway(10, 0.5)
        offsets.append(fly.position.y)
    assert offsets[0] == offsets[1] == 0.0
    assert offsets[2] == offsets[3] == math.sin(1) / 2
    assert offsets[4] == math.sin(2) / 2


def test_fly_animation_wraps():
    fly = Fly(position=Vector2(0.0, 0.0), animation_length=6)
    frames = []
    for _ in range(7):
        fly.advance_frame()
        frames.append(fly.current_frame)
    assert frames == [1, 2, 3, 4, 5, 0, 1]


def test_fly_defaults():
    fly = Fly(position=Vector2(0.0, 0.0))
    assert fly.state is FlyState.ATTACKING
    assert fly.animation_length == 6
    assert fly.lifetime == 0


# --- CatchEffect ---

def test_effect_plays_once_then_finishes():
    effect = CatchEffect(position=Vector2(1.0, 1.0))
    results = [effect.advance() for _ in range(4)]
    assert results == [True, True, True, False]
    assert effect.current_frame == 3


def test_press_on_center_does_not_strike():
    """Test a zero-distance press keeps the frog idle with its tongue in."""
    frog = Frog()
    frog.update(CENTER, CENTER, True, 5, 10)
    assert frog.state is FrogState.IDLE
    assert frog.tongue_length == 0.0
    assert frog.tongue_target_length == 0.0
    assert frog.open is False

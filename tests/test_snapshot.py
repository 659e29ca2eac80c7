"""Tests for render snapshots."""

import dataclasses
import json

import pytest
from pondfrog import ArenaConfig, StepInput, Vector2, World
from pondfrog.entities import CatchEffect
from pondfrog.snapshot import WorldSnapshot


def test_snapshot_reflects_world():
    world = World(ArenaConfig(), seed=3)
    world.effects.spawn(CatchEffect(position=Vector2(5.0, 6.0), current_frame=2))
    snap = world.snapshot()

    assert isinstance(snap, WorldSnapshot)
    assert snap.frame == 0
    assert snap.score == 0
    assert snap.frog.health == 3
    assert snap.frog.open is False
    assert snap.frog.tongue_tip == Vector2(80.0, 60.0)
    assert [f.position for f in snap.flies] == [Vector2(10.0, 10.0)]
    assert [(e.position, e.frame) for e in snap.effects] == [(Vector2(5.0, 6.0), 2)]


def test_snapshot_is_detached_from_world():
    world = World(ArenaConfig(), seed=3)
    snap = world.snapshot()
    world.step(StepInput(Vector2(0.0, 0.0)))
    assert snap.frame == 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.frame = 1  # type: ignore[misc]


def test_as_dict_is_json_ready():
    world = World(ArenaConfig(), seed=3)
    result = world.step(StepInput(Vector2(90.0, 60.0), action_just_pressed=True))
    data = result.snapshot.as_dict()
    assert json.loads(json.dumps(data)) == data
    assert data["frame"] == 1
    assert data["frog"]["state"] == "attacking"
    assert data["frog"]["open"] is True
    assert data["flies"][0]["state"] == "attacking"
    assert data["flies"][0]["position"] == list(result.snapshot.flies[0].position)
    assert data["effects"] == []

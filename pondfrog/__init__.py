"""pondfrog - frame-stepped simulation core of a frog-catches-flies arcade game."""

from pondfrog.clock import Clock
from pondfrog.config import ArenaConfig
from pondfrog.entities import CatchEffect, Fly, Frog
from pondfrog.events import Event, EventKind
from pondfrog.geometry import Vector2
from pondfrog.session import SessionController
from pondfrog.snapshot import EffectView, FlyView, FrogView, WorldSnapshot
from pondfrog.store import EntityStore
from pondfrog.types import (
    EntityId,
    FlyState,
    FrogState,
    StepContext,
    StepInput,
    UnknownEntityError,
)
from pondfrog.world import StepResult, World

__all__ = [
    "World",
    "StepInput",
    "StepResult",
    "StepContext",
    "ArenaConfig",
    "Clock",
    "SessionController",
    "EntityStore",
    "EntityId",
    "Frog",
    "Fly",
    "CatchEffect",
    "FrogState",
    "FlyState",
    "Event",
    "EventKind",
    "Vector2",
    "WorldSnapshot",
    "FrogView",
    "FlyView",
    "EffectView",
    "UnknownEntityError",
]

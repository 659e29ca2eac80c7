"""Shared type aliases, state enums, and per-step contracts."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from pondfrog.geometry import Vector2

if TYPE_CHECKING:
    from pondfrog.events import Event
    from pondfrog.world import World

EntityId = int


class FrogState(Enum):
    IDLE = "idle"
    ATTACKING = "attacking"
    RETREATING = "retreating"


class FlyState(Enum):
    SEARCHING = "searching"
    ATTACKING = "attacking"
    HIT = "hit"


@dataclass(frozen=True)
class StepInput:
    """Normalized driver input for one frame."""

    pointer: Vector2
    action_just_pressed: bool = False


@dataclass(frozen=True, slots=True)
class StepContext:
    frame: int
    pointer: Vector2
    action_just_pressed: bool
    random: _random.Random
    emit: Callable[[Event], None]

    def every(self, n: int) -> bool:
        return self.frame % n == 0


class UnknownEntityError(KeyError):
    """Raised when looking up an entity id that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


System = Callable[["World", StepContext], None]

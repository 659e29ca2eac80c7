"""Discrete gameplay events handed to audio and score collaborators."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pondfrog.geometry import Vector2
from pondfrog.types import EntityId


class EventKind(Enum):
    CATCH = "catch"
    MISS = "miss"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    frame: int
    fly_id: EntityId
    position: Vector2

    def as_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "frame": self.frame,
            "fly_id": self.fly_id,
            "position": [self.position.x, self.position.y],
        }

"""Read-only views of the world handed to renderers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pondfrog.geometry import Vector2
from pondfrog.types import EntityId, FlyState, FrogState


@dataclass(frozen=True)
class FrogView:
    angle: float
    open: bool
    tongue_length: float
    tongue_tip: Vector2
    health: int
    state: FrogState


@dataclass(frozen=True)
class FlyView:
    id: EntityId
    position: Vector2
    frame: int
    state: FlyState


@dataclass(frozen=True)
class EffectView:
    id: EntityId
    position: Vector2
    frame: int


@dataclass(frozen=True)
class WorldSnapshot:
    frame: int
    score: int
    frog: FrogView
    flies: tuple[FlyView, ...]
    effects: tuple[EffectView, ...]

    def as_dict(self) -> dict[str, Any]:
        """JSON-compatible form: enums as their values, vectors as [x, y]."""
        frog = self.frog
        return {
            "frame": self.frame,
            "score": self.score,
            "frog": {
                "angle": frog.angle,
                "open": frog.open,
                "tongue_length": frog.tongue_length,
                "tongue_tip": list(frog.tongue_tip),
                "health": frog.health,
                "state": frog.state.value,
            },
            "flies": [
                {
                    "id": fly.id,
                    "position": list(fly.position),
                    "frame": fly.frame,
                    "state": fly.state.value,
                }
                for fly in sorted(self.flies, key=lambda f: f.id)
            ],
            "effects": [
                {"id": e.id, "position": list(e.position), "frame": e.frame}
                for e in sorted(self.effects, key=lambda e: e.id)
            ],
        }

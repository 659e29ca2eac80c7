"""World - owns the frog, flies, catch effects and clock; runs one step per frame."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Callable

from pondfrog.clock import Clock
from pondfrog.config import ArenaConfig
from pondfrog.entities import CatchEffect, Fly, Frog
from pondfrog.events import Event
from pondfrog.geometry import Vector2
from pondfrog.session import SessionController
from pondfrog.snapshot import EffectView, FlyView, FrogView, WorldSnapshot
from pondfrog.store import EntityStore
from pondfrog.systems import (
    make_effect_system,
    make_fly_system,
    make_frog_system,
    make_spawn_system,
)
from pondfrog.types import StepInput, System

ResetHook = Callable[["World", int], None]


@dataclass(frozen=True)
class StepResult:
    snapshot: WorldSnapshot
    events: tuple[Event, ...]
    reset: bool = False


class World:
    def __init__(
        self,
        config: ArenaConfig | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config if config is not None else ArenaConfig()
        self._clock = Clock()
        self._session = SessionController(self._config)
        self._reset_hooks: list[ResetHook] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

        # Order matters: fly collisions decide the frog's transition this frame.
        self._systems: list[System] = [
            make_spawn_system(self._config),
            make_effect_system(self._config),
            make_fly_system(self._config),
            make_frog_system(self._config),
        ]

        self.frog: Frog = Frog()
        self.flies: EntityStore[Fly] = EntityStore()
        self.effects: EntityStore[CatchEffect] = EntityStore()
        self.score: int = 0
        self._session.reset(self)

    @property
    def config(self) -> ArenaConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def center(self) -> Vector2:
        return self._config.center

    @property
    def reset_hooks(self) -> tuple[ResetHook, ...]:
        return tuple(self._reset_hooks)

    def on_reset(self, hook: ResetHook) -> None:
        self._reset_hooks.append(hook)

    def reset(self) -> None:
        self._session.reset(self)

    def step(self, step_input: StepInput) -> StepResult:
        """Advance the simulation by one frame."""
        self._clock.advance()
        events: list[Event] = []
        ctx = self._clock.context(step_input, self._rng, events.append)
        for system in self._systems:
            system(self, ctx)
        was_reset = self._session.check(self)
        return StepResult(
            snapshot=self.snapshot(), events=tuple(events), reset=was_reset
        )

    def snapshot(self) -> WorldSnapshot:
        frog = self.frog
        return WorldSnapshot(
            frame=self._clock.frame,
            score=self.score,
            frog=FrogView(
                angle=frog.angle,
                open=frog.open,
                tongue_length=frog.tongue_length,
                tongue_tip=frog.tongue_tip(self.center),
                health=frog.health,
                state=frog.state,
            ),
            flies=tuple(
                FlyView(id=eid, position=fly.position,
                        frame=fly.current_frame, state=fly.state)
                for eid, fly in self.flies.items()
            ),
            effects=tuple(
                EffectView(id=eid, position=effect.position,
                           frame=effect.current_frame)
                for eid, effect in self.effects.items()
            ),
        )

"""Session controller - ends a session when health runs out and starts a fresh one."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pondfrog.entities import Fly, Frog
from pondfrog.geometry import Vector2
from pondfrog.store import EntityStore
from pondfrog.types import FlyState

if TYPE_CHECKING:
    from pondfrog.config import ArenaConfig
    from pondfrog.world import World

logger = logging.getLogger(__name__)


class SessionController:
    def __init__(self, config: ArenaConfig) -> None:
        self._config = config

    def is_over(self, world: World) -> bool:
        return world.frog.health < 1

    def check(self, world: World) -> bool:
        """Reset ``world`` if its frog is out of health. Returns True if it did."""
        if not self.is_over(world):
            return False
        logger.info("session over at frame %d with score %d",
                     world.clock.frame, world.score)
        self.reset(world)
        return True

    def reset(self, world: World) -> None:
        """Replace all session state with a fresh frog and a single seeded fly.

        Reset hooks run after every field has been replaced.
        """
        config = self._config
        score = world.score
        world.frog = Frog(health=config.starting_health)
        world.flies = EntityStore([
            Fly(
                position=Vector2(*config.seed_fly_position),
                state=FlyState.ATTACKING,
                animation_length=config.fly_frames,
            )
        ])
        world.effects = EntityStore()
        world.score = 0
        world.clock.reset()
        for hook in world.reset_hooks:
            hook(world, score)

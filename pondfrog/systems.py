"""System factories for one simulation step.

Each factory closes over the arena configuration and returns a callable
``system(world, ctx)``. ``World.step`` runs them in a fixed order.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from pondfrog import geometry
from pondfrog.entities import CatchEffect, Fly
from pondfrog.events import Event, EventKind
from pondfrog.types import FlyState, FrogState, System

if TYPE_CHECKING:
    from pondfrog.config import ArenaConfig
    from pondfrog.types import EntityId, StepContext
    from pondfrog.world import World

logger = logging.getLogger(__name__)


def make_spawn_system(config: ArenaConfig) -> System:
    """Spawn one attacking fly just outside the arena every ``spawn_interval`` frames."""

    def spawn_system(world: World, ctx: StepContext) -> None:
        if not ctx.every(config.spawn_interval):
            return
        angle = ctx.random.random() * 2 * math.pi
        position = geometry.add(
            config.center, geometry.polar(angle, config.spawn_distance)
        )
        eid = world.flies.spawn(
            Fly(position=position, animation_length=config.fly_frames)
        )
        logger.debug("frame %d: spawned fly %d at %.1f, %.1f",
                     ctx.frame, eid, position.x, position.y)

    return spawn_system


def make_effect_system(config: ArenaConfig) -> System:
    """Advance catch effects on animation frames and drop the finished ones."""

    def effect_system(world: World, ctx: StepContext) -> None:
        if not ctx.every(config.animation_interval):
            return
        finished = [eid for eid, effect in world.effects.items() if not effect.advance()]
        if finished:
            world.effects.compact(finished)
            logger.debug("frame %d: %d catch effect(s) expired", ctx.frame, len(finished))

    return effect_system


def make_fly_system(config: ArenaConfig) -> System:
    """Move attacking flies, resolve misses and tongue hits, then remove consumed flies.

    A miss costs the frog one health and emits a MISS event. A hit turns the
    fly into a HIT fly riding the tongue back in, snaps the frog into its
    retreat, leaves a catch effect and emits a CATCH event. HIT flies are
    removed once the tongue has carried them within ``capture_radius`` of
    the center. SEARCHING flies neither move nor animate, they only age.
    """
    center = config.center

    def fly_system(world: World, ctx: StepContext) -> None:
        frog = world.frog
        tip = frog.tongue_tip(center)
        removed: list[EntityId] = []

        for eid, fly in world.flies.items():
            if fly.state is FlyState.HIT:
                fly.position = tip
                if geometry.distance(fly.position, center) < config.capture_radius:
                    removed.append(eid)
                    logger.debug("frame %d: fly %d swallowed", ctx.frame, eid)
                    continue

            elif fly.state is FlyState.ATTACKING:
                if geometry.distance(center, fly.position) < config.capture_radius:
                    frog.health -= 1
                    removed.append(eid)
                    ctx.emit(Event(EventKind.MISS, ctx.frame, eid, fly.position))
                    logger.debug("frame %d: fly %d reached the frog, health %d",
                                 ctx.frame, eid, frog.health)
                    continue

                if (
                    frog.state is FrogState.ATTACKING
                    and geometry.distance(fly.position, tip) < config.strike_radius
                ):
                    world.effects.spawn(
                        CatchEffect(position=fly.position,
                                    animation_length=config.effect_frames)
                    )
                    fly.state = FlyState.HIT
                    frog.retreat()
                    world.score += 1
                    ctx.emit(Event(EventKind.CATCH, ctx.frame, eid, fly.position))
                    logger.debug("frame %d: fly %d caught", ctx.frame, eid)
                    continue

                fly.sway(config.sway_period, config.sway_amplitude)
                fly.home(center, config.fly_speed)
                if ctx.every(config.animation_interval):
                    fly.advance_frame()

            fly.lifetime += 1

        world.flies.compact(removed)

    return fly_system


def make_frog_system(config: ArenaConfig) -> System:
    """Run the frog state machine against this frame's input."""
    center = config.center

    def frog_system(world: World, ctx: StepContext) -> None:
        world.frog.update(
            ctx.pointer,
            center,
            ctx.action_just_pressed,
            config.tongue_extend_speed,
            config.tongue_retract_speed,
        )

    return frog_system

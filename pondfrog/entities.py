"""Frog, Fly and CatchEffect models with their per-entity transition rules."""
from __future__ import annotations

import math
from dataclasses import dataclass

from pondfrog import geometry
from pondfrog.geometry import Vector2
from pondfrog.types import FlyState, FrogState

# Sprite "up" is rotated a quarter turn from the aim direction.
_SPRITE_OFFSET = math.pi / 2


@dataclass
class Frog:
    """The player. Anchored at the arena center, aims and strikes with its tongue.

    ``tongue_length`` is 0 whenever the frog is idle and never exceeds
    ``tongue_target_length`` while attacking.
    """

    health: int = 3
    angle: float = 0.0
    tongue_length: float = 0.0
    tongue_target_length: float = 0.0
    state: FrogState = FrogState.IDLE
    open: bool = False

    def tongue_tip(self, center: Vector2) -> Vector2:
        return geometry.add(
            center, geometry.polar(self.angle + _SPRITE_OFFSET, self.tongue_length)
        )

    def aim(self, pointer: Vector2, center: Vector2) -> None:
        self.angle = geometry.angle_to(pointer, center) - _SPRITE_OFFSET

    def strike(self, pointer: Vector2, center: Vector2, extend: float) -> None:
        """Commit to the pointer's current distance and start extending."""
        self.state = FrogState.ATTACKING
        self.open = True
        self.tongue_target_length = geometry.distance(center, pointer)
        self.tongue_length = min(extend, self.tongue_target_length)

    def retreat(self) -> None:
        self.state = FrogState.RETREATING

    def update(
        self,
        pointer: Vector2,
        center: Vector2,
        action_just_pressed: bool,
        extend: float,
        retract: float,
    ) -> None:
        if self.state is FrogState.ATTACKING:
            self.open = True
            if self.tongue_length < self.tongue_target_length:
                self.tongue_length = min(
                    self.tongue_length + extend, self.tongue_target_length
                )
            else:
                self.retreat()
        elif self.state is FrogState.RETREATING:
            self.tongue_length = max(self.tongue_length - retract, 0.0)
            if self.tongue_length <= 0.0:
                self.state = FrogState.IDLE
                self.open = False
        else:
            self.open = False
            self.aim(pointer, center)
            # A zero-length strike has nothing to extend to.
            if action_just_pressed and geometry.distance(center, pointer) > 0.0:
                self.strike(pointer, center, extend)


@dataclass
class Fly:
    position: Vector2
    state: FlyState = FlyState.ATTACKING
    animation_length: int = 6
    current_frame: int = 0
    lifetime: int = 0

    def sway(self, period: int, amplitude: float) -> None:
        # Stepped on purpose: lifetime is floor-divided before the sine.
        dy = math.sin(self.lifetime // period) * amplitude
        self.position = Vector2(self.position.x, self.position.y + dy)

    def home(self, center: Vector2, speed: float) -> None:
        heading = geometry.angle_to(center, self.position)
        self.position = geometry.add(
            self.position, geometry.scale(geometry.polar(heading, 1.0), speed)
        )

    def advance_frame(self) -> None:
        if self.current_frame + 1 >= self.animation_length:
            self.current_frame = 0
        else:
            self.current_frame += 1


@dataclass
class CatchEffect:
    """One-shot animation left where a fly was caught."""

    position: Vector2
    animation_length: int = 4
    current_frame: int = 0

    def advance(self) -> bool:
        """Step the animation. Returns False once it has played through."""
        if self.current_frame + 1 < self.animation_length:
            self.current_frame += 1
            return True
        return False

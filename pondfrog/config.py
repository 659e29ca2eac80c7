"""Arena configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from pondfrog.geometry import Vector2


@dataclass(frozen=True)
class ArenaConfig:
    """Immutable tuning constants for one arena and its difficulty curve.

    Attributes:
        width: Arena width in world units.
        height: Arena height in world units.
        tps: Frames per second a driver should step at. Not read by the core.
        spawn_interval: A fly spawns on every frame divisible by this.
        spawn_margin: Distance beyond the half-width at which flies appear.
        animation_interval: Sprite frames advance on every frame divisible by this.
        fly_frames: Animation length of a fly.
        effect_frames: Animation length of a catch effect.
        fly_speed: Homing distance a fly covers per frame.
        sway_period: Lifetime frames per sway step (integer division).
        sway_amplitude: Vertical sway scale.
        capture_radius: Distance from center at which a fly is consumed or missed.
        strike_radius: Distance from the tongue tip at which a fly is caught.
        tongue_extend_speed: Tongue growth per frame while attacking.
        tongue_retract_speed: Tongue shrink per frame while retreating.
        starting_health: Health of a fresh frog.
        seed_fly_position: Where the single fly of a fresh session starts.
    """

    width: float = 160
    height: float = 120
    tps: int = 60
    spawn_interval: int = 60
    spawn_margin: float = 64
    animation_interval: int = 3
    fly_frames: int = 6
    effect_frames: int = 4
    fly_speed: float = 0.2
    sway_period: int = 10
    sway_amplitude: float = 0.5
    capture_radius: float = 5
    strike_radius: float = 8
    tongue_extend_speed: float = 5
    tongue_retract_speed: float = 10
    starting_health: int = 3
    seed_fly_position: tuple[float, float] = (10, 10)

    def __post_init__(self) -> None:
        positive = (
            "width",
            "height",
            "tps",
            "spawn_interval",
            "animation_interval",
            "fly_frames",
            "effect_frames",
            "sway_period",
            "tongue_extend_speed",
            "tongue_retract_speed",
            "starting_health",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("fly_speed", "capture_radius", "strike_radius", "spawn_margin"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @property
    def center(self) -> Vector2:
        return Vector2(self.width / 2, self.height / 2)

    @property
    def spawn_distance(self) -> float:
        return self.width / 2 + self.spawn_margin

"""Draw a WorldSnapshot onto an arena-sized surface."""
from __future__ import annotations

import math

import pygame

from pondfrog import FrogState, WorldSnapshot
from pondfrog.geometry import Vector2, add, polar
from ui.constants import (
    COLOR_CATCH,
    COLOR_FLY,
    COLOR_FROG,
    COLOR_FROG_DARK,
    COLOR_MOUTH,
    COLOR_POND,
    COLOR_TEXT,
    COLOR_TONGUE,
    COLOR_WING,
    EFFECT_RADIUS,
    FLY_RADIUS,
    FROG_RADIUS,
)


def _pt(v: Vector2) -> tuple[int, int]:
    return round(v.x), round(v.y)


def draw_frog(surface: pygame.Surface, snapshot: WorldSnapshot, center: Vector2) -> None:
    frog = snapshot.frog
    facing = frog.angle + math.pi / 2

    if frog.state is not FrogState.IDLE and frog.tongue_length > 0:
        pygame.draw.line(surface, COLOR_TONGUE, _pt(center), _pt(frog.tongue_tip), 2)

    pygame.draw.circle(surface, COLOR_FROG, _pt(center), FROG_RADIUS)
    for side in (-0.6, 0.6):
        eye = add(center, polar(facing + side, FROG_RADIUS - 2))
        pygame.draw.circle(surface, COLOR_FROG_DARK, _pt(eye), 2)
    if frog.open:
        mouth = add(center, polar(facing, FROG_RADIUS - 3))
        pygame.draw.circle(surface, COLOR_MOUTH, _pt(mouth), 2)


def draw_flies(surface: pygame.Surface, snapshot: WorldSnapshot) -> None:
    for fly in snapshot.flies:
        x, y = _pt(fly.position)
        # Wings flap with the animation frame.
        lift = 1 if fly.frame % 2 else 2
        pygame.draw.line(surface, COLOR_WING, (x - 1, y), (x - 3, y - lift))
        pygame.draw.line(surface, COLOR_WING, (x + 1, y), (x + 3, y - lift))
        pygame.draw.circle(surface, COLOR_FLY, (x, y), FLY_RADIUS)


def draw_effects(surface: pygame.Surface, snapshot: WorldSnapshot) -> None:
    for effect in snapshot.effects:
        radius = EFFECT_RADIUS + effect.frame * 2
        pygame.draw.circle(surface, COLOR_CATCH, _pt(effect.position), radius, 1)


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, snapshot: WorldSnapshot) -> None:
    text = font.render(f"HP {snapshot.frog.health}  {snapshot.score}", True, COLOR_TEXT)
    surface.blit(text, (2, 2))


def draw_world(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snapshot: WorldSnapshot,
    center: Vector2,
) -> None:
    surface.fill(COLOR_POND)
    draw_frog(surface, snapshot, center)
    draw_flies(surface, snapshot)
    draw_effects(surface, snapshot)
    draw_hud(surface, font, snapshot)

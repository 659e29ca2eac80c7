"""
Pond Frog
Arcade demo for the pondfrog simulation core: aim with the mouse, click to
strike, and catch the flies before they reach you.

Controls:
  Mouse       Aim
  Left-click  Strike
  Escape      Quit
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import pygame

from pondfrog import ArenaConfig, StepInput, Vector2, World
from ui.audio import SoundBoard
from ui.constants import DEFAULT_SCALE, FPS, TITLE
from ui.renderer import draw_world

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pond Frog: pondfrog visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--scale", type=int, default=DEFAULT_SCALE, help="Window scale (1-8, default: 4)")
    p.add_argument("--fps", type=int, default=FPS, help="Render frames per second (default: 60)")
    p.add_argument("--tps", type=int, default=60, help="Simulation steps per second (default: 60)")
    p.add_argument("--sounds", type=Path, default=Path("assets/sounds"),
                   help="Directory holding catch.wav and chomp.wav")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--dump-state", type=str, default=None, metavar="FILE",
                   help="Write the final world snapshot as JSON to FILE on quit")
    args = p.parse_args()
    args.scale = max(1, min(8, args.scale))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ArenaConfig(tps=args.tps)
    world = World(config, seed=args.seed)
    logger.info("seed %d", world.seed)
    world.on_reset(lambda w, score: logger.info("game over, score %d", score))

    pygame.init()
    width, height = int(config.width), int(config.height)
    screen = pygame.display.set_mode((width * args.scale, height * args.scale))
    pygame.display.set_caption(TITLE)
    arena = pygame.Surface((width, height))
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 10)
    sounds = SoundBoard(args.sounds)

    snapshot = world.snapshot()
    tick_interval = 1.0 / config.tps
    accumulator = 0.0
    pressed = False
    running = True

    while running:
        accumulator += pg_clock.tick(args.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                pressed = True

        mx, my = pygame.mouse.get_pos()
        pointer = Vector2(mx / args.scale, my / args.scale)
        # Drain excess accumulator to prevent spiral of death
        if accumulator > tick_interval * 4:
            accumulator = tick_interval * 2
        # A click is held until a step consumes it.
        while accumulator >= tick_interval:
            result = world.step(StepInput(pointer, pressed))
            pressed = False
            sounds.play(result.events)
            snapshot = result.snapshot
            accumulator -= tick_interval

        draw_world(arena, font, snapshot, config.center)
        pygame.transform.scale(arena, screen.get_size(), screen)
        pygame.display.flip()

    pygame.quit()

    if args.dump_state:
        with open(args.dump_state, "w") as f:
            json.dump(snapshot.as_dict(), f, indent=2)
        print(f"State written to {args.dump_state}")

    sys.exit()


if __name__ == "__main__":
    main()

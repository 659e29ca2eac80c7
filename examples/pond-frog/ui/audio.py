"""Plays a sound for each gameplay event."""
from __future__ import annotations

import logging
from pathlib import Path

import pygame

from pondfrog import Event, EventKind

logger = logging.getLogger(__name__)

SOUND_FILES: dict[EventKind, str] = {
    EventKind.CATCH: "catch.wav",
    EventKind.MISS: "chomp.wav",
}


class SoundBoard:
    """Maps event kinds to pygame sounds. Missing files or devices play nothing."""

    def __init__(self, sound_dir: Path) -> None:
        self._sounds: dict[EventKind, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("audio disabled: %s", exc)
            return
        for kind, name in SOUND_FILES.items():
            path = sound_dir / name
            if not path.exists():
                logger.warning("no sound for %s at %s", kind.value, path)
                continue
            self._sounds[kind] = pygame.mixer.Sound(str(path))

    def play(self, events: tuple[Event, ...]) -> None:
        for event in events:
            sound = self._sounds.get(event.kind)
            if sound is not None:
                sound.stop()
                sound.play()

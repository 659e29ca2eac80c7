"""Clock and StepContext for the frame-stepped simulation."""

import random
from typing import Callable

from pondfrog.events import Event
from pondfrog.types import StepContext, StepInput


class Clock:
    """Monotonic frame counter. Periodic behaviour is asked of the StepContext."""

    def __init__(self) -> None:
        self._frame = 0

    @property
    def frame(self) -> int:
        return self._frame

    def advance(self) -> int:
        self._frame += 1
        return self._frame

    def context(
        self,
        step_input: StepInput,
        rng: random.Random,
        emit: Callable[[Event], None],
    ) -> StepContext:
        return StepContext(
            frame=self._frame,
            pointer=step_input.pointer,
            action_just_pressed=step_input.action_just_pressed,
            random=rng,
            emit=emit,
        )

    def reset(self, frame: int = 0) -> None:
        self._frame = frame

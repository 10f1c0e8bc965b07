"""Fade to black between two modules."""

from __future__ import annotations

import enum
from typing import Protocol


class Switchable(Protocol):
    """Something that can be stopped and started by a fade."""

    active: bool

    def init(self) -> None: ...

    def start(self) -> None: ...

    def clean_up(self) -> None: ...


class FadeStep(enum.Enum):
    NONE = enum.auto()
    TO_BLACK = enum.auto()
    FROM_BLACK = enum.auto()


class FadeToBlack:
    """Counts frames to black, swaps modules, then counts back down."""

    def __init__(self) -> None:
        self.step = FadeStep.NONE
        self.frame_count = 0
        self.max_fade_frames = 0
        self.to_disable: Switchable | None = None
        self.to_enable: Switchable | None = None
        self.last_level: Switchable | None = None

    def fade_to_black(
        self, to_disable: Switchable, to_enable: Switchable, frames: float = 60
    ) -> bool:
        """Begin a fade; a fade already running keeps its length."""
        self.to_disable = to_disable
        self.to_enable = to_enable
        self.frame_count = 0
        if self.step == FadeStep.NONE:
            self.step = FadeStep.TO_BLACK
            self.max_fade_frames = int(frames)
        return True

    def update(self) -> None:
        """Advance the fade by one frame."""
        if self.step == FadeStep.NONE:
            return
        if self.step == FadeStep.TO_BLACK:
            self.frame_count += 1
            if self.frame_count >= self.max_fade_frames:
                self.step = FadeStep.FROM_BLACK
                if self.to_disable is not None and self.to_disable.active:
                    self.to_disable.clean_up()
                if self.to_enable is not None and not self.to_enable.active:
                    self.to_enable.init()
                    self.to_enable.start()
        else:
            self.frame_count -= 1
            if self.frame_count <= 0:
                self.step = FadeStep.NONE

    def alpha(self) -> int:
        """Opacity (0-255) of the black overlay for the current frame."""
        if self.step == FadeStep.NONE:
            return 0
        if self.max_fade_frames <= 0:
            return 255
        ratio = self.frame_count / self.max_fade_frames
        return max(0, min(255, int(ratio * 255.0)))

    def clean_up(self) -> None:
        """Forget the modules involved."""
        self.to_disable = None
        self.to_enable = None
        self.last_level = None
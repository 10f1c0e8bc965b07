"""Frame-based sprite animation."""

from __future__ import annotations

from .geometry import Rect

MAX_FRAMES = 144


class Animation:
    """A sequence of sprite-sheet rectangles advanced by a fractional speed."""

    def __init__(self, speed: float = 1.0, loop: bool = True, pingpong: bool = False) -> None:
        self.speed = speed
        self.loop = loop
        # Allows the animation to keep going back and forth
        self.pingpong = pingpong
        self.frames: list[Rect] = []
        self._current = 0.0
        self._loop_count = 0
        self._direction = 1

    def push_back(self, rect: Rect) -> None:
        """Append a frame; at most MAX_FRAMES are allowed."""
        if len(self.frames) >= MAX_FRAMES:
            raise IndexError(f"an animation holds at most {MAX_FRAMES} frames")
        self.frames.append(rect)

    def reset(self) -> None:
        """Rewind to the first frame and stop ping-ponging."""
        self._current = 0.0
        self._loop_count = 0
        self.pingpong = False

    def has_finished(self) -> bool:
        """True once a non-looping animation has reached its end."""
        return not self.loop and not self.pingpong and self._loop_count > 0

    def update(self) -> None:
        """Advance the animation by its speed."""
        total = len(self.frames)
        self._current += self.speed
        if self._current >= total:
            self._current = 0.0 if (self.loop or self.pingpong) else float(total - 1)
            self._loop_count += 1
            if self.pingpong:
                self._direction = -self._direction

    def current_frame(self) -> Rect:
        """The rectangle of the frame being shown; empty when there is none."""
        total = len(self.frames)
        index = int(self._current)
        if self._direction == -1:
            index = int(total - self._current)
        if 0 <= index < total:
            return self.frames[index]
        return Rect()
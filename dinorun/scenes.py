"""Scene identifiers, the logo fade, and the fade transition between scenes."""

from __future__ import annotations

import enum

# Speed of the logo fade, in alpha units per second.
LOGO_FADE_SPEED = 500.0
# Seconds the logo stays fully visible.
LOGO_HOLD_SECONDS = 4.5
# Seconds the win and lose screens stay before moving on.
COOLDOWN_SCENE = 3.5

FADEOUT_TRANSITION_SPEED = 2.0
FADEIN_TRANSITION_SPEED = 2.0


class SceneType(enum.Enum):
    """Every screen the game can show."""

    LOGO = enum.auto()
    INTRO = enum.auto()
    LEVEL1 = enum.auto()
    LEVEL2 = enum.auto()
    WIN = enum.auto()
    LOSE = enum.auto()

    @property
    def is_level(self) -> bool:
        """True for the playable levels."""
        return self in (SceneType.LEVEL1, SceneType.LEVEL2)

    @property
    def level_number(self) -> int:
        """1 or 2 for the levels, 0 for every other scene."""
        return {SceneType.LEVEL1: 1, SceneType.LEVEL2: 2}.get(self, 0)


class LogoFade:
    """The logo screen: fade in, hold, fade out, then go to the intro."""

    def __init__(self) -> None:
        self.state = 0
        self.time_counter = 0.0
        self.alpha = 0.0

    def update(self, dt: float) -> SceneType | None:
        """Advance by ``dt`` seconds; returns INTRO once the logo has faded out."""
        if self.state == 0:
            self.state = 1
        elif self.state == 1:
            self.alpha += LOGO_FADE_SPEED * dt
            if self.alpha > 255.0:
                self.alpha = 255.0
                self.state = 2
        elif self.state == 2:
            self.time_counter += dt
            if self.time_counter >= LOGO_HOLD_SECONDS:
                self.state = 3
        elif self.state == 3:
            if self.alpha != 0:
                self.alpha -= LOGO_FADE_SPEED * dt
            if self.alpha <= 0.0:
                self.alpha = 0.0
                return SceneType.INTRO
        return None


class SceneTransition:
    """Fades the screen to black, swaps the current scene, and fades back in."""

    def __init__(self, current: SceneType = SceneType.LOGO) -> None:
        self.current = current
        self.next: SceneType | None = None
        self.on_transition = False
        self.fade_out_completed = False
        self.alpha = 0.0
        self.last_level = 0
        self._requested: SceneType | None = None

    @property
    def overlay_alpha(self) -> int:
        """Opacity (0-255) of the black overlay; 0 when no transition runs."""
        if not self.on_transition:
            return 0
        return max(0, min(255, int(255.0 * self.alpha)))

    def request(self, scene_type: SceneType) -> None:
        """Ask for a change to ``scene_type``; it begins on the next update."""
        if not isinstance(scene_type, SceneType):
            raise TypeError(f"not a scene type: {scene_type!r}")
        self._requested = scene_type
        if scene_type.is_level:
            self.last_level = scene_type.level_number

    def update(self, dt: float) -> SceneType | None:
        """Advance the fade by ``dt`` seconds.

        Returns the scene that became current during this step, else None.
        """
        switched = None
        if self.on_transition:
            if not self.fade_out_completed:
                self.alpha += FADEOUT_TRANSITION_SPEED * dt
                # Compare past 1.0 so float rounding cannot stall the last frame.
                if self.alpha > 1.01:
                    self.alpha = 1.0
                    if self.next is not None:
                        self.current = self.next
                        switched = self.current
                    self.next = None
                    self.fade_out_completed = True
            else:
                self.alpha -= FADEIN_TRANSITION_SPEED * dt
                if self.alpha < -0.01:
                    self.alpha = 0.0
                    self.fade_out_completed = False
                    self.on_transition = False

        if self._requested is not None:
            self.on_transition = True
            self.fade_out_completed = False
            self.alpha = 0.0
            self.next = self._requested
            self._requested = None
        return switched


def next_scene_after_win(last_level: int) -> SceneType | None:
    """Scene that follows the win screen: level 2 after level 1, intro after level 2."""
    return {1: SceneType.LEVEL2, 2: SceneType.INTRO}.get(last_level)


def next_scene_after_lose(last_level: int) -> SceneType | None:
    """Scene that follows the lose screen: the level that was lost."""
    return {1: SceneType.LEVEL1, 2: SceneType.LEVEL2}.get(last_level)
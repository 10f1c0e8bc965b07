"""Camera arithmetic for drawing, and window settings read from XML."""

from __future__ import annotations

import enum
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .geometry import Point, Rect

CIRCLE_POINTS = 360


def _int_attr(element: ET.Element | None, name: str, default: int = 0) -> int:
    if element is None:
        return default
    value = element.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _bool_attr(element: ET.Element | None, name: str, default: bool = False) -> bool:
    if element is None:
        return default
    value = element.get(name)
    if value is None:
        return default
    value = value.lstrip()
    return bool(value) and value[0] in "1tTyY"


@dataclass
class Camera:
    """The visible area of the world, in screen pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def load_state(self, element: ET.Element) -> None:
        """Read the position from a ``<camera x=".." y=".."/>`` child."""
        camera = element.find("camera")
        self.x = _int_attr(camera, "x")
        self.y = _int_attr(camera, "y")

    def save_state(self, element: ET.Element) -> None:
        """Write the position into the ``<camera>`` child."""
        camera = element.find("camera")
        if camera is None:
            camera = ET.SubElement(element, "camera")
        camera.set("x", str(self.x))
        camera.set("y", str(self.y))

    def destination_rect(
        self, x: int, y: int, width: int, height: int, speed: float = 1.0, scale: int = 1
    ) -> Rect:
        """Screen rectangle for a sprite at world (x, y) of the given size."""
        return Rect(
            int(self.x * speed) + x * scale,
            int(self.y * speed) + y * scale,
            width * scale,
            height * scale,
        )

    def screen_rect(self, rect: Rect, scale: int = 1, use_camera: bool = True) -> Rect:
        """Screen rectangle for a drawn quad; unchanged when not using the camera."""
        if not use_camera:
            return rect
        return Rect(
            self.x + rect.x * scale,
            self.y + rect.y * scale,
            rect.w * scale,
            rect.h * scale,
        )


def circle_points(x: int, y: int, radius: int) -> list[Point]:
    """One point per degree on a circle around (x, y)."""
    factor = math.pi / 180.0
    return [
        Point(int(x + radius * math.cos(i * factor)), int(y + radius * math.sin(i * factor)))
        for i in range(CIRCLE_POINTS)
    ]


class WindowFlag(enum.IntFlag):
    FULLSCREEN = 0x00000001
    SHOWN = 0x00000004
    BORDERLESS = 0x00000010
    RESIZABLE = 0x00000020
    FULLSCREEN_DESKTOP = FULLSCREEN | 0x00001000


# Build-time window options.
WIN_BORDERLESS = False
WIN_RESIZABLE = True


@dataclass
class WindowConfig:
    """Window settings from the configuration file."""

    fullscreen: bool = False
    borderless: bool = False
    resizable: bool = False
    fullscreen_window: bool = False
    width: int = 640
    height: int = 480
    scale: int = 1

    @classmethod
    def from_xml(cls, element: ET.Element) -> WindowConfig:
        """Read the settings from a window configuration element."""

        def flag(name: str) -> bool:
            return _bool_attr(element.find(name), "value", False)

        resolution = element.find("resolution")
        return cls(
            fullscreen=flag("fullscreen"),
            borderless=flag("borderless"),
            resizable=flag("resizable"),
            fullscreen_window=flag("fullscreen_window"),
            width=_int_attr(resolution, "width", 640),
            height=_int_attr(resolution, "height", 480),
            scale=_int_attr(resolution, "scale", 1),
        )

    def flags(self) -> WindowFlag:
        """Creation flags for the window.

        Only the fullscreen-window setting and the build-time options take
        part; the other switches are read but not applied.
        """
        result = WindowFlag.SHOWN
        if self.fullscreen_window:
            result |= WindowFlag.FULLSCREEN
        if WIN_BORDERLESS:
            result |= WindowFlag.BORDERLESS
        if WIN_RESIZABLE:
            result |= WindowFlag.RESIZABLE
        if self.fullscreen_window:
            result |= WindowFlag.FULLSCREEN_DESKTOP
        return result
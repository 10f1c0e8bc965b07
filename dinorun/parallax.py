"""Scrolling sky backgrounds for the two levels."""

from __future__ import annotations

import struct

from .geometry import Point

# Horizontal scroll factor of the first level's sky.
SKY_SPEED = -0.9
# Vertical offset of the first level's sky before scaling.
SKY_BASE_Y = 1250
# Vertical scroll factor of the first level's sky.
SKY_Y_FACTOR = 0.2
# Horizontal scroll factor of the second level's tiled sky.
PARALLAX_SPEED = -1.3
# Vertical scroll factor of the second level's tiled sky.
STRIP_Y_FACTOR = -0.2


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _scaled(value: int, factor: float) -> int:
    """``value`` times a single-precision ``factor``, truncated toward zero."""
    return int(_f32(value * _f32(factor)))


def _horizontal_offset(camera_x: int, speed: float) -> int:
    return _scaled(_tdiv(camera_x, 6) - 10, speed)


def sky_offset(camera_x: int, camera_y: int) -> Point:
    """World position of the first level's single sky image for a camera position."""
    x = _horizontal_offset(camera_x, SKY_SPEED)
    y = _scaled(_tdiv(camera_y, 6) + SKY_BASE_Y, SKY_Y_FACTOR)
    return Point(x, y)


class ParallaxStrip:
    """Three copies of a sky image that leapfrog each other as the camera scrolls.

    ``moves`` holds, for each copy, how many image widths it sits from the
    origin. A copy that falls behind the view jumps three widths ahead, and
    back again when the camera scrolls the other way.
    """

    def __init__(self, width: int) -> None:
        if width <= 0:
            raise ValueError("the sky image needs a positive width")
        self.width = width
        self.moves = [-1, 0, 1]

    def update(self, camera_x: int, camera_y: int) -> list[Point]:
        """Reposition the copies for a camera position; returns where to draw each."""
        width = self.width
        half = _f32(width * _f32(0.5))
        img_y = _scaled(_tdiv(camera_y, 6), STRIP_Y_FACTOR)
        x = -camera_x
        img_x = _horizontal_offset(camera_x, PARALLAX_SPEED)

        x_w = x + width
        x_speed = x + img_x
        positions = [move * width for move in self.moves]
        moves = self.moves

        # Back to front
        for i in range(3):
            if (
                x_w + img_x > (positions[i] + half) + img_x
                and x_speed > width * (moves[i] + 2) + img_x
            ):
                moves[i] += 3

        # Front to back: each copy's position decides whether its predecessor moves.
        for behind, ahead, mover in ((0, 2, 2), (1, 0, 0), (2, 1, 1)):
            if x_speed < (positions[behind] + half) + img_x and moves[ahead] > moves[behind]:
                moves[mover] -= 3

        return [Point(move * width + img_x, img_y) for move in moves]
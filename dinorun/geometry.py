"""Small geometric value types and helpers shared across the game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An integer position on the map or in the world."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def distance_manhattan(self, other: Point) -> int:
        """Sum of the absolute horizontal and vertical distances."""
        return abs(other.x - self.x) + abs(other.y - self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle: position and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def in_range(value, low, high) -> bool:
    """True when ``low <= value <= high``."""
    return low <= value <= high


def join_path(folder: str, file: str) -> str:
    """Join a folder and a file name with a forward slash."""
    return f"{folder}/{file}"
"""Step-by-step breadth-first and A* searches over a tile map's collision layer."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable

from .dynarray import DynArray
from .geometry import Point
from .tilemap import TileMap

# Neighbour order: right, down, left, up.
_STEPS = (Point(1, 0), Point(0, 1), Point(-1, 0), Point(0, -1))


class MapSearch:
    """Incremental search from a start tile towards ``tile_destiny``.

    Each propagation step expands one frontier tile. When the destination is
    taken from the frontier the path is built into ``path`` and the search
    starts over from the destination. The frontier hands out the lowest
    priority first; ties leave in the order they were pushed.
    """

    def __init__(self, tilemap: TileMap) -> None:
        self.tilemap = tilemap
        self.tile_destiny = Point()
        self.visited: list[Point] = []
        self.breadcrumbs: list[Point] = []
        self.path: DynArray[Point] = DynArray()
        self._frontier: list[tuple[int, int, Point]] = []
        self._order = itertools.count()
        self._seen: set[Point] = set()

    @property
    def frontier(self) -> list[Point]:
        """Tiles waiting to be expanded, in the order they will leave."""
        return [point for _, _, point in sorted(self._frontier)]

    def _push(self, point: Point, priority: int) -> None:
        heapq.heappush(self._frontier, (priority, next(self._order), point))

    def _pop(self) -> Point:
        if not self._frontier:
            raise LookupError("the search frontier is empty")
        return heapq.heappop(self._frontier)[2]

    def reset(self, start: Point) -> None:
        """Start a new search from ``start``."""
        self._frontier.clear()
        self.visited = [start]
        self.breadcrumbs = [start]
        self._seen = {start}
        self._push(start, 0)

    def _propagate(self, priority: Callable[[Point], int]) -> bool:
        current = self._pop()
        if current != self.tile_destiny:
            for step in _STEPS:
                neighbour = current + step
                if (
                    self.tilemap.movement_cost(neighbour.x, neighbour.y) > 0
                    and neighbour not in self._seen
                ):
                    self._push(neighbour, priority(neighbour))
                    self._seen.add(neighbour)
                    self.visited.append(neighbour)
                    self.breadcrumbs.append(current)
            return True

        self.breadcrumbs.append(current)
        self.compute_path(self.tile_destiny.x, self.tile_destiny.y)
        self.reset(self.tile_destiny)
        return False

    def propagate_dijkstra(self) -> bool:
        """Expand one tile with equal priorities.

        Returns False once the destination was reached and the path built.
        Raises LookupError when the frontier is empty.
        """
        return self._propagate(lambda _: 0)

    def propagate_astar(self, heuristic: int = 0) -> bool:
        """Expand one tile, ordering the frontier by distance to start and goal.

        ``heuristic`` is accepted for compatibility; only the signed distance
        sum is used. Returns False once the path has been built.
        """
        return self._propagate(
            lambda node: self.distance_to_destiny(node) + self.distance_to_start(node)
        )

    def compute_path(self, x: int, y: int) -> None:
        """Walk the breadcrumbs back from the last expanded tile into ``path``.

        The goal is placed first, followed by the chain of tiles back to the
        start.
        """
        if not self.breadcrumbs:
            raise LookupError("no search has been run")
        self.path.clear()
        self.path.push_back(Point(x, y))

        offset = len(self.breadcrumbs) - 1 - len(self.visited)
        target: Point | None = self.breadcrumbs[-1]
        for index in range(len(self.visited) - 1, -1, -1):
            if self.visited[index] == target:
                self.path.push_back(self.visited[index])
                parent = index + offset
                target = self.breadcrumbs[parent] if 0 <= parent < len(self.breadcrumbs) else None

    def distance_to_destiny(self, node: Point) -> int:
        """Signed sum of the offsets from ``node`` to the destination."""
        distance = self.tile_destiny - node
        return distance.x + distance.y

    def distance_to_start(self, node: Point) -> int:
        """Signed sum of the offsets from the search start to ``node``."""
        if not self.visited:
            raise LookupError("no search has been started")
        distance = node - self.visited[0]
        return distance.x + distance.y
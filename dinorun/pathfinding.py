"""A* path search over a byte walkability map."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Sequence

from .dynarray import DynArray
from .geometry import Point

log = logging.getLogger(__name__)

DEFAULT_PATH_LENGTH = 50
INVALID_WALK_CODE = 255

# Neighbour order: left, down, right, up.
_STEPS = (Point(-1, 0), Point(0, 1), Point(1, 0), Point(0, -1))


class PathFinding:
    """Walkability map plus an incremental A* search producing ``last_path``."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self._map: bytes | None = None
        self.last_path: DynArray[Point] = DynArray(DEFAULT_PATH_LENGTH)
        self.visited: list[Point] = []
        self.breadcrumbs: list[Point] = []
        self._frontier: list[tuple[int, int, Point]] = []
        self._order = itertools.count()
        self._seen: set[Point] = set()

    @property
    def frontier(self) -> list[Point]:
        """Tiles waiting to be expanded, in the order they will leave."""
        return [point for _, _, point in sorted(self._frontier)]

    def _push(self, point: Point, priority: int) -> None:
        heapq.heappush(self._frontier, (priority, next(self._order), point))

    def _visit(self, point: Point, parent: Point) -> None:
        self._seen.add(point)
        self.visited.append(point)
        self.breadcrumbs.append(parent)

    def set_map(self, width: int, height: int, data: Sequence[int]) -> None:
        """Install a walkability map of ``width`` x ``height`` bytes."""
        size = width * height
        if len(data) < size:
            raise ValueError(f"walkability map needs {size} cells, got {len(data)}")
        self.width = width
        self.height = height
        self._map = bytes(data[:size])

    def reset_path(self, start: Point) -> None:
        """Start a new search from ``start``."""
        self._frontier.clear()
        self.visited = [start]
        self.breadcrumbs = [start]
        self._seen = {start}
        self._push(start, 0)

    def check_boundaries(self, pos: Point) -> bool:
        """True when ``pos`` lies within the map; the far edges are inclusive."""
        return 0 <= pos.x <= self.width and 0 <= pos.y <= self.height

    def is_walkable(self, pos: Point) -> bool:
        """True when the tile at ``pos`` is inside the map and not blocked."""
        tile = self.tile_at(pos)
        return tile != INVALID_WALK_CODE and tile > 0

    def tile_at(self, pos: Point) -> int:
        """Walkability value at ``pos``, or INVALID_WALK_CODE outside the map."""
        if self._map is not None and self.check_boundaries(pos):
            index = pos.y * self.width + pos.x
            if index < len(self._map):
                return self._map[index]
        return INVALID_WALK_CODE

    def propagate_astar(self, destination: Point) -> bool:
        """Expand one frontier tile; False when the frontier is empty.

        Every new neighbour with a non-zero tile value is marked visited, but
        only those sharing the chosen lowest cost are queued.
        """
        if not self._frontier:
            return False
        current = heapq.heappop(self._frontier)[2]
        origin = self.visited[0]
        neighbours = [current + step for step in _STEPS]

        costs: list[int | None] = [None] * len(neighbours)
        best = 0
        found = False
        for index, neighbour in enumerate(neighbours):
            if self.tile_at(neighbour) > 0 and neighbour not in self._seen:
                costs[index] = (
                    neighbour.distance_manhattan(origin)
                    + neighbour.distance_manhattan(destination)
                )
                if not found:
                    best, found = index, True

        # The upper bound moves with the chosen index.
        index = best + 1
        while index <= 3 - best:
            cost, best_cost = costs[index], costs[best]
            if (
                neighbours[index] not in self._seen
                and cost is not None
                and best_cost is not None
                and best_cost > cost
            ):
                best = index
            index += 1

        for index, neighbour in enumerate(neighbours):
            if neighbour not in self._seen and self.tile_at(neighbour) > 0:
                self._visit(neighbour, current)
                if costs[best] == costs[index]:
                    self._push(neighbour, costs[index])
        return True

    def compute_path_astar(self, origin: Point, destination: Point) -> bool:
        """Run the search until ``destination`` is visited and fill ``last_path``.

        The search must already have been reset to ``origin``. Returns False,
        leaving ``last_path`` untouched, when the frontier runs dry first.
        """
        scanned = 0
        while True:
            if not self.propagate_astar(destination):
                log.debug("No path from %s to %s", origin, destination)
                return False
            found = next(
                (k for k in range(scanned, len(self.visited)) if self.visited[k] == destination),
                None,
            )
            if found is not None:
                break
            scanned = len(self.visited)

        self.last_path.clear()
        self.last_path.push_back(destination)
        parent = self.breadcrumbs[found]
        self.last_path.push_back(parent)
        for index in range(len(self.visited) - 1, 0, -1):
            if self.visited[index] == parent:
                parent = self.breadcrumbs[index]
                self.last_path.push_back(parent)
        self.last_path.flip()
        return True

    def clear(self) -> None:
        """Forget the last path and the walkability map."""
        log.debug("Freeing pathfinding data")
        self.last_path.clear()
        self._map = None
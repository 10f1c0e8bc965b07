import pytest

from dinorun.geometry import Point
from dinorun.pathfinding import INVALID_WALK_CODE, PathFinding


def open_grid(width, height):
    finder = PathFinding()
    finder.set_map(width, height, bytes([1] * (width * height)))
    return finder


def test_set_map_rejects_short_data():
    finder = PathFinding()
    with pytest.raises(ValueError):
        finder.set_map(3, 3, bytes([1, 1, 1]))


def test_tile_at_reads_row_major():
    finder = PathFinding()
    finder.set_map(3, 2, bytes([1, 0, 2, 1, 1, 7]))
    assert finder.tile_at(Point(2, 0)) == 2
    assert finder.tile_at(Point(1, 0)) == 0
    assert finder.tile_at(Point(2, 1)) == 7


def test_tile_at_outside_is_invalid():
    finder = open_grid(3, 3)
    assert finder.tile_at(Point(-1, 0)) == INVALID_WALK_CODE
    assert finder.tile_at(Point(0, -1)) == INVALID_WALK_CODE
    assert INVALID_WALK_CODE == 255


def test_check_boundaries_includes_far_edge():
    finder = open_grid(4, 2)
    assert finder.check_boundaries(Point(4, 2)) is True
    assert finder.check_boundaries(Point(5, 0)) is False
    assert finder.check_boundaries(Point(0, -1)) is False


def test_is_walkable():
    finder = PathFinding()
    finder.set_map(2, 1, bytes([1, 0]))
    assert finder.is_walkable(Point(0, 0)) is True
    assert finder.is_walkable(Point(1, 0)) is False
    assert finder.is_walkable(Point(-1, 0)) is False


def test_reset_path_seeds_search():
    finder = open_grid(3, 3)
    finder.reset_path(Point(1, 1))
    assert finder.frontier == [Point(1, 1)]
    assert finder.visited == [Point(1, 1)]
    assert finder.breadcrumbs == [Point(1, 1)]


def test_straight_path():
    finder = open_grid(5, 5)
    finder.reset_path(Point(0, 0))
    assert finder.compute_path_astar(Point(0, 0), Point(3, 0)) is True
    assert list(finder.last_path) == [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)]


def test_diagonal_goal_path_is_connected():
    finder = open_grid(5, 5)
    finder.reset_path(Point(0, 0))
    assert finder.compute_path_astar(Point(0, 0), Point(2, 2)) is True
    path = list(finder.last_path)
    assert path[0] == Point(0, 0)
    assert path[-1] == Point(2, 2)
    for a, b in zip(path, path[1:]):
        assert a.distance_manhattan(b) == 1
    assert len(path) == Point(0, 0).distance_manhattan(Point(2, 2)) + 1


def test_visited_and_breadcrumbs_stay_parallel():
    finder = open_grid(5, 5)
    finder.reset_path(Point(0, 0))
    finder.compute_path_astar(Point(0, 0), Point(2, 2))
    assert len(finder.visited) == len(finder.breadcrumbs)
    assert len(set(finder.visited)) == len(finder.visited)


def test_propagate_on_empty_frontier_returns_false():
    finder = open_grid(3, 3)
    assert finder.propagate_astar(Point(2, 2)) is False


def test_compute_without_reset_leaves_path_untouched():
    finder = open_grid(3, 3)
    assert finder.compute_path_astar(Point(0, 0), Point(2, 2)) is False
    assert len(finder.last_path) == 0


def test_clear_drops_path_and_map():
    finder = open_grid(5, 5)
    finder.reset_path(Point(0, 0))
    finder.compute_path_astar(Point(0, 0), Point(3, 0))
    finder.clear()
    assert len(finder.last_path) == 0
    assert finder.tile_at(Point(0, 0)) == INVALID_WALK_CODE
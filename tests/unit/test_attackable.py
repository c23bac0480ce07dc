"""Tests for attackable tile composition."""

from __future__ import annotations

import pytest

from hexpath.domain.pathfinding import PathFinder
from hexpath.utils.hex_math import CubeCoordinates, OffsetCoordinates
from hexpath.utils.rng import seeded_random

START = CubeCoordinates(0, 0, 0)


@pytest.fixture
def finder() -> PathFinder:
    return PathFinder.from_layers([[1] * 16], 4, 4, rng=seeded_random("attack"))


def _offsets(cells: list[CubeCoordinates]) -> set[tuple[int, int]]:
    return {(cell.to_offset().x, cell.to_offset().y) for cell in cells}


class TestAttackableTiles:
    def test_ring_beyond_movement(self, finder):
        cells = finder.attackable_tiles(START, 2, 1, 0)
        assert _offsets(cells) == {(3, 0), (2, 1), (2, 2), (0, 3), (1, 3)}
        assert len(cells) == 5

    def test_include_reachable(self, finder):
        cells = finder.attackable_tiles(START, 2, 1, 0, include_reachable=True)
        assert len(cells) == 11
        assert START not in cells
        assert set(finder.reachable_tiles(START, 2, 0)) <= set(cells)

    def test_blocking_obstacle_is_target_and_wall(self, finder):
        blocker = OffsetCoordinates(1, 1).to_cube()
        cells = finder.attackable_tiles(START, 2, 1, 0, blocking_obstacles=[blocker])
        assert _offsets(cells) == {(1, 1), (3, 0), (2, 1), (0, 3), (2, 2), (1, 3)}

    def test_blocking_obstacle_stops_spread(self):
        corridor = PathFinder.from_layers([[1] * 4], 1, 4)
        blocker = CubeCoordinates(1, 0, -1)
        cells = corridor.attackable_tiles(START, 1, 2, 0, blocking_obstacles=[blocker])
        assert cells == [blocker]

    def test_non_blocking_obstacle_cannot_be_attacked_from(self, finder):
        occupant = CubeCoordinates(1, 0, -1)
        cells = finder.attackable_tiles(START, 2, 1, 0, non_blocking_obstacles=[occupant])
        assert _offsets(cells) == {(1, 0), (3, 0), (2, 1), (2, 2), (0, 3), (1, 3)}

    @pytest.mark.parametrize(("move_range", "attack_range"), [(0, 1), (2, 0), (-1, 3)])
    def test_non_positive_ranges(self, finder, move_range, attack_range):
        assert finder.attackable_tiles(START, move_range, attack_range, 0) == []

    def test_invalid_layer(self, finder):
        assert finder.attackable_tiles(START, 2, 1, 1) == []

    def test_off_map_start(self, finder):
        assert finder.attackable_tiles(CubeCoordinates(-1, 0, 1), 2, 1, 0) == []

    def test_impassable_start(self):
        finder = PathFinder.from_layers([[0] + [1] * 15], 4, 4)
        assert finder.attackable_tiles(START, 2, 1, 0) == []

    def test_no_duplicates(self, finder):
        cells = finder.attackable_tiles(START, 3, 2, 0, include_reachable=True)
        assert len(cells) == len(set(cells))
        assert START not in cells


def test_include_reachable_keeps_isolated_positions():
    finder = PathFinder.from_layers([[1, 1, 1, 0, 0, 0]], 2, 3)
    occupant = CubeCoordinates(1, 0, -1)
    far_end = CubeCoordinates(2, 0, -2)

    cells = finder.attackable_tiles(
        START, 3, 1, 0, non_blocking_obstacles=[occupant], include_reachable=True
    )

    assert far_end in finder.reachable_tiles(START, 3, 0)
    assert far_end in cells
    assert occupant in cells
    assert START not in cells

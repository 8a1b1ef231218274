"""Randomized growing-tree maze carving over the odd-coordinate lattice."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from dungeon_geometry import CARDINAL_DIRECTIONS, Direction, Point
from dungeon_grid import Grid
from dungeon_models import DeadEndPolicy, Material

logger = logging.getLogger(__name__)


class MazeGrower:
    """Fills every unclaimed lattice cell with corridors sharing one region.

    Each growth pass keeps an active list of cells. A cell is picked uniformly
    at random and extended two cells in a random carvable direction; cells with
    nothing left to carve are evicted according to ``dead_end_policy``. Passes
    only ever carve rock, so every pass produces a cycle-free tree and passes
    never overlap each other or previously carved rooms.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        dead_end_policy: DeadEndPolicy = DeadEndPolicy.EVICT_EXAMINED,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.dead_end_policy = DeadEndPolicy.from_value(dead_end_policy)

    def grow_maze(self, grid: Grid) -> int:
        """Carve corridors into all remaining lattice cells and return their region id."""
        region = grid.new_region()
        passes = 0
        carved = 0
        for y in range(1, grid.height - 1, 2):
            for x in range(1, grid.width - 1, 2):
                start = Point(x, y)
                if grid.at(start) is Material.CARVED:
                    continue
                carved += self.grow(grid, start, region)
                passes += 1

        logger.debug(
            "Maze region %d: %d cells carved over %d growth passes",
            region,
            carved,
            passes,
        )
        return region

    def grow(self, grid: Grid, start: Point, region: int) -> int:
        """Run one growth pass from ``start``; returns the number of cells carved."""
        grid.carve(start, region)
        carved = 1
        cells: List[Point] = [start]

        while cells:
            index = self.rng.randrange(len(cells))
            cell = cells[index]

            unmade = [d for d in CARDINAL_DIRECTIONS if self._can_carve(grid, cell, d)]

            if unmade:
                direction = self.rng.choice(unmade)
                grid.carve(cell.step(direction), region)
                grid.carve(cell.step(direction, 2), region)
                cells.append(cell.step(direction, 2))
                carved += 2
            elif self.dead_end_policy is DeadEndPolicy.EVICT_OLDEST:
                cells.pop(0)
            else:
                cells.pop(index)

        return carved

    @staticmethod
    def _can_carve(grid: Grid, cell: Point, direction: Direction) -> bool:
        beyond = cell.step(direction, 3)
        if not grid.in_bounds(beyond):
            return False
        return grid.at(cell.step(direction, 2)) is Material.ROCK


def grow_maze(
    grid: Grid,
    rng: Optional[random.Random] = None,
    dead_end_policy: DeadEndPolicy = DeadEndPolicy.EVICT_EXAMINED,
) -> int:
    return MazeGrower(rng, dead_end_policy).grow_maze(grid)

import random
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from dungeon_config import DungeonConfig
from dungeon_geometry import Point, Rect
from dungeon_grid import Grid
from maze_grower import MazeGrower
from room_placement import carve_room


@pytest.fixture
def dungeon_config() -> DungeonConfig:
    return DungeonConfig(
        width=31,
        height=31,
        room_tries=30,
        room_min_size=(3, 3),
        room_max_size=(7, 7),
        random_seed=99,
        collect_metrics=True,
    )


@pytest.fixture
def scenario_grid() -> Grid:
    """9x9 grid with a 3x3 room as region 1 and the maze as region 2."""
    grid = Grid(9, 9)
    carve_room(grid, Rect.from_corners(Point(1, 1), Point(4, 4)))
    MazeGrower(random.Random(7)).grow_maze(grid)
    return grid


@pytest.fixture
def make_grid() -> Callable[..., Grid]:
    def _make_grid(*rows: str) -> Grid:
        """Build a grid from ASCII rows: '#' is rock, digits are carved region ids."""
        height = len(rows)
        width = len(rows[0])
        grid = Grid(width, height)
        highest = max((int(ch) for row in rows for ch in row if ch.isdigit()), default=0)
        for _ in range(highest):
            grid.new_region()
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch.isdigit():
                    grid.carve(Point(x, y), int(ch))
        return grid

    return _make_grid

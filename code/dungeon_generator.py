"""DungeonGenerator runs the rooms, maze, connector and join steps in order."""

from __future__ import annotations

import logging
import random
from time import perf_counter
from typing import Callable, List, Optional, TypeVar

from dungeon_config import DungeonConfig
from dungeon_geometry import Rect
from dungeon_grid import Grid
from dungeon_models import Connector
from maze_grower import MazeGrower
from metrics import GenerationMetrics
from region_connector import find_connectors
from region_joiner import JoinResult, RegionJoiner
from room_placement import RoomPlacer, carve_rooms

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DungeonGenerator:
    """Manages the overall process of generating one dungeon grid.

    All randomness comes from ``self.rng``, a ``random.Random`` seeded from
    ``config.random_seed`` unless one is passed in, so a fixed seed and config
    always reproduce the same grid.
    """

    def __init__(self, config: DungeonConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.random_seed)
        self.grid = Grid(config.width, config.height)
        self.metrics = GenerationMetrics() if config.collect_metrics else None

        self.rooms: List[Rect] = []
        self.room_regions: List[int] = []
        self.maze_region: Optional[int] = None
        self.connectors: List[Connector] = []
        self.join_result: Optional[JoinResult] = None
        self._generated = False

        self.room_placer = RoomPlacer(config.room_size_range, config.room_tries, self.rng)
        self.maze_grower = MazeGrower(self.rng, config.dead_end_policy)
        self.region_joiner = RegionJoiner(self.rng, config.extra_connector_chance)

    def _run_step(self, name: str, func: Callable[..., T], *args, **kwargs) -> T:
        if self.metrics is None:
            return func(*args, **kwargs)

        cells_before = self.grid.carved_count
        regions_before = self.grid.region_count
        start = perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = perf_counter() - start
            self.metrics.record_step(
                name,
                duration,
                self.grid.carved_count - cells_before,
                self.grid.region_count - regions_before,
            )

    def generate(self) -> Grid:
        """Generates the dungeon grid and returns it."""
        if self._generated:
            raise RuntimeError("DungeonGenerator.generate() can only run once per instance")
        self._generated = True

        self.rooms = self._run_step("place_rooms", self.room_placer.create_rooms, self.grid.bounds())
        self.room_regions = self._run_step("carve_rooms", carve_rooms, self.grid, self.rooms)
        self.maze_region = self._run_step("grow_maze", self.maze_grower.grow_maze, self.grid)
        self.connectors = self._run_step("find_connectors", find_connectors, self.grid)

        if self.config.join_regions:
            self.join_result = self._run_step(
                "join_regions", self.region_joiner.join, self.grid, self.connectors
            )

        logger.info(
            "Generated %dx%d grid: %d rooms, %d regions, %d connectors, %d cells carved",
            self.grid.width,
            self.grid.height,
            len(self.rooms),
            self.grid.region_count,
            len(self.connectors),
            self.grid.carved_count,
        )
        return self.grid

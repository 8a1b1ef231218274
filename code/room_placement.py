"""Room placement: best-effort, non-overlapping rooms aligned to the odd lattice."""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from dungeon_config import RoomSizeRange
from dungeon_geometry import Point, Rect
from dungeon_grid import Grid

logger = logging.getLogger(__name__)


class RoomPlacer:
    """Draws random room rectangles and keeps the ones that fit."""

    def __init__(
        self,
        size_range: RoomSizeRange,
        max_tries: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        if max_tries < 0:
            raise ValueError("RoomPlacer max_tries cannot be negative")
        self.size_range = size_range
        self.max_tries = max_tries
        self.rng = rng if rng is not None else random.Random()

    def _random_lattice_point(self, bounds: Rect) -> Point:
        """Random odd coordinate inside ``bounds`` on each axis."""
        return Point(
            self._random_odd(bounds.x, bounds.max_x),
            self._random_odd(bounds.y, bounds.max_y),
        )

    def _random_odd(self, low: int, high: int) -> int:
        first = low | 1
        return first + self.rng.randrange(max(1, (high - first + 1) // 2)) * 2

    def _build_candidate(self, bounds: Rect) -> Rect:
        anchor = self._random_lattice_point(bounds)
        width, height = self.size_range.sample(self.rng)
        return Rect(anchor.x, anchor.y, width, height)

    @staticmethod
    def _is_valid_placement(candidate: Rect, bounds: Rect, accepted: Iterable[Rect]) -> bool:
        """Checks if a candidate room is in bounds and doesn't overlap accepted rooms."""
        if not bounds.contains_rect(candidate):
            return False
        return not any(candidate.overlaps(room) for room in accepted)

    def create_rooms(self, bounds: Rect) -> List[Rect]:
        """Run the attempt budget and return every room that was accepted."""
        rooms: List[Rect] = []
        for attempt in range(self.max_tries):
            candidate = self._build_candidate(bounds)
            if not self._is_valid_placement(candidate, bounds, rooms):
                logger.debug("Rejected room %s on attempt %d", candidate.to_tuple(), attempt)
                continue
            rooms.append(candidate)

        logger.debug("Placed %d rooms in %d attempts", len(rooms), self.max_tries)
        return rooms


def create_rooms(
    bounds: Rect,
    size_range: RoomSizeRange,
    max_tries: int,
    rng: Optional[random.Random] = None,
) -> List[Rect]:
    return RoomPlacer(size_range, max_tries, rng).create_rooms(bounds)


def carve_room(grid: Grid, room: Rect) -> int:
    """Carve every cell of ``room`` with a fresh region id and return the id."""
    region = grid.new_region()
    for point in room.points():
        grid.carve(point, region)
    return region


def carve_rooms(grid: Grid, rooms: Iterable[Rect]) -> List[int]:
    return [carve_room(grid, room) for room in rooms]

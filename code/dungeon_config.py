"""Configuration container for the dungeon generation prototype."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dungeon_constants import (
    GRID_SIZE,
    MIN_ROOM_SIDE,
    RANDOM_SEED,
    ROOM_MAX_SIZE,
    ROOM_MIN_SIZE,
    ROOM_TRIES,
)
from dungeon_models import DeadEndPolicy


@dataclass(frozen=True)
class RoomSizeRange:
    """Odd-aligned room dimensions drawn between a minimum and maximum per axis."""

    min_size: Tuple[int, int]
    max_size: Tuple[int, int]

    def __post_init__(self) -> None:
        min_size = (int(self.min_size[0]), int(self.min_size[1]))
        max_size = (int(self.max_size[0]), int(self.max_size[1]))
        for axis, (low, high) in zip("xy", zip(min_size, max_size)):
            if low < MIN_ROOM_SIDE:
                raise ValueError(f"Room min size on {axis} must be at least {MIN_ROOM_SIDE}, got {low}")
            if low % 2 == 0 or high % 2 == 0:
                raise ValueError(f"Room sizes on {axis} must be odd, got min={low} max={high}")
            if high < low:
                raise ValueError(f"Room max size on {axis} must be >= min size, got min={low} max={high}")

        object.__setattr__(self, "min_size", min_size)
        object.__setattr__(self, "max_size", max_size)

    def sample(self, rng: Optional[random.Random] = None) -> Tuple[int, int]:
        """Draw a (width, height) pair; both stay odd and within range."""
        generator = rng if rng is not None else random
        width = self._sample_axis(generator, 0)
        height = self._sample_axis(generator, 1)
        return width, height

    def _sample_axis(self, generator, axis: int) -> int:
        low = self.min_size[axis]
        high = self.max_size[axis]
        return generator.randrange((high - low) // 2 + 1) * 2 + low

    @classmethod
    def default(cls) -> "RoomSizeRange":
        return cls(min_size=ROOM_MIN_SIZE, max_size=ROOM_MAX_SIZE)


@dataclass
class DungeonConfig:
    """Aggregates all tunable parameters for dungeon generation."""

    width: int = GRID_SIZE
    height: int = GRID_SIZE
    # Number of room placement attempts; rejected attempts are not retried.
    room_tries: int = ROOM_TRIES
    room_min_size: Tuple[int, int] = ROOM_MIN_SIZE
    room_max_size: Tuple[int, int] = ROOM_MAX_SIZE
    random_seed: int | None = RANDOM_SEED

    dead_end_policy: DeadEndPolicy = DeadEndPolicy.EVICT_EXAMINED
    # Carve connectors until a single region remains; False keeps the partitioned layout.
    join_regions: bool = True
    # Chance of also opening a connector that became redundant after a merge.
    extra_connector_chance: float = 0.0
    collect_metrics: bool = False
    _room_size_range: RoomSizeRange = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("DungeonConfig width and height must be positive")
        if self.room_tries < 0:
            raise ValueError("DungeonConfig room_tries cannot be negative")
        if not (0.0 <= self.extra_connector_chance <= 1.0):
            raise ValueError("DungeonConfig extra_connector_chance must lie within [0, 1]")

        self.room_min_size = tuple(self.room_min_size)  # type: ignore[assignment]
        self.room_max_size = tuple(self.room_max_size)  # type: ignore[assignment]
        self._room_size_range = RoomSizeRange(
            min_size=self.room_min_size,
            max_size=self.room_max_size,
        )
        self.dead_end_policy = DeadEndPolicy.from_value(self.dead_end_policy)

    @property
    def grid_size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def room_size_range(self) -> RoomSizeRange:
        return self._room_size_range

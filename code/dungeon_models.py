"""Core value types shared by the generation steps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from dungeon_geometry import Direction, Point


class Material(Enum):
    """What a single grid cell is made of."""
    ROCK = 0 # Initial state of every cell.
    CARVED = 1 # Passable space belonging to a region.


class DeadEndPolicy(Enum):
    """Which active cell the maze grower drops when the examined cell is a dead end."""
    EVICT_EXAMINED = "examined" # Standard growing-tree: drop the cell that had no carvable neighbor.
    EVICT_OLDEST = "oldest" # Drop the front of the active list regardless of which cell was examined.

    @classmethod
    def from_value(cls, value: "DeadEndPolicy | str") -> DeadEndPolicy:
        if isinstance(value, DeadEndPolicy):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise ValueError(f"Unsupported dead end policy {value!r}") from exc


@dataclass(frozen=True)
class ConnectorSide:
    """One flank of a connector: the direction from the connector cell and the region found there."""

    direction: Direction
    region: int


@dataclass(frozen=True)
class Connector:
    """A rock cell that, if carved, would join the regions on its two flanks."""

    location: Point
    side_a: ConnectorSide
    side_b: ConnectorSide

    def __post_init__(self) -> None:
        if self.side_a.direction.reverse() is not self.side_b.direction:
            raise ValueError("Connector sides must face opposite directions")
        if self.side_a.region == self.side_b.region:
            raise ValueError(f"Connector at {self.location.to_tuple()} must join two different regions")

    @property
    def regions(self) -> Tuple[int, int]:
        return self.side_a.region, self.side_b.region

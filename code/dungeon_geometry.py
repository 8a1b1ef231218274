"""Geometry helpers for lattice points, cardinal directions, and rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union


@dataclass(frozen=True, order=True)
class Point:
    """Integer cell coordinate, also used as a vector."""

    x: int
    y: int

    def __add__(self, other: Union[Point, Direction]) -> Point:
        if isinstance(other, Direction):
            other = other.vector
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: int) -> Point:
        if not isinstance(factor, int):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def step(self, direction: Direction, distance: int = 1) -> Point:
        """Return the point ``distance`` cells away along ``direction``."""
        return Point(self.x + direction.dx * distance, self.y + direction.dy * distance)

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> Point:
        return cls(*value)


class Direction(Enum):
    """The four cardinal unit vectors, in Up, Right, Down, Left order."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def vector(self) -> Point:
        return Point(self.dx, self.dy)

    def reverse(self) -> Direction:
        return Direction((-self.dx, -self.dy))

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> Direction:
        try:
            return cls(tuple(value))
        except ValueError as exc:
            raise ValueError(f"Unsupported direction {value}") from exc


CARDINAL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Rect:
    """Immutable axis-aligned rectangle using integer cell coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def max_x(self) -> int:
        """Right edge (exclusive)."""
        return self.x + self.width

    @property
    def max_y(self) -> int:
        """Bottom edge (exclusive)."""
        return self.y + self.height

    @property
    def min(self) -> Point:
        return Point(self.x, self.y)

    @property
    def max(self) -> Point:
        return Point(self.max_x, self.max_y)

    @property
    def area(self) -> int:
        return max(0, self.width) * max(0, self.height)

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def overlaps(self, other: Rect) -> bool:
        """Return True when the interior of this rect intersects another rect."""
        if self.is_empty() or other.is_empty():
            return False
        if self.max_x <= other.x or other.max_x <= self.x:
            return False
        if self.max_y <= other.y or other.max_y <= self.y:
            return False
        return True

    def contains(self, point: Point) -> bool:
        """Return True if the provided cell lies inside this rect."""
        return self.x <= point.x < self.max_x and self.y <= point.y < self.max_y

    def contains_rect(self, other: Rect) -> bool:
        """Return True if ``other`` lies entirely within this rect."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.max_x <= self.max_x
            and other.max_y <= self.max_y
        )

    def points(self) -> Iterator[Point]:
        """Yield every cell of the rect in row-major order."""
        for y in range(self.y, self.max_y):
            for x in range(self.x, self.max_x):
                yield Point(x, y)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Return the rect as an ``(x, y, width, height)`` tuple."""
        return self.x, self.y, self.width, self.height

    @classmethod
    def from_corners(cls, min_corner: Point, max_corner: Point) -> Rect:
        """Build a rect from an inclusive min corner and an exclusive max corner."""
        min_x, min_y = min_corner
        max_x, max_y = max_corner
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

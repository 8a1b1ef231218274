"""Data container for the cell grid and its region labels."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from dungeon_geometry import Point, Rect
from dungeon_models import Material


class Grid:
    """Stores the material and region of every cell, plus the region counter.

    Cells are kept in flat row-major lists indexed by ``y * width + x``. A cell's
    region is only meaningful once it is carved; rock cells always report ``None``.
    Carving is one-way: a carved cell can be relabelled but never changed back.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._materials: List[Material] = [Material.ROCK] * (width * height)
        self._regions: List[Optional[int]] = [None] * (width * height)
        self._region_count = 0
        self._carved_count = 0

    @property
    def region_count(self) -> int:
        return self._region_count

    @property
    def carved_count(self) -> int:
        return self._carved_count

    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def in_bounds(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def _index(self, p: Point) -> int:
        if not self.in_bounds(p):
            raise IndexError(f"Point {p.to_tuple()} outside {self.width}x{self.height} grid")
        return p.y * self.width + p.x

    def at(self, p: Point) -> Material:
        return self._materials[self._index(p)]

    def region_at(self, p: Point) -> Optional[int]:
        return self._regions[self._index(p)]

    def set_material(self, p: Point, material: Material) -> None:
        index = self._index(p)
        current = self._materials[index]
        if current is material and material is Material.ROCK:
            return
        if current is Material.CARVED:
            raise ValueError(f"Cell {p.to_tuple()} is already carved")
        self._materials[index] = material
        self._carved_count += 1

    def set_region(self, p: Point, region: int) -> None:
        index = self._index(p)
        if self._materials[index] is not Material.CARVED:
            raise ValueError(f"Cannot assign region {region} to rock cell {p.to_tuple()}")
        if not (1 <= region <= self._region_count):
            raise ValueError(f"Region {region} has not been allocated")
        self._regions[index] = region

    def carve(self, p: Point, region: int) -> None:
        """Carve a rock cell and label it with ``region``."""
        if not (1 <= region <= self._region_count):
            raise ValueError(f"Region {region} has not been allocated")
        self.set_material(p, Material.CARVED)
        self.set_region(p, region)

    def new_region(self) -> int:
        self._region_count += 1
        return self._region_count

    def regions(self) -> range:
        """Every region id allocated so far, in allocation order."""
        return range(1, self._region_count + 1)

    def points(self) -> Iterator[Point]:
        return self.bounds().points()

    def carved_points(self) -> Iterator[Point]:
        for index, material in enumerate(self._materials):
            if material is Material.CARVED:
                yield Point(index % self.width, index // self.width)

    def materials(self) -> Tuple[Material, ...]:
        """Snapshot of the material array."""
        return tuple(self._materials)

    def region_ids(self) -> Tuple[Optional[int], ...]:
        """Snapshot of the region array."""
        return tuple(self._regions)

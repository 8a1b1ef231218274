"""Connected-component bookkeeping for carved cells, keyed by component id."""

from __future__ import annotations

from typing import Dict, List, Set

import networkx as nx

from dungeon_geometry import CARDINAL_DIRECTIONS, Point
from dungeon_grid import Grid
from layout_analysis import build_cell_graph


class RegionComponents:
    """Tracks groups of orthogonally connected carved cells and merges them.

    Components are seeded from the cell graph, not from region ids, so a
    pocket of corridor walled off from the rest of its region is its own
    component. Component ids are assigned in row-major order of each group's
    first cell and the smaller id survives a merge. Every component carries a
    region label; merging relabels the absorbed cells on the grid so that
    ``Grid.region_at`` reports the smallest label of the merged group.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._parent: Dict[int, int] = {}
        self._cells: Dict[int, List[Point]] = {}
        self._labels: Dict[int, int] = {}
        self._component_of: Dict[Point, int] = {}

        groups = nx.connected_components(build_cell_graph(grid))
        ordered = sorted(groups, key=lambda cells: min((p.y, p.x) for p in cells))
        for component, cells in enumerate(ordered):
            members = sorted(cells, key=lambda p: (p.y, p.x))
            label = min(grid.region_at(p) for p in members)
            self._parent[component] = component
            self._cells[component] = members
            self._labels[component] = label
            for point in members:
                self._component_of[point] = component
                if grid.region_at(point) != label:
                    grid.set_region(point, label)

    def find(self, component: int) -> int:
        root = component
        while self._parent[root] != root:
            root = self._parent[root]
        while component != root:
            parent = self._parent[component]
            self._parent[component] = root
            component = parent
        return root

    def component_at(self, point: Point) -> int:
        """Current root of the component owning the carved cell ``point``."""
        if point not in self._component_of:
            raise KeyError(f"{point.to_tuple()} is not a tracked carved cell")
        return self.find(self._component_of[point])

    def label(self, component: int) -> int:
        return self._labels[self.find(component)]

    def live_components(self) -> Set[int]:
        return set(self._cells)

    def has_single_component(self) -> bool:
        return len(self._cells) <= 1

    def component_sizes(self) -> Dict[int, int]:
        return {component: len(cells) for component, cells in self._cells.items()}

    def merge(self, component_a: int, component_b: int) -> int:
        """Union two components and relabel the absorbed cells; returns the surviving root."""
        root_a = self.find(component_a)
        root_b = self.find(component_b)
        if root_a == root_b:
            return root_a
        root, absorbed = min(root_a, root_b), max(root_a, root_b)
        self._parent[absorbed] = root
        label = min(self._labels[root], self._labels.pop(absorbed))
        self._labels[root] = label
        if label != self.grid.region_at(self._cells[root][0]):
            for point in self._cells[root]:
                self.grid.set_region(point, label)
        absorbed_cells = self._cells.pop(absorbed)
        for point in absorbed_cells:
            if self.grid.region_at(point) != label:
                self.grid.set_region(point, label)
        self._cells[root].extend(absorbed_cells)
        return root

    def carve(self, point: Point, component: int) -> int:
        """Carve ``point`` into ``component`` and merge every carved neighbour into it.

        Returns the root of the resulting component.
        """
        root = self.find(component)
        self.grid.carve(point, self._labels[root])
        self._component_of[point] = root
        self._cells[root].append(point)
        for direction in CARDINAL_DIRECTIONS:
            neighbor = point.step(direction)
            if neighbor in self._component_of:
                root = self.merge(root, self._component_of[neighbor])
        return root

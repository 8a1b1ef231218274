"""Graph-based statistics for a generated grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import networkx as nx

from dungeon_geometry import CARDINAL_DIRECTIONS, Point
from dungeon_grid import Grid
from dungeon_models import Connector, Material


@dataclass
class LayoutStats:
    carved_cells: int
    carved_fraction: float
    live_regions: int
    dead_ends: int
    connector_records: int
    connector_locations: int
    region_graph_components: int
    cell_graph_components: int

    @property
    def is_connected(self) -> bool:
        return self.cell_graph_components <= 1


def _carved_neighbors(grid: Grid, point: Point) -> Iterable[Point]:
    for direction in CARDINAL_DIRECTIONS:
        neighbor = point.step(direction)
        if grid.in_bounds(neighbor) and grid.at(neighbor) is Material.CARVED:
            yield neighbor


def build_cell_graph(grid: Grid, region: Optional[int] = None) -> nx.Graph:
    """Carved cells as nodes, joined by an edge when orthogonally adjacent.

    With ``region`` set, only that region's cells are included.
    """
    graph = nx.Graph()
    for point in grid.carved_points():
        if region is not None and grid.region_at(point) != region:
            continue
        graph.add_node(point)
        for neighbor in _carved_neighbors(grid, point):
            if region is not None and grid.region_at(neighbor) != region:
                continue
            graph.add_edge(point, neighbor)
    return graph


def build_region_graph(connectors: Iterable[Connector]) -> nx.Graph:
    """Regions as nodes; edge weights count the connector records between two regions."""
    graph = nx.Graph()
    for connector in connectors:
        region_a, region_b = connector.regions
        if graph.has_edge(region_a, region_b):
            graph[region_a][region_b]["weight"] += 1
        else:
            graph.add_edge(region_a, region_b, weight=1)
    return graph


def dead_end_cells(grid: Grid) -> List[Point]:
    """Carved cells with exactly one carved neighbor."""
    return [
        point
        for point in grid.carved_points()
        if sum(1 for _ in _carved_neighbors(grid, point)) == 1
    ]


def analyze_layout(grid: Grid, connectors: Iterable[Connector] = ()) -> LayoutStats:
    connectors = list(connectors)
    cell_graph = build_cell_graph(grid)
    region_graph = build_region_graph(connectors)
    live_regions = {grid.region_at(point) for point in grid.carved_points()}
    region_graph.add_nodes_from(live_regions)

    total_cells = grid.width * grid.height
    return LayoutStats(
        carved_cells=grid.carved_count,
        carved_fraction=grid.carved_count / total_cells if total_cells else 0.0,
        live_regions=len(live_regions),
        dead_ends=len(dead_end_cells(grid)),
        connector_records=len(connectors),
        connector_locations=len({connector.location for connector in connectors}),
        region_graph_components=nx.number_connected_components(region_graph),
        cell_graph_components=nx.number_connected_components(cell_graph),
    )

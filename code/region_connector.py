"""Find rock cells that separate two different carved regions."""

from __future__ import annotations

from typing import List

from dungeon_constants import CONNECTOR_MARGIN
from dungeon_geometry import CARDINAL_DIRECTIONS, Point
from dungeon_grid import Grid
from dungeon_models import Connector, ConnectorSide, Material


def find_connectors(grid: Grid) -> List[Connector]:
    """Return connector candidates in row-major order.

    Only cells at least ``CONNECTOR_MARGIN`` away from every border are
    considered. A rock cell yields one record per direction whose two flanks are
    carved with different regions, so a cell between two regions on a single
    axis appears twice (once from each side). The grid is not modified.
    """
    connectors: List[Connector] = []
    for y in range(CONNECTOR_MARGIN, grid.height - CONNECTOR_MARGIN):
        for x in range(CONNECTOR_MARGIN, grid.width - CONNECTOR_MARGIN):
            cell = Point(x, y)
            if grid.at(cell) is not Material.ROCK:
                continue
            for direction in CARDINAL_DIRECTIONS:
                ahead = cell.step(direction)
                behind = cell.step(direction.reverse())
                if grid.at(ahead) is Material.ROCK or grid.at(behind) is Material.ROCK:
                    continue
                region_ahead = grid.region_at(ahead)
                region_behind = grid.region_at(behind)
                if region_ahead == region_behind:
                    continue
                connectors.append(
                    Connector(
                        location=cell,
                        side_a=ConnectorSide(direction, region_ahead),
                        side_b=ConnectorSide(direction.reverse(), region_behind),
                    )
                )
    return connectors

"""Render the dungeon grid to ASCII rows for debugging."""

from __future__ import annotations

from typing import Iterable, List

from dungeon_grid import Grid
from dungeon_models import Connector, Material

ROCK_CHAR = "#"
CARVED_CHAR = "."
CONNECTOR_CHAR = "+"
REGION_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def region_char(region: int) -> str:
    return REGION_CHARS[region % len(REGION_CHARS)]


def render_ascii(
    grid: Grid,
    connectors: Iterable[Connector] = (),
    show_regions: bool = False,
) -> List[str]:
    """Renders one string per grid row.

    Connector locations are only marked while they are still rock, so connectors
    opened by the join step show up as ordinary carved cells.
    """
    rows = [[ROCK_CHAR] * grid.width for _ in range(grid.height)]
    for point in grid.carved_points():
        if show_regions:
            rows[point.y][point.x] = region_char(grid.region_at(point))
        else:
            rows[point.y][point.x] = CARVED_CHAR
    for connector in connectors:
        location = connector.location
        if grid.at(location) is Material.ROCK:
            rows[location.y][location.x] = CONNECTOR_CHAR
    return ["".join(row) for row in rows]


def print_grid(lines: Iterable[str], horizontal_sep: str = "") -> None:
    """Prints rendered rows to the console."""
    for line in lines:
        print(horizontal_sep.join(line))

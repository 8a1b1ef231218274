"""Carve connectors until every carved cell of the grid belongs to one connected component."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from component_manager import RegionComponents
from dungeon_geometry import Point
from dungeon_grid import Grid
from dungeon_models import Connector, Material

logger = logging.getLogger(__name__)


@dataclass
class JoinResult:
    """Outcome of a join run."""

    merges: int = 0
    extra_openings: int = 0
    remaining_components: int = 0
    opened: List[Point] = field(default_factory=list)

    @property
    def fully_connected(self) -> bool:
        return self.remaining_components <= 1


class RegionJoiner:
    """Merges connected components by carving one connector at a time.

    Components are groups of orthogonally connected carved cells, so a pocket
    of corridor that rooms wall off from the rest of the maze counts on its
    own even though it shares the maze's region id. Each iteration picks a
    random component among those still touched by a useful connector, carves
    one of its connectors, and folds the two sides into the smaller region id.
    Connectors left joining a component to itself are discarded, or opened as
    loops with probability ``extra_connector_chance``. The run stops early,
    leaving the layout partitioned, when no connector can join two remaining
    components.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        extra_connector_chance: float = 0.0,
    ) -> None:
        if not (0.0 <= extra_connector_chance <= 1.0):
            raise ValueError("extra_connector_chance must lie within [0, 1]")
        self.rng = rng if rng is not None else random.Random()
        self.extra_connector_chance = extra_connector_chance

    def join(self, grid: Grid, connectors: Iterable[Connector]) -> JoinResult:
        components = RegionComponents(grid)
        result = JoinResult()
        pending = self._prune(grid, components, list(connectors), result)

        while not components.has_single_component():
            if not pending:
                logger.warning(
                    "No connectors left to join %d remaining components",
                    len(components.live_components()),
                )
                break

            touched = sorted(
                {root for connector in pending for root in self._roots(components, connector)}
            )
            component = self.rng.choice(touched)
            touching = [
                connector
                for connector in pending
                if component in self._roots(components, connector)
            ]
            connector = self.rng.choice(touching)

            root_a, _ = self._roots(components, connector)
            root = components.carve(connector.location, root_a)
            result.opened.append(connector.location)
            result.merges += 1
            logger.debug(
                "Joined regions %s at %s into region %d",
                connector.regions,
                connector.location.to_tuple(),
                components.label(root),
            )

            pending = self._prune(grid, components, pending, result)

        result.remaining_components = len(components.live_components())
        return result

    @staticmethod
    def _roots(components: RegionComponents, connector: Connector) -> Tuple[int, int]:
        """Components on either flank, resolved by cell rather than by region id."""
        location = connector.location
        return (
            components.component_at(location.step(connector.side_a.direction)),
            components.component_at(location.step(connector.side_b.direction)),
        )

    def _prune(
        self,
        grid: Grid,
        components: RegionComponents,
        connectors: List[Connector],
        result: JoinResult,
    ) -> List[Connector]:
        """Drop connectors that no longer join two components, opening some of them as loops."""
        remaining: List[Connector] = []
        for connector in connectors:
            if grid.at(connector.location) is not Material.ROCK:
                continue
            root_a, root_b = self._roots(components, connector)
            if root_a != root_b:
                remaining.append(connector)
                continue
            if self.extra_connector_chance > 0 and self.rng.random() < self.extra_connector_chance:
                components.carve(connector.location, root_a)
                result.opened.append(connector.location)
                result.extra_openings += 1
        return remaining


def join_regions(
    grid: Grid,
    connectors: Iterable[Connector],
    rng: Optional[random.Random] = None,
    extra_connector_chance: float = 0.0,
) -> JoinResult:
    return RegionJoiner(rng, extra_connector_chance).join(grid, connectors)

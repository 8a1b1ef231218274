import random

from dungeon_config import DungeonConfig
from dungeon_generator import DungeonGenerator
from dungeon_grid import Grid
from dungeon_geometry import Direction, Point
from dungeon_models import Connector, ConnectorSide, Material
from maze_grower import grow_maze
from region_connector import find_connectors


def test_rock_between_two_regions_yields_one_record_per_side(make_grid):
    grid = make_grid(
        "#######",
        "#######",
        "#######",
        "##1#2##",
        "#######",
        "#######",
        "#######",
    )

    connectors = find_connectors(grid)

    assert connectors == [
        Connector(
            location=Point(3, 3),
            side_a=ConnectorSide(Direction.RIGHT, 2),
            side_b=ConnectorSide(Direction.LEFT, 1),
        ),
        Connector(
            location=Point(3, 3),
            side_a=ConnectorSide(Direction.LEFT, 1),
            side_b=ConnectorSide(Direction.RIGHT, 2),
        ),
    ]


def test_same_region_on_both_sides_is_not_a_connector(make_grid):
    grid = make_grid(
        "#######",
        "#######",
        "#######",
        "##1#1##",
        "#######",
        "#######",
        "#######",
    )

    assert find_connectors(grid) == []


def test_cell_with_two_axes_yields_four_records(make_grid):
    grid = make_grid(
        "#######",
        "#######",
        "###1###",
        "##2#3##",
        "###4###",
        "#######",
        "#######",
    )

    connectors = find_connectors(grid)

    assert len(connectors) == 4
    assert {connector.location for connector in connectors} == {Point(3, 3)}
    assert [connector.side_a.direction for connector in connectors] == [
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]
    assert connectors[0].regions == (1, 4)


def test_cells_near_the_border_are_skipped(make_grid):
    grid = make_grid(
        "1#2##",
        "#####",
        "#####",
        "#####",
        "#####",
    )

    assert find_connectors(grid) == []


def test_scenario_room_and_maze_are_connectable(scenario_grid):
    connectors = find_connectors(scenario_grid)

    joining = [c for c in connectors if set(c.regions) == {1, 2}]
    assert joining
    for connector in joining:
        location = connector.location
        assert scenario_grid.at(location) is Material.ROCK
        ahead = location.step(connector.side_a.direction)
        behind = location.step(connector.side_b.direction)
        assert {scenario_grid.region_at(ahead), scenario_grid.region_at(behind)} == {1, 2}
    assert any(c.location == Point(4, 3) for c in joining)


def test_connectors_are_sound_and_grid_is_untouched():
    config = DungeonConfig(width=41, height=41, room_tries=40, join_regions=False, random_seed=8)
    generator = DungeonGenerator(config)
    grid = generator.generate()
    materials = grid.materials()
    regions = grid.region_ids()

    connectors = find_connectors(grid)

    assert connectors == generator.connectors
    assert grid.materials() == materials
    assert grid.region_ids() == regions
    for connector in connectors:
        assert grid.at(connector.location) is Material.ROCK
        assert 2 <= connector.location.x <= grid.width - 3
        assert 2 <= connector.location.y <= grid.height - 3
        region_a = grid.region_at(connector.location.step(connector.side_a.direction))
        region_b = grid.region_at(connector.location.step(connector.side_b.direction))
        assert (region_a, region_b) == connector.regions
        assert region_a != region_b


def test_single_region_maze_has_no_connectors():
    grid = Grid(21, 21)
    grow_maze(grid, random.Random(6))

    assert find_connectors(grid) == []

import pytest

from component_manager import RegionComponents
from dungeon_geometry import Point


def test_components_are_ordered_by_first_cell(make_grid):
    grid = make_grid(
        "1#2",
        "###",
        "1#2",
    )
    grid.new_region()  # Allocated but never carved.

    components = RegionComponents(grid)

    assert components.live_components() == {0, 1, 2, 3}
    assert [components.label(component) for component in range(4)] == [1, 2, 1, 2]
    assert components.component_sizes() == {0: 1, 1: 1, 2: 1, 3: 1}
    assert not components.has_single_component()


def test_walled_off_pocket_of_one_region_is_its_own_component(make_grid):
    grid = make_grid("11#1")

    components = RegionComponents(grid)

    assert components.component_at(Point(0, 0)) == components.component_at(Point(1, 0)) == 0
    assert components.component_at(Point(3, 0)) == 1
    assert components.label(0) == components.label(1) == 1
    assert not components.has_single_component()


def test_adjacent_regions_start_as_one_component_with_the_smaller_label(make_grid):
    grid = make_grid("#21#")

    components = RegionComponents(grid)

    assert components.has_single_component()
    assert grid.region_at(Point(1, 0)) == 1
    assert grid.region_at(Point(2, 0)) == 1


def test_merge_relabels_absorbed_cells_on_the_grid(make_grid):
    grid = make_grid(
        "3#1",
        "###",
        "3#2",
    )
    components = RegionComponents(grid)

    root = components.merge(2, 3)

    assert root == 2
    assert components.label(3) == 2
    assert grid.region_at(Point(0, 2)) == 2
    assert grid.region_at(Point(2, 2)) == 2
    # The other cell labelled 3 is a separate component and keeps its label.
    assert grid.region_at(Point(0, 0)) == 3
    assert grid.region_at(Point(2, 0)) == 1
    assert components.live_components() == {0, 1, 2}
    assert components.component_sizes() == {0: 1, 1: 1, 2: 2}
    assert list(grid.regions()) == [1, 2, 3]


def test_merge_of_same_root_is_a_no_op(make_grid):
    grid = make_grid("1#2")
    components = RegionComponents(grid)
    components.merge(1, 0)

    assert components.merge(0, 1) == 0
    assert components.has_single_component()


def test_carve_merges_every_carved_neighbour(make_grid):
    grid = make_grid("1#2")
    components = RegionComponents(grid)

    root = components.carve(Point(1, 0), 1)

    assert root == 0
    assert components.has_single_component()
    assert components.component_sizes() == {0: 3}
    assert [grid.region_at(Point(x, 0)) for x in range(3)] == [1, 1, 1]


def test_component_at_rejects_rock_cells(make_grid):
    grid = make_grid("1#2")
    components = RegionComponents(grid)

    with pytest.raises(KeyError):
        components.component_at(Point(1, 0))

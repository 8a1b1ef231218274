import pytest

from dungeon_geometry import CARDINAL_DIRECTIONS, Direction, Point, Rect


def test_point_vector_arithmetic():
    assert Point(1, 2) + Point(3, -1) == Point(4, 1)
    assert Point(1, 2) * 3 == Point(3, 6)
    assert 2 * Point(-1, 4) == Point(-2, 8)
    assert -Point(1, -2) == Point(-1, 2)


def test_point_plus_direction_and_step():
    origin = Point(5, 5)

    assert origin + Direction.UP == Point(5, 4)
    assert origin.step(Direction.LEFT, 3) == Point(2, 5)
    assert origin.step(Direction.DOWN) == origin + Direction.DOWN.vector


def test_point_is_hashable_and_immutable():
    point = Point(1, 1)

    assert {point, Point(1, 1)} == {point}
    with pytest.raises(AttributeError):
        point.x = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "direction,expected",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.RIGHT, Direction.LEFT),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
    ],
)
def test_direction_reverse(direction, expected):
    assert direction.reverse() is expected
    assert direction.reverse().reverse() is direction


def test_directions_are_a_closed_set_in_fixed_order():
    assert CARDINAL_DIRECTIONS == (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
    assert Direction.from_tuple((1, 0)) is Direction.RIGHT
    with pytest.raises(ValueError):
        Direction.from_tuple((1, 1))


@pytest.mark.parametrize(
    "rect_a,rect_b,expected",
    [
        (Rect(0, 0, 3, 3), Rect(2, 2, 3, 3), True),
        (Rect(0, 0, 2, 2), Rect(2, 2, 2, 2), False),
        (Rect(0, 0, 5, 5), Rect(5, 0, 3, 3), False),
        (Rect(0, 0, 0, 0), Rect(0, 0, 5, 5), False),
    ],
)
def test_rect_overlaps(rect_a, rect_b, expected):
    assert rect_a.overlaps(rect_b) is expected
    assert rect_b.overlaps(rect_a) is expected


def test_rect_containment_uses_exclusive_max():
    bounds = Rect(0, 0, 9, 9)

    assert bounds.contains(Point(8, 8))
    assert not bounds.contains(Point(9, 0))
    assert bounds.contains_rect(Rect(1, 1, 7, 7))
    assert bounds.contains_rect(Rect(0, 0, 9, 9))
    assert not bounds.contains_rect(Rect(3, 3, 7, 3))


def test_rect_from_corners_and_points():
    rect = Rect.from_corners(Point(1, 1), Point(4, 4))

    assert rect.to_tuple() == (1, 1, 3, 3)
    assert rect.min == Point(1, 1)
    assert rect.max == Point(4, 4)
    points = list(rect.points())
    assert len(points) == rect.area == 9
    assert points[0] == Point(1, 1)
    assert points[-1] == Point(3, 3)

import math

import pytest

from algokit.geometry import (
    Rectangle,
    shortest_walk,
    tarp_area,
    visible_billboard_area,
)


def test_area_equals_self_intersection():
    rect = Rectangle(1, 2, 6, 9)
    assert rect.intersection_area(rect) == rect.area()


def test_intersection_is_symmetric():
    a = Rectangle(0, 0, 5, 5)
    b = Rectangle(2, 3, 8, 10)
    assert a.intersection_area(b) == b.intersection_area(a)


def test_disjoint_rectangles_share_nothing():
    assert Rectangle(0, 0, 2, 2).intersection_area(Rectangle(5, 5, 7, 7)) == 0


def test_touching_rectangles_share_nothing():
    assert Rectangle(0, 0, 2, 2).intersection_area(Rectangle(2, 0, 4, 2)) == 0


def test_contained_rectangle_intersection_is_inner_area():
    outer = Rectangle(0, 0, 10, 10)
    inner = Rectangle(2, 3, 4, 7)
    assert outer.intersection_area(inner) == inner.area()


def test_billboard_sample():
    first = Rectangle(1, 2, 3, 5)
    second = Rectangle(6, 0, 10, 4)
    truck = Rectangle(2, 1, 8, 3)
    assert visible_billboard_area(first, second, truck) == 17


def test_billboard_truck_elsewhere_hides_nothing():
    first = Rectangle(0, 0, 2, 2)
    second = Rectangle(3, 3, 5, 6)
    truck = Rectangle(20, 20, 30, 30)
    assert visible_billboard_area(first, second, truck) == first.area() + second.area()


def test_billboard_truck_covers_everything():
    first = Rectangle(0, 0, 2, 2)
    second = Rectangle(3, 3, 5, 6)
    truck = Rectangle(-1, -1, 10, 10)
    assert visible_billboard_area(first, second, truck) == 0


def test_tarp_sample():
    assert tarp_area(Rectangle(2, 1, 7, 4), Rectangle(5, -1, 10, 3)) == 15


def test_tarp_feed_fully_covers():
    lawnmower = Rectangle(1, 1, 4, 4)
    assert tarp_area(lawnmower, Rectangle(0, 0, 5, 5)) == 0


def test_tarp_feed_cuts_off_side():
    lawnmower = Rectangle(0, 0, 4, 4)
    feed = Rectangle(-1, 2, 5, 6)
    assert tarp_area(lawnmower, feed) == lawnmower.area() - lawnmower.intersection_area(feed)
    assert tarp_area(lawnmower, feed) < lawnmower.area()


def test_tarp_feed_in_middle_needs_whole_tarp():
    lawnmower = Rectangle(0, 0, 6, 6)
    assert tarp_area(lawnmower, Rectangle(2, 2, 4, 4)) == lawnmower.area()


def test_tarp_feed_disjoint():
    lawnmower = Rectangle(0, 0, 3, 3)
    assert tarp_area(lawnmower, Rectangle(10, 10, 12, 12)) == lawnmower.area()


@pytest.mark.parametrize("x", [0, 25, 50, 100])
def test_walk_without_river_is_twice_distance(x):
    assert shortest_walk(3, 4, 0, x) == pytest.approx(2 * math.hypot(3, 4))


def test_walk_returning_zero_percent_retraces_route():
    assert shortest_walk(3, 1, 2, 0) == pytest.approx(2 * math.hypot(3, 1 + 4))


def test_walk_full_return_then_river_trip():
    expected = math.hypot(3, 1 + 4) + math.hypot(3, 1) + 4
    assert shortest_walk(3, 1, 2, 100) == pytest.approx(expected)
"""Rectangle overlaps for billboard problems and a river-side walk length."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its lower-left and upper-right corners."""

    x1: Number
    y1: Number
    x2: Number
    y2: Number

    def area(self) -> Number:
        """Width times height."""
        return (self.x2 - self.x1) * (self.y2 - self.y1)

    def intersection_area(self, other: Rectangle) -> Number:
        """Area shared with another rectangle; 0 when they do not overlap."""
        width = min(self.x2, other.x2) - max(self.x1, other.x1)
        height = min(self.y2, other.y2) - max(self.y1, other.y1)
        if width <= 0 or height <= 0:
            return 0
        return width * height


def visible_billboard_area(first: Rectangle, second: Rectangle, truck: Rectangle) -> Number:
    """Area of two non-overlapping billboards still visible in front of a truck."""
    hidden = first.intersection_area(truck) + second.intersection_area(truck)
    return first.area() + second.area() - hidden


def _cuts_off_side(target: Rectangle, cover: Rectangle) -> bool:
    """Whether cover spans target fully in one direction, leaving a rectangle."""
    if cover.x1 <= target.x1 and cover.x2 >= target.x2:
        if cover.y1 >= target.y1 and cover.y2 >= target.y2:
            return True
        if cover.y1 <= target.y1 and cover.y2 <= target.y2:
            return True
    if cover.y1 <= target.y1 and cover.y2 >= target.y2:
        if cover.x1 >= target.x1 and cover.x2 >= target.x2:
            return True
        if cover.x1 <= target.x1 and cover.x2 <= target.x2:
            return True
        if cover.x1 <= target.x1 and cover.x2 >= target.x2:
            return True
    return False


def tarp_area(lawnmower: Rectangle, feed: Rectangle) -> Number:
    """Smallest rectangular tarp hiding the part of lawnmower not behind feed."""
    if _cuts_off_side(lawnmower, feed):
        return lawnmower.area() - lawnmower.intersection_area(feed)
    return lawnmower.area()


def shortest_walk(a: Number, b: Number, c: Number, x: Number) -> float:
    """Length of the walk to grandmother's house via the river and back.

    The house lies at (a, b) from home with the river c away; on the way
    back the walker goes x percent of the straight line home, then visits
    the river before finishing.
    """
    there = math.hypot(a, b + 2 * c)
    rest = 100 - x
    back = math.hypot(a * x, b * x) + math.hypot(a * rest, b * rest + 200 * c)
    return there + back / 100.0
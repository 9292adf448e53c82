"""Data-structure problems: notifications, glass cutting, ships and bookings."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections import Counter, defaultdict, deque
from typing import Iterable


class ThorNotifications:
    """Unread notification counter for applications on a phone."""

    def __init__(self) -> None:
        self._total = 0
        self._events: deque[tuple[int, int]] = deque()
        self._by_app: defaultdict[int, deque[int]] = defaultdict(deque)
        self._read: set[int] = set()
        self.unread = 0

    def notify(self, app: int) -> int:
        """Application app sends a notification; returns the unread count."""
        self._total += 1
        self._events.append((self._total, app))
        self._by_app[app].append(self._total)
        self.unread += 1
        return self.unread

    def read_app(self, app: int) -> int:
        """Read every notification of app; returns the unread count."""
        pending = self._by_app[app]
        self.unread -= len(pending)
        self._read.update(pending)
        pending.clear()
        return self.unread

    def read_first(self, count: int) -> int:
        """Read the first count notifications ever sent; returns the unread count."""
        while self._events and self._events[0][0] <= count:
            number, app = self._events.popleft()
            if number not in self._read:
                self._read.add(number)
                self._by_app[app].popleft()
                self.unread -= 1
        return self.unread

    def apply(self, kind: int, value: int) -> int:
        """Run event type 1, 2 or 3 with its argument; returns the unread count."""
        if kind == 1:
            return self.notify(value)
        if kind == 2:
            return self.read_app(value)
        if kind == 3:
            return self.read_first(value)
        raise ValueError(f"unknown event type: {kind!r}")


class _Pieces:
    """Cut positions along one side with a multiset of piece lengths."""

    def __init__(self, length: int) -> None:
        self.length = length
        self.cuts = [0, length]
        self.sizes = Counter({length: 1})
        self.longest = length

    def cut(self, position: int) -> None:
        if not 0 < position < self.length:
            raise ValueError(f"cut {position} outside 1..{self.length - 1}")
        index = bisect_right(self.cuts, position)
        low = self.cuts[index - 1]
        if low == position:
            raise ValueError(f"repeated cut at {position}")
        high = self.cuts[index]
        self.sizes[high - low] -= 1
        self.sizes[high - position] += 1
        self.sizes[position - low] += 1
        self.cuts.insert(index, position)
        while self.sizes[self.longest] == 0:
            self.longest -= 1


def glass_carving(width: int, height: int, cuts: Iterable[tuple[str, int]]) -> list[int]:
    """Area of the largest glass fragment after each cut.

    ("H", y) cuts horizontally at height y, ("V", x) vertically at x.
    """
    widths = _Pieces(width)
    heights = _Pieces(height)
    areas = []
    for direction, position in cuts:
        if direction == "H":
            heights.cut(position)
        elif direction == "V":
            widths.cut(position)
        else:
            raise ValueError(f"unknown cut direction: {direction!r}")
        areas.append(heights.longest * widths.longest)
    return areas


def first_cheating_move(n: int, k: int, a: int, shots: Iterable[int]) -> int:
    """First 1-based shot after which k ships of size a no longer fit in 1..n.

    Ships may not touch. Returns -1 when the answers are never contradictory.
    """
    def fitting(low: int, high: int) -> int:
        return (high - low) // (a + 1)

    blocked = [0, n + 1]
    fits = fitting(0, n + 1)
    for move, shot in enumerate(shots, start=1):
        if not 1 <= shot <= n:
            raise ValueError(f"shot {shot} outside 1..{n}")
        index = bisect_right(blocked, shot)
        low = blocked[index - 1]
        if low == shot:
            raise ValueError(f"repeated shot at {shot}")
        high = blocked[index]
        fits += fitting(low, shot) + fitting(shot, high) - fitting(low, high)
        blocked.insert(index, shot)
        if fits < k:
            return move
    return -1


def max_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Most customers present at once; a leaving customer goes before an arrival."""
    events = []
    for arrival, departure in intervals:
        events.append((arrival, 1))
        events.append((departure, -1))
    events.sort()
    present = best = 0
    for _, change in events:
        present += change
        best = max(best, present)
    return best


def allocate_rooms(intervals: Iterable[tuple[int, int]]) -> tuple[int, list[int]]:
    """Fewest rooms for the bookings and the room given to each booking.

    A room freed on a day cannot be reused by a guest arriving that day.
    """
    bookings = list(intervals)
    events = []
    for number, (arrival, departure) in enumerate(bookings):
        events.append((arrival, 0, number))
        events.append((departure, 1, number))
    events.sort()

    free = list(range(len(bookings), 0, -1))
    rooms = [0] * len(bookings)
    present = most = 0
    for _, leaving, number in events:
        if leaving:
            present -= 1
            free.append(rooms[number])
        else:
            present += 1
            rooms[number] = free.pop()
        most = max(most, present)
    return most, rooms
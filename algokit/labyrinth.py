"""Shortest route through a grid labyrinth from 'A' to 'B'."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

WALL = "#"

# Neighbours are explored in this order, which decides between routes of
# equal length.
_MOVES = (("U", -1, 0), ("L", 0, -1), ("D", 1, 0), ("R", 0, 1))


def _locate(rows: list[str], mark: str) -> tuple[int, int]:
    found = [(r, c) for r, row in enumerate(rows) for c, tile in enumerate(row) if tile == mark]
    if len(found) != 1:
        raise ValueError(f"grid must contain exactly one {mark!r}")
    return found[0]


def find_path(grid: Iterable[str]) -> Optional[str]:
    """Shortest route from 'A' to 'B' as a string of U, L, D, R moves.

    Walls are '#'. Returns None when 'B' cannot be reached.
    """
    rows = [str(row) for row in grid]
    if not rows:
        raise ValueError("grid is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    start = _locate(rows, "A")
    end = _locate(rows, "B")

    came_from: dict[tuple[int, int], tuple[tuple[int, int], str]] = {}
    seen = {start}
    pending = deque([start])
    while pending:
        r, c = pending.popleft()
        for move, dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < len(rows) and 0 <= nc < width):
                continue
            if rows[nr][nc] == WALL or (nr, nc) in seen:
                continue
            seen.add((nr, nc))
            came_from[(nr, nc)] = ((r, c), move)
            pending.append((nr, nc))

    if end not in seen:
        return None
    moves = []
    cell = end
    while cell != start:
        cell, move = came_from[cell]
        moves.append(move)
    return "".join(reversed(moves))
"""Counting connected pipe networks on a grid of tiles."""

from __future__ import annotations

from typing import Iterable

EMPTY = "A"

# Each entry is direction + tile + neighbouring tile: moving in that
# direction from the first tile reaches the second through a joined pipe.
_CONNECTIONS = frozenset(
    {
        "DBC", "DBD", "DBF", "LBE", "LBD", "LBF",
        "DEC", "DED", "DEF", "REC", "REB", "REF",
        "UCB", "UCE", "UCF", "LCE", "LCD", "LCF",
        "UDB", "UDE", "UDF", "RDB", "RDC", "RDF",
        "UFB", "UFE", "UFF", "RFB", "RFC", "RFF",
        "DFC", "DFD", "DFF", "LFE", "LFD", "LFF",
    }
)

_MOVES = (("U", -1, 0), ("D", 1, 0), ("R", 0, 1), ("L", 0, -1))


def count_components(grid: Iterable[str]) -> int:
    """Count pipe networks, scanning tiles row by row and following joins.

    Tiles marked 'A' are empty and belong to no network. Every other tile
    not yet reached starts a new network, which then takes in every tile
    reachable from it through joined pipes.
    """
    rows = [str(row) for row in grid]
    if not rows:
        return 0
    height, width = len(rows), len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")

    visited = {
        (r, c) for r, row in enumerate(rows) for c, tile in enumerate(row) if tile == EMPTY
    }
    count = 0
    for r, row in enumerate(rows):
        for c in range(len(row)):
            if (r, c) in visited:
                continue
            count += 1
            visited.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for direction, dr, dc in _MOVES:
                    nr, nc = cr + dr, cc + dc
                    if not (0 <= nr < height and 0 <= nc < width):
                        continue
                    if (nr, nc) in visited:
                        continue
                    if direction + rows[cr][cc] + rows[nr][nc] in _CONNECTIONS:
                        visited.add((nr, nc))
                        stack.append((nr, nc))
    return count
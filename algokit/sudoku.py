"""Backtracking Sudoku solver working on 81-character board strings."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, List, Optional

Board = List[List[int]]

SIZE = 9
BOX = 3
_DIGITS = list(range(1, SIZE + 1))


def parse_board(text: str) -> Board:
    """Turn an 81-character string ('.' or '0' for empty) into a 9x9 grid."""
    text = text.strip()
    if len(text) != SIZE * SIZE:
        raise ValueError(f"board must have {SIZE * SIZE} cells, got {len(text)}")
    cells = []
    for char in text:
        if char == ".":
            cells.append(0)
        elif char in "0123456789":
            cells.append(int(char))
        else:
            raise ValueError(f"invalid board character: {char!r}")
    return [cells[row * SIZE : (row + 1) * SIZE] for row in range(SIZE)]


def format_board(board: Board) -> str:
    """Write a grid as an 81-character string with '.' for empty cells."""
    return "".join("." if value == 0 else str(value) for row in board for value in row)


def _units(board: Board) -> Iterator[List[int]]:
    yield from board
    for col in range(SIZE):
        yield [row[col] for row in board]
    for top in range(0, SIZE, BOX):
        for left in range(0, SIZE, BOX):
            yield [board[r][c] for r in range(top, top + BOX) for c in range(left, left + BOX)]


def is_complete(board: Board) -> bool:
    """Whether every row, column and box holds each digit 1-9 exactly once."""
    return all(sorted(unit) == _DIGITS for unit in _units(board))


def _candidates(grid: Board, row: int, col: int) -> list[int]:
    used = set(grid[row])
    used.update(line[col] for line in grid)
    top, left = (row // BOX) * BOX, (col // BOX) * BOX
    used.update(grid[r][c] for r in range(top, top + BOX) for c in range(left, left + BOX))
    return [value for value in _DIGITS if value not in used]


def _fill(grid: Board, empties: list[tuple[int, int]], index: int) -> bool:
    if index == len(empties):
        return True
    row, col = empties[index]
    for value in _candidates(grid, row, col):
        grid[row][col] = value
        if _fill(grid, empties, index + 1):
            return True
    grid[row][col] = 0
    return False


def solve(board: Board) -> Optional[Board]:
    """Return the first solution in row-major, ascending-digit order, or None."""
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("board must be 9x9")
    grid = [list(row) for row in board]
    empties = [(r, c) for r in range(SIZE) for c in range(SIZE) if grid[r][c] == 0]
    if _fill(grid, empties, 0) and is_complete(grid):
        return grid
    return None


def render_grid(board: Board) -> str:
    """Draw the board as a bordered text table."""
    separator = "|" + "---|" * SIZE
    lines = [separator]
    for row in board:
        lines.append("| " + "".join(f"{value} | " for value in row))
        lines.append(separator)
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many boards from standard input and solve each."""
    parser = argparse.ArgumentParser(
        description="Solve Sudoku boards read from standard input."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    count = int(tokens[0])
    for text in tokens[1 : 1 + count]:
        solution = solve(parse_board(text))
        if solution is None:
            print("N")
        else:
            print("Y")
            print(format_board(solution))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
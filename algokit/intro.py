"""Short introductory combinatorics and arithmetic problems."""

from __future__ import annotations

from typing import Iterable


def min_apple_difference(weights: Iterable[int]) -> int:
    """Smallest possible difference between the totals of two groups."""
    weights = list(weights)
    total = sum(weights)
    sums = {0}
    for weight in weights:
        sums |= {s + weight for s in sums}
    return min(abs(total - 2 * s) for s in sums)


def can_empty_piles(a: int, b: int) -> bool:
    """Whether piles a and b can be emptied by taking (2, 1) or (1, 2) coins."""
    first, second = 2 * a - b, 2 * b - a
    return first >= 0 and first % 3 == 0 and second >= 0 and second % 3 == 0


def digit_at(k: int) -> int:
    """The k-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("position must be at least 1")
    length, first, start = 1, 1, 1
    while True:
        block = length * 9 * first
        if k < start + block:
            break
        start += block
        length += 1
        first *= 10
    offset = k - start
    number = first + offset // length
    return int(str(number)[offset % length])


def gray_codes(n: int) -> list[str]:
    """All n-bit Gray codes in order, as zero-padded bit strings."""
    if n < 0:
        raise ValueError("bit count must be non-negative")
    if n == 0:
        return [""]
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Moves that carry n discs from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("need at least one disc")
    moves: list[tuple[int, int]] = []

    def move(count: int, source: int, target: int) -> None:
        if count == 1:
            moves.append((source, target))
            return
        spare = 6 - (source + target)
        move(count - 1, source, spare)
        moves.append((source, target))
        move(count - 1, spare, target)

    move(n, 1, 3)
    return moves


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros of n!."""
    if n < 0:
        raise ValueError("n must be non-negative")
    count = 0
    while n:
        n //= 5
        count += n
    return count


def two_knights(n: int) -> list[int]:
    """Ways to place two non-attacking knights on k x k boards, k = 1..n."""
    return [
        (k**4 - k**2) // 2 - 4 * (k - 1) * (k - 2)
        for k in range(1, n + 1)
    ]
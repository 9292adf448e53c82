"""Array problems: digit permutations, segment queries, products and pairs."""

from __future__ import annotations

from bisect import bisect_left
from itertools import permutations
from typing import Iterable, Optional, Sequence

_UINT32 = (1 << 32) - 1


def min_digit_permutation_difference(rows: Sequence[str]) -> int:
    """Smallest max-min spread after one digit reordering applied to every row."""
    rows = [str(row) for row in rows]
    if not rows:
        raise ValueError("need at least one number")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all numbers must have the same number of digits")
    if any(not row.isdigit() for row in rows if row):
        raise ValueError("numbers must consist of digits")
    best = None
    for order in permutations(range(width)):
        values = [int("".join(row[i] for i in order) or "0") for row in rows]
        spread = max(values) - min(values)
        if best is None or spread < best:
            best = spread
    return best


def not_equal_positions(
    arr: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """For each (l, r, x) a 1-based position in [l, r] whose value differs from x.

    The rightmost such position is given; -1 when there is none.
    """
    left_different: list[int] = []
    for i, value in enumerate(arr):
        if i == 0:
            left_different.append(-1)
        elif value != arr[i - 1]:
            left_different.append(i - 1)
        else:
            left_different.append(left_different[i - 1])

    answers = []
    for l, r, x in queries:
        if not 1 <= l <= r <= len(arr):
            raise ValueError(f"query range {l}..{r} outside 1..{len(arr)}")
        if arr[r - 1] != x:
            answers.append(r)
        elif left_different[r - 1] >= l - 1:
            answers.append(left_different[r - 1] + 1)
        else:
            answers.append(-1)
    return answers


def minimal_product(
    n: int, l: int, r: int, x: int, y: int, z: int, b1: int, b2: int
) -> Optional[int]:
    """Smallest a_i * a_j with i < j and a_i < a_j over a generated sequence.

    b follows b_i = b_{i-2} * x + b_{i-1} * y + z in unsigned 32-bit
    arithmetic, and a_i = b_i mod (r - l + 1) + l. Returns None when no
    such pair exists.
    """
    if r < l:
        raise ValueError("r must not be less than l")
    x, y, z = x & _UINT32, y & _UINT32, z & _UINT32
    span = r - l + 1
    b = [b1 & _UINT32, b2 & _UINT32]
    while len(b) < n:
        b.append((b[-2] * x + b[-1] * y + z) & _UINT32)
    a = [value % span + l for value in b[: max(n, 0)]]
    if len(a) < 2:
        return None

    best: Optional[int] = None
    smallest = a[0]
    for value in a[1:]:
        if smallest < value:
            product = value * smallest
            best = product if best is None else min(best, product)
        smallest = min(smallest, value)

    largest = a[-1]
    for value in reversed(a[:-1]):
        if largest > value:
            product = value * largest
            best = product if best is None else min(best, product)
        largest = max(largest, value)
    return best


def table_is_stable(legs: Iterable[int]) -> bool:
    """Whether four legs can be placed so that the table top is flat."""
    values = sorted(legs)
    if len(values) != 4:
        raise ValueError("a table has four legs")
    a, b, c, d = values
    return d - c == b - a and d - b == c - a


def saved_mice(n: int, positions: Iterable[int]) -> int:
    """Most mice that reach the hole at n before the cat catches them."""
    spent = 0
    count = 0
    for position in sorted(positions, reverse=True):
        step = n - position
        if spent + step >= n:
            break
        spent += step
        count += 1
    return count


def count_pairs(values: Sequence[int]) -> int:
    """Count 1-based pairs i < j with a_i < i < a_j < j."""
    total = 0
    eligible: list[int] = []
    for index, value in enumerate(values, start=1):
        if value < index:
            total += bisect_left(eligible, value)
            eligible.append(index)
    return total
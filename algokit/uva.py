"""Light switching parity and a capped round-robin service queue."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable, Union

Command = Union[str, tuple]

_QUEUE_CAP = 1000


def is_light_on(n: int) -> bool:
    """Whether the n-th bulb ends lit: true exactly for perfect squares."""
    if n < 0:
        raise ValueError("n must be non-negative")
    root = math.isqrt(n)
    return root * root == n


def process_queue(population: int, commands: Iterable[Command]) -> list[int]:
    """Run 'N' (serve next) and ('E', k) (expedite k) commands on the queue.

    The queue starts with citizens 1 to min(population, 999). Each 'N'
    serves the front citizen and sends them to the back; each ('E', k)
    moves citizen k to the front. Returns the served citizens in order.
    """
    if population < 1:
        raise ValueError("population must be positive")
    queue = deque(range(1, min(population + 1, _QUEUE_CAP)))
    served: list[int] = []
    for command in commands:
        if isinstance(command, str):
            op, args = command, ()
        else:
            op, *args = command
        if op == "N":
            number = queue.popleft()
            served.append(number)
            if number <= _QUEUE_CAP:
                queue.append(number)
        elif op == "E":
            if not args:
                raise ValueError("expedite command needs a citizen number")
            citizen = args[0]
            queue = deque([citizen, *(x for x in queue if x != citizen)])
        else:
            raise ValueError(f"unknown command: {op!r}")
    return served
"""Graph problems: weighted routes, swap components, trees and SCCs."""

from __future__ import annotations

from collections import deque
from typing import Iterable


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} outside 1..{n}")


def artistic_distance(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    start: int,
    end: int,
    step_cost: int,
) -> int:
    """Cheapest cost from start to end over directed weighted edges.

    The route starts at step_cost and every edge taken adds its weight plus
    step_cost. Returns -1 when end cannot be reached.
    """
    _check_node(start, n)
    _check_node(end, n)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for source, target, weight in edges:
        _check_node(source, n)
        _check_node(target, n)
        adjacency[source].append((target, weight))

    distance = {start: step_cost}
    pending = deque([start])
    while pending:
        node = pending.popleft()
        for target, weight in adjacency[node]:
            value = distance[node] + weight + step_cost
            if target not in distance or value < distance[target]:
                distance[target] = value
                pending.append(target)
    return distance.get(end, -1)


def best_permutation(perm: list[int], swaps: Iterable[tuple[int, int]]) -> list[int]:
    """Lexicographically largest permutation reachable by the allowed swaps.

    Swaps are pairs of 1-based positions that may be exchanged any number
    of times; within each connected group of positions the largest values
    go to the earliest positions.
    """
    n = len(perm)
    neighbours: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in swaps:
        _check_node(a, n)
        _check_node(b, n)
        if a != b:
            neighbours[a].append(b)
            neighbours[b].append(a)

    result = list(perm)
    visited = [False] * (n + 1)
    for position in range(1, n + 1):
        if visited[position]:
            continue
        visited[position] = True
        group = [position]
        pending = deque([position])
        while pending:
            current = pending.popleft()
            for other in neighbours[current]:
                if not visited[other]:
                    visited[other] = True
                    group.append(other)
                    pending.append(other)
        values = sorted((perm[p - 1] for p in group), reverse=True)
        for p, value in zip(sorted(group), values):
            result[p - 1] = value
    return result


def rebuild_tree(
    n: int, root: int, events: Iterable[tuple[str, int]]
) -> list[tuple[int, int]]:
    """Recover (child, parent) edges from a depth-first 'in'/'out' log.

    The log starts after the root has been entered. Nodes 1..n other than
    the root are listed in order; a node that never appears in the log gets
    parent 0.
    """
    parent_of = {root: root}
    current = root
    for kind, node in events:
        if kind == "in":
            parent_of[node] = current
            current = node
        elif kind == "out":
            current = parent_of.get(node, 0)
        else:
            raise ValueError(f"unknown event kind: {kind!r}")
    return [
        (node, parent_of.get(node, 0))
        for node in range(1, n + 1)
        if parent_of.get(node, 0) != node
    ]


def count_balanced_subtrees(parents: list[int], colors: str) -> int:
    """Count subtrees holding as many white ('W') as black ('B') nodes.

    parents[i] is the parent of node i + 2; node 1 is the root.
    """
    n = len(colors)
    if n == 0:
        raise ValueError("tree needs at least one node")
    if len(parents) != n - 1:
        raise ValueError("need one parent for every node but the root")
    if set(colors) - {"W", "B"}:
        raise ValueError("colors must be 'W' or 'B'")

    children: list[list[int]] = [[] for _ in range(n + 1)]
    for child, parent in enumerate(parents, start=2):
        _check_node(parent, n)
        children[parent].append(child)

    order: list[int] = []
    seen = {1}
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        for child in children[node]:
            if child not in seen:
                seen.add(child)
                stack.append(child)

    balance = {node: (1 if colors[node - 1] == "W" else -1) for node in order}
    for node in reversed(order):
        for child in children[node]:
            if child in balance and child != node:
                balance[node] += balance[child]
    return sum(1 for node in order if balance[node] == 0)


def strongly_connected_components(
    n: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components of a directed graph on nodes 1..n.

    Components are listed in the order Tarjan's algorithm closes them, each
    as a sorted list of nodes.
    """
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for source, target in edges:
        _check_node(source, n)
        _check_node(target, n)
        adjacency[source].append(target)

    index: dict[int, int] = {}
    low: dict[int, int] = {}
    stack: list[int] = []
    on_stack: set[int] = set()
    components: list[list[int]] = []
    counter = 0

    def enter(node: int) -> None:
        nonlocal counter
        index[node] = low[node] = counter
        counter += 1
        stack.append(node)
        on_stack.add(node)

    for root in range(1, n + 1):
        if root in index:
            continue
        enter(root)
        work = [(root, iter(adjacency[root]))]
        while work:
            node, neighbours = work[-1]
            descended = False
            for target in neighbours:
                if target not in index:
                    enter(target)
                    work.append((target, iter(adjacency[target])))
                    descended = True
                    break
                if target in on_stack:
                    low[node] = min(low[node], index[target])
            if descended:
                continue
            work.pop()
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[node])
            if low[node] == index[node]:
                component = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    component.append(member)
                    if member == node:
                        break
                components.append(sorted(component))
    return components


def min_edges_to_strongly_connect(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Fewest directed edges to add so that every node reaches every other."""
    edges = list(edges)
    components = strongly_connected_components(n, edges)
    if len(components) <= 1:
        return 0
    component_of = {node: i for i, members in enumerate(components) for node in members}
    has_incoming: set[int] = set()
    has_outgoing: set[int] = set()
    for source, target in edges:
        a, b = component_of[source], component_of[target]
        if a != b:
            has_outgoing.add(a)
            has_incoming.add(b)
    sources = len(components) - len(has_incoming)
    sinks = len(components) - len(has_outgoing)
    return max(sources, sinks)
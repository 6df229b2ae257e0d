"""Breadth-first and depth-first traversals, cycle checks and topological order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .graph import Graph


def bfs(graph: Graph, source: int) -> list[int]:
    """Return the nodes reachable from ``source`` in breadth-first order."""
    visited = {source}
    queue = deque([source])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nbr in graph.neighbors(node):
            if nbr not in visited:
                visited.add(nbr)
                queue.append(nbr)
    return order


def _preorder(graph: Graph, start: int, visited: set[int]) -> Iterator[int]:
    visited.add(start)
    yield start
    stack = [iter(graph.neighbors(start))]
    while stack:
        for nbr in stack[-1]:
            if nbr not in visited:
                visited.add(nbr)
                yield nbr
                stack.append(iter(graph.neighbors(nbr)))
                break
        else:
            stack.pop()


def _postorder(graph: Graph, start: int, visited: set[int]) -> Iterator[int]:
    visited.add(start)
    stack = [(start, iter(graph.neighbors(start)))]
    while stack:
        node, it = stack[-1]
        for nbr in it:
            if nbr not in visited:
                visited.add(nbr)
                stack.append((nbr, iter(graph.neighbors(nbr))))
                break
        else:
            stack.pop()
            yield node


def dfs(graph: Graph, n: int) -> list[int]:
    """Return a depth-first order covering nodes ``0`` to ``n - 1`` and all they reach."""
    visited: set[int] = set()
    order: list[int] = []
    for start in range(n):
        if start not in visited:
            order.extend(_preorder(graph, start, visited))
    return order


def _component_has_cycle(graph: Graph, source: int, visited: set[int]) -> bool:
    parent = {source: None}
    visited.add(source)
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nbr in graph.neighbors(node):
            if nbr not in visited:
                visited.add(nbr)
                parent[nbr] = node
                queue.append(nbr)
            elif nbr != parent[node]:
                return True
    return False


def has_cycle_undirected(graph: Graph, source: int) -> bool:
    """Tell whether the undirected component holding ``source`` contains a cycle."""
    return _component_has_cycle(graph, source, set())


def has_cycle(graph: Graph, n: int) -> bool:
    """Tell whether any undirected component among nodes ``0`` to ``n - 1`` has a cycle."""
    visited: set[int] = set()
    return any(
        _component_has_cycle(graph, node, visited)
        for node in range(n)
        if node not in visited
    )


def topological_order(graph: Graph, source: int) -> list[int]:
    """Return the nodes reachable from ``source`` in topological order.

    The order is the reverse of the depth-first finishing order, so
    ``source`` comes first.
    """
    finished = list(_postorder(graph, source, set()))
    finished.reverse()
    return finished
"""Strongly connected components and bridges."""

from __future__ import annotations

from itertools import count

from .graph import Graph
from .traversal import _postorder, _preorder


def strongly_connected_components(graph: Graph, n: int) -> list[list[int]]:
    """Return the strongly connected components of a directed graph.

    The search starts from nodes ``0`` to ``n - 1`` and also covers every
    node they reach. Each component lists its nodes in the depth-first order
    of the reversed graph. Components come in the order they are found.
    """
    visited: set[int] = set()
    finish_order: list[int] = []
    for start in range(n):
        if start not in visited:
            finish_order.extend(_postorder(graph, start, visited))

    transposed = graph.reversed()
    assigned: set[int] = set()
    components: list[list[int]] = []
    for node in reversed(finish_order):
        if node not in assigned:
            components.append(list(_preorder(transposed, node, assigned)))
    return components


def count_scc(graph: Graph, n: int) -> int:
    """Return how many strongly connected components the graph has."""
    return len(strongly_connected_components(graph, n))


def bridges(graph: Graph, source: int) -> list[tuple[int, int]]:
    """Return the bridges of the undirected component holding ``source``.

    Each bridge is given as ``(child, parent)`` from the depth-first tree,
    in the order the search finishes with the child.
    """
    tick = count(1)
    tin: dict[int, int] = {source: next(tick)}
    low: dict[int, int] = {source: tin[source]}
    stack = [(source, None, iter(graph.neighbors(source)))]
    found: list[tuple[int, int]] = []

    while stack:
        node, parent, neighbors = stack[-1]
        for nbr in neighbors:
            if nbr == parent:
                continue
            if nbr not in tin:
                tin[nbr] = low[nbr] = next(tick)
                stack.append((nbr, node, iter(graph.neighbors(nbr))))
                break
            low[node] = min(low[node], low[nbr])
        else:
            stack.pop()
            if stack:
                up = stack[-1][0]
                low[up] = min(low[up], low[node])
                if low[node] > tin[up]:
                    found.append((node, up))
    return found
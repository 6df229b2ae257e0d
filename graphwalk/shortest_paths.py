"""Single-source and all-pairs shortest path algorithms."""

from __future__ import annotations

import heapq
import math
from collections import deque
from dataclasses import dataclass
from itertools import groupby
from operator import itemgetter

from .graph import Graph
from .traversal import topological_order

INF = math.inf


def _check_source(source: int, n: int) -> None:
    if not 0 <= source < n:
        raise ValueError(f"source {source} is outside the node range 0..{n - 1}")


def dijkstra(graph: Graph, source: int, n: int) -> list[float]:
    """Return the shortest distances from ``source`` to nodes ``0`` to ``n - 1``.

    Edge weights must be non-negative. Unreachable nodes get ``math.inf``.
    """
    _check_source(source, n)
    dist: dict[int, float] = {source: 0}
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist.get(node, INF):
            continue
        for nbr, weight in graph.weighted_neighbors(node):
            candidate = d + weight
            if candidate < dist.get(nbr, INF):
                dist[nbr] = candidate
                heapq.heappush(heap, (candidate, nbr))
    return [dist.get(node, INF) for node in range(n)]


@dataclass(frozen=True)
class BellmanFordResult:
    """Distances found by Bellman-Ford and whether a negative cycle showed up."""

    distances: list[float]
    negative_cycle: bool


def bellman_ford(graph: Graph, source: int, n: int) -> BellmanFordResult:
    """Run Bellman-Ford from ``source`` over nodes ``0`` to ``n - 1``.

    After ``n - 1`` rounds of relaxation, one more pass checks every node's
    edges; the first edge of a node that still relaxes is applied and marks
    a negative cycle.
    """
    _check_source(source, n)
    dist: dict[int, float] = {source: 0}
    for _ in range(n - 1):
        for u, v, weight in graph.edges():
            du = dist.get(u, INF)
            if du != INF and du + weight < dist.get(v, INF):
                dist[v] = du + weight

    negative_cycle = False
    for u, entries in groupby(graph.edges(), key=itemgetter(0)):
        for _, v, weight in entries:
            du = dist.get(u, INF)
            if du != INF and du + weight < dist.get(v, INF):
                dist[v] = du + weight
                negative_cycle = True
                break

    return BellmanFordResult([dist.get(node, INF) for node in range(n)], negative_cycle)


def floyd_warshall(graph: Graph, n: int) -> list[list[float]]:
    """Return the ``n`` by ``n`` matrix of shortest distances between all nodes.

    The last edge stored between a pair sets its starting distance.
    """
    dist: list[list[float]] = [[INF] * n for _ in range(n)]
    for node in range(n):
        dist[node][node] = 0
    for u, v, weight in graph.edges():
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge {u}->{v} is outside the node range 0..{n - 1}")
        dist[u][v] = weight

    for helper in range(n):
        through = dist[helper]
        for row in dist:
            via = row[helper]
            if via == INF:
                continue
            row[:] = [min(direct, via + rest) for direct, rest in zip(row, through)]
    return dist


def bfs_path(graph: Graph, source: int, destination: int) -> list[int]:
    """Return a path with the fewest edges from ``source`` to ``destination``."""
    parent: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nbr in graph.neighbors(node):
            if nbr not in parent:
                parent[nbr] = node
                queue.append(nbr)

    if destination not in parent:
        raise ValueError(f"node {destination} is not reachable from {source}")

    path: list[int] = []
    node: int | None = destination
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


def dag_shortest_distances(graph: Graph, source: int) -> list[float]:
    """Return shortest distances from ``source`` in a directed acyclic graph.

    The list covers nodes ``0`` up to the largest node of the graph;
    unreachable nodes get ``math.inf``.
    """
    size = max([source, *graph.nodes()]) + 1
    dist: list[float] = [INF] * size
    dist[source] = 0
    for node in topological_order(graph, source):
        base = dist[node]
        if base == INF:
            continue
        for nbr, weight in graph.weighted_neighbors(node):
            if base + weight < dist[nbr]:
                dist[nbr] = base + weight
    return dist
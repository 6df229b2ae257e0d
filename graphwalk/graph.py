"""Adjacency-list graph with optional edge weights."""

from __future__ import annotations

from collections.abc import Iterator


class Graph:
    """A graph stored as an adjacency list of ``(neighbor, weight)`` pairs.

    Edges keep their insertion order. An undirected edge is stored as two
    directed entries, one in each direction.
    """

    def __init__(self) -> None:
        self._adjacency: dict[int, list[tuple[int, int]]] = {}

    def add_edge(self, u: int, v: int, weight: int = 0, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``; undirected edges go both ways."""
        self._adjacency.setdefault(u, []).append((v, weight))
        if not directed:
            self._adjacency.setdefault(v, []).append((u, weight))

    def neighbors(self, node: int) -> list[int]:
        """Return the nodes reachable from ``node`` by one edge, in edge order."""
        return [v for v, _ in self._adjacency.get(node, ())]

    def weighted_neighbors(self, node: int) -> list[tuple[int, int]]:
        """Return ``(neighbor, weight)`` pairs for ``node``, in edge order."""
        return list(self._adjacency.get(node, ()))

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield every stored edge as ``(u, v, weight)``."""
        for u, entries in self._adjacency.items():
            for v, weight in entries:
                yield u, v, weight

    def nodes(self) -> list[int]:
        """Return every node that appears at either end of an edge."""
        seen: dict[int, None] = {}
        for u, entries in self._adjacency.items():
            seen.setdefault(u, None)
            for v, _ in entries:
                seen.setdefault(v, None)
        return list(seen)

    def reversed(self) -> Graph:
        """Return a directed graph with every stored edge turned around."""
        result = Graph()
        for u, v, weight in self.edges():
            result.add_edge(v, u, weight, directed=True)
        return result

    def format_adjacency(self, n: int, weighted: bool = False) -> str:
        """Render the adjacency lists of nodes ``0`` to ``n - 1``, one per line."""
        lines = []
        for node in range(n):
            if weighted:
                body = "".join(f"({v},{w})," for v, w in self.weighted_neighbors(node))
            else:
                body = "".join(f"{v}," for v in self.neighbors(node))
            lines.append(f"{node}:{{{body}}}\n")
        return "".join(lines)
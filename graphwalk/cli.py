"""Command-line front end for running graph algorithms on an edge list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from .components import bridges, strongly_connected_components
from .graph import Graph
from .traversal import bfs, dfs, has_cycle


def _read_edges(lines: Iterable[str]) -> list[tuple[int, int, int]]:
    edges = []
    for lineno, line in enumerate(lines, 1):
        fields = line.split("#", 1)[0].split()
        if not fields:
            continue
        if len(fields) not in (2, 3):
            raise ValueError(f"line {lineno}: expected 'u v [weight]'")
        try:
            values = [int(field) for field in fields]
        except ValueError:
            raise ValueError(f"line {lineno}: node ids and weights must be integers") from None
        if len(values) == 2:
            values.append(0)
        edges.append((values[0], values[1], values[2]))
    return edges


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("edges", help="edge list file, one 'u v [weight]' per line; '-' for stdin")
    common.add_argument("--directed", action="store_true", help="treat edges as directed")
    common.add_argument("-n", "--nodes", type=int, help="number of nodes (default: largest id + 1)")
    common.add_argument("-s", "--source", type=int, default=0, help="start node (default: 0)")

    parser = argparse.ArgumentParser(prog="graphwalk", description="Run graph algorithms.")
    sub = parser.add_subparsers(dest="command", required=True)
    adjacency = sub.add_parser("adjacency", parents=[common], help="print adjacency lists")
    adjacency.add_argument("--weighted", action="store_true", help="show edge weights")
    sub.add_parser("bfs", parents=[common], help="breadth-first order from the source")
    sub.add_parser("dfs", parents=[common], help="depth-first order over all nodes")
    sub.add_parser("cycle", parents=[common], help="check for a cycle in an undirected graph")
    sub.add_parser("scc", parents=[common], help="strongly connected components")
    sub.add_parser("bridges", parents=[common], help="bridges reachable from the source")
    return parser


def _render(args: argparse.Namespace, graph: Graph, n: int) -> str:
    command = args.command
    if command == "adjacency":
        return graph.format_adjacency(n, weighted=args.weighted)
    if command == "bfs":
        return "BFS: " + "".join(f"{node}," for node in bfs(graph, args.source)) + "\n"
    if command == "dfs":
        return "DFS:" + "".join(f"{node}," for node in dfs(graph, n)) + "\n"
    if command == "cycle":
        return "CYCLE FOUND\n" if has_cycle(graph, n) else "CYCLE NOT FOUND\n"
    if command == "scc":
        components = strongly_connected_components(graph, n)
        lines = ["SCC:" + "".join(f"{node}-" for node in comp) + "\n" for comp in components]
        lines.append(f"SCC COUNT:{len(components)}\n")
        return "".join(lines)
    return "".join(
        f"bridge exists\n{child}-{parent}\n" for child, parent in bridges(graph, args.source)
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, load the edge list, and print the requested result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.edges == "-":
            edges = _read_edges(sys.stdin)
        else:
            with open(args.edges, encoding="utf-8") as handle:
                edges = _read_edges(handle)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    graph = Graph()
    for u, v, weight in edges:
        graph.add_edge(u, v, weight, directed=args.directed)
    n = args.nodes if args.nodes is not None else max(graph.nodes(), default=-1) + 1
    if n < 0:
        parser.error("number of nodes must not be negative")

    sys.stdout.write(_render(args, graph, n))
    return 0


if __name__ == "__main__":
    sys.exit(main())
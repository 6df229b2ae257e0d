"""Graph algorithms on adjacency lists: traversal, shortest paths, components and a command line."""

__version__ = "0.1.0"

__all__ = ["cli", "components", "graph", "shortest_paths", "traversal"]
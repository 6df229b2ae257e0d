# graphwalk

Small, dependency-free implementations of the standard graph algorithms,
working on integer-labelled nodes stored as adjacency lists.

## What is included

- `graphwalk.graph.Graph`: an adjacency-list graph of directed or undirected,
  weighted edges (weight defaults to `0`). An undirected edge is stored in both
  directions. It offers `add_edge`, `neighbors`, `weighted_neighbors`, `edges`,
  `nodes`, `reversed` and `format_adjacency`, a plain-text dump of the
  adjacency lists of nodes `0 .. n-1`.
- `graphwalk.traversal`: `bfs`, `dfs`, `has_cycle_undirected`, `has_cycle`
  and `topological_order`.
- `graphwalk.shortest_paths`: `dijkstra`, `bellman_ford` (returns a
  `BellmanFordResult` with `distances` and `negative_cycle`), `floyd_warshall`,
  `bfs_path` (fewest-edge path) and `dag_shortest_distances`.
- `graphwalk.components`: `strongly_connected_components` and `count_scc`
  (Kosaraju), and `bridges` (Tarjan).

Distances to unreachable nodes are `math.inf`. `dijkstra` and `bellman_ford`
raise `ValueError` when the source lies outside `0 .. n-1`; `floyd_warshall`
raises `ValueError` for an edge outside that range; `bfs_path` raises
`ValueError` when the destination cannot be reached.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from graphwalk.graph import Graph
from graphwalk.shortest_paths import bellman_ford, dijkstra, floyd_warshall

g = Graph()
g.add_edge(0, 3, 6)
g.add_edge(0, 5, 9)
g.add_edge(5, 4, 2)
g.add_edge(4, 1, 9)
g.add_edge(4, 2, 10)

print(g.format_adjacency(6, weighted=True))

distances = dijkstra(g, 0, 6)     # distances from node 0 to nodes 0..5
result = bellman_ford(g, 0, 6)    # result.distances, result.negative_cycle
matrix = floyd_warshall(g, 6)     # all-pairs distance matrix
```

Traversal and structure:

```python
from graphwalk.graph import Graph
from graphwalk.traversal import bfs, dfs
from graphwalk.components import count_scc, strongly_connected_components

g = Graph()
for u, v in [(1, 0), (0, 3), (3, 2), (2, 1), (2, 4), (4, 5), (5, 6), (6, 4)]:
    g.add_edge(u, v, directed=True)

order = bfs(g, 0)
components = strongly_connected_components(g, 7)
print(count_scc(g, 7))
```

## Command line

The `graphwalk` command reads an edge list and runs one algorithm on it:

```
graphwalk {adjacency,bfs,dfs,cycle,scc,bridges} EDGES [--directed] [-n N] [-s SOURCE]
```

`EDGES` is a file with one `u v [weight]` edge per line (`-` reads standard
input). Blank lines and anything after `#` are ignored; a missing weight is
`0`. Edges are undirected unless `--directed` is given. `-n/--nodes` sets the
node count (default: largest node id + 1) and `-s/--source` the start node
(default `0`).

- `adjacency` prints the adjacency lists; `--weighted` adds the weights.
- `bfs` prints the breadth-first order from the source.
- `dfs` prints a depth-first order over all nodes.
- `cycle` prints `CYCLE FOUND` or `CYCLE NOT FOUND` (undirected check).
- `scc` prints each strongly connected component and their count.
- `bridges` prints the bridges reachable from the source.

Example:

```
printf '0 1\n1 2\n2 0\n2 3\n' > edges.txt
graphwalk bridges edges.txt
```

## What it does not do

The shortest-path algorithms and topological ordering are available only from
Python; the command line does not run them.
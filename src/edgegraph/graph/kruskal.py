"""Minimum spanning tree via Kruskal's algorithm.

Edge direction is ignored: (u, v, w) joins u and v in both directions.

The algorithm:
  1.  Sort edge indices by weight (stable, so equal weights keep file
      order).
  2.  Every node starts without a group.  Walk the sorted edges:
        - neither end grouped:   open a fresh group for both, accept
        - one end grouped:       the other end joins it, accept
        - different groups:      relabel the larger group id to the
                                 smaller one, accept
        - same group:            reject, the edge would close a cycle
  3.  The tree spans the graph only if it has node_count - 1 edges.

Merging is a full scan of the label list, O(V) per merge, with no path
compression or union by rank.  Fine for the graph sizes this tool
targets; swap in a real disjoint-set forest if merges dominate.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from edgegraph.graph.store import Edge, GraphStore


@dataclass(slots=True)
class SpanningTree:
    """Accepted edges, in the order Kruskal accepted them."""
    edges: list[Edge] = field(default_factory=list)

    @property
    def total_weight(self) -> int:
        return sum(e.weight for e in self.edges)

    def __len__(self) -> int:
        return len(self.edges)


def minimum_spanning_tree(graph: GraphStore) -> SpanningTree | None:
    """Return a minimum spanning tree, or None if *graph* is disconnected.

    Connectivity is judged on the undirected view.  A graph with no
    nodes has an empty tree.
    """
    edges = graph.edges
    order = sorted(range(len(edges)), key=lambda i: edges[i].weight)

    groups: list[int | None] = [None] * (graph.node_count + 1)
    next_group = 0
    tree = SpanningTree()

    for i in order:
        edge = edges[i]
        u, v = edge.source, edge.target
        if u == v:
            continue
        gu, gv = groups[u], groups[v]

        if gu is None and gv is None:
            groups[u] = groups[v] = next_group
            next_group += 1
        elif gu is None:
            groups[u] = gv
        elif gv is None:
            groups[v] = gu
        elif gu != gv:
            keep, drop = min(gu, gv), max(gu, gv)
            for node, g in enumerate(groups):
                if g == drop:
                    groups[node] = keep
        else:
            continue  # same group: cycle

        tree.edges.append(edge)

    expected = max(graph.node_count - 1, 0)
    if len(tree.edges) != expected:
        return None
    return tree

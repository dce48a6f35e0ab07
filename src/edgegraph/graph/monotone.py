"""Monotone ordering (topological ranks) via Kahn's algorithm.

Works in passes rather than with a FIFO queue: each pass takes every
unordered node whose in-degree is zero *at the start of the pass*,
ranks them in ascending id order, then subtracts their out-edges.
Nodes freed during a pass wait for the next one, so every pass is one
"level" of the DAG: level 0 has no predecessors, level 1 depends only
on level 0, and so on.

A pass that frees nothing while nodes remain means every remaining
node sits on or behind a cycle.
"""
from __future__ import annotations

from edgegraph.graph.store import GraphStore


def ordering_levels(graph: GraphStore) -> list[list[int]] | None:
    """Group nodes into dependency levels, or None if *graph* has a cycle."""
    in_deg = [0] * (graph.node_count + 1)
    for edge in graph.edges:
        in_deg[edge.target] += 1

    remaining = list(graph.nodes())
    levels: list[list[int]] = []

    while remaining:
        ready = [n for n in remaining if in_deg[n] == 0]
        if not ready:
            return None

        for node in ready:
            for edge in graph.children(node):
                in_deg[edge.target] -= 1

        ready_set = set(ready)
        remaining = [n for n in remaining if n not in ready_set]
        levels.append(ready)

    return levels


def topological_order(graph: GraphStore) -> dict[int, int] | None:
    """Map every node to its rank, or None if *graph* has a cycle.

    For every edge u -> v, rank[u] < rank[v].  Ranks start at 0 and
    are handed out level by level.
    """
    levels = ordering_levels(graph)
    if levels is None:
        return None

    ranks: dict[int, int] = {}
    for level in levels:
        for node in level:
            ranks[node] = len(ranks)
    return ranks

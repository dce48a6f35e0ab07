"""Edge-list graph store and the three algorithms that run over it."""

from edgegraph.graph.kruskal import SpanningTree, minimum_spanning_tree
from edgegraph.graph.label_set import ProgressReporter, ShortestPath, shortest_path
from edgegraph.graph.monotone import ordering_levels, topological_order
from edgegraph.graph.store import (
    Edge,
    GraphError,
    GraphStore,
    MalformedInput,
    UnknownNode,
    load,
)

__all__ = [
    "Edge",
    "GraphError",
    "GraphStore",
    "MalformedInput",
    "ProgressReporter",
    "ShortestPath",
    "SpanningTree",
    "UnknownNode",
    "load",
    "minimum_spanning_tree",
    "ordering_levels",
    "shortest_path",
    "topological_order",
]

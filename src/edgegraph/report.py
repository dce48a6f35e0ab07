"""Plain-text rendering of algorithm results for terminal output."""
from __future__ import annotations

from edgegraph.graph.kruskal import SpanningTree
from edgegraph.graph.label_set import ShortestPath


def format_elapsed(label: str, seconds: float) -> str:
    return f"{label} ran for: {seconds * 1000:.3f} ms"


def format_path(result: ShortestPath) -> str:
    """Cost header line, then the nodes joined with arrows."""
    hops = " -> ".join(str(n) for n in result.path)
    return f"Path with cost {result.cost} is:\n{hops}"


def format_tree(tree: SpanningTree) -> str:
    """Header line, then one "from to weight" line per accepted edge."""
    lines = [f"Found tree with weight {tree.total_weight}:"]
    lines.extend(f"{e.source} {e.target} {e.weight}" for e in tree.edges)
    return "\n".join(lines)


def format_ordering(ranks: dict[int, int]) -> str:
    """Node ids listed from lowest to highest rank."""
    nodes = sorted(ranks, key=ranks.__getitem__)
    return "Monotone ordering is:\n" + " ".join(str(n) for n in nodes)

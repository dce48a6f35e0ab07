"""Single-pair shortest path by label setting (Dijkstra family).

Each node carries a tentative distance label.  The frontier holds nodes
whose label is tentative; the node with the smallest label is taken
out, its label becomes permanent ("settled"), and its out-edges are
relaxed.  With non-negative weights a settled label can never improve,
so the search stops the moment the target is settled.

The frontier is a plain list of (distance, node) pairs kept in
descending distance order with bisect, so the minimum is always the
last element and list.pop() removes it in O(1).  Insertion is
O(log n) to find the slot plus the list shift.  A binary heap would
win asymptotically on very large frontiers; the sorted list keeps the
"always extract the current minimum" rule easy to see.

A node can sit in the frontier more than once when its label improves
after it was first inserted.  Older entries are stale: they are
skipped on pop because the node is already settled or the entry's
distance no longer matches the label.
"""
from __future__ import annotations

import bisect
import logging
import math
from dataclasses import dataclass
from typing import Callable

from edgegraph.graph.store import GraphStore, UnknownNode

log = logging.getLogger(__name__)

ProgressReporter = Callable[[int, int], None]
"""Called once per search with (nodes_labelled, node_count)."""


@dataclass(slots=True)
class ShortestPath:
    """Result of a successful search."""
    path: list[int]     # start first, end last
    cost: int


def _frontier_key(entry: tuple[float, int]) -> float:
    # ascending in -distance == descending in distance, minimum at the tail
    return -entry[0]


def shortest_path(
    graph: GraphStore,
    start: int,
    end: int,
    progress: ProgressReporter | None = None,
) -> ShortestPath | None:
    """Least-cost path from *start* to *end*, or None if unreachable.

    Raises UnknownNode if either endpoint is outside 1..node_count.
    *progress*, if given, receives how many nodes got a finite label
    before the search ended.  It has no effect on the result.
    """
    n = graph.node_count
    for node in (start, end):
        if node not in graph:
            raise UnknownNode(node, n)

    if start == end:
        _report(progress, 1, n)
        return ShortestPath(path=[start], cost=0)

    dist: list[float] = [math.inf] * (n + 1)
    pred: list[int | None] = [None] * (n + 1)
    settled = [False] * (n + 1)
    dist[start] = 0

    frontier: list[tuple[float, int]] = [(0, start)]
    result: ShortestPath | None = None

    while frontier:
        d, node = frontier.pop()
        if settled[node] or d > dist[node]:
            continue  # stale entry
        settled[node] = True

        if node == end:
            result = ShortestPath(path=_walk_back(pred, start, end), cost=int(d))
            break

        for edge in graph.children(node):
            to = edge.target
            new_dist = d + edge.weight
            if new_dist < dist[to]:
                dist[to] = new_dist
                pred[to] = node
                bisect.insort(frontier, (new_dist, to), key=_frontier_key)

    labelled = sum(1 for d in dist if d != math.inf)
    _report(progress, labelled, n)
    return result


def _walk_back(pred: list[int | None], start: int, end: int) -> list[int]:
    path = [end]
    cur = end
    while cur != start:
        prev = pred[cur]
        if prev is None:
            # only reachable if pred was built inconsistently
            raise RuntimeError(f"broken predecessor chain at node {cur}")
        cur = prev
        path.append(cur)
    path.reverse()
    return path


def _report(progress: ProgressReporter | None, labelled: int, total: int) -> None:
    pct = labelled / total * 100 if total else 0.0
    log.debug("visited %d of %d nodes (%.1f%%)", labelled, total, pct)
    if progress is not None:
        progress(labelled, total)

"""Shared fixtures for graph store and algorithm tests."""
from __future__ import annotations

import random
from typing import Callable

import pytest

from edgegraph.graph.store import GraphStore

SEED = 42

EdgeList = list[tuple[int, int, int]]


@pytest.fixture
def empty_graph() -> GraphStore:
    return GraphStore.from_edges([])


@pytest.fixture
def triangle_graph() -> GraphStore:
    """
    1 -(1)-> 2 -(1)-> 3
    1 -----(4)------> 3
    """
    return GraphStore.from_edges([(1, 2, 1), (1, 3, 4), (2, 3, 1)])


@pytest.fixture
def diamond_graph() -> GraphStore:
    """
    1 -> 2 -> 4
    1 -> 3 -> 4
    """
    return GraphStore.from_edges([(1, 2, 2), (1, 3, 1), (2, 4, 1), (3, 4, 5)])


@pytest.fixture
def two_components() -> GraphStore:
    """1 - 2 and 3 - 4 with nothing in between."""
    return GraphStore.from_edges([(1, 2, 3), (3, 4, 1)])


@pytest.fixture
def cyclic_graph() -> GraphStore:
    """1 -> 2 -> 3 -> 1, plus a tail 3 -> 4."""
    return GraphStore.from_edges([(1, 2, 1), (2, 3, 1), (3, 1, 1), (3, 4, 1)])


def random_edges(
    rng: random.Random,
    n_nodes: int,
    n_edges: int,
    max_weight: int = 9,
    connected: bool = False,
) -> EdgeList:
    """Random multigraph on 1..n_nodes, sorted by source as the loader expects.

    With connected=True a random spanning chain is laid down first so the
    undirected view is connected and every id up to n_nodes is used.
    """
    edges: EdgeList = []
    if connected:
        perm = list(range(1, n_nodes + 1))
        rng.shuffle(perm)
        for a, b in zip(perm, perm[1:]):
            edges.append((a, b, rng.randint(0, max_weight)))
    while len(edges) < n_edges:
        edges.append((
            rng.randint(1, n_nodes),
            rng.randint(1, n_nodes),
            rng.randint(0, max_weight),
        ))
    edges.sort(key=lambda e: e[0])
    return edges


@pytest.fixture
def make_edges() -> Callable[..., EdgeList]:
    """Factory for random edge lists, seeded per call from SEED."""
    def _make(seed: int, n_nodes: int, n_edges: int, **kwargs) -> EdgeList:
        return random_edges(random.Random(SEED + seed), n_nodes, n_edges, **kwargs)
    return _make

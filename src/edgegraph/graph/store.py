"""Compact read-only adjacency for weighted directed graphs.

Edges are kept in one flat tuple, grouped by source node, and a second
tuple of offsets marks where each node's group starts and ends (the CSR
layout).  Node i's out-edges are edges[offsets[i-1]:offsets[i]], so a
children() lookup is two index reads and a slice, with no per-node dict
or list allocation.

Input format, one edge per line:

    <from> <to> <weight>

Three non-negative integers separated by whitespace, with lines grouped
and sorted by <from> ascending.  The loader does not sort; it walks the
lines once and backfills an offset entry for every node id it skips, so
nodes with no out-edges still get an (empty) range.

Node ids start at 1.  Id 0 is never a node.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

log = logging.getLogger(__name__)

_UINT = re.compile(r"\+?[0-9]+")


class GraphError(Exception):
    """Base class for errors raised by edgegraph."""


class MalformedInput(GraphError, ValueError):
    """Raised when the edge list cannot be turned into a graph.

    line_no is 1-based.  Both line_no and line are None when the problem
    is not tied to a single input line.
    """

    def __init__(
        self,
        reason: str,
        line_no: int | None = None,
        line: str | None = None,
    ) -> None:
        self.reason = reason
        self.line_no = line_no
        self.line = line
        if line_no is None:
            super().__init__(reason)
        else:
            super().__init__(f"line {line_no}: {reason}: {line!r}")


class UnknownNode(GraphError, KeyError):
    """Raised when a query names a node id outside [1, node_count]."""

    def __init__(self, node: int, node_count: int) -> None:
        self.node = node
        self.node_count = node_count
        super().__init__(f"Node {node!r} not in graph (valid ids: 1..{node_count})")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


@dataclass(frozen=True, slots=True)
class Edge:
    source: int
    target: int
    weight: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.source, self.target, self.weight)


def parse_line(line: str, line_no: int | None = None) -> Edge:
    """Parse one "<from> <to> <weight>" line.

    Raises MalformedInput unless the line holds exactly three unsigned
    decimal integers (an explicit leading "+" is allowed).
    """
    text = line.rstrip("\r\n")
    parts = text.split()
    if len(parts) != 3:
        raise MalformedInput(f"expected 3 fields, got {len(parts)}", line_no, text)
    for token in parts:
        if not _UINT.fullmatch(token):
            raise MalformedInput(
                f"{token!r} is not a non-negative integer", line_no, text
            )
    source, target, weight = (int(p) for p in parts)
    return Edge(source, target, weight)


class GraphStore:
    """Static weighted digraph in offset-array (CSR) form.

    INVARIANT: offsets has node_count + 1 entries, is non-decreasing,
    starts at 0 and ends at len(edges).  Nothing mutates a store after
    construction, so any number of algorithms can share one instance.
    """

    __slots__ = ("_edges", "_offsets")

    def __init__(self, edges: tuple[Edge, ...], offsets: tuple[int, ...]) -> None:
        self._edges = edges
        self._offsets = offsets

    # ---- construction ----------------------------------------------------

    @classmethod
    def from_edges(
        cls, edges: Iterable[Edge | tuple[int, int, int]]
    ) -> GraphStore:
        """Build a store from edges already grouped by source.

        Accepts Edge instances or plain (source, target, weight) tuples.
        """
        return cls._build(
            ((e if isinstance(e, Edge) else Edge(*e), None, None) for e in edges)
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GraphStore:
        """Parse an edge list from any iterable of text lines.

        Every line must hold an edge, blank ones included.  The first bad
        line aborts the whole parse with MalformedInput.
        """

        def _parsed() -> Iterator[tuple[Edge, int | None, str | None]]:
            for line_no, line in enumerate(lines, start=1):
                yield parse_line(line, line_no), line_no, line.rstrip("\r\n")

        return cls._build(_parsed())

    @classmethod
    def _build(
        cls, items: Iterable[tuple[Edge, int | None, str | None]]
    ) -> GraphStore:
        # Raises MalformedInput on an id of 0, a negative weight, or a
        # source smaller than the one before it.
        flat: list[Edge] = []
        starts: list[int] = []  # starts[k] is where node k+1 begins
        expected = 1  # next node id whose range has not been opened yet
        max_node = 0

        for edge, line_no, text in items:
            if edge.source < 1 or edge.target < 1:
                raise MalformedInput("node ids must be >= 1", line_no, text)
            if edge.weight < 0:
                raise MalformedInput("weights must be >= 0", line_no, text)
            if edge.source < expected - 1:
                raise MalformedInput(
                    f"edges not sorted by source ({edge.source} after "
                    f"{expected - 1})",
                    line_no,
                    text,
                )

            # close the ranges of every node before this source
            while expected <= edge.source:
                starts.append(len(flat))
                expected += 1

            flat.append(edge)
            max_node = max(max_node, edge.source, edge.target)

        # closing sentinel: end of the last source's range
        starts.append(len(flat))
        # trailing sinks: nodes seen only as targets past the last source
        while len(starts) <= max_node:
            starts.append(len(flat))

        store = cls(tuple(flat), tuple(starts))
        log.debug("loaded %r", store)
        return store

    # ---- queries ---------------------------------------------------------

    def children(self, node: int) -> tuple[Edge, ...]:
        """Out-edges of *node*, in file order.

        Raises UnknownNode if node is not in 1..node_count.
        """
        self._check(node)
        return self._edges[self._offsets[node - 1]:self._offsets[node]]

    def out_degree(self, node: int) -> int:
        self._check(node)
        return self._offsets[node] - self._offsets[node - 1]

    def nodes(self) -> Iterator[int]:
        return iter(range(1, self.node_count + 1))

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def offsets(self) -> tuple[int, ...]:
        return self._offsets

    @property
    def node_count(self) -> int:
        return len(self._offsets) - 1

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _check(self, node: int) -> None:
        if node not in self:
            raise UnknownNode(node, self.node_count)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return (
            isinstance(node, int)
            and not isinstance(node, bool)
            and 1 <= node <= self.node_count
        )

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count}, edges={self.edge_count})"


def load(path: str | os.PathLike[str]) -> GraphStore:
    """Read an edge-list file into a GraphStore.

    Raises MalformedInput on the first line that does not parse or is
    not valid UTF-8, and lets OSError from opening or reading the file
    propagate.
    """
    with open(path, "rb") as fh:
        return GraphStore.from_lines(_decode_lines(fh))


def _decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    for line_no, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedInput(
                f"not valid UTF-8 ({exc.reason})",
                line_no,
                raw.decode("utf-8", errors="replace").rstrip("\r\n"),
            ) from None

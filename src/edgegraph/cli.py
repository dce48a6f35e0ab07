"""edgegraph CLI entry point.

Usage: edgegraph <algorithm> <graph_file> [args]

    edgegraph label-set graph.txt 1 42
    edgegraph kruskal graph.txt
    edgegraph monotone-ordering graph.txt
"""
import argparse
import logging
import sys
import time

from edgegraph.graph.store import GraphStore, MalformedInput, UnknownNode, load

log = logging.getLogger(__name__)

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _add_graph_file(p: argparse.ArgumentParser) -> None:
    p.add_argument("graph_file", help="Edge list, one '<from> <to> <weight>' per line.")


def _add_label_set_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "label-set",
        help="Shortest path between two nodes (label-setting).",
    )
    _add_graph_file(p)
    p.add_argument("start", type=int, help="Start node id")
    p.add_argument("end", type=int, help="End node id")


def _add_kruskal_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "kruskal",
        help="Minimum spanning tree of the undirected view.",
    )
    _add_graph_file(p)


def _add_monotone_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "monotone-ordering",
        help="Topological ranks of every node (Kahn's algorithm).",
    )
    _add_graph_file(p)


def _load_graph(path: str) -> GraphStore | None:
    started = time.perf_counter()
    try:
        graph = load(path)
    except (OSError, MalformedInput) as exc:
        print(f"Unable to load graph: {exc}", file=sys.stderr)
        return None
    log.info(
        "loaded %s: %d nodes, %d edges in %.1f ms",
        path, graph.node_count, graph.edge_count,
        (time.perf_counter() - started) * 1000,
    )
    return graph


def _run_label_set(args: argparse.Namespace, graph: GraphStore) -> int:
    from edgegraph.graph.label_set import shortest_path
    from edgegraph.report import format_elapsed, format_path

    started = time.perf_counter()
    try:
        result = shortest_path(graph, args.start, args.end)
    except UnknownNode as exc:
        print(exc, file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - started

    if result is None:
        print(
            f"No path found between nodes {args.start} and {args.end}.",
            file=sys.stderr,
        )
        return 1
    print(format_elapsed("Label-Set", elapsed))
    print(format_path(result))
    return 0


def _run_kruskal(args: argparse.Namespace, graph: GraphStore) -> int:
    from edgegraph.graph.kruskal import minimum_spanning_tree
    from edgegraph.report import format_elapsed, format_tree

    started = time.perf_counter()
    tree = minimum_spanning_tree(graph)
    elapsed = time.perf_counter() - started

    if tree is None:
        print("Graph is not connected.", file=sys.stderr)
        return 1
    print(format_elapsed("Kruskal", elapsed))
    print(format_tree(tree))
    return 0


def _run_monotone_ordering(args: argparse.Namespace, graph: GraphStore) -> int:
    from edgegraph.graph.monotone import topological_order
    from edgegraph.report import format_elapsed, format_ordering

    started = time.perf_counter()
    ranks = topological_order(graph)
    elapsed = time.perf_counter() - started

    if ranks is None:
        print("No monotone ordering, graph contains cycles.", file=sys.stderr)
        return 1
    print(format_elapsed("Monotone-Ordering", elapsed))
    print(format_ordering(ranks))
    return 0


_COMMANDS = {
    "label-set": _run_label_set,
    "kruskal": _run_kruskal,
    "monotone-ordering": _run_monotone_ordering,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edgegraph",
        description="Shortest path, spanning tree and ordering over an edge-list file.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log output (-v info, -vv debug).",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_label_set_parser(subparsers)
    _add_kruskal_parser(subparsers)
    _add_monotone_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=_LOG_LEVELS[min(args.verbose, len(_LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    graph = _load_graph(args.graph_file)
    if graph is None:
        return 1
    return _COMMANDS[args.command](args, graph)


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

from errors import NoPathExistsError
from graph import Edge, Graph, total_weight
from logging_config import setup_logging


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def build_graph(config: Dict) -> Graph:
    graph_config = config["graph"]
    return Graph(graph_config["nodes"], graph_config.get("edges") or [])


def resolve_vertex(graph: Graph, name: Any) -> Any:
    """Map a vertex as typed on the command line to the graph's own vertex.

    YAML may load vertices as numbers while flags always arrive as strings.
    Returns None when nothing matches.
    """
    vertices = graph.vertices()
    if name in vertices:
        return name
    for vertex in vertices:
        if str(vertex) == str(name):
            return vertex
    return None


def summarise_edges(edges: Iterable[Edge]) -> str:
    parts = [f"{edge.vertex_a}-{edge.vertex_b} ({edge.weight:g})" for edge in edges]
    return ", ".join(parts) if parts else "none"


def print_results(graph: Graph, tree: Iterable[Edge], start, end) -> List[Edge] | None:
    """Print the spanning tree and shortest path; return the path if one exists."""
    tree_edges = sorted(tree, key=lambda edge: (edge.weight, str(edge.vertex_a), str(edge.vertex_b)))
    print("=== Graph ===")
    print(f"Vertices: {graph.num_vertices()}  Edges: {graph.num_edges()}")
    print()

    print("=== Minimum Spanning Tree ===")
    print(f"Edges: {summarise_edges(tree_edges)}")
    print(f"Total weight: {total_weight(tree_edges):.2f}")
    components = graph.num_vertices() - len(tree_edges)
    if components > 1:
        print(f"Graph is disconnected: spanning forest over {components} components.")
    print()

    print(f"=== Shortest Path {start} -> {end} ===")
    try:
        path = graph.shortest_path(start, end)
    except NoPathExistsError as exc:
        print(f"No path: {exc}")
        return None

    if not path:
        print("Start and end coincide; no edges traversed.")
    else:
        route = [start]
        for edge in path:
            route.append(edge.other_vertex(route[-1]))
        print(f"Route: {' -> '.join(str(vertex) for vertex in route)}")
        print(f"Edges: {summarise_edges(path)}")
    print(f"Total cost: {total_weight(path):.2f}")
    return path


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compute the minimum spanning tree and a shortest path of a weighted graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("graph_instance.yaml"),
        help="Path to the YAML graph configuration.",
    )
    parser.add_argument("--start", help="Start vertex (overrides query.start_node).")
    parser.add_argument("--end", help="End vertex (overrides query.end_node).")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level.",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Draw the graph with the spanning tree and path highlighted.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to save the drawing as an image.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display the drawing interactively.",
    )
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    config = load_config(args.config)
    graph = build_graph(config)
    logger.info("Loaded %s", args.config)

    query_config = config.get("query") or {}
    start = args.start if args.start is not None else query_config.get("start_node")
    end = args.end if args.end is not None else query_config.get("end_node")
    if start is None or end is None:
        parser.error("start and end vertices must be given in the config or on the command line.")
    resolved_start = resolve_vertex(graph, start)
    resolved_end = resolve_vertex(graph, end)
    for given, resolved in ((start, resolved_start), (end, resolved_end)):
        if resolved is None:
            parser.error(f"vertex {given!r} is not in the graph.")

    tree = graph.minimum_spanning_tree()
    path = print_results(graph, tree, resolved_start, resolved_end)

    if args.visualize:
        from visualize import draw_graph

        draw_graph(
            graph=graph,
            tree=tree,
            path=path or [],
            output=args.output,
            show=not args.no_show,
        )


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from errors import NoPathExistsError
from graph import Edge, Graph, total_weight


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(graph.vertices())
    # Parallel edges collapse onto one drawn edge; the cheapest weight wins.
    for edge in reversed(graph.edges()):
        g.add_edge(edge.vertex_a, edge.vertex_b, weight=edge.weight)
    return g


def compute_layout(graph_nx: nx.Graph) -> Dict[Any, Tuple[float, float]]:
    return nx.spring_layout(graph_nx, seed=42)


def edge_pairs(edges: Iterable[Edge]) -> List[Tuple[Any, Any]]:
    return [(edge.vertex_a, edge.vertex_b) for edge in edges if edge.vertex_a != edge.vertex_b]


def draw_graph(
    graph: Graph,
    tree: Iterable[Edge],
    path: Sequence[Edge],
    output: Path | None = None,
    show: bool = True,
) -> None:
    """Draw every edge in grey, the spanning tree in green and the path in red."""
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)
    tree = list(tree)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    tree_edges = edge_pairs(tree)
    if tree_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=tree_edges,
            edge_color="#2ca02c",
            width=2.0,
            ax=ax,
        )

    path_edges = edge_pairs(path)
    if path_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=path_edges,
            edge_color="#d62728",
            width=3.0,
            ax=ax,
        )

    nx.draw_networkx_nodes(graph_nx, layout, node_color="#aec7e8", node_size=600, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=10, ax=ax)

    edge_labels = {
        (u, v): f"{data['weight']:g}" for u, v, data in graph_nx.edges(data=True) if u != v
    }
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    summary_lines = [
        f"Vertices: {graph.num_vertices()}",
        f"Edges: {graph.num_edges()}",
        f"Spanning tree weight: {total_weight(tree):g}",
        f"Path cost: {total_weight(path):g}" if path else "Path: none",
    ]
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Minimum Spanning Tree and Shortest Path")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def main() -> None:
    from main import build_graph, load_config

    parser = argparse.ArgumentParser(
        description="Visualise a graph's minimum spanning tree and shortest path."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("graph_instance.yaml"),
        help="Path to the YAML graph configuration.",
    )
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a static PNG of the graph.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    graph = build_graph(config)
    query = config.get("query") or {}

    path: List[Edge] = []
    if "start_node" in query and "end_node" in query:
        try:
            path = graph.shortest_path(query["start_node"], query["end_node"])
        except NoPathExistsError as exc:
            print(f"Warning: {exc}")

    draw_graph(
        graph=graph,
        tree=graph.minimum_spanning_tree(),
        path=path,
        output=args.static_out,
        show=not args.no_show,
    )


if __name__ == "__main__":
    main()

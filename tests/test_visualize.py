"""Tests for the matplotlib drawing helpers."""

from __future__ import annotations

from graph import Edge, Graph
from visualize import build_networkx_graph, draw_graph, edge_pairs


def test_networkx_graph_keeps_cheapest_parallel_edge():
    graph = Graph("AB", [("A", "B", 4), ("A", "B", 2)])
    graph_nx = build_networkx_graph(graph)
    assert graph_nx.number_of_nodes() == 2
    assert graph_nx["A"]["B"]["weight"] == 2


def test_edge_pairs_drop_self_loops():
    edges = [Edge("A", "B", 1), Edge("C", "C", 1)]
    assert edge_pairs(edges) == [("A", "B")]


def test_draw_graph_saves_image(tmp_path):
    graph = Graph("ABCD", [("A", "B", 1), ("B", "C", 2), ("A", "C", 4), ("D", "D", 1)])
    output = tmp_path / "graph.png"
    draw_graph(
        graph=graph,
        tree=graph.minimum_spanning_tree(),
        path=graph.shortest_path("A", "C"),
        output=output,
        show=False,
    )
    assert output.exists()
    assert output.stat().st_size > 0

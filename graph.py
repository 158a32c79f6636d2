from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Collection, Dict, Hashable, Iterable, List, Sequence, Set, Tuple

from disjoint_set import ArrayDisjointSet
from errors import InvalidEdgeError, NoPathExistsError
from priority_queue import ArrayHeap
from searcher import top_k_sort


logger = logging.getLogger(__name__)

Vertex = Hashable


@dataclass(frozen=True, eq=False)
class Edge:
    """Undirected weighted edge.

    Edges compare by identity, so two parallel edges with the same endpoints
    and weight stay distinct. Ordering uses the weight only.
    """

    vertex_a: Any
    vertex_b: Any
    weight: float

    def __post_init__(self) -> None:
        try:
            weight = float(self.weight)
        except (TypeError, ValueError):
            raise InvalidEdgeError(f"Edge weight must be a number, found {self.weight!r}.") from None
        object.__setattr__(self, "weight", weight)

    @classmethod
    def of(cls, value: Any) -> "Edge":
        if isinstance(value, Edge):
            return value
        try:
            vertex_a, vertex_b, weight = value
        except (TypeError, ValueError):
            raise InvalidEdgeError(f"Expected (vertex, vertex, weight), found {value!r}.") from None
        return cls(vertex_a, vertex_b, weight)

    def other_vertex(self, vertex: Any) -> Any:
        if vertex == self.vertex_a:
            return self.vertex_b
        if vertex == self.vertex_b:
            return self.vertex_a
        raise ValueError(f"{vertex!r} is not an endpoint of {self}.")

    def __lt__(self, other: "Edge") -> bool:
        return self.weight < other.weight

    def __gt__(self, other: "Edge") -> bool:
        return self.weight > other.weight

    def __repr__(self) -> str:
        return f"Edge({self.vertex_a!r}, {self.vertex_b!r}, {self.weight:g})"


@dataclass(frozen=True)
class _QueueEntry:
    cost: float
    vertex: Any

    def __lt__(self, other: "_QueueEntry") -> bool:
        return self.cost < other.cost


class Graph:
    """Immutable undirected weighted graph.

    Self-loops, parallel edges and disconnected components are all allowed.
    The graph answers two queries: a minimum spanning forest (Kruskal) and
    the shortest path between two vertices (Dijkstra).
    """

    def __init__(self, vertices: Iterable[Vertex], edges: Iterable[Any]) -> None:
        vertex_list: List[Vertex] = list(vertices)
        self._num_vertices = len(vertex_list)
        self._adjacency: Dict[Vertex, List[Edge]] = {vertex: [] for vertex in vertex_list}
        self._num_edges = 0

        accepted: List[Edge] = []
        for raw in edges:
            edge = Edge.of(raw)
            self._add_edge(edge)
            accepted.append(edge)

        # Ascending by weight; shared by every spanning tree query.
        self._sorted_edges: Tuple[Edge, ...] = tuple(top_k_sort(len(accepted), accepted))
        logger.debug(
            "Built graph with %d vertices and %d edges", self._num_vertices, self._num_edges
        )

    @classmethod
    def from_sets(cls, vertices: Collection[Vertex], edges: Collection[Any]) -> "Graph":
        """Build a graph from unordered vertex and edge collections."""
        return cls(list(vertices), list(edges))

    def _add_edge(self, edge: Edge) -> None:
        # NaN fails this comparison too.
        if not edge.weight >= 0:
            raise InvalidEdgeError(f"{edge} must have a non-negative weight.")
        for endpoint in (edge.vertex_a, edge.vertex_b):
            if endpoint not in self._adjacency:
                raise InvalidEdgeError(f"{edge} references unknown vertex {endpoint!r}.")

        self._adjacency[edge.vertex_a].append(edge)
        self._adjacency[edge.vertex_b].append(edge)
        self._num_edges += 1

    def num_vertices(self) -> int:
        return self._num_vertices

    def num_edges(self) -> int:
        return self._num_edges

    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._adjacency)

    def edges(self) -> Tuple[Edge, ...]:
        """All edges, ascending by weight."""
        return self._sorted_edges

    def neighbors(self, vertex: Vertex) -> Tuple[Edge, ...]:
        return tuple(self._adjacency[vertex])

    def minimum_spanning_tree(self) -> Set[Edge]:
        """Return the edges of a minimum spanning forest.

        Each connected component contributes its own tree, so the result
        holds ``num_vertices - components`` edges. Among equal weights the
        cached sort order decides which tree is returned.
        """
        components: ArrayDisjointSet[Vertex] = ArrayDisjointSet()
        for vertex in self._adjacency:
            components.make_set(vertex)

        tree: Set[Edge] = set()
        for edge in self._sorted_edges:
            if components.find_set(edge.vertex_a) != components.find_set(edge.vertex_b):
                components.union(edge.vertex_a, edge.vertex_b)
                tree.add(edge)

        logger.debug("Minimum spanning tree uses %d of %d edges", len(tree), self._num_edges)
        return tree

    def shortest_path(self, start: Vertex, end: Vertex) -> List[Edge]:
        """Return the edges of a cheapest path from ``start`` to ``end``.

        The first edge leaves ``start`` and the last one enters ``end``.
        An empty list is returned when both vertices are the same; an
        unreachable ``end`` raises ``NoPathExistsError``.
        """
        if start == end:
            return []
        for vertex in (start, end):
            if vertex not in self._adjacency:
                raise ValueError(f"Unknown vertex {vertex!r}.")

        costs: Dict[Vertex, float] = {vertex: float("inf") for vertex in self._adjacency}
        predecessors: Dict[Vertex, Edge] = {}
        finalized: Set[Vertex] = set()
        costs[start] = 0.0

        queue: ArrayHeap[_QueueEntry] = ArrayHeap()
        queue.insert(_QueueEntry(0.0, start))

        while queue and end not in finalized:
            current = queue.remove_min().vertex
            if current in finalized:
                continue
            finalized.add(current)

            current_cost = costs[current]
            for edge in self._adjacency[current]:
                neighbor = edge.other_vertex(current)
                if neighbor in finalized:
                    continue
                candidate = current_cost + edge.weight
                if candidate < costs[neighbor]:
                    costs[neighbor] = candidate
                    predecessors[neighbor] = edge
                    queue.insert(_QueueEntry(candidate, neighbor))

        if end not in finalized:
            raise NoPathExistsError(start, end)

        path: List[Edge] = []
        vertex = end
        while vertex in predecessors:
            edge = predecessors[vertex]
            path.append(edge)
            vertex = edge.other_vertex(vertex)
        path.reverse()

        logger.debug("Shortest path %r -> %r costs %g over %d edges", start, end, costs[end], len(path))
        return path

    def path_cost(self, path: Sequence[Edge]) -> float:
        """Return the total weight of the given edge sequence."""
        for edge in path:
            if edge.vertex_a not in self._adjacency or edge not in self._adjacency[edge.vertex_a]:
                raise ValueError(f"{edge} not present in graph.")
        return total_weight(path)


def total_weight(edges: Iterable[Edge]) -> float:
    return sum((edge.weight for edge in edges), 0.0)

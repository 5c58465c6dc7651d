"""Directed weighted graphs and an all-pairs shortest route finder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Edge:
    """A directed edge between two vertices with a weight."""

    origin: int
    destination: int
    weight: float


class DirectedWeightedGraph:
    """A graph with a fixed number of vertices and a growing list of edges."""

    def __init__(self, vertex_count: int = 0) -> None:
        self._edges: List[Edge] = []
        self._incidence: List[List[int]] = [[] for _ in range(vertex_count)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._incidence):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, edge: Edge) -> int:
        """Add ``edge`` and return its id."""
        self._check_vertex(edge.origin)
        self._edges.append(edge)
        edge_id = len(self._edges) - 1
        self._incidence[edge.origin].append(edge_id)
        return edge_id

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self._incidence)

    @property
    def edge_count(self) -> int:
        """Number of edges added so far."""
        return len(self._edges)

    def edge(self, edge_id: int) -> Edge:
        """Return the edge with the given id."""
        if not 0 <= edge_id < len(self._edges):
            raise IndexError(f"edge {edge_id} is out of range")
        return self._edges[edge_id]

    def incident_edges(self, vertex: int) -> Tuple[int, ...]:
        """Return the ids of the edges leaving ``vertex``."""
        self._check_vertex(vertex)
        return tuple(self._incidence[vertex])


@dataclass
class RouteResult:
    """The total weight of a route and the ids of its edges in order."""

    weight: float
    edges: List[int] = field(default_factory=list)


@dataclass
class _RouteData:
    weight: float
    prev_edge: Optional[int]


class Router:
    """Precomputes shortest routes between every pair of vertices."""

    def __init__(self, graph: DirectedWeightedGraph) -> None:
        self._graph = graph
        count = graph.vertex_count
        self._routes: List[List[Optional[_RouteData]]] = [[None] * count for _ in range(count)]
        self._initialize()
        for through in range(count):
            self._relax_through(through)

    def _initialize(self) -> None:
        graph = self._graph
        for vertex, row in enumerate(self._routes):
            row[vertex] = _RouteData(0, None)
            for edge_id in graph.incident_edges(vertex):
                edge = graph.edge(edge_id)
                if edge.weight < 0:
                    raise ValueError("Edges' weights should be non-negative")
                current = row[edge.destination]
                if current is None or current.weight > edge.weight:
                    row[edge.destination] = _RouteData(edge.weight, edge_id)

    def _relax_through(self, through: int) -> None:
        through_row = self._routes[through]
        for row in self._routes:
            route_from = row[through]
            if route_from is None:
                continue
            for target, route_to in enumerate(through_row):
                if route_to is None:
                    continue
                candidate = route_from.weight + route_to.weight
                current = row[target]
                if current is None or candidate < current.weight:
                    prev = route_to.prev_edge if route_to.prev_edge is not None else route_from.prev_edge
                    row[target] = _RouteData(candidate, prev)

    def build_route(self, origin: int, destination: int) -> Optional[RouteResult]:
        """Return the cheapest route, or ``None`` if there is none."""
        count = len(self._routes)
        if not (0 <= origin < count and 0 <= destination < count):
            raise IndexError("vertex is out of range")
        row = self._routes[origin]
        data = row[destination]
        if data is None:
            return None
        edges: List[int] = []
        edge_id = data.prev_edge
        while edge_id is not None:
            edges.append(edge_id)
            edge_id = row[self._graph.edge(edge_id).origin].prev_edge
        edges.reverse()
        return RouteResult(data.weight, edges)
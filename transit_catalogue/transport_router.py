"""Fastest journeys between stops, counting waits and bus rides."""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Dict, Optional, Sequence, Union

from .domain import Bus, BusEdge, RouteInfo, RouteSettings, StopEdge, StopVertexPair
from .graph import DirectedWeightedGraph, Edge, Router
from .transport_catalogue import TransportCatalogue

KILOMETER = 1000
HOUR = 60


class TransportRouter:
    """Builds a time-weighted graph from a catalogue and answers route queries."""

    def __init__(self, catalogue: TransportCatalogue, settings: RouteSettings) -> None:
        self._catalogue = catalogue
        self._settings = RouteSettings(settings.wait_time, settings.velocity)
        stops = catalogue.stops()
        self._graph = DirectedWeightedGraph(len(stops) * 2)
        self._vertices: Dict[str, StopVertexPair] = {
            name: StopVertexPair(2 * index, 2 * index + 1) for index, name in enumerate(stops)
        }
        self._edges: Dict[int, Union[StopEdge, BusEdge]] = {}
        self._add_wait_edges()
        self._add_bus_edges()
        self._router = Router(self._graph)

    def _add_wait_edges(self) -> None:
        wait = self._settings.wait_time
        for name, pair in self._vertices.items():
            edge_id = self._graph.add_edge(Edge(pair.origin, pair.destination, wait))
            self._edges[edge_id] = StopEdge(name, wait)

    def _add_bus_edges(self) -> None:
        for bus in self._catalogue.buses().values():
            self._add_route_edges(bus.stops, bus)
            if not bus.is_roundtrip:
                self._add_route_edges(bus.stops[::-1], bus)

    def _travel_time(self, distance: int) -> float:
        speed = self._settings.velocity * KILOMETER / HOUR
        if speed == 0:
            return math.inf if distance else math.nan
        return distance / speed

    def _add_route_edges(self, stop_names: Sequence[str], bus: Bus) -> None:
        stops = self._catalogue.stops()
        for start_index, start_name in enumerate(stop_names):
            start_vertex = self._vertices[start_name].destination
            distance = 0
            for span, (prev_name, next_name) in enumerate(pairwise(stop_names[start_index:]), 1):
                distance += self._catalogue.get_distance(stops[prev_name], stops[next_name])
                time = self._travel_time(distance)
                edge_id = self._graph.add_edge(
                    Edge(start_vertex, self._vertices[next_name].origin, time)
                )
                self._edges[edge_id] = BusEdge(bus.name, span, time)

    def route(self, origin: str, destination: str) -> Optional[RouteInfo]:
        """Return the fastest route between two stops, or ``None``.

        Raises ``KeyError`` if either stop is not in the catalogue.
        """
        start = self._vertices[origin].origin
        end = self._vertices[destination].origin
        found = self._router.build_route(start, end)
        if found is None:
            return None
        return RouteInfo(found.weight, [self._edges[edge_id] for edge_id in found.edges])
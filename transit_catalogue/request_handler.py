"""Answers questions about the catalogue: buses, stops, maps and routes."""

from __future__ import annotations

from itertools import pairwise
from typing import List, Optional, Tuple

from .domain import Bus, RouteInfo, RouteSettings, Stop
from .geo import compute_distance
from .transport_catalogue import TransportCatalogue
from .transport_router import TransportRouter


class RequestHandler:
    """A facade over the catalogue and the lazily built router."""

    def __init__(self, catalogue: TransportCatalogue) -> None:
        self._catalogue = catalogue
        self._router: Optional[TransportRouter] = None

    def bus_info(self, name: str) -> Optional[Bus]:
        """Return the bus with this name, or ``None``."""
        return self._catalogue.find_bus(name)

    def stop_info(self, name: str) -> Optional[Stop]:
        """Return the stop with this name, or ``None``."""
        return self._catalogue.find_stop(name)

    def route_lengths(self, bus: Bus) -> Tuple[float, int]:
        """Return the geographic and the road length of a bus route."""
        geo_length = 0.0
        road_length = 0
        for origin_name, destination_name in pairwise(bus.stops):
            origin = self._catalogue.find_stop(origin_name)
            destination = self._catalogue.find_stop(destination_name)
            geo_length += compute_distance(origin.position, destination.position)
            road_length += self._catalogue.get_distance(origin, destination)
        return geo_length, road_length

    def count_unique_stops(self, bus: Bus) -> int:
        """Number of distinct stops on the route."""
        return len(set(bus.stops))

    def render_data(self) -> List[Tuple[Bus, List[Stop]]]:
        """Every bus with its stops, sorted by bus name."""
        result = [
            (bus, [self._catalogue.find_stop(name) for name in bus.stops])
            for bus in self._catalogue.buses().values()
        ]
        result.sort(key=lambda item: item[0].name)
        return result

    def route(self, origin: str, destination: str, settings: RouteSettings) -> Optional[RouteInfo]:
        """Return the fastest route between two stops, or ``None``.

        The router is built on first use with the settings given then.
        """
        if self._router is None:
            self._router = TransportRouter(self._catalogue, settings)
        return self._router.route(origin, destination)
"""Storage of stops, buses and road distances between stops."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .domain import Bus, Stop
from .geo import Coordinates


class TransportCatalogue:
    """Holds stops and buses by name along with road distances."""

    def __init__(self) -> None:
        self._stops: Dict[str, Stop] = {}
        self._buses: Dict[str, Bus] = {}
        self._distances: Dict[Tuple[str, str], int] = {}

    def add_bus(self, bus: Bus) -> None:
        """Add a bus; stops it names that are unknown are created at (0, 0)."""
        self._buses[bus.name] = bus
        for stop_name in bus.stops:
            if stop_name not in self._stops:
                self.add_stop(Stop(stop_name, Coordinates(0.0, 0.0)))
            self._stops[stop_name].buses.add(bus.name)

    def add_stop(self, stop: Stop) -> None:
        """Add a stop, or update the position of a stop already known."""
        existing = self._stops.get(stop.name)
        if existing is None:
            self._stops[stop.name] = stop
        else:
            existing.position = stop.position

    def add_distance(self, origin: str, destination: str, distance: int) -> None:
        """Record the road distance from ``origin`` to ``destination``."""
        if destination not in self._stops:
            self.add_stop(Stop(destination))
        self._distances[(origin, destination)] = distance

    def find_stop(self, name: str) -> Optional[Stop]:
        """Return the stop with this name, or ``None``."""
        return self._stops.get(name)

    def find_bus(self, name: str) -> Optional[Bus]:
        """Return the bus with this name, or ``None``."""
        return self._buses.get(name)

    def get_distance(self, origin: Optional[Stop], destination: Optional[Stop]) -> int:
        """Road distance between two stops, falling back to the reverse direction.

        Returns 0 if either stop is ``None``; raises ``KeyError`` if no
        distance is known in either direction.
        """
        if origin is None or destination is None:
            return 0
        forward = (origin.name, destination.name)
        if forward in self._distances:
            return self._distances[forward]
        backward = (destination.name, origin.name)
        try:
            return self._distances[backward]
        except KeyError:
            raise KeyError(f"no distance between {origin.name!r} and {destination.name!r}") from None

    def buses(self) -> Mapping[str, Bus]:
        """All buses by name."""
        return MappingProxyType(self._buses)

    def stops(self) -> Mapping[str, Stop]:
        """All stops by name."""
        return MappingProxyType(self._stops)
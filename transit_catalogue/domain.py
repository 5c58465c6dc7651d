"""Domain objects shared by the catalogue, router and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set, Union

from .geo import Coordinates


@dataclass
class Stop:
    """A named stop with its position and the buses that call at it."""

    name: str
    position: Coordinates = Coordinates()
    buses: Set[str] = field(default_factory=set)


@dataclass
class Bus:
    """A bus route: the full sequence of stops it visits."""

    name: str
    stops: List[str] = field(default_factory=list)
    is_roundtrip: bool = True


@dataclass(frozen=True)
class Distance:
    """A road distance in metres from one stop to another."""

    origin: str
    destination: str
    distance: int


@dataclass
class RouteSettings:
    """Bus wait time in minutes and velocity in km/h."""

    wait_time: float = 0.0
    velocity: float = 0.0


@dataclass(frozen=True)
class StopEdge:
    """Waiting for a bus at a stop."""

    name: str
    time: float = 0.0


@dataclass(frozen=True)
class BusEdge:
    """Riding a bus over a number of consecutive spans."""

    bus_name: str
    span_count: int = 0
    time: float = 0.0


@dataclass(frozen=True)
class StopVertexPair:
    """The two graph vertices that stand for a stop."""

    origin: int
    destination: int


@dataclass
class RouteInfo:
    """A found route: its total time and the edges that make it up."""

    total_time: float = 0.0
    edges: List[Union[StopEdge, BusEdge]] = field(default_factory=list)
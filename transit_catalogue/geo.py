"""Geographic coordinates and great-circle distances."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS = 6_371_000
_DEGREES_TO_RADIANS = 3.1415926535 / 180.0


@dataclass(frozen=True)
class Coordinates:
    """A point on the Earth's surface given in degrees."""

    lat: float = 0.0
    lng: float = 0.0


def compute_distance(origin: Coordinates, destination: Coordinates) -> float:
    """Return the great-circle distance in metres between two points."""
    if origin == destination:
        return 0.0
    dr = _DEGREES_TO_RADIANS
    cosine = (
        math.sin(origin.lat * dr) * math.sin(destination.lat * dr)
        + math.cos(origin.lat * dr)
        * math.cos(destination.lat * dr)
        * math.cos(abs(origin.lng - destination.lng) * dr)
    )
    # Rounding can push the cosine a hair outside [-1, 1].
    cosine = min(1.0, max(-1.0, cosine))
    return math.acos(cosine) * EARTH_RADIUS
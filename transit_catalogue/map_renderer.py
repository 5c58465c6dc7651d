"""Drawing bus routes and stops as an SVG map."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from . import svg
from .domain import Bus, Stop
from .geo import Coordinates

EPSILON = 1e-6

RenderData = Sequence[Tuple[Bus, Sequence[Stop]]]


def is_zero(value: float) -> bool:
    """Return True if ``value`` is within EPSILON of zero."""
    return abs(value) < EPSILON


@dataclass
class RenderSettings:
    """Sizes, offsets and colours used to draw the map."""

    width: float = 0.0
    height: float = 0.0
    padding: float = 0.0
    line_width: float = 0.0
    stop_radius: float = 0.0
    bus_label_font_size: int = 0
    bus_label_offset: Tuple[float, float] = (0.0, 0.0)
    stop_label_font_size: int = 0
    stop_label_offset: Tuple[float, float] = (0.0, 0.0)
    underlayer_color: svg.Color = None
    underlayer_width: float = 0.0
    color_palette: List[svg.Color] = field(default_factory=list)


class SphereProjector:
    """Maps latitude and longitude onto the plane of an image."""

    def __init__(
        self,
        points: Iterable[Coordinates],
        max_width: float,
        max_height: float,
        padding: float,
    ) -> None:
        points = list(points)
        self._padding = padding
        self._min_lon = 0.0
        self._max_lat = 0.0
        self._zoom = 0.0
        if not points:
            return

        self._min_lon = min(p.lng for p in points)
        max_lon = max(p.lng for p in points)
        min_lat = min(p.lat for p in points)
        self._max_lat = max(p.lat for p in points)

        width_zoom = None
        if not is_zero(max_lon - self._min_lon):
            width_zoom = (max_width - 2 * padding) / (max_lon - self._min_lon)
        height_zoom = None
        if not is_zero(self._max_lat - min_lat):
            height_zoom = (max_height - 2 * padding) / (self._max_lat - min_lat)

        if width_zoom is not None and height_zoom is not None:
            self._zoom = min(width_zoom, height_zoom)
        elif width_zoom is not None:
            self._zoom = width_zoom
        elif height_zoom is not None:
            self._zoom = height_zoom

    def __call__(self, coords: Coordinates) -> svg.Point:
        return svg.Point(
            (coords.lng - self._min_lon) * self._zoom + self._padding,
            (self._max_lat - coords.lat) * self._zoom + self._padding,
        )


class MapRenderer:
    """Renders buses and stops into an SVG document."""

    def __init__(self, settings: RenderSettings) -> None:
        self._settings = settings

    def render_map(self, data: RenderData) -> svg.Document:
        """Draw route lines, route labels, stop circles and stop labels."""
        document = svg.Document()
        coordinates = [stop.position for _, stops in data for stop in stops]
        unique: Dict[str, Stop] = {}
        for _, stops in data:
            for stop in stops:
                unique.setdefault(stop.name, stop)
        sorted_stops = [unique[name] for name in sorted(unique)]

        s = self._settings
        projector = SphereProjector(coordinates, s.width, s.height, s.padding)
        routes = [(bus, stops) for bus, stops in data if stops]
        self._add_lines(projector, routes, document)
        self._add_route_labels(projector, routes, document)
        self._add_stop_circles(projector, sorted_stops, document)
        self._add_stop_labels(projector, sorted_stops, document)
        return document

    def _line_color(self, index: int) -> svg.Color:
        palette = self._settings.color_palette
        if not palette:
            raise ValueError("color palette is empty")
        return palette[index % len(palette)]

    def _add_lines(self, projector: SphereProjector, routes: RenderData, doc: svg.Document) -> None:
        for index, (_, stops) in enumerate(routes):
            line = svg.Polyline(
                points=[projector(stop.position) for stop in stops],
                fill_color="none",
                stroke_color=self._line_color(index),
                stroke_width=self._settings.line_width,
                stroke_line_cap=svg.StrokeLineCap.ROUND,
                stroke_line_join=svg.StrokeLineJoin.ROUND,
            )
            doc.add(line)

    def _add_route_labels(
        self, projector: SphereProjector, routes: RenderData, doc: svg.Document
    ) -> None:
        s = self._settings
        for index, (bus, stops) in enumerate(routes):
            start = stops[0]
            final = stops[len(stops) // 2]
            label = svg.Text(
                data=bus.name,
                offset=svg.Point(*s.bus_label_offset),
                font_weight="bold",
                font_family="Verdana",
                font_size=s.bus_label_font_size,
                position=projector(start.position),
            )
            underlayer = dataclasses.replace(
                label,
                fill_color=s.underlayer_color,
                stroke_color=s.underlayer_color,
                stroke_width=s.underlayer_width,
                stroke_line_join=svg.StrokeLineJoin.ROUND,
                stroke_line_cap=svg.StrokeLineCap.ROUND,
            )
            label = dataclasses.replace(label, fill_color=self._line_color(index))
            doc.add(underlayer)
            doc.add(label)
            if not bus.is_roundtrip and start.name != final.name:
                final_position = projector(final.position)
                doc.add(dataclasses.replace(underlayer, position=final_position))
                doc.add(dataclasses.replace(label, position=final_position))

    def _add_stop_circles(
        self, projector: SphereProjector, stops: Sequence[Stop], doc: svg.Document
    ) -> None:
        for stop in stops:
            if stop.buses:
                doc.add(
                    svg.Circle(
                        center=projector(stop.position),
                        radius=self._settings.stop_radius,
                        fill_color="white",
                    )
                )

    def _add_stop_labels(
        self, projector: SphereProjector, stops: Sequence[Stop], doc: svg.Document
    ) -> None:
        s = self._settings
        base = svg.Text(
            offset=svg.Point(*s.stop_label_offset),
            font_size=s.stop_label_font_size,
            font_family="Verdana",
        )
        stop_label = dataclasses.replace(base, fill_color="black")
        underlayer = dataclasses.replace(
            base,
            fill_color=s.underlayer_color,
            stroke_color=s.underlayer_color,
            stroke_width=s.underlayer_width,
            stroke_line_cap=svg.StrokeLineCap.ROUND,
            stroke_line_join=svg.StrokeLineJoin.ROUND,
        )
        for stop in stops:
            if stop.buses:
                position = projector(stop.position)
                doc.add(dataclasses.replace(underlayer, position=position, data=stop.name))
                doc.add(dataclasses.replace(stop_label, position=position, data=stop.name))
"""Reading catalogue requests from JSON and answering them as JSON."""

from __future__ import annotations

import argparse
import io
import math
import sys
from typing import Any, Dict, List, Optional

from . import svg
from .domain import Bus, BusEdge, RouteSettings, Stop, StopEdge
from .geo import Coordinates
from .jsondoc import Document, dump, load
from .map_renderer import MapRenderer, RenderSettings
from .request_handler import RequestHandler
from .transport_catalogue import TransportCatalogue

_NOT_FOUND = "not found"


def _as_dict(value: Any) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError("not map!")
    return value


def _as_list(value: Any) -> List[Any]:
    if not isinstance(value, list):
        raise TypeError("not array!")
    return value


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError("not string!")
    return value


def _as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError("not bool!")
    return value


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("not int!")
    return value


def _as_double(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("not double!")
    return float(value)


def _channel(value: Any) -> int:
    # Channels are stored as single bytes, so larger values wrap around.
    return _as_int(value) & 0xFF


def parse_color(node: Any) -> svg.Color:
    """Turn a JSON colour (name, RGB or RGBA array) into an SVG colour."""
    if isinstance(node, str):
        return node
    if isinstance(node, list):
        if len(node) == 3:
            return svg.Rgb(*(_channel(part) for part in node))
        if len(node) == 4:
            red, green, blue = (_channel(part) for part in node[:3])
            return svg.Rgba(red, green, blue, _as_double(node[3]))
    return None


def _offset(node: Any) -> tuple:
    pair = _as_list(node)
    return (_as_double(pair[0]), _as_double(pair[1]))


def _not_found(request_id: Any) -> Dict[str, Any]:
    return {"request_id": request_id, "error_message": _NOT_FOUND}


def _edge_item(edge: StopEdge | BusEdge) -> Dict[str, Any]:
    if isinstance(edge, StopEdge):
        return {"type": "Wait", "stop_name": edge.name, "time": edge.time}
    return {
        "type": "Bus",
        "bus": edge.bus_name,
        "span_count": int(edge.span_count),
        "time": edge.time,
    }


class JsonReader:
    """Holds the sections of an input document and executes its requests."""

    def __init__(self) -> None:
        self._base_requests: Any = None
        self._stat_requests: Any = None
        self._render_settings: Any = None
        self._routing_settings: Any = None

    def parse_document(self, document: Document) -> None:
        """Take the four request and settings sections from ``document``."""
        root = _as_dict(document.root)
        self._base_requests = root["base_requests"]
        self._stat_requests = root["stat_requests"]
        self._render_settings = root["render_settings"]
        self._routing_settings = root["routing_settings"]

    def execute_base_requests(self, catalogue: TransportCatalogue) -> None:
        """Fill ``catalogue`` with the stops and buses of the base requests."""
        for request in _as_list(self._base_requests):
            kind = _as_str(_as_dict(request)["type"])
            if kind == "Stop":
                self._add_stop(request, catalogue)
            elif kind == "Bus":
                self._add_bus(request, catalogue)

    @staticmethod
    def _add_stop(request: Dict[str, Any], catalogue: TransportCatalogue) -> None:
        name = _as_str(request["name"])
        position = Coordinates(_as_double(request["latitude"]), _as_double(request["longitude"]))
        catalogue.add_stop(Stop(name, position))
        if "road_distances" in request:
            for destination, distance in _as_dict(request["road_distances"]).items():
                catalogue.add_distance(name, destination, _as_int(distance))

    @staticmethod
    def _add_bus(request: Dict[str, Any], catalogue: TransportCatalogue) -> None:
        name = _as_str(request["name"])
        stops = [_as_str(stop) for stop in _as_list(request["stops"])]
        is_roundtrip = _as_bool(request["is_roundtrip"])
        if not is_roundtrip:
            stops += stops[-2::-1]
        catalogue.add_bus(Bus(name, stops, is_roundtrip))

    def render_settings(self) -> RenderSettings:
        """Build map rendering settings from the render_settings section."""
        settings = _as_dict(self._render_settings)
        return RenderSettings(
            width=_as_double(settings["width"]),
            height=_as_double(settings["height"]),
            padding=_as_double(settings["padding"]),
            line_width=_as_double(settings["line_width"]),
            stop_radius=_as_double(settings["stop_radius"]),
            bus_label_font_size=_as_int(settings["bus_label_font_size"]),
            bus_label_offset=_offset(settings["bus_label_offset"]),
            stop_label_font_size=_as_int(settings["stop_label_font_size"]),
            stop_label_offset=_offset(settings["stop_label_offset"]),
            underlayer_color=parse_color(settings["underlayer_color"]),
            underlayer_width=_as_double(settings["underlayer_width"]),
            color_palette=[parse_color(color) for color in _as_list(settings["color_palette"])],
        )

    def execute_stat_requests(self, handler: RequestHandler) -> Document:
        """Answer every stat request; unknown request types are skipped."""
        responders = {
            "Bus": self._bus_response,
            "Stop": self._stop_response,
            "Map": self._map_response,
            "Route": self._route_response,
        }
        responses = []
        for request in _as_list(self._stat_requests):
            responder = responders.get(_as_str(_as_dict(request)["type"]))
            if responder is not None:
                responses.append(responder(request, handler))
        return Document(responses)

    @staticmethod
    def _stop_response(request: Dict[str, Any], handler: RequestHandler) -> Dict[str, Any]:
        stop = handler.stop_info(_as_str(request["name"]))
        if stop is None:
            return _not_found(request["id"])
        return {"request_id": request["id"], "buses": sorted(stop.buses)}

    @staticmethod
    def _bus_response(request: Dict[str, Any], handler: RequestHandler) -> Dict[str, Any]:
        bus = handler.bus_info(_as_str(request["name"]))
        if bus is None:
            return _not_found(request["id"])
        geo_length, route_length = handler.route_lengths(bus)
        if geo_length:
            curvature = route_length / geo_length
        else:
            curvature = math.inf if route_length else math.nan
        return {
            "request_id": request["id"],
            "route_length": route_length,
            "curvature": curvature,
            "stop_count": len(bus.stops),
            "unique_stop_count": handler.count_unique_stops(bus),
        }

    def _map_response(self, request: Dict[str, Any], handler: RequestHandler) -> Dict[str, Any]:
        renderer = MapRenderer(self.render_settings())
        picture = renderer.render_map(handler.render_data())
        buffer = io.StringIO()
        picture.render(buffer)
        return {"request_id": request["id"], "map": buffer.getvalue()}

    def _route_response(self, request: Dict[str, Any], handler: RequestHandler) -> Dict[str, Any]:
        routing = _as_dict(self._routing_settings)
        settings = RouteSettings(
            wait_time=_as_double(routing["bus_wait_time"]),
            velocity=_as_double(routing["bus_velocity"]),
        )
        origin = _as_str(request["from"])
        destination = _as_str(request["to"])
        request_id = _as_int(request["id"])
        found = handler.route(origin, destination, settings)
        if found is None:
            return _not_found(request_id)
        return {
            "request_id": request_id,
            "total_time": found.total_time,
            "items": [_edge_item(edge) for edge in found.edges],
        }


def main(argv: Optional[List[str]] = None) -> int:
    """Read requests as JSON from standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="transit-catalogue",
        description="Answer transport catalogue requests given as JSON on standard input.",
    )
    parser.parse_args(argv)

    catalogue = TransportCatalogue()
    handler = RequestHandler(catalogue)
    reader = JsonReader()
    reader.parse_document(load(sys.stdin))
    reader.execute_base_requests(catalogue)
    dump(reader.execute_stat_requests(handler), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
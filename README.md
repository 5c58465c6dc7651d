# transit-catalogue

A catalogue of a city's bus network. It reads one JSON document describing
stops, buses and settings, answers the questions listed in it, and writes
the answers as JSON.

It can tell you:

- for a bus: the number of stops, the number of distinct stops, the road
  length of its route and its curvature (road length divided by the
  great-circle length);
- for a stop: which buses call at it;
- the fastest trip between two stops, counting waiting time at each stop
  and riding time at a given bus speed;
- a map of the whole network as an SVG image.

## Installing

```
pip install .
```

For running the tests, install the `test` extra (`pip install .[test]`)
and run `pytest`.

## Running

The command reads a request document from standard input and prints the
answers to standard output:

```
transit-catalogue < requests.json > answers.json
```

It takes no options besides `--help`.

## The request document

The document is a JSON object that must have all four keys
`base_requests`, `stat_requests`, `render_settings` and
`routing_settings`.

`base_requests` builds the network. Each entry is either a stop:

```json
{"type": "Stop", "name": "Harbour", "latitude": 43.59, "longitude": 39.72,
 "road_distances": {"Market": 850}}
```

or a bus:

```json
{"type": "Bus", "name": "14", "stops": ["Harbour", "Market", "Harbour"],
 "is_roundtrip": true}
```

A bus that is not a round trip is listed one way only; it runs back along
the same stops, and its stop count includes the way back. A road distance
given in one direction is used for the other direction too unless that one
is given separately. Stops named by a bus or a road distance before they
are described are created at latitude and longitude 0 and moved once their
own entry arrives. Entries of other types are ignored.

`stat_requests` are the questions. Every one carries an `id` that is
copied into its answer as `request_id`:

- `{"id": 1, "type": "Bus", "name": "14"}` answers with `route_length`,
  `curvature`, `stop_count` and `unique_stop_count`;
- `{"id": 2, "type": "Stop", "name": "Harbour"}` answers with `buses`,
  sorted by name;
- `{"id": 3, "type": "Route", "from": "Harbour", "to": "Market"}` answers
  with `total_time` in minutes and `items`, a list of `Wait` steps
  (`stop_name`, `time`) and `Bus` steps (`bus`, `span_count`, `time`);
- `{"id": 4, "type": "Map"}` answers with `map`, the SVG text.

An unknown bus or stop, or a route with no way through, gets
`{"request_id": ..., "error_message": "not found"}`. The stops named in a
`Route` request must be known to the catalogue. Requests of other types
are skipped.

`routing_settings` holds `bus_wait_time` (minutes) and `bus_velocity`
(km/h). The route graph is built at the first `Route` request.

`render_settings` controls the map: `width`, `height`, `padding`,
`line_width`, `stop_radius`, `bus_label_font_size`, `bus_label_offset`,
`stop_label_font_size`, `stop_label_offset`, `underlayer_color`,
`underlayer_width` and `color_palette`. A colour is a name such as
`"white"`, an `[r, g, b]` list or an `[r, g, b, opacity]` list. The palette
must not be empty when a map is drawn.

## The output

Answers are written as an indented JSON array. Object keys come out in
sorted order and fractional numbers are written with six significant
digits.

## Using it from Python

The pieces are usable on their own:

```python
from transit_catalogue.jsondoc import loads, dumps
from transit_catalogue.json_reader import JsonReader
from transit_catalogue.request_handler import RequestHandler
from transit_catalogue.transport_catalogue import TransportCatalogue

catalogue = TransportCatalogue()
reader = JsonReader()
reader.parse_document(loads(text))
reader.execute_base_requests(catalogue)
answers = reader.execute_stat_requests(RequestHandler(catalogue))
print(dumps(answers))
```

Other modules:

- `transit_catalogue.jsondoc`: `load`, `loads`, `dump`, `dumps` and
  `Document` for reading and pretty-printing JSON; malformed input raises
  `ParsingError`. Integers outside the 32-bit range are read as floats.
- `transit_catalogue.json_builder`: `Builder` assembles JSON values step
  by step and raises `RuntimeError` on calls out of order.
- `transit_catalogue.svg`: circles, polylines and text drawn into an SVG
  `Document`.
- `transit_catalogue.map_renderer`: `MapRenderer` and `SphereProjector`
  turn buses and stops into an SVG map.
- `transit_catalogue.graph`: `DirectedWeightedGraph` and `Router`, which
  finds shortest paths between all pairs of vertices.
- `transit_catalogue.transport_router`: `TransportRouter` answers
  fastest-trip queries over a catalogue.
- `transit_catalogue.geo`: `Coordinates` and `compute_distance`.
- `transit_catalogue.timing`: `LogDuration`, a context manager that prints
  how many milliseconds a block took.

## What it does not do

The catalogue lives in memory for a single run: it keeps nothing between
runs, reads one document at a time and serves no network requests. A bus
whose stops all lie at one point has a curvature of `inf` or `nan`, which
is written as such and is not valid JSON.
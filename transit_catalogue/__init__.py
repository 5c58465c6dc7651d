"""Transit network catalogue: stop and bus statistics, fastest routes and SVG maps."""

__version__ = "0.1.0"
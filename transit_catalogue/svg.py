"""A minimal SVG document model: circles, polylines and text."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO, Union

_HEADER = (
    '<?xml version="1.0" encoding="UTF-8" ?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
)
_TEXT_ESCAPES = str.maketrans(
    {'"': "&quot;", "'": "&apos;", "&": "&amp;", "<": "&lt;", ">": "&gt;"}
)


def _check_channel(value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"Colour channel {value} is outside 0..255")


@dataclass(frozen=True)
class Rgb:
    """An opaque colour."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            _check_channel(channel)


@dataclass(frozen=True)
class Rgba:
    """A colour with opacity in [0, 1]."""

    red: int = 0
    green: int = 0
    blue: int = 0
    opacity: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            _check_channel(channel)
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError("Opacity must be in the range [0.0, 1.0]")


Color = Union[None, str, Rgb, Rgba]


def _num(value: float) -> str:
    return format(value, "g")


def format_color(color: Color) -> str:
    """Return the SVG attribute text for a colour; ``None`` means no colour."""
    if color is None:
        return "none"
    if isinstance(color, str):
        return color
    if isinstance(color, Rgba):
        return f"rgba({color.red},{color.green},{color.blue},{_num(color.opacity)})"
    if isinstance(color, Rgb):
        return f"rgb({color.red},{color.green},{color.blue})"
    raise TypeError(f"not a colour: {color!r}")


class StrokeLineCap(Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    def __str__(self) -> str:
        return self.value


class StrokeLineJoin(Enum):
    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass
class RenderContext:
    """Output stream plus the indentation to write objects with."""

    out: TextIO
    indent_step: int = 0
    indent: int = 0

    def indented(self) -> "RenderContext":
        return RenderContext(self.out, self.indent_step, self.indent + self.indent_step)

    def render_indent(self) -> None:
        self.out.write(" " * self.indent)


def _render_line(context: RenderContext, tag: str) -> None:
    context.render_indent()
    context.out.write(tag)
    context.out.write("\n")


@dataclass(kw_only=True)
class PathProps:
    """Fill and stroke attributes shared by all shapes."""

    fill_color: Color = None
    stroke_color: Color = None
    stroke_width: Optional[float] = None
    stroke_line_cap: Optional[StrokeLineCap] = None
    stroke_line_join: Optional[StrokeLineJoin] = None

    def _attrs(self) -> str:
        parts = []
        if self.fill_color is not None:
            parts.append(f' fill="{format_color(self.fill_color)}"')
        if self.stroke_color is not None:
            parts.append(f' stroke="{format_color(self.stroke_color)}"')
        if self.stroke_width is not None:
            parts.append(f' stroke-width="{_num(self.stroke_width)}"')
        if self.stroke_line_cap is not None:
            parts.append(f' stroke-linecap="{self.stroke_line_cap}"')
        if self.stroke_line_join is not None:
            parts.append(f' stroke-linejoin="{self.stroke_line_join}"')
        return "".join(parts)


@dataclass(kw_only=True)
class Circle(PathProps):
    center: Point = field(default_factory=Point)
    radius: float = 1.0

    def render(self, context: RenderContext) -> None:
        """Write the circle as one indented line."""
        _render_line(
            context,
            f'<circle cx="{_num(self.center.x)}" cy="{_num(self.center.y)}" '
            f'r="{_num(self.radius)}"{self._attrs()}/>',
        )


@dataclass(kw_only=True)
class Polyline(PathProps):
    points: List[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> "Polyline":
        """Append a vertex and return the polyline."""
        self.points.append(point)
        return self

    def render(self, context: RenderContext) -> None:
        """Write the polyline as one indented line."""
        coords = " ".join(f"{_num(p.x)},{_num(p.y)}" for p in self.points)
        _render_line(context, f'<polyline points="{coords}"{self._attrs()}/>')


@dataclass(kw_only=True)
class Text(PathProps):
    position: Point = field(default_factory=Point)
    offset: Point = field(default_factory=Point)
    font_size: int = 1
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    data: str = ""

    def render(self, context: RenderContext) -> None:
        """Write the text element as one indented line, escaping its content."""
        parts = [
            f"<text{self._attrs()}",
            f' x="{_num(self.position.x)}" y="{_num(self.position.y)}" ',
            f'dx="{_num(self.offset.x)}" dy="{_num(self.offset.y)}" ',
            f'font-size="{self.font_size}"',
        ]
        if self.font_family is not None:
            parts.append(f' font-family="{self.font_family}"')
        if self.font_weight is not None:
            parts.append(f' font-weight="{self.font_weight}"')
        parts.append(">")
        parts.append(self.data.translate(_TEXT_ESCAPES))
        parts.append("</text>")
        _render_line(context, "".join(parts))


Shape = Union[Circle, Polyline, Text]


class Document:
    """An ordered collection of shapes rendered as one SVG image."""

    def __init__(self) -> None:
        self._objects: List[Shape] = []

    def add(self, obj: Shape) -> None:
        """Add a snapshot of ``obj``; later changes to it are not seen."""
        self._objects.append(copy.deepcopy(obj))

    def render(self, out: TextIO) -> None:
        """Write the whole SVG document to ``out``."""
        out.write(_HEADER)
        context = RenderContext(out, 4, 4)
        for obj in self._objects:
            obj.render(context)
        out.write("</svg>")
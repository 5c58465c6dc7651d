import io
import xml.etree.ElementTree as ET

import pytest

from transit_catalogue.svg import (
    Circle,
    Document,
    Point,
    Polyline,
    RenderContext,
    Rgb,
    Rgba,
    StrokeLineCap,
    StrokeLineJoin,
    Text,
    format_color,
)


def _render(shape, context_args=()):
    buffer = io.StringIO()
    shape.render(RenderContext(buffer, *context_args))
    return buffer.getvalue()


def test_format_color_none():
    assert format_color(None) == "none"


def test_format_color_string_passes_through():
    assert format_color("red") == "red"


def test_format_color_rgb():
    assert format_color(Rgb(255, 16, 12)) == "rgb(255,16,12)"


def test_format_color_rgba_parts():
    text = format_color(Rgba(1, 2, 3, 0.25))
    assert text.startswith("rgba(") and text.endswith(")")
    parts = text[len("rgba("):-1].split(",")
    assert [int(p) for p in parts[:3]] == [1, 2, 3]
    assert float(parts[3]) == 0.25


@pytest.mark.parametrize("opacity", [-0.1, 1.5])
def test_rgba_rejects_bad_opacity(opacity):
    with pytest.raises(ValueError):
        Rgba(0, 0, 0, opacity)


def test_rgb_rejects_bad_channel():
    with pytest.raises(ValueError):
        Rgb(256, 0, 0)


def test_stroke_enums_render_as_svg_keywords():
    line = Polyline(
        points=[Point(0, 0)],
        stroke_line_cap=StrokeLineCap.BUTT,
        stroke_line_join=StrokeLineJoin.MITER_CLIP,
    )
    element = ET.fromstring(_render(line).strip())
    assert element.get("stroke-linecap") == "butt"
    assert element.get("stroke-linejoin") == "miter-clip"
    assert str(StrokeLineJoin.ROUND) == "round"


def test_render_context_indentation():
    buffer = io.StringIO()
    context = RenderContext(buffer, 2, 3)
    nested = context.indented()
    assert nested.indent == context.indent + context.indent_step
    nested.render_indent()
    assert buffer.getvalue() == " " * nested.indent


def test_circle_exact_output():
    assert _render(Circle(center=Point(20, 20), radius=10)) == '<circle cx="20" cy="20" r="10"/>\n'


def test_circle_attributes_parse_back():
    circle = Circle(center=Point(1.5, 2.25), radius=3.0, fill_color="white", stroke_color=Rgb(1, 2, 3))
    text = _render(circle, (2, 2))
    assert text.startswith("  <circle") and text.endswith("/>\n")
    element = ET.fromstring(text.strip())
    assert float(element.get("cx")) == 1.5
    assert float(element.get("cy")) == 2.25
    assert float(element.get("r")) == 3.0
    assert element.get("fill") == "white"
    assert element.get("stroke") == format_color(Rgb(1, 2, 3))


def test_circle_without_colors_has_no_fill():
    element = ET.fromstring(_render(Circle()).strip())
    assert element.get("fill") is None
    assert float(element.get("r")) == 1.0


def test_polyline_points_and_stroke_attributes():
    line = Polyline(stroke_width=0, stroke_line_cap=StrokeLineCap.ROUND, stroke_line_join=StrokeLineJoin.ROUND)
    assert line.add_point(Point(100, 100)).add_point(Point(150, 25.5)) is line
    element = ET.fromstring(_render(line).strip())
    pairs = [tuple(float(v) for v in pair.split(",")) for pair in element.get("points").split()]
    assert pairs == [(100.0, 100.0), (150.0, 25.5)]
    assert float(element.get("stroke-width")) == 0.0
    assert element.get("stroke-linecap") == "round"
    assert element.get("stroke-linejoin") == "round"


def test_text_matches_reference_layout():
    text = Text(
        position=Point(35, 20),
        offset=Point(0, 6),
        font_size=12,
        font_family="Verdana",
        font_weight="bold",
        data="Hello C++",
    )
    expected = '<text x="35" y="20" dx="0" dy="6" font-size="12" font-family="Verdana" font-weight="bold">Hello C++</text>\n'
    assert _render(text) == expected


def test_text_escaping_round_trips():
    data = "a<\"b\">&'c'"
    rendered = _render(Text(data=data, fill_color="black"))
    assert "&quot;" in rendered and "&apos;" in rendered and "&amp;" in rendered
    element = ET.fromstring(rendered.strip())
    assert element.text == data
    assert element.get("fill") == "black"


def test_document_render_structure():
    document = Document()
    document.add(Circle(center=Point(1, 1)))
    document.add(Polyline(points=[Point(0, 0), Point(1, 1)]))
    document.add(Text(data="label"))
    buffer = io.StringIO()
    document.render(buffer)
    text = buffer.getvalue()
    assert text.startswith('<?xml version="1.0" encoding="UTF-8" ?>\n')
    assert text.endswith("</svg>")
    assert "\n    <circle" in text
    root = ET.fromstring(text)
    tags = [child.tag.rsplit("}", 1)[-1] for child in root]
    assert tags == ["circle", "polyline", "text"]


def test_document_keeps_snapshot_of_added_object():
    document = Document()
    label = Text(data="first")
    document.add(label)
    label.data = "second"
    buffer = io.StringIO()
    document.render(buffer)
    root = ET.fromstring(buffer.getvalue())
    assert [child.text for child in root] == ["first"]


def test_empty_document_has_no_children():
    buffer = io.StringIO()
    Document().render(buffer)
    assert len(ET.fromstring(buffer.getvalue())) == 0
"""Builders of SVG elements for the exported crossroad picture."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Sequence

from crosseditor.geom import Point

BLACK = "#000000"
WHITE = "#ffffff"


def _number(value: float) -> str:
    return f"{value:g}"


def _shortest(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def path_element(
    tag: str = "",
    path: str = "",
    pen: bool = False,
    pen_color: str = BLACK,
    pen_size: int = 1,
    fill: bool = False,
    fill_color: str = BLACK,
    ident: bool = False,
    element_id: str = "",
) -> ET.Element:
    """An element of type ``tag`` whose ``d`` attribute is ``path``."""
    el = ET.Element(tag)
    el.set("d", path)
    if ident:
        el.set("id", element_id)
    el.set("fill", fill_color if fill else "none")
    if pen:
        el.set("stroke-width", _number(pen_size))
        el.set("stroke", pen_color)
    return el


def circle_element(
    element_id: str = "-1",
    pos: Point = Point(),
    pen: str = BLACK,
    size: int = 2,
    brush: str = WHITE,
    radius: int = 3,
) -> ET.Element:
    """A ``circle`` element centred on ``pos``."""
    el = ET.Element("circle")
    el.set("id", element_id)
    el.set("cx", _number(pos.x))
    el.set("cy", _number(pos.y))
    el.set("r", _number(radius))
    el.set("stroke", pen)
    el.set("stroke-width", _number(size))
    el.set("fill", brush)
    return el


def points_to_path_data(points: Sequence[Point], closed: bool) -> str:
    """SVG path data for a polyline; the first x is written rounded."""
    if not points:
        return ""
    first = points[0]
    parts = [f"M {_number(first.rounded().x)},{_number(first.y)}"]
    parts.extend(f" L {_number(p.x)},{_number(p.y)}" for p in points[1:])
    if closed:
        parts.append(f" L {_number(first.x)},{_number(first.y)}")
    return "".join(parts)


def center_state(pos: Point) -> ET.Element:
    """The hidden phase indicator group placed at ``pos``."""
    g = ET.Element("g")
    g.set("id", "self-phase")
    g.set("visibility", "hidden")
    g.set("transform", f"translate({_shortest(pos.x)},{_shortest(pos.y)})")
    ET.SubElement(
        g,
        "circle",
        {"id": "self-phase-back", "stroke-width": "3", "stroke": "black", "r": "16"},
    )
    ET.SubElement(
        g,
        "text",
        {
            "id": "self-phase-text",
            "text-anchor": "middle",
            "x": "0",
            "y": "4",
            "font-size": "13",
        },
    )
    return g
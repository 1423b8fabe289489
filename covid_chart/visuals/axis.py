"""SVG axis drawing for linear and band scales."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable, Hashable
from enum import Enum
from typing import Any

from .page import format_number
from .scales import BandScale, LinearScale


class Orient(str, Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


_TEXT_DY = {
    Orient.TOP: "0em",
    Orient.BOTTOM: "0.71em",
    Orient.LEFT: "0.32em",
    Orient.RIGHT: "0.32em",
}


def tick_values(scale: LinearScale | BandScale, tick_count: int | None = None) -> list[Any]:
    if isinstance(scale, BandScale):
        return list(scale.ticks())
    return scale.ticks(10 if tick_count is None else tick_count)


def tick_position(scale: LinearScale | BandScale, value: Hashable) -> float:
    """Pixel position of a tick; band ticks sit at the middle of their band."""
    if isinstance(scale, BandScale):
        start = scale(value)
        return (start if start is not None else 0.0) + scale.bandwidth / 2
    return scale(value)


def draw_axis(
    parent: ET.Element,
    orient: Orient,
    scale: LinearScale | BandScale,
    *,
    tick_count: int | None = None,
    tick_format: Callable[[Any], str] | None = None,
    tick_size_inner: float = 6,
    tick_size_outer: float = 6,
    tick_padding: float = 3,
    attrs: dict[str, str] | None = None,
) -> ET.Element:
    """Append an axis group for ``scale`` under ``parent`` and return it.

    Args:
        parent: Element receiving the axis ``g``
        orient: Side of the plot the axis is drawn on
        scale: Linear or band scale supplying tick positions
        tick_count: Approximate tick count for linear scales (default 10)
        tick_format: Label formatter; defaults to ``str``
        tick_size_inner: Tick line length; negative values draw into the plot
        tick_size_outer: Length of the domain path end caps
        tick_padding: Gap between tick line and label
        attrs: Extra attributes for the axis group (class, transform)
    """
    fmt = tick_format or str
    k = -1 if orient in (Orient.TOP, Orient.LEFT) else 1
    horizontal = orient in (Orient.TOP, Orient.BOTTOM)
    spacing = max(tick_size_inner, 0) + tick_padding

    g = ET.SubElement(parent, "g", {
        "fill": "none",
        "font-size": "10",
        "font-family": "sans-serif",
        "text-anchor": "middle" if horizontal else ("end" if orient is Orient.LEFT else "start"),
    })
    for key, value in (attrs or {}).items():
        g.set(key, value)

    r0, r1 = scale.range
    outer = format_number(k * tick_size_outer)
    if horizontal:
        if tick_size_outer:
            d = f"M{format_number(r0)},{outer}V0H{format_number(r1)}V{outer}"
        else:
            d = f"M{format_number(r0)},0H{format_number(r1)}"
    else:
        if tick_size_outer:
            d = f"M{outer},{format_number(r0)}H0V{format_number(r1)}H{outer}"
        else:
            d = f"M0,{format_number(r0)}V{format_number(r1)}"
    ET.SubElement(g, "path", {"class": "domain", "stroke": "currentColor", "d": d})

    line_attr, text_attr = ("y2", "y") if horizontal else ("x2", "x")
    for value in tick_values(scale, tick_count):
        pos = format_number(tick_position(scale, value))
        transform = f"translate({pos},0)" if horizontal else f"translate(0,{pos})"
        tick = ET.SubElement(g, "g", {"class": "tick", "opacity": "1", "transform": transform})
        ET.SubElement(tick, "line", {
            "stroke": "currentColor",
            line_attr: format_number(k * tick_size_inner),
        })
        label = ET.SubElement(tick, "text", {
            "fill": "currentColor",
            text_attr: format_number(k * spacing),
            "dy": _TEXT_DY[orient],
        })
        label.text = fmt(value)
    return g

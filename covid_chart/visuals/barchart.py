"""Horizontal bar chart renderer.

Draws one SVG bar chart into a page container: a value axis along the top,
a key axis on the left, one bar per data point, vertical gridlines and a
value label at the end of every bar.

Value scale:
    The value scale maps the largest value to 0 and 0 to the full chart
    width, so a bar's width (``x_scale(value)``) shrinks as its value grows.
    This inverted mapping is kept as-is and pinned by the test suite.

Label placement:
    A label is centered ``offset = text_width / 2 + value_label_offset`` to
    the right of its bar's end. If that would cross the chart's right edge,
    it moves to ``offset`` left of the bar's end and gains the ``white``
    class so it reads against the filled bar.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Sequence

from ..core.enums import Breakpoint
from ..core.logging_config import get_logger
from ..core.models import ChartOptions, DataPoint
from .axis import Orient, draw_axis
from .page import Page, format_number
from .scales import BandScale, LinearScale, format_si
from .text import MatplotlibTextMeasurer, TextMeasurer

logger = get_logger(__name__)

BAND_PADDING = 0.1
SMALL_SCREEN_TICKS = 5

_default_measurer: MatplotlibTextMeasurer | None = None


def default_text_measurer() -> MatplotlibTextMeasurer:
    global _default_measurer
    if _default_measurer is None:
        _default_measurer = MatplotlibTextMeasurer()
    return _default_measurer


def value_scale(values: Sequence[float], chart_width: float) -> LinearScale:
    max_value = max(values) if values else 0
    return LinearScale(domain=(max_value, 0), range=(0, chart_width))


def key_scale(keys: Sequence[str], chart_height: float) -> BandScale:
    return BandScale(keys, range=(chart_height, 0), padding=BAND_PADDING)


def label_position(
    bar_end: float, text_width: float, value_label_offset: float, chart_width: float
) -> tuple[float, bool]:
    """Return the label's x and whether it was flipped inside the bar."""
    offset = text_width / 2 + value_label_offset
    x = bar_end + offset
    if x > chart_width:
        return bar_end - offset, True
    return x, False


def draw_bar_chart(
    data: Sequence[DataPoint],
    query: str,
    options: ChartOptions,
    *,
    page: Page,
    measure_text: TextMeasurer | None = None,
) -> ET.Element:
    """Append a horizontal bar chart under the container matching ``query``.

    Args:
        data: Bars to draw, bottom to top
        query: Selector of the target container
        options: Resolved chart options
        page: Page holding the container
        measure_text: Returns the rendered width of a label string;
            defaults to a matplotlib-backed measurer

    Returns:
        The created ``svg`` element

    Raises:
        LookupError: If no container matches ``query``
    """
    container = page.query_selector(query)
    if container is None:
        raise LookupError(f"No element matches selector {query!r}")
    measure = measure_text or default_text_measurer()

    width, height, margin = options.width, options.height, options.margin
    chart_width = options.chart_width
    chart_height = options.chart_height

    svg = container.append("svg", width=width, height=height)
    # Translate chart content so there's room for axis ticks and labels
    chart = ET.SubElement(svg, "g", {
        "transform": f"translate({format_number(margin.left)}, {format_number(margin.top)})",
    })

    keys = [point.key for point in data]
    values = [point.value for point in data]

    x_scale = value_scale(values, chart_width)
    y_scale = key_scale(keys, chart_height)
    bandwidth = y_scale.bandwidth

    tick_count = SMALL_SCREEN_TICKS if width < Breakpoint.SM else None

    draw_axis(chart, Orient.TOP, x_scale, tick_count=tick_count, tick_format=format_si)
    draw_axis(chart, Orient.LEFT, y_scale)

    bars = ET.SubElement(chart, "g", {"class": "bars"})
    for point in data:
        ET.SubElement(bars, "rect", {
            "y": format_number(y_scale(point.key)),
            "width": format_number(x_scale(point.value)),
            "height": format_number(bandwidth),
        })

    # Vertical grid lines at the value axis ticks, unlabeled
    draw_axis(
        chart,
        Orient.BOTTOM,
        x_scale,
        tick_count=tick_count,
        tick_format=lambda _: "",
        tick_size_inner=-chart_height,
        tick_size_outer=0,
        attrs={"class": "grid", "transform": f"translate(0, {format_number(chart_height)})"},
    )

    labels = ET.SubElement(chart, "g", {"class": "value-labels"})
    flipped = 0
    for point in data:
        text = format_si(point.value)
        x, inverted = label_position(
            x_scale(point.value), measure(text), options.value_label_offset, chart_width
        )
        flipped += inverted
        label = ET.SubElement(labels, "text", {
            "class": "value-label white" if inverted else "value-label",
            "x": format_number(x),
            "y": format_number(y_scale(point.key) + bandwidth / 2),
        })
        label.text = text

    logger.debug(
        "Drew bar chart",
        extra={
            "query": query,
            "bars": len(data),
            "width": width,
            "height": height,
            "flipped_labels": flipped,
        },
    )
    return svg

"""Chart controller: option resolution and (responsive) redraws."""

from __future__ import annotations

import threading
import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping, Sequence
from dataclasses import asdict, replace
from typing import Any

from ..core.debounce import Debouncer, debounce
from ..core.logging_config import get_logger
from ..core.models import DEFAULT_OPTIONS, ChartOptions, DataPoint, Margin
from .barchart import draw_bar_chart
from .page import Container, Page
from .text import TextMeasurer

logger = get_logger(__name__)

RESIZE_DEBOUNCE_MS = 100

OptionsInput = ChartOptions | Mapping[str, Any] | None


def _pick(source: Mapping[str, Any], name: str, default: Any) -> Any:
    # Only a missing key or an explicit None counts as unset; 0 is kept
    value = source.get(name)
    return default if value is None else value


def resolve_options(options: OptionsInput = None) -> ChartOptions:
    """Merge caller options over DEFAULT_OPTIONS.

    Accepts a ChartOptions, a mapping shaped like one (``margin`` may itself be
    a partial mapping), or None.
    ``valueLabelOffset`` is accepted as an alias of ``value_label_offset``.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, ChartOptions):
        options = asdict(options)

    margin_in = options.get("margin") or {}
    if isinstance(margin_in, Margin):
        margin_in = asdict(margin_in)
    defaults = DEFAULT_OPTIONS.margin
    margin = Margin(
        top=_pick(margin_in, "top", defaults.top),
        bottom=_pick(margin_in, "bottom", defaults.bottom),
        left=_pick(margin_in, "left", defaults.left),
        right=_pick(margin_in, "right", defaults.right),
    )
    return ChartOptions(
        responsive=bool(options.get("responsive", DEFAULT_OPTIONS.responsive)),
        width=_pick(options, "width", DEFAULT_OPTIONS.width),
        height=_pick(options, "height", DEFAULT_OPTIONS.height),
        margin=margin,
        value_label_offset=_pick(
            options,
            "value_label_offset",
            _pick(options, "valueLabelOffset", DEFAULT_OPTIONS.value_label_offset),
        ),
    )


class BarChart:
    """A bar chart bound to a page container.

    In responsive mode every redraw clears the container and re-measures it;
    page resize events trigger a debounced redraw until ``close()`` is called.
    """

    def __init__(
        self,
        data: Sequence[DataPoint],
        query: str,
        options: OptionsInput = None,
        *,
        page: Page,
        measure_text: TextMeasurer | None = None,
    ):
        self.data = list(data)
        self.query = query
        self.page = page
        self.measure_text = measure_text
        self.options = resolve_options(options)
        self.svg: ET.Element | None = None
        self.draw_count = 0
        self._lock = threading.Lock()
        self._debounced: Debouncer | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._closed = False

        container = page.query_selector(query)
        if container is None:
            raise LookupError(f"No element matches selector {query!r}")
        self.container: Container = container

    @property
    def responsive(self) -> bool:
        return self.options.responsive

    def subscribe(self, debounce_ms: float = RESIZE_DEBOUNCE_MS) -> None:
        if self._unsubscribe is not None:
            return
        self._debounced = debounce(self.update, debounce_ms)
        self._unsubscribe = self.page.add_event_listener("resize", self._debounced)

    def update(self) -> ET.Element | None:
        """Redraw the chart. A closed chart is left as it is."""
        with self._lock:
            if self._closed:
                return self.svg
            if self.responsive:
                self.container.clear()
                measured_width, measured_height = self.container.bounding_box()
                self.options = replace(
                    self.options,
                    width=measured_width,
                    height=measured_height or self.options.height,
                )
            self.svg = draw_bar_chart(
                self.data,
                self.query,
                self.options,
                page=self.page,
                measure_text=self.measure_text,
            )
            self.draw_count += 1
            logger.debug(
                "Chart updated",
                extra={
                    "query": self.query,
                    "width": self.options.width,
                    "height": self.options.height,
                    "draw_count": self.draw_count,
                },
            )
            return self.svg

    def flush(self) -> bool:
        """Perform a pending debounced redraw now instead of waiting for the timer."""
        if self._debounced is None:
            return False
        return self._debounced.flush()

    def close(self) -> None:
        """Stop listening for resize events and drop any pending redraw."""
        with self._lock:
            self._closed = True
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._debounced is not None:
            self._debounced.cancel()
            self._debounced = None


def barchart(
    data: Sequence[DataPoint],
    query: str,
    options: OptionsInput = None,
    *,
    page: Page,
    measure_text: TextMeasurer | None = None,
    debounce_ms: float = RESIZE_DEBOUNCE_MS,
) -> BarChart:
    """Draw ``data`` into ``query`` and, if responsive, keep it sized to its container.

    Returns the BarChart handle; call ``close()`` on it to stop resize handling.
    """
    chart = BarChart(data, query, options, page=page, measure_text=measure_text)
    if chart.responsive:
        chart.subscribe(debounce_ms)
    chart.update()
    return chart

"""Summary page bootstrap: fetch, transform and chart confirmed cases per country."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..adapters.base import BaseAdapter
from ..adapters.covid19api.adapter import get_summary_data
from ..visuals.controller import BarChart, barchart
from ..visuals.page import Page
from ..visuals.text import TextMeasurer
from .logging_config import get_logger
from .models import ChartOptions, DataPoint, Margin

logger = get_logger(__name__)

SUMMARY_CHART_QUERY = "#summary-chart"

# Tall canvas so roughly two hundred countries each get a readable bar
SUMMARY_CHART_OPTIONS = ChartOptions(
    responsive=True,
    width=1000,
    height=3500,
    margin=Margin(top=30, bottom=20, left=30, right=20),
    value_label_offset=3,
)


def summary_to_data_points(summary: Mapping[str, Any]) -> list[DataPoint]:
    """Map ``Countries`` records to (CountryCode, TotalConfirmed) points, ascending by value.

    Ties keep their API order.
    """
    points = [
        DataPoint(key=country["CountryCode"], value=country["TotalConfirmed"])
        for country in summary["Countries"]
    ]
    points.sort(key=lambda p: p.value)
    return points


@dataclass
class SummaryChartSession:
    """Handles created by ``install_summary_chart``; ``chart`` is set once the page is ready."""

    page: Page
    unsubscribe_ready: Callable[[], None]
    chart: BarChart | None = None
    data: list[DataPoint] = field(default_factory=list)

    def close(self) -> None:
        self.unsubscribe_ready()
        if self.chart is not None:
            self.chart.close()


def install_summary_chart(
    page: Page,
    adapter: BaseAdapter | None = None,
    *,
    query: str = SUMMARY_CHART_QUERY,
    options: ChartOptions = SUMMARY_CHART_OPTIONS,
    measure_text: TextMeasurer | None = None,
) -> SummaryChartSession:
    """Register the summary chart to be drawn when ``page`` becomes ready.

    Fetch errors raised inside the ready handler propagate out of
    ``page.ready()``; nothing is drawn in that case.
    """

    def on_ready() -> None:
        summary = get_summary_data(adapter)
        logger.debug("Fetched summary data", extra={"summary": summary})
        session.data = summary_to_data_points(summary)
        logger.info(
            "Charting confirmed cases",
            extra={"countries": len(session.data), "query": query},
        )
        if session.chart is not None:
            session.chart.close()
        session.chart = barchart(
            session.data, query, options, page=page, measure_text=measure_text
        )

    session = SummaryChartSession(
        page=page, unsubscribe_ready=page.add_event_listener("ready", on_ready)
    )
    return session

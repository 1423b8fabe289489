"""Tests for the summary page bootstrap."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from covid_chart.adapters.base import BaseAdapter
from covid_chart.adapters.covid19api.adapter import Covid19ApiAdapter
from covid_chart.core.errors import FetchError
from covid_chart.core.models import DataPoint
from covid_chart.core.summary import (
    SUMMARY_CHART_OPTIONS,
    install_summary_chart,
    summary_to_data_points,
)
from covid_chart.visuals.page import Page


class StaticAdapter(BaseAdapter):
    BASE_URL = "https://example.test"

    def __init__(self, payload: dict[str, Any] | None = None, error: Exception | None = None):
        super().__init__()
        self.payload = payload
        self.error = error
        self.calls = 0

    def fetch_summary(self) -> dict[str, Any]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


def _summary_page() -> Page:
    page = Page(viewport_width=1000)
    page.add_container("summary-chart", fluid=True)
    return page


def test_summary_to_data_points_sorted_ascending(summary_payload) -> None:
    points = summary_to_data_points(summary_payload)

    assert [p.value for p in points] == [750, 750, 250_000, 1_000_000]
    # Ties keep API order
    assert [p.key for p in points] == ["AD", "IS", "DE", "US"]
    assert all(isinstance(p, DataPoint) for p in points)


def test_summary_to_data_points_missing_countries() -> None:
    with pytest.raises(KeyError):
        summary_to_data_points({"Global": {}})


def test_summary_chart_options() -> None:
    assert SUMMARY_CHART_OPTIONS.responsive is True
    assert (SUMMARY_CHART_OPTIONS.width, SUMMARY_CHART_OPTIONS.height) == (1000, 3500)
    margin = SUMMARY_CHART_OPTIONS.margin
    assert (margin.top, margin.bottom, margin.left, margin.right) == (30, 20, 30, 20)
    assert SUMMARY_CHART_OPTIONS.value_label_offset == 3


def test_chart_drawn_when_page_ready(summary_payload, measure_text) -> None:
    page = _summary_page()
    adapter = StaticAdapter(summary_payload)
    session = install_summary_chart(page, adapter, measure_text=measure_text)

    assert adapter.calls == 0
    assert session.chart is None

    page.ready()

    assert adapter.calls == 1
    svg = session.chart.svg
    assert len(list(svg.iter("rect"))) == 4
    assert svg.get("width") == "1000"
    # Container has no height of its own, so the configured canvas height is used
    assert svg.get("height") == "3500"
    assert svg[0].get("transform") == "translate(30, 30)"
    session.close()
    assert page.listener_count("ready") == 0
    assert page.listener_count("resize") == 0


def test_fetch_failure_propagates_and_draws_nothing(measure_text) -> None:
    page = _summary_page()
    session = install_summary_chart(page, StaticAdapter(error=FetchError()), measure_text=measure_text)

    with pytest.raises(FetchError, match="Failed to fetch data"):
        page.ready()

    assert session.chart is None
    assert page.query_selector("#summary-chart").children() == []


@patch("covid_chart.adapters.covid19api.adapter.requests.get")
def test_non_2xx_response_draws_nothing(mock_get: MagicMock, measure_text) -> None:
    mock_get.return_value = MagicMock(status_code=503)
    page = _summary_page()
    session = install_summary_chart(page, Covid19ApiAdapter(), measure_text=measure_text)

    with pytest.raises(FetchError, match="Failed to fetch data") as exc_info:
        page.ready()

    assert exc_info.value.status_code == 503
    mock_get.assert_called_once_with("https://api.covid19api.com/summary", timeout=None)
    mock_get.return_value.json.assert_not_called()
    assert session.chart is None
    assert page.query_selector("#summary-chart").children() == []


def test_second_ready_replaces_chart(summary_payload, measure_text) -> None:
    page = _summary_page()
    session = install_summary_chart(page, StaticAdapter(summary_payload), measure_text=measure_text)

    page.ready()
    first = session.chart
    page.ready()

    assert session.chart is not first
    assert page.listener_count("resize") == 1
    container = page.query_selector("#summary-chart")
    page.resize(800)
    session.chart.flush()
    first.flush()
    assert len(container.children()) == 1
    assert first.draw_count == 1
    session.close()

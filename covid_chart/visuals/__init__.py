"""Visualization package for the COVID-19 summary chart.

Key pieces:
    - scales: linear and band scales, nice ticks, SI value formatting
    - axis: SVG axis groups for either scale
    - barchart: the horizontal bar chart renderer
    - controller: option merging and responsive, debounced redraws
    - page: the in-memory page and container model charts are drawn into

Usage:
    from covid_chart.visuals import Page, barchart
    from covid_chart.core.models import DataPoint

    page = Page(viewport_width=800)
    page.add_container("chart", height=400, fluid=True)
    chart = barchart(
        [DataPoint("A", 10), DataPoint("B", 90)],
        "#chart",
        {"responsive": True, "margin": {"top": 30, "left": 30}},
        page=page,
    )
    page.resize(640)  # redrawn 100ms later
    chart.close()
"""

from __future__ import annotations

from .barchart import draw_bar_chart
from .controller import BarChart, barchart, resolve_options
from .page import Container, Page

__all__ = ["BarChart", "Container", "Page", "barchart", "draw_bar_chart", "resolve_options"]

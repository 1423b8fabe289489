"""Tests for the HTML/SVG page renderer."""

from __future__ import annotations

from pathlib import Path

import pytest

from covid_chart.core.models import ChartOptions, DataPoint
from covid_chart.render.renderer import PageRenderer, write_text
from covid_chart.visuals.barchart import draw_bar_chart
from covid_chart.visuals.page import Page


@pytest.fixture
def drawn_page(measure_text) -> Page:
    page = Page(viewport_width=400)
    page.add_container("summary-chart", 400, 200)
    draw_bar_chart(
        [DataPoint("A", 1), DataPoint("B", 90)],
        "#summary-chart",
        ChartOptions(width=400, height=200),
        page=page,
        measure_text=measure_text,
    )
    return page


def test_renderer_instantiation() -> None:
    renderer = PageRenderer()
    assert renderer.env is not None


def test_render_html_embeds_chart(drawn_page: Page) -> None:
    result = PageRenderer().render_html(drawn_page, subtitle="2 countries")

    assert result.startswith("<!DOCTYPE html>")
    assert '<div id="summary-chart">' in result
    assert '<svg width="400" height="200">' in result
    assert result.count("<rect") == 2
    assert ".value-label.white" in result
    assert "2 countries" in result
    assert "COVID-19 confirmed cases by country" in result


def test_render_html_escapes_title(drawn_page: Page) -> None:
    result = PageRenderer().render_html(drawn_page, title="<Cases & deaths>")
    assert "&lt;Cases &amp; deaths&gt;" in result
    assert "<Cases & deaths>" not in result


def test_render_html_missing_template(tmp_path: Path, drawn_page: Page) -> None:
    renderer = PageRenderer(templates_dir=tmp_path)
    with pytest.raises(RuntimeError, match="HTML template not found"):
        renderer.render_html(drawn_page)


def test_render_svg_standalone(drawn_page: Page) -> None:
    svg = drawn_page.query_selector("#summary-chart").children()[0]
    result = PageRenderer().render_svg(svg)

    assert result.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'xmlns="http://www.w3.org/2000/svg"' in result
    assert "<style>" in result
    assert result.count("<rect") == 2
    assert 'class="value-label white"' in result
    # The drawn tree is left untouched
    assert svg.find("style") is None


def test_write_text_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "out" / "nested" / "chart.html"
    write_text(target, "<html></html>")
    assert target.read_text(encoding="utf-8") == "<html></html>"

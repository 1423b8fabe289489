from __future__ import annotations

from pathlib import Path

import typer

from .. import __version__
from ..adapters.covid19api.adapter import Covid19ApiAdapter, get_summary_data
from ..core.config import get_settings
from ..core.enums import OutputFormat
from ..core.errors import FetchError
from ..core.logging_config import get_logger, setup_logging
from ..core.summary import (
    SUMMARY_CHART_OPTIONS,
    SUMMARY_CHART_QUERY,
    install_summary_chart,
    summary_to_data_points,
)
from ..render.renderer import PageRenderer, write_text
from ..visuals.page import Page
from ..visuals.scales import format_si
from . import output as cli_output

app = typer.Typer(help="COVID-19 summary chart CLI")

logger = get_logger(__name__)


@app.callback()
def callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
) -> None:
    """Configure global CLI options."""
    setup_logging(json_output=json_logs, log_level=log_level, log_dir=get_settings().log_dir)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": log_level})


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


@app.command()
def render(
    output: Path = typer.Option(Path("summary.html"), help="Output file path"),  # noqa: B008
    format: OutputFormat = typer.Option(  # noqa: B008
        OutputFormat.HTML, case_sensitive=False, help="Output format: html or svg"
    ),
    viewport_width: float = typer.Option(
        SUMMARY_CHART_OPTIONS.width, min=1, help="Initial page width in pixels"
    ),
    viewport_height: float = typer.Option(768, min=1, help="Initial page height in pixels"),
    resize_to: float | None = typer.Option(
        None, min=1, help="Resize the page to this width after the first draw"
    ),
) -> None:
    """Fetch the global summary and render confirmed cases per country as a bar chart.

    The chart container is fluid, so its width follows the page width; its height
    falls back to the fixed summary canvas height.
    """
    page = Page(viewport_width=viewport_width, viewport_height=viewport_height)
    page.add_container(SUMMARY_CHART_QUERY.lstrip("#"), fluid=True)
    session = install_summary_chart(page, Covid19ApiAdapter.from_settings())

    margins = SUMMARY_CHART_OPTIONS.margin
    if min(viewport_width, resize_to or viewport_width) <= margins.left + margins.right:
        cli_output.warning("Page width leaves no room for bars inside the chart margins")

    try:
        page.ready()
    except FetchError as e:
        logger.exception("Summary fetch failed", extra={"status_code": e.status_code})
        cli_output.error(f"{e} (HTTP {e.status_code})" if e.status_code else str(e))
        raise typer.Exit(code=1) from e

    chart = session.chart
    if chart is None:
        cli_output.error("Chart was not drawn")
        raise typer.Exit(code=1)

    if resize_to is not None:
        page.resize(resize_to)
        chart.flush()

    renderer = PageRenderer()
    if format is OutputFormat.SVG:
        content = renderer.render_svg(chart.svg)
    else:
        content = renderer.render_html(page, subtitle=f"{len(session.data)} countries")
    session.close()

    write_text(output, content)
    cli_output.success(f"Chart written to {output}")
    cli_output.info(
        f"{len(session.data)} bars, {chart.options.width:g}x{chart.options.height:g}px"
    )


@app.command()
def top(
    limit: int = typer.Option(10, min=1, help="Number of countries to list"),
) -> None:
    """List the countries with the most confirmed cases."""
    try:
        summary = get_summary_data()
    except FetchError as e:
        logger.exception("Summary fetch failed", extra={"status_code": e.status_code})
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e

    points = summary_to_data_points(summary)
    leaders = list(reversed(points[-limit:]))
    cli_output.data(f"Top {len(leaders)} countries by confirmed cases:")
    for rank, point in enumerate(leaders, start=1):
        cli_output.plain(f"  {rank:>3}. {point.key:<3} {format_si(point.value):>6}")


if __name__ == "__main__":
    app()

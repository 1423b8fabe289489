from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from .. import __version__
from ..core.logging_config import get_logger
from ..visuals.page import Page

logger = get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

CHART_STYLESHEET = """\
body { font-family: sans-serif; margin: 1rem; }
#summary-chart { width: 100%; }
svg rect { fill: #4682b4; }
.grid line { stroke: #d3d3d3; stroke-opacity: 0.7; shape-rendering: crispEdges; }
.grid path { stroke-width: 0; }
.value-label { font-size: 10px; font-family: sans-serif; text-anchor: middle; dominant-baseline: middle; fill: #333; }
.value-label.white { fill: #fff; }"""


class PageRenderer:
    """Renders a Page's containers into an HTML document using Jinja2 templates."""

    def __init__(self, templates_dir: Path | None = None, stylesheet: str = CHART_STYLESHEET):
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=lambda name: name is not None and name.endswith(".html.j2"),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.stylesheet = stylesheet

    def render_html(
        self, page: Page, title: str = "COVID-19 confirmed cases by country", subtitle: str | None = None
    ) -> str:
        """Render the page as a standalone HTML document.

        Raises:
            RuntimeError: If the template is missing or fails to render
        """
        containers = [c.to_html() for c in page.containers]
        try:
            template = self.env.get_template("summary_page.html.j2")
            logger.debug("Rendering HTML page", extra={"containers": len(containers)})
            return template.render(
                title=title,
                subtitle=subtitle,
                containers=containers,
                stylesheet=self.stylesheet,
                version=__version__,
            )
        except TemplateNotFound as e:
            logger.error("HTML template not found", extra={"error": str(e)})
            raise RuntimeError(
                f"HTML template not found: {e}. "
                "Ensure covid_chart/render/templates/summary_page.html.j2 exists."
            ) from e

    def render_svg(self, svg: ET.Element) -> str:
        """Serialize a drawn chart as a standalone SVG document with embedded styles."""
        doc = ET.Element(svg.tag, dict(svg.attrib))
        doc.set("xmlns", SVG_NAMESPACE)
        style = ET.SubElement(doc, "style")
        style.text = self.stylesheet
        doc.extend(list(svg))
        body = ET.tostring(doc, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def write_text(path: str | Path, content: str) -> None:
    """Write text content to file."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")

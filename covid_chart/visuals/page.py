"""In-memory page model that charts are drawn into.

A ``Page`` stands in for the browser document: it owns a viewport size, a set
of ``Container`` elements addressed by CSS-style selectors, and two events,
``"ready"`` and ``"resize"``. Containers hold an ElementTree ``div`` so the
drawn SVG can be serialized straight into HTML.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable

from ..core.logging_config import get_logger

logger = get_logger(__name__)

EVENTS = ("ready", "resize")


class Container:
    """A block element with a layout box.

    Fluid containers take the page's viewport width whenever the page is
    resized. A height of 0 means "sized by content", which callers treat as
    unmeasured.
    """

    def __init__(
        self,
        element_id: str,
        width: float = 0,
        height: float = 0,
        *,
        fluid: bool = False,
        classes: tuple[str, ...] = (),
    ):
        self.element_id = element_id
        self.width = float(width)
        self.height = float(height)
        self.fluid = fluid
        self.classes = tuple(classes)
        self.element = ET.Element("div", {"id": element_id})
        if self.classes:
            self.element.set("class", " ".join(self.classes))

    def matches(self, query: str) -> bool:
        query = query.strip()
        if query.startswith("#"):
            return query[1:] == self.element_id
        if query.startswith("."):
            return query[1:] in self.classes
        return query == self.element.tag

    def bounding_box(self) -> tuple[float, float]:
        return self.width, self.height

    def set_size(self, width: float, height: float | None = None) -> None:
        self.width = float(width)
        if height is not None:
            self.height = float(height)

    def append(self, tag: str, **attrs: object) -> ET.Element:
        return ET.SubElement(self.element, tag, {k: _attr(v) for k, v in attrs.items()})

    def clear(self) -> None:
        """Remove all child content, keeping the container's own attributes."""
        for child in list(self.element):
            self.element.remove(child)
        self.element.text = None

    def children(self) -> list[ET.Element]:
        return list(self.element)

    def to_html(self) -> str:
        return ET.tostring(self.element, encoding="unicode", method="html")


class Page:
    """Viewport, containers and page-level event listeners."""

    def __init__(self, viewport_width: float = 1024, viewport_height: float = 768):
        self.viewport_width = float(viewport_width)
        self.viewport_height = float(viewport_height)
        self.containers: list[Container] = []
        self._listeners: dict[str, list[Callable[[], object]]] = {e: [] for e in EVENTS}

    def add_container(
        self,
        element_id: str,
        width: float | None = None,
        height: float = 0,
        *,
        fluid: bool = False,
        classes: tuple[str, ...] = (),
    ) -> Container:
        if width is None:
            width = self.viewport_width if fluid else 0
        container = Container(element_id, width, height, fluid=fluid, classes=classes)
        self.containers.append(container)
        return container

    def query_selector(self, query: str) -> Container | None:
        for container in self.containers:
            if container.matches(query):
                return container
        return None

    def add_event_listener(self, event: str, callback: Callable[[], object]) -> Callable[[], None]:
        """Subscribe ``callback`` to ``event`` and return its unsubscribe function."""
        if event not in self._listeners:
            raise ValueError(f"Unknown page event: {event!r}")
        listeners = self._listeners[event]
        listeners.append(callback)

        def unsubscribe() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def listener_count(self, event: str) -> int:
        return len(self._listeners[event])

    def _dispatch(self, event: str) -> None:
        for callback in list(self._listeners[event]):
            callback()

    def ready(self) -> None:
        logger.debug("Page ready", extra={"containers": len(self.containers)})
        self._dispatch("ready")

    def resize(self, width: float, height: float | None = None) -> None:
        self.viewport_width = float(width)
        if height is not None:
            self.viewport_height = float(height)
        for container in self.containers:
            if container.fluid:
                container.set_size(self.viewport_width)
        logger.debug(
            "Page resized",
            extra={"width": self.viewport_width, "height": self.viewport_height},
        )
        self._dispatch("resize")


def _attr(value: object) -> str:
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def format_number(value: float) -> str:
    """Render a coordinate without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DataPoint:
    """One bar: a category key and its value."""

    key: str
    value: float


@dataclass(frozen=True)
class Margin:
    top: float = 0
    bottom: float = 0
    left: float = 0
    right: float = 0


@dataclass(frozen=True)
class ChartOptions:
    """Resolved layout options for a single render.

    Width and height are expected to exceed the margin sums; nothing checks
    this, so a too-small canvas yields empty or negative-size bars.
    """

    responsive: bool = False
    width: float = 400
    height: float = 300
    margin: Margin = field(default_factory=Margin)
    value_label_offset: float = 0

    @property
    def chart_width(self) -> float:
        return self.width - self.margin.left - self.margin.right

    @property
    def chart_height(self) -> float:
        return self.height - self.margin.top - self.margin.bottom


DEFAULT_OPTIONS = ChartOptions()

"""Rendered text width measurement for label placement."""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

import matplotlib
from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextPath

# Use non-interactive backend for server environments
matplotlib.use("Agg")

TextMeasurer = Callable[[str], float]


class MatplotlibTextMeasurer:
    """Measure the advance width of a string in pixels using matplotlib fonts.

    Widths are cached per string since a chart measures the same short
    labels ("1.2M", "450k") many times across redraws.
    """

    def __init__(self, font_size: float = 10, family: str = "sans-serif"):
        self.font_size = font_size
        self.family = family
        self._prop = FontProperties(family=family, size=font_size)
        self._measure = lru_cache(maxsize=1024)(self._width)

    def _width(self, text: str) -> float:
        if not text:
            return 0.0
        path = TextPath((0, 0), text, size=self.font_size, prop=self._prop)
        extents = path.get_extents()
        return float(max(0.0, extents.x1))

    def __call__(self, text: str) -> float:
        return self._measure(text)


def fixed_width_measurer(char_width: float) -> TextMeasurer:
    """Measurer that assumes every character has the same advance width."""

    def measure(text: str) -> float:
        return len(text) * char_width

    return measure

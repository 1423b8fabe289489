"""Linear and band scales plus the SI value formatter used by the bar chart.

Tick selection follows the familiar "nice numbers" rule: a step of
1, 2 or 5 times a power of ten chosen so roughly ``count`` ticks cover the
domain.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

import numpy as np

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)

SI_PREFIXES = ["y", "z", "a", "f", "p", "n", "µ", "m", "", "k", "M", "G", "T", "P", "E", "Z", "Y"]
MINUS = "−"


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _tick_increment(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10**power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power < 0:
        inc = 10 ** (-power) / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10**power * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_increment(start, stop, count * 2)
    return i1, i2, inc


def ticks(start: float, stop: float, count: float = 10) -> list[float]:
    """Return nicely rounded tick values between ``start`` and ``stop``.

    The order follows the direction of the interval, so a reversed interval
    yields descending ticks.
    """
    if not count > 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    i1, i2, inc = _tick_increment(stop, start, count) if reverse else _tick_increment(start, stop, count)
    if not i2 >= i1:
        return []
    idx = np.arange(i2 - i1 + 1)
    steps = (i2 - idx) if reverse else (i1 + idx)
    values = steps / -inc if inc < 0 else steps * inc
    return [float(v) for v in values]


class LinearScale:
    """Map a continuous domain onto a continuous range by interpolation.

    A degenerate domain (both ends equal) maps every input to the middle of
    the range.
    """

    def __init__(self, domain: tuple[float, float], range: tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range[0]), float(range[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = d1 - d0
        t = 0.5 if span == 0 else (value - d0) / span
        return r0 + t * (r1 - r0)

    def ticks(self, count: float = 10) -> list[float]:
        return ticks(self.domain[0], self.domain[1], count)


class BandScale:
    """Map discrete keys onto evenly sized, padded bands.

    Duplicate keys share a single band. ``padding`` applies to both the gaps
    between bands and the two outer edges.
    """

    def __init__(
        self,
        domain: Iterable[Hashable],
        range: tuple[float, float],
        padding: float = 0.0,
        align: float = 0.5,
    ):
        self.domain: list[Hashable] = list(dict.fromkeys(domain))
        self.range = (float(range[0]), float(range[1]))
        self.padding_inner = padding
        self.padding_outer = padding
        self.align = align
        self._positions: dict[Hashable, float] = {}
        self._rescale()

    def _rescale(self) -> None:
        n = len(self.domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        self.step = (stop - start) / max(1, n - self.padding_inner + self.padding_outer * 2)
        start += (stop - start - self.step * (n - self.padding_inner)) * self.align
        self.bandwidth = self.step * (1 - self.padding_inner)
        values = start + self.step * np.arange(n)
        if reverse:
            values = values[::-1]
        self._positions = {key: float(v) for key, v in zip(self.domain, values, strict=True)}

    def __call__(self, key: Hashable) -> float | None:
        return self._positions.get(key)

    def ticks(self) -> Sequence[Hashable]:
        return list(self.domain)


def _exponential_parts(x: float, p: int) -> tuple[str, int]:
    """Split ``x`` into ``p`` significant digits (no dot) and a base-10 exponent.

    Ties round away from zero, e.g. 125 gives ``("13", 2)``.
    """
    p = max(p, 1)
    d = Decimal(float(x))
    if not d:
        return "0" * p, 0
    exponent = d.adjusted()
    digits = d.quantize(Decimal((0, (1,), exponent - p + 1)), rounding=ROUND_HALF_UP).as_tuple().digits
    if len(digits) > p:
        # Rounded up into the next power of ten, e.g. 999 -> 1.0e3
        exponent += 1
        digits = digits[:p]
    return "".join(map(str, digits)), exponent


def format_si(value: float, precision: int = 2) -> str:
    """Format ``value`` with ``precision`` significant digits and an SI prefix.

    >>> format_si(1200)
    '1.2k'
    >>> format_si(0)
    '0.0'
    """
    if not math.isfinite(value):
        return str(value)
    sign = MINUS if value < 0 else ""
    x = abs(value)
    coefficient, exponent = _exponential_parts(x, precision)
    prefix_exponent = max(-8, min(8, math.floor(exponent / 3)))
    i = exponent - prefix_exponent * 3 + 1
    n = len(coefficient)
    if i == n:
        digits = coefficient
    elif i > n:
        digits = coefficient + "0" * (i - n)
    elif i > 0:
        digits = coefficient[:i] + "." + coefficient[i:]
    else:
        digits = "0." + "0" * (-i) + _exponential_parts(x, max(0, precision + i - 1))[0]
    return f"{sign}{digits}{SI_PREFIXES[8 + prefix_exponent]}"

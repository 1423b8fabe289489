"""Tests for scales, tick generation and SI formatting."""

from __future__ import annotations

import pytest

from covid_chart.visuals.scales import BandScale, LinearScale, format_si, ticks


def test_ticks_ascending() -> None:
    assert ticks(0, 10, 10) == [float(i) for i in range(11)]


def test_ticks_reversed_interval_descends() -> None:
    assert ticks(90, 0, 10) == [90.0, 80.0, 70.0, 60.0, 50.0, 40.0, 30.0, 20.0, 10.0, 0.0]


def test_ticks_small_count_uses_wider_step() -> None:
    assert ticks(90, 0, 5) == [80.0, 60.0, 40.0, 20.0, 0.0]


def test_ticks_fractional_step() -> None:
    assert ticks(0, 1, 5) == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])


def test_ticks_degenerate_inputs() -> None:
    assert ticks(5, 5) == [5.0]
    assert ticks(0, 10, 0) == []


def test_linear_scale_interpolates() -> None:
    scale = LinearScale(domain=(0, 100), range=(0, 500))
    assert scale(0) == 0
    assert scale(50) == 250
    assert scale(100) == 500


def test_linear_scale_inverted_domain() -> None:
    """Largest value maps to 0, zero maps to the full width."""
    scale = LinearScale(domain=(90, 0), range=(0, 400))
    assert scale(90) == 0
    assert scale(0) == 400
    assert scale(45) == pytest.approx(200)
    assert scale(10) > scale(20) > scale(80)


def test_linear_scale_degenerate_domain_maps_to_middle() -> None:
    scale = LinearScale(domain=(0, 0), range=(0, 400))
    assert scale(0) == 200


def test_band_scale_reversed_range_puts_first_key_at_bottom() -> None:
    scale = BandScale(["A", "B"], range=(200, 0), padding=0.1)
    assert scale("A") > scale("B")
    assert scale.bandwidth == pytest.approx(scale.step * 0.9)


def test_band_scale_spans_range_with_padding() -> None:
    keys = ["A", "B", "C", "D", "E"]
    height = 300
    scale = BandScale(keys, range=(height, 0), padding=0.1)
    outer = scale.step * 0.1

    slots = sorted((scale(k), scale(k) + scale.bandwidth) for k in keys)
    assert slots[0][0] - outer == pytest.approx(0)
    assert slots[-1][1] + outer == pytest.approx(height)
    for (_, end), (start, _) in zip(slots, slots[1:]):
        # Disjoint, separated by exactly the inner padding
        assert start - end == pytest.approx(scale.step * 0.1)


def test_band_scale_unknown_key() -> None:
    scale = BandScale(["A"], range=(100, 0), padding=0.1)
    assert scale("Z") is None


def test_band_scale_duplicate_keys_share_band() -> None:
    scale = BandScale(["A", "B", "A"], range=(100, 0))
    assert scale.ticks() == ["A", "B"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1200, "1.2k"),
        (0, "0.0"),
        (10, "10"),
        (90, "90"),
        (150, "150"),
        (999, "1.0k"),
        (1_500_000, "1.5M"),
        (0.5, "500m"),
        (-1200, "−1.2k"),
        (125, "130"),
        (145, "150"),
        (1250, "1.3k"),
        (2_450_000, "2.5M"),
    ],
)
def test_format_si(value: float, expected: str) -> None:
    assert format_si(value) == expected

"""Shared fixtures for covid_chart tests."""

from __future__ import annotations

from typing import Any

import pytest

from covid_chart.visuals.text import fixed_width_measurer


@pytest.fixture
def measure_text():
    """Deterministic text measurer: 6px per character."""
    return fixed_width_measurer(6)


@pytest.fixture
def summary_payload() -> dict[str, Any]:
    """A trimmed-down /summary response."""
    return {
        "ID": "5e8c1b4b-3b1a-4d4b-9b36-0d1e0c4a3f21",
        "Message": "",
        "Global": {"NewConfirmed": 100, "TotalConfirmed": 1_300_000},
        "Countries": [
            {"Country": "United States of America", "CountryCode": "US", "TotalConfirmed": 1_000_000},
            {"Country": "Andorra", "CountryCode": "AD", "TotalConfirmed": 750},
            {"Country": "Germany", "CountryCode": "DE", "TotalConfirmed": 250_000},
            {"Country": "Iceland", "CountryCode": "IS", "TotalConfirmed": 750},
        ],
        "Date": "2020-05-01T00:00:00Z",
    }

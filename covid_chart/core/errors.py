"""Exception types raised by covid_chart."""

from __future__ import annotations


class CovidChartError(Exception):
    """Base exception for covid_chart errors."""

    pass


class FetchError(CovidChartError):
    """The summary API answered with a non-success status."""

    def __init__(self, message: str = "Failed to fetch data", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

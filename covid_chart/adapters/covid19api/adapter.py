"""covid19api.com summary adapter."""

from __future__ import annotations

from typing import Any

import requests

from ..base import BaseAdapter
from ...core.config import get_settings
from ...core.errors import FetchError
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class Covid19ApiAdapter(BaseAdapter):
    """Adapter for the public covid19api.com REST API."""

    BASE_URL = "https://api.covid19api.com"
    SUMMARY_PATH = "/summary"

    @classmethod
    def from_settings(cls) -> Covid19ApiAdapter:
        settings = get_settings()
        return cls(base_url=settings.api_origin, timeout=settings.request_timeout)

    @property
    def summary_url(self) -> str:
        return f"{self.base_url}{self.SUMMARY_PATH}"

    def fetch_summary(self) -> dict[str, Any]:
        """Fetch the summary document.

        See BaseAdapter.fetch_summary for full documentation.
        """
        url = self.summary_url
        logger.debug("Requesting summary", extra={"url": url})
        resp = requests.get(url, timeout=self.timeout)
        if not 200 <= resp.status_code < 300:
            logger.error(
                "Summary request failed",
                extra={"url": url, "status_code": resp.status_code},
            )
            raise FetchError("Failed to fetch data", status_code=resp.status_code)
        return resp.json()


def get_summary_data(adapter: BaseAdapter | None = None) -> dict[str, Any]:
    """Fetch summary data with the given adapter, or one built from settings."""
    if adapter is None:
        adapter = Covid19ApiAdapter.from_settings()
    return adapter.fetch_summary()

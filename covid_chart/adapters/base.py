"""Base adapter interface for COVID-19 summary data sources."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAdapter(ABC):
    """Abstract base class for summary data adapters.

    Attributes:
        BASE_URL: Source API origin (must be set by subclass)
        timeout: Request timeout in seconds, None waits indefinitely
    """

    BASE_URL: str = ""  # Must be overridden by subclass

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        """Initialize adapter.

        Args:
            base_url: Optional origin overriding the class BASE_URL
            timeout: Request timeout in seconds (default: no timeout)
        """
        if not self.BASE_URL:
            raise NotImplementedError(
                f"{self.__class__.__name__} must define BASE_URL class attribute"
            )
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout

    @abstractmethod
    def fetch_summary(self) -> dict[str, Any]:
        """Fetch the global summary document.

        Returns:
            Parsed JSON body. Expected to hold a ``Countries`` list whose records
            carry at least ``CountryCode`` and ``TotalConfirmed``.

        Raises:
            FetchError: When the API answers with a non-success status

        Notes:
            - One request per call; no retry and no caching
            - Malformed bodies propagate the decoder's exception
        """
        pass

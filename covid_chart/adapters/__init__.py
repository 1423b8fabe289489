"""HTTP adapters for COVID-19 data sources."""

from .base import BaseAdapter
from .covid19api.adapter import Covid19ApiAdapter, get_summary_data

__all__ = ["BaseAdapter", "Covid19ApiAdapter", "get_summary_data"]

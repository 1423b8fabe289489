"""COVID-19 summary bar chart rendering."""

__version__ = "0.1.0"

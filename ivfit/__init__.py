"""IV Fit - voltage vs current graph with a least-squares best-fit line."""

__version__ = "0.1.0"

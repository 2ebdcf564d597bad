"""Filtering and aggregation engine for pre-clustered customer segments."""

__version__ = "0.1.0"

"""Cycle, component, ordering and hype queries on directed influencer graphs."""

__version__ = "0.1.0"
__all__ = ["graph", "queries", "cli"]
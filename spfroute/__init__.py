"""Shortest-path-first route calculation over IPv4 link-state graphs."""

__version__ = "0.1.0"
__all__ = ["graph", "dijkstra", "example_table", "cli"]
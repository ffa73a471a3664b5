"""A sample topology of nine routers with equal-cost paths and stub networks."""

from __future__ import annotations

from spfroute.graph import Graph, LinkRecord

__all__ = ["ADJACENCY_TABLE", "example_graph"]

_R = LinkRecord

ADJACENCY_TABLE: tuple[LinkRecord, ...] = (
    # S
    _R("10.0.0.1", "10.254.241.2", "255.255.255.252", 5, "10.254.241.1", "172.16.0.1"),
    _R("10.0.0.1", "10.254.241.9", "255.255.255.252", 10, "10.254.241.10", "192.168.168.7"),
    _R("10.0.0.1", "10.254.241.49", "255.255.255.248", 11, "10.254.241.50", "10.0.0.3"),
    _R("10.0.0.1", "10.254.241.45", "255.255.255.252", 11, "10.254.241.46", "10.0.0.3"),
    _R("10.0.0.1", "10.254.241.49", "255.255.255.248", 11, "10.254.241.51", "10.0.0.4"),
    _R("10.0.0.1", "10.0.0.1", "255.255.255.255", 0, "10.0.0.1", "10.0.0.1"),
    # A
    _R("172.16.0.1", "10.254.241.1", "255.255.255.252", 5, "10.254.241.2", "10.0.0.1"),
    _R("172.16.0.1", "10.254.241.5", "255.255.255.252", 16, "10.254.241.6", "192.168.0.5"),
    _R("172.16.0.1", "8.8.8.2", "255.255.255.0", 17, "0.0.0.0", "0.0.0.0"),
    _R("172.16.0.1", "172.16.0.1", "255.255.255.255", 0, "172.16.0.1", "172.16.0.1"),
    # B
    _R("192.168.168.7", "10.254.241.10", "255.255.255.252", 10, "10.254.241.9", "10.0.0.1"),
    _R("192.168.168.7", "10.254.241.17", "255.255.255.252", 2, "10.254.241.18", "10.0.0.3"),
    _R("192.168.168.7", "10.254.241.21", "255.255.255.252", 8, "10.254.241.22", "172.16.172.10"),
    _R("192.168.168.7", "10.254.241.29", "255.255.255.252", 20, "10.254.241.30", "192.168.0.5"),
    _R("192.168.168.7", "192.168.168.7", "255.255.255.255", 0, "192.168.168.7", "192.168.168.7"),
    # C
    _R("10.0.0.3", "10.254.241.50", "255.255.255.252", 10, "10.254.241.49", "10.0.0.1"),
    _R("10.0.0.3", "10.254.241.50", "255.255.255.252", 10, "10.254.241.51", "10.0.0.4"),
    _R("10.0.0.3", "10.254.241.46", "255.255.255.252", 11, "10.254.241.45", "10.0.0.1"),
    _R("10.0.0.3", "10.254.241.18", "255.255.255.252", 2, "10.254.241.17", "192.168.168.7"),
    _R("10.0.0.3", "10.254.241.25", "255.255.255.252", 1, "10.254.241.26", "172.16.172.10"),
    _R("10.0.0.3", "10.0.0.3", "255.255.255.255", 0, "10.0.0.3", "10.0.0.3"),
    # D
    _R("192.168.0.5", "10.254.241.6", "255.255.255.252", 16, "10.254.241.5", "172.16.0.1"),
    _R("192.168.0.5", "10.254.241.30", "255.255.255.252", 20, "10.254.241.29", "192.168.168.7"),
    _R("192.168.0.5", "10.254.241.33", "255.255.255.252", 1, "10.254.241.34", "172.16.172.10"),
    _R("192.168.0.5", "10.254.241.37", "255.255.255.252", 8, "10.254.241.38", "10.0.0.2"),
    _R("192.168.0.5", "192.168.0.5", "255.255.255.255", 0, "192.168.0.5", "192.168.0.5"),
    # E
    _R("172.16.172.10", "10.254.241.22", "255.255.255.252", 8, "10.254.241.21", "192.168.168.7"),
    _R("172.16.172.10", "10.254.241.26", "255.255.255.252", 1, "10.254.241.25", "10.0.0.3"),
    _R("172.16.172.10", "10.254.241.34", "255.255.255.252", 1, "10.254.241.33", "192.168.0.5"),
    _R("172.16.172.10", "10.254.241.41", "255.255.255.252", 12, "10.254.241.42", "10.0.0.2"),
    _R("172.16.172.10", "10.254.241.14", "255.255.255.252", 1, "10.254.241.13", "10.0.0.4"),
    _R("172.16.172.10", "172.16.172.10", "255.255.255.255", 0, "172.16.172.10", "172.16.172.10"),
    # F
    _R("10.0.0.2", "10.254.241.38", "255.255.255.252", 8, "10.254.241.37", "192.168.0.5"),
    _R("10.0.0.2", "10.254.241.42", "255.255.255.252", 12, "10.254.241.41", "172.16.172.10"),
    _R("10.0.0.2", "10.254.241.53", "255.255.255.252", 8, "10.254.241.54", "172.16.172.66"),
    _R("10.0.0.2", "8.8.8.1", "255.255.255.0", 1, "0.0.0.0", "0.0.0.0"),
    _R("10.0.0.2", "10.0.0.2", "255.255.255.255", 0, "10.0.0.2", "10.0.0.2"),
    # X
    _R("172.16.172.66", "10.254.241.54", "255.255.255.252", 12, "10.254.241.53", "10.0.0.2"),
    _R("172.16.172.66", "172.16.172.66", "255.255.255.255", 0, "172.16.172.66", "172.16.172.66"),
    # G
    _R("10.0.0.4", "10.254.241.51", "255.255.255.248", 10, "10.254.241.49", "10.0.0.1"),
    _R("10.0.0.4", "10.254.241.13", "255.255.255.252", 1, "10.254.241.14", "172.16.172.10"),
    _R("10.0.0.4", "10.254.241.51", "255.255.255.252", 10, "10.254.241.50", "10.0.0.3"),
    _R("10.0.0.4", "10.0.0.4", "255.255.255.255", 0, "10.0.0.4", "10.0.0.4"),
)


def example_graph() -> Graph:
    """Return a fresh graph populated with the sample topology."""
    graph = Graph()
    graph.add_links(ADJACENCY_TABLE)
    return graph
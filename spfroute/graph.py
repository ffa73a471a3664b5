"""Link-state database: routers and their one-way adjacencies."""

from __future__ import annotations

import ipaddress
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = [
    "GraphState",
    "LinkAdjacency",
    "LinkRecord",
    "Graph",
    "mask_len",
    "parse_addr",
    "format_addr",
]

_RECORD = struct.Struct("<6I")


def parse_addr(text: str) -> int:
    """Convert a dotted-quad IPv4 address to its 32-bit integer value."""
    return int(ipaddress.IPv4Address(text))


def format_addr(addr: int) -> str:
    """Convert a 32-bit integer to dotted-quad notation."""
    return str(ipaddress.IPv4Address(addr))


def mask_len(mask: int | str) -> int:
    """Return the prefix length of a netmask given as integer or dotted quad."""
    if isinstance(mask, str):
        mask = parse_addr(mask)
    return bin(mask & 0xFFFFFFFF).count("1")


class GraphState(Enum):
    IDLE = "idle"
    POPULATING = "populating"


@dataclass(frozen=True)
class LinkAdjacency:
    """One directed adjacency of a node; addresses are 32-bit integers."""

    local_ip: int
    mask: int
    cost: int
    neigh_ip: int
    neigh_id: int


@dataclass(frozen=True)
class LinkRecord:
    """One adjacency written with dotted-quad strings, keyed by its node."""

    node_id: str
    local_ip: str
    mask: str
    cost: int
    neigh_ip: str
    neigh_id: str


class Graph:
    """Per-node lists of adjacencies, kept ordered by node id."""

    def __init__(self) -> None:
        self._graph: dict[int, list[LinkAdjacency]] = {}
        self._hostnames: dict[int, str] = {}
        self.state = GraphState.IDLE

    def _append(self, node_id: int, link: LinkAdjacency) -> None:
        self._graph.setdefault(node_id, []).append(link)

    def add_link(self, node_id: int, link: LinkAdjacency) -> None:
        """Add one directed adjacency to a node."""
        if self.state is not GraphState.IDLE:
            return
        self.state = GraphState.POPULATING
        try:
            self._append(node_id, link)
        finally:
            self.state = GraphState.IDLE

    def add_links(self, table: Iterable[LinkRecord]) -> None:
        """Add every adjacency of a table of string records."""
        if self.state is not GraphState.IDLE:
            return
        self.state = GraphState.POPULATING
        try:
            for row in table:
                self._append(
                    parse_addr(row.node_id),
                    LinkAdjacency(
                        parse_addr(row.local_ip),
                        parse_addr(row.mask),
                        row.cost,
                        parse_addr(row.neigh_ip),
                        parse_addr(row.neigh_id),
                    ),
                )
        finally:
            self.state = GraphState.IDLE

    def add_links_from_file(self, path: str | Path) -> int:
        """Load adjacencies from a binary file of six 32-bit words per record.

        Each record holds node id, local address, mask, cost, neighbour
        address and neighbour id. A trailing partial record is ignored.
        Returns the number of records loaded; raises OSError if the file
        cannot be read.
        """
        if self.state is not GraphState.IDLE:
            return 0
        self.state = GraphState.POPULATING
        try:
            data = Path(path).read_bytes()
            usable = len(data) - len(data) % _RECORD.size
            count = 0
            for node_id, local_ip, mask, cost, neigh_ip, neigh_id in _RECORD.iter_unpack(
                data[:usable]
            ):
                self._append(node_id, LinkAdjacency(local_ip, mask, cost, neigh_ip, neigh_id))
                count += 1
            return count
        finally:
            self.state = GraphState.IDLE

    def add_name(self, node_id: int, hostname: str) -> None:
        self._hostnames[node_id] = hostname

    def id_to_name(self, node_id: int) -> str:
        """Return the hostname of a node, or an empty string if it has none."""
        return self._hostnames.get(node_id, "")

    def links(self, node_id: int) -> list[LinkAdjacency]:
        """Return the adjacencies of a node (empty for an unknown node)."""
        return list(self._graph.get(node_id, ()))

    def nodes(self) -> list[int]:
        """Return all node ids in ascending order."""
        return sorted(self._graph)

    def __len__(self) -> int:
        return len(self._graph)

    def _graph_lines(self) -> list[str]:
        lines = ["", "Graph database"]
        links_count = 0
        for node_id in self.nodes():
            lines.append("")
            lines.append(f"[ NodeId: {format_addr(node_id)} ]")
            for link in self._graph[node_id]:
                links_count += 1
                lines.append(
                    f"  > iface: {format_addr(link.local_ip):>15}/{mask_len(link.mask)}"
                    f"    iface_cost: {link.cost:<5}"
                    f"    remote_ip: {format_addr(link.neigh_ip):<15}"
                    f"    neigh.: [{format_addr(link.neigh_id)}]"
                )
        lines.append("---")
        lines.append(f"Total nodes: {len(self)}. Total adjacent links: {links_count}")
        return lines

    def format_graph(self) -> str:
        """Render the whole database as text."""
        return "\n".join(self._graph_lines()) + "\n"

    def print_graph(self) -> None:
        """Write the whole database to standard output."""
        for line in self._graph_lines():
            print(line)
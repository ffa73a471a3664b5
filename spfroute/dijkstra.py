"""Shortest-path-first calculation over a link-state graph, with ECMP routes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from enum import Enum

from spfroute.graph import Graph, format_addr, mask_len, parse_addr

__all__ = [
    "MAX_COST",
    "UNKNOWN_ADDR",
    "LOOPBACK_MASK",
    "DijkstraState",
    "DestinationNet",
    "AdjacencyPair",
    "Leaf",
    "RouteInfo",
    "Dijkstra",
]

MAX_COST = 0xFFFFFFFF
UNKNOWN_ADDR = 0
LOOPBACK_MASK = 0xFFFFFFFF
_U32 = 0xFFFFFFFF

_RULE = "-" * 64
_TREE_RULE = "-" * 111
_TREE_SEP = (
    "---------------------|-------------------|----------------------|"
    "----------------------|----------------------|"
)
_TREE_HEAD = (
    "          Child node |  Node cumul. cost |          Best parent |"
    "         Parent iface |          Child iface |"
)


class DijkstraState(Enum):
    IDLE = "idle"
    CALCULATIONS = "calculations"
    READY = "ready"
    ERR_IN_GRAPH = "error in graph data"


@dataclass(frozen=True)
class DestinationNet:
    """A destination network; ordering looks only at the masked prefix."""

    net: int
    mask: int

    @property
    def prefix(self) -> int:
        return self.net & self.mask

    def __lt__(self, other: DestinationNet) -> bool:
        return self.prefix < other.prefix

    def __str__(self) -> str:
        return f"{format_addr(self.net)}/{mask_len(self.mask)}"


@dataclass(frozen=True)
class AdjacencyPair:
    """Interface on the parent and the matching interface on the child."""

    parent_ip: int
    child_ip: int


def _root_parents() -> dict[int, list[AdjacencyPair]]:
    return {UNKNOWN_ADDR: [AdjacencyPair(UNKNOWN_ADDR, UNKNOWN_ADDR)]}


@dataclass
class Leaf:
    """A node of the shortest-path tree with all of its equal-cost parents."""

    cumul_cost: int = MAX_COST
    eqco_parents: dict[int, list[AdjacencyPair]] = field(default_factory=_root_parents)


@dataclass(frozen=True)
class RouteInfo:
    """An outgoing interface, the cumulative cost and the next hop."""

    local_ip: int
    cumul_cost: int
    nexthop_ip: int


@dataclass(frozen=True)
class _Reach:
    child_id: int
    parent_id: int
    parent_ip: int
    nexthop_ip: int


class Dijkstra:
    """Computes the shortest-path tree, node reachability and the RIB from a root."""

    def __init__(self, root_id: int | str, graph: Graph, debug: bool = False) -> None:
        self.state = DijkstraState.IDLE
        self.root_id = parse_addr(root_id) if isinstance(root_id, str) else root_id
        self.graph = graph
        self.debug = debug
        self.tree: dict[int, Leaf] = {}
        self.unseen: set[int] = set()
        self.nodes_rei: dict[int, list[RouteInfo]] = {}
        self._rib: dict[int, tuple[DestinationNet, dict[int, list[RouteInfo]]]] = {}
        self._run()

    def reinit(self, root_id: int | str, graph: Graph, debug: bool = False) -> None:
        """Recalculate with another root or graph unless a calculation is running."""
        self.debug = debug
        if self.state is not DijkstraState.CALCULATIONS:
            self.root_id = parse_addr(root_id) if isinstance(root_id, str) else root_id
            self.graph = graph
            self._run()

    def set_debug(self) -> None:
        self.debug = True

    def unset_debug(self) -> None:
        self.debug = False

    @property
    def rib(self) -> dict[DestinationNet, dict[int, list[RouteInfo]]]:
        """Routes to every network, by destination and then by originating node."""
        return {
            net: {orig: list(routes) for orig, routes in sorted(origins.items())}
            for _, (net, origins) in sorted(self._rib.items())
        }

    # --- calculation -------------------------------------------------------

    def _run(self) -> None:
        self.state = DijkstraState.CALCULATIONS
        self._calc_tree()
        if self.state is not DijkstraState.ERR_IN_GRAPH:
            self._fill_nodes_rei()
            self._fill_rib()
            self.state = DijkstraState.READY

    def _say(self, text: str, end: str = "\n") -> None:
        if self.debug:
            print(text, end=end)

    def _leaf(self, node_id: int) -> Leaf:
        return self.tree.setdefault(node_id, Leaf())

    def _init_tree(self) -> None:
        nodes = self.graph.nodes()
        self.tree = {
            node: Leaf(cumul_cost=0 if node == self.root_id else MAX_COST) for node in nodes
        }
        self.unseen = set(nodes)

    def _min_cost_node(self) -> int:
        min_cost = MAX_COST
        chosen = UNKNOWN_ADDR
        for node_id in sorted(self.unseen):
            cost = self.tree[node_id].cumul_cost
            if cost <= min_cost:
                min_cost = cost
                chosen = node_id
        return chosen

    def _calc_tree(self) -> None:
        self._init_tree()
        self._say(self.format_tree(), end="")
        if self.root_id not in self.tree:
            self.state = DijkstraState.ERR_IN_GRAPH
            return
        while self.unseen:
            current = self._min_cost_node()
            leaf = self.tree[current]
            if leaf.cumul_cost != MAX_COST:
                for link in self.graph.links(current):
                    iface = f"{format_addr(link.local_ip)}/{mask_len(link.mask)}"
                    head = (
                        f"processing: {format_addr(current):<15}; iface: {iface:<18}"
                        f"; if_cost: {link.cost:<6}; neigh.: "
                    )
                    if link.mask == LOOPBACK_MASK or link.neigh_ip == UNKNOWN_ADDR:
                        self._say(head + " <loopback or stub is out of calculation>")
                        continue
                    eval_cost = (leaf.cumul_cost + link.cost) & _U32
                    child = self._leaf(link.neigh_id)
                    head += f"{format_addr(link.neigh_id):<15}"
                    if child.cumul_cost >= eval_cost:
                        self._say(head + f" - eval. cost ({eval_cost}) is better or equal !")
                        if child.cumul_cost > eval_cost:
                            child.cumul_cost = eval_cost
                            child.eqco_parents.clear()
                        child.eqco_parents.setdefault(current, []).append(
                            AdjacencyPair(link.local_ip, link.neigh_ip)
                        )
                    else:
                        self._say(head + f" - eval. cost ({eval_cost}) is worse !")
            else:
                self._say(
                    f"\nRemoving {format_addr(current)} due to cumulative cost == MAX_COST !"
                )
                del self.tree[current]
            self.unseen.discard(current)
            self._say(self.format_tree(), end="")

    def _paths_from(self, path: list[_Reach]) -> Iterator[list[_Reach]]:
        child_id = path[-1].parent_id
        parents = self._leaf(child_id).eqco_parents
        for parent_id in sorted(parents):
            if parent_id == UNKNOWN_ADDR:
                yield path
                return
            for pair in list(parents[parent_id]):
                yield from self._paths_from(
                    [*path, _Reach(child_id, parent_id, pair.parent_ip, pair.child_ip)]
                )

    def _routes_to_node(self, dst_id: int) -> dict[int, tuple[int, int]]:
        start = _Reach(UNKNOWN_ADDR, dst_id, UNKNOWN_ADDR, UNKNOWN_ADDR)
        paths = list(self._paths_from([start]))
        if self.debug:
            lines = [
                _RULE,
                "",
                f'Amount of paths to "{format_addr(dst_id)}", using reverse trace : {len(paths)}',
            ]
            for path in paths:
                lines.extend(["", "Path #: "])
                lines.extend(
                    f" node: {format_addr(step.parent_id)}; via iface: {format_addr(step.parent_ip)}"
                    f"; nexthop: {format_addr(step.nexthop_ip)}"
                    f"; nexthop node ID: {format_addr(step.child_id)}"
                    for step in reversed(path)
                )
            lines.append("")
            print("\n".join(lines))
        routes: dict[int, tuple[int, int]] = {}
        if dst_id in self.tree:
            cost = self.tree[dst_id].cumul_cost
            for path in paths:
                last = path[-1]
                routes[last.nexthop_ip] = (last.parent_ip, cost)
        return routes

    def _fill_nodes_rei(self) -> None:
        self.nodes_rei = {}
        for node_id in sorted(self.tree):
            routes = self._routes_to_node(node_id)
            self.nodes_rei[node_id] = [
                RouteInfo(local_ip, cost, nexthop)
                for nexthop, (local_ip, cost) in sorted(routes.items())
            ]

    def _routes_with_cost(self, orig_id: int, link_cost: int) -> list[RouteInfo]:
        return [
            replace(route, cumul_cost=(route.cumul_cost + link_cost) & _U32)
            for route in self.nodes_rei.get(orig_id, [])
        ]

    def _fill_rib(self) -> None:
        self._rib = {}
        for orig_id in sorted(self.tree):
            orig_cost = self.tree[orig_id].cumul_cost
            for link in self.graph.links(orig_id):
                prefix = link.local_ip & link.mask
                entry = self._rib.get(prefix)
                if entry is None:
                    self._rib[prefix] = (
                        DestinationNet(prefix, link.mask),
                        {orig_id: self._routes_with_cost(orig_id, link.cost)},
                    )
                    continue
                origins = entry[1]
                new_cost = (orig_cost + link.cost) & _U32
                for current in sorted(origins):
                    best = origins[current][0].cumul_cost
                    if new_cost < best:
                        origins.clear()
                        origins[orig_id] = self._routes_with_cost(orig_id, link.cost)
                        break
                    if new_cost == best:
                        origins[orig_id] = self._routes_with_cost(orig_id, link.cost)

    # --- rendering ---------------------------------------------------------

    def _tree_lines(self) -> list[str]:
        lines = ["", _TREE_RULE, "Current Tree:", _TREE_SEP, _TREE_HEAD, _TREE_SEP]
        for node_id in sorted(self.tree):
            leaf = self.tree[node_id]
            cost = "INFINITY" if leaf.cumul_cost == MAX_COST else str(leaf.cumul_cost)
            for parent_id in sorted(leaf.eqco_parents):
                for pair in leaf.eqco_parents[parent_id]:
                    lines.append(
                        f"{format_addr(node_id):>20} : {cost:>17} : {format_addr(parent_id):>20}"
                        f" : {format_addr(pair.parent_ip):>20} : {format_addr(pair.child_ip):>20} :"
                    )
        lines.extend([_TREE_RULE, "Unseen nodes:"])
        lines.append("[ " + "".join(f"{format_addr(n)}, " for n in sorted(self.unseen)) + "]")
        lines.append("")
        return lines

    def format_tree(self) -> str:
        """Render the current tree and the set of unseen nodes."""
        return "\n".join(self._tree_lines()) + "\n"

    def print_tree(self) -> None:
        """Write the current tree and the unseen nodes to standard output."""
        for line in self._tree_lines():
            print(line)

    def _rei_lines(self) -> list[str]:
        lines = [_RULE, "", "Tree nodes reachability:", ""]
        for node_id, routes in self.nodes_rei.items():
            cost = routes[0].cumul_cost if routes else MAX_COST
            lines.append(f"Node: [{format_addr(node_id)}]; cost [{cost}]")
            lines.extend(
                f"  > via iface: {format_addr(r.local_ip)}; next-hop: {format_addr(r.nexthop_ip)}"
                for r in routes
            )
            lines.append("")
        return lines

    def format_rei(self) -> str:
        """Render the routes to every node of the tree."""
        return "\n".join(self._rei_lines()) + "\n"

    def print_rei(self) -> None:
        """Write the routes to every node of the tree to standard output."""
        for line in self._rei_lines():
            print(line)

    def _rib_lines(self) -> list[str]:
        lines = [_RULE, "", "Router Information Base:", ""]
        for net, origins in self.rib.items():
            lines.append(f"Net: {net}")
            for orig_id, routes in origins.items():
                lines.extend(
                    f"  > via iface: {format_addr(r.local_ip)}; next-hop: {format_addr(r.nexthop_ip)}"
                    f"; cost: {r.cumul_cost}; origin.: {format_addr(orig_id)}"
                    for r in routes
                )
            lines.append("")
        return lines

    def format_rib(self) -> str:
        """Render the router information base."""
        return "\n".join(self._rib_lines()) + "\n"

    def print_rib(self) -> None:
        """Write the router information base to standard output."""
        for line in self._rib_lines():
            print(line)
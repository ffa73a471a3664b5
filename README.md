# spfroute

`spfroute` computes shortest-path-first routes over an IPv4 link-state
database, the way an OSPF router builds its routing table. Given a graph of
one-directional adjacencies and a root node, it builds the shortest-path tree
with Dijkstra's algorithm and derives:

- the reachability of every node in the tree, with all equal-cost next hops;
- a router information base (RIB) with routes to every network and loopback,
  keeping every equal-cost originator.

Loopbacks (`/32` masks) and stub networks (neighbour address `0.0.0.0`) are
listed in the RIB but are not followed when building the tree. Nodes that
cannot be reached from the root are dropped from the tree.

## Installation

```
pip install .
```

## Command line

```
spfroute <db_filename> <root_node> <debug_mode>
```

- `db_filename` is a binary adjacency database. Each record is six
  little-endian 32-bit unsigned integers: node ID, local interface IP, mask,
  cost, neighbour IP and neighbour node ID. A trailing partial record is
  ignored. If the file cannot be read, `Error opening file.` is printed and
  the calculation runs on an empty graph.
- `root_node` is the dotted IPv4 ID of the node to calculate from. An address
  that does not parse is reported on standard error and the command exits
  with status 2.
- `debug_mode` is `debug` or `nodebug` (anything other than `debug` counts as
  `nodebug`). With `debug` the graph, every step of the tree calculation, the
  paths found and the node reachability are printed as well as the RIB.

With the wrong number of arguments a usage line is printed. The last line of
normal output reports the state the calculation ended in: `ready`, or
`error in graph data` if the root node is not in the graph.

## Library use

```python
from spfroute.example_table import example_graph
from spfroute.dijkstra import Dijkstra
from spfroute.graph import parse_addr

graph = example_graph()
graph.print_graph()

spf = Dijkstra(parse_addr("10.0.0.1"), graph, False)
print(spf.state.value)      # "ready"
print(spf.format_rib())
```

### `spfroute.graph`

- `parse_addr`, `format_addr` and `mask_len` convert between dotted quads,
  32-bit integers and prefix lengths.
- `Graph` holds the adjacencies of each node. Add them one at a time with
  `add_link(node_id, LinkAdjacency(...))`, from `LinkRecord` rows written with
  dotted addresses with `add_links`, or from a binary file with
  `add_links_from_file`, which returns the number of records loaded and raises
  `OSError` if the file cannot be read.
- `links(node_id)` and `nodes()` list adjacencies and node ids; `len(graph)`
  is the number of nodes. `add_name` and `id_to_name` attach and look up host
  names. `format_graph` returns the database as text and `print_graph` prints
  it.

### `spfroute.dijkstra`

`Dijkstra(root_id, graph, debug)` runs the calculation at once; `root_id` may
be an integer or a dotted quad. After it, `state` is a `DijkstraState`,
`tree` maps node ids to `Leaf` entries, `nodes_rei` maps node ids to lists of
`RouteInfo`, and `rib` maps each `DestinationNet` to its originating nodes and
their routes.

`reinit` runs the calculation again with a different root or graph.
`format_tree`, `format_rei` and `format_rib` return the tree, the node
reachability and the RIB as text; `print_tree`, `print_rei` and `print_rib`
print them. `set_debug` and `unset_debug` turn the step-by-step trace on and
off.

### `spfroute.example_table`

`ADJACENCY_TABLE` is a sample topology of nine routers with equal-cost paths,
parallel links and stub networks; `example_graph()` returns a fresh `Graph`
loaded with it.

## What it does not do

`spfroute` only calculates. It does not take part in a routing protocol,
exchange link-state data with other routers, or install routes into an
operating system. It reads adjacency databases but has no way to write them.
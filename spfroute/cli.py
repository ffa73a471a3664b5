"""Command line: load a binary adjacency database and print the routes of a root."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from spfroute.dijkstra import Dijkstra
from spfroute.graph import Graph, parse_addr

_USAGE = (
    "\nSyntax : spfroute <db_filename> <root_node> <debug_mode>\n"
    "debug_mode = [debug|nodebug]"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculation for the given database file and root node."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print(_USAGE)
        return 0
    db_path, root_text, mode = args
    debug = mode == "debug"

    graph = Graph()
    try:
        graph.add_links_from_file(db_path)
    except OSError:
        print("Error opening file.")
    else:
        print("\nFile opened : ok.")

    if debug:
        graph.print_graph()

    try:
        root_id = parse_addr(root_text)
    except ValueError:
        print(f"Invalid root node address: {root_text}", file=sys.stderr)
        return 2

    djk = Dijkstra(root_id, graph, debug)
    if debug:
        djk.print_rei()
    djk.print_rib()
    print(f"Dijkstra FSM response : {djk.state.value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
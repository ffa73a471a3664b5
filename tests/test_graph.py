import struct

import pytest

from spfroute.graph import (
    Graph,
    GraphState,
    LinkAdjacency,
    LinkRecord,
    format_addr,
    mask_len,
    parse_addr,
)


def _link(local, mask, cost, neigh_ip, neigh_id):
    return LinkAdjacency(
        parse_addr(local), parse_addr(mask), cost, parse_addr(neigh_ip), parse_addr(neigh_id)
    )


@pytest.mark.parametrize(
    "text", ["10.0.0.1", "172.16.172.66", "255.255.255.252", "0.0.0.0", "192.168.168.7"]
)
def test_addr_round_trip(text):
    assert format_addr(parse_addr(text)) == text


def test_parse_addr_is_big_endian_value():
    assert parse_addr("10.0.0.1") == 0x0A000001


def test_parse_addr_rejects_garbage():
    with pytest.raises(ValueError):
        parse_addr("10.0.0.256")


def test_format_addr_rejects_out_of_range():
    with pytest.raises(ValueError):
        format_addr(1 << 32)


def test_mask_len_full_mask():
    assert mask_len(parse_addr("255.255.255.255")) == 32


def test_mask_len_ordering_and_string_input():
    assert mask_len("255.255.255.252") == mask_len("255.255.255.248") + 1
    assert mask_len("255.255.255.0") == mask_len(parse_addr("255.255.255.0"))
    assert mask_len(0) == 0


def test_add_link_and_lookup():
    graph = Graph()
    node = parse_addr("10.0.0.1")
    link = _link("10.254.241.2", "255.255.255.252", 5, "10.254.241.1", "172.16.0.1")
    graph.add_link(node, link)
    assert graph.links(node) == [link]
    assert graph.nodes() == [node]
    assert len(graph) == 1
    assert graph.state is GraphState.IDLE


def test_links_of_unknown_node_is_empty_and_does_not_add_node():
    graph = Graph()
    assert graph.links(parse_addr("1.2.3.4")) == []
    assert len(graph) == 0


def test_links_returns_copy():
    graph = Graph()
    node = parse_addr("10.0.0.1")
    graph.add_link(node, _link("10.0.0.1", "255.255.255.255", 0, "10.0.0.1", "10.0.0.1"))
    graph.links(node).clear()
    assert len(graph.links(node)) == 1


def test_add_links_parses_records_and_keeps_order():
    graph = Graph()
    records = [
        LinkRecord("10.0.0.3", "10.254.241.50", "255.255.255.252", 10, "10.254.241.49", "10.0.0.1"),
        LinkRecord("10.0.0.1", "10.254.241.49", "255.255.255.248", 11, "10.254.241.50", "10.0.0.3"),
        LinkRecord("10.0.0.3", "10.254.241.18", "255.255.255.252", 2, "10.254.241.17", "192.168.168.7"),
    ]
    graph.add_links(records)
    assert graph.nodes() == sorted([parse_addr("10.0.0.1"), parse_addr("10.0.0.3")])
    assert graph.links(parse_addr("10.0.0.3")) == [
        _link("10.254.241.50", "255.255.255.252", 10, "10.254.241.49", "10.0.0.1"),
        _link("10.254.241.18", "255.255.255.252", 2, "10.254.241.17", "192.168.168.7"),
    ]


def test_add_links_from_file_matches_add_link(tmp_path):
    rows = [
        ("10.0.0.1", "10.254.241.2", "255.255.255.252", 5, "10.254.241.1", "172.16.0.1"),
        ("172.16.0.1", "10.254.241.1", "255.255.255.252", 5, "10.254.241.2", "10.0.0.1"),
        ("172.16.0.1", "8.8.8.2", "255.255.255.0", 17, "0.0.0.0", "0.0.0.0"),
    ]
    path = tmp_path / "db.bin"
    data = b"".join(
        struct.pack(
            "<6I",
            parse_addr(n), parse_addr(l), parse_addr(m), c, parse_addr(ni), parse_addr(nid),
        )
        for n, l, m, c, ni, nid in rows
    )
    path.write_bytes(data + b"\x01\x02\x03")

    from_file = Graph()
    loaded = from_file.add_links_from_file(path)

    expected = Graph()
    expected.add_links(LinkRecord(*row) for row in rows)

    assert loaded == len(rows)
    assert from_file.nodes() == expected.nodes()
    for node in expected.nodes():
        assert from_file.links(node) == expected.links(node)
    assert from_file.state is GraphState.IDLE


def test_add_links_from_missing_file_raises(tmp_path):
    graph = Graph()
    with pytest.raises(FileNotFoundError):
        graph.add_links_from_file(tmp_path / "missing.bin")
    assert graph.state is GraphState.IDLE
    assert len(graph) == 0


def test_hostnames():
    graph = Graph()
    node = parse_addr("10.0.0.1")
    graph.add_name(node, "core-router")
    assert graph.id_to_name(node) == "core-router"
    assert graph.id_to_name(parse_addr("10.0.0.2")) == ""


def test_format_graph_contents():
    graph = Graph()
    graph.add_links(
        [
            LinkRecord("10.0.0.1", "10.254.241.2", "255.255.255.252", 5, "10.254.241.1", "172.16.0.1"),
            LinkRecord("10.0.0.1", "10.0.0.1", "255.255.255.255", 0, "10.0.0.1", "10.0.0.1"),
            LinkRecord("172.16.0.1", "10.254.241.1", "255.255.255.252", 5, "10.254.241.2", "10.0.0.1"),
        ]
    )
    text = graph.format_graph()
    assert text.startswith("\nGraph database\n")
    assert "[ NodeId: 10.0.0.1 ]" in text
    assert "[ NodeId: 172.16.0.1 ]" in text
    assert "neigh.: [172.16.0.1]" in text
    assert text.index("[ NodeId: 10.0.0.1 ]") < text.index("[ NodeId: 172.16.0.1 ]")
    assert text.endswith("---\nTotal nodes: 2. Total adjacent links: 3\n")


def test_print_graph_matches_format(capsys):
    graph = Graph()
    graph.add_link(
        parse_addr("10.0.0.1"),
        _link("10.254.241.2", "255.255.255.252", 5, "10.254.241.1", "172.16.0.1"),
    )
    graph.print_graph()
    assert capsys.readouterr().out == graph.format_graph()
import struct

import pytest

from spfroute.cli import main
from spfroute.example_table import ADJACENCY_TABLE
from spfroute.graph import parse_addr


@pytest.fixture
def db_file(tmp_path):
    path = tmp_path / "adjacency.bin"
    path.write_bytes(
        b"".join(
            struct.pack(
                "<6I",
                parse_addr(r.node_id),
                parse_addr(r.local_ip),
                parse_addr(r.mask),
                r.cost,
                parse_addr(r.neigh_ip),
                parse_addr(r.neigh_id),
            )
            for r in ADJACENCY_TABLE
        )
    )
    return path


def test_usage_on_wrong_arguments(capsys):
    assert main(["only-one"]) == 0
    out = capsys.readouterr().out
    assert "Syntax :" in out
    assert "debug_mode = [debug|nodebug]" in out


def test_successful_run(db_file, capsys):
    assert main([str(db_file), "10.0.0.1", "nodebug"]) == 0
    out = capsys.readouterr().out
    assert "File opened : ok." in out
    assert "Router Information Base:" in out
    assert "Net: 10.0.0.1/32" in out
    assert out.rstrip().endswith("Dijkstra FSM response : ready")
    assert "Graph database" not in out


def test_debug_run(db_file, capsys):
    assert main([str(db_file), "10.0.0.1", "debug"]) == 0
    out = capsys.readouterr().out
    assert "Graph database" in out
    assert "Tree nodes reachability:" in out
    assert "Current Tree:" in out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.bin"), "10.0.0.1", "nodebug"]) == 0
    out = capsys.readouterr().out
    assert "Error opening file." in out
    assert "Dijkstra FSM response : error in graph data" in out


def test_unknown_root(db_file, capsys):
    assert main([str(db_file), "1.2.3.4", "nodebug"]) == 0
    assert "Dijkstra FSM response : error in graph data" in capsys.readouterr().out


def test_invalid_root(db_file, capsys):
    assert main([str(db_file), "not-an-address", "nodebug"]) == 2
    assert "not-an-address" in capsys.readouterr().err
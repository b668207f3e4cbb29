import logging

import pytest

from routefinder.errors import CycleDetected, InvalidRecord
from routefinder.records import build_graph, parse_records, read_records

INPUT = """\
1;Lenina 1;2
2;Lenina 2;3
3;Mira 10;
4;Mira 12;3

5;Sadovaya 7
"""


def test_parse_records():
    records = parse_records(INPUT.splitlines(keepends=True))
    assert records == [
        ["1", "Lenina 1", "2"],
        ["2", "Lenina 2", "3"],
        ["3", "Mira 10"],
        ["4", "Mira 12", "3"],
        ["5", "Sadovaya 7"],
    ]


def test_parse_records_delimiter():
    assert parse_records(["a,b,c\n"], delimiter=",") == [["a", "b", "c"]]


def test_read_records(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(INPUT, encoding="utf-8")
    records = read_records(path)
    assert len(records) == 5
    assert all(len(r) in (2, 3) for r in records)


def test_read_records_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_records(tmp_path / "no_such_file.txt")


def test_build_graph():
    graph = build_graph(parse_records(INPUT.splitlines()))
    assert graph.size() == 5
    assert graph.get_payload("4") == "Mira 12"
    assert graph.edge_exists("1", "2")
    assert graph.edge_exists("4", "3")
    assert not graph.edge_exists("3", "4")
    assert {v.id for v in graph.leaves()} == {"3", "5"}


def test_build_graph_payload_set_after_edge():
    graph = build_graph([["1", "a", "2"], ["2", "b"]])
    assert graph.get_payload("2") == "b"


def test_build_graph_short_record():
    with pytest.raises(InvalidRecord, match="record 2"):
        build_graph([["1", "a"], ["2"]])


def test_build_graph_cycle():
    with pytest.raises(CycleDetected):
        build_graph([["1", "a", "2"], ["2", "b", "1"]])


def test_build_graph_skip_invalid(caplog):
    with caplog.at_level(logging.ERROR):
        graph = build_graph(
            [["1", "a", "2"], ["x"], ["2", "b", "1"], ["3", "c"]], skip_invalid=True
        )
    assert graph.size() == 3
    assert graph.edge_exists("1", "2")
    assert graph.vertex("2").successor is None
    assert len(caplog.records) == 2


def test_build_graph_second_successor_warns(caplog):
    with caplog.at_level(logging.WARNING):
        graph = build_graph([["1", "a", "2"], ["1", "a2", "3"]])
    assert graph.get_payload("1") == "a2"
    assert not graph.contains("3")
    assert "already leads to 2" in caplog.text


def test_whitespace_line_is_invalid():
    records = parse_records(["1;a\n", "   \n"])
    assert records == [["1", "a"], ["   "]]
    with pytest.raises(InvalidRecord, match="record 2"):
        build_graph(records)

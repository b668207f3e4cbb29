"""Reading building records and building route graphs from them."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from routefinder.errors import InvalidRecord, RouteError
from routefinder.graph import RestrictedGraph

Record = List[str]

DELIMITER = ";"


def parse_records(lines: Iterable[str], delimiter: str = DELIMITER) -> List[Record]:
    """Split lines into records of delimiter-separated fields.

    Trailing empty fields are dropped, so "1;addr;" is a two-field record.
    Empty lines are skipped; a line of only spaces is kept as a one-field
    record.
    """
    records = []
    for number, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line:
            logging.debug("skipping blank line %d", number)
            continue
        fields = line.split(delimiter)
        while fields and fields[-1] == "":
            fields.pop()
        records.append(fields)
    return records


def read_records(
    path: Union[str, Path], delimiter: str = DELIMITER, encoding: str = "utf-8"
) -> List[Record]:
    """Read records from a text file."""
    logging.info("reading records from %s", path)
    with open(path, encoding=encoding) as f:
        records = parse_records(f, delimiter)
    logging.debug("read %d records", len(records))
    return records


def build_graph(
    records: Iterable[Sequence[str]], skip_invalid: bool = False
) -> RestrictedGraph[str]:
    """Build a graph from [building id, address, optional next id] records.

    Raises InvalidRecord for records with fewer than two fields. Errors from
    the graph (such as CycleDetected) propagate as well, unless skip_invalid is
    set, in which case they are logged and the record is skipped.
    """
    graph: RestrictedGraph[str] = RestrictedGraph()
    for number, record in enumerate(records, 1):
        try:
            add_record(graph, record, number)
        except RouteError as ex:
            if not skip_invalid:
                raise
            logging.error("record %d: %s", number, ex)
    logging.info("built %r", graph)
    return graph


def add_record(graph: RestrictedGraph[str], record: Sequence[str], number: int):
    if len(record) < 2:
        raise InvalidRecord(f"record {number} has {len(record)} field(s), expected 2 or 3")
    graph.add_or_update_vertex(record[0], record[1])
    next_id: Optional[str] = record[2] if len(record) > 2 else None
    if next_id is not None:
        if not graph.add_edge(record[0], next_id):
            logging.warning(
                "record %d: %s already leads to %s, ignoring %s",
                number,
                record[0],
                graph.vertices[record[0]].successor,
                next_id,
            )

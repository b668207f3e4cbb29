import pytest

from routefinder.graph import RestrictedGraph


@pytest.fixture
def graph():
    return RestrictedGraph()


def assert_leaves_consistent(graph):
    leaves = {v.id for v in graph.leaves()}
    assert leaves == {v.id for v in graph if v.successor is None}

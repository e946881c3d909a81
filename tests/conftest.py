"""
Pytest configuration and fixtures.
"""
import pytest
import sys
from collections import Counter
from pathlib import Path

import networkx as nx

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphcluster.graph.networkx_backend import NetworkXGraph


class CountingGraph(NetworkXGraph):
    """NetworkXGraph that records how often each accessor method is called."""

    def __init__(self, G):
        super().__init__(G)
        self.calls = Counter()

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


def _counted(name):
    def method(self, *args):
        self.calls[name] += 1
        return getattr(NetworkXGraph, name)(self, *args)
    method.__name__ = name
    return method


for _name in (
    "vertex_set", "edge_set", "contains_vertex", "contains_edge", "degree_of",
    "is_undirected", "edges_of", "incoming_edges_of", "outgoing_edges_of",
    "edge_source", "edge_target",
):
    setattr(CountingGraph, _name, _counted(_name))


@pytest.fixture
def counting():
    """Factory wrapping a networkx graph in a call-counting accessor."""
    return CountingGraph


@pytest.fixture
def triangle():
    """Three mutually connected vertices."""
    return nx.complete_graph(["v1", "v2", "v3"])


@pytest.fixture
def open_path():
    """v1 - v2 - v3 with v1 and v3 unconnected."""
    return nx.path_graph(["v1", "v2", "v3"])


@pytest.fixture
def directed_cycle():
    """v1 -> v2 -> v3 -> v1."""
    return nx.DiGraph([("v1", "v2"), ("v2", "v3"), ("v3", "v1")])


@pytest.fixture
def star():
    """Center c with five leaves."""
    G = nx.Graph()
    G.add_edges_from(("c", f"L{i}") for i in range(1, 6))
    return G


@pytest.fixture
def isolated_vertex():
    G = nx.Graph()
    G.add_node("v")
    return G

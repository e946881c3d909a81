"""
Unit tests for the neighborhood index.
"""
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import networkx as nx

from graphcluster.graph.neighbor_cache import NeighborCache
from graphcluster.graph.networkx_backend import NetworkXGraph


@pytest.fixture
def directed():
    """a -> b, c -> a, a <-> d, plus a self-loop on a."""
    G = nx.DiGraph([("a", "b"), ("c", "a"), ("a", "d"), ("d", "a"), ("a", "a")])
    return NetworkXGraph(G)


def test_directed_predecessors_and_successors(directed):
    cache = NeighborCache(directed)
    assert cache.predecessors_of("a") == {"a", "c", "d"}
    assert cache.successors_of("a") == {"a", "b", "d"}
    assert cache.predecessors_of("b") == {"a"}
    assert cache.successors_of("b") == frozenset()


def test_neighbors_are_union_without_self(directed):
    cache = NeighborCache(directed)
    assert cache.neighbors_of("a") == {"b", "c", "d"}
    assert cache.neighbors_of("c") == {"a"}


def test_undirected_sets_coincide():
    cache = NeighborCache(NetworkXGraph(nx.path_graph(4)))
    assert cache.neighbors_of(1) == {0, 2}
    assert cache.predecessors_of(1) == {0, 2}
    assert cache.successors_of(1) == {0, 2}


def test_multigraph_deduplicates():
    G = nx.MultiDiGraph([(1, 2), (1, 2), (2, 1), (3, 1)])
    cache = NeighborCache(NetworkXGraph(G))
    assert cache.successors_of(1) == {2}
    assert cache.predecessors_of(1) == {2, 3}
    assert cache.neighbors_of(1) == {2, 3}


def test_sets_are_cached(counting):
    graph = counting(nx.complete_graph(4))
    cache = NeighborCache(graph)

    first = cache.neighbors_of(0)
    second = cache.neighbors_of(0)
    assert first is second
    assert graph.calls["edges_of"] == 1

    cache.predecessors_of(0)
    cache.predecessors_of(0)
    cache.successors_of(0)
    cache.successors_of(0)
    assert graph.calls["incoming_edges_of"] == 1
    assert graph.calls["outgoing_edges_of"] == 1


def test_isolated_vertex_has_empty_sets(isolated_vertex):
    cache = NeighborCache(NetworkXGraph(isolated_vertex))
    assert cache.neighbors_of("v") == frozenset()
    assert cache.predecessors_of("v") == frozenset()
    assert cache.successors_of("v") == frozenset()

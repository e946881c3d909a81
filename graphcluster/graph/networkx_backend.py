"""
NetworkX backend for the clustering engine.

Adapts any networkx graph class (Graph, DiGraph, MultiGraph, MultiDiGraph)
to the GraphAccessor contract and provides triangle counting.

Edges are (u, v) tuples for simple graphs and (u, v, key) triples for
multigraphs, exactly as networkx reports them. Degrees follow networkx, so
a self-loop adds 2 to the degree of its vertex.
"""
import logging

import networkx as nx

from .interfaces import GraphAccessor
from .neighbor_cache import NeighborCache

logger = logging.getLogger(__name__)


class NetworkXGraph:
    """Read-only GraphAccessor over a networkx graph."""

    def __init__(self, G: nx.Graph):
        if G is None:
            raise TypeError("graph must not be None")
        if not isinstance(G, nx.Graph):
            raise TypeError(f"expected a networkx graph, got {type(G).__name__}")
        self.G = G
        self._multi = G.is_multigraph()
        self._directed = G.is_directed()

    def __repr__(self):
        return (
            f"NetworkXGraph({type(self.G).__name__}, "
            f"nodes={self.G.number_of_nodes()}, edges={self.G.number_of_edges()})"
        )

    def vertex_set(self):
        return self.G.nodes

    def edge_set(self):
        if self._multi:
            return self.G.edges(keys=True)
        return self.G.edges

    def contains_vertex(self, v) -> bool:
        return v in self.G

    def contains_edge(self, u, v) -> bool:
        return self.G.has_edge(u, v)

    def degree_of(self, v) -> int:
        return self.G.degree[v]

    def is_undirected(self) -> bool:
        return not self._directed

    def edges_of(self, v):
        if not self._directed:
            return self._edges(self.G.edges, v)
        # a self-loop shows up on both sides
        incoming = self._edges(self.G.in_edges, v)
        outgoing = [e for e in self._edges(self.G.out_edges, v) if e[0] != e[1]]
        return incoming + outgoing

    def incoming_edges_of(self, v):
        if not self._directed:
            return self._edges(self.G.edges, v)
        return self._edges(self.G.in_edges, v)

    def outgoing_edges_of(self, v):
        if not self._directed:
            return self._edges(self.G.edges, v)
        return self._edges(self.G.out_edges, v)

    def edge_source(self, e):
        return e[0]

    def edge_target(self, e):
        return e[1]

    def _edges(self, view, v) -> list:
        if self._multi:
            return list(view(v, keys=True))
        return list(view(v))


def as_accessor(graph) -> GraphAccessor:
    """Return graph unchanged if it is already an accessor, else wrap it."""
    if graph is None:
        raise TypeError("graph must not be None")
    if isinstance(graph, nx.Graph):
        return NetworkXGraph(graph)
    return graph


class NetworkXTriangleCounter:
    """
    Triangle oracle backed by networkx.triangles.

    Counts 3-cliques of the simple undirected projection of the graph:
    parallel edges are collapsed, self-loops ignored and arc direction
    dropped, so in a directed graph three vertices form a triangle when each
    pair is joined by an arc in at least one direction.
    """

    def triangle_count(self, graph: GraphAccessor) -> int:
        if not isinstance(graph, NetworkXGraph):
            raise TypeError(
                f"NetworkXTriangleCounter needs a NetworkXGraph, got {type(graph).__name__}"
            )
        simple = nx.Graph(graph.G)
        simple.remove_edges_from(list(nx.selfloop_edges(simple)))
        # every triangle is reported once per corner
        count = sum(nx.triangles(simple).values()) // 3
        logger.debug(f"Counted {count} triangles on {simple.number_of_nodes()} vertices")
        return count


class AccessorTriangleCounter:
    """
    Triangle oracle that only uses the GraphAccessor contract.

    Same semantics as NetworkXTriangleCounter: triangles of the simple
    undirected projection. Each triangle is counted once, from its
    lowest-ranked vertex in vertex_set() order.
    """

    def triangle_count(self, graph: GraphAccessor) -> int:
        neighbors = NeighborCache(graph)
        rank = {v: i for i, v in enumerate(graph.vertex_set())}

        count = 0
        for u, ru in rank.items():
            higher = {w for w in neighbors.neighbors_of(u) if rank[w] > ru}
            for v in higher:
                rv = rank[v]
                for w in higher & neighbors.neighbors_of(v):
                    if rank[w] > rv:
                        count += 1

        logger.debug(f"Counted {count} triangles on {len(rank)} vertices")
        return count

"""
Neighborhood index.

Caches, per vertex, the set of predecessors, successors and undirected
neighbors derived from a GraphAccessor. Sets are built on first request and
kept for the lifetime of the cache, so one instance should be shared by every
vertex visited during a pass over the graph.
"""
from .interfaces import GraphAccessor


class NeighborCache:
    """Lazily built predecessor / successor / neighbor sets of a graph."""

    def __init__(self, graph: GraphAccessor):
        self.graph = graph
        self._predecessors: dict = {}
        self._successors: dict = {}
        self._neighbors: dict = {}

    def _opposite(self, e, v):
        source = self.graph.edge_source(e)
        return self.graph.edge_target(e) if source == v else source

    def predecessors_of(self, v) -> frozenset:
        """Vertices with an edge into v (all adjacent vertices if undirected)."""
        found = self._predecessors.get(v)
        if found is None:
            found = frozenset(self._opposite(e, v) for e in self.graph.incoming_edges_of(v))
            self._predecessors[v] = found
        return found

    def successors_of(self, v) -> frozenset:
        """Vertices reached by an edge out of v (all adjacent vertices if undirected)."""
        found = self._successors.get(v)
        if found is None:
            found = frozenset(self._opposite(e, v) for e in self.graph.outgoing_edges_of(v))
            self._successors[v] = found
        return found

    def neighbors_of(self, v) -> frozenset:
        """Vertices adjacent to v in either direction, v itself excluded."""
        found = self._neighbors.get(v)
        if found is None:
            found = frozenset(
                u for u in (self._opposite(e, v) for e in self.graph.edges_of(v)) if u != v
            )
            self._neighbors[v] = found
        return found

"""
Contracts between the clustering engine and the graphs it reads.

Two independent capabilities are consumed:
- GraphAccessor: structural queries (vertices, edges, degree, edge test,
  directedness, incident edges)
- TriangleCounter: the total number of triangles of a graph

and one is provided:
- VertexScoringAlgorithm: a per-vertex score mapping

Any backend satisfying these protocols can be analysed; see
networkx_backend for the networkx implementation.
"""
from typing import Any, Collection, Hashable, Iterable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class GraphAccessor(Protocol):
    """Read-only view of a graph. Must not change while an engine uses it."""

    def vertex_set(self) -> Collection[Hashable]:
        """All vertices, in an order that is stable across calls."""
        ...

    def edge_set(self) -> Collection[Any]: ...

    def contains_vertex(self, v: Hashable) -> bool: ...

    def contains_edge(self, u: Hashable, v: Hashable) -> bool:
        """True if an edge u -> v exists (either direction if undirected)."""
        ...

    def degree_of(self, v: Hashable) -> int: ...

    def is_undirected(self) -> bool: ...

    def edges_of(self, v: Hashable) -> Iterable[Any]:
        """All edges touching v."""
        ...

    def incoming_edges_of(self, v: Hashable) -> Iterable[Any]: ...

    def outgoing_edges_of(self, v: Hashable) -> Iterable[Any]: ...

    def edge_source(self, e: Any) -> Hashable: ...

    def edge_target(self, e: Any) -> Hashable: ...


@runtime_checkable
class TriangleCounter(Protocol):
    """Reports how many triangles a graph contains."""

    def triangle_count(self, graph: GraphAccessor) -> int: ...


@runtime_checkable
class VertexScoringAlgorithm(Protocol):
    """An algorithm assigning a score to every vertex of a graph."""

    def score_map(self) -> Mapping[Hashable, float]: ...

    def vertex_score(self, v: Hashable) -> float: ...

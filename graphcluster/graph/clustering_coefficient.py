"""
Clustering coefficients of directed and undirected graphs.

Computes, for one graph:
- the local clustering coefficient of every vertex (Watts & Strogatz, 1998)
- the global clustering coefficient, 3 x triangles / triplets (Luce & Perry, 1949)
- the average clustering coefficient, the mean of the local ones

Every result is computed on first request and then kept for the lifetime of
the instance. The graph must not change while an instance is in use; nothing
here detects mutation. Instances are not thread safe.

Running time is O(|V| + Δ(G)²) where Δ(G) is the maximum degree.
"""
import logging
import math
from functools import cached_property
from types import MappingProxyType
from typing import Mapping

from .interfaces import GraphAccessor, TriangleCounter
from .neighbor_cache import NeighborCache
from .networkx_backend import (
    AccessorTriangleCounter,
    NetworkXGraph,
    NetworkXTriangleCounter,
    as_accessor,
)

logger = logging.getLogger(__name__)


class ClusteringCoefficient:
    """
    Local, global and average clustering coefficient of a graph.

    Usage:
        cc = ClusteringCoefficient(nx.karate_club_graph())
        cc.global_coefficient()
        cc.average_coefficient()
        cc.vertex_score(0)
    """

    def __init__(self, graph, triangle_counter: TriangleCounter | None = None):
        """
        Args:
            graph: a GraphAccessor, or a networkx graph which gets wrapped
            triangle_counter: oracle for the global coefficient; defaults to
                networkx counting for networkx graphs and to neighbor-set
                intersection for any other accessor

        Raises:
            TypeError: if graph is None
        """
        self.graph: GraphAccessor = as_accessor(graph)

        if triangle_counter is None:
            if isinstance(self.graph, NetworkXGraph):
                triangle_counter = NetworkXTriangleCounter()
            else:
                triangle_counter = AccessorTriangleCounter()
        self.triangle_counter = triangle_counter

    # --------------------------------------------------------
    # Public queries
    # --------------------------------------------------------

    def global_coefficient(self) -> float:
        """
        Global clustering coefficient, 3 x number_of_triangles / number_of_triplets.

        A triplet is three vertices joined by two (open) or three (closed)
        edges. Undirected graphs count deg(v) choose 2 triplets per vertex,
        directed graphs |predecessors(v)| x |successors(v)|.

        A graph without triplets yields nan (no triangles either) or inf,
        the way IEEE division by zero does.
        """
        return self._global

    def average_coefficient(self) -> float:
        """
        Mean of the local clustering coefficients.

        Note: the average is 0 for a graph without vertices.
        """
        return self._average

    def score_map(self) -> Mapping:
        """Read-only mapping of every vertex to its local clustering coefficient."""
        return self._score_view

    def vertex_score(self, v) -> float:
        """
        Local clustering coefficient of one vertex.

        Raises:
            ValueError: if v is not a vertex of the graph
        """
        if not self._is_known_vertex(v):
            raise ValueError("Cannot return score of unknown vertex")
        return self._scores[v]

    # --------------------------------------------------------
    # Memoized artifacts
    # --------------------------------------------------------

    @cached_property
    def _neighbor_cache(self) -> NeighborCache:
        return NeighborCache(self.graph)

    @cached_property
    def _scores(self) -> dict:
        neighbor_cache = self._neighbor_cache
        contains_edge = self.graph.contains_edge

        scores = {}
        for v in self.graph.vertex_set():
            neighbourhood = neighbor_cache.neighbors_of(v)
            k = len(neighbourhood)
            if k <= 1:
                scores[v] = 0.0
                continue

            links = 0
            for p in neighbourhood:
                for q in neighbourhood:
                    if contains_edge(p, q):
                        links += 1
            scores[v] = links / (k * (k - 1))

        logger.debug(f"Computed local clustering coefficients for {len(scores)} vertices")
        return scores

    @cached_property
    def _score_view(self) -> Mapping:
        return MappingProxyType(self._scores)

    @cached_property
    def _global(self) -> float:
        triplets = self._count_triplets()
        closed = 3 * self.triangle_counter.triangle_count(self.graph)

        if triplets == 0:
            logger.warning("Graph has no triplets; global clustering coefficient is undefined")
            return math.nan if closed == 0 else math.inf

        value = closed / triplets
        logger.debug(f"Global clustering coefficient {value} ({closed} closed of {triplets} triplets)")
        return value

    @cached_property
    def _average(self) -> float:
        vertices = self.graph.vertex_set()
        if len(vertices) == 0:
            return 0.0

        scores = self._scores
        return sum(scores.values()) / len(scores)

    # --------------------------------------------------------
    # Helpers
    # --------------------------------------------------------

    def _count_triplets(self) -> float:
        triplets = 0.0
        if self.graph.is_undirected():
            for v in self.graph.vertex_set():
                degree = self.graph.degree_of(v)
                triplets += degree * (degree - 1) / 2
        else:
            neighbor_cache = self._neighbor_cache
            for v in self.graph.vertex_set():
                triplets += len(neighbor_cache.predecessors_of(v)) * len(neighbor_cache.successors_of(v))
        return triplets

    def _is_known_vertex(self, v) -> bool:
        # once scores exist their keys are exactly the vertex set
        scores = self.__dict__.get("_scores")
        try:
            if scores is None:
                return self.graph.contains_vertex(v)
            return v in scores
        except TypeError:
            # unhashable, so never a vertex
            return False

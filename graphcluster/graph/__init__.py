"""
Graph module - clustering coefficients over pluggable graph backends.

Provides:
- ClusteringCoefficient: local, global and average clustering coefficient
- NeighborCache: per-vertex predecessor / successor / neighbor sets
- Graph and triangle-counting contracts, with a NetworkX backend
- Summary helpers for analysis pipelines
"""
from .interfaces import GraphAccessor, TriangleCounter, VertexScoringAlgorithm
from .neighbor_cache import NeighborCache
from .networkx_backend import (
    NetworkXGraph,
    NetworkXTriangleCounter,
    AccessorTriangleCounter,
    as_accessor,
)
from .clustering_coefficient import ClusteringCoefficient
from .network_analysis import clustering_summary, high_clustering_vertices

__all__ = [
    "GraphAccessor",
    "TriangleCounter",
    "VertexScoringAlgorithm",
    "NeighborCache",
    "NetworkXGraph",
    "NetworkXTriangleCounter",
    "AccessorTriangleCounter",
    "as_accessor",
    "ClusteringCoefficient",
    "clustering_summary",
    "high_clustering_vertices",
]

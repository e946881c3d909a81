"""
graphcluster - clustering coefficients for network analysis

Computes the local, global and average clustering coefficient of directed
and undirected graphs, with lazily computed and memoized results.

Modules:
    core        - Configuration and result schemas
    graph       - Clustering engine, neighborhood index, NetworkX backend
"""
from .graph import ClusteringCoefficient, clustering_summary

__version__ = "0.1.0"

__all__ = ["ClusteringCoefficient", "clustering_summary"]

"""
NetworkX analytics helpers built on the clustering engine.

Provides:
- clustering_summary: global, average and local coefficients in one model
- high_clustering_vertices: vertices whose neighborhood is densely linked
"""
import logging

from ..core.config import get_settings
from ..core.schemas import ClusteringSummary
from .clustering_coefficient import ClusteringCoefficient
from .interfaces import TriangleCounter

logger = logging.getLogger(__name__)


def clustering_summary(G, triangle_counter: TriangleCounter | None = None) -> ClusteringSummary:
    """
    Compute all clustering coefficients of a graph.

    Scores are rounded to the configured precision; the global coefficient
    is passed through untouched so nan / inf stay detectable.
    """
    cc = ClusteringCoefficient(G, triangle_counter)
    precision = get_settings().analysis.precision

    scores = cc.score_map()
    summary = ClusteringSummary(
        vertex_count=len(scores),
        directed=not cc.graph.is_undirected(),
        global_coefficient=cc.global_coefficient(),
        average_coefficient=round(cc.average_coefficient(), precision),
        scores={v: round(s, precision) for v, s in scores.items()},
    )

    logger.info(
        f"Clustering of {summary.vertex_count} vertices: "
        f"global={summary.global_coefficient}, average={summary.average_coefficient}"
    )
    return summary


def high_clustering_vertices(G, threshold: float = 0.5) -> set:
    """
    Vertices whose local clustering coefficient is strictly above threshold.

    Scores can exceed 1 when neighbors carry self-loops, so any
    non-negative threshold is accepted.
    """
    if threshold < 0.0:
        raise ValueError(f"threshold must not be negative, got {threshold}")

    scores = ClusteringCoefficient(G).score_map()
    return {v for v, score in scores.items() if score > threshold}

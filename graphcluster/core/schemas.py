"""
Pydantic schemas for clustering results.
"""
import math
from typing import Any

from pydantic import BaseModel, Field


class ClusteringSummary(BaseModel):
    """Graph-level and per-vertex clustering coefficients of one graph."""
    vertex_count: int = Field(..., ge=0, description="Number of vertices in the graph")
    directed: bool = Field(..., description="True if the triplet count used the directed formula")
    global_coefficient: float = Field(
        ...,
        description="3 x triangles / triplets; nan or inf when the graph has no triplets",
    )
    average_coefficient: float = Field(
        ..., ge=0.0, description="Mean local coefficient, 0 for an empty graph"
    )
    scores: dict[Any, float] = Field(default_factory=dict, description="Local coefficient per vertex")

    @property
    def is_global_defined(self) -> bool:
        return math.isfinite(self.global_coefficient)

    def to_dict(self) -> dict:
        return {
            "vertices": self.vertex_count,
            "directed": self.directed,
            "global": self.global_coefficient,
            "average": self.average_coefficient,
            "scores": dict(self.scores),
        }

"""Pydantic models for clustering options supplied as mappings (YAML, JSON)."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .clustering.config import DEFAULT_BBOX_CACHE_SIZE, DEFAULT_DISTANCE, ClusteringConfig


class ClusterOptions(BaseModel):
    """Clustering options, accepted under their camelCase or snake_case names."""

    distance: float = Field(DEFAULT_DISTANCE, gt=0, description="Merge radius in pixels")
    minimum_polygon_pixel_size: Optional[float] = Field(
        default=None, ge=0, alias="minimumPolygonPixelSize"
    )
    minimum_line_pixel_size: Optional[float] = Field(
        default=None, ge=0, alias="minimumLinePixelSize"
    )
    disable_dynamic_clustering: bool = Field(False, alias="disableDynamicClustering")
    cluster_points_only: bool = Field(False, alias="clusterPointsOnly")
    threshold: Optional[int] = Field(default=None, ge=1)
    cluster_prefix: str = Field("", alias="clusterPrefix")
    neighbor_eligibility: Literal["candidate", "seed"] = Field(
        "candidate", alias="neighborEligibility"
    )
    bbox_cache_size: int = Field(DEFAULT_BBOX_CACHE_SIZE, ge=1, alias="bboxCacheSize")

    model_config = {"populate_by_name": True, "extra": "forbid"}

    def to_config(self) -> ClusteringConfig:
        return ClusteringConfig(**self.model_dump())

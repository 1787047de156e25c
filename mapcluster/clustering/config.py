"""Configuration for the clustering engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


NeighborEligibility = Literal["candidate", "seed"]

NEIGHBOR_ELIGIBILITY_MODES = ("candidate", "seed")

DEFAULT_DISTANCE = 20.0
DEFAULT_BBOX_CACHE_SIZE = 10_000


@dataclass
class ClusteringConfig:
    """Configuration for resolution-driven feature clustering."""

    distance: float = DEFAULT_DISTANCE
    """Pixel radius within which features merge into one cluster."""

    minimum_polygon_pixel_size: Optional[float] = None
    """Polygon size threshold used when only the display geometry is known. None = distance."""

    minimum_line_pixel_size: Optional[float] = None
    """Line size threshold; also applies to polygons with a known full bbox. None = distance."""

    disable_dynamic_clustering: bool = False
    """Turn off the size-based eligibility policy."""

    cluster_points_only: bool = False
    """With dynamic clustering disabled, only merge Point geometries."""

    threshold: Optional[int] = None
    """Neighbourhoods with fewer members than this stay as individual features. None = 1."""

    cluster_prefix: str = ""
    """Prefix for generated cluster ids."""

    neighbor_eligibility: NeighborEligibility = "candidate"
    """Whether neighbours are checked individually ("candidate") or through their seed ("seed")."""

    bbox_cache_size: int = DEFAULT_BBOX_CACHE_SIZE
    """Maximum number of reprojected bboxes kept by the engine."""

    def __post_init__(self) -> None:
        if self.distance <= 0:
            raise ValueError(f"distance must be positive, got {self.distance}")
        if self.minimum_polygon_pixel_size is None:
            self.minimum_polygon_pixel_size = self.distance
        if self.minimum_line_pixel_size is None:
            self.minimum_line_pixel_size = self.distance
        if self.minimum_polygon_pixel_size < 0 or self.minimum_line_pixel_size < 0:
            raise ValueError("minimum pixel sizes cannot be negative")
        if self.threshold is not None and self.threshold < 1:
            raise ValueError(f"threshold must be at least 1, got {self.threshold}")
        if self.neighbor_eligibility not in NEIGHBOR_ELIGIBILITY_MODES:
            raise ValueError(
                f"Unknown neighbor_eligibility '{self.neighbor_eligibility}'. "
                f"Expected one of: {', '.join(NEIGHBOR_ELIGIBILITY_MODES)}"
            )
        if self.bbox_cache_size < 1:
            raise ValueError("bbox_cache_size must be at least 1")

    @property
    def effective_threshold(self) -> int:
        return self.threshold if self.threshold is not None else 1

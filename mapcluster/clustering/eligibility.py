"""
Eligibility policy: which features may be merged into clusters.

Dynamic clustering (the default) merges features that would render smaller
than a few pixels at the current resolution and leaves larger ones alone.
Size is judged on the full bbox when it is known, since the displayed
geometry may be a simplification; otherwise on the displayed geometry.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..geometry import Extent, GeometryKind, ProjectionLike, get_height, get_width
from .bbox_cache import BoundingBoxCache
from .config import ClusteringConfig
from .features import SourceFeature


def _smaller_than(extent: Extent, resolution: float, limit: float) -> bool:
    width_px = get_width(extent) / resolution
    height_px = get_height(extent) / resolution
    return width_px < limit and height_px < limit


class EligibilityClassifier:
    """Decide whether a source feature is a candidate for clustering."""

    def __init__(self, config: ClusteringConfig, bbox_cache: BoundingBoxCache):
        self.config = config
        self.bbox_cache = bbox_cache

    def thresholds(self) -> Dict[GeometryKind, Optional[float]]:
        """
        Pixel thresholds used on the displayed geometry, per geometry kind.

        Points have no threshold: they are always small enough.
        """
        return {
            GeometryKind.POINT: None,
            GeometryKind.LINE: self.config.minimum_line_pixel_size,
            GeometryKind.POLYGON: self.config.minimum_polygon_pixel_size,
        }

    def is_eligible(
        self,
        feature: SourceFeature,
        resolution: float,
        projection: Optional[ProjectionLike] = None,
    ) -> bool:
        if feature.clustering_disabled:
            return False

        # Nothing to position a cluster on
        if feature.geometry.is_empty:
            return False

        if not self.config.disable_dynamic_clustering:
            return self._dynamic_eligibility(feature, resolution, projection)

        if self.config.cluster_points_only:
            return feature.kind is GeometryKind.POINT

        # Static mode without restriction: cluster everything
        return True

    def _dynamic_eligibility(
        self,
        feature: SourceFeature,
        resolution: float,
        projection: Optional[ProjectionLike],
    ) -> bool:
        full_bbox = self.bbox_cache.resolve(feature, projection)
        if full_bbox is not None:
            # The full geometry is compared against the line threshold
            # whatever its kind.
            return _smaller_than(full_bbox, resolution, self.config.minimum_line_pixel_size)

        limit = self.thresholds()[feature.kind]
        if limit is None:
            return True
        return _smaller_than(feature.extent, resolution, limit)

"""
Resolution-driven clustering of map features.

The engine sits between a feature store and whatever displays the features.
Each time the display asks for features at a new resolution (or in a new
projection) the engine recomputes its output set:

1. Every source feature is classified as eligible or not
2. Ineligible features are passed through untouched
3. Each eligible feature not yet absorbed seeds a cluster made of itself and
   the eligible features around it, within ``distance`` pixels
4. The new output set replaces the previous one in one step

Requests at an unchanged resolution and projection leave the output as is.

One engine owns its feature set: passes are synchronous and not guarded
against concurrent callers, and the bbox cache assumes no other engine
mutates the same features.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set, Tuple

from ..geometry import Extent, ProjectionLike, projection_code, same_projection
from ..store.vector_source import FeatureSource
from .bbox_cache import BoundingBoxCache
from .builder import ClusterBuilder
from .config import ClusteringConfig
from .diagnostics import ClusteringDiagnostics
from .eligibility import EligibilityClassifier
from .features import OutputFeature, SourceFeature
from .neighbors import NeighborFinder, memoized


logger = logging.getLogger(__name__)


class ClusteringEngine:
    """
    Replace nearby small features with cluster features.

    Args:
        source: Store supplying the features to cluster
        config: Clustering configuration (uses defaults if None)
        bbox_cache: Cache of reprojected bboxes (a private one if None)
    """

    def __init__(
        self,
        source: FeatureSource,
        config: Optional[ClusteringConfig] = None,
        bbox_cache: Optional[BoundingBoxCache] = None,
    ):
        self.source = source
        self.config = config or ClusteringConfig()
        self.bbox_cache = (
            bbox_cache if bbox_cache is not None
            else BoundingBoxCache(maxsize=self.config.bbox_cache_size)
        )
        self.classifier = EligibilityClassifier(self.config, self.bbox_cache)
        self.neighbor_finder = NeighborFinder(source, mode=self.config.neighbor_eligibility)
        self.builder = ClusterBuilder(prefix=self.config.cluster_prefix)

        self.resolution: Optional[float] = None
        self.projection: Optional[ProjectionLike] = None
        self.last_diagnostics: Optional[ClusteringDiagnostics] = None
        self._features: Tuple[OutputFeature, ...] = ()

    # -----------------------------
    # State
    # -----------------------------

    @property
    def features(self) -> Tuple[OutputFeature, ...]:
        """Current output set."""
        return self._features

    def get_features(self) -> List[OutputFeature]:
        return list(self._features)

    @property
    def next_cluster_id(self) -> int:
        return self.builder.next_id

    def reset_cluster_ids(self) -> None:
        """
        Restart cluster numbering at 1.

        Ids are otherwise never reused for the lifetime of the engine. After a
        reset, ids from earlier passes may be issued again, so consumers
        holding on to old cluster ids must drop them.
        """
        self.builder.reset()

    def set_resolution(self, resolution: Optional[float]) -> None:
        self.resolution = resolution

    def set_projection(self, projection: Optional[ProjectionLike]) -> None:
        """Switch projection; cached bboxes for the old one are dropped."""
        if not same_projection(projection, self.projection):
            self.bbox_cache.invalidate()
        self.projection = projection

    def needs_refresh(self, resolution: Optional[float], projection: Optional[ProjectionLike]) -> bool:
        return (
            resolution != self.resolution
            or not same_projection(projection, self.projection)
        )

    # -----------------------------
    # Recomputation
    # -----------------------------

    def load_features(
        self,
        extent: Extent,
        resolution: Optional[float],
        projection: Optional[ProjectionLike],
    ) -> bool:
        """
        Forward a load request to the store and recluster if the view changed.

        Returns:
            True if a recomputation pass ran
        """
        self.source.load_features(extent, resolution, projection)
        if not self.needs_refresh(resolution, projection):
            return False

        self.set_resolution(resolution)
        self.set_projection(projection)
        return self.cluster()

    def is_eligible(self, feature: SourceFeature) -> bool:
        return self.classifier.is_eligible(feature, self.resolution, self.projection)

    def cluster(self) -> bool:
        """
        Recompute the output set at the current resolution and projection.

        Returns:
            False without touching the output when no usable resolution is set
        """
        if self.resolution is None or self.resolution <= 0:
            return False

        resolution = self.resolution
        search_radius = self.config.distance * resolution
        threshold = self.config.effective_threshold
        source_features = self.source.get_features()

        diagnostics = ClusteringDiagnostics(
            resolution=resolution,
            projection=projection_code(self.projection),
            num_features=len(source_features),
        )

        is_eligible = memoized(self.is_eligible)
        clustered: Set[int] = set()
        ineligible: Set[int] = set()
        output: List[OutputFeature] = []

        for feature in source_features:
            if feature.uid in clustered:
                continue

            if feature.uid in ineligible or not is_eligible(feature):
                ineligible.add(feature.uid)
                output.append(feature)
                diagnostics.num_passthrough += 1
                continue

            candidates = self.neighbor_finder.query(feature, search_radius)
            members = self.neighbor_finder.select_members(
                feature, candidates, clustered, ineligible, is_eligible
            )

            if len(members) < threshold:
                output.extend(members)
                diagnostics.num_passthrough += len(members)
                diagnostics.num_collapsed += 1
                continue

            cluster = self.builder.build(members)
            output.append(cluster)
            diagnostics.num_clusters += 1
            diagnostics.cluster_sizes.append(cluster.size)
            if diagnostics.first_cluster_id is None:
                diagnostics.first_cluster_id = cluster.id
            diagnostics.last_cluster_id = cluster.id

        self._features = tuple(output)
        diagnostics.cache_stats = self.bbox_cache.stats()
        self.last_diagnostics = diagnostics

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Clustered {diagnostics.num_features} features at resolution {resolution}: "
                f"{diagnostics.num_clusters} clusters, {diagnostics.num_passthrough} pass-through, "
                f"{diagnostics.num_collapsed} below threshold; cache {diagnostics.cache_stats}"
            )
        return True

    def summary(self) -> Dict[str, Any]:
        """Engine state for logging and debugging."""
        return {
            "resolution": self.resolution,
            "projection": projection_code(self.projection),
            "num_output": len(self._features),
            "next_cluster_id": self.builder.next_id,
            "bbox_cache": self.bbox_cache.stats(),
        }

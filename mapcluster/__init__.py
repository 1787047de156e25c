"""
mapcluster: Resolution-driven clustering of map features.

Groups nearby points, and lines and polygons too small to matter at the
current zoom, into synthetic cluster features so a map shows fewer,
less-overlapping items.
"""

from .clustering import (
    BoundingBoxCache,
    ClusterFeature,
    ClusteringConfig,
    ClusteringDiagnostics,
    ClusteringEngine,
    SourceFeature,
    features_to_frame,
)
from .store import FeatureSource, VectorSource

__all__ = [
    "BoundingBoxCache",
    "ClusterFeature",
    "ClusteringConfig",
    "ClusteringDiagnostics",
    "ClusteringEngine",
    "SourceFeature",
    "features_to_frame",
    "FeatureSource",
    "VectorSource",
]

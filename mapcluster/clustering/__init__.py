"""
mapcluster/clustering: Resolution-driven clustering of map features.

This package provides the clustering engine and its parts: the bbox cache,
the eligibility policy, neighbor search, and cluster construction.
"""

from .bbox_cache import BoundingBoxCache
from .builder import ClusterBuilder
from .config import ClusteringConfig, NeighborEligibility
from .diagnostics import ClusteringDiagnostics, features_to_frame
from .eligibility import EligibilityClassifier
from .engine import ClusteringEngine
from .features import ClusterFeature, OutputFeature, SourceFeature
from .neighbors import NeighborFinder

__all__ = [
    "BoundingBoxCache",
    "ClusterBuilder",
    "ClusteringConfig",
    "NeighborEligibility",
    "ClusteringDiagnostics",
    "features_to_frame",
    "EligibilityClassifier",
    "ClusteringEngine",
    "ClusterFeature",
    "OutputFeature",
    "SourceFeature",
    "NeighborFinder",
]

"""
mapcluster/store: Feature stores feeding the clustering engine.
"""

from .vector_source import FeatureSource, VectorSource
from .geojson import read_feature, read_feature_collection

__all__ = [
    "FeatureSource",
    "VectorSource",
    "read_feature",
    "read_feature_collection",
]

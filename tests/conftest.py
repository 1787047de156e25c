"""
Pytest configuration and shared fixtures for mapcluster tests.

This file provides:
- Feature factories (points, lines, squares)
- Engine and store builders
- Sample GeoJSON data
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest
from shapely.geometry import LineString, Point, box

from mapcluster.clustering import ClusteringConfig, ClusteringEngine, SourceFeature
from mapcluster.store import VectorSource


# ==============================================================================
# Feature Factories
# ==============================================================================

@pytest.fixture
def make_point():
    """Factory for point features."""
    def factory(x: float, y: float, fid: Any = None, **kwargs) -> SourceFeature:
        return SourceFeature(id=fid, geometry=Point(x, y), **kwargs)
    return factory


@pytest.fixture
def make_square():
    """Factory for square polygon features anchored at their lower-left corner."""
    def factory(x: float, y: float, size: float, fid: Any = None, **kwargs) -> SourceFeature:
        return SourceFeature(id=fid, geometry=box(x, y, x + size, y + size), **kwargs)
    return factory


@pytest.fixture
def make_line():
    """Factory for line features."""
    def factory(coords: Sequence[Tuple[float, float]], fid: Any = None, **kwargs) -> SourceFeature:
        return SourceFeature(id=fid, geometry=LineString(coords), **kwargs)
    return factory


# ==============================================================================
# Engine Builders
# ==============================================================================

@pytest.fixture
def build_engine():
    """Factory returning (engine, source) for a list of features."""
    def factory(
        features: List[SourceFeature],
        config: Optional[ClusteringConfig] = None,
        **config_kwargs,
    ) -> Tuple[ClusteringEngine, VectorSource]:
        source = VectorSource(features)
        if config is None:
            config = ClusteringConfig(**config_kwargs)
        return ClusteringEngine(source, config), source
    return factory


# ==============================================================================
# Sample GeoJSON
# ==============================================================================

@pytest.fixture
def sample_feature_collection() -> Dict[str, Any]:
    """Small FeatureCollection mixing geometry types and bbox members."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "id": "cafe",
                "geometry": {"type": "Point", "coordinates": [2.35, 48.85]},
                "properties": {"name": "Cafe"},
            },
            {
                "type": "Feature",
                "id": "park",
                "bbox": [2.30, 48.80, 2.40, 48.90],
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[2.30, 48.80], [2.40, 48.80], [2.40, 48.90], [2.30, 48.80]]],
                },
                "properties": {"name": "Park"},
            },
            {
                "type": "Feature",
                "id": "trail",
                "geometry": {"type": "LineString", "coordinates": [[2.0, 48.0], [2.1, 48.1]]},
                "properties": {"name": "Trail", "clusteringDisabled": True},
            },
        ],
    }

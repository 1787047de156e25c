"""
Unit Tests for Geometry Module (mapcluster/geometry)

Tests extent arithmetic, geometry kinds, bbox coercion, and reprojection.
"""

import math

import pytest
from pyproj import CRS
from shapely.geometry import LineString, MultiPoint, MultiPolygon, Point, Polygon, box

from mapcluster.geometry import (
    GeometryKind,
    buffer,
    coerce_extent,
    create_empty,
    from_coordinate,
    geometry_extent,
    geometry_kind,
    get_center,
    get_height,
    get_width,
    is_empty,
    projection_code,
    same_projection,
    transform_extent,
)


# ==============================================================================
# Extent Tests
# ==============================================================================

class TestExtent:
    """Test extent arithmetic."""
    
    def test_from_coordinate_is_degenerate(self):
        """A coordinate extent has zero width and height."""
        extent = from_coordinate((3.0, 4.0))
        
        assert extent == (3.0, 4.0, 3.0, 4.0)
        assert get_width(extent) == 0
        assert get_height(extent) == 0
    
    def test_buffer(self):
        """Buffering grows every side by the distance."""
        assert buffer((0, 0, 10, 5), 2) == (-2, -2, 12, 7)
    
    def test_center(self):
        """Center is the midpoint of both axes."""
        assert get_center((0, 0, 10, 4)) == (5.0, 2.0)
    
    def test_empty_extent(self):
        """The empty extent is empty, a degenerate one is not."""
        extent = create_empty()
        
        assert is_empty(extent)
        assert not is_empty((0, 0, 0, 0))
    
    def test_geometry_extent(self):
        """Geometry extent follows shapely bounds."""
        assert geometry_extent(box(1, 2, 3, 5)) == (1.0, 2.0, 3.0, 5.0)
        assert geometry_extent(Point(4, 4)) == (4.0, 4.0, 4.0, 4.0)
    
    def test_empty_geometry_extent(self):
        """An empty geometry has an empty extent."""
        assert is_empty(geometry_extent(Polygon()))


# ==============================================================================
# Geometry Kind Tests
# ==============================================================================

class TestGeometryKind:
    """Test mapping of shapely geometries to geometry kinds."""
    
    @pytest.mark.parametrize("geometry,kind", [
        (Point(0, 0), GeometryKind.POINT),
        (MultiPoint([(0, 0), (1, 1)]), GeometryKind.POINT),
        (LineString([(0, 0), (1, 1)]), GeometryKind.LINE),
        (box(0, 0, 1, 1), GeometryKind.POLYGON),
        (MultiPolygon([box(0, 0, 1, 1), box(2, 2, 3, 3)]), GeometryKind.POLYGON),
    ])
    def test_geometry_kind(self, geometry, kind):
        """Each shapely type maps onto one kind."""
        assert geometry_kind(geometry) is kind


# ==============================================================================
# Bbox Coercion Tests
# ==============================================================================

class TestCoerceExtent:
    """Test reading extents from loosely typed bbox values."""
    
    def test_list_of_four(self):
        """Four numbers become an extent of floats."""
        assert coerce_extent([0, 1, "2", 3]) == (0.0, 1.0, 2.0, 3.0)
    
    def test_three_dimensional_bbox(self):
        """A 3D GeoJSON bbox keeps only its 2D part."""
        assert coerce_extent([0, 1, 100, 2, 3, 200]) == (0.0, 1.0, 2.0, 3.0)
    
    @pytest.mark.parametrize("value", [
        None,
        "0,0,1,1",
        [0, 1, 2],
        [0, "a", 2, 3],
        [0, math.nan, 2, 3],
        {"minx": 0},
    ])
    def test_malformed_values(self, value):
        """Malformed bboxes are unavailable rather than errors."""
        assert coerce_extent(value) is None


# ==============================================================================
# Projection Tests
# ==============================================================================

class TestProjection:
    """Test projection codes and bbox reprojection."""
    
    def test_projection_code_normalisation(self):
        """Codes are compared case-insensitively, CRS objects by authority."""
        assert projection_code("epsg:3857") == "EPSG:3857"
        assert projection_code(CRS.from_epsg(4326)) == "EPSG:4326"
        assert projection_code(None) is None
    
    def test_same_projection(self):
        """String and CRS forms of one projection are the same."""
        assert same_projection("EPSG:3857", CRS.from_epsg(3857))
        assert not same_projection("EPSG:3857", "EPSG:4326")
    
    def test_identity_transform(self):
        """Matching codes return the extent untouched."""
        extent = (1.0, 2.0, 3.0, 4.0)
        
        assert transform_extent(extent, "EPSG:3857", "epsg:3857") is extent
    
    def test_transform_to_web_mercator(self):
        """A one-degree box at the origin spans about 111 km in Web Mercator."""
        result = transform_extent((0.0, 0.0, 1.0, 1.0), "EPSG:4326", "EPSG:3857")
        
        assert result is not None
        assert result[0] == pytest.approx(0.0, abs=1e-6)
        assert result[1] == pytest.approx(0.0, abs=1e-6)
        assert result[2] == pytest.approx(111319.49, rel=1e-4)
        assert result[3] == pytest.approx(111325.14, rel=1e-4)
    
    def test_unknown_projection_is_unavailable(self):
        """An unusable projection degrades to None."""
        assert transform_extent((0, 0, 1, 1), "EPSG:999999", "EPSG:3857") is None

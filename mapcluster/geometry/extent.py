"""
Extent arithmetic and geometry-kind helpers.

Extents are plain ``(min_x, min_y, max_x, max_y)`` tuples in map units.
This module provides:
1. Construction (empty, from a coordinate, from a geometry)
2. Buffering by a map-unit distance
3. Center / width / height
4. The ``GeometryKind`` tagged variant used for per-kind threshold lookups
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Sequence, Tuple

from shapely.geometry.base import BaseGeometry


Extent = Tuple[float, float, float, float]
Coordinate = Tuple[float, float]


class GeometryKind(Enum):
    """Geometry families the clustering policy distinguishes."""
    POINT = "Point"
    LINE = "Line"
    POLYGON = "Polygon"


_KIND_BY_GEOM_TYPE = {
    "Point": GeometryKind.POINT,
    "MultiPoint": GeometryKind.POINT,
    "LineString": GeometryKind.LINE,
    "LinearRing": GeometryKind.LINE,
    "MultiLineString": GeometryKind.LINE,
    "Polygon": GeometryKind.POLYGON,
    "MultiPolygon": GeometryKind.POLYGON,
    "GeometryCollection": GeometryKind.POLYGON,
}


def geometry_kind(geometry: BaseGeometry) -> GeometryKind:
    """Map a shapely geometry onto its :class:`GeometryKind`."""
    try:
        return _KIND_BY_GEOM_TYPE[geometry.geom_type]
    except KeyError:
        raise ValueError(f"Unsupported geometry type '{geometry.geom_type}'") from None


def create_empty() -> Extent:
    return (math.inf, math.inf, -math.inf, -math.inf)


def is_empty(extent: Extent) -> bool:
    return extent[2] < extent[0] or extent[3] < extent[1]


def from_coordinate(coordinate: Coordinate) -> Extent:
    x, y = coordinate
    return (x, y, x, y)


def buffer(extent: Extent, distance: float) -> Extent:
    """Grow ``extent`` by ``distance`` map units on every side."""
    return (
        extent[0] - distance,
        extent[1] - distance,
        extent[2] + distance,
        extent[3] + distance,
    )


def get_center(extent: Extent) -> Coordinate:
    return ((extent[0] + extent[2]) / 2.0, (extent[1] + extent[3]) / 2.0)


def get_width(extent: Extent) -> float:
    return extent[2] - extent[0]


def get_height(extent: Extent) -> float:
    return extent[3] - extent[1]


def geometry_extent(geometry: BaseGeometry) -> Extent:
    """Extent of the geometry as currently held (possibly simplified)."""
    if geometry.is_empty:
        return create_empty()
    min_x, min_y, max_x, max_y = geometry.bounds
    return (float(min_x), float(min_y), float(max_x), float(max_y))


def coerce_extent(value: object) -> Optional[Extent]:
    """
    Read an extent out of an arbitrary bbox value.

    Accepts any sequence of at least four finite numbers (GeoJSON bboxes with
    a third dimension are six long; only the 2D part is used). Anything else
    yields ``None``.
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return None
    if len(value) < 4:
        return None
    if len(value) == 6:
        candidates = (value[0], value[1], value[3], value[4])
    else:
        candidates = tuple(value[:4])
    try:
        extent = tuple(float(v) for v in candidates)
    except (TypeError, ValueError):
        return None
    if not all(math.isfinite(v) for v in extent):
        return None
    return extent  # type: ignore[return-value]

"""
mapcluster/geometry: Extent arithmetic, geometry kinds, and reprojection.
"""

from .extent import (
    Coordinate,
    Extent,
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
)
from .projection import (
    ProjectionLike,
    projection_code,
    same_projection,
    transform_extent,
)

__all__ = [
    "Coordinate",
    "Extent",
    "GeometryKind",
    "buffer",
    "coerce_extent",
    "create_empty",
    "from_coordinate",
    "geometry_extent",
    "geometry_kind",
    "get_center",
    "get_height",
    "get_width",
    "is_empty",
    "ProjectionLike",
    "projection_code",
    "same_projection",
    "transform_extent",
]

"""Feature types consumed and produced by the clustering engine."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry

from ..geometry import Coordinate, Extent, GeometryKind, geometry_extent, geometry_kind


_uid_counter = itertools.count(1)


def _next_uid() -> int:
    return next(_uid_counter)


@dataclass(eq=False)
class SourceFeature:
    """
    A feature held by the upstream store.

    Attributes:
        id: Identifier from the store (not required to be unique)
        geometry: Current geometry, possibly simplified for display
        original_bbox: Bbox of the full, unsimplified geometry, if known
        geometry_projection: Projection ``original_bbox`` is expressed in
        data: Opaque payload carried through untouched
        clustering_disabled: Never merge this feature into a cluster
        uid: Process-unique identity used for caches and membership sets
    """
    id: Any
    geometry: BaseGeometry
    original_bbox: Optional[Any] = None
    geometry_projection: Optional[Any] = None
    data: Dict[str, Any] = field(default_factory=dict)
    clustering_disabled: bool = False
    uid: int = field(default_factory=_next_uid, init=False)

    @property
    def kind(self) -> GeometryKind:
        return geometry_kind(self.geometry)

    @property
    def extent(self) -> Extent:
        return geometry_extent(self.geometry)

    @property
    def is_cluster(self) -> bool:
        return False


@dataclass(frozen=True, eq=False)
class ClusterFeature:
    """
    Synthetic point feature standing in for one or more source features.

    ``members`` references the source features themselves; nothing is copied.
    """
    id: str
    position: Coordinate
    members: Tuple[SourceFeature, ...]

    @property
    def geometry(self) -> Point:
        return Point(self.position)

    @property
    def features(self) -> Tuple[SourceFeature, ...]:
        """Alias used by consumers implementing expand/drill-down."""
        return self.members

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def is_cluster(self) -> bool:
        return True


OutputFeature = Union[ClusterFeature, SourceFeature]

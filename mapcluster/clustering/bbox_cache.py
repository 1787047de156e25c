"""
Cache of full (pre-simplification) feature bboxes in the map projection.

Source features may carry the bbox of their unsimplified geometry together
with the projection it is expressed in. Comparing that bbox against the
current resolution needs it in the map projection, and reprojecting it on
every pass would be wasteful, so converted bboxes are memoised here.

The cache is owned by a single engine. Entries are keyed by feature identity
and target projection code; ``invalidate()`` drops everything and is called
by the engine whenever the active projection changes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from cachetools import LRUCache

from ..geometry import Extent, ProjectionLike, coerce_extent, projection_code, transform_extent
from .config import DEFAULT_BBOX_CACHE_SIZE
from .features import SourceFeature


logger = logging.getLogger(__name__)


class BoundingBoxCache:
    """Bounded memo of converted bboxes keyed by (feature uid, projection code)."""

    def __init__(self, maxsize: int = DEFAULT_BBOX_CACHE_SIZE):
        self._cache: LRUCache = LRUCache(maxsize=maxsize)
        self._hits = 0
        self._misses = 0
        self._computations = 0

    def _cache_key(self, feature: SourceFeature, target: ProjectionLike) -> Tuple[int, Optional[str]]:
        return (feature.uid, projection_code(target))

    def get(self, feature: SourceFeature, target: ProjectionLike) -> Optional[Extent]:
        """Return the cached bbox without computing anything."""
        return self._cache.get(self._cache_key(feature, target))

    def resolve(self, feature: SourceFeature, target: Optional[ProjectionLike]) -> Optional[Extent]:
        """
        Full bbox of ``feature`` in ``target``, or ``None`` when unavailable.

        A cached value is returned as is. Otherwise the feature's original
        bbox is reprojected from its own projection, stored, and returned.
        Missing or malformed bbox data, a missing projection on either side,
        and failed reprojections all yield ``None`` and nothing is cached.
        """
        if target is None:
            return None

        key = self._cache_key(feature, target)
        cached = self._cache.get(key)
        if cached is not None:
            self._hits += 1
            return cached
        self._misses += 1

        if feature.original_bbox is None or feature.geometry_projection is None:
            return None

        bbox = coerce_extent(feature.original_bbox)
        if bbox is None:
            logger.debug(f"Ignoring malformed bbox on feature {feature.id!r}: {feature.original_bbox!r}")
            return None

        self._computations += 1
        converted = transform_extent(bbox, feature.geometry_projection, target)
        if converted is None:
            return None

        self._cache[key] = converted
        return converted

    def invalidate(self, feature: Optional[SourceFeature] = None) -> None:
        """Drop the entries of one feature, or every entry when ``feature`` is None."""
        if feature is None:
            self._cache.clear()
            return
        for key in [k for k in self._cache.keys() if k[0] == feature.uid]:
            del self._cache[key]

    def __len__(self) -> int:
        return len(self._cache)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "size": len(self._cache),
            "maxsize": self._cache.maxsize,
            "hits": self._hits,
            "misses": self._misses,
            "computations": self._computations,
        }

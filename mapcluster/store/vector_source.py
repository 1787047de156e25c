"""
In-memory feature store with a spatial index.

The clustering engine only needs three calls from its store
(``get_features``, ``get_features_in_extent``, ``load_features``);
``FeatureSource`` names them. ``VectorSource`` is a simple implementation
backed by shapely's STRtree, rebuilt lazily after the feature set changes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Protocol, Sequence

import numpy as np
from shapely import STRtree
from shapely.geometry import box

from ..geometry import Extent, is_empty


logger = logging.getLogger(__name__)

Loader = Callable[[Extent, float, Any], Optional[Iterable[Any]]]


class FeatureSource(Protocol):
    """Upstream store the clustering engine reads from."""

    def get_features(self) -> Sequence[Any]:
        ...

    def get_features_in_extent(self, extent: Extent) -> Sequence[Any]:
        ...

    def load_features(self, extent: Extent, resolution: float, projection: Any) -> None:
        ...


class VectorSource:
    """
    Feature store answering extent queries through an STRtree.

    Args:
        features: Initial features (anything with ``uid`` and ``geometry``)
        loader: Optional callable ``(extent, resolution, projection)`` returning
            features to add when ``load_features`` is called
    """

    def __init__(
        self,
        features: Optional[Iterable[Any]] = None,
        loader: Optional[Loader] = None,
    ):
        self._features: List[Any] = []
        self._uids: set = set()
        self._tree: Optional[STRtree] = None
        self.loader = loader
        if features is not None:
            self.add_features(features)

    def add_feature(self, feature: Any) -> None:
        self.add_features([feature])

    def add_features(self, features: Iterable[Any]) -> None:
        added = 0
        for feature in features:
            if feature.uid in self._uids:
                continue
            self._features.append(feature)
            self._uids.add(feature.uid)
            added += 1
        if added:
            self._tree = None

    def remove_feature(self, feature: Any) -> None:
        if feature.uid not in self._uids:
            return
        self._features = [f for f in self._features if f.uid != feature.uid]
        self._uids.discard(feature.uid)
        self._tree = None

    def clear(self) -> None:
        self._features = []
        self._uids = set()
        self._tree = None

    def get_features(self) -> List[Any]:
        """Snapshot of every feature, in insertion order."""
        return list(self._features)

    def get_features_in_extent(self, extent: Extent) -> List[Any]:
        """Features whose geometry bbox intersects ``extent``, in insertion order."""
        if not self._features or is_empty(extent):
            return []
        if self._tree is None:
            self._tree = STRtree([f.geometry for f in self._features])
        indices = np.sort(self._tree.query(box(*extent)))
        return [self._features[i] for i in indices]

    def load_features(self, extent: Extent, resolution: float, projection: Any) -> None:
        if self.loader is None:
            return
        loaded = self.loader(extent, resolution, projection)
        if loaded is not None:
            self.add_features(loaded)

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self):
        return iter(list(self._features))

"""Neighbor search around a seed feature."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Set

from ..geometry import Extent, buffer, from_coordinate, get_center, is_empty
from ..store.vector_source import FeatureSource
from .config import NeighborEligibility
from .features import SourceFeature


class NeighborFinder:
    """
    Query the store for features around a seed and select cluster members.

    Args:
        source: Store providing ``get_features_in_extent``
        mode: "candidate" checks every candidate's own eligibility,
            "seed" only rejects candidates already known to be ineligible
    """

    def __init__(self, source: FeatureSource, mode: NeighborEligibility = "candidate"):
        self.source = source
        self.mode = mode

    def search_extent(self, seed: SourceFeature, search_radius: float) -> Extent:
        """Seed center buffered by ``search_radius`` map units."""
        center = get_center(seed.extent)
        return buffer(from_coordinate(center), search_radius)

    def query(self, seed: SourceFeature, search_radius: float) -> List[SourceFeature]:
        if is_empty(seed.extent):
            return []
        return list(self.source.get_features_in_extent(self.search_extent(seed, search_radius)))

    def select_members(
        self,
        seed: SourceFeature,
        candidates: Sequence[SourceFeature],
        clustered: Set[int],
        ineligible: Set[int],
        is_eligible: Callable[[SourceFeature], bool],
    ) -> List[SourceFeature]:
        """
        Pick the candidates that join the seed's cluster and mark them clustered.

        The seed always comes first, whether or not the store returned it.
        In "candidate" mode an ineligible candidate is added to ``ineligible``
        so it is emitted on its own later in the pass.
        """
        members: List[SourceFeature] = [seed]
        clustered.add(seed.uid)

        for candidate in candidates:
            uid = candidate.uid
            if uid in clustered or uid in ineligible:
                continue
            if self.mode == "candidate":
                if not is_eligible(candidate):
                    ineligible.add(uid)
                    continue
            elif not is_eligible(seed):
                continue
            clustered.add(uid)
            members.append(candidate)

        return members


def memoized(check: Callable[[SourceFeature], bool]) -> Callable[[SourceFeature], bool]:
    """Wrap an eligibility check so each feature is classified once per pass."""
    results: Dict[int, bool] = {}

    def wrapper(feature: SourceFeature) -> bool:
        if feature.uid not in results:
            results[feature.uid] = check(feature)
        return results[feature.uid]

    return wrapper

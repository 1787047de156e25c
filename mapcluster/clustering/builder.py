"""Construction of synthetic cluster features."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..geometry import get_center
from .features import ClusterFeature, SourceFeature


class ClusterBuilder:
    """
    Build cluster features and hand out their ids.

    Ids are ``prefix + counter``. The counter starts at 1 and only moves
    forward; ``reset()`` is the one way to rewind it.
    """

    def __init__(self, prefix: str = "", start: int = 1):
        self.prefix = prefix
        self._start = start
        self.next_id = start

    def build(self, members: Sequence[SourceFeature]) -> ClusterFeature:
        if not members:
            raise ValueError("Cannot build a cluster without members")

        centers = np.array([get_center(member.extent) for member in members], dtype=float)
        finite = np.isfinite(centers).all(axis=1)
        if not finite.any():
            raise ValueError("Cannot position a cluster whose members all have empty geometries")
        centroid = centers[finite].mean(axis=0)

        cluster = ClusterFeature(
            id=f"{self.prefix}{self.next_id}",
            position=(float(centroid[0]), float(centroid[1])),
            members=tuple(members),
        )
        self.next_id += 1
        return cluster

    def reset(self) -> None:
        """Rewind the id counter; ids issued before may be handed out again."""
        self.next_id = self._start

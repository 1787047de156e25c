"""Per-pass diagnostics and tabular export of the clustered output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .features import OutputFeature


FRAME_COLUMNS = ["id", "kind", "x", "y", "size"]


@dataclass
class ClusteringDiagnostics:
    """Summary of one recomputation pass."""

    resolution: float
    """Resolution the pass ran at."""

    projection: Optional[str]
    """Projection code the pass ran in."""

    num_features: int
    """Source features considered."""

    num_clusters: int = 0
    """Cluster features produced."""

    num_passthrough: int = 0
    """Source features emitted on their own."""

    num_collapsed: int = 0
    """Neighbourhoods left unclustered because they were below the threshold."""

    cluster_sizes: List[int] = field(default_factory=list)
    """Member count of each cluster, in output order."""

    first_cluster_id: Optional[str] = None
    last_cluster_id: Optional[str] = None

    cache_stats: Dict[str, Any] = field(default_factory=dict)
    """Bbox cache statistics at the end of the pass."""

    @property
    def num_output(self) -> int:
        return self.num_clusters + self.num_passthrough


def features_to_frame(features: Sequence[OutputFeature]) -> pd.DataFrame:
    """
    Tabulate an output set: one row per entry with its position and size.

    Pass-through features are positioned at their bbox center and have size 1.
    """
    if not features:
        return pd.DataFrame(columns=FRAME_COLUMNS)

    rows = []
    for feature in features:
        if feature.is_cluster:
            x, y = feature.position
            rows.append({"id": feature.id, "kind": "cluster", "x": x, "y": y, "size": feature.size})
        else:
            min_x, min_y, max_x, max_y = feature.extent
            rows.append({
                "id": feature.id,
                "kind": feature.kind.value,
                "x": (min_x + max_x) / 2.0,
                "y": (min_y + max_y) / 2.0,
                "size": 1,
            })
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)

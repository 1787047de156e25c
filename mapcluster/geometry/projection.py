"""
Projection helpers.

Projections are identified by their authority code (``"EPSG:3857"``). The
reprojection of an axis-aligned bbox goes through pyproj, which densifies the
edges so the result still encloses the transformed rectangle.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Optional, Union

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from .extent import Extent


logger = logging.getLogger(__name__)

ProjectionLike = Union[str, CRS]


def projection_code(projection: Optional[ProjectionLike]) -> Optional[str]:
    """Normalise a projection to its code string, ``None`` passes through."""
    if projection is None:
        return None
    if isinstance(projection, CRS):
        authority = projection.to_authority()
        if authority is not None:
            return f"{authority[0]}:{authority[1]}"
        return projection.to_string()
    return str(projection).strip().upper()


def same_projection(a: Optional[ProjectionLike], b: Optional[ProjectionLike]) -> bool:
    return projection_code(a) == projection_code(b)


@lru_cache(maxsize=64)
def _transformer(source_code: str, target_code: str) -> Transformer:
    return Transformer.from_crs(source_code, target_code, always_xy=True)


def transform_extent(
    extent: Extent,
    source: ProjectionLike,
    target: ProjectionLike,
) -> Optional[Extent]:
    """
    Reproject ``extent`` from ``source`` to ``target``.

    Returns the extent unchanged when both codes match, and ``None`` when the
    transform cannot be built or produces non-finite bounds.
    """
    source_code = projection_code(source)
    target_code = projection_code(target)
    if source_code == target_code:
        return extent

    try:
        bounds = _transformer(source_code, target_code).transform_bounds(*extent)
    except (CRSError, ProjError) as exc:
        logger.debug(f"Cannot reproject {extent} from {source_code} to {target_code}: {exc}")
        return None

    if not all(math.isfinite(v) for v in bounds):
        logger.debug(f"Reprojection of {extent} to {target_code} is not finite: {bounds}")
        return None
    return tuple(float(v) for v in bounds)  # type: ignore[return-value]

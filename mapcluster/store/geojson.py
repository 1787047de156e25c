"""Reading GeoJSON into source features."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from shapely.geometry import shape

from ..clustering.features import SourceFeature


DISABLE_PROPERTY = "clusteringDisabled"


def read_feature(
    feature: Mapping[str, Any],
    geometry_projection: Optional[Any] = "EPSG:4326",
) -> SourceFeature:
    """
    Convert a GeoJSON Feature mapping into a :class:`SourceFeature`.

    The feature's ``bbox`` member is taken as the bbox of the full geometry,
    expressed in ``geometry_projection``. Properties become the payload; a
    truthy ``clusteringDisabled`` property keeps the feature out of clusters.
    """
    if feature.get("type") != "Feature":
        raise ValueError(f"Expected a GeoJSON Feature, got type {feature.get('type')!r}")
    if feature.get("geometry") is None:
        raise ValueError(f"Feature {feature.get('id')!r} has no geometry")

    properties = dict(feature.get("properties") or {})
    bbox = feature.get("bbox")

    return SourceFeature(
        id=feature.get("id"),
        geometry=shape(feature["geometry"]),
        original_bbox=bbox,
        geometry_projection=geometry_projection if bbox is not None else None,
        data=properties,
        clustering_disabled=bool(properties.get(DISABLE_PROPERTY, False)),
    )


def read_feature_collection(
    collection: Mapping[str, Any],
    geometry_projection: Optional[Any] = "EPSG:4326",
) -> List[SourceFeature]:
    """Convert a GeoJSON FeatureCollection (or single Feature) into source features."""
    kind = collection.get("type")
    if kind == "Feature":
        return [read_feature(collection, geometry_projection)]
    if kind != "FeatureCollection":
        raise ValueError(f"Expected a GeoJSON FeatureCollection, got type {kind!r}")
    return [read_feature(f, geometry_projection) for f in collection.get("features", [])]

# features.py
"""
Joins the county boundary FeatureCollection with the parsed case index.
"""

from typing import Any, Dict, List, Optional

import geopandas as gpd

from config import CASES_PROPERTY, JOIN_KEY
from time_series import CaseIndex

# Bound to features with no matching county in the case index (JSON null)
MISSING_CASES = None


def _join_value(value: Any) -> Optional[int]:
    """GEOID10 may arrive as an int or a string such as "13089"."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def validate_feature_collection(counties: Any) -> Dict[str, Any]:
    """
    Raises ValueError unless `counties` is a GeoJSON FeatureCollection with
    a list of features. ArcGIS reports failures as a 200 response with an
    `error` body, which this rejects.
    """
    if not isinstance(counties, dict):
        raise ValueError(f"County boundaries are not a GeoJSON object (got {type(counties).__name__})")
    if counties.get("type") != "FeatureCollection":
        raise ValueError(f"County boundaries are not a FeatureCollection (type={counties.get('type')!r})")
    if not isinstance(counties.get("features"), list):
        raise ValueError("County boundaries have no features list")
    return counties


def merge_case_counts(
    counties: Dict[str, Any],
    case_index: CaseIndex,
    join_key: str = JOIN_KEY,
) -> Dict[str, Any]:
    """
    Annotates every feature of `counties` in place with its case series.

    Each feature gets a `cases` property holding its date -> count mapping,
    or MISSING_CASES when its join key has no match. No feature is added
    or removed. The same collection is returned for convenience.

    Raises:
        ValueError: If `counties` is not a FeatureCollection.
    """
    validate_feature_collection(counties)
    for feature in counties["features"]:
        properties = feature.setdefault("properties", {})
        series = case_index.get(_join_value(properties.get(join_key)))
        properties[CASES_PROPERTY] = dict(series) if series is not None else MISSING_CASES
    return counties


def feature_bounds(counties: Dict[str, Any]) -> Optional[List[List[float]]]:
    """
    Returns [[south, west], [north, east]] of all feature geometries, or
    None when the collection has no features.
    """
    features = counties.get("features", [])
    if not features:
        return None
    gdf = gpd.GeoDataFrame.from_features(features, crs="EPSG:4326")
    gdf = gdf[~gdf.geometry.is_empty & gdf.geometry.notna()]
    if gdf.empty:
        return None
    west, south, east, north = gdf.total_bounds
    return [[float(south), float(west)], [float(north), float(east)]]

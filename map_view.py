import math
import folium
from folium.features import GeoJson
import branca.colormap as cm
from streamlit_folium import st_folium
from typing import Optional, Dict, Any, List

from config import DEFAULT_MAP_LOCATION, DEFAULT_ZOOM, TILES_URL, TILES_ATTRIBUTION
from features import feature_bounds
from selection import SelectionState

# --- Constants ---
# Darkest bucket first; COLOR_BUCKETS[i] applies above THRESHOLDS[i]
COLOR_BUCKETS = ["#800026", "#BD0026", "#E31A1C", "#FC4E2A", "#FD8D3C", "#FEB24C", "#FED976", "#FFEDA0"]
THRESHOLDS = [1000, 500, 200, 100, 50, 20, 10]
LOWEST_BUCKET = COLOR_BUCKETS[-1]
LEGEND_MAX = 2000

BASE_STYLE = {
    'weight': 2,
    'opacity': 0.5,
    'color': 'white',
    'dashArray': '2',
    'fillOpacity': 0.7,
}
HOVER_STYLE = {
    'weight': 1,
    'color': '#666',
    'dashArray': '1',
    'fillOpacity': 0.9,
}

# --- Helper Functions ---

def _as_number(count: Any) -> Optional[float]:
    """Numeric value of a raw count cell, None for blanks and non-numbers."""
    if count is None or isinstance(count, bool):
        return None
    try:
        value = float(count)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(value) else value

def color_for(count: Any) -> str:
    """
    Maps a case count to one of the eight bucket colors.
    Missing, empty or non-numeric counts fall into the lowest bucket.
    """
    value = _as_number(count)
    if value is None:
        return LOWEST_BUCKET
    for threshold, color in zip(THRESHOLDS, COLOR_BUCKETS):
        if value > threshold:
            return color
    return LOWEST_BUCKET

def get_colormap() -> cm.StepColormap:
    """Creates and returns a branca step colormap for the map legend."""
    return cm.StepColormap(
        colors=list(reversed(COLOR_BUCKETS)),
        index=[0] + sorted(THRESHOLDS) + [LEGEND_MAX],
        vmin=0,
        vmax=LEGEND_MAX,
        caption="Confirmed cases",
    )

def style_function(count: Any) -> Dict[str, Any]:
    """
    Style record for a county whose count on the selected date is `count`.
    Counties with no count get the lowest bucket.
    """
    return {'fillColor': color_for(count), **BASE_STYLE}

def highlight_function(feature: Dict[str, Any]) -> Dict[str, Any]:
    """Style applied while the pointer is over a county."""
    return dict(HOVER_STYLE)

# --- Main Map Creation Functions ---

def build_case_map(counties: Dict[str, Any], selection: SelectionState) -> folium.Map:
    """
    Creates a Folium map with the county choropleth for one date.

    Args:
        counties: The merged GeoJSON FeatureCollection.
        selection: The date selection whose counts color the counties.

    Returns:
        The folium map, ready to render.
    """
    m = folium.Map(
        location=DEFAULT_MAP_LOCATION,
        zoom_start=DEFAULT_ZOOM,
        tiles=TILES_URL,
        attr=TILES_ATTRIBUTION,
    )
    bounds: Optional[List[List[float]]] = feature_bounds(counties)
    if bounds is not None:
        m.fit_bounds(bounds)

    m.add_child(get_colormap())

    GeoJson(
        counties,
        style_function=lambda feature: style_function(selection.count_for(feature)),
        highlight_function=highlight_function,
        name="counties",
    ).add_to(m)
    return m

def display_case_map(counties: Dict[str, Any], selection: SelectionState) -> None:
    """Renders the case map for the selected date in the Streamlit page."""
    m = build_case_map(counties, selection)
    st_folium(m, width='100%', height=700, returned_objects=[], key="case_map")

# -*- coding: utf-8 -*-
import folium
import pytest
from map_view import (
    color_for, style_function, highlight_function, build_case_map, get_colormap,
    COLOR_BUCKETS, LOWEST_BUCKET,
)
from selection import SelectionState

@pytest.mark.parametrize("count, expected", [
    (1001, "#800026"),
    (1000, "#BD0026"),
    (501, "#BD0026"),
    (500, "#E31A1C"),
    (201, "#E31A1C"),
    (101, "#FC4E2A"),
    (51, "#FD8D3C"),
    (21, "#FEB24C"),
    (11, "#FED976"),
    (10, "#FFEDA0"),
    (0, "#FFEDA0"),
])
def test_color_for_bucket_boundaries(count, expected):
    assert color_for(count) == expected

def test_color_for_numeric_strings():
    assert color_for("1001") == "#800026"
    assert color_for("7") == LOWEST_BUCKET

@pytest.mark.parametrize("count", [None, "", "n/a", float("nan"), True])
def test_color_for_malformed_inputs(count):
    assert color_for(count) == LOWEST_BUCKET

def test_color_for_is_monotonic():
    counts = [0, 5, 11, 21, 51, 101, 201, 501, 1001, 50000]
    ranks = [COLOR_BUCKETS.index(color_for(c)) for c in counts]
    assert ranks == sorted(ranks, reverse=True)
    assert set(color_for(c) for c in range(0, 3000, 7)) <= set(COLOR_BUCKETS)

def test_style_function_record():
    assert style_function("1500") == {
        "fillColor": "#800026",
        "weight": 2,
        "opacity": 0.5,
        "color": "white",
        "dashArray": "2",
        "fillOpacity": 0.7,
    }
    assert style_function("5")["fillColor"] == LOWEST_BUCKET

def test_style_function_missing_count():
    assert style_function(None)["fillColor"] == LOWEST_BUCKET
    assert style_function("")["fillColor"] == LOWEST_BUCKET

def test_highlight_function():
    assert highlight_function({}) == {"weight": 1, "color": "#666", "dashArray": "1", "fillOpacity": 0.9}

def test_colormap_has_all_buckets():
    colormap = get_colormap()
    assert len(colormap.colors) == len(COLOR_BUCKETS)

def test_build_case_map():
    counties = {
        "type": "FeatureCollection",
        "features": [{
            "type": "Feature",
            "properties": {"GEOID10": 13089, "cases": {"1/21/20": "5", "1/22/20": "1500"}},
            "geometry": {
                "type": "Polygon",
                "coordinates": [[[-84.5, 33.5], [-84.0, 33.5], [-84.0, 34.0], [-84.5, 33.5]]],
            },
        }],
    }
    selection = SelectionState.from_dates(["1/21/20", "1/22/20"])
    m = build_case_map(counties, selection)
    assert isinstance(m, folium.Map)
    layers = [child for child in m._children.values() if isinstance(child, folium.GeoJson)]
    assert len(layers) == 1
    county = counties["features"][0]
    assert layers[0].style_function(county)["fillColor"] == "#800026"

    earlier = build_case_map(counties, selection.select(0))
    layer = [child for child in earlier._children.values() if isinstance(child, folium.GeoJson)][0]
    assert layer.style_function(county)["fillColor"] == LOWEST_BUCKET

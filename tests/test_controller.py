# -*- coding: utf-8 -*-
import pytest
import requests
from controller import ViewController
from features import MISSING_CASES
from time_series import MissingColumnError, cell_equals

SAMPLE_CSV = (
    "UID,FIPS,Admin2,Province_State,1/22/20,1/23/20,1/24/20\n"
    "1,13089,DeKalb,Georgia,5,7,1200\n"
    "2,13001,Appling,Georgia,0,,3\n"
    "3,6037,Los Angeles,California,100,120,130\n"
)

def _counties():
    return {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": {"GEOID10": 13089}, "geometry": None},
            {"type": "Feature", "properties": {"GEOID10": 13001}, "geometry": None},
            {"type": "Feature", "properties": {"GEOID10": 13999}, "geometry": None},
        ],
    }

@pytest.fixture
def controller():
    controller = ViewController()
    assert controller.load(fetch=lambda: (SAMPLE_CSV, _counties()))
    return controller

def test_load_builds_index_and_merges(controller):
    assert controller.is_ready
    assert len(controller.case_index) == 2
    cases = [f["properties"]["cases"] for f in controller.counties["features"]]
    assert cases[0] == {"1/22/20": "5", "1/23/20": "7", "1/24/20": "1200"}
    assert cases[2] is MISSING_CASES

def test_initial_selection_is_most_recent_date(controller):
    assert controller.selected_date == "1/24/20"
    assert controller.selection.selected_index == 2

def test_select_date_changes_styles(controller):
    dekalb = controller.counties["features"][0]
    assert controller.style_for(dekalb)["fillColor"] == "#800026"
    assert controller.select_date(0) == "1/22/20"
    assert controller.style_for(dekalb)["fillColor"] == "#FFEDA0"

def test_empty_and_unmatched_counts_use_lowest_bucket(controller):
    controller.select_date(1)
    appling, unmatched = controller.counties["features"][1:]
    assert controller.style_for(appling)["fillColor"] == "#FFEDA0"
    assert controller.style_for(unmatched)["fillColor"] == "#FFEDA0"

def test_select_date_out_of_range(controller):
    with pytest.raises(AssertionError):
        controller.select_date(3)

def test_network_failure_stays_loading():
    def fetch():
        raise requests.exceptions.ConnectionError("connection refused")

    controller = ViewController()
    assert controller.load(fetch=fetch) is False
    assert not controller.is_ready
    assert isinstance(controller.error, requests.exceptions.ConnectionError)

def test_parse_failure_stays_loading():
    controller = ViewController()
    assert controller.load(fetch=lambda: ("", _counties())) is False
    assert not controller.is_ready
    assert controller.error is not None

def test_missing_column_is_raised():
    controller = ViewController(anchor_label="3/1/20")
    with pytest.raises(MissingColumnError):
        controller.load(fetch=lambda: (SAMPLE_CSV, _counties()))

def test_result_after_close_is_discarded():
    controller = ViewController()

    def fetch():
        controller.close()
        return SAMPLE_CSV, _counties()

    assert controller.load(fetch=fetch) is False
    assert not controller.is_ready
    assert controller.case_index is None

def test_custom_region_filter():
    controller = ViewController(region_filter=cell_equals(3, "California"))
    controller.load(fetch=lambda: (SAMPLE_CSV, _counties()))
    assert list(controller.case_index.series) == [6037]

def test_style_follows_selection_count(controller):
    dekalb = controller.counties["features"][0]
    assert controller.selection.count_for(dekalb) == "1200"
    assert controller.style_for(dekalb)["fillColor"] == "#800026"

    controller.select_date(1)
    assert controller.selection.count_for(dekalb) == "7"
    assert controller.style_for(dekalb)["fillColor"] == "#FFEDA0"

    controller.select_date(2)
    assert controller.style_for(dekalb)["fillColor"] == "#800026"

@pytest.mark.parametrize("counties", [
    [],
    "not geojson",
    {"error": {"code": 500, "message": "Error performing query operation"}},
    {"type": "FeatureCollection"},
    {"type": "FeatureCollection", "features": None},
])
def test_malformed_counties_stay_loading(counties):
    controller = ViewController()
    assert controller.load(fetch=lambda: (SAMPLE_CSV, counties)) is False
    assert not controller.is_ready
    assert controller.counties is None
    assert controller.case_index is None
    assert isinstance(controller.error, ValueError)

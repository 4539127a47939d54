import requests
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Tuple

from config import DATA_URL, COUNTIES_URL, REQUEST_TIMEOUT
from features import validate_feature_collection


def fetch_time_series_text(url: str = DATA_URL, timeout: int = REQUEST_TIMEOUT) -> str:
    """Downloads the confirmed-case time series CSV and returns its text."""
    print(f"Fetching case time series from {url}...")
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


def fetch_county_features(url: str = COUNTIES_URL, timeout: int = REQUEST_TIMEOUT) -> Dict[str, Any]:
    """Downloads the county boundaries as a GeoJSON FeatureCollection."""
    print(f"Fetching county boundaries from {url}...")
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return validate_feature_collection(response.json())


def fetch_sources(
    data_url: str = DATA_URL,
    counties_url: str = COUNTIES_URL,
    timeout: int = REQUEST_TIMEOUT,
) -> Tuple[str, Dict[str, Any]]:
    """
    Fetches the time series and the county boundaries in parallel and
    returns both once the two downloads have finished. The first failure
    is raised; there are no retries.
    """
    with ThreadPoolExecutor(max_workers=2) as executor:
        series_future = executor.submit(fetch_time_series_text, data_url, timeout)
        counties_future = executor.submit(fetch_county_features, counties_url, timeout)
        raw_text = series_future.result()
        counties = counties_future.result()
    print("--- Both data sources downloaded ---")
    return raw_text, counties

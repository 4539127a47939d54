# config.py

"""
Central configuration file for the Georgia County COVID-19 case map.
This file stores constants and settings to make the application more maintainable.
"""

from typing import Final, List

# Confirmed-case time series from the JHU CSSE COVID-19 repository
DATA_URL: Final[str] = (
    "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/"
    "csse_covid_19_data/csse_covid_19_time_series/time_series_covid19_confirmed_US.csv"
)

# Georgia county boundaries published by the Atlanta Regional Commission
COUNTIES_URL: Final[str] = (
    "https://opendata.arcgis.com/datasets/dc20713282734a73abe990995de40497_68.geojson"
)

REQUEST_TIMEOUT: Final[int] = 60

# Header labels the parser looks for in the time series
FIPS_COLUMN: Final[str] = "FIPS"
ANCHOR_DATE_LABEL: Final[str] = "1/22/20"

# Rows are kept when any cell contains this text
REGION_FILTER_TEXT: Final[str] = "Georgia"

# Feature property that carries the county FIPS code in the GeoJSON
JOIN_KEY: Final[str] = "GEOID10"
CASES_PROPERTY: Final[str] = "cases"

DEFAULT_MAP_LOCATION: Final[List[float]] = [32.7656, -83.3]
DEFAULT_ZOOM: Final[int] = 8
TILES_URL: Final[str] = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILES_ATTRIBUTION: Final[str] = "&copy; OpenStreetMap contributors"

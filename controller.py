# controller.py
"""
Load-once, render-many state of the case map: downloads both sources,
parses and joins them, then tracks the date chosen on the slider.
"""

from typing import Any, Callable, Dict, Optional, Tuple

import requests

from config import ANCHOR_DATE_LABEL, FIPS_COLUMN, JOIN_KEY
from data_loader import fetch_sources
from features import merge_case_counts
from map_view import style_function
from selection import SelectionState
from time_series import CaseIndex, RowFilter, parse_time_series

Fetcher = Callable[[], Tuple[str, Dict[str, Any]]]


class ViewController:
    """Holds the CaseIndex, the merged counties and the SelectionState."""

    def __init__(
        self,
        region_filter: Optional[RowFilter] = None,
        anchor_label: str = ANCHOR_DATE_LABEL,
        fips_column: str = FIPS_COLUMN,
        join_key: str = JOIN_KEY,
    ):
        self.region_filter = region_filter
        self.anchor_label = anchor_label
        self.fips_column = fips_column
        self.join_key = join_key

        self.case_index: Optional[CaseIndex] = None
        self.counties: Optional[Dict[str, Any]] = None
        self.selection: Optional[SelectionState] = None
        self.error: Optional[Exception] = None
        self._closed = False

    @property
    def is_ready(self) -> bool:
        return self.counties is not None and self.selection is not None

    @property
    def selected_date(self) -> str:
        assert self.selection is not None, "no dates loaded yet"
        return self.selection.selected_date

    def close(self) -> None:
        """
        Marks the session as ended; a load still in flight is discarded.

        Streamlit has no session teardown hook, so app.py never calls this.
        It is for callers that embed the controller and own its lifetime.
        """
        self._closed = True

    def load(self, fetch: Fetcher = fetch_sources) -> bool:
        """
        Fetches, parses and merges both sources. Returns True once the map
        is ready to render.

        Network and parse failures, including a county payload that is not
        a FeatureCollection, are logged and leave the controller in the
        loading state. A MissingColumnError is a data-format mismatch and
        is raised to the caller.
        """
        try:
            raw_text, counties = fetch()
            case_index = parse_time_series(
                raw_text,
                region_filter=self.region_filter,
                anchor_label=self.anchor_label,
                fips_column=self.fips_column,
            )
            counties = merge_case_counts(counties, case_index, join_key=self.join_key)
        except (requests.RequestException, ValueError) as e:
            print(f"Failed to load case map data: {e}")
            self.error = e
            return False

        if self._closed:
            print("Session closed before data arrived; discarding result.")
            return False

        self.case_index = case_index
        self.selection = SelectionState.from_dates(case_index.dates)
        self.counties = counties
        self.error = None
        print(f"--- Loaded {len(case_index)} counties over {len(case_index.dates)} dates ---")
        return True

    def select_date(self, index: int) -> str:
        """Moves the selection to slider position `index` and returns its date label."""
        assert self.selection is not None, "no dates loaded yet"
        self.selection = self.selection.select(index)
        return self.selection.selected_date

    def style_for(self, feature: Dict[str, Any]) -> Dict[str, Any]:
        return style_function(self.selection.count_for(feature))

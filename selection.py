# selection.py
"""The ordered date labels and the date currently picked on the slider."""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from config import CASES_PROPERTY


@dataclass(frozen=True)
class SelectionState:
    dates: Tuple[str, ...]
    selected_index: int

    def __post_init__(self):
        assert self.dates, "SelectionState needs at least one date"
        assert 0 <= self.selected_index < len(self.dates), (
            f"selected_index {self.selected_index} outside [0, {len(self.dates) - 1}]"
        )

    @classmethod
    def from_dates(cls, dates: Sequence[str]) -> "SelectionState":
        """Starts on the most recent (last) date."""
        dates = tuple(dates)
        return cls(dates=dates, selected_index=len(dates) - 1)

    @property
    def selected_date(self) -> str:
        return self.dates[self.selected_index]

    @property
    def last_index(self) -> int:
        return len(self.dates) - 1

    def select(self, index: int) -> "SelectionState":
        """Moves to another date; an index outside the slider range is a bug."""
        assert 0 <= index < len(self.dates), (
            f"date index {index} outside [0, {len(self.dates) - 1}]"
        )
        return replace(self, selected_index=index)

    def count_for(self, feature: Dict[str, Any]) -> Optional[str]:
        """The raw case count of `feature` on the selected date, if any."""
        cases = feature.get("properties", {}).get(CASES_PROPERTY)
        if not cases:
            return None
        return cases.get(self.selected_date)

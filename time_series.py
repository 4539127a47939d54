# time_series.py
"""
Parsing of the wide-format confirmed-case table (one row per county, one
column per date) into a per-county, per-date index.
"""

from dataclasses import dataclass, field
from io import StringIO
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

import pandas as pd

from config import ANCHOR_DATE_LABEL, FIPS_COLUMN, REGION_FILTER_TEXT
from schemas import case_table_schema

Row = Tuple[str, ...]
RowFilter = Callable[[Row], bool]
CaseSeries = Mapping[str, str]


class MissingColumnError(LookupError):
    """Raised when a required header label is absent from the time series."""

    def __init__(self, label: str, header: Sequence[str]):
        self.label = label
        self.header = list(header)
        super().__init__(
            f"Required column {label!r} not found in time series header "
            f"({len(self.header)} columns)"
        )


@dataclass(frozen=True)
class CaseIndex:
    """
    County FIPS code -> {date label -> raw cell value}, plus the date labels
    in header order. Built once per data load and read-only afterwards.
    """
    dates: Tuple[str, ...]
    series: Mapping[int, CaseSeries] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.series)

    def __contains__(self, fips: object) -> bool:
        return fips in self.series

    def get(self, fips: int) -> Optional[CaseSeries]:
        return self.series.get(fips)


def row_contains(text: str) -> RowFilter:
    """Keeps rows where `text` appears as a substring of any cell."""
    def _filter(row: Row) -> bool:
        return any(text in cell for cell in row)
    return _filter


def cell_equals(position: int, value: str) -> RowFilter:
    """Keeps rows whose cell at `position` is exactly `value`."""
    def _filter(row: Row) -> bool:
        return position < len(row) and row[position] == value
    return _filter


def _column_index(header: Sequence[str], label: str) -> int:
    try:
        return header.index(label)
    except ValueError:
        raise MissingColumnError(label, header) from None


def _to_fips(cell: str) -> Optional[int]:
    """The FIPS cell as an int ("13089" or "13089.0"), None if missing/invalid."""
    try:
        return int(float(cell))
    except (TypeError, ValueError, OverflowError):
        return None


def parse_time_series(
    raw_text: str,
    region_filter: Optional[RowFilter] = None,
    anchor_label: str = ANCHOR_DATE_LABEL,
    fips_column: str = FIPS_COLUMN,
) -> CaseIndex:
    """
    Parses the raw CSV text into a CaseIndex.

    Args:
        raw_text: The CSV body; row 0 is the header.
        region_filter: Predicate over a data row (tuple of cell strings).
            Defaults to rows containing REGION_FILTER_TEXT anywhere.
        anchor_label: Header label of the first date column. Every column
            from it to the end of the header is a date column.
        fips_column: Header label of the county FIPS column.

    Returns:
        The CaseIndex for every row accepted by the filter. Cell values are
        kept exactly as they appear, empty strings included. When two rows
        share a FIPS code the later one wins.

    Raises:
        MissingColumnError: If the FIPS or anchor column is absent.
    """
    if region_filter is None:
        region_filter = row_contains(REGION_FILTER_TEXT)

    table = pd.read_csv(
        StringIO(raw_text),
        header=None,
        dtype=str,
        keep_default_na=False,
        na_filter=False,
    )
    header = table.iloc[0].tolist()

    fips_idx = _column_index(header, fips_column)
    first_date_idx = _column_index(header, anchor_label)
    dates = tuple(header[first_date_idx:])

    series: Dict[int, CaseSeries] = {}
    for row in table.iloc[1:].itertuples(index=False, name=None):
        if not region_filter(row):
            continue
        fips = _to_fips(row[fips_idx])
        if fips is None:
            continue
        series[fips] = MappingProxyType(dict(zip(dates, row[first_date_idx:])))

    return CaseIndex(dates=dates, series=MappingProxyType(series))


def case_index_to_frame(case_index: CaseIndex) -> pd.DataFrame:
    """Long-format table (fips, date, cases) of the index, in date order."""
    records = [
        {"fips": fips, "date": date, "cases": counts.get(date, "")}
        for fips, counts in case_index.series.items()
        for date in case_index.dates
    ]
    df = pd.DataFrame(records, columns=["fips", "date", "cases"])
    df["fips"] = df["fips"].astype("int64")
    df["date"] = df["date"].astype(str)
    df["cases"] = df["cases"].astype(str)
    return case_table_schema.validate(df)

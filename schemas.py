# schemas.py
"""Data validation schemas for the case map application."""

import pandera as pa
from pandera.typing import Series

class CaseTableSchema(pa.DataFrameModel):
    """Schema for the long-format case table (one row per county and date)."""
    fips: Series[int] = pa.Field(nullable=False, ge=0)
    date: Series[str] = pa.Field(nullable=False)
    # Raw cell values; empty strings are allowed and kept
    cases: Series[str] = pa.Field(nullable=False)

case_table_schema = CaseTableSchema.to_schema()

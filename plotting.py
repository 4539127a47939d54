import pandas as pd
import streamlit as st
import plotly.graph_objects as go

from time_series import CaseIndex, case_index_to_frame


def daily_totals(case_index: CaseIndex) -> pd.Series:
    """Sum of confirmed cases over all counties for each date, in header order."""
    df = case_index_to_frame(case_index)
    df["count"] = pd.to_numeric(df["cases"], errors="coerce")
    totals = df.groupby("date", sort=False)["count"].sum(min_count=1)
    return totals.reindex(list(case_index.dates))


def plot_case_trend(case_index: CaseIndex, selected_date: str) -> go.Figure:
    totals = daily_totals(case_index)
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=totals.index,
            y=totals,
            mode="lines",
            name="Confirmed Cases",
            line=dict(color="#BD0026"),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=[selected_date],
            y=[totals.get(selected_date)],
            mode="markers",
            name="Selected Date",
            marker=dict(color="navy", size=10),
        )
    )
    fig.update_layout(
        title="Statewide Confirmed Cases",
        xaxis_title="Date",
        yaxis_title="Confirmed Cases",
        legend=dict(x=0.01, y=0.99, bordercolor="Black", borderwidth=1),
        template="plotly_white",
        font=dict(size=14),
        height=450,
    )
    return fig


def display_date_insights(case_index: CaseIndex, selected_date: str):
    """
    Displays headline numbers for the selected date.
    """
    st.subheader(f"Snapshot for {selected_date}")

    counts = pd.Series(
        {fips: counts.get(selected_date) for fips, counts in case_index.series.items()},
        dtype=object,
    )
    counts = pd.to_numeric(counts, errors="coerce").dropna()

    if counts.empty:
        st.warning("No county reported a count for this date.")
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(label="Total Confirmed Cases", value=f"{int(counts.sum()):,}")
    with col2:
        st.metric(
            label="Counties Reporting",
            value=f"{len(counts)} / {len(case_index)}",
            help="Counties with a numeric count on this date.",
        )
    with col3:
        st.metric(
            label="Highest County Count",
            value=f"{int(counts.max()):,}",
            help=f"FIPS {counts.idxmax()}",
        )

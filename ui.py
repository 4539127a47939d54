# -*- coding: utf-8 -*-
"""
This module contains the UI components for the Streamlit application.
"""
import streamlit as st

from selection import SelectionState
from time_series import CaseIndex, case_index_to_frame

def setup_page_config():
    """Sets the Streamlit page configuration."""
    st.set_page_config(
        page_title="Georgia COVID-19 Cases by County",
        page_icon="🗺️",
        layout="wide",
    )

def display_header_and_about():
    """Displays the main title and the 'About' expander."""
    st.title("Georgia COVID-19 Cases by County")
    st.markdown(
        "Drag the slider to move through time; each county is shaded by its cumulative "
        "confirmed case count on the selected date."
    )
    with st.expander("About the Data"):
        st.markdown(
            """
            - **Case counts:** Johns Hopkins CSSE confirmed-case time series for U.S. counties.
            - **County boundaries:** Atlanta Regional Commission open data (Georgia counties).
            - Counties with no matching time series are drawn in the lightest color.
            """
        )

def display_date_slider(selection: SelectionState) -> int:
    """
    Renders the date slider and the selected date label.

    Args:
        selection (SelectionState): The current date selection.

    Returns:
        int: The slider position picked by the user.
    """
    if selection.last_index == 0:
        index = 0
    else:
        index = st.slider(
            "Date",
            min_value=0,
            max_value=selection.last_index,
            value=selection.selected_index,
            step=1,
            format="%d",
            key="date_slider",
            label_visibility="collapsed",
        )
    st.markdown(f"**{selection.dates[index]}**")
    return index

def display_download_button(case_index: CaseIndex):
    """
    Renders the download button in the sidebar.

    Args:
        case_index (CaseIndex): The parsed case counts to be downloaded.
    """
    df = case_index_to_frame(case_index)
    if not df.empty:
        st.sidebar.download_button(
            label="Download Case Counts (CSV)",
            data=df.to_csv(index=False).encode("utf-8"),
            file_name="county_case_counts.csv",
            mime="text/csv",
            key="download_button",
        )

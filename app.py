# -*- coding: utf-8 -*-
import streamlit as st

# --- Custom Modules ---
from controller import ViewController
from map_view import display_case_map
from plotting import plot_case_trend, display_date_insights
from time_series import MissingColumnError
from ui import setup_page_config, display_header_and_about, display_date_slider, display_download_button

def get_controller() -> ViewController:
    """Loads both data sources once per browser session."""
    if "controller" not in st.session_state:
        controller = ViewController()
        try:
            with st.spinner("Fetching case counts and county boundaries..."):
                controller.load()
        except MissingColumnError as e:
            st.error(f"The case time series is not in the expected format: {e}")
            st.stop()
        st.session_state["controller"] = controller
    return st.session_state["controller"]

def main() -> None:
    """Main function to run the Streamlit application."""
    setup_page_config()
    display_header_and_about()

    controller = get_controller()
    if not controller.is_ready:
        st.info("loading...")
        st.stop()

    index = display_date_slider(controller.selection)
    selected_date = controller.select_date(index)

    display_case_map(controller.counties, controller.selection)

    st.plotly_chart(plot_case_trend(controller.case_index, selected_date), use_container_width=True)
    display_date_insights(controller.case_index, selected_date)

    display_download_button(controller.case_index)
    st.markdown("---")
    st.markdown(
        "Data Sources: [JHU CSSE COVID-19](https://github.com/CSSEGISandData/COVID-19/tree/master/csse_covid_19_data/csse_covid_19_time_series), "
        "[ARC Open Data](https://arc-garc.opendata.arcgis.com/datasets/dc20713282734a73abe990995de40497_68)"
    )

if __name__ == "__main__":
    main()

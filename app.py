#!/usr/bin/env python3
"""
Streamlit web application for the Duct Sizer.
Provides an interactive interface for round and rectangular duct sizing.
"""

import streamlit as st
import pandas as pd

from ductcalc.airflow import DEFAULT_SPEED_MPS
from ductcalc.inputs import parse_number_list
from ductcalc.rectangular import round_to_rect
from ductcalc.tables import (
    NO_RECT_MESSAGE,
    airflow_table,
    quick_lookup_table,
    rect_recommendation_table,
    rect_to_round_summary,
    round_to_rect_table,
    style_efficiency,
    undersized_warnings,
)
from ductcalc.units import DEFAULT_UNITS, get_unit_options, to_canonical
from ductcalc.visualization import airflow_figure, ratio_figure, velocity_figure

# Page configuration
st.set_page_config(
    page_title="Duct Sizer",
    page_icon="🌬️",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def unit_select(label: str, quantity: str, key: str) -> str:
    options = get_unit_options(quantity)
    return st.selectbox(label, options, index=options.index(DEFAULT_UNITS[quantity]), key=key)


def csv_download(df: pd.DataFrame, filename: str, key: str):
    st.download_button(
        "📥 Download CSV",
        df.to_csv(index=False).encode('utf-8'),
        file_name=filename,
        mime="text/csv",
        key=key,
    )


def airflow_tab():
    st.subheader("🌬️ Air Volume Calculator")
    st.caption("Each segment carries its own air volume plus all upstream volume.")

    col1, col2 = st.columns(2)
    with col1:
        volumes_text = st.text_input("Air volume per segment", placeholder="e.g. 10 20 30")
        volume_unit = unit_select("Volume Unit", 'air_volume', "airflow_volume_unit")
    with col2:
        speeds_text = st.text_input("Air speed (one, or one per segment)", value=f"{DEFAULT_SPEED_MPS:g}")
        speed_unit = unit_select("Speed Unit", 'air_speed', "airflow_speed_unit")

    if not st.button("Calculate", type="primary", key="airflow_run"):
        return

    try:
        df = airflow_table(parse_number_list(volumes_text), volume_unit,
                           parse_number_list(speeds_text), speed_unit)
    except ValueError as e:
        st.error(str(e))
        return

    for warning in undersized_warnings(df):
        st.warning(warning)

    st.dataframe(df, use_container_width=True, hide_index=True)
    st.plotly_chart(airflow_figure(df), use_container_width=True)
    csv_download(df, "duct_segments.csv", "airflow_csv")


def conversion_tab():
    st.subheader("⬛ Rectangular → Round")
    col1, col2, col3 = st.columns(3)
    with col1:
        length = st.number_input("Length", min_value=0.0, value=0.0, key="rect_length")
    with col2:
        width = st.number_input("Width", min_value=0.0, value=0.0, key="rect_width")
    with col3:
        unit = unit_select("Unit", 'length', "rect_unit")

    if st.button("Convert", type="primary", key="rect_to_round_run"):
        try:
            result = rect_to_round_summary(length, unit, width, unit)
        except ValueError as e:
            st.error(str(e))
        else:
            col1, col2, col3 = st.columns(3)
            col1.metric("Rectangular Area", f"{result['Rectangular Area (m²)']:.4f} m²")
            col2.metric("Round Duct", f"{result['Diameter (mm)']} mm")
            col3.metric("Round Duct Area", f"{result['Duct Area (m²)']:.4f} m²")
            if result['Undersized']:
                st.warning("Area exceeds the largest standard duct")

    st.divider()
    st.subheader("⚪ Round → Rectangular")
    diameter = st.number_input("Round duct diameter (mm)", min_value=0.0, value=0.0, step=50.0)

    if st.button("Convert", type="primary", key="round_to_rect_run"):
        try:
            df = round_to_rect_table(diameter)
        except ValueError as e:
            st.error(str(e))
            return
        if df.empty:
            st.info(NO_RECT_MESSAGE)
            return
        col1, col2 = st.columns([1, 2])
        with col1:
            st.dataframe(df, use_container_width=True, hide_index=True)
        with col2:
            st.plotly_chart(ratio_figure(round_to_rect(diameter)), use_container_width=True)


def quick_lookup_tab():
    st.subheader("📋 Quick Lookup Table (Round)")

    col1, col2 = st.columns(2)
    with col1:
        speed = st.number_input("Fixed air speed", min_value=0.0, value=DEFAULT_SPEED_MPS, key="quick_speed")
    with col2:
        speed_unit = unit_select("Speed Unit", 'air_speed', "quick_speed_unit")

    volumes = st.data_editor(
        pd.DataFrame({'Volume (CMM)': [None]}, dtype=float),
        num_rows="dynamic",
        use_container_width=True,
        key="quick_volumes",
    )

    if not st.button("Calculate", type="primary", key="quick_run"):
        return

    values = [0.0 if pd.isna(v) else float(v) for v in volumes['Volume (CMM)']]
    try:
        df = quick_lookup_table(values, speed, speed_unit)
    except ValueError as e:
        st.error(str(e))
        return

    st.caption("Efficiency: red above 90 %, green between 80 and 90 %.")
    st.dataframe(style_efficiency(df), use_container_width=True, hide_index=True)
    csv_download(df, "quick_lookup.csv", "quick_csv")


def rect_recommendation_tab():
    st.subheader("📐 Rectangular Recommendation Table")

    col1, col2 = st.columns(2)
    with col1:
        volume = st.number_input("Air volume", min_value=0.0, value=0.0, key="rect_volume")
        volume_unit = unit_select("Volume Unit", 'air_volume', "rect_volume_unit")
    with col2:
        speed = st.number_input("Air speed", min_value=0.0, value=DEFAULT_SPEED_MPS, key="rect_speed")
        speed_unit = unit_select("Speed Unit", 'air_speed', "rect_speed_unit")

    if not st.button("Calculate", type="primary", key="rect_run"):
        return

    try:
        df = rect_recommendation_table(volume, volume_unit, speed, speed_unit)
    except ValueError as e:
        st.error(str(e))
        return

    if df.empty:
        st.info(f"{NO_RECT_MESSAGE} (area ratio out of range)")
        return

    st.dataframe(style_efficiency(df), use_container_width=True, hide_index=True)
    volume_cmm = to_canonical(volume, volume_unit, 'air_volume')
    speed_mps = to_canonical(speed, speed_unit, 'air_speed')
    st.plotly_chart(velocity_figure(volume_cmm, speed_mps), use_container_width=True)
    csv_download(df, "rectangular_ducts.csv", "rect_csv")


def main():
    """Main Streamlit application."""

    # Header
    st.title("🌬️ Duct Sizer")
    st.markdown("**Round and rectangular HVAC duct sizing from air volume and air speed**")
    st.divider()

    tab1, tab2, tab3, tab4 = st.tabs([
        "Air Volume Calculator",
        "Rectangular ↔ Round",
        "Quick Lookup",
        "Rectangular Recommendation",
    ])

    with tab1:
        airflow_tab()
    with tab2:
        conversion_tab()
    with tab3:
        quick_lookup_tab()
    with tab4:
        rect_recommendation_tab()


if __name__ == "__main__":
    main()

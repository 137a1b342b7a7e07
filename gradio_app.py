#!/usr/bin/env python3
"""
Gradio web app for the Duct Sizer.

Tabs:
- Air volume calculator for serial duct segments
- Rectangular → round / round → rectangular conversion
- Quick round duct lookup table
- Rectangular duct recommendations
- Plotly charts for air speed, area ratio and segment airflow

Run locally:
  python gradio_app.py

Run with a public share link:
  python gradio_app.py --share
"""
import argparse
import pandas as pd
import gradio as gr
import os
from typing import Tuple

from ductcalc.airflow import DEFAULT_SPEED_MPS, calculate_area
from ductcalc.inputs import parse_number, parse_number_list
from ductcalc.rectangular import generate_rectangular_candidates, round_to_rect
from ductcalc.tables import (
    NO_RECT_MESSAGE,
    QUICK_COLUMNS,
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


def compute_airflow(volumes_text: str, volume_unit: str,
                    speeds_text: str, speed_unit: str) -> Tuple:
    """Size serial duct segments. Returns (summary markdown, table, chart)."""
    try:
        df = airflow_table(
            parse_number_list(volumes_text), volume_unit,
            parse_number_list(speeds_text), speed_unit,
        )
    except ValueError as e:
        return f"❌ {e}", pd.DataFrame(), None

    total = df['Cumulative (CMM)'].iloc[-1]
    summary_parts = [
        "### Air Volume Summary",
        f"- **Segments**: {len(df)}",
        f"- **Total Volume**: {total:,.1f} CMM",
        f"- **Main Duct**: Ø{df['Diameter (mm)'].iloc[-1]} mm",
    ]

    warnings = undersized_warnings(df)
    if warnings:
        summary_parts.append("\n### ⚠️ Warnings")
        for warning in warnings:
            summary_parts.append(f"- {warning}")

    return "\n".join(summary_parts), df, airflow_figure(df)


def compute_rect_to_round(length: float, width: float, unit: str) -> str:
    """Recommend a round duct for a rectangular one. Returns markdown."""
    try:
        result = rect_to_round_summary(parse_number(length), unit, parse_number(width), unit)
    except ValueError as e:
        return f"❌ {e}"

    text = (
        f"Rectangular area: **{result['Rectangular Area (m²)']:.4f} m²**, "
        f"recommended round duct: **{result['Diameter (mm)']} mm** "
        f"(area {result['Duct Area (m²)']:.4f} m²)"
    )
    if result['Undersized']:
        text += "\n\n⚠️ Area exceeds the largest standard duct"
    return text


def compute_round_to_rect(diameter_mm: float) -> Tuple:
    """List rectangular ducts for a round duct. Returns (message, table, chart)."""
    diameter_mm = parse_number(diameter_mm)
    try:
        df = round_to_rect_table(diameter_mm)
    except ValueError as e:
        return f"❌ {e}", pd.DataFrame(), None

    if df.empty:
        return NO_RECT_MESSAGE, df, None
    return "", df, ratio_figure(round_to_rect(diameter_mm))


def compute_quick_lookup(volume_rows, speed: float, speed_unit: str) -> Tuple[str, pd.DataFrame]:
    """Quick lookup for the volumes entered in the editable table."""
    if isinstance(volume_rows, pd.DataFrame):
        raw = volume_rows.iloc[:, 0].tolist() if not volume_rows.empty else []
    else:
        raw = [row[0] if isinstance(row, (list, tuple)) else row for row in (volume_rows or [])]

    try:
        df = quick_lookup_table([parse_number(v) for v in raw], parse_number(speed), speed_unit)
    except ValueError as e:
        return f"❌ {e}", pd.DataFrame(columns=QUICK_COLUMNS)
    return "", df


def compute_rect_recommendation(volume: float, volume_unit: str,
                                speed: float, speed_unit: str) -> Tuple:
    """Rectangular ducts for an air volume and speed. Returns (message, table, chart)."""
    volume = parse_number(volume)
    speed = parse_number(speed)
    try:
        df = rect_recommendation_table(volume, volume_unit, speed, speed_unit)
    except ValueError as e:
        return f"❌ {e}", pd.DataFrame(), None

    if df.empty:
        return f"{NO_RECT_MESSAGE} (area ratio out of range)", df, None

    volume_cmm = to_canonical(volume, volume_unit, 'air_volume')
    speed_mps = to_canonical(speed, speed_unit, 'air_speed')
    candidates = generate_rectangular_candidates(calculate_area(volume_cmm, speed_mps))
    return "", df, ratio_figure(candidates)


def _styled(df: pd.DataFrame):
    return style_efficiency(df) if not df.empty else df


def build_interface(port: int, share: bool = False):
    """Build the tabbed interface and launch it."""
    volume_units = get_unit_options('air_volume')
    speed_units = get_unit_options('air_speed')
    length_units = get_unit_options('length')

    with gr.Blocks(title="Duct Sizer", theme=gr.themes.Default()) as demo:
        gr.Markdown("# 🌬️ Duct Sizer")
        gr.Markdown(
            "Round and rectangular HVAC duct sizing from air volume and air speed.\n"
            "Efficiency cells: **red** above 90 %, **green** between 80 and 90 %."
        )

        with gr.Tabs():
            with gr.Tab("Air Volume Calculator"):
                with gr.Row():
                    with gr.Column(scale=1):
                        volumes_in = gr.Textbox(label="Air volume per segment", placeholder="e.g. 10 20 30")
                        volume_unit_in = gr.Dropdown(choices=volume_units, value=DEFAULT_UNITS['air_volume'],
                                                     label="Volume Unit")
                        speeds_in = gr.Textbox(label="Air speed (one, or one per segment)",
                                               value=f"{DEFAULT_SPEED_MPS:g}")
                        speed_unit_in = gr.Dropdown(choices=speed_units, value=DEFAULT_UNITS['air_speed'],
                                                    label="Speed Unit")
                        airflow_btn = gr.Button("Calculate", variant="primary")
                    with gr.Column(scale=2):
                        airflow_summary = gr.Markdown()
                        airflow_out = gr.Dataframe(label="Segments", interactive=False)
                        airflow_chart = gr.Plot(label="Airflow by Segment")

                airflow_btn.click(
                    fn=compute_airflow,
                    inputs=[volumes_in, volume_unit_in, speeds_in, speed_unit_in],
                    outputs=[airflow_summary, airflow_out, airflow_chart],
                )

            with gr.Tab("Rectangular ↔ Round"):
                gr.Markdown("## ⬛ Rectangular → Round")
                with gr.Row():
                    length_in = gr.Number(label="Length")
                    width_in = gr.Number(label="Width")
                    length_unit_in = gr.Dropdown(choices=length_units, value=DEFAULT_UNITS['length'],
                                                 label="Unit")
                rect_round_btn = gr.Button("Convert", variant="primary")
                rect_round_out = gr.Markdown()
                rect_round_btn.click(
                    fn=compute_rect_to_round,
                    inputs=[length_in, width_in, length_unit_in],
                    outputs=[rect_round_out],
                )

                gr.Markdown("## ⚪ Round → Rectangular")
                diameter_in = gr.Number(label="Round duct diameter (mm)")
                round_rect_btn = gr.Button("Convert", variant="primary")
                round_rect_msg = gr.Markdown()
                with gr.Row():
                    round_rect_out = gr.Dataframe(label="Rectangular Ducts", interactive=False)
                    round_rect_chart = gr.Plot(label="Area Ratio")
                round_rect_btn.click(
                    fn=compute_round_to_rect,
                    inputs=[diameter_in],
                    outputs=[round_rect_msg, round_rect_out, round_rect_chart],
                )

            with gr.Tab("Quick Lookup"):
                with gr.Row():
                    quick_speed_in = gr.Number(label="Fixed air speed", value=DEFAULT_SPEED_MPS)
                    quick_unit_in = gr.Dropdown(choices=speed_units, value=DEFAULT_UNITS['air_speed'],
                                                label="Speed Unit")
                quick_volumes_in = gr.Dataframe(
                    headers=["Volume (CMM)"],
                    datatype=["number"],
                    row_count=(1, "dynamic"),
                    col_count=(1, "fixed"),
                    interactive=True,
                    label="Air volumes (add rows as needed)"
                )
                quick_btn = gr.Button("Calculate", variant="primary")
                quick_msg = gr.Markdown()
                quick_out = gr.Dataframe(label="Round Duct Lookup", interactive=False)

                def _on_quick(rows, speed, unit):
                    message, df = compute_quick_lookup(rows, speed, unit)
                    return message, _styled(df)

                quick_btn.click(
                    fn=_on_quick,
                    inputs=[quick_volumes_in, quick_speed_in, quick_unit_in],
                    outputs=[quick_msg, quick_out],
                )

            with gr.Tab("Rectangular Recommendation"):
                with gr.Row():
                    rect_volume_in = gr.Number(label="Air volume")
                    rect_volume_unit_in = gr.Dropdown(choices=volume_units, value=DEFAULT_UNITS['air_volume'],
                                                      label="Volume Unit")
                    rect_speed_in = gr.Number(label="Air speed", value=DEFAULT_SPEED_MPS)
                    rect_speed_unit_in = gr.Dropdown(choices=speed_units, value=DEFAULT_UNITS['air_speed'],
                                                     label="Speed Unit")
                rect_btn = gr.Button("Calculate", variant="primary")
                rect_msg = gr.Markdown()
                with gr.Row():
                    rect_out = gr.Dataframe(label="Rectangular Ducts", interactive=False)
                    rect_chart = gr.Plot(label="Area Ratio")

                def _on_rect(volume, volume_unit, speed, speed_unit):
                    message, df, fig = compute_rect_recommendation(volume, volume_unit, speed, speed_unit)
                    return message, _styled(df), fig

                rect_btn.click(
                    fn=_on_rect,
                    inputs=[rect_volume_in, rect_volume_unit_in, rect_speed_in, rect_speed_unit_in],
                    outputs=[rect_msg, rect_out, rect_chart],
                )

            with gr.Tab("Speed Chart"):
                with gr.Row():
                    chart_volume_in = gr.Number(label="Air volume (CMM)", value=600.0)
                    chart_speed_in = gr.Number(label="Target speed (m/s)", value=DEFAULT_SPEED_MPS)
                chart_btn = gr.Button("Plot", variant="primary")
                speed_chart = gr.Plot(label="Air Speed vs Diameter")
                chart_btn.click(
                    fn=lambda volume, speed: velocity_figure(parse_number(volume), parse_number(speed) or DEFAULT_SPEED_MPS),
                    inputs=[chart_volume_in, chart_speed_in],
                    outputs=[speed_chart],
                )

    demo.launch(server_name="0.0.0.0", server_port=port, share=share)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Duct Sizer")
    parser.add_argument("--share", action="store_true", help="Create a public share link")
    args = parser.parse_args()

    port = int(os.getenv("PORT", "7860"))
    print(f"🚀 Starting Duct Sizer on port {port}")
    build_interface(port=port, share=args.share)

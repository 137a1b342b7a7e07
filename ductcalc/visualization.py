"""
Visualization module for duct sizing charts using Plotly.

- Air speed vs diameter for a given air volume
- Area ratio of rectangular duct candidates
- Cumulative airflow along serial duct segments
"""

import plotly.graph_objects as go
import pandas as pd
import numpy as np
from typing import Sequence

from .airflow import DEFAULT_SPEED_MPS
from .duct_lookup import DUCT_AREAS_M2, DUCT_DIAMETERS_MM
from .rectangular import MAX_RATIO, MIN_RATIO, RectCandidate


def velocity_figure(volume_cmm: float, target_speed_mps: float = DEFAULT_SPEED_MPS) -> go.Figure:
    """
    Create interactive air speed vs diameter chart.

    Args:
        volume_cmm: Air volume in CMM
        target_speed_mps: Design air speed drawn as a guideline

    Returns:
        Plotly Figure object
    """
    flow_m3s = volume_cmm / 60

    diameters_mm = np.linspace(DUCT_DIAMETERS_MM[0], DUCT_DIAMETERS_MM[-1], 200)
    areas_m2 = np.pi * (diameters_mm / 2000) ** 2
    speeds = flow_m3s / areas_m2

    standard_speeds = [flow_m3s / area for area in DUCT_AREAS_M2]

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=diameters_mm,
        y=speeds,
        mode='lines',
        name='Air Speed vs Diameter',
        line=dict(color='blue', width=2),
        hovertemplate='Diameter: %{x:.0f} mm<br>Speed: %{y:.2f} m/s<extra></extra>'
    ))

    fig.add_trace(go.Scatter(
        x=list(DUCT_DIAMETERS_MM),
        y=standard_speeds,
        mode='markers',
        name='Standard Sizes',
        marker=dict(color='red', size=7),
        hovertemplate='Standard Size: %{x} mm<br>Speed: %{y:.2f} m/s<extra></extra>'
    ))

    fig.add_hline(y=target_speed_mps, line_dash="dash", line_color="orange",
                  annotation_text=f"Target Speed ({target_speed_mps:g} m/s)",
                  annotation_position="right")

    fig.update_layout(
        template='plotly_white',
        title=f'Air Speed vs Duct Diameter<br>Volume: {volume_cmm:,.1f} CMM',
        xaxis_title='Duct Diameter (mm)',
        yaxis_title='Air Speed (m/s)',
        showlegend=True,
        height=500,
        xaxis=dict(range=[DUCT_DIAMETERS_MM[0], DUCT_DIAMETERS_MM[-1]], gridcolor='lightgray'),
        yaxis=dict(range=[0, target_speed_mps * 2.5], gridcolor='lightgray')
    )

    return fig


def ratio_figure(candidates: Sequence[RectCandidate]) -> go.Figure:
    """Bar chart of area ratio for each rectangular candidate."""
    labels = [f"{c.short_mm}×{c.long_mm}" for c in candidates]
    ratios = [c.ratio for c in candidates]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=labels,
        y=ratios,
        name='Area Ratio',
        marker_color='steelblue',
        text=[f"{r:.3f}" for r in ratios],
        textposition='outside',
        hovertemplate='Size: %{x} mm<br>Ratio: %{y:.3f}<extra></extra>'
    ))

    fig.add_hline(y=MIN_RATIO, line_dash="dash", line_color="green",
                  annotation_text=f"Exact Area ({MIN_RATIO:g})", annotation_position="right")
    fig.add_hline(y=MAX_RATIO, line_dash="dash", line_color="red",
                  annotation_text=f"Max Oversize ({MAX_RATIO:g})", annotation_position="right")

    fig.update_layout(
        template='plotly_white',
        title='Rectangular Duct Candidates',
        xaxis_title='Short × Long (mm)',
        yaxis_title='Rectangular Area / Required Area',
        showlegend=False,
        height=450,
        yaxis=dict(range=[0.9, MAX_RATIO + 0.1], gridcolor='lightgray')
    )

    return fig


def airflow_figure(segments: pd.DataFrame) -> go.Figure:
    """
    Cumulative airflow per duct segment, labelled with the recommended diameter.

    Args:
        segments: DataFrame from tables.airflow_table
    """
    fig = go.Figure()

    if segments.empty:
        fig.update_layout(template='plotly_white', title='No segments to display')
        return fig

    colors = ['crimson' if flag else 'seagreen' for flag in segments['Undersized']]

    fig.add_trace(go.Bar(
        x=segments['Segment'],
        y=segments['Cumulative (CMM)'],
        name='Cumulative Volume',
        marker_color=colors,
        text=[f"Ø{d} mm" for d in segments['Diameter (mm)']],
        textposition='outside',
        hovertemplate='Segment %{x}<br>Cumulative: %{y:.1f} CMM<extra></extra>'
    ))

    fig.add_trace(go.Bar(
        x=segments['Segment'],
        y=segments['Volume (CMM)'],
        name='Segment Volume',
        marker_color='lightgray',
        hovertemplate='Segment %{x}<br>Volume: %{y:.1f} CMM<extra></extra>'
    ))

    fig.update_layout(
        template='plotly_white',
        title='Airflow by Duct Segment',
        xaxis_title='Segment',
        yaxis_title='Air Volume (CMM)',
        barmode='overlay',
        showlegend=True,
        height=450,
        xaxis=dict(dtick=1),
        yaxis=dict(gridcolor='lightgray')
    )

    return fig

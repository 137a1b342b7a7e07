"""
Result tables for the duct sizing tools.

Each tool takes raw user values with their units, validates them, runs the
calculator and returns a pandas DataFrame ready for display. Invalid input
raises ValueError with a message meant for the user.
"""

import pandas as pd
from typing import Dict, List, Sequence

from .airflow import (
    airflow_efficiency,
    calculate_area,
    cumulative_sum,
    efficiency_class,
    max_airflow,
)
from .duct_lookup import get_next_size, get_recommend_diameter
from .inputs import broadcast_speeds, require_positive, require_value
from .rectangular import RectCandidate, generate_rectangular_candidates, rect_to_round, round_to_rect
from .units import to_canonical

AIRFLOW_COLUMNS = [
    'Segment', 'Volume (CMM)', 'Cumulative (CMM)', 'Speed (m/s)',
    'Diameter (mm)', 'Required Area (m²)', 'Duct Area (m²)', 'Undersized',
]
ROUND_TO_RECT_COLUMNS = ['Short (mm)', 'Long (mm)', 'Ratio']
QUICK_COLUMNS = [
    'Volume (CMM)',
    'Diameter 1 (mm)', 'Max Airflow 1 (CMM)', 'Efficiency 1 (%)',
    'Diameter 2 (mm)', 'Max Airflow 2 (CMM)', 'Efficiency 2 (%)',
]
RECT_COLUMNS = [
    'Short (mm)', 'Long (mm)', 'Area (m²)', 'Ratio', 'Max Airflow (CMM)', 'Efficiency (%)',
]
EFFICIENCY_COLUMNS = ['Efficiency 1 (%)', 'Efficiency 2 (%)', 'Efficiency (%)']

NO_RECT_MESSAGE = "No suitable rectangular duct found under the current settings"

_EFFICIENCY_STYLES = {
    'high': 'color: #d62728; font-weight: bold',
    'mid': 'color: #2ca02c; font-weight: bold',
    '': '',
}


def airflow_table(volumes: Sequence[float], volume_unit: str,
                  speeds: Sequence[float], speed_unit: str) -> pd.DataFrame:
    """
    Size a run of serial duct segments.

    Each segment carries its own air volume plus everything upstream of it,
    so segment n is sized for the cumulative volume of segments 1..n.

    Args:
        volumes: Air volume entering at each segment
        volume_unit: Unit of volumes (see units.UNIT_AIR_VOLUME)
        speeds: One air speed for all segments, or one per segment
        speed_unit: Unit of speeds (see units.UNIT_AIR_SPEED)

    Returns:
        DataFrame with AIRFLOW_COLUMNS, one row per segment

    Raises:
        ValueError: On missing volumes/speeds, a speed count mismatch or a
            non-positive speed
    """
    require_value(len(volumes), "Please enter air volume")
    require_value(len(speeds), "Please enter air speed")

    volumes_cmm = [to_canonical(v, volume_unit, 'air_volume') for v in volumes]
    speeds_mps = [to_canonical(s, speed_unit, 'air_speed') for s in speeds]
    speeds_mps = broadcast_speeds(speeds_mps, len(volumes_cmm))
    for speed in speeds_mps:
        require_positive(speed, "Air speed must be positive")

    cumulative = cumulative_sum(volumes_cmm)

    rows = []
    for i, (volume, total, speed) in enumerate(zip(volumes_cmm, cumulative, speeds_mps), 1):
        area = calculate_area(total, speed)
        rec = get_recommend_diameter(area)
        rows.append({
            'Segment': i,
            'Volume (CMM)': volume,
            'Cumulative (CMM)': total,
            'Speed (m/s)': speed,
            'Diameter (mm)': rec.diameter_mm,
            'Required Area (m²)': area,
            'Duct Area (m²)': rec.area_m2,
            'Undersized': not rec.covers(area),
        })

    return pd.DataFrame(rows, columns=AIRFLOW_COLUMNS)


def undersized_warnings(df: pd.DataFrame) -> List[str]:
    """Warnings for segments that need more than the largest standard duct."""
    warnings = []
    if df.empty:
        return warnings
    for _, row in df[df['Undersized']].iterrows():
        warnings.append(
            f"⚠️ Segment {row['Segment']} needs {row['Required Area (m²)']:.4f} m², "
            f"larger than the biggest standard duct ({row['Diameter (mm)']} mm)"
        )
    return warnings


def rect_to_round_summary(length: float, length_unit: str,
                          width: float, width_unit: str) -> Dict:
    """
    Recommend a round duct for a rectangular one.

    Returns:
        Dictionary with the rectangular area, the recommended diameter and its area
    """
    if not length or not width:
        raise ValueError("Please enter length and width")

    length_m = to_canonical(length, length_unit, 'length')
    width_m = to_canonical(width, width_unit, 'length')
    require_positive(length_m, "Length and width must be positive")
    require_positive(width_m, "Length and width must be positive")

    rect_area, rec = rect_to_round(length_m, width_m)
    return {
        'Rectangular Area (m²)': rect_area,
        'Diameter (mm)': rec.diameter_mm,
        'Duct Area (m²)': rec.area_m2,
        'Undersized': not rec.covers(rect_area),
    }


def round_to_rect_table(diameter_mm: float) -> pd.DataFrame:
    """Rectangular ducts equivalent to a round duct; empty if none qualify."""
    require_value(diameter_mm, "Please enter the round duct diameter (mm)")
    require_positive(diameter_mm, "Round duct diameter must be positive")

    candidates = round_to_rect(diameter_mm)
    return pd.DataFrame(
        [{'Short (mm)': c.short_mm, 'Long (mm)': c.long_mm, 'Ratio': c.ratio} for c in candidates],
        columns=ROUND_TO_RECT_COLUMNS,
    )


def quick_lookup_table(volumes_cmm: Sequence[float], speed: float, speed_unit: str) -> pd.DataFrame:
    """
    Quick round duct lookup for a list of air volumes at one fixed speed.

    For every non-zero volume the table gives the recommended duct and the
    next larger one, each with its max airflow and efficiency. The second
    size is None when the recommended duct is the largest in the catalog.

    Raises:
        ValueError: On a missing/non-positive speed, no rows, or only blank rows
    """
    require_value(speed, "Please enter a fixed air speed")
    speed_mps = to_canonical(speed, speed_unit, 'air_speed')
    require_positive(speed_mps, "Air speed must be positive")
    require_value(len(volumes_cmm), "Please add at least one air volume row")

    rows = []
    for volume in volumes_cmm:
        if not volume:
            continue  # blank row

        rec = get_recommend_diameter(calculate_area(volume, speed_mps))
        row = {
            'Volume (CMM)': volume,
            'Diameter 1 (mm)': rec.diameter_mm,
            'Max Airflow 1 (CMM)': max_airflow(rec.area_m2, speed_mps),
            'Efficiency 1 (%)': airflow_efficiency(volume, rec.area_m2, speed_mps),
            'Diameter 2 (mm)': None,
            'Max Airflow 2 (CMM)': None,
            'Efficiency 2 (%)': None,
        }

        nxt = get_next_size(rec)
        if nxt is not None:
            row['Diameter 2 (mm)'] = nxt.diameter_mm
            row['Max Airflow 2 (CMM)'] = max_airflow(nxt.area_m2, speed_mps)
            row['Efficiency 2 (%)'] = airflow_efficiency(volume, nxt.area_m2, speed_mps)

        rows.append(row)

    if not rows:
        raise ValueError("Please enter a CMM value in at least one row")

    return pd.DataFrame(rows, columns=QUICK_COLUMNS)


def rect_recommendation_table(volume: float, volume_unit: str,
                              speed: float, speed_unit: str) -> pd.DataFrame:
    """
    Rectangular ducts for an air volume at a given speed.

    Returns an empty DataFrame when no size falls in the accepted area ratio.
    """
    require_value(volume, "Please enter air volume")
    require_value(speed, "Please enter air speed")

    volume_cmm = to_canonical(volume, volume_unit, 'air_volume')
    speed_mps = to_canonical(speed, speed_unit, 'air_speed')
    require_positive(volume_cmm, "Air volume must be positive")
    require_positive(speed_mps, "Air speed must be positive")

    candidates = generate_rectangular_candidates(calculate_area(volume_cmm, speed_mps))
    return pd.DataFrame(
        [_rect_row(c, volume_cmm, speed_mps) for c in candidates],
        columns=RECT_COLUMNS,
    )


def _rect_row(candidate: RectCandidate, volume_cmm: float, speed_mps: float) -> Dict:
    return {
        'Short (mm)': candidate.short_mm,
        'Long (mm)': candidate.long_mm,
        'Area (m²)': candidate.area_m2,
        'Ratio': candidate.ratio,
        'Max Airflow (CMM)': max_airflow(candidate.area_m2, speed_mps),
        'Efficiency (%)': airflow_efficiency(volume_cmm, candidate.area_m2, speed_mps),
    }


def _efficiency_style(value) -> str:
    if value is None or pd.isna(value):
        return ''
    return _EFFICIENCY_STYLES[efficiency_class(value)]


def style_efficiency(df: pd.DataFrame):
    """Return a Styler colouring efficiency cells (red > 90 %, green 80-90 %)."""
    cols = [c for c in EFFICIENCY_COLUMNS if c in df.columns]
    return df.style.map(_efficiency_style, subset=cols).format(precision=3)

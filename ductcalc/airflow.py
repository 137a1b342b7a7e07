"""
Airflow calculations for round and rectangular ducts.

Volumes are in CMM (m³/min), speeds in m/s and areas in m².
"""

from itertools import accumulate
from typing import Iterable, List

DEFAULT_SPEED_MPS = 13.0

# Efficiency thresholds (% of a duct's max airflow) used to flag results.
EFFICIENCY_HIGH = 90.0
EFFICIENCY_MID = 80.0


def calculate_area(volume_cmm, speed_mps):
    """
    Required cross-sectional area (m²) for an air volume at a given speed.

    Formula: A = Q / 60 / V

    Args:
        volume_cmm: Air volume in CMM
        speed_mps: Air speed in m/s, must be > 0

    Returns:
        Area in m²
    """
    return volume_cmm / 60 / speed_mps


def cumulative_sum(values: Iterable[float]) -> List[float]:
    """Running totals, e.g. [10, 20, 30] -> [10, 30, 60]."""
    return list(accumulate(values))


def max_airflow(area_m2, speed_mps):
    """Air volume (CMM) a duct of area_m2 carries at speed_mps."""
    return area_m2 * speed_mps * 60


def airflow_efficiency(volume_cmm, area_m2, speed_mps):
    """Requested volume as a percentage of the duct's max airflow."""
    return volume_cmm / max_airflow(area_m2, speed_mps) * 100


def efficiency_class(percent) -> str:
    """Return 'high' above 90 %, 'mid' between 80 and 90 %, else ''."""
    if percent > EFFICIENCY_HIGH:
        return 'high'
    if EFFICIENCY_MID <= percent <= EFFICIENCY_HIGH:
        return 'mid'
    return ''

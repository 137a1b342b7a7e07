"""
Rectangular duct sizing.

Generates rectangular ducts whose area matches a required area, and converts
between round and rectangular ducts of equivalent area.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from .duct_lookup import DuctSize, circle_area, get_recommend_diameter

DEFAULT_STEP_MM = 50
DEFAULT_MAX_SHORT_MM = 1600

# Accepted rectangular area / required area.
MIN_RATIO = 1.0
MAX_RATIO = 1.25


@dataclass(frozen=True)
class RectCandidate:
    """A rectangular duct size and how much it oversizes the requirement."""
    short_mm: int
    long_mm: int
    area_m2: float
    ratio: float


def generate_rectangular_candidates(required_area_m2, step_mm: int = DEFAULT_STEP_MM,
                                    max_short_mm: int = DEFAULT_MAX_SHORT_MM) -> List[RectCandidate]:
    """
    Generate rectangular duct sizes for a required area.

    For each short side (step_mm, 2*step_mm, ... max_short_mm) the theoretical
    long side is rounded up to a multiple of step_mm, so the rectangle is
    never smaller than required. Only sizes with an area ratio between
    MIN_RATIO and MAX_RATIO are kept.

    Args:
        required_area_m2: Required cross-sectional area in m²
        step_mm: Size increment for both sides in mm
        max_short_mm: Largest short side to try in mm

    Returns:
        Candidates sorted by short side; empty if none qualify
    """
    results = []
    # NaN and infinite areas have no rectangular equivalent
    if not required_area_m2 or not math.isfinite(required_area_m2) or required_area_m2 <= 0:
        return results

    for short_mm in range(step_mm, max_short_mm + 1, step_mm):
        short_m = short_mm / 1000
        long_m_theory = required_area_m2 / short_m

        long_mm_theory = long_m_theory * 1000
        long_mm = math.ceil(long_mm_theory / step_mm) * step_mm
        long_m = long_mm / 1000

        area_rect = short_m * long_m
        ratio = area_rect / required_area_m2

        if MIN_RATIO <= ratio <= MAX_RATIO:
            results.append(RectCandidate(short_mm, long_mm, area_rect, ratio))

    results.sort(key=lambda c: c.short_mm)
    return results


def round_to_rect(diameter_mm, step_mm: int = DEFAULT_STEP_MM,
                  max_short_mm: int = DEFAULT_MAX_SHORT_MM) -> List[RectCandidate]:
    """Rectangular ducts equivalent in area to a round duct of diameter_mm."""
    if not diameter_mm or diameter_mm <= 0:
        return []
    return generate_rectangular_candidates(circle_area(diameter_mm), step_mm, max_short_mm)


def rect_to_round(length_m, width_m) -> Tuple[float, DuctSize]:
    """Return the rectangular area (m²) and the recommended round duct for it."""
    rect_area = length_m * width_m
    return rect_area, get_recommend_diameter(rect_area)

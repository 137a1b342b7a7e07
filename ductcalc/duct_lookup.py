"""
Lookup module for standard round duct sizes.
Rounds a required cross-sectional area (m²) up to the nearest standard diameter.
"""

import bisect
import math
from dataclasses import dataclass
from typing import List, Optional

# Standard round duct diameters (mm), ascending.
DUCT_DIAMETERS_MM = (
    50, 80, 100, 150, 200, 250, 300, 350, 400, 450, 500, 550, 600, 650, 700, 750,
    800, 850, 900, 950, 1000, 1050, 1100, 1150, 1200, 1250, 1300, 1350, 1400,
    1450, 1500, 1550, 1600,
)


def circle_area(diameter_mm):
    """Cross-sectional area (m²) of a round duct with the given diameter (mm)."""
    r = diameter_mm / 2 / 1000
    return r * r * math.pi


DUCT_AREAS_M2 = tuple(circle_area(d) for d in DUCT_DIAMETERS_MM)


@dataclass(frozen=True)
class DuctSize:
    """A cataloged round duct size."""
    diameter_mm: int
    area_m2: float

    def covers(self, area_m2: float) -> bool:
        """True when this duct is at least as large as the required area."""
        return self.area_m2 >= area_m2


def get_duct_table() -> List[DuctSize]:
    """Return the full catalog, smallest first."""
    return [DuctSize(d, a) for d, a in zip(DUCT_DIAMETERS_MM, DUCT_AREAS_M2)]


def get_recommend_diameter(area_m2) -> DuctSize:
    """
    Return the smallest standard duct whose area >= area_m2.

    Requirements beyond the largest duct (and NaN) return the largest entry;
    use DuctSize.covers to detect that case.
    """
    if math.isnan(area_m2):
        idx = len(DUCT_AREAS_M2) - 1
    else:
        idx = bisect.bisect_left(DUCT_AREAS_M2, area_m2)
    if idx >= len(DUCT_AREAS_M2):
        idx = len(DUCT_AREAS_M2) - 1  # Return largest size if area is too big
    return DuctSize(DUCT_DIAMETERS_MM[idx], DUCT_AREAS_M2[idx])


def get_next_size(size: DuctSize) -> Optional[DuctSize]:
    """
    Return the next larger standard duct, or None if size is the largest
    (or not cataloged).
    """
    try:
        idx = DUCT_DIAMETERS_MM.index(size.diameter_mm)
    except ValueError:
        return None
    if idx >= len(DUCT_DIAMETERS_MM) - 1:
        return None
    return DuctSize(DUCT_DIAMETERS_MM[idx + 1], DUCT_AREAS_M2[idx + 1])

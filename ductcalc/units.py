"""
Unit conversion tables for duct sizing inputs.

Every factor converts one unit into the canonical unit of its quantity:
meters for length, m/s for air speed and CMM for air volume.
"""

from types import MappingProxyType
from typing import List

UNIT_LENGTH = MappingProxyType({
    'm': 1.0,
    'cm': 0.01,
    'mm': 0.001,
})

UNIT_AIR_SPEED = MappingProxyType({
    'm/s': 1.0,
    'km/h': 0.277778,
    'ft/s': 0.3048,
})

UNIT_AIR_VOLUME = MappingProxyType({
    'CMM': 1.0,
    'CFM': 0.0283168,  # 1 ft³ = 0.0283168 m³
})

UNIT_TABLES = MappingProxyType({
    'length': UNIT_LENGTH,
    'air_speed': UNIT_AIR_SPEED,
    'air_volume': UNIT_AIR_VOLUME,
})

DEFAULT_UNITS = MappingProxyType({
    'length': 'mm',
    'air_speed': 'm/s',
    'air_volume': 'CMM',
})


def _get_table(quantity):
    if quantity not in UNIT_TABLES:
        raise ValueError(f"Unknown quantity: {quantity}")
    return UNIT_TABLES[quantity]


def get_unit_options(quantity: str) -> List[str]:
    """Return the unit labels available for a quantity."""
    return list(_get_table(quantity).keys())


def to_canonical(value: float, unit: str, quantity: str) -> float:
    """
    Convert value expressed in unit into the canonical unit of quantity.

    Raises:
        ValueError: If the quantity or the unit is unknown
    """
    table = _get_table(quantity)
    if unit not in table:
        raise ValueError(f"Unknown {quantity} unit '{unit}'. Valid: {list(table)}")
    return value * table[unit]


def from_canonical(value: float, unit: str, quantity: str) -> float:
    """Inverse of to_canonical."""
    table = _get_table(quantity)
    if unit not in table:
        raise ValueError(f"Unknown {quantity} unit '{unit}'. Valid: {list(table)}")
    return value / table[unit]

# File: cube_family_generator/config/units.py

"""
Unit conversion between project units and the host's internal feet.

The host stores every length in decimal feet, so user-facing widths and
gaps are converted before geometry is built.
"""

from enum import Enum
from typing import Dict, Union


class ProjectUnits(Enum):
    """
    Enumeration of supported project units.
    """
    FEET = "feet"
    INCHES = "inches"
    METERS = "meters"
    MILLIMETERS = "millimeters"


# Conversion factors to feet
_CONVERSION_TO_FEET: Dict[ProjectUnits, float] = {
    ProjectUnits.FEET: 1.0,
    ProjectUnits.INCHES: 1 / 12.0,
    ProjectUnits.METERS: 1 / 0.3048,
    ProjectUnits.MILLIMETERS: 1 / 304.8,
}


def parse_units(units: Union[ProjectUnits, str]) -> ProjectUnits:
    """
    Resolve a ProjectUnits value from an enum member or its string value.

    Raises:
        ValueError: If the provided units are not supported
    """
    if isinstance(units, ProjectUnits):
        return units
    if isinstance(units, str):
        try:
            return ProjectUnits(units.strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported unit string: {units}")
    raise ValueError(f"Units must be ProjectUnits enum or string, got {type(units)}")


def convert_to_feet(value: float, current_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a value from the specified units to feet.

    Args:
        value: The numeric value to convert
        current_units: The units to convert from (ProjectUnits enum or string)

    Returns:
        The value converted to feet
    """
    return value * _CONVERSION_TO_FEET[parse_units(current_units)]


# File: src/cube_family_generator/config/__init__.py
"""
Configuration for the cube family generator.

Usage:
    from cube_family_generator.config import FamilySettings, ProjectUnits

    settings = FamilySettings.load(width=500, units=ProjectUnits.MILLIMETERS)
"""

from .units import (
    ProjectUnits,
    parse_units,
    convert_to_feet,
)

from .settings import (
    FamilySettings,
    default_addin_dir,
    ENV_PREFIX,
)

__all__ = [
    "ProjectUnits",
    "parse_units",
    "convert_to_feet",
    "FamilySettings",
    "default_addin_dir",
    "ENV_PREFIX",
]

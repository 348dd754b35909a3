# File: src/cube_family_generator/__init__.py
"""
Cube family generator: a Revit add-in that builds a dimensioned Generic
Model cube family, loads it into the active project and places an instance
at a picked point.

Usage:
    from cube_family_generator import CubeFamilyCommand, build_profile

    profile = build_profile(20.0)
    result = CubeFamilyCommand().execute(__revit__)  # inside Revit
"""

__version__ = "1.0.0"

from .errors import (
    CubeFamilyError,
    InvalidArgumentError,
    HostUnavailableError,
    HostOperationError,
    OperationCancelledError,
)

from .geometry import (
    Edge,
    Profile,
    DimensionSpan,
    build_profile,
    compute_dimension_span,
    build_dimension_chains,
)

from .config import FamilySettings, ProjectUnits

from .command import CubeFamilyCommand, CommandResult

__all__ = [
    # Errors
    "CubeFamilyError",
    "InvalidArgumentError",
    "HostUnavailableError",
    "HostOperationError",
    "OperationCancelledError",
    # Geometry
    "Edge",
    "Profile",
    "DimensionSpan",
    "build_profile",
    "compute_dimension_span",
    "build_dimension_chains",
    # Config
    "FamilySettings",
    "ProjectUnits",
    # Command
    "CubeFamilyCommand",
    "CommandResult",
]

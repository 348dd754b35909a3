# File: src/cube_family_generator/geometry/__init__.py

"""Pure geometry for the cube family.

Builds the square extrusion profile and the dimension lines that annotate
it. Nothing here touches the host API, so the results can be validated
before a family document is created.

Usage:
    from cube_family_generator.geometry import build_profile, build_dimension_chains

    profile = build_profile(20.0)
    chains = build_dimension_chains(profile, gap=2.0)
"""

from .types import (
    Point,
    Edge,
    Profile,
    DimensionSpan,
    ORIGIN,
    BASIS_Z,
)

from .profile_builder import build_profile, plane_axes

from .dimensions import (
    compute_dimension_span,
    build_dimension_chains,
    CHAIN_NAMES,
    DEFAULT_GAP,
)

__all__ = [
    # Types
    "Point",
    "Edge",
    "Profile",
    "DimensionSpan",
    "ORIGIN",
    "BASIS_Z",
    # Profile
    "build_profile",
    "plane_axes",
    # Dimensions
    "compute_dimension_span",
    "build_dimension_chains",
    "CHAIN_NAMES",
    "DEFAULT_GAP",
]

# File: src/cube_family_generator/geometry/profile_builder.py
"""
Square profile construction for the cube extrusion.

Builds the four corners and bounding edges of a square centered on a point
of a sketch plane. The plane's local frame follows the arbitrary-axis rule,
so the default plane (normal +Z through the origin) yields world-aligned
corners:

    width = 20  ->  (10, 10, 0), (-10, 10, 0), (-10, -10, 0), (10, -10, 0)
"""

import logging
import math
from typing import Sequence, Tuple

from ..errors import InvalidArgumentError
from .types import BASIS_Z, ORIGIN, Edge, Point, Profile
from .vectors import (
    Vector,
    as_vector,
    is_zero,
    vector_add,
    vector_cross,
    vector_normalize,
    vector_scale,
)

logger = logging.getLogger(__name__)

# Threshold of the arbitrary-axis algorithm
ARBITRARY_AXIS_LIMIT = 1.0 / 64.0

WORLD_Y: Vector = (0.0, 1.0, 0.0)
WORLD_Z: Vector = (0.0, 0.0, 1.0)


def plane_axes(normal: Sequence[float]) -> Tuple[Vector, Vector, Vector]:
    """Compute an orthonormal local frame for a plane normal.

    Args:
        normal: Plane normal (any length but zero)

    Returns:
        Tuple (x_axis, y_axis, unit_normal), right-handed

    Raises:
        InvalidArgumentError: If the normal is zero or not finite
    """
    n = as_vector(normal, "normal")
    if is_zero(n):
        raise InvalidArgumentError(
            f"Plane normal {n} is degenerate; cannot construct sketch plane"
        )
    n = vector_normalize(n)

    if abs(n[0]) < ARBITRARY_AXIS_LIMIT and abs(n[1]) < ARBITRARY_AXIS_LIMIT:
        x_axis = vector_normalize(vector_cross(WORLD_Y, n))
    else:
        x_axis = vector_normalize(vector_cross(WORLD_Z, n))
    y_axis = vector_cross(n, x_axis)
    return x_axis, y_axis, n


def build_profile(
    width: float,
    center: Sequence[float] = ORIGIN,
    normal: Sequence[float] = BASIS_Z,
) -> Profile:
    """Build a closed square profile of side ``width``.

    Args:
        width: Side length, must be positive
        center: Profile center point (default origin)
        normal: Sketch plane normal (default +Z)

    Returns:
        Profile with corners p0..p3 and edges ordered counter-clockwise
        about the normal

    Raises:
        InvalidArgumentError: For non-positive width or a degenerate normal
    """
    try:
        width = float(width)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Width must be a number, got {width!r}")
    if not math.isfinite(width) or width <= 0:
        raise InvalidArgumentError(f"Width must be positive, got {width}")

    c = as_vector(center, "center")
    x_axis, y_axis, n = plane_axes(normal)
    half = width / 2.0

    def corner(sx: float, sy: float) -> Point:
        offset = vector_add(vector_scale(x_axis, sx * half), vector_scale(y_axis, sy * half))
        return vector_add(c, offset)

    p0 = corner(1, 1)
    p1 = corner(-1, 1)
    p2 = corner(-1, -1)
    p3 = corner(1, -1)

    edges = (Edge(p0, p1), Edge(p1, p2), Edge(p2, p3), Edge(p3, p0))

    logger.debug("Built %.4f square profile at %s, normal %s", width, c, n)

    return Profile(
        center=c,
        normal=n,
        x_axis=x_axis,
        y_axis=y_axis,
        width=width,
        height=width,
        corners=(p0, p1, p2, p3),
        edges=edges,
    )

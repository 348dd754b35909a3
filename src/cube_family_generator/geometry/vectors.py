# File: src/cube_family_generator/geometry/vectors.py
"""Tuple-based 3D vector helpers used by the profile and dimension geometry."""

import math
from typing import Sequence, Tuple

from ..errors import InvalidArgumentError

Vector = Tuple[float, float, float]

# Lengths below this are treated as zero (host short-curve tolerance is ~1/256 ft)
ZERO_TOLERANCE = 1e-9


def as_vector(value: Sequence[float], name: str = "vector") -> Vector:
    """Coerce a 3-item sequence of numbers into a float tuple.

    Raises:
        InvalidArgumentError: If value is not three finite numbers
    """
    try:
        x, y, z = value
        result = (float(x), float(y), float(z))
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            f"{name} must be a sequence of three numbers, got {value!r}"
        )
    if not all(math.isfinite(c) for c in result):
        raise InvalidArgumentError(f"{name} has non-finite components: {result}")
    return result


def vector_add(a: Vector, b: Vector) -> Vector:
    """Add vectors a and b."""
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def vector_subtract(a: Vector, b: Vector) -> Vector:
    """Subtract vector b from vector a."""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def vector_scale(v: Vector, s: float) -> Vector:
    """Scale vector v by scalar s."""
    return (v[0] * s, v[1] * s, v[2] * s)


def vector_negate(v: Vector) -> Vector:
    return (-v[0], -v[1], -v[2])


def vector_dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def vector_cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def vector_length(v: Vector) -> float:
    """Calculate vector length."""
    return math.sqrt(v[0] ** 2 + v[1] ** 2 + v[2] ** 2)


def is_zero(v: Vector, tolerance: float = ZERO_TOLERANCE) -> bool:
    return vector_length(v) <= tolerance


def vector_normalize(v: Vector) -> Vector:
    """Normalize vector to unit length.

    Raises:
        InvalidArgumentError: If the vector has (near) zero length
    """
    length = vector_length(v)
    if length <= ZERO_TOLERANCE:
        raise InvalidArgumentError(f"Cannot normalize zero-length vector {v}")
    return (v[0] / length, v[1] / length, v[2] / length)


def almost_equal(a: Vector, b: Vector, tolerance: float = ZERO_TOLERANCE) -> bool:
    """True if points/vectors a and b coincide within tolerance."""
    return vector_length(vector_subtract(a, b)) <= tolerance

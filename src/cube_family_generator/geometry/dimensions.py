# File: src/cube_family_generator/geometry/dimensions.py
"""
Dimension line geometry for annotating the cube profile.

A dimension measures the distance between two reference lines, p0->p1 and
p2->p3. The dimension line is pushed away from the profile opposite to the
first reference's direction:

    d  = normalize(p1 - p0)
    p0' = p0 - d * gap
    p3' = p3 - d * gap

Example:
    p0=(10,10,0), p1=(-10,10,0), p3=(-10,-10,0), gap=4
    d = (-1,0,0), p0' = (14,10,0), p3' = (-6,-10,0)
"""

import logging
import math
from typing import Dict, Sequence

from ..errors import InvalidArgumentError
from .types import DimensionSpan, Edge, Profile
from .vectors import (
    as_vector,
    is_zero,
    vector_add,
    vector_negate,
    vector_normalize,
    vector_scale,
    vector_subtract,
)

logger = logging.getLogger(__name__)

# Default dimension offset in feet; overall dimensions use twice this
DEFAULT_GAP = 2.0

# Order in which the chains are created on the family view
CHAIN_NAMES = (
    "overall_length",
    "upper_length",
    "lower_length",
    "overall_breadth",
    "left_breadth",
    "right_breadth",
)


def compute_dimension_span(
    p0: Sequence[float],
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    gap: float,
) -> DimensionSpan:
    """Compute the offset dimension line and witness lines for one span.

    Args:
        p0: Start of the first reference line
        p1: End of the first reference line (defines the direction)
        p2: Start of the second reference line
        p3: End of the second reference line; the dimension line ends here
        gap: Offset distance; zero gives zero-length witness lines

    Returns:
        DimensionSpan with the offset dimension line and witness segments

    Raises:
        InvalidArgumentError: If p0 == p1 or gap is not a finite number
    """
    a0 = as_vector(p0, "p0")
    a1 = as_vector(p1, "p1")
    a2 = as_vector(p2, "p2")
    a3 = as_vector(p3, "p3")

    try:
        gap = float(gap)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Gap must be a number, got {gap!r}")
    if not math.isfinite(gap):
        raise InvalidArgumentError(f"Gap must be finite, got {gap}")

    delta = vector_subtract(a1, a0)
    if is_zero(delta):
        raise InvalidArgumentError(
            f"Reference points coincide at {a0}; dimension direction is undefined"
        )
    direction = vector_normalize(delta)
    offset_direction = vector_negate(direction)
    shift = vector_scale(offset_direction, gap)

    start = vector_add(a0, shift)
    end = vector_add(a3, shift)

    return DimensionSpan(
        reference=Edge(a0, a1),
        far_reference=Edge(a2, a3),
        direction=direction,
        offset_direction=offset_direction,
        gap=gap,
        dimension_line=Edge(start, end),
        witness_lines=(Edge(a0, start), Edge(a3, end)),
    )


def build_dimension_chains(
    profile: Profile, gap: float = DEFAULT_GAP
) -> Dict[str, DimensionSpan]:
    """Lay out the six dimensions that annotate a cube profile.

    Overall dimensions span opposite edges at twice the gap. The half
    dimensions measure from one edge to the profile centerline at the gap.

    Args:
        profile: Square profile from build_profile()
        gap: Base dimension offset

    Returns:
        Dict mapping chain name (see CHAIN_NAMES) -> DimensionSpan
    """
    p0, p1, p2, p3 = profile.corners
    top, left, _, right = profile.edges
    center = profile.center

    def centerline(edge: Edge):
        """Line through the center parallel to edge, from -d*L/2 to +d*L/2."""
        half = vector_scale(edge.unit_direction, edge.length / 2.0)
        return vector_add(center, vector_negate(half)), vector_add(center, half)

    # Horizontal centerline uses edge p0->p1; vertical ones use p1->p2 and p3->p0
    h_neg, h_pos = centerline(top)
    l_neg, l_pos = centerline(left)
    r_neg, r_pos = centerline(right)

    chains = {
        "overall_length": compute_dimension_span(p1, p0, p3, p2, gap * 2),
        "upper_length": compute_dimension_span(p1, p0, h_neg, h_pos, gap),
        "lower_length": compute_dimension_span(h_pos, h_neg, p3, p2, gap),
        "overall_breadth": compute_dimension_span(p2, p1, p0, p3, gap * 2),
        "left_breadth": compute_dimension_span(p2, p1, l_neg, l_pos, gap),
        "right_breadth": compute_dimension_span(r_neg, r_pos, p0, p3, gap),
    }

    logger.debug("Built %d dimension chains with gap %s", len(chains), gap)
    return chains

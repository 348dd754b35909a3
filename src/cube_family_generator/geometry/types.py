# File: src/cube_family_generator/geometry/types.py

"""Data models for the cube profile and its dimension annotations.

All coordinates are in host internal units (feet). Instances are immutable
and are built once per command invocation.

Key Types:
    Edge: A bounded line segment between two points
    Profile: Closed four-edge square loop on a sketch plane
    DimensionSpan: Offset dimension line and witness lines between two references
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .vectors import (
    Vector,
    almost_equal,
    vector_length,
    vector_normalize,
    vector_scale,
    vector_subtract,
)

Point = Tuple[float, float, float]

ORIGIN: Point = (0.0, 0.0, 0.0)
BASIS_Z: Vector = (0.0, 0.0, 1.0)


def _point_dict(p: Point) -> Dict[str, float]:
    return {"x": p[0], "y": p[1], "z": p[2]}


# =============================================================================
# Data Models
# =============================================================================


@dataclass(frozen=True)
class Edge:
    """A bounded line from start to end.

    Attributes:
        start: Start point (x, y, z).
        end: End point (x, y, z).
    """

    start: Point
    end: Point

    @property
    def direction(self) -> Vector:
        """Unnormalized direction vector end - start."""
        return vector_subtract(self.end, self.start)

    @property
    def length(self) -> float:
        return vector_length(self.direction)

    @property
    def unit_direction(self) -> Vector:
        """Normalized direction. Raises InvalidArgumentError for zero-length edges."""
        return vector_normalize(self.direction)

    def to_dict(self) -> Dict[str, Any]:
        return {"start": _point_dict(self.start), "end": _point_dict(self.end)}


@dataclass(frozen=True)
class Profile:
    """A closed square profile lying in a plane.

    Corners and edges are ordered counter-clockwise about ``normal``:
    edge i runs from corner i to corner i+1.

    Attributes:
        center: Profile center on the sketch plane.
        normal: Unit plane normal; the extrusion direction.
        x_axis: Unit local X axis of the plane.
        y_axis: Unit local Y axis of the plane.
        width: Side length along x_axis.
        height: Side length along y_axis (equal to width for the cube).
        corners: The four corner points p0..p3.
        edges: The four bounding edges p0->p1, p1->p2, p2->p3, p3->p0.
    """

    center: Point
    normal: Vector
    x_axis: Vector
    y_axis: Vector
    width: float
    height: float
    corners: Tuple[Point, Point, Point, Point]
    edges: Tuple[Edge, Edge, Edge, Edge]

    @property
    def extrusion_depth(self) -> float:
        """Extrusion distance that turns the square into a cube."""
        return self.width

    @property
    def extrusion_vector(self) -> Vector:
        return vector_scale(self.normal, self.extrusion_depth)

    def is_closed(self) -> bool:
        """True if each edge ends where the next one starts."""
        count = len(self.edges)
        return all(
            almost_equal(self.edges[i].end, self.edges[(i + 1) % count].start)
            for i in range(count)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict for JSON output."""
        return {
            "center": _point_dict(self.center),
            "normal": _point_dict(self.normal),
            "width": self.width,
            "height": self.height,
            "corners": [_point_dict(p) for p in self.corners],
            "edges": [e.to_dict() for e in self.edges],
        }


@dataclass(frozen=True)
class DimensionSpan:
    """Geometry for one linear dimension between two reference lines.

    The dimension line runs from ``p0 + offset_direction * gap`` to
    ``p3 + offset_direction * gap``; the witness lines join each anchor to
    its offset point.

    Attributes:
        reference: First reference edge p0->p1 (defines the direction).
        far_reference: Second reference edge p2->p3.
        direction: Unit direction of the first reference edge.
        offset_direction: Direction the dimension line is pushed (-direction).
        gap: Signed offset distance.
        dimension_line: The offset line handed to the host annotation call.
        witness_lines: Segments p0->p0' and p3->p3'.
    """

    reference: Edge
    far_reference: Edge
    direction: Vector
    offset_direction: Vector
    gap: float
    dimension_line: Edge
    witness_lines: Tuple[Edge, Edge]

    @property
    def offset_points(self) -> Tuple[Point, Point]:
        return (self.dimension_line.start, self.dimension_line.end)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict for JSON output."""
        return {
            "reference": self.reference.to_dict(),
            "far_reference": self.far_reference.to_dict(),
            "direction": _point_dict(self.direction),
            "gap": self.gap,
            "dimension_line": self.dimension_line.to_dict(),
            "witness_lines": [w.to_dict() for w in self.witness_lines],
        }

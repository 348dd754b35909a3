# File: src/cube_family_generator/host/family_builder.py
"""
Revit family-document construction for the cube family.

Turns the pure geometry from ``cube_family_generator.geometry`` into family
elements: a solid extrusion, a length parameter and six linear dimensions.
Geometry is computed before this module is called, so a geometry error never
leaves partial elements in the family document.

Usage (inside Revit only):
    family_doc = create_family_document(app, settings.template_path)
    try:
        build_generic_model(family_doc, profile, chains, settings)
        save_family_document(family_doc, settings.family_path)
    finally:
        close_family_document(family_doc)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..config.settings import FamilySettings
from ..errors import HostOperationError
from ..geometry.types import DimensionSpan, Edge, Profile
from ..utils.logging_config import TRACE_LEVEL
from . import revit_api
from .revit_api import to_xyz
from .transactions import revit_transaction

logger = logging.getLogger(__name__)

# Level plan view that family templates ship with
PREFERRED_VIEW_NAME = "Ref. Level"

# Dimensions labeled with the width parameter when label_dimensions is set
LABELED_CHAINS = ("overall_length", "overall_breadth")


@dataclass
class GenericModelElements:
    """Elements created in the family document.

    Attributes:
        extrusion: The solid Extrusion
        parameter: The width FamilyParameter
        dimensions: Mapping of chain name -> Dimension
    """
    extrusion: Any = None
    parameter: Any = None
    dimensions: Dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Document Lifecycle
# =============================================================================

def create_family_document(app, template_path: str) -> Any:
    """Create a new family document from a family template.

    Args:
        app: Revit Application (not UIApplication)
        template_path: Absolute path to the .rft template

    Returns:
        The new family Document

    Raises:
        HostOperationError: If the template is missing or Revit returns no document
    """
    revit_api.require_revit()

    if not os.path.isfile(template_path):
        raise HostOperationError(
            f"Family template not found: {template_path}",
            extra={"template_path": template_path},
        )

    family_doc = app.NewFamilyDocument(template_path)
    if family_doc is None:
        raise HostOperationError("Cannot open family document")

    logger.info("Created family document from %s", template_path)
    return family_doc


def save_family_document(family_doc, family_path: str, overwrite: bool = True) -> str:
    """Save the family document as an .rfa file.

    Returns:
        The path the family was saved to
    """
    revit_api.require_revit()

    directory = os.path.dirname(family_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    options = revit_api.DB.SaveAsOptions()
    options.OverwriteExistingFile = overwrite
    family_doc.SaveAs(family_path, options)

    logger.info("Saved family to %s", family_path)
    return family_path


def close_family_document(family_doc) -> None:
    """Close the family document without saving again."""
    if family_doc is None:
        return
    family_doc.Close(False)
    logger.debug("Closed family document")


# =============================================================================
# Geometry Conversion
# =============================================================================

def edge_to_line(edge: Edge) -> Any:
    """Create a bound Revit Line from an Edge."""
    return revit_api.DB.Line.CreateBound(to_xyz(edge.start), to_xyz(edge.end))


def create_sketch_plane(family_doc, profile: Profile) -> Any:
    """Create the sketch plane the profile lies on.

    Raises:
        HostOperationError: If Revit fails to create the plane
    """
    DB = revit_api.DB

    geometry_plane = DB.Plane.CreateByNormalAndOrigin(
        to_xyz(profile.normal), to_xyz(profile.center)
    )
    if geometry_plane is None:
        raise HostOperationError("Create the geometry plane failed.")

    sketch_plane = DB.SketchPlane.Create(family_doc, geometry_plane)
    if sketch_plane is None:
        raise HostOperationError("Create the sketch plane failed.")
    return sketch_plane


def profile_to_curve_loops(profile: Profile) -> Any:
    """Convert the profile into the CurveArrArray taken by NewExtrusion."""
    DB = revit_api.DB

    curve_array = DB.CurveArray()
    for edge in profile.edges:
        curve_array.Append(edge_to_line(edge))

    loops = DB.CurveArrArray()
    loops.Append(curve_array)
    return loops


# =============================================================================
# Family Elements
# =============================================================================

def create_extrusion(family_doc, profile: Profile, sketch_plane) -> Any:
    """Extrude the profile along its normal by the profile width."""
    logger.log(TRACE_LEVEL, "NewExtrusion depth=%.4f ft", profile.extrusion_depth)
    extrusion = family_doc.FamilyCreate.NewExtrusion(
        True, profile_to_curve_loops(profile), sketch_plane, profile.extrusion_depth
    )
    if extrusion is None:
        raise HostOperationError("NewExtrusion returned no element")
    return extrusion


def add_length_parameter(family_doc, name: str, value: float, type_name: str) -> Any:
    """Add (or reuse) a type length parameter and set it to ``value``.

    Args:
        family_doc: Family Document
        name: Parameter name
        value: Length in feet
        type_name: Type created when the family has no current type
    """
    DB = revit_api.DB
    manager = family_doc.FamilyManager

    parameter = None
    for existing in manager.Parameters:
        if existing.Definition.Name == name:
            parameter = existing
            break

    if parameter is None:
        parameter = manager.AddParameter(
            name, DB.GroupTypeId.Constraints, DB.SpecTypeId.Length, False
        )

    if manager.CurrentType is None:
        manager.NewType(type_name)
    manager.Set(parameter, value)

    logger.debug("Parameter '%s' set to %.4f ft", name, value)
    return parameter


def find_dimension_view(family_doc) -> Any:
    """Find the plan view dimensions are placed in.

    Prefers the template's "Ref. Level" plan, else the first non-template plan.

    Raises:
        HostOperationError: If the family document has no plan view
    """
    DB = revit_api.DB

    plans = [
        view for view in DB.FilteredElementCollector(family_doc).OfClass(DB.ViewPlan)
        if not view.IsTemplate
    ]
    for view in plans:
        if view.Name == PREFERRED_VIEW_NAME:
            return view
    if plans:
        return plans[0]
    raise HostOperationError("Family document has no plan view for dimensions")


def create_dimension(family_doc, view, span: DimensionSpan, sketch_plane) -> Any:
    """Create model-curve references and a linear dimension for one span."""
    DB = revit_api.DB
    creator = family_doc.FamilyCreate

    logger.log(
        TRACE_LEVEL,
        "NewLinearDimension %s -> %s, gap %.4f",
        span.dimension_line.start,
        span.dimension_line.end,
        span.gap,
    )
    near_curve = creator.NewModelCurve(edge_to_line(span.reference), sketch_plane)
    far_curve = creator.NewModelCurve(edge_to_line(span.far_reference), sketch_plane)

    references = DB.ReferenceArray()
    references.Append(near_curve.GeometryCurve.Reference)
    references.Append(far_curve.GeometryCurve.Reference)

    dimension = creator.NewLinearDimension(
        view, edge_to_line(span.dimension_line), references
    )
    if dimension is None:
        raise HostOperationError("NewLinearDimension returned no element")
    return dimension


def build_generic_model(
    family_doc,
    profile: Profile,
    chains: Dict[str, DimensionSpan],
    settings: Optional[FamilySettings] = None,
) -> GenericModelElements:
    """Create the cube extrusion, width parameter and dimensions.

    Everything is created in one transaction; any failure rolls it back.

    Args:
        family_doc: Family Document from create_family_document()
        profile: Square profile
        chains: Dimension spans from build_dimension_chains()
        settings: Family settings (defaults used if None)

    Returns:
        GenericModelElements with the created elements
    """
    settings = settings or FamilySettings()
    elements = GenericModelElements()

    with revit_transaction(family_doc, "CreateGenericModel"):
        sketch_plane = create_sketch_plane(family_doc, profile)
        elements.extrusion = create_extrusion(family_doc, profile, sketch_plane)

        elements.parameter = add_length_parameter(
            family_doc,
            settings.width_parameter_name,
            profile.width,
            settings.family_name,
        )

        view = find_dimension_view(family_doc)
        for name, span in chains.items():
            elements.dimensions[name] = create_dimension(
                family_doc, view, span, sketch_plane
            )

        if settings.label_dimensions:
            for name in LABELED_CHAINS:
                if name in elements.dimensions:
                    elements.dimensions[name].FamilyLabel = elements.parameter

    logger.info(
        "Built generic model: %.4f ft cube, %d dimensions",
        profile.width,
        len(elements.dimensions),
    )
    return elements

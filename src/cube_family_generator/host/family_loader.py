# File: src/cube_family_generator/host/family_loader.py
"""
Loading the generated family into the project and placing an instance.

None of these functions open transactions themselves; the command wraps the
load/activate/place sequence in a single project transaction so a failure
leaves no half-loaded family behind.

CPython3 Gotcha:
    Implementing .NET interfaces (like IFamilyLoadOptions) in CPython3
    requires the ``__namespace__`` class attribute. Without it,
    instantiation fails with ``TypeError: interface takes exactly one argument``.
"""

import logging
import os
from typing import Any, Optional

from ..errors import HostOperationError, OperationCancelledError
from ..utils.logging_config import TRACE_LEVEL
from . import revit_api

logger = logging.getLogger(__name__)


# =============================================================================
# IFamilyLoadOptions Implementation (CPython3 compatible)
# =============================================================================

FamilyLoadOptions: Any = None

if revit_api.REVIT_AVAILABLE:
    class FamilyLoadOptions(revit_api.DB.IFamilyLoadOptions):
        """Always overwrite an already-loaded family and its parameter values."""
        __namespace__ = "CubeFamilyLoader"

        def OnFamilyFound(self, familyInUse, overwriteParameterValues):
            overwriteParameterValues.Value = True
            return True

        def OnSharedFamilyFound(
            self, sharedFamily, familyInUse, source, overwriteParameterValues
        ):
            source.Value = revit_api.DB.FamilySource.Family
            overwriteParameterValues.Value = True
            return True


def _load_options() -> Any:
    if FamilyLoadOptions is None:
        revit_api.require_revit()
    return FamilyLoadOptions()


# =============================================================================
# Public API
# =============================================================================

def find_family(doc, family_name: str) -> Optional[Any]:
    """Return the loaded Family named ``family_name``, or None."""
    revit_api.require_revit()
    DB = revit_api.DB

    for family in DB.FilteredElementCollector(doc).OfClass(DB.Family):
        if family.Name == family_name:
            return family
    return None


def load_family(
    doc, rfa_path: str, family_name: Optional[str] = None, reload: bool = False
) -> Any:
    """Find the family in the document or load it from ``rfa_path``.

    Must be called inside an open transaction.

    Args:
        doc: Project Document
        rfa_path: Absolute path to the .rfa file
        family_name: Name to look up (defaults to the file's base name)
        reload: Load from disk even if a family with this name exists,
                overwriting it

    Returns:
        The Family

    Raises:
        HostOperationError: If the file cannot be loaded
    """
    revit_api.require_revit()
    family_name = family_name or os.path.splitext(os.path.basename(rfa_path))[0]

    existing = find_family(doc, family_name)
    if existing is not None and not reload:
        logger.info("Family '%s' already loaded in document", family_name)
        return existing

    logger.log(TRACE_LEVEL, "LoadFamily %s (reload=%s)", rfa_path, reload)
    family_ref = revit_api.clr.Reference[revit_api.DB.Family]()
    success = doc.LoadFamily(rfa_path, _load_options(), family_ref)
    family = family_ref.Value

    if not success or family is None:
        # LoadFamily returns False when an identical family is already loaded
        if existing is not None:
            logger.info("Family '%s' unchanged, keeping loaded copy", family_name)
            return existing
        raise HostOperationError(
            f"Failed to load family from {rfa_path}",
            extra={"rfa_path": rfa_path},
        )

    logger.info("Loaded family from %s", rfa_path)
    return family


def get_family_symbol(doc, family, type_name: Optional[str] = None) -> Any:
    """Return a type (FamilySymbol) of ``family``.

    Args:
        doc: Project Document
        family: Loaded Family
        type_name: Type to return; the first type if None

    Raises:
        HostOperationError: If the family has no matching type
    """
    symbols = [doc.GetElement(sid) for sid in family.GetFamilySymbolIds()]
    symbols = [s for s in symbols if s is not None]

    for symbol in symbols:
        if type_name is None or symbol.Name == type_name:
            return symbol

    raise HostOperationError(
        f"Type '{type_name}' not found in family '{family.Name}'",
        extra={"available": [s.Name for s in symbols]},
    )


def activate_symbol(doc, symbol) -> Any:
    """Activate the symbol so it can be placed. Must run inside a transaction."""
    if not symbol.IsActive:
        symbol.Activate()
        doc.Regenerate()
        logger.debug("Activated type '%s'", symbol.Name)
    return symbol


def pick_point(uidoc, prompt: str) -> Any:
    """Ask the user to pick a point in the active view.

    Raises:
        OperationCancelledError: If the user presses Esc
    """
    try:
        return uidoc.Selection.PickPoint(prompt)
    except Exception as e:
        cancelled = revit_api.OperationCanceledException
        if cancelled is not None and isinstance(e, cancelled):
            raise OperationCancelledError("Point picking was cancelled") from e
        raise


def place_instance(doc, point, symbol) -> Any:
    """Place a non-hosted instance of ``symbol`` at ``point``.

    Must be called inside an open transaction.
    """
    structural_type = revit_api.Structure.StructuralType.UnknownFraming
    logger.log(TRACE_LEVEL, "NewFamilyInstance at %s", revit_api.from_xyz(point))
    instance = doc.Create.NewFamilyInstance(point, symbol, structural_type)
    if instance is None:
        raise HostOperationError("NewFamilyInstance returned no element")

    logger.info("Placed '%s' instance at %s", symbol.Name, revit_api.from_xyz(point))
    return instance

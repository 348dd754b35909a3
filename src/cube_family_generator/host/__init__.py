# File: src/cube_family_generator/host/__init__.py
"""
Revit host integration for the cube family.

Family-document construction, project loading and instance placement. The
Revit API is imported conditionally in ``revit_api``; without it every
function here raises HostUnavailableError.
"""

from .revit_api import REVIT_AVAILABLE, REVIT_ERROR, require_revit

from .transactions import revit_transaction

from .family_builder import (
    GenericModelElements,
    create_family_document,
    build_generic_model,
    save_family_document,
    close_family_document,
)

from .family_loader import (
    find_family,
    load_family,
    get_family_symbol,
    activate_symbol,
    pick_point,
    place_instance,
)

__all__ = [
    "REVIT_AVAILABLE",
    "REVIT_ERROR",
    "require_revit",
    "revit_transaction",
    # Builder
    "GenericModelElements",
    "create_family_document",
    "build_generic_model",
    "save_family_document",
    "close_family_document",
    # Loader
    "find_family",
    "load_family",
    "get_family_symbol",
    "activate_symbol",
    "pick_point",
    "place_instance",
]

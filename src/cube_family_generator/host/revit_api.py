# File: src/cube_family_generator/host/revit_api.py
"""
Conditional access to the Revit API.

All Revit imports for the package go through this module so the rest of the
code imports cleanly outside Revit. Host modules look names up here at call
time (``revit_api.DB``), which also lets tests substitute stand-ins.

CPython3 Gotcha:
    Under pythonnet, ``import clr`` may succeed while ``AddReference`` fails
    with a .NET exception, not ImportError. Both are treated as "unavailable".
"""

import logging
from typing import Any, Optional

from ..errors import HostUnavailableError

logger = logging.getLogger(__name__)

REVIT_AVAILABLE = False
REVIT_ERROR: Optional[str] = None

clr: Any = None
DB: Any = None
UI: Any = None
Structure: Any = None
OperationCanceledException: Any = None

try:
    import clr
    clr.AddReference("RevitAPI")
    clr.AddReference("RevitAPIUI")
    from Autodesk.Revit import DB
    from Autodesk.Revit import UI
    from Autodesk.Revit.DB import Structure
    from Autodesk.Revit.Exceptions import OperationCanceledException
    REVIT_AVAILABLE = True
except ImportError as e:
    REVIT_ERROR = str(e)
except Exception as e:
    REVIT_ERROR = str(e)


def require_revit() -> None:
    """Raise HostUnavailableError unless the Revit API was imported."""
    if not REVIT_AVAILABLE:
        raise HostUnavailableError(
            f"Revit API not available: {REVIT_ERROR}",
            extra={"reason": REVIT_ERROR},
        )


def to_xyz(point) -> Any:
    """Convert an (x, y, z) tuple to a Revit XYZ."""
    return DB.XYZ(point[0], point[1], point[2])


def from_xyz(xyz) -> tuple:
    """Convert a Revit XYZ to a plain float tuple."""
    return (float(xyz.X), float(xyz.Y), float(xyz.Z))


def element_id_value(element_id) -> Optional[int]:
    """Integer value of an ElementId (IntegerValue before Revit 2024, Value after)."""
    if element_id is None:
        return None
    value = getattr(element_id, "IntegerValue", None)
    if value is None:
        value = element_id.Value
    return int(value)

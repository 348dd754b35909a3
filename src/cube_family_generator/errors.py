# File: src/cube_family_generator/errors.py
"""
Exception hierarchy for the cube family generator.

Geometry validation raises InvalidArgumentError before any host document is
touched. Host-side failures are reported as HostUnavailableError (no Revit
API) or HostOperationError (a Revit call returned nothing or failed).
"""

from typing import Any, Dict, Optional


class CubeFamilyError(Exception):
    """
    Base class for all errors raised by this package.

    Args:
        message: Human-readable error message
        extra: Optional additional error context
    """

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.message = message
        self.extra = extra or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict for diagnostics output."""
        error = {
            "type": self.__class__.__name__,
            "message": self.message,
        }
        if self.extra:
            error["extra"] = self.extra
        return error


class InvalidArgumentError(CubeFamilyError, ValueError):
    """Raised for invalid geometry inputs or settings values."""


class HostUnavailableError(CubeFamilyError):
    """Raised when the Revit API cannot be imported in this interpreter."""


class HostOperationError(CubeFamilyError):
    """Raised when a Revit API call fails or returns no result."""


class OperationCancelledError(CubeFamilyError):
    """Raised when the user cancels an interactive host operation."""

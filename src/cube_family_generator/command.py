# File: src/cube_family_generator/command.py
"""
Cube family command: the end-to-end add-in workflow.

Pipeline steps:
1. Build the square profile and dimension geometry (pure, validated first)
2. Create a family document from the Generic Model template
3. Extrude the cube, add the width parameter and dimensions
4. Save the family as an .rfa file and close the family document
5. Ask the user for an insertion point
6. Load (or reuse) the family, activate its type, place an instance

Every step raises on failure; execute() turns the outcome into a
CommandResult instead of counting errors in shared state.

Usage (inside Revit only):
    from cube_family_generator.command import CubeFamilyCommand

    result = CubeFamilyCommand().execute(__revit__)
    if not result.succeeded:
        print(result.message)
"""

import logging
import traceback
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .config.settings import FamilySettings
from .errors import CubeFamilyError, OperationCancelledError
from .geometry.dimensions import build_dimension_chains
from .geometry.profile_builder import build_profile
from .geometry.types import DimensionSpan, Profile
from .host import family_builder, family_loader
from .host.revit_api import element_id_value
from .host.transactions import revit_transaction

logger = logging.getLogger(__name__)

STATUS_PENDING = "pending"
STATUS_SUCCEEDED = "succeeded"
STATUS_FAILED = "failed"
STATUS_CANCELLED = "cancelled"


@dataclass
class CommandResult:
    """Outcome of one command invocation.

    Attributes:
        status: "pending", "succeeded", "failed" or "cancelled"
        message: Failure or cancellation message for the user
        family_path: Path of the saved .rfa file, once saved
        instance_id: Integer id of the placed instance, once placed
        dimensions: Names of the dimension chains created
        error: Serialized error details on failure
        log: Ordered list of diagnostic messages
    """
    status: str = STATUS_PENDING
    message: str = ""
    family_path: Optional[str] = None
    instance_id: Optional[int] = None
    dimensions: List[str] = field(default_factory=list)
    error: Optional[Dict[str, Any]] = None
    log: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_SUCCEEDED

    def fail(self, message: str, error: Optional[Dict[str, Any]] = None) -> "CommandResult":
        self.status = STATUS_FAILED
        self.message = message
        self.error = error
        self.log.append(f"Failed: {message}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict for JSON output."""
        return {
            "status": self.status,
            "message": self.message,
            "family_path": self.family_path,
            "instance_id": self.instance_id,
            "dimensions": self.dimensions,
            "error": self.error,
        }


class CubeFamilyCommand:
    """Creates the cube family, loads it and places one instance.

    Args:
        settings: FamilySettings; defaults to FamilySettings.from_env()
    """

    def __init__(self, settings: Optional[FamilySettings] = None) -> None:
        self._settings = settings or FamilySettings.from_env()

    @property
    def settings(self) -> FamilySettings:
        return self._settings

    def prepare_geometry(self) -> Tuple[Profile, Dict[str, DimensionSpan]]:
        """Build the profile and dimension spans in host units (feet).

        Raises:
            InvalidArgumentError: For invalid width or gap
        """
        profile = build_profile(self._settings.width_in_feet)
        chains = build_dimension_chains(profile, self._settings.gap_in_feet)
        return profile, chains

    def build_family(
        self,
        app,
        profile: Profile,
        chains: Dict[str, DimensionSpan],
        result: CommandResult,
    ) -> str:
        """Create, save and close the family document.

        Returns:
            Path of the saved family file
        """
        settings = self._settings
        family_doc = family_builder.create_family_document(app, settings.template_path)
        result.log.append(f"Family document created from {settings.template_path}")

        try:
            elements = family_builder.build_generic_model(
                family_doc, profile, chains, settings
            )
            result.dimensions = list(elements.dimensions)
            result.log.append(
                f"Extrusion and {len(elements.dimensions)} dimensions created"
            )

            path = family_builder.save_family_document(
                family_doc, settings.family_path, settings.overwrite_existing
            )
            result.family_path = path
            result.log.append(f"Family saved to {path}")
        finally:
            family_builder.close_family_document(family_doc)

        return path

    def place_family(self, doc, point, result: CommandResult) -> Any:
        """Load the family, activate its type and place an instance at point."""
        settings = self._settings

        with revit_transaction(doc, "Insert family instance"):
            family = family_loader.load_family(
                doc,
                settings.family_path,
                settings.family_name,
                reload=settings.reload_existing,
            )
            symbol = family_loader.get_family_symbol(doc, family)
            family_loader.activate_symbol(doc, symbol)
            instance = family_loader.place_instance(doc, point, symbol)

        result.instance_id = element_id_value(instance.Id)
        result.log.append(f"Instance placed (id {result.instance_id})")
        return instance

    def execute(self, uiapp) -> CommandResult:
        """Run the full workflow against the host UIApplication.

        Args:
            uiapp: Revit UIApplication

        Returns:
            CommandResult; never raises for expected failures
        """
        result = CommandResult()

        uidoc = uiapp.ActiveUIDocument if uiapp is not None else None
        doc = uidoc.Document if uidoc is not None else None
        if doc is None:
            return result.fail("Please run this command in an open document.")
        if doc.IsFamilyDocument:
            return result.fail("Please run this command in a project document.")

        try:
            profile, chains = self.prepare_geometry()
            result.log.append(
                f"Profile {profile.width:.4f} ft, {len(chains)} dimension spans"
            )

            self.build_family(uiapp.Application, profile, chains, result)

            point = family_loader.pick_point(uidoc, self._settings.pick_prompt)
            self.place_family(doc, point, result)

        except OperationCancelledError as e:
            result.status = STATUS_CANCELLED
            result.message = e.message
            result.log.append("Cancelled by user")
            logger.info("Command cancelled: %s", e.message)
            return result

        except CubeFamilyError as e:
            logger.error("Cube family command failed: %s", e.message)
            return result.fail(e.message, e.to_dict())

        except Exception as e:
            logger.exception("Unexpected error in cube family command")
            return result.fail(
                f"Unexpected error: {e}",
                {"type": type(e).__name__, "traceback": traceback.format_exc()},
            )

        result.status = STATUS_SUCCEEDED
        logger.info("Cube family placed from %s", result.family_path)
        return result

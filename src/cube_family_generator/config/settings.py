# File: src/cube_family_generator/config/settings.py
"""
Settings for the cube family command.

Defaults reproduce the add-in's original behavior: a 20 ft cube built from
the "Generic Model.rft" template, saved as Cube.rfa in the Revit 2022 add-in
folder. Every field can be overridden from CUBE_FAMILY_* environment
variables.

Usage:
    from cube_family_generator.config import FamilySettings

    settings = FamilySettings.from_env()
    settings.family_path  # ...\\Addins\\2022\\Cube.rfa
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import InvalidArgumentError
from .units import ProjectUnits, convert_to_feet, parse_units

logger = logging.getLogger(__name__)

ENV_PREFIX = "CUBE_FAMILY_"

REVIT_VERSION = "2022"


def default_addin_dir() -> str:
    """Per-user Revit add-in folder, %APPDATA%\\Autodesk\\REVIT\\Addins\\<version>."""
    app_data = os.environ.get("APPDATA", os.path.expanduser("~"))
    return os.path.join(app_data, "Autodesk", "REVIT", "Addins", REVIT_VERSION)


class FamilySettings(BaseModel):
    """Configuration for building, saving and placing the cube family."""

    model_config = {"frozen": True}

    template_name: str = Field(
        default="Generic Model.rft", description="Family template file name"
    )
    family_name: str = Field(
        default="Cube", min_length=1, description="Name of the generated family"
    )
    family_extension: str = Field(default=".rfa", description="Family file extension")
    template_dir: str = Field(default_factory=default_addin_dir)
    output_dir: str = Field(default_factory=default_addin_dir)
    width: float = Field(default=20.0, gt=0, description="Cube side length in `units`")
    gap: float = Field(default=2.0, ge=0, description="Dimension offset in `units`")
    units: ProjectUnits = Field(default=ProjectUnits.FEET)
    width_parameter_name: str = Field(default="width", min_length=1)
    label_dimensions: bool = Field(
        default=False, description="Label the overall dimensions with the width parameter"
    )
    overwrite_existing: bool = True
    reload_existing: bool = Field(
        default=False,
        description="Reload the family from disk even if the project already has it",
    )
    pick_prompt: str = "Please pick a point for family instance insertion"

    @field_validator("units", mode="before")
    @classmethod
    def validate_units(cls, v: Any) -> ProjectUnits:
        return parse_units(v)

    @field_validator("family_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not v.startswith("."):
            v = "." + v
        return v.lower()

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def template_path(self) -> str:
        return os.path.join(self.template_dir, self.template_name)

    @property
    def family_path(self) -> str:
        return os.path.join(self.output_dir, self.family_name + self.family_extension)

    @property
    def width_in_feet(self) -> float:
        return convert_to_feet(self.width, self.units)

    @property
    def gap_in_feet(self) -> float:
        return convert_to_feet(self.gap, self.units)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, **values: Any) -> "FamilySettings":
        """Validate values into settings.

        Raises:
            InvalidArgumentError: If any value fails validation
        """
        try:
            return cls(**values)
        except ValidationError as e:
            problems = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise InvalidArgumentError(
                "Invalid family settings: " + "; ".join(problems),
                extra={"errors": problems},
            )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any
    ) -> "FamilySettings":
        """Build settings from CUBE_FAMILY_<FIELD> environment variables.

        Explicit keyword overrides win over the environment.
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        values.update(overrides)

        if values:
            logger.debug("Settings overrides: %s", sorted(values))
        return cls.load(**values)

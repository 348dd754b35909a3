# File: scripts/revit_cube_command.py
"""
Revit Script: Create Cube Family

pyRevit / RevitPythonShell entry point for the cube family command.

Creates a Generic Model family containing a dimensioned cube, saves it as
Cube.rfa, loads it into the active project and places an instance at a
point picked by the user.

Inputs (environment variables, all optional):
    CUBE_FAMILY_WIDTH: Cube side length (default 20)
    CUBE_FAMILY_UNITS: feet | inches | meters | millimeters (default feet)
    CUBE_FAMILY_GAP: Dimension offset (default 2)
    CUBE_FAMILY_TEMPLATE_DIR: Folder holding "Generic Model.rft"
    CUBE_FAMILY_OUTPUT_DIR: Folder the .rfa is saved to
    CUBE_FAMILY_DEBUG: "true" for DEBUG logging
    CUBE_FAMILY_TRACE: "true" to also log every Revit API call

Usage:
    1. Place "Generic Model.rft" in the template folder
    2. Open a project with a plan view active
    3. Run the script and pick the insertion point
"""

import logging
import os
import sys

# =============================================================================
# Force Module Reload
# =============================================================================
# Script engines keep modules cached between runs
_modules_to_clear = [k for k in sys.modules.keys() if 'cube_family_generator' in k]
for _mod in _modules_to_clear:
    del sys.modules[_mod]

# =============================================================================
# Project Setup
# =============================================================================

PROJECT_SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if PROJECT_SRC not in sys.path:
    sys.path.insert(0, PROJECT_SRC)

from cube_family_generator.command import CubeFamilyCommand, STATUS_CANCELLED
from cube_family_generator.errors import CubeFamilyError
from cube_family_generator.host import revit_api
from cube_family_generator.utils.logging_config import CubeFamilyLogger

LOG_DIR = os.path.join(os.path.expanduser("~"), ".cube_family", "logs")


def show_message(title: str, message: str) -> None:
    """Show a TaskDialog, or print when the UI API is unavailable."""
    if revit_api.UI is not None:
        revit_api.UI.TaskDialog.Show(title, message)
    else:
        print(f"{title}: {message}")


def main(uiapp) -> str:
    """Run the command and report failures to the user.

    Returns:
        The CommandResult status string
    """
    debug = os.environ.get("CUBE_FAMILY_DEBUG", "false").lower() == "true"
    trace = os.environ.get("CUBE_FAMILY_TRACE", "false").lower() == "true"
    log_file = CubeFamilyLogger.configure(
        debug_mode=debug, trace_mode=trace, log_dir=LOG_DIR
    )
    logger = logging.getLogger("cube_family_generator.script")
    logger.info("Logging to %s", log_file)

    try:
        command = CubeFamilyCommand()
    except CubeFamilyError as e:
        show_message("Cube Family", f"Invalid settings: {e.message}")
        return "failed"

    result = command.execute(uiapp)

    for line in result.log:
        logger.debug(line)

    if result.succeeded:
        logger.info("Placed cube instance %s", result.instance_id)
    elif result.status != STATUS_CANCELLED:
        show_message("Cube Family", result.message)

    return result.status


# =============================================================================
# Execution
# =============================================================================

if __name__ == "__main__":
    try:
        _uiapp = __revit__  # noqa: F821 - injected by the script host
    except NameError:
        _uiapp = None
        print("[INFO] __revit__ not defined; run this script inside Revit")

    if _uiapp is not None:
        main(_uiapp)

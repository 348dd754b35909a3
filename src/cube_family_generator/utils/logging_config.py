"""
Logging configuration for the cube family generator.

Each command run gets its own timestamped log file plus console output.
Individual Revit API calls (extrusion, model curves, dimensions, family
loading, instance placement) are logged at TRACE, one step below DEBUG, so
a debug log stays readable and a trace log records every host call.

Usage:
    from cube_family_generator.utils.logging_config import CubeFamilyLogger

    log_file = CubeFamilyLogger.configure(trace_mode=True, log_dir=LOG_DIR)
"""

import logging
import os
import sys
from datetime import datetime

# Host API call tracing (between DEBUG and NOTSET)
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LOG_FILE_PREFIX = "cube_family_"

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
HOST_CONSOLE_FORMAT = '%(levelname)s: %(message)s'
CONSOLE_FORMAT = '%(name)s - %(levelname)s: %(message)s'


class CubeFamilyLogger:
    """Sets up the root logger for one run of the cube family command."""

    @staticmethod
    def release_handlers() -> int:
        """
        Close and detach every handler on the root logger.

        Returns:
            Number of handlers released
        """
        root_logger = logging.getLogger()
        handlers = list(root_logger.handlers)
        for handler in handlers:
            handler.close()
            root_logger.removeHandler(handler)
        return len(handlers)

    @staticmethod
    def file_level(debug_mode: bool = False, trace_mode: bool = False) -> int:
        """Level written to the log file: TRACE, DEBUG or INFO."""
        if trace_mode:
            return TRACE_LEVEL
        if debug_mode:
            return logging.DEBUG
        return logging.INFO

    @staticmethod
    def configure(
        debug_mode: bool = False,
        trace_mode: bool = False,
        log_dir: str = "logs",
        host_mode: bool = True,
    ) -> str:
        """
        Configure logging for a command run.

        Handlers from a previous run are closed first, so the previous run's
        log file is released.

        Args:
            debug_mode: Write DEBUG records to the log file
            trace_mode: Also write TRACE records (every Revit API call)
            log_dir: Directory to store log files
            host_mode: Short console format for the host's script output window

        Returns:
            Path to the created log file
        """
        os.makedirs(log_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"{LOG_FILE_PREFIX}{timestamp}.log")

        # Script engines keep the interpreter alive between runs
        CubeFamilyLogger.release_handlers()

        level = CubeFamilyLogger.file_level(debug_mode, trace_mode)
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter(HOST_CONSOLE_FORMAT if host_mode else CONSOLE_FORMAT)
        )
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)

        return log_file

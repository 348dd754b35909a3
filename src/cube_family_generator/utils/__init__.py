from .logging_config import CubeFamilyLogger, TRACE_LEVEL

__all__ = ["CubeFamilyLogger", "TRACE_LEVEL"]

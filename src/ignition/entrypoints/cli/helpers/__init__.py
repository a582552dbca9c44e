"""CLI helpers for IGNITION.

Logger-level option parsing and stderr message emitters.
"""

from .log_level_parser import parse_log_level
from .messages import error, success

__all__ = ["error", "parse_log_level", "success"]

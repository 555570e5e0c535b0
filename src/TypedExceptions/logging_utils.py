# ============================================================================
# TypedExceptions - Logging Utilities
#
# Purpose: Centralized logging configuration and logger lookup
# Inputs: Log level, format string
# Outputs: Configured logger instances
# Dependencies: logging (stdlib)
# Usage: logger = get_logger(__name__)
#
# Changelog:
#   2026-09-28: Initial logging setup; the library itself never configures
#               logging on import, only the CLI calls setup_logging
# ============================================================================

import logging
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_CONFIGURED = False


def setup_logging(level: str = "WARNING", format_string: Optional[str] = None) -> None:
    """
    Configure logging for the command line tool.

    Repeated calls are ignored once logging has been configured.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Optional custom format string
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    _LOGGING_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (typically ``__name__``)."""
    return logging.getLogger(name)

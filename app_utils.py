"""Utility functions for the Competitor Pulse web service."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("competitorpulse")


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable, treating blank values as unset.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is missing or blank.

    Returns:
        The environment variable value or default.
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_bool_env(name: str, default: bool = False) -> bool:
    value = get_env(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


def configure_logging() -> None:
    """Configure root logging from PULSE_LOG_LEVEL / PULSE_LOG_FILE."""
    level_name = (get_env("PULSE_LOG_LEVEL", "INFO") or "INFO").upper()
    level = getattr(logging, level_name, None)
    unknown_level = not isinstance(level, int)
    if unknown_level:
        level = logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    log_file = get_env("PULSE_LOG_FILE")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    if unknown_level:
        logger.warning("Unknown PULSE_LOG_LEVEL '%s'; using INFO", level_name)

"""
Settings and configuration defaults for Kakikae.

Values here are read once at import time from the environment.
"""

import logging
import os

# Debug mode
DEBUG = os.environ.get("KAKIKAE_DEBUG", "").lower() in ("1", "true", "yes")

# Log level used by the command line interface
LOG_LEVEL = os.environ.get("KAKIKAE_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").upper()

# Romanization used when the caller does not pick one
DEFAULT_ROMANIZATION = "hepburn"

# Maximum number of match trees held by a single TreeCache
TREE_CACHE_MAXSIZE = int(os.environ.get("KAKIKAE_TREE_CACHE_MAXSIZE", "32"))


def log_level() -> int:
    """Resolve LOG_LEVEL to a logging module constant."""
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING

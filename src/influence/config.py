"""
Configuration constants for the influence score calculator.

Values that make sense to tune per run can be overridden from the
environment.
"""

import logging
import os

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning("ignoring %s=%r (not an integer), using %d", name, raw, default)
        return default


# =============================================================================
# Graph Configuration
# =============================================================================

# Weight given to every edge of an unweighted graph
DEFAULT_UNIT_WEIGHT = 1

# =============================================================================
# Output Configuration
# =============================================================================

# Level names accepted by --log-level / INFLUENCE_LOG_LEVEL
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Log level for the console front end (DEBUG shows every edge insertion)
LOG_LEVEL = os.environ.get("INFLUENCE_LOG_LEVEL", "WARNING").upper()

# Digits after the decimal point when the CLI prints a score
SCORE_PRECISION = _int_env("INFLUENCE_SCORE_PRECISION", 4)

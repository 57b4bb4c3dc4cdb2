"""
Configuration for the Esperanto analyzer.

Engine defaults live here as module constants. A few of them can be
overridden from the environment:

- ESPERANTO_ANALYZER_LOG_LEVEL: logging level name for the CLI (DEBUG, INFO, ...)
- ESPERANTO_ANALYZER_LOG_FILE: file the CLI also logs to
- ESPERANTO_ANALYZER_THRESHOLD: default share of recognized words for a
  sentence to count as Esperanto (0.0 - 1.0)
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# Alternatives attached to a single word analysis
MAX_ALTERNATIVES = 3

# Share of recognized words for a sentence to count as Esperanto
DEFAULT_VALIDITY_THRESHOLD = 0.8

# Alternatives kept per word in sentence analysis
DEFAULT_MAX_SENTENCE_ALTERNATIVES = 2

ENV_LOG_LEVEL = 'ESPERANTO_ANALYZER_LOG_LEVEL'
ENV_LOG_FILE = 'ESPERANTO_ANALYZER_LOG_FILE'
ENV_THRESHOLD = 'ESPERANTO_ANALYZER_THRESHOLD'


def get_log_level(default: int = logging.INFO) -> int:
    """
    Resolve the log level from the environment.

    Returns:
        The numeric level, or `default` when unset or not a known level name
    """
    value = os.environ.get(ENV_LOG_LEVEL)
    if not value:
        return default

    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        logger.warning(f"Ignoring unknown log level {ENV_LOG_LEVEL}={value!r}")
        return default
    return level


def get_log_file() -> Optional[str]:
    """Log file path from the environment, if any."""
    value = os.environ.get(ENV_LOG_FILE, '').strip()
    return value or None


def get_default_threshold() -> float:
    """
    Resolve the sentence validity threshold.

    Malformed or out-of-range values fall back to DEFAULT_VALIDITY_THRESHOLD.
    """
    value = os.environ.get(ENV_THRESHOLD)
    if not value:
        return DEFAULT_VALIDITY_THRESHOLD

    try:
        threshold = float(value)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {ENV_THRESHOLD}={value!r}")
        return DEFAULT_VALIDITY_THRESHOLD

    if not 0.0 <= threshold <= 1.0:
        logger.warning(f"Ignoring out-of-range {ENV_THRESHOLD}={value!r}")
        return DEFAULT_VALIDITY_THRESHOLD

    return threshold

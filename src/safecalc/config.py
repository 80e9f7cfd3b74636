"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: The allow-list, error marker and window geometry are defined
   once instead of being scattered through the model and the view.
2. Environment: The log level can be overridden without touching the code
   (SAFECALC_LOG_LEVEL).

Exports:
    ALLOWED_EXPRESSION_PATTERN (str): Regex the trimmed input must fully match.
    ERROR_MARKER (str): Text shown in the display when evaluation fails.
    MAX_EXPRESSION_LENGTH (int): Upper bound on accepted input length.
"""
import logging
import os


def get_log_level(default: int = logging.INFO) -> int:
    """Resolve the log level from SAFECALC_LOG_LEVEL (e.g. "DEBUG")."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


# --- Evaluator ---
ALLOWED_EXPRESSION_PATTERN: str = r"^[0-9+\-*/().\s]+$"
MAX_EXPRESSION_LENGTH: int = 256
ERROR_MARKER: str = "err"

# --- Logging ---
LOG_LEVEL_ENV_VAR: str = "SAFECALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL: int = logging.INFO

# --- Application ---
ORG_ID = "safecalc"
APP_ID = "safecalc"
VISIBLE_APP_NAME = "Safe Calculator"
WINDOW_SIZE: tuple[int, int] = (240, 300)
"""
Logging Configuration
Sets up the 'safecalc' logger hierarchy for the GUI and the --eval mode.
"""
import logging
import sys
from typing import Optional, Union

from safecalc import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str, None]) -> int:
    """
    Turn a level given as a number, a name ("debug") or None into a number.

    None falls back to SAFECALC_LOG_LEVEL, then to the configured default.

    Raises:
        ValueError: The name is not a logging level.
    """
    if level is None:
        return config.get_log_level(config.DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger; module loggers propagate to it.

    Args:
        level: Logging level as a number or name. None reads the environment.
        log_file: Optional path to save logs to a file (overwritten per run).

    Returns:
        The configured 'safecalc' logger.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger("safecalc")
    logger.setLevel(numeric_level)

    # Drop (and close) handlers from a previous setup
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
    return logger

"""
Logging utilities for sheet-to-json.

Library modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves; applications that want console output call
``configure_logging`` once.
"""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Get a logger under the ``sheet_to_json`` namespace.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Logger instance
    """
    if name != "sheet_to_json" and not name.startswith("sheet_to_json."):
        name = f"sheet_to_json.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger


def configure_logging(level: Union[str, int] = "INFO") -> logging.Handler:
    """
    Attach a stdout handler to the library's root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The handler in use (existing one if already configured)
    """
    log_level = _resolve_level(level)
    logger = logging.getLogger("sheet_to_json")
    logger.setLevel(log_level)

    # Only add handler once (avoid duplicate lines on repeated calls)
    for handler in logger.handlers:
        if getattr(handler, "_sheet_to_json_handler", False):
            handler.setLevel(log_level)
            return handler

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._sheet_to_json_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return handler

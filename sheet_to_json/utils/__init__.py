from .app_logger import configure_logging, get_logger
from .numeric import is_numeric_literal, parse_numeric_literal

__all__ = ["configure_logging", "get_logger", "is_numeric_literal", "parse_numeric_literal"]

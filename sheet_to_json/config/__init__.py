"""
Unified Configuration Access Point

    from sheet_to_json.config import AppConfig

    header_row = AppConfig.DEFAULT_HEADER_START_ROW_NUMBER
"""

from .app_config import AppConfig

__all__ = ["AppConfig"]

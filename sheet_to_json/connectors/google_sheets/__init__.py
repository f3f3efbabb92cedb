"""
Google Sheets connector (read-only values fetch).
"""

from .service import GoogleSheetsService
from .utils import build_sheets_values_url, extract_sheet_id, quote_sheet_range

__all__ = ["GoogleSheetsService", "build_sheets_values_url", "extract_sheet_id", "quote_sheet_range"]

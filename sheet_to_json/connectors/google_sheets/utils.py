"""
Google Sheets Connector - Utility Functions
"""

import re
from urllib.parse import quote

from sheet_to_json.config import AppConfig


def extract_sheet_id(sheet_url: str) -> str:
    """
    Google Sheets URL에서 Spreadsheet ID 추출

    Args:
        sheet_url: Google Sheets URL

    Returns:
        Spreadsheet ID

    Raises:
        ValueError: 유효하지 않은 URL 형식
    """
    # Pattern: https://docs.google.com/spreadsheets/d/{SHEET_ID}/...
    match = re.search(r"/spreadsheets/d/([a-zA-Z0-9-_]+)", sheet_url)
    if not match:
        raise ValueError(f"Cannot extract sheet ID from URL: {sheet_url}")

    return match.group(1)


def quote_sheet_range(sheet_name: str) -> str:
    """
    워크시트 이름을 A1 범위 표기로 변환

    The title is always wrapped in single quotes, with embedded quotes
    doubled ("Bob's data" -> "'Bob''s data'"). Unquoted titles such as "A1"
    or "R1C1" would be read as a cell range on the first sheet.
    """
    return "'" + sheet_name.replace("'", "''") + "'"


def build_sheets_values_url(spreadsheet_id: str, sheet_name: str) -> str:
    """
    Google Sheets API v4 values URL 생성

    Args:
        spreadsheet_id: Google Sheets ID
        sheet_name: 워크시트 이름

    Returns:
        API URL (path segments percent-encoded)
    """
    return AppConfig.get_sheet_values_url(quote(spreadsheet_id, safe=""), quote_sheet_range(sheet_name))

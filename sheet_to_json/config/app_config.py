"""
Library Configuration
파서 기본값 중앙 관리
"""

from typing import Optional
from urllib.parse import quote


class AppConfig:
    """
    sheet-to-json 기본 설정 중앙 관리 클래스

    모든 어댑터가 같은 기본 행 번호와 구분자/인코딩을 쓰도록
    한 곳에서 관리합니다. 환경변수는 읽지 않습니다.
    """

    # ======================
    # Row offsets (1-based)
    # ======================
    DEFAULT_HEADER_START_ROW_NUMBER = 1
    DEFAULT_BODY_START_ROW_NUMBER = 2

    # ======================
    # Delimited text
    # ======================
    DEFAULT_CSV_DELIMITER = ","
    DEFAULT_CSV_ENCODING = "utf-8"

    # ======================
    # Google Sheets API
    # ======================
    GOOGLE_SHEETS_API_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
    HTTP_USER_AGENT = "sheet-to-json/0.1.0"
    # No timeout of our own; callers wrap the call when they need one
    HTTP_TIMEOUT: Optional[float] = None
    GOOGLE_SHEETS_SHARING_HINT = (
        'Make sure the sheet is shared as "Anyone with the link can view".'
    )

    @classmethod
    def get_sheet_values_url(cls, spreadsheet_id: str, sheet_name: str) -> str:
        """워크시트 values API URL 생성"""
        return f"{cls.GOOGLE_SHEETS_API_BASE_URL}/{spreadsheet_id}/values/{quote(sheet_name, safe='')}"

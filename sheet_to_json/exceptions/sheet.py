"""
시트 조회/가져오기 관련 예외
"""

from typing import List, Optional, Sequence

from .base import ConfigurationError, SheetToJsonError


class MissingSheetNameError(ConfigurationError):
    """시트 이름이 필요한데 지정되지 않음"""

    def __init__(self, option: str = "sheet_name"):
        super().__init__(
            message=f"Sheet name is required. Provide it in options.{option}",
            option=option,
        )


class SheetNotFoundError(SheetToJsonError):
    """요청한 시트가 존재하지 않음"""

    def __init__(self, sheet_name: str, available: Optional[Sequence[str]] = None):
        self.sheet_name = sheet_name
        self.available: List[str] = list(available or [])
        listed = ", ".join(f"'{name}'" for name in self.available) or "(none)"
        super().__init__(
            message=f"Sheet '{sheet_name}' not found. Available sheets: {listed}",
            code="SHEET_NOT_FOUND",
            details={"sheet_name": sheet_name, "available": self.available},
        )


class SheetFetchError(SheetToJsonError):
    """원격 스프레드시트 응답이 실패 상태"""

    def __init__(self, status_code: int, sheet_name: Optional[str] = None, hint: str = ""):
        self.status_code = status_code
        self.sheet_name = sheet_name
        message = f"Failed to fetch Google Sheet (status: {status_code})."
        if hint:
            message = f"{message} {hint}"
        super().__init__(
            message=message,
            code="SHEET_FETCH_FAILED",
            details={"status_code": status_code, "sheet_name": sheet_name},
        )

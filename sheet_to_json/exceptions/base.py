"""
기본 예외 정의
"""

from typing import Optional


class SheetToJsonError(Exception):
    """라이브러리 기본 예외"""

    def __init__(self, message: str, code: str = "SHEET_TO_JSON_ERROR",
                 details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ConfigurationError(SheetToJsonError):
    """호출자 설정 오류 (I/O 이전에 발생)"""

    def __init__(self, message: str, option: Optional[str] = None):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            details={"option": option} if option else {}
        )

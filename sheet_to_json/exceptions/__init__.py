"""
예외 정의
어댑터가 발생시키는 오류를 종류별로 구분
"""

from .base import ConfigurationError, SheetToJsonError
from .sheet import MissingSheetNameError, SheetFetchError, SheetNotFoundError

__all__ = [
    "SheetToJsonError",
    "ConfigurationError",
    "MissingSheetNameError",
    "SheetNotFoundError",
    "SheetFetchError",
]

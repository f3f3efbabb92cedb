"""
sheet-to-json: turn spreadsheet sheets, CSV text and Google Sheets into
lists of records keyed by caller-chosen field names.
"""

from sheet_to_json.exceptions import (
    ConfigurationError,
    MissingSheetNameError,
    SheetFetchError,
    SheetNotFoundError,
    SheetToJsonError,
)
from sheet_to_json.models import (
    CsvParseOptions,
    GoogleSheetConfig,
    ParseOptions,
    ParseResult,
    SheetGrid,
)
from sheet_to_json.parsers import (
    ExcelSheetToJson,
    parse,
    parse_csv,
    parse_google_sheet,
    parse_tabular_data,
)
from sheet_to_json.services.tabular_normalizer import normalize

__version__ = "0.1.0"

__all__ = [
    "parse",
    "parse_csv",
    "parse_google_sheet",
    "parse_tabular_data",
    "normalize",
    "ExcelSheetToJson",
    "ParseOptions",
    "CsvParseOptions",
    "ParseResult",
    "SheetGrid",
    "GoogleSheetConfig",
    "SheetToJsonError",
    "ConfigurationError",
    "MissingSheetNameError",
    "SheetNotFoundError",
    "SheetFetchError",
]

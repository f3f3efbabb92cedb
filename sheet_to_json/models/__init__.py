"""
Model definitions for sheet-to-json
"""

from .google_sheets import GoogleSheetConfig
from .sheet_grid import SheetGrid
from .tabular import Cell, CsvParseOptions, Grid, ParseOptions, ParseResult

__all__ = [
    "Cell",
    "Grid",
    "ParseOptions",
    "CsvParseOptions",
    "ParseResult",
    "SheetGrid",
    "GoogleSheetConfig",
]

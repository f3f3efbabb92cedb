"""
Sheet grid parser/extractor.

This module converts heterogeneous spreadsheet sources into a single grid representation:
- grid: 2D list (rows x cols); xlsx grids start at the top-left of the sheet's
  declared range, CSV and Google Sheets values at the first line / A1
- cells resolved to str / int / float / None at this boundary

Design principles:
- Keep parsing (I/O + format-specific quirks) separate from normalization.
- Never drop blank rows inside the source range: header/body row numbers are
  positional, so removing a row would shift every row after it.
- Trim only trailing empty rows/cols (bottom/right), and only when asked.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from io import BytesIO, StringIO
import logging
from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Union

from sheet_to_json.config import AppConfig
from sheet_to_json.exceptions import SheetNotFoundError
from sheet_to_json.models.sheet_grid import SheetGrid
from sheet_to_json.models.tabular import Cell

logger = logging.getLogger(__name__)

FileData = Union[bytes, bytearray, memoryview, BinaryIO]


@dataclass(frozen=True)
class SheetGridParseOptions:
    """Options shared across parsers."""

    trim_trailing_empty: bool = False
    max_rows: Optional[int] = None
    max_cols: Optional[int] = None


class SheetGridParser:
    """Parsers for xlsx, CSV and Google Sheets into SheetGrid."""

    @classmethod
    def from_google_sheets_values(
        cls,
        values: Optional[List[List[Any]]],
        *,
        sheet_name: Optional[str] = None,
        options: Optional[SheetGridParseOptions] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> SheetGrid:
        """
        Build SheetGrid from a Google Sheets "values" matrix (A1-anchored).

        The Values API omits trailing empty cells, so rows come back ragged;
        they are kept ragged and the normalizer treats missing cells as blank.
        """
        opts = options or SheetGridParseOptions()
        grid = cls._limit(
            [[cls._json_safe_cell(v) for v in (row or [])] for row in (values or [])],
            max_rows=opts.max_rows,
            max_cols=opts.max_cols,
        )
        return cls._build("google_sheets", sheet_name, grid, opts, metadata)

    @classmethod
    def from_excel_bytes(
        cls,
        xlsx_data: FileData,
        *,
        sheet_name: Optional[str] = None,
        options: Optional[SheetGridParseOptions] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> SheetGrid:
        """
        Parse an .xlsx workbook into SheetGrid.

        Raises:
            SheetNotFoundError: ``sheet_name`` is not one of the workbook's sheets
        """
        from openpyxl import load_workbook

        opts = options or SheetGridParseOptions()

        wb = load_workbook(filename=BytesIO(cls._read_bytes(xlsx_data)), data_only=True)
        try:
            if sheet_name is not None:
                if sheet_name not in wb.sheetnames:
                    raise SheetNotFoundError(sheet_name, wb.sheetnames)
                ws = wb[sheet_name]
            else:
                ws = wb[wb.sheetnames[0]]
            logger.debug("Reading worksheet '%s' (dimensions=%s)", ws.title, ws.dimensions)

            # Grid row 0 is the first row of the declared range (ws.dimensions)
            min_row = int(ws.min_row or 1)
            min_col = int(ws.min_column or 1)
            max_row = int(ws.max_row or 0)
            max_col = int(ws.max_column or 0)
            if opts.max_rows is not None:
                max_row = min(max_row, min_row + int(opts.max_rows) - 1)
            if opts.max_cols is not None:
                max_col = min(max_col, min_col + int(opts.max_cols) - 1)

            grid: List[List[Cell]] = []
            if max_row >= min_row and max_col >= min_col:
                for row in ws.iter_rows(
                    min_row=min_row, max_row=max_row, min_col=min_col, max_col=max_col, values_only=True
                ):
                    grid.append([cls._excel_value_to_cell(v) for v in row])

            # openpyxl reports A1:A1 for a sheet without any value
            if all(cls._is_blank(v) for row in grid for v in row):
                grid = []

            return cls._build("excel", str(ws.title), grid, opts, metadata)
        finally:
            wb.close()

    @classmethod
    def from_csv_bytes(
        cls,
        csv_data: FileData,
        *,
        delimiter: str = AppConfig.DEFAULT_CSV_DELIMITER,
        encoding: str = AppConfig.DEFAULT_CSV_ENCODING,
        options: Optional[SheetGridParseOptions] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> SheetGrid:
        """
        Parse delimited text into SheetGrid.

        - lines end with CRLF, bare CR or LF
        - double-quoted fields may contain the delimiter; ``""`` inside quotes is one quote
        - blank lines become rows with a single empty cell
        """
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")

        opts = options or SheetGridParseOptions()
        text = cls._decode_text(cls._read_bytes(csv_data), encoding)

        # A field can be as long as the whole text; csv caps fields at 131072 chars by default
        previous_limit = csv.field_size_limit()
        if len(text) > previous_limit:
            csv.field_size_limit(len(text))
        grid: List[List[Cell]] = []
        try:
            reader = csv.reader(StringIO(text, newline=""), delimiter=delimiter)
            for row in reader:
                grid.append(list(row) if row else [""])
                if opts.max_rows is not None and len(grid) >= opts.max_rows:
                    break
        finally:
            csv.field_size_limit(previous_limit)

        grid = cls._limit(grid, max_rows=None, max_cols=opts.max_cols)
        return cls._build("csv", None, grid, opts, metadata)

    # -------------------------
    # Input helpers
    # -------------------------

    @staticmethod
    def _read_bytes(data: FileData) -> bytes:
        if isinstance(data, bytes):
            return data
        if isinstance(data, (bytearray, memoryview)):
            return bytes(data)
        read = getattr(data, "read", None)
        if callable(read):
            return bytes(read())
        raise TypeError(f"Expected bytes-like or binary file object, got {type(data).__name__}")

    @staticmethod
    def _decode_text(raw: bytes, encoding: str) -> str:
        codec = (encoding or AppConfig.DEFAULT_CSV_ENCODING).strip()
        # Strip a UTF-8 BOM so it doesn't stick to the first header label
        if codec.lower().replace("-", "").replace("_", "") == "utf8":
            codec = "utf-8-sig"
        return raw.decode(codec, errors="replace")

    # -------------------------
    # Normalization helpers
    # -------------------------

    @classmethod
    def _build(
        cls,
        source: str,
        sheet_name: Optional[str],
        grid: List[List[Cell]],
        opts: SheetGridParseOptions,
        metadata: Optional[Dict[str, Any]],
    ) -> SheetGrid:
        warnings: List[str] = []
        if opts.trim_trailing_empty:
            grid, trimmed = cls._trim_trailing_empty(grid)
            if trimmed:
                warnings.append("Trailing empty rows/cols trimmed")
                logger.debug("Trimmed trailing empty rows/cols from %s grid", source)

        rows = len(grid)
        cols = max((len(r) for r in grid), default=0)
        return SheetGrid(
            source=source,
            sheet_name=sheet_name,
            grid=grid,
            metadata={"rows": rows, "cols": cols, **(metadata or {})},
            warnings=warnings,
        )

    @staticmethod
    def _limit(grid: List[List[Cell]], *, max_rows: Optional[int], max_cols: Optional[int]) -> List[List[Cell]]:
        rows = grid[: max_rows] if max_rows is not None else grid
        if max_cols is None:
            return rows
        return [row[: max_cols] for row in rows]

    @staticmethod
    def _is_blank(value: Any) -> bool:
        return value is None or str(value).strip() == ""

    @staticmethod
    def _json_safe_cell(value: Any) -> Cell:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, Decimal):
            return str(value)
        if isinstance(value, (datetime, date, time)):
            if isinstance(value, datetime):
                return value.isoformat(sep=" ")
            return value.isoformat()
        return str(value)

    @classmethod
    def _excel_value_to_cell(cls, value: Any) -> Cell:
        # Excel often stores a date as datetime midnight
        if isinstance(value, datetime) and value.time() == time(0, 0):
            return value.date().isoformat()
        return cls._json_safe_cell(value)

    @classmethod
    def _trim_trailing_empty(cls, grid: List[List[Cell]]) -> Tuple[List[List[Cell]], bool]:
        if not grid:
            return grid, False

        bottom = len(grid) - 1
        while bottom >= 0 and all(cls._is_blank(v) for v in grid[bottom]):
            bottom -= 1

        kept = grid[: bottom + 1]
        right = max((len(r) for r in kept), default=0) - 1
        while right >= 0 and all(right >= len(r) or cls._is_blank(r[right]) for r in kept):
            right -= 1

        new_grid = [row[: right + 1] for row in kept]
        trimmed = len(new_grid) != len(grid) or any(len(a) != len(b) for a, b in zip(new_grid, grid))
        return new_grid, trimmed

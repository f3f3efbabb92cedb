"""
Public parsers.

Each parser reads its source into a grid and hands it to the one normalizer:

    from sheet_to_json import parse, parse_csv, parse_google_sheet

    result = parse(xlsx_bytes, ParseOptions(header_name_to_key={"상품ID": "productId"}))
    result.body  # [{"productId": 1001}, ...]
"""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any, Mapping, Optional, Sequence, Union

from sheet_to_json.connectors.google_sheets.service import GoogleSheetsService
from sheet_to_json.models.google_sheets import GoogleSheetConfig
from sheet_to_json.models.tabular import Cell, CsvParseOptions, ParseOptions, ParseResult
from sheet_to_json.services.sheet_grid_parser import FileData, SheetGridParser
from sheet_to_json.services.tabular_normalizer import OptionsLike, TabularNormalizer

logger = logging.getLogger(__name__)


def _options(options: OptionsLike, model: type = ParseOptions) -> Any:
    if isinstance(options, model):
        return options
    if isinstance(options, ParseOptions):
        return model.model_validate(options.model_dump())
    return model.model_validate(options)


def parse_tabular_data(rows: Optional[Sequence[Optional[Sequence[Cell]]]], options: OptionsLike) -> ParseResult:
    """Normalize an in-memory grid (rows of cells)."""
    return TabularNormalizer.normalize(rows, options)


def parse(file_data: FileData, options: OptionsLike) -> ParseResult:
    """
    xlsx 파일을 파싱하여 레코드 목록으로 변환합니다.

    Args:
        file_data: Workbook bytes or binary file object
        options: ParseOptions; ``sheet_name`` selects the worksheet (first sheet by default)

    Raises:
        SheetNotFoundError: the requested sheet does not exist
    """
    opts: ParseOptions = _options(options)
    sheet = SheetGridParser.from_excel_bytes(file_data, sheet_name=opts.sheet_name)
    result = TabularNormalizer.normalize(sheet.grid, opts)
    logger.debug("Parsed worksheet '%s' into %d records", sheet.sheet_name, len(result.body))
    return result


def parse_csv(file_data: FileData, options: Union[CsvParseOptions, Mapping[str, Any]]) -> ParseResult:
    """
    CSV 파일을 파싱하여 레코드 목록으로 변환합니다.

    Args:
        file_data: CSV bytes or binary file object
        options: CsvParseOptions (delimiter defaults to ",", encoding to "utf-8")
    """
    opts: CsvParseOptions = _options(options, CsvParseOptions)
    sheet = SheetGridParser.from_csv_bytes(file_data, delimiter=opts.delimiter, encoding=opts.encoding)
    result = TabularNormalizer.normalize(sheet.grid, opts)
    logger.debug("Parsed CSV (%d lines) into %d records", sheet.metadata["rows"], len(result.body))
    return result


async def parse_google_sheet(
    config: Union[GoogleSheetConfig, Mapping[str, Any]],
    options: OptionsLike,
    *,
    service: Optional[GoogleSheetsService] = None,
) -> ParseResult:
    """
    Google 스프레드시트 워크시트를 레코드 목록으로 변환합니다.

    The worksheet is named by ``options.sheet_name``.

    Raises:
        MissingSheetNameError: no sheet name (raised before any request)
        SheetFetchError: the API answered with a non-success status
    """
    cfg = config if isinstance(config, GoogleSheetConfig) else GoogleSheetConfig.model_validate(config)
    opts: ParseOptions = _options(options)

    owned = service is None
    svc = service or GoogleSheetsService(api_key=cfg.api_key)
    try:
        values = await svc.fetch_sheet_values(
            cfg.spreadsheet_id,
            opts.sheet_name,
            api_key=cfg.api_key,
            access_token=cfg.access_token,
            value_render_option=cfg.value_render_option,
        )
    finally:
        if owned:
            await svc.close()

    sheet = SheetGridParser.from_google_sheets_values(values, sheet_name=opts.sheet_name)
    return TabularNormalizer.normalize(sheet.grid, opts)


# 기본 export (하위 호환성)
ExcelSheetToJson = SimpleNamespace(
    parse=parse,
    parse_csv=parse_csv,
    parse_google_sheet=parse_google_sheet,
    parse_tabular_data=parse_tabular_data,
)

"""
Tabular normalizer.

This is the only place where a grid becomes records:
- resolves header labels to canonical keys (mapping declaration order)
- trims cell text and optionally converts numeric literals
- drops rows whose mapped cells are all blank

Every source adapter (xlsx, CSV, Google Sheets) funnels into ``normalize``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from sheet_to_json.models.tabular import Cell, ParseOptions, ParseResult
from sheet_to_json.utils.numeric import parse_numeric_literal

logger = logging.getLogger(__name__)

OptionsLike = Union[ParseOptions, Mapping[str, Any]]


class TabularNormalizer:
    """Pure helpers; no network/IO."""

    @staticmethod
    def cell_to_text(value: Any) -> str:
        """Render a raw cell as trimmed text (absent -> "")."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value).strip()

    @classmethod
    def build_column_index(cls, columns: Sequence[str]) -> Dict[str, int]:
        index: Dict[str, int] = {}
        for i, name in enumerate(columns):
            if not name:
                continue
            # keep first occurrence; later duplicates are unreachable
            index.setdefault(name, i)
        return index

    @staticmethod
    def coerce_value(text: str, *, cast_number: bool) -> Any:
        """Numeric literal -> number when enabled, otherwise the text itself."""
        if cast_number and text:
            number = parse_numeric_literal(text)
            if number is not None:
                return number
        return text

    @staticmethod
    def _row_at(rows: Sequence[Optional[Sequence[Cell]]], index: int) -> Sequence[Cell]:
        if 0 <= index < len(rows):
            return rows[index] or []
        return []

    @classmethod
    def normalize(cls, rows: Optional[Sequence[Optional[Sequence[Cell]]]], options: OptionsLike) -> ParseResult:
        """
        Convert a grid into canonical records.

        Args:
            rows: Grid rows (outer = rows, inner = cells); may be empty or ragged
            options: ParseOptions (or a mapping accepted by ParseOptions)

        Returns:
            ParseResult; degenerate input yields empty structures, never an error
        """
        opts = options if isinstance(options, ParseOptions) else ParseOptions.model_validate(options)

        if not rows:
            return ParseResult.empty()

        header_index = opts.header_start_row_number - 1
        body_index = opts.body_start_row_number - 1

        # 1. Header labels (blanks kept in place so column indexes line up)
        raw_headers = [cls.cell_to_text(v) for v in cls._row_at(rows, header_index)]
        origin_header_names = [name for name in raw_headers if name]
        present = set(origin_header_names)
        column_index = cls.build_column_index(raw_headers)

        # 2. Resolve keys in mapping declaration order
        fields: List[str] = []
        header: Dict[str, str] = {}
        for label, key in opts.header_name_to_key.items():
            if label not in present:
                continue
            fields.append(key)
            header[key] = label

        missing = [label for label in opts.header_name_to_key if label not in present]
        if missing:
            logger.debug("Header labels not found in row %d: %s", opts.header_start_row_number, missing)

        # 3. Body records
        body: List[Dict[str, Any]] = []
        for i in range(max(body_index, 0), len(rows)):
            row = rows[i] or []
            record: Dict[str, Any] = {}
            is_empty_row = True

            for key in fields:
                col = column_index.get(header[key])
                if col is None:
                    continue

                text = cls.cell_to_text(row[col] if col < len(row) else None)
                if text:
                    is_empty_row = False
                record[key] = cls.coerce_value(text, cast_number=opts.cast_number)

            if not is_empty_row:
                body.append(record)

        logger.debug(
            "Normalized %d grid rows into %d records (fields=%s)",
            len(rows[max(body_index, 0):]),
            len(body),
            fields,
        )

        return ParseResult(
            origin_header_names=origin_header_names,
            fields=fields,
            header=header,
            body=body,
        )


def normalize(rows: Optional[Sequence[Optional[Sequence[Cell]]]], options: OptionsLike) -> ParseResult:
    """Module-level shortcut for ``TabularNormalizer.normalize``."""
    return TabularNormalizer.normalize(rows, options)

"""
Tabular parsing models.

``ParseOptions`` describes where the header and body live in a grid and how
header labels map to canonical keys; ``ParseResult`` is the single output
shape every source format funnels into.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from sheet_to_json.config import AppConfig

# Closed cell variant produced at grid construction
Cell = Union[str, int, float, None]
Grid = List[List[Cell]]


class ParseOptions(BaseModel):
    """Per-call options for turning a grid into records (row numbers are 1-based)."""

    header_start_row_number: int = Field(
        default=AppConfig.DEFAULT_HEADER_START_ROW_NUMBER,
        description="1-based row holding the header labels",
    )
    body_start_row_number: int = Field(
        default=AppConfig.DEFAULT_BODY_START_ROW_NUMBER,
        description="1-based row where data rows begin",
    )
    header_name_to_key: Dict[str, str] = Field(
        default_factory=dict,
        description="Header label -> canonical key, in declaration order",
        examples=[{"상품명칭": "productName"}],
    )
    cast_number: bool = Field(default=True, description="Convert numeric cell text to numbers")
    sheet_name: Optional[str] = Field(
        default=None, description="Worksheet to read; first sheet when omitted (xlsx only)"
    )

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("header_name_to_key")
    @classmethod
    def validate_unique_keys(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Two labels may not target the same key"""
        owners: Dict[str, str] = {}
        for label, key in v.items():
            if key in owners:
                raise ValueError(
                    f"Duplicate key '{key}' mapped from both '{owners[key]}' and '{label}'"
                )
            owners[key] = label
        return v


class CsvParseOptions(ParseOptions):
    """Options for delimited text sources."""

    delimiter: str = Field(
        default=AppConfig.DEFAULT_CSV_DELIMITER,
        min_length=1,
        max_length=1,
        description="Field delimiter character",
    )
    encoding: str = Field(default=AppConfig.DEFAULT_CSV_ENCODING, description="Text encoding")


class ParseResult(BaseModel):
    """Normalized records plus the header information they were resolved from."""

    origin_header_names: List[str] = Field(
        default_factory=list, description="Non-empty header labels in column order"
    )
    fields: List[str] = Field(
        default_factory=list, description="Resolved keys in mapping declaration order"
    )
    header: Dict[str, str] = Field(default_factory=dict, description="Key -> originating label")
    body: List[Dict[str, Any]] = Field(default_factory=list, description="One record per non-blank row")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def empty(cls) -> "ParseResult":
        return cls()

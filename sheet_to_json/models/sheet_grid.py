"""
Sheet grid models.

Goal: represent a spreadsheet (xlsx / CSV / Google Sheets) as one grid of raw
cells so the normalizer can operate on a single standard format.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from sheet_to_json.models.tabular import Cell


class SheetGrid(BaseModel):
    """Sheet representation (0-based coordinates, A1 at grid[0][0])."""

    source: Literal["excel", "csv", "google_sheets", "unknown"] = "unknown"
    sheet_name: Optional[str] = None

    grid: List[List[Cell]] = Field(default_factory=list, description="Rows of raw cells (may be ragged)")

    metadata: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

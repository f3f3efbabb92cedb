"""
Google Sheets models
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ValueRenderOption = Literal["FORMATTED_VALUE", "UNFORMATTED_VALUE", "FORMULA"]


class GoogleSheetConfig(BaseModel):
    """Google 스프레드시트 접근 정보"""

    spreadsheet_id: str = Field(..., description="Spreadsheet ID (from /spreadsheets/d/{ID}/)")
    api_key: Optional[str] = Field(default=None, description="Google API key")
    access_token: Optional[str] = Field(
        default=None, description="OAuth access token; takes precedence over api_key"
    )
    value_render_option: Optional[ValueRenderOption] = Field(
        default=None, description="Sheets API valueRenderOption; API default when omitted"
    )

    model_config = ConfigDict(frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True)

    @field_validator("spreadsheet_id")
    @classmethod
    def validate_spreadsheet_id(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("Spreadsheet ID must be a non-empty string")
        return v

    @classmethod
    def from_url(cls, sheet_url: str, **kwargs) -> "GoogleSheetConfig":
        """Build a config from a docs.google.com spreadsheet URL."""
        from sheet_to_json.connectors.google_sheets.utils import extract_sheet_id

        return cls(spreadsheet_id=extract_sheet_id(sheet_url), **kwargs)

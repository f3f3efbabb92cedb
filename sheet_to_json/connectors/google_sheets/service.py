"""
Google Sheets Connector - Service Layer.

This module is *only* responsible for I/O: one read of a worksheet's value
matrix per call. Turning the matrix into records is the normalizer's job.
No retry and no timeout of its own; callers add those around the call.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from sheet_to_json.config import AppConfig
from sheet_to_json.exceptions import MissingSheetNameError, SheetFetchError

from .utils import build_sheets_values_url

logger = logging.getLogger(__name__)


class GoogleSheetsService:
    """Google Sheets API client (read-only)."""

    def __init__(self, api_key: Optional[str] = None, *, client: Optional[httpx.AsyncClient] = None):
        self.api_key = (api_key or "").strip()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "GoogleSheetsService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=AppConfig.HTTP_TIMEOUT,
                headers={"Accept": "application/json", "User-Agent": AppConfig.HTTP_USER_AGENT},
            )
            self._owns_client = True
        return self._client

    async def fetch_sheet_values(
        self,
        spreadsheet_id: str,
        sheet_name: Optional[str],
        *,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        value_render_option: Optional[str] = None,
    ) -> List[List[Any]]:
        """
        Fetch the raw value matrix of one worksheet.

        Returns:
            Rows of cell values; [] when the sheet has no values

        Raises:
            MissingSheetNameError: sheet_name not given (before any request)
            SheetFetchError: non-success HTTP status
        """
        if sheet_name is None or not str(sheet_name).strip():
            raise MissingSheetNameError("sheet_name")

        client = await self._get_client()
        url = build_sheets_values_url(spreadsheet_id, sheet_name)

        params: Dict[str, str] = {"majorDimension": "ROWS"}
        if value_render_option:
            params["valueRenderOption"] = value_render_option
        headers: Dict[str, str] = {}
        key = (api_key or self.api_key or "").strip()
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        elif key:
            params["key"] = key

        logger.debug("Fetching Google Sheet values: spreadsheet=%s sheet=%s", spreadsheet_id, sheet_name)
        response = await client.get(url, params=params, headers=headers or None)

        if not response.is_success:
            logger.warning(
                "Google Sheets API returned %s for spreadsheet=%s sheet=%s",
                response.status_code,
                spreadsheet_id,
                sheet_name,
            )
            raise SheetFetchError(
                response.status_code,
                sheet_name=sheet_name,
                hint=AppConfig.GOOGLE_SHEETS_SHARING_HINT,
            )

        data = response.json() or {}
        values = data.get("values") or []
        logger.info("Fetched %d rows from Google Sheet '%s'", len(values), sheet_name)
        return values

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from ..models.config_models import DEFAULT_SHEETS_API_BASE, DEFAULT_TIMEOUT_SECONDS
from ..table.columns import column_to_index
from ..table.lookup import find_row
from ._http import get_json
from .base import RecordNotFoundError, RecordStore, StoreDataError

"""RecordStore backed by the spreadsheet values API.

``GET <api_base>/<spreadsheetId>/values/<sheetName>?key=<apiKey>`` returns
``{"values": [[header, ...], [cell, ...], ...]}``. The whole sheet is
fetched and scanned locally with find_row.
"""

__all__ = [
    "SheetsApiRecordStore",
]

logger = logging.getLogger(__name__)

EMPTY_SHEET_MESSAGE = "הגיליון ריק או לא נמצא"


class SheetsApiRecordStore(RecordStore):
    name = "sheets_api"

    def __init__(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        api_key: str,
        id_column: str = "A",
        api_base: str = DEFAULT_SHEETS_API_BASE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self.id_column_index = column_to_index(id_column)
        self.timeout = timeout
        self._api_key = api_key
        self._api_base = api_base.rstrip("/")
        self._session = session if session is not None else requests.Session()

    @property
    def values_url(self) -> str:
        return (
            f"{self._api_base}/{quote(self.spreadsheet_id, safe='')}"
            f"/values/{quote(self.sheet_name, safe='')}"
        )

    def read_table(self) -> list[list[object]]:
        # The key goes in params so it never shows up in the logged URL
        logger.debug(f"sheets_api: GET {self.values_url}")
        data = get_json(self._session, self.values_url, self.timeout, params={"key": self._api_key})

        values = data.get("values") if isinstance(data, dict) else None
        if not values:
            raise StoreDataError(EMPTY_SHEET_MESSAGE)
        if not isinstance(values, list):
            raise StoreDataError(f"'values' is {type(values).__name__}, expected a list of rows")
        for number, row in enumerate(values, start=1):
            if not isinstance(row, list):
                raise StoreDataError(f"row {number} is {type(row).__name__}, expected a list of cells")
        return values

    def fetch(self, identifier: str) -> dict[str, str]:
        values = self.read_table()
        logger.debug(f"sheets_api: scanning {len(values) - 1} rows")
        row = find_row(values, self.id_column_index, identifier)
        if row is None:
            raise RecordNotFoundError()
        return row

from __future__ import annotations

import logging
from pathlib import Path

from ..table.columns import column_to_index
from ..table.lookup import WorkbookReadError, find_row, read_workbook_table
from .base import RecordNotFoundError, RecordStore, StoreDataError

"""RecordStore backed by a local .xlsx workbook (offline mode).

The sheet is re-read on every fetch; lookups are one-shot and the file may
be edited between them.
"""

__all__ = [
    "WorkbookRecordStore",
]

logger = logging.getLogger(__name__)


class WorkbookRecordStore(RecordStore):
    name = "workbook"

    def __init__(self, path: Path | str, sheet_name: str | None = None, id_column: str = "A") -> None:
        self.path = Path(path)
        self.sheet_name = sheet_name
        self.id_column_index = column_to_index(id_column)

    def read_table(self) -> list[list[object]]:
        try:
            return read_workbook_table(self.path, self.sheet_name)
        except WorkbookReadError as e:
            raise StoreDataError(str(e)) from e

    def fetch(self, identifier: str) -> dict[str, str]:
        table = self.read_table()
        logger.debug(f"workbook: {self.path.name} rows={max(len(table) - 1, 0)}")
        row = find_row(table, self.id_column_index, identifier)
        if row is None:
            raise RecordNotFoundError()
        return row

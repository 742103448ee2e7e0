"""RecordStore implementations and the factory that picks one from config."""

from __future__ import annotations

from ..models.config_models import StoreConfig, StoreType
from .base import (
    RecordNotFoundError,
    RecordStore,
    RecordStoreError,
    StoreDataError,
    StoreTransportError,
)
from .relay import RelayRecordStore
from .sheets_api import SheetsApiRecordStore
from .workbook import WorkbookRecordStore

__all__ = [
    "RecordNotFoundError",
    "RecordStore",
    "RecordStoreError",
    "RelayRecordStore",
    "SheetsApiRecordStore",
    "StoreDataError",
    "StoreTransportError",
    "WorkbookRecordStore",
    "build_store",
]


def build_store(config: StoreConfig) -> RecordStore:
    """Instantiate the RecordStore named by ``config.type``.

    The config loader has already checked that the fields each type needs
    are present.
    """
    if config.type is StoreType.RELAY:
        return RelayRecordStore(config.url, timeout=config.timeout)
    if config.type is StoreType.SHEETS_API:
        return SheetsApiRecordStore(
            spreadsheet_id=config.spreadsheet_id,
            sheet_name=config.sheet_name or "Sheet1",
            api_key=config.api_key,
            id_column=config.id_column,
            api_base=config.api_base,
            timeout=config.timeout,
        )
    if config.type is StoreType.WORKBOOK:
        return WorkbookRecordStore(config.path, sheet_name=config.sheet_name, id_column=config.id_column)
    raise ValueError(f"unsupported store type: {config.type}")

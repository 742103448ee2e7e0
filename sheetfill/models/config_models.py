from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Config dataclasses for the identifier lookup tool.

These are the typed, validated form of config/lookup.yml produced by
sheetfill.config.loader. Environment overrides are already applied when
these objects are built.
"""

__all__ = [
    "FormConfig",
    "LookupConfig",
    "StoreConfig",
    "StoreType",
]

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_SHEETS_API_BASE = "https://sheets.googleapis.com/v4/spreadsheets"


class StoreType(Enum):
    """Which RecordStore implementation serves the lookups.

    - RELAY: a web endpoint next to the sheet answering ``?id=`` with one record
    - SHEETS_API: the spreadsheet values API, whole sheet fetched and scanned
    - WORKBOOK: a local .xlsx file, scanned the same way
    """
    RELAY = "relay"
    SHEETS_API = "sheets_api"
    WORKBOOK = "workbook"


@dataclass(frozen=True)
class StoreConfig:
    """Connection settings for the configured RecordStore.

    Only the fields relevant to ``type`` are populated; the loader enforces
    which ones are required per type.
    """
    type: StoreType
    url: str | None = None  # relay
    spreadsheet_id: str | None = None  # sheets_api
    api_key: str | None = None  # sheets_api
    api_base: str = DEFAULT_SHEETS_API_BASE  # sheets_api
    sheet_name: str | None = None  # sheets_api / workbook
    path: str | None = None  # workbook
    id_column: str = "A"  # sheets_api / workbook
    timeout: float = DEFAULT_TIMEOUT_SECONDS  # relay / sheets_api


@dataclass(frozen=True)
class FormConfig:
    """Form side settings: per-deployment overrides of the default field targets."""
    field_targets: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LookupConfig:
    """Root configuration object."""
    store: StoreConfig
    header_map: dict[str, str] = field(default_factory=dict)  # extra header labels
    form: FormConfig = field(default_factory=FormConfig)

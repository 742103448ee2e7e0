from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_SHEETS_API_BASE,
    DEFAULT_TIMEOUT_SECONDS,
    FormConfig,
    LookupConfig,
    StoreConfig,
    StoreType,
)
from ..table.columns import InvalidColumnLabelError, column_to_index

"""Config loader.

Responsibilities:
- Load YAML config (default config/lookup.yml)
- Validate against the packaged lookup_schema.json
- Apply environment overrides for secrets and endpoints
  (SHEETFILL_API_KEY, SHEETFILL_RELAY_URL); the environment wins
- Refuse a store that has nothing to connect to
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_API_KEY",
    "ENV_RELAY_URL",
    "SCHEMA_PATH",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/lookup.yml")
SCHEMA_PATH = Path(__file__).with_name("lookup_schema.json")

ENV_API_KEY = "SHEETFILL_API_KEY"
ENV_RELAY_URL = "SHEETFILL_RELAY_URL"

NO_STORE_MESSAGE = "לא הוגדרו פרטי חיבור לגוגל שיטס"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: the schema file is missing or broken, or the config
            violates it (missing keys, wrong types, unknown keys)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _build_store_config(raw: dict[str, Any]) -> StoreConfig:
    store_type = StoreType(raw["type"])
    id_column = raw.get("id_column", "A")
    try:
        column_to_index(id_column)
    except InvalidColumnLabelError as e:
        raise ConfigError(f"store.id_column: {e}") from e

    url = _env(ENV_RELAY_URL) or raw.get("url") or None
    api_key = _env(ENV_API_KEY) or raw.get("api_key") or None

    if store_type is StoreType.RELAY and not url:
        raise ConfigError(f"{NO_STORE_MESSAGE}: relay url missing (store.url or {ENV_RELAY_URL})")
    if store_type is StoreType.SHEETS_API and not api_key:
        raise ConfigError(f"{NO_STORE_MESSAGE}: api key missing (store.api_key or {ENV_API_KEY})")

    return StoreConfig(
        type=store_type,
        url=url,
        spreadsheet_id=raw.get("spreadsheet_id"),
        api_key=api_key,
        api_base=raw.get("api_base", DEFAULT_SHEETS_API_BASE),
        sheet_name=raw.get("sheet_name"),
        path=raw.get("path"),
        id_column=id_column.upper(),
        timeout=float(raw.get("timeout", DEFAULT_TIMEOUT_SECONDS)),
    )


def _string_keys(mapping: dict[Any, Any] | None) -> dict[str, Any]:
    # YAML reads unquoted labels such as 2024 as ints
    return {str(k): v for k, v in (mapping or {}).items()}


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> LookupConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    form_raw = data.get("form") or {}
    return LookupConfig(
        store=_build_store_config(data["store"]),
        header_map=_string_keys(data.get("header_map")),
        form=FormConfig(field_targets=_string_keys(form_raw.get("field_targets"))),
    )

from __future__ import annotations

import json

import jsonschema
import pytest
import yaml
from jsonschema.exceptions import ValidationError

from sheetfill.config.loader import SCHEMA_PATH

"""Config schema contract test: the packaged lookup_schema.json itself."""


@pytest.fixture(scope="module")
def schema() -> dict:
    data = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    jsonschema.Draft202012Validator.check_schema(data)
    return data


@pytest.mark.parametrize(
    "text",
    [
        "store:\n  type: relay\n  url: https://script.google.com/macros/s/x/exec\n",
        "store:\n  type: sheets_api\n  spreadsheet_id: sid\n  sheet_name: ראשי\n  id_column: A\n",
        "store:\n  type: workbook\n  path: ./data/m.xlsx\n  timeout: 5\n",
        (
            "store:\n  type: workbook\n  path: m.xlsx\n"
            "header_map:\n  מספר זהות: id\nform:\n  field_targets:\n    phone: input_99\n"
        ),
    ],
)
def test_config_schema_valid_examples(schema, text: str):
    jsonschema.validate(yaml.safe_load(text), schema)


@pytest.mark.parametrize(
    "config",
    [
        {},
        {"store": {}},
        {"store": {"type": "relay"}, "unknown": 1},
        {"store": {"type": "relay", "proxy": "x"}},
        {"store": {"type": "workbook"}},
        {"store": {"type": "sheets_api"}},
        {"store": {"type": "workbook", "path": "x", "id_column": "1"}},
        {"store": {"type": "workbook", "path": "x", "timeout": -1}},
        {"store": {"type": "workbook", "path": "x"}, "header_map": {"a": ""}},
        {"store": {"type": "workbook", "path": "x"}, "form": {"targets": {}}},
    ],
)
def test_config_schema_rejects(schema, config: dict):
    with pytest.raises(ValidationError):
        jsonschema.validate(config, schema)

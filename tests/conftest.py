# Shared pytest fixtures
from __future__ import annotations
import logging
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pandas as pd
import pytest
import requests

from sheetfill.logging.init import reset_logging

MEMBER_HEADERS = ["ת.ז.", "שם משפחה", "שם פרטי", "טלפון נייד", "", "הערות"]


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # A developer's own .env / shell must not leak into lookups under test.
    # setenv first so monkeypatch also undoes whatever a CLI run loads from .env
    for name in ("SHEETFILL_API_KEY", "SHEETFILL_RELAY_URL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture()
def fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def member_rows() -> list[list[object]]:
    return [
        MEMBER_HEADERS,
        ["123456789", "כהן", "דנה", "050-1234567", "ignored", ""],
        ["012345678", "לוי", "יוסי", "", "ignored", "VIP"],
        [987654321, "מזרחי", "רון"],  # short row, numeric id
    ]


def _write_workbook(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
    with pd.ExcelWriter(path) as writer:
        for sheet, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=sheet, header=False, index=False)
    return path


@pytest.fixture()
def write_workbook():
    return _write_workbook


@pytest.fixture()
def member_workbook(temp_workdir: Path, member_rows) -> Path:
    return _write_workbook(temp_workdir / "data" / "members.xlsx", {"ראשי": member_rows})


@pytest.fixture()
def sample_config_yaml() -> str:
    return """store:
  type: workbook
  path: ./data/members.xlsx
  sheet_name: ראשי
  id_column: A
header_map:
  הערות: notes
form:
  field_targets:
    notes: input_99
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "lookup.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def http_response():
    """Factory for fake requests.Response objects."""
    def make(payload=None, status: int = 200, reason: str = "OK", not_json: bool = False):
        resp = MagicMock(spec=requests.Response)
        resp.status_code = status
        resp.reason = reason
        resp.ok = 200 <= status < 300
        if not_json:
            resp.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
        else:
            resp.json.return_value = payload
        return resp
    return make


@pytest.fixture()
def fake_session(http_response):
    """Factory for a requests.Session whose get() answers with one response."""
    def make(payload=None, status: int = 200, reason: str = "OK", not_json: bool = False, error=None):
        session = MagicMock(spec=requests.Session)
        if error is not None:
            session.get.side_effect = error
        else:
            session.get.return_value = http_response(payload, status, reason, not_json)
        return session
    return make


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def capture_logs():
    """Attach a recording handler straight to a named logger.

    The application logger does not propagate to root once configured, so
    caplog cannot be relied on for sheetfill.* records.
    """
    attached = []

    def attach(name: str, level: int = logging.DEBUG) -> list[logging.LogRecord]:
        logger = logging.getLogger(name)
        handler = _ListHandler()
        attached.append((logger, handler, logger.level))
        logger.addHandler(handler)
        logger.setLevel(level)
        return handler.records

    yield attach
    for logger, handler, level in attached:
        logger.removeHandler(handler)
        logger.setLevel(level)

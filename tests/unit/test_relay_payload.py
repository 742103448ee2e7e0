from __future__ import annotations
import pytest

from sheetfill.services.relay import MISSING_ID_MESSAGE, build_relay_payload
from sheetfill.stores.base import NOT_FOUND_MESSAGE

TABLE = [["ת.ז.", "שם משפחה", ""], ["123", "כהן", "x"], ["456", "לוי"]]


def test_match_returns_flat_record():
    assert build_relay_payload(TABLE, "A", "123") == {"ת.ז.": "123", "שם משפחה": "כהן"}


@pytest.mark.parametrize("identifier", [None, "", "  "])
def test_missing_identifier(identifier):
    assert build_relay_payload(TABLE, "A", identifier) == {"error": MISSING_ID_MESSAGE}


def test_not_found():
    assert build_relay_payload(TABLE, "A", "999") == {"error": NOT_FOUND_MESSAGE}


def test_header_only_sheet_is_not_found():
    assert build_relay_payload(TABLE[:1], "A", "123") == {"error": NOT_FOUND_MESSAGE}


def test_bad_column_reported_in_body():
    payload = build_relay_payload(TABLE, "1", "123")
    assert set(payload) == {"error"}
    assert payload["error"].startswith("שגיאה: ")


def test_payload_round_trips_through_relay_store(fake_session):
    from sheetfill.stores import RecordNotFoundError, RelayRecordStore

    ok = RelayRecordStore("https://relay", session=fake_session(build_relay_payload(TABLE, "A", "456")))
    assert ok.fetch("456") == {"ת.ז.": "456", "שם משפחה": "לוי"}

    missing = RelayRecordStore("https://relay", session=fake_session(build_relay_payload(TABLE, "A", "1")))
    with pytest.raises(RecordNotFoundError) as e:
        missing.fetch("1")
    assert str(e.value) == NOT_FOUND_MESSAGE

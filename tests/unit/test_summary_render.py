from __future__ import annotations
import re

import pytest

from sheetfill.models.fill_result import FillResult
from sheetfill.services.summary import render_summary_line

SUMMARY_RE = re.compile(r"^SUMMARY id=\**\w{0,4} fields=\d+ filled=\d+ elapsed_sec=[0-9.]+$")


def _result(filled: int = 2) -> FillResult:
    return FillResult(identifier="123456789", record={"id": "123456789", "lastName": "כהן"}, filled_count=filled)


def test_summary_line_format():
    line = render_summary_line(_result(), 0.25)
    assert line == "SUMMARY id=*****6789 fields=2 filled=2 elapsed_sec=0.25"
    assert SUMMARY_RE.match(line)


def test_summary_never_contains_full_identifier():
    assert "123456789" not in render_summary_line(_result(), 1)


@pytest.mark.parametrize(
    "elapsed, rendered",
    [(0, "0"), (2.0, "2"), (0.004, "0.004"), (0.0000012, "0.000001"), (1.23456, "1.235")],
)
def test_elapsed_formatting(elapsed: float, rendered: str):
    assert render_summary_line(_result(), elapsed).endswith(f"elapsed_sec={rendered}")


def test_zero_filled():
    assert "filled=0" in render_summary_line(_result(filled=0), 0)

from __future__ import annotations
import math

import pandas as pd
import pytest

from sheetfill.table.lookup import cell_text, find_row, frame_to_table

TABLE = [["ID", "Name"], ["42", "Alice"], ["7", "Bob"]]


def test_find_row_match():
    assert find_row(TABLE, 0, "42") == {"ID": "42", "Name": "Alice"}


def test_find_row_no_match_returns_none():
    assert find_row(TABLE, 0, "99") is None


@pytest.mark.parametrize("table", [[], [["ID", "Name"]]])
def test_fewer_than_two_rows_is_no_data(table):
    assert find_row(table, 0, "42") is None
    assert find_row(table, 0, "") is None


def test_identifier_trimmed_both_sides():
    table = [["ID", "Name"], ["  42\t", "Alice"]]
    assert find_row(table, 0, " 42 ") == {"ID": "  42\t", "Name": "Alice"}


def test_identifier_coerced_to_string():
    assert find_row(TABLE, 0, 42) == {"ID": "42", "Name": "Alice"}


def test_first_match_wins():
    table = [["ID", "Name"], ["1", "first"], ["1", "second"]]
    assert find_row(table, 0, "1") == {"ID": "1", "Name": "first"}


def test_id_column_other_than_first():
    table = [["Name", "ID"], ["Alice", "42"], ["Bob", "7"]]
    assert find_row(table, 1, "7") == {"Name": "Bob", "ID": "7"}


def test_short_rows_read_missing_cells_as_empty():
    table = [["ID", "Name", "City"], ["42", "Alice"]]
    assert find_row(table, 0, "42") == {"ID": "42", "Name": "Alice", "City": ""}


def test_missing_id_cell_never_matches_non_blank_id():
    table = [["Name", "ID"], ["Alice"], ["Bob", "7"]]
    assert find_row(table, 1, "7") == {"Name": "Bob", "ID": "7"}
    assert find_row(table, 5, "7") is None


def test_blank_headers_skipped_and_trimmed():
    table = [[" ID ", "", "   ", None, "Name"], ["42", "x", "y", "z", "Alice"]]
    assert find_row(table, 0, "42") == {"ID": "42", "Name": "Alice"}


def test_values_coerced_to_string_none_to_empty():
    table = [["ID", "Year", "Note"], [123456789, 1980, None]]
    assert find_row(table, 0, "123456789") == {"ID": "123456789", "Year": "1980", "Note": ""}


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (float("nan"), ""),
        (123456789.0, "123456789"),
        (1.5, "1.5"),
        (0, "0"),
        ("  x ", "  x "),
        (True, "true"),
        (False, "false"),
        (pd.NaT, ""),
    ],
)
def test_cell_text(value, expected):
    assert cell_text(value) == expected


def test_cell_text_inf_kept():
    assert cell_text(math.inf) == "inf"


def test_frame_to_table_trims_trailing_empty_cells_and_rows():
    df = pd.DataFrame([["ID", "Name", ""], ["1", "a", None], ["", None, ""]])
    assert frame_to_table(df) == [["ID", "Name"], ["1", "a"]]


def test_boolean_cells_render_lowercase():
    table = [["ID", "Active"], ["42", True], ["7", False]]
    assert find_row(table, 0, "42") == {"ID": "42", "Active": "true"}
    assert find_row(table, 0, "7")["Active"] == "false"

from __future__ import annotations

import zipfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd

"""Row lookup over header+rows tabular data.

Row 0 is the header row, every following row is a data row. Rows shorter
than the header are tolerated; missing cells read as the empty string.

The workbook helpers read an .xlsx without header inference so that the
same lookup applies to API payloads and local files alike.
"""

__all__ = [
    "TabularData",
    "WorkbookReadError",
    "cell_text",
    "find_row",
    "frame_to_table",
    "read_workbook_table",
]

TabularData = Sequence[Sequence[Any]]


class WorkbookReadError(Exception):
    """Raised when a workbook or one of its sheets cannot be read."""


def cell_text(value: Any) -> str:
    """Coerce a raw cell value to its string form.

    None and NaN become "". Whole floats drop the trailing ".0" so that an
    ID column parsed as numbers (123456789.0) compares as "123456789". Booleans
    render lowercase, the way the sheet displays them.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    if value is pd.NaT:
        return ""
    return str(value)


def _cell(row: Sequence[Any], index: int) -> str:
    if index < len(row):
        return cell_text(row[index])
    return ""


def find_row(table: TabularData, id_column_index: int, target_id: Any) -> dict[str, str] | None:
    """Return the first data row whose id cell equals ``target_id`` as header->value.

    - fewer than 2 rows means "no data" and yields None, not an error
    - both sides are trimmed before an exact string comparison
    - duplicates: the first matching row wins
    - blank headers are dropped from the result
    """
    if len(table) < 2:
        return None
    headers = table[0]
    wanted = cell_text(target_id).strip()
    for row in table[1:]:
        if _cell(row, id_column_index).strip() != wanted:
            continue
        result: dict[str, str] = {}
        for index, header in enumerate(headers):
            name = cell_text(header).strip()
            if name == "":
                continue
            result[name] = _cell(row, index)
        return result
    return None


def frame_to_table(df: pd.DataFrame) -> list[list[Any]]:
    """Turn a headerless DataFrame into TabularData, trimming trailing empty cells."""
    table: list[list[Any]] = []
    for raw in df.itertuples(index=False, name=None):
        cells = list(raw)
        while cells and cell_text(cells[-1]) == "":
            cells.pop()
        table.append(cells)
    # Rows that were completely empty at the bottom of the sheet carry no data
    while table and not table[-1]:
        table.pop()
    return table


def read_workbook_table(path: Path, sheet_name: str | None = None) -> list[list[Any]]:
    """Read one sheet of an .xlsx as raw TabularData.

    Parameters
    ----------
    path: workbook path
    sheet_name: sheet to read (None means the first sheet)
    """
    if not path.exists():
        raise WorkbookReadError(f"workbook not found: {path}")
    try:
        xls = pd.ExcelFile(path)
    except (ValueError, OSError, zipfile.BadZipFile) as e:
        raise WorkbookReadError(f"cannot open workbook {path.name}: {e}") from e
    with xls:
        names = [str(n) for n in xls.sheet_names]
        target = sheet_name if sheet_name is not None else names[0]
        if target not in names:
            raise WorkbookReadError(f"sheet '{target}' not found in {path.name} (sheets={names})")
        # Everything as object so IDs with leading zeros are not turned into numbers
        df = xls.parse(target, header=None, dtype=object, keep_default_na=False)
    return frame_to_table(df)

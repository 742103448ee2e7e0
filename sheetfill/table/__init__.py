"""Tabular data helpers: column labels and row lookup."""

from .columns import InvalidColumnLabelError, column_to_index, index_to_column
from .lookup import TabularData, cell_text, find_row

__all__ = [
    "InvalidColumnLabelError",
    "TabularData",
    "cell_text",
    "column_to_index",
    "find_row",
    "index_to_column",
]

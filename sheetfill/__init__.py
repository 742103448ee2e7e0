"""Look up a record by identifier in a spreadsheet and apply it to a form."""

__version__ = "0.1.0"

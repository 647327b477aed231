"""Custom exceptions for spreadsheet intake."""

from pathlib import Path
from typing import Iterable, Optional


class MissingColumnError(ValueError):
    """
    Exception raised when a table lacks columns required to render it.

    Attributes:
        missing: Sorted names of the absent columns
        table_name: Name of the table being read (e.g., 'positions')
        source: Path of the file the table came from, if any
    """

    def __init__(
        self,
        missing: Iterable[str],
        table_name: str = "table",
        source: Optional[Path] = None,
    ):
        self.missing = sorted(missing)
        self.table_name = table_name
        self.source = source

        message = f"Missing column(s) in {table_name}: {', '.join(self.missing)}"
        if source is not None:
            message += f" (file: {source})"

        super().__init__(message)


class SpreadsheetFormatError(ValueError):
    """
    Exception raised when a cell value cannot be interpreted.

    Attributes:
        column: Column of the offending cell
        row_number: 1-based data row number (header excluded)
        value: The raw cell value
    """

    def __init__(self, message: str, column: str, row_number: int, value: str):
        self.column = column
        self.row_number = row_number
        self.value = value
        super().__init__(f"{message} (row {row_number}, column '{column}': {value!r})")

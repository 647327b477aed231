"""
Intake Context

Responsibilities:
- Reads CV spreadsheet tables (positions, skills, text blocks, contact info)
- Validates table headers and fails fast on missing columns
- Converts rows into typed records

Owns: Spreadsheet parsing and row typing
Never: Decides how records are ordered or rendered
"""

from vitae.contexts.intake.cv_data_structures import (
    ContactEntry,
    CVData,
    PositionRecord,
    Skill,
    TextBlock,
)
from vitae.contexts.intake.exceptions import MissingColumnError, SpreadsheetFormatError
from vitae.contexts.intake.spreadsheet import load_cv_data, position_records_from_rows, read_table

__all__ = [
    # Records
    "PositionRecord",
    "Skill",
    "TextBlock",
    "ContactEntry",
    "CVData",
    # Loading
    "load_cv_data",
    "read_table",
    "position_records_from_rows",
    # Errors
    "MissingColumnError",
    "SpreadsheetFormatError",
]

"""
Spreadsheet ingestion for CV tables.

Reads the CSV exports of the CV spreadsheet (positions, skills, text blocks,
contact info), validates their headers and converts rows into typed records.
Cell values are read as text; blank-like values ("", "NA", "N/A", "NULL") are
treated as absent.
"""

import csv
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from vitae.contexts.intake.cv_data_structures import (
    ContactEntry,
    CVData,
    PositionRecord,
    Skill,
    TextBlock,
)
from vitae.contexts.intake.exceptions import MissingColumnError, SpreadsheetFormatError
from vitae.contexts.intake.logger import _log_debug, _log_warning, log_table_loaded

POSITION_COLUMNS = ("section", "title", "loc", "institution", "start", "end")
SKILL_COLUMNS = ("skill", "level")
TEXT_BLOCK_COLUMNS = ("loc", "text")
CONTACT_COLUMNS = ("loc", "icon", "contact")

ABSENT_VALUES = {"", "na", "n/a", "null", "nan", "none"}
ONGOING_VALUES = {"present", "current", "ongoing", "now"}
TRUE_VALUES = {"true", "t", "yes", "y", "1"}
FALSE_VALUES = {"false", "f", "no", "n", "0"}

_YEAR_PATTERN = re.compile(r"(?<!\d)(\d{4})(?!\d)")
_DESCRIPTION_PATTERN = re.compile(r"^description_(\d+)$")


def clean_cell(value: Any) -> Optional[str]:
    """Return the stripped cell text, or None for blank-like values."""
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in ABSENT_VALUES:
        return None
    return text


def parse_year(value: Any, column: str = "year", row_number: int = 0) -> Optional[int]:
    """
    Extract a year from a cell.

    Accepts bare years and dates containing one ("2015", "2015-09", "Sept 2015").
    Blank-like and ongoing markers ("present", "current") give None.

    Raises:
        SpreadsheetFormatError: If a non-blank value contains no four-digit year
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    text = clean_cell(value)
    if text is None or text.lower() in ONGOING_VALUES:
        return None

    match = _YEAR_PATTERN.search(text)
    if match is None:
        raise SpreadsheetFormatError("No year found", column, row_number, text)
    return int(match.group(1))


def parse_bool(value: Any, column: str = "in_resume", row_number: int = 0, default: bool = True) -> bool:
    """
    Interpret a spreadsheet boolean (TRUE/FALSE, yes/no, 1/0).

    Raises:
        SpreadsheetFormatError: If the value is not a recognizable boolean
    """
    if isinstance(value, bool):
        return value

    text = clean_cell(value)
    if text is None:
        return default

    lowered = text.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise SpreadsheetFormatError("Not a boolean", column, row_number, text)


def description_columns(columns: Iterable[str]) -> List[str]:
    """Return description_<n> columns ordered by n (description_10 after description_2)."""
    numbered = []
    for column in columns:
        match = _DESCRIPTION_PATTERN.match(column)
        if match:
            numbered.append((int(match.group(1)), column))
    return [column for _, column in sorted(numbered)]


def check_columns(
    columns: Iterable[str],
    required: Sequence[str],
    table_name: str = "table",
    source: Optional[Path] = None,
) -> None:
    """
    Fail fast when required columns are absent.

    Raises:
        MissingColumnError: Listing every missing column
    """
    missing = set(required) - set(columns)
    if missing:
        raise MissingColumnError(missing, table_name=table_name, source=source)


def read_table(path: Path, required: Sequence[str] = (), table_name: str = "table") -> List[Dict[str, str]]:
    """
    Read a CSV table into a list of row dicts.

    Args:
        path: CSV file to read
        required: Columns that must appear in the header
        table_name: Name used in error and log messages

    Returns:
        Rows keyed by (stripped) column name

    Raises:
        FileNotFoundError: If the file doesn't exist
        MissingColumnError: If a required column is absent
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{table_name.capitalize()} table not found: {path}")

    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        fieldnames = [name.strip() for name in (reader.fieldnames or [])]
        check_columns(fieldnames, required, table_name=table_name, source=path)

        rows = []
        for raw in reader:
            rows.append({(key or "").strip(): value for key, value in raw.items()})

    log_table_loaded(table_name, path, len(rows))
    return rows


def _columns_of(rows: Sequence[Mapping[str, Any]]) -> List[str]:
    """Union of keys across rows, in first-seen order."""
    columns = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    return columns


def position_records_from_rows(rows: Sequence[Mapping[str, Any]]) -> List[PositionRecord]:
    """
    Convert positions table rows into PositionRecord instances.

    Args:
        rows: Row mappings (as returned by read_table)

    Returns:
        Records in input order

    Raises:
        MissingColumnError: If a required positions column is absent
        SpreadsheetFormatError: If a year or boolean cell can't be parsed
    """
    if not rows:
        return []

    columns = _columns_of(rows)
    check_columns(columns, POSITION_COLUMNS, table_name="positions")
    desc_columns = description_columns(columns)
    if not desc_columns:
        _log_debug("Positions table has no description columns")

    records = []
    for row_number, row in enumerate(rows, start=1):
        section = clean_cell(row.get("section"))
        if section is None:
            _log_warning(f"Skipping positions row {row_number}: no section")
            continue

        records.append(
            PositionRecord(
                section=section,
                title=clean_cell(row.get("title")),
                location=clean_cell(row.get("loc")),
                institution=clean_cell(row.get("institution")),
                start=parse_year(row.get("start"), "start", row_number),
                end=parse_year(row.get("end"), "end", row_number),
                descriptions=[clean_cell(row.get(column)) for column in desc_columns],
                include_in_resume=parse_bool(row.get("in_resume"), "in_resume", row_number),
            )
        )

    return records


def skills_from_rows(rows: Sequence[Mapping[str, Any]]) -> List[Skill]:
    """Convert skills table rows; rows without a skill name are skipped."""
    skills = []
    for row_number, row in enumerate(rows, start=1):
        name = clean_cell(row.get("skill"))
        if name is None:
            continue
        level_text = clean_cell(row.get("level"))
        try:
            level = float(level_text) if level_text is not None else 0.0
        except ValueError as e:
            raise SpreadsheetFormatError("Not a number", "level", row_number, level_text) from e
        skills.append(Skill(name=name, level=level))
    return skills


def text_blocks_from_rows(rows: Sequence[Mapping[str, Any]]) -> List[TextBlock]:
    """Convert text_blocks table rows."""
    return [
        TextBlock(label=clean_cell(row.get("loc")), text=clean_cell(row.get("text")) or "")
        for row in rows
        if clean_cell(row.get("loc")) is not None
    ]


def contact_entries_from_rows(rows: Sequence[Mapping[str, Any]]) -> List[ContactEntry]:
    """Convert contact_info table rows."""
    entries = []
    for row in rows:
        contact = clean_cell(row.get("contact"))
        if contact is None:
            continue
        entries.append(
            ContactEntry(
                label=clean_cell(row.get("loc")) or "",
                icon=clean_cell(row.get("icon")) or "",
                contact=contact,
            )
        )
    return entries


def load_cv_data(
    positions: Path,
    skills: Optional[Path] = None,
    text_blocks: Optional[Path] = None,
    contact_info: Optional[Path] = None,
) -> CVData:
    """
    Load every CV table.

    The positions table is mandatory; the others are optional and left empty
    when no path is given.

    Raises:
        FileNotFoundError: If a given table file doesn't exist
        MissingColumnError: If a table lacks required columns
        SpreadsheetFormatError: If a cell can't be parsed
    """
    data = CVData(
        positions=position_records_from_rows(read_table(positions, POSITION_COLUMNS, "positions"))
    )

    if skills is not None:
        data.skills = skills_from_rows(read_table(skills, SKILL_COLUMNS, "skills"))
    if text_blocks is not None:
        data.text_blocks = text_blocks_from_rows(
            read_table(text_blocks, TEXT_BLOCK_COLUMNS, "text_blocks")
        )
    if contact_info is not None:
        data.contact_info = contact_entries_from_rows(
            read_table(contact_info, CONTACT_COLUMNS, "contact_info")
        )

    return data

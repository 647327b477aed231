"""
Section Renderer

Turns the position records of one CV section into Markdown blocks, one per
record, most recent first. Each block reads:

    ### {title}

    {location}

    {institution}

    {timeline}

    {description bullets}

followed by a blank-line separator. The paged renderer styles these blocks
into the CV timeline, so the block structure is kept identical for every record.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from vitae.contexts.intake.cv_data_structures import PositionRecord
from vitae.contexts.intake.spreadsheet import position_records_from_rows
from vitae.contexts.templating.defaults import (
    BLOCK_SEPARATOR,
    DESCRIPTION_PLACEHOLDER,
    NA_SENTINEL,
    ONGOING_LABEL,
)
from vitae.contexts.templating.links import LinkCollector, sanitize_links
from vitae.contexts.templating.logger import _log_debug


@dataclass
class RenderedEntry:
    """
    Display-ready fields of one record. Built per render call and discarded.

    Attributes:
        title: Heading text (sentinel when absent)
        location: Location line (sentinel when absent)
        institution: Institution line (sentinel when absent)
        timeline: "2020 - 2015", "2022", "Present - 2019" or sentinel
        descriptions: Non-empty, link-free descriptions in column order
        description_block: Bulleted descriptions, or the placeholder line
    """

    title: str
    location: str
    institution: str
    timeline: str
    descriptions: List[str] = field(default_factory=list)
    description_block: str = DESCRIPTION_PLACEHOLDER


RecordsInput = Union[Sequence[PositionRecord], Sequence[Mapping[str, Any]]]
BlockFormatter = Callable[[RenderedEntry], str]


def sort_most_recent_first(records: Sequence[PositionRecord]) -> List[PositionRecord]:
    """
    Order records by end year descending, ongoing (no end year) first.

    Python's sort is stable, so records sharing an end year keep input order.
    """
    return sorted(records, key=lambda r: (r.end is not None, -(r.end or 0)))


def format_timeline(start: Optional[int], end: Optional[int]) -> str:
    """
    Build the end-first timeline string.

    Examples:
        >>> format_timeline(2015, 2020)
        '2020 - 2015'
        >>> format_timeline(None, 2022)
        '2022'
        >>> format_timeline(2019, None)
        'Present - 2019'
    """
    if start is None and end is None:
        return NA_SENTINEL

    end_label = str(end) if end is not None else ONGOING_LABEL
    if start is None or start == end:
        return end_label
    return f"{end_label} - {start}"


def format_description_block(descriptions: Sequence[str]) -> str:
    """One "- " bullet per description; the placeholder line when there are none."""
    if not descriptions:
        return DESCRIPTION_PLACEHOLDER
    return "\n".join(f"- {description}" for description in descriptions)


def build_entry(record: PositionRecord, links: Optional[LinkCollector] = None) -> RenderedEntry:
    """
    Derive the display fields of a record.

    Args:
        record: Source record
        links: Collector for PDF export; None drops link URLs

    Returns:
        RenderedEntry with sentinels substituted and links removed
    """
    # Title first so footnote numbers follow reading order
    title = sanitize_links(record.title, links)

    descriptions = []
    for description in record.descriptions:
        if description is None:
            continue
        # A bare link with no display text leaves nothing to show
        description = (sanitize_links(description, links) or "").strip()
        if description:
            descriptions.append(description)

    return RenderedEntry(
        title=title or NA_SENTINEL,
        location=record.location or NA_SENTINEL,
        institution=record.institution or NA_SENTINEL,
        timeline=format_timeline(record.start, record.end),
        descriptions=descriptions,
        description_block=format_description_block(descriptions),
    )


def format_block(entry: RenderedEntry) -> str:
    """Assemble the Markdown block for one entry, trailing separator included."""
    parts = [
        f"### {entry.title}",
        entry.location,
        entry.institution,
        entry.timeline,
        entry.description_block,
    ]
    return "\n\n".join(parts) + BLOCK_SEPARATOR


def render_section(
    records: RecordsInput,
    section_id: str,
    links: Optional[LinkCollector] = None,
    formatter: BlockFormatter = format_block,
) -> List[str]:
    """
    Render one section as a list of Markdown blocks, most recent first.

    Args:
        records: PositionRecord instances, or raw positions table rows
        section_id: Section to print (e.g. "education")
        links: Collector receiving URLs in PDF-export mode; None drops them
        formatter: Turns a RenderedEntry into a block (default: format_block)

    Returns:
        One block per matching record. Empty when no record matches.

    Raises:
        MissingColumnError: If raw rows lack a required positions column
    """
    if records and isinstance(records[0], Mapping):
        records = position_records_from_rows(records)

    matching = [record for record in records if record.section == section_id]
    _log_debug(f"Section '{section_id}': {len(matching)} of {len(records)} records")

    return [formatter(build_entry(record, links)) for record in sort_most_recent_first(matching)]


def render_section_text(
    records: RecordsInput,
    section_id: str,
    links: Optional[LinkCollector] = None,
    formatter: BlockFormatter = format_block,
) -> str:
    """Same as render_section, with the blocks joined into one string."""
    return "".join(render_section(records, section_id, links=links, formatter=formatter))

"""
CV Data Structures

Defines data classes for the rows of each spreadsheet table: positions, skills,
text blocks and contact entries. Produced by the intake context and consumed by
the templating context.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PositionRecord:
    """
    One position/activity row from the positions table.

    Attributes:
        section: Category key (e.g. "education", "industry_positions")
        title: Position title, None when the cell was blank
        location: Where the position was held (``loc`` column)
        institution: Employer or school
        start: Start year, None when absent
        end: End year, None when absent (ongoing)
        descriptions: Ordered description cells (description_1..description_N).
            Blank cells are kept as None so the column order is preserved.
        include_in_resume: Whether the row is kept in the shorter resume variant
    """

    section: str
    title: Optional[str] = None
    location: Optional[str] = None
    institution: Optional[str] = None
    start: Optional[int] = None
    end: Optional[int] = None
    descriptions: List[Optional[str]] = field(default_factory=list)
    include_in_resume: bool = True


@dataclass
class Skill:
    """A skill and its self-assessed level (skills table)."""

    name: str
    level: float


@dataclass
class TextBlock:
    """Free text addressed by a label (text_blocks table, ``loc`` column)."""

    label: str
    text: str


@dataclass
class ContactEntry:
    """
    One line of contact information.

    Attributes:
        label: Row key (``loc`` column), e.g. "email"
        icon: Font Awesome icon name, passed through untouched
        contact: Display text
    """

    label: str
    icon: str
    contact: str


@dataclass
class CVData:
    """All tables needed to print one CV."""

    positions: List[PositionRecord] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    text_blocks: List[TextBlock] = field(default_factory=list)
    contact_info: List[ContactEntry] = field(default_factory=list)

    def section_ids(self) -> List[str]:
        """Distinct section ids in first-seen order."""
        seen = []
        for record in self.positions:
            if record.section not in seen:
                seen.append(record.section)
        return seen

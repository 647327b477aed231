"""
VITAE - Versioned Individual Timeline Assembly Engine

Builds CV and resume documents from a handful of spreadsheets. Rows describing
positions, skills, text blocks and contact details are turned into templated
Markdown consumed by a paged HTML/PDF renderer.

Architecture:
- Intake Context: Spreadsheet ingestion and row validation
- Templating Context: Section rendering, link handling and document assembly
"""

__version__ = "0.1.0"

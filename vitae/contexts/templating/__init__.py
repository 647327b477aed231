"""
Templating Context

Responsibilities:
- Renders CV sections as reverse-chronological Markdown blocks
- Strips inline links, or defers them to numbered footnotes for PDF export
- Formats skill bars, contact info and text blocks
- Resolves CV configs and assembles whole documents from Jinja2 templates

Owns: Record-to-markup conversion, document templates, CV config
Never: Reads spreadsheets directly or invokes the paged HTML/PDF renderer
"""

from vitae.contexts.templating.config_resolver import load_cv_config
from vitae.contexts.templating.document_builder import (
    BuildResult,
    RenderedDocument,
    build_cv,
    render_document,
)
from vitae.contexts.templating.links import LinkCollector, sanitize_links
from vitae.contexts.templating.printer import CVPrinter
from vitae.contexts.templating.section_renderer import (
    RenderedEntry,
    render_section,
    render_section_text,
)
from vitae.contexts.templating.skill_bars import skill_bar

__all__ = [
    # Core section rendering
    "render_section",
    "render_section_text",
    "RenderedEntry",
    # Links
    "LinkCollector",
    "sanitize_links",
    # Document pieces
    "CVPrinter",
    "skill_bar",
    # Orchestration
    "load_cv_config",
    "build_cv",
    "render_document",
    "BuildResult",
    "RenderedDocument",
]

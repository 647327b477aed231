"""
Document Builder

Orchestrates a full build: config -> spreadsheet tables -> Markdown document.

The paged HTML/PDF renderer that consumes the Markdown is external; this module
stops once the document is written.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from omegaconf import DictConfig

from vitae.contexts.intake.cv_data_structures import CVData
from vitae.contexts.intake.spreadsheet import load_cv_data
from vitae.contexts.templating.config_resolver import load_cv_config
from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.logger import (
    _log_debug,
    _log_info,
    log_build_result,
    log_build_start,
    setup_templating_logger,
)
from vitae.contexts.templating.printer import CVPrinter
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.utils.timestamp import today


@dataclass
class RenderedDocument:
    """Markdown for one document plus what went into it."""

    markdown: str
    section_counts: Dict[str, int] = field(default_factory=dict)
    link_count: int = 0


@dataclass
class BuildResult:
    """Result from build_cv() orchestration function."""

    success: bool
    config_path: Optional[Path] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None
    section_counts: Dict[str, int] = field(default_factory=dict)
    link_count: int = 0


def load_data_from_config(config: DictConfig) -> CVData:
    """Load the tables named in config.data (optional tables may be null)."""
    tables = config.data
    return load_cv_data(
        positions=Path(tables.positions),
        skills=Path(tables.skills) if tables.skills else None,
        text_blocks=Path(tables.text_blocks) if tables.text_blocks else None,
        contact_info=Path(tables.contact_info) if tables.contact_info else None,
    )


def _section_attributes(icon: Optional[str]) -> str:
    return f" {{data-icon={icon}}}" if icon else ""


def render_document(
    config: DictConfig,
    data: CVData,
    registry: Optional[TemplateRegistry] = None,
) -> RenderedDocument:
    """
    Render the whole document for a loaded config and data.

    Pieces are printed in reading order (contact, skills, aside, intro,
    sections) so that footnote numbers in PDF export follow the page. The link
    list comes last.

    Args:
        config: Merged CV config (see config_resolver.load_cv_config)
        data: Loaded CV tables
        registry: Template registry (defaults to the packaged templates)

    Returns:
        RenderedDocument with markdown and per-section entry counts

    Raises:
        TemplateNotFound: If the configured template doesn't exist
        TemplateRenderError: If the template fails to render
    """
    registry = registry or TemplateRegistry()
    document = config.document
    printer = CVPrinter(data, pdf_export=document.pdf_export, resume_only=document.resume_only)

    bars = config.skill_bars
    contact_info = printer.print_contact_info()
    skill_bar_lines = printer.print_skill_bars(
        out_of=bars.out_of, bar_color=bars.bar_color, bar_background=bars.bar_background
    )
    aside = printer.print_text_block(document.aside_text_block) if document.aside_text_block else ""
    intro = printer.print_text_block(document.intro_text_block) if document.intro_text_block else ""

    sections: List[Dict[str, str]] = []
    section_counts: Dict[str, int] = {}
    for section in document.sections:
        blocks = printer.section_blocks(section.id, section.get("glue_template"))
        section_counts[section.id] = len(blocks)
        if not blocks:
            continue
        sections.append(
            {
                "heading": section.get("heading") or section.id,
                "attributes": _section_attributes(section.get("icon")),
                "body": "".join(blocks),
            }
        )

    markdown = registry.render(
        document.template,
        name=document.name,
        title=document.title or document.name,
        last_updated=today(),
        contact_info=contact_info,
        skill_bars=skill_bar_lines,
        aside=aside,
        intro=intro,
        sections=sections,
        links=printer.print_links(),
    )

    return RenderedDocument(
        markdown=markdown,
        section_counts=section_counts,
        link_count=len(printer.links) if printer.pdf_export else 0,
    )


def build_cv(
    config_path: Path,
    output_path: Optional[Path] = None,
    overrides: List[str] = None,
    log_dir: Optional[Path] = None,
    registry: Optional[TemplateRegistry] = None,
) -> BuildResult:
    """
    Build a CV document from a config file, with logging.

    Expected failures (missing files or columns, unparseable cells, bad config,
    template errors) are logged and reported in the result rather than raised.

    Args:
        config_path: CV config YAML
        output_path: Markdown destination (default: config path with .md suffix)
        overrides: Dotted config overrides, e.g. ["document.pdf_export=true"]
        log_dir: Directory for a session log file. None keeps loguru's current sinks.
        registry: Template registry (defaults to the packaged templates)

    Returns:
        BuildResult with success status, output path, entry counts and timing
    """
    start_time = time.time()
    config_path = Path(config_path)
    output_path = Path(output_path) if output_path else config_path.with_suffix(".md")

    log_file = setup_templating_logger(log_dir, config_path) if log_dir else None
    log_build_start(config_path.stem, config_path, log_file)

    try:
        config = load_cv_config(config_path, overrides)
        _log_debug(f"PDF export: {config.document.pdf_export}, resume only: {config.document.resume_only}")

        data = load_data_from_config(config)
        _log_info(f"Loaded {len(data.positions)} positions across {len(data.section_ids())} sections")

        rendered = render_document(config, data, registry)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered.markdown, encoding="utf-8")

        result = BuildResult(
            success=True,
            config_path=config_path,
            output_path=output_path,
            time_s=time.time() - start_time,
            log_dir=log_dir,
            section_counts=rendered.section_counts,
            link_count=rendered.link_count,
        )
    except (OSError, ValueError, TemplateRenderError) as e:
        result = BuildResult(
            success=False,
            config_path=config_path,
            error=str(e),
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )

    log_build_result(config_path.stem, result, result.time_s)
    return result

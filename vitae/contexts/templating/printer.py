"""
CV Printer

Document-scoped facade over the loaded CV tables. One printer is created per
document build; in PDF-export mode it owns the LinkCollector that numbers every
link stripped from the document, so ``print_links()`` belongs at the end.
"""

from dataclasses import replace
from typing import List, Optional

from jinja2.exceptions import TemplateError

from vitae.contexts.intake.cv_data_structures import CVData
from vitae.contexts.templating.defaults import DEFAULT_SKILL_BARS
from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.links import LinkCollector, sanitize_links
from vitae.contexts.templating.logger import _log_debug, _log_warning
from vitae.contexts.templating.registries import compile_glue_template
from vitae.contexts.templating.section_renderer import RenderedEntry, format_block, render_section
from vitae.contexts.templating.skill_bars import skill_bars

RULE = "-" * 80


class CVPrinter:
    """
    Prints the pieces of a CV document from CVData.

    Attributes:
        data: Loaded CV tables
        pdf_export: Defer links to a numbered list instead of dropping them
        resume_only: Keep only positions flagged for the resume
        links: Links collected so far (PDF export only)
    """

    def __init__(self, data: CVData, pdf_export: bool = False, resume_only: bool = False):
        self.data = data
        self.pdf_export = pdf_export
        self.resume_only = resume_only
        self.links = LinkCollector()

    @property
    def _collector(self) -> Optional[LinkCollector]:
        return self.links if self.pdf_export else None

    def positions(self):
        """Positions visible in this document (resume filter applied)."""
        if self.resume_only:
            return [record for record in self.data.positions if record.include_in_resume]
        return list(self.data.positions)

    def section_blocks(self, section_id: str, glue_template: Optional[str] = None) -> List[str]:
        """
        Rendered blocks of one section.

        Args:
            section_id: Section to print
            glue_template: Optional Jinja2 template replacing the default block
                layout; sees the RenderedEntry fields

        Returns:
            Blocks, most recent first (empty for unknown sections)
        """
        if glue_template is None:
            formatter = format_block
        else:
            template = compile_glue_template(glue_template)

            def formatter(entry: RenderedEntry) -> str:
                try:
                    return template.render(**vars(entry))
                except TemplateError as e:
                    raise TemplateRenderError(
                        f"Glue template failed for section '{section_id}'", original_error=e
                    ) from e

        blocks = render_section(self.positions(), section_id, links=self._collector, formatter=formatter)
        if not blocks:
            _log_warning(f"No entries for section '{section_id}'")
        return blocks

    def print_section(self, section_id: str, glue_template: Optional[str] = None) -> str:
        """Section blocks joined into one Markdown string."""
        return "".join(self.section_blocks(section_id, glue_template))

    def print_text_block(self, label: str) -> str:
        """Text of the block with the given label; empty string if there is none."""
        for block in self.data.text_blocks:
            if block.label == label:
                return sanitize_links(block.text, self._collector)
        _log_warning(f"No text block labelled '{label}'")
        return ""

    def print_skill_bars(
        self,
        out_of: float = DEFAULT_SKILL_BARS["out_of"],
        bar_color: str = DEFAULT_SKILL_BARS["bar_color"],
        bar_background: str = DEFAULT_SKILL_BARS["bar_background"],
    ) -> str:
        """One skill bar per line."""
        skills = [
            replace(skill, name=sanitize_links(skill.name, self._collector)) for skill in self.data.skills
        ]
        bars = skill_bars(skills, out_of=out_of, bar_color=bar_color, bar_background=bar_background)
        return "\n".join(bars)

    def print_contact_info(self) -> str:
        """Contact entries as a Markdown list with Font Awesome icons."""
        return "\n".join(
            f"- <i class='fa fa-{entry.icon}'></i> {sanitize_links(entry.contact, self._collector)}"
            for entry in self.data.contact_info
        )

    def print_links(self) -> str:
        """
        Numbered list of links deferred during PDF export.

        Empty unless pdf_export is on and at least one link was collected.
        """
        if not self.pdf_export or not self.links.urls:
            return ""

        _log_debug(f"Printing {len(self.links)} deferred links")
        lines = ["Links {data-icon=link}", RULE, "", "<br>", ""]
        lines.extend(f"{number}. {url}" for number, url in enumerate(self.links.urls, start=1))
        return "\n".join(lines) + "\n"

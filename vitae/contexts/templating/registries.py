"""
Templating Registries

Registry for loading and caching the Jinja2 templates that assemble whole
documents, plus compilation of user-supplied glue templates for section blocks.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from jinja2.exceptions import TemplateError

from vitae.contexts.templating.exceptions import TemplateRenderError

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("VITAE_TEMPLATES_PATH", Path(__file__).parent / "templates"))

TEMPLATE_SUFFIX = ".md.jinja"


def _make_environment(loader=None) -> Environment:
    """
    Jinja2 environment with delimiters that don't collide with Markdown.

    Pandoc attributes such as ``{#contact}`` would otherwise open a Jinja comment.
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """
    return Environment(
        loader=loader,
        # Catches silent failures
        undefined=StrictUndefined,
        variable_start_string="<<<",
        variable_end_string=">>>",
        block_start_string="<%%",
        block_end_string="%%>",
        comment_start_string="<#",
        comment_end_string="#>",
        # Blank lines are significant in Markdown
        trim_blocks=True,
        lstrip_blocks=False,
        keep_trailing_newline=True,
    )


class TemplateRegistry:
    """
    Registry for loading and caching document templates.

    Templates are stored as {templates_path}/{name}.md.jinja.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding templates. Defaults to
                           VITAE_TEMPLATES_PATH from environment, falling back
                           to the templates shipped with the package
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}
        self.env = _make_environment(FileSystemLoader(str(self.templates_path)))

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without suffix (e.g., 'cv')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(f"{name}{TEMPLATE_SUFFIX}")
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.get_template_path(name)}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a named template."""
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def render(self, name: str, /, **context) -> str:
        """
        Render a named template.

        ``name`` is positional-only so templates may use a ``name`` variable.

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateRenderError: If rendering fails (e.g., undefined variable)
        """
        template = self.get_template(name)
        try:
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render document template",
                template_name=name,
                template_path=self.get_template_path(name),
                original_error=e,
            ) from e

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template is in the cache."""
        return name in self._cache


def compile_glue_template(source: str) -> Template:
    """
    Compile a user glue template for section blocks.

    The template sees the RenderedEntry fields: title, location, institution,
    timeline, descriptions and description_block.

    Raises:
        TemplateRenderError: If the source has Jinja2 syntax errors
    """
    try:
        return _make_environment().from_string(source)
    except TemplateError as e:
        raise TemplateRenderError("Invalid glue template", original_error=e) from e

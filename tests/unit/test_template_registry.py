"""Unit tests for TemplateRegistry class and glue templates."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.registries import TemplateRegistry, compile_glue_template


def _document_context(**overrides):
    context = {
        "name": "Nick Example",
        "title": "Nick Example's CV",
        "last_updated": "October 2026",
        "contact_info": "- <i class='fa fa-envelope'></i> nick@example.com",
        "skill_bars": "",
        "aside": "",
        "intro": "Hello.",
        "sections": [
            {"heading": "Education", "attributes": " {data-icon=graduation-cap}", "body": "### PhD\n\n"}
        ],
        "links": "",
    }
    context.update(overrides)
    return context


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("cv")
    assert registry.is_cached("cv")

    template2 = registry.get_template("cv")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent")


@pytest.mark.unit
def test_get_template_path():
    registry = TemplateRegistry()
    path = registry.get_template_path("resume")

    assert isinstance(path, Path)
    assert path.name == "resume.md.jinja"


@pytest.mark.unit
def test_clear_cache():
    registry = TemplateRegistry()

    registry.get_template("cv")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_render_cv_template():
    """Pandoc attributes like {#contact} survive (no clash with Jinja comments)."""
    registry = TemplateRegistry()

    result = registry.render("cv", **_document_context())

    assert "Contact {#contact}" in result
    assert "Nick Example {#title}" in result
    assert "Education {data-icon=graduation-cap}" in result
    assert "### PhD" in result
    # Empty skill bars section is left out
    assert "{#skills}" not in result


@pytest.mark.unit
def test_render_missing_variable_raises():
    registry = TemplateRegistry()
    context = _document_context()
    del context["sections"]

    with pytest.raises(TemplateRenderError):
        registry.render("cv", **context)


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    (tmp_path / "plain.md.jinja").write_text("# <<< name >>>\n")
    registry = TemplateRegistry(tmp_path)

    assert registry.render("plain", name="Ada") == "# Ada\n"


@pytest.mark.unit
def test_glue_template_uses_custom_delimiters():
    template = compile_glue_template("**<<< title >>>** {.entry}\n")

    assert template.render(title="PhD") == "**PhD** {.entry}\n"


@pytest.mark.unit
def test_invalid_glue_template():
    with pytest.raises(TemplateRenderError):
        compile_glue_template("<%% if %%>")


@pytest.mark.unit
def test_name_context_variable_does_not_clash_with_template_name():
    registry = TemplateRegistry()

    result = registry.render("resume", **_document_context(name="Ada Lovelace"))

    assert 'author: "Ada Lovelace"' in result
    assert "Ada Lovelace {#title}" in result

"""
Integration tests for whole-document builds.
Tests: config + fixture CSVs -> Markdown document on disk.
"""

from pathlib import Path

import pytest
from loguru import logger

from vitae.contexts.templating.config_resolver import load_cv_config
from vitae.contexts.templating.document_builder import (
    build_cv,
    load_data_from_config,
    render_document,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(autouse=True)
def _clear_pdf_export(monkeypatch):
    monkeypatch.delenv("PDF_EXPORT", raising=False)


@pytest.mark.integration
def test_build_cv_writes_document(tmp_path):
    output = tmp_path / "cv.md"

    result = build_cv(FIXTURES_PATH / "cv_config.yaml", output_path=output)

    assert result.success, result.error
    assert result.output_path == output
    assert result.section_counts == {
        "education": 2,
        "industry_positions": 2,
        "research_positions": 2,
        "teaching_positions": 0,
    }

    markdown = output.read_text(encoding="utf-8")
    assert 'title: "Nick Example\'s CV"' in markdown
    assert "Education {data-icon=graduation-cap}" in markdown
    assert "### PhD Candidate" in markdown
    assert "Teaching Experience" not in markdown
    assert "](" not in markdown
    assert "Links {data-icon=link}" not in markdown


@pytest.mark.integration
def test_sections_follow_config_order(tmp_path):
    result = build_cv(FIXTURES_PATH / "cv_config.yaml", output_path=tmp_path / "cv.md")
    markdown = result.output_path.read_text(encoding="utf-8")

    education = markdown.index("Education {data-icon")
    industry = markdown.index("Industry Experience {data-icon")
    research = markdown.index("Research Experience {data-icon")
    assert education < industry < research


@pytest.mark.integration
def test_pdf_export_build(tmp_path):
    result = build_cv(
        FIXTURES_PATH / "cv_config.yaml",
        output_path=tmp_path / "cv.md",
        overrides=["document.pdf_export=true"],
    )

    assert result.success, result.error
    markdown = result.output_path.read_text(encoding="utf-8")

    # aside, intro, education, industry, research in reading order
    assert result.link_count == 5
    assert "pagedown<sup>1</sup>" in markdown
    assert "GitHub<sup>2</sup>" in markdown
    assert "Links {data-icon=link}" in markdown
    assert "5. https://example.com/causal" in markdown
    assert markdown.rstrip().endswith("5. https://example.com/causal")


@pytest.mark.integration
def test_resume_build(tmp_path):
    result = build_cv(
        FIXTURES_PATH / "cv_config.yaml",
        output_path=tmp_path / "resume.md",
        overrides=["document.resume_only=true", "document.template=resume"],
    )

    assert result.success, result.error
    assert result.section_counts["industry_positions"] == 1
    assert result.section_counts["research_positions"] == 1
    markdown = result.output_path.read_text(encoding="utf-8")
    assert "Data Scientist" not in markdown
    assert "Last updated" not in markdown


@pytest.mark.integration
def test_missing_column_reported(tmp_path):
    result = build_cv(FIXTURES_PATH / "broken_cv_config.yaml", output_path=tmp_path / "cv.md")

    assert not result.success
    assert "institution" in result.error
    assert not (tmp_path / "cv.md").exists()


@pytest.mark.integration
def test_unknown_template_reported(tmp_path):
    result = build_cv(
        FIXTURES_PATH / "cv_config.yaml",
        output_path=tmp_path / "cv.md",
        overrides=["document.template=fancy"],
    )

    assert not result.success
    assert "fancy" in result.error


@pytest.mark.integration
def test_build_with_log_dir(tmp_path):
    log_dir = tmp_path / "logs"

    result = build_cv(
        FIXTURES_PATH / "cv_config.yaml", output_path=tmp_path / "cv.md", log_dir=log_dir
    )

    assert result.success, result.error
    logger.remove()

    log_text = (log_dir / "template.log").read_text()
    assert "[template] Starting to build cv_config" in log_text
    assert "[intake] Loaded positions table: 6 rows" in log_text


@pytest.mark.integration
def test_render_document_without_optional_tables():
    config = load_cv_config(
        FIXTURES_PATH / "cv_config.yaml",
        ["data.skills=null", "data.text_blocks=null", "data.contact_info=null"],
    )
    data = load_data_from_config(config)

    rendered = render_document(config, data)

    assert "{#contact}" not in rendered.markdown
    assert "{#skills}" not in rendered.markdown
    assert "### PhD Candidate" in rendered.markdown


@pytest.mark.integration
def test_unparseable_config_reported(tmp_path):
    config_path = tmp_path / "cv.yaml"
    config_path.write_text("data:\n  positions: [unclosed\n")

    result = build_cv(config_path, output_path=tmp_path / "cv.md")

    assert not result.success
    assert "Could not parse config" in result.error
    assert not (tmp_path / "cv.md").exists()

"""Unit tests for CV config loading and overrides."""

from pathlib import Path

import pytest

from vitae.contexts.templating.config_resolver import load_cv_config, pdf_export_from_env
from vitae.contexts.templating.exceptions import InvalidConfigError

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(autouse=True)
def _clear_pdf_export(monkeypatch):
    monkeypatch.delenv("PDF_EXPORT", raising=False)


@pytest.mark.unit
def test_defaults_fill_missing_keys():
    config = load_cv_config(FIXTURES_PATH / "broken_cv_config.yaml")

    assert config.document.template == "cv"
    assert config.document.pdf_export is False
    assert config.document.resume_only is False
    assert config.skill_bars.out_of == 5
    assert config.data.skills is None
    assert [section.id for section in config.document.sections] == [
        "education",
        "industry_positions",
        "research_positions",
    ]


@pytest.mark.unit
def test_table_paths_resolved_against_config_dir():
    config = load_cv_config(FIXTURES_PATH / "cv_config.yaml")

    assert Path(config.data.positions) == FIXTURES_PATH / "positions.csv"


@pytest.mark.unit
def test_env_sets_pdf_export(monkeypatch):
    monkeypatch.setenv("PDF_EXPORT", "true")

    config = load_cv_config(FIXTURES_PATH / "cv_config.yaml")

    assert config.document.pdf_export is True


@pytest.mark.unit
def test_overrides_beat_env(monkeypatch):
    monkeypatch.setenv("PDF_EXPORT", "true")

    config = load_cv_config(
        FIXTURES_PATH / "cv_config.yaml",
        ["document.pdf_export=false", "document.resume_only=true"],
    )

    assert config.document.pdf_export is False
    assert config.document.resume_only is True


@pytest.mark.unit
@pytest.mark.parametrize("value, expected", [("1", True), ("yes", True), ("false", False), ("", None)])
def test_pdf_export_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("PDF_EXPORT", value)
    assert pdf_export_from_env() is expected


@pytest.mark.unit
def test_missing_config_file():
    with pytest.raises(FileNotFoundError):
        load_cv_config(FIXTURES_PATH / "nope.yaml")


@pytest.mark.unit
def test_positions_required(tmp_path):
    config_path = tmp_path / "cv.yaml"
    config_path.write_text("document:\n  name: Someone\n")

    with pytest.raises(InvalidConfigError):
        load_cv_config(config_path)


@pytest.mark.unit
def test_section_without_id_rejected(tmp_path):
    config_path = tmp_path / "cv.yaml"
    config_path.write_text(
        "data:\n  positions: positions.csv\ndocument:\n  sections:\n    - heading: Education\n"
    )

    with pytest.raises(InvalidConfigError):
        load_cv_config(config_path)


@pytest.mark.unit
def test_yaml_syntax_error_is_invalid_config(tmp_path):
    config_path = tmp_path / "cv.yaml"
    config_path.write_text("data:\n  positions: [unclosed\n")

    with pytest.raises(InvalidConfigError, match="Could not parse config"):
        load_cv_config(config_path)

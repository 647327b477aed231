"""
CV Config Resolution

Loads a CV config YAML and merges it over the defaults. Precedence, lowest to
highest: defaults.py, the config file, the PDF_EXPORT environment variable,
explicit dotted overrides.

Examples:
    >>> config = load_cv_config(Path("cv_config.yaml"))
    >>> config = load_cv_config(Path("cv_config.yaml"), ["document.resume_only=true"])
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import DictConfig, ListConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.templating.defaults import get_default_config
from vitae.contexts.templating.exceptions import InvalidConfigError

load_dotenv()

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def pdf_export_from_env() -> Optional[bool]:
    """Read the PDF_EXPORT environment variable; None when unset."""
    value = os.getenv("PDF_EXPORT")
    if value is None or not value.strip():
        return None
    return value.strip().lower() in _TRUE_STRINGS


def resolve_data_paths(config: DictConfig, base_dir: Path) -> None:
    """Make relative table paths relative to the config file's directory (in place)."""
    for table, value in list(config.data.items()):
        if value is None:
            continue
        path = Path(value)
        if not path.is_absolute():
            path = base_dir / path
        config.data[table] = str(path)


def validate_config(config: DictConfig) -> None:
    """
    Check the merged config has what a build needs.

    Raises:
        InvalidConfigError: If positions table is unset or sections are malformed
    """
    if not config.data.positions:
        raise InvalidConfigError("Config must set data.positions (path to positions CSV)")

    sections = config.document.sections
    if not isinstance(sections, ListConfig):
        raise InvalidConfigError("document.sections must be a list")
    for index, section in enumerate(sections):
        if not isinstance(section, DictConfig) or not section.get("id"):
            raise InvalidConfigError(f"document.sections[{index}] must have an 'id'")

    if config.skill_bars.out_of <= 0:
        raise InvalidConfigError("skill_bars.out_of must be positive")


def load_cv_config(config_path: Path, overrides: List[str] = None) -> DictConfig:
    """
    Load a CV config file merged over the defaults.

    Args:
        config_path: YAML config file
        overrides: Dotted overrides, e.g. ["document.pdf_export=true"]

    Returns:
        Merged DictConfig with absolute table paths

    Raises:
        FileNotFoundError: If the config file doesn't exist
        InvalidConfigError: If the YAML is unreadable, or required values are
            missing or malformed
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    try:
        config = OmegaConf.merge(
            OmegaConf.create(get_default_config()),
            OmegaConf.load(config_path),
        )
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise InvalidConfigError(f"Could not parse config {config_path}: {e}") from e

    env_pdf_export = pdf_export_from_env()
    if env_pdf_export is not None:
        config.document.pdf_export = env_pdf_export

    if overrides:
        config = OmegaConf.merge(config, OmegaConf.from_dotlist(list(overrides)))

    resolve_data_paths(config, config_path.parent)
    validate_config(config)
    return config

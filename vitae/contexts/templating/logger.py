"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, config_path: Path = None) -> Path:
    """
    Setup logger for templating context.

    Configures loguru with provenance tracking and templating-specific context.

    Args:
        log_dir: Directory for this build session
        config_path: CV config being built, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from vitae.contexts.templating.logger import setup_templating_logger, _log_info

        log_file = setup_templating_logger(log_dir, config_path)
        _log_info("Starting build...")
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Config": config_path} if config_path else None,
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_build_start(document_name: str, config_path: Path, log_file: Path = None) -> None:
    """Log start of a document build."""
    _log_info(f"Starting to build {document_name}")
    if log_file:
        _log_info(f"Log file: {log_file}")
    _log_debug(f"Config: {config_path}")


def log_build_result(document_name: str, result, elapsed_time: float) -> None:
    """
    Log build result with section details.

    Args:
        document_name: Document identifier
        result: BuildResult from build_cv()
        elapsed_time: Time taken
    """
    if result.success:
        for section_id, count in result.section_counts.items():
            _log_debug(f"  {section_id}: {count} entries")
        if result.link_count:
            _log_info(f"  Deferred links: {result.link_count}")
        _log_success(f"{document_name}: build succeeded ({elapsed_time:.2f}s)")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to build {document_name} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")

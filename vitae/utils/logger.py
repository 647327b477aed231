"""
Session logging for VITAE builds.

One call to ``setup_logger`` points loguru at a per-build log file (everything
from DEBUG up) and at the terminal (INFO and up), then writes a header saying
how the build was invoked. The intake and templating contexts wrap loguru with
their own prefixes in their ``logger.py`` modules.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from vitae.utils.timestamp import session_stamp

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def default_log_dir(context_name: str) -> Path:
    """Session directory under VITAE_LOGS_PATH, e.g. outs/logs/build_20261019_142501."""
    return LOGS_PATH / f"{context_name}_{session_stamp()}"


def setup_logger(context_name: str, log_dir: Path, extra_provenance: dict = None) -> Path:
    """
    Send loguru output to ``{log_dir}/{context_name}.log`` and to stdout.

    Existing sinks are removed first, so the last call wins.

    Args:
        context_name: Names the log file ("template" -> template.log)
        log_dir: Build session directory, created if missing
        extra_provenance: Extra "key: value" lines for the header, such as
            the config being built

    Returns:
        Path of the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.level("WARNING", color="<yellow>")
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write a header recording the command line, directory and interpreter."""
    rule = "=" * 80
    logger.info(rule)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")
    logger.info(rule)

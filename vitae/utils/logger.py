"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers are defined in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from vitae.utils.timestamp import now

load_dotenv()

LOG_LEVEL = os.getenv("VITAE_LOG_LEVEL", "WARNING").upper()
LOG_DIR = os.getenv("VITAE_LOG_DIR")

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    console_level: str = LOG_LEVEL,
    extra_provenance: dict = None,
) -> Optional[Path]:
    """
    Configure loguru for a vitae run.

    Console output goes to stderr so that prompts written to stdout stay
    readable. A DEBUG file sink is added only when a log directory is given
    (default: VITAE_LOG_DIR env variable), keeping the working directory
    free of anything but resume.pdf otherwise.

    Args:
        context_name: Prefix for the log file name (e.g., "vitae")
        log_dir: Directory for the session log file (None = console only)
        console_level: Minimum level printed to stderr
        extra_provenance: Additional key-value pairs for provenance header

    Returns:
        Path to log file, or None when only console logging is active

    Example:
        from vitae.utils.logger import setup_logger

        log_file = setup_logger("vitae", log_dir=Path("outs/logs"))
    """
    if log_dir is None and LOG_DIR:
        log_dir = Path(LOG_DIR)

    # Remove default logger
    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(
        sys.stderr,
        format="<level>{level: <7}</level> | <level>{message}</level>",
        level=console_level,
        colorize=True,
    )

    if log_dir is None:
        return None

    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}_{now()}.log"

    # File handler captures everything (DEBUG level)
    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided. Written at DEBUG so it only lands in
    the session log file.
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)

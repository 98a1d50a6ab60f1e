"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_field_rejected(prompt: str, value: str) -> None:
    """Log an answer that failed its field pattern."""
    _log_debug(f"Rejected answer for {prompt!r}: {value!r}")


def log_collection_start(num_prompts: int) -> None:
    """Log start of the prompt session."""
    _log_info(f"Collecting resume details ({num_prompts} prompts)")


def log_collection_result(resume) -> None:
    """
    Log the assembled resume.

    Args:
        resume: Resume from create_resume()
    """
    _log_info(
        f"Collected resume for {resume.personal_info.name!r}: "
        f"{len(resume.education)} education, {len(resume.experience)} experience entries"
    )
    _log_debug(f"  Record: {resume.to_dict()}")

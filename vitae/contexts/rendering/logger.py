"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(resume_name: str, output_path: Path, num_placements: int) -> None:
    """Log start of rendering with context."""
    _log_info(f"Rendering resume: {resume_name}")
    _log_debug(f"  Output: {output_path}")
    _log_debug(f"  Text placements: {num_placements}")


def log_render_result(resume_name: str, result) -> None:
    """
    Log rendering result.

    Args:
        resume_name: Resume owner's name
        result: RenderResult from render_resume()
    """
    if result.success:
        _log_success(f"{resume_name}: PDF written ({result.page_count} page)")
        _log_debug(f"  PDF: {result.pdf_path}")
    else:
        # Reported to the user by the CLI
        _log_debug(f"{resume_name}: rendering failed")
        for i, err in enumerate(result.errors, 1):
            _log_debug(f"  Error {i}: {err}")


def log_viewer_launch(command: list) -> None:
    """Log the opener command about to run."""
    _log_info(f"Opening viewer: {' '.join(command)}")


def log_viewer_failure(message: str) -> None:
    """Log a failed viewer launch (reported to the user by the CLI)."""
    _log_debug(f"Viewer launch failed: {message}")

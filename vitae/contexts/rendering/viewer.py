"""
Default-viewer launching for generated resumes.

Platform selection happens once in default_viewer(); callers only see the
Viewer interface.
"""

import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from typing_extensions import Protocol

from vitae.contexts.rendering.logger import log_viewer_failure, log_viewer_launch
from vitae.contexts.rendering.pdf_writer import RESUME_PDF


class ViewerLaunchError(Exception):
    """Raised when a file cannot be opened in the default viewer."""


class Viewer(Protocol):
    """Anything that can open a file for the user."""

    def open(self, path: Path) -> None:
        """Open path; raise ViewerLaunchError on failure."""
        ...


class SystemViewer:
    """
    Opens files with a fixed platform command and waits for it to exit.

    Args:
        command: Command prefix; the file path is appended as the last argument
    """

    def __init__(self, command: Sequence[str]):
        self.command: List[str] = list(command)

    def open(self, path: Path) -> None:
        cmd = self.command + [str(path)]
        log_viewer_launch(cmd)
        try:
            completed = subprocess.run(cmd, check=False)
        except OSError as e:
            raise ViewerLaunchError(f"Could not run {self.command[0]}: {e}") from e
        if completed.returncode != 0:
            raise ViewerLaunchError(
                f"{self.command[0]} exited with status {completed.returncode}"
            )

    def __repr__(self) -> str:
        return f"SystemViewer({self.command!r})"


def default_viewer(platform: str = sys.platform) -> SystemViewer:
    """
    Pick the opener command for a platform.

    Windows uses `cmd /C start`, macOS `open`, Linux and other POSIX
    systems `xdg-open`.

    Raises:
        ViewerLaunchError: If the platform has no known opener
    """
    if platform.startswith("win"):
        # Empty string is the window title `start` expects before a path
        return SystemViewer(["cmd", "/C", "start", ""])
    if platform == "darwin":
        return SystemViewer(["open"])
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        return SystemViewer(["xdg-open"])
    raise ViewerLaunchError(f"Unsupported platform: {platform}")


def view_resume(pdf_path: Path = RESUME_PDF, viewer: Optional[Viewer] = None) -> None:
    """
    Open a generated resume in the default viewer, blocking until it exits.

    Args:
        pdf_path: PDF to open (default: resume.pdf in cwd)
        viewer: Opener to use (default: default_viewer())

    Raises:
        ViewerLaunchError: If the file is missing or the opener fails
    """
    pdf_path = Path(pdf_path)
    try:
        if not pdf_path.exists():
            raise ViewerLaunchError(f"Resume not found: {pdf_path}")
        if viewer is None:
            viewer = default_viewer()
        viewer.open(pdf_path)
    except ViewerLaunchError as e:
        log_viewer_failure(str(e))
        raise

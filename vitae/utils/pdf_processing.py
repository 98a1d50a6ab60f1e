"""
PDF inspection utilities for generated resumes.

page_count is used after every render; extract_lines supports the rendering
tests, which read the placed text back out of the written PDF.

Helper functions:
    page_count: Quick page count without full extraction.
    group_into_lines: Join characters sharing a baseline into text lines.
    extract_lines: Text lines of one page, top-to-bottom.
"""

from pathlib import Path
from typing import Dict, List, Optional

import pdfplumber
from PyPDF2 import PdfReader


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except Exception:
        return None


def group_into_lines(chars: List[Dict], tolerance: float = 3.0) -> List[str]:
    """
    Join characters into text lines, top line first.

    A character belongs to the current line while its top edge is within
    tolerance points of the line's first character; within a line characters
    are ordered left to right.
    """
    lines: List[List[Dict]] = []
    for char in sorted(chars, key=lambda c: (c["top"], c["x0"])):
        if lines and char["top"] - lines[-1][0]["top"] <= tolerance:
            lines[-1].append(char)
        else:
            lines.append([char])

    return ["".join(c["text"] for c in sorted(line, key=lambda c: c["x0"])) for line in lines]


def extract_lines(pdf_path: Path, page: int = 1, y_tolerance: float = 3.0) -> List[str]:
    """
    Extract text lines from a page, ordered top-to-bottom.

    Side-by-side placements on one baseline come back as a single line.

    Args:
        pdf_path: Path to PDF file
        page: Page number (1-indexed)
        y_tolerance: Max Y-distance (points) to group characters as same line

    Returns:
        List of text lines. Empty list if the page doesn't exist.
    """
    with pdfplumber.open(pdf_path) as pdf:
        if page < 1 or page > len(pdf.pages):
            return []
        chars = pdf.pages[page - 1].chars

    return group_into_lines(chars, tolerance=y_tolerance)

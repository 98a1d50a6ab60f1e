"""
Field validation patterns for resume intake.

Pattern classes follow a frozen-dataclass convention:
- Class-level constants for the raw pattern strings
- Compiled regexes built once at import
- Helper functions that use these patterns

All patterns are matched against the whole (already trimmed) answer.
"""

import re
from dataclasses import dataclass
from typing import Optional, Pattern


@dataclass(frozen=True)
class FieldPatterns:
    """
    Raw pattern strings for validated resume fields.

    NAME: letters and whitespace only (names, degree, company, ...)
    DIGITS: one or more digits (age, graduation year)
    PHONE: optional leading '+', digit groups joined by single hyphens
    EMAIL: local part, '@', dotted domain ending in a 2+ letter segment
    """

    NAME: str = r"[a-zA-Z\s]+"
    DIGITS: str = r"\d+"
    PHONE: str = r"\+?\d+(-\d+)*"
    EMAIL: str = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"


FIELD_PATTERNS = FieldPatterns()

NAME_RE = re.compile(FIELD_PATTERNS.NAME, re.ASCII)
DIGITS_RE = re.compile(FIELD_PATTERNS.DIGITS, re.ASCII)
PHONE_RE = re.compile(FIELD_PATTERNS.PHONE, re.ASCII)
EMAIL_RE = re.compile(FIELD_PATTERNS.EMAIL, re.ASCII)


def matches(pattern, value: str) -> bool:
    """
    Check that value matches pattern in full.

    Args:
        pattern: Compiled regex or raw pattern string
        value: Text to check

    Returns:
        True if the entire string matches
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.ASCII)
    return pattern.fullmatch(value) is not None


def is_valid(value: str, pattern: Optional[Pattern[str]]) -> bool:
    """Free-text fields (no pattern) accept anything, including an empty string."""
    return pattern is None or matches(pattern, value)

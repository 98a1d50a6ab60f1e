"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup
- PDF inspection
- Timestamps
"""

from vitae.utils.timestamp import now

__all__ = ["now"]

"""
Intake Context

Responsibilities:
- Prompts the user for every resume field in a fixed order
- Validates answers against full-match field patterns
- Assembles the immutable Resume record

Owns: Prompt script, field patterns, resume data structures
Never: Touches the filesystem
"""

from vitae.contexts.intake.collector import create_resume
from vitae.contexts.intake.prompter import (
    ScriptedSource,
    StdinSource,
    StreamClosedError,
    prompt_for_input,
)
from vitae.contexts.intake.resume_data_structure import (
    Education,
    Experience,
    PersonalInfo,
    Resume,
    parse_age,
)

__all__ = [
    "Education",
    "Experience",
    "PersonalInfo",
    "Resume",
    "ScriptedSource",
    "StdinSource",
    "StreamClosedError",
    "create_resume",
    "parse_age",
    "prompt_for_input",
]

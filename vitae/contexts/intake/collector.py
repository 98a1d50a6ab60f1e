"""
Resume collection script.

Runs the fixed prompt sequence (personal details, then one education entry,
then one experience entry) and assembles the Resume record.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Pattern, Tuple

import typer

from vitae.contexts.intake.logger import log_collection_result, log_collection_start
from vitae.contexts.intake.patterns import DIGITS_RE, EMAIL_RE, NAME_RE, PHONE_RE
from vitae.contexts.intake.prompter import LineSource, StdinSource, prompt_for_input
from vitae.contexts.intake.resume_data_structure import (
    Education,
    Experience,
    PersonalInfo,
    Resume,
    parse_age,
)

LETTERS_ONLY = "Only letters and spaces are allowed."


@dataclass(frozen=True)
class FieldPrompt:
    """
    One question in the collection script.

    Attributes:
        key: Record attribute the answer is stored under
        prompt: Text shown to the user
        pattern: Full-match validation pattern (None = free text)
        error_message: Text shown when the answer is rejected
    """

    key: str
    prompt: str
    pattern: Optional[Pattern[str]] = None
    error_message: str = ""


PERSONAL_INFO_PROMPTS: Tuple[FieldPrompt, ...] = (
    FieldPrompt("name", "Enter your name:", NAME_RE, f"Invalid name. {LETTERS_ONLY}"),
    FieldPrompt("sex", "Enter your sex:", NAME_RE, f"Invalid sex. {LETTERS_ONLY}"),
    FieldPrompt("age", "Enter your age:", DIGITS_RE, "Invalid age. Please enter a valid number."),
    FieldPrompt("religion", "Enter your religion:", NAME_RE, f"Invalid religion. {LETTERS_ONLY}"),
    FieldPrompt("birthdate", "Enter your birthdate:", None, "Invalid date format."),
    FieldPrompt("fathers_name", "Enter your father's name:", NAME_RE, f"Invalid name. {LETTERS_ONLY}"),
    FieldPrompt("mothers_name", "Enter your mother's name:", NAME_RE, f"Invalid name. {LETTERS_ONLY}"),
    FieldPrompt(
        "marital_status", "Enter your marital status:", NAME_RE, f"Invalid status. {LETTERS_ONLY}"
    ),
    FieldPrompt("phone_number", "Enter your phone number:", PHONE_RE, "Invalid phone number format."),
    FieldPrompt("email", "Enter your email:", EMAIL_RE, "Invalid email format."),
    FieldPrompt("address", "Enter your address:", None, "Invalid address format."),
)

EDUCATION_PROMPTS: Tuple[FieldPrompt, ...] = (
    FieldPrompt("degree", "Enter your degree:", NAME_RE, f"Invalid degree. {LETTERS_ONLY}"),
    FieldPrompt(
        "institution", "Enter your institution:", NAME_RE, f"Invalid institution. {LETTERS_ONLY}"
    ),
    FieldPrompt(
        "year", "Enter the year of graduation:", DIGITS_RE, "Invalid year. Please enter a valid year."
    ),
)

EXPERIENCE_PROMPTS: Tuple[FieldPrompt, ...] = (
    FieldPrompt("job_title", "Enter your job title:", NAME_RE, f"Invalid job title. {LETTERS_ONLY}"),
    FieldPrompt(
        "company", "Enter your company:", NAME_RE, f"Invalid company name. {LETTERS_ONLY}"
    ),
    FieldPrompt("duration", "Enter your job duration:", None, "Invalid duration format."),
    FieldPrompt(
        "responsibilities", "Enter your responsibilities:", None, "Invalid responsibilities format."
    ),
    FieldPrompt("expected_salary", "Enter your expected salary:", None, "Invalid salary format."),
)

ALL_PROMPTS = PERSONAL_INFO_PROMPTS + EDUCATION_PROMPTS + EXPERIENCE_PROMPTS


def collect_fields(
    prompts: Tuple[FieldPrompt, ...],
    source: LineSource,
    echo: Callable[[str], None] = typer.echo,
) -> Dict[str, str]:
    """Ask each prompt in order and return answers keyed by FieldPrompt.key."""
    return {
        field_prompt.key: prompt_for_input(
            field_prompt.prompt,
            field_prompt.pattern,
            field_prompt.error_message,
            source=source,
            echo=echo,
        )
        for field_prompt in prompts
    }


def create_resume(
    source: Optional[LineSource] = None,
    echo: Callable[[str], None] = typer.echo,
) -> Resume:
    """
    Build a Resume by running the full prompt script.

    Exactly one education entry and one experience entry are collected.

    Args:
        source: Where answers come from (default: stdin)
        echo: Output function for prompts and error messages

    Returns:
        Assembled Resume

    Raises:
        StreamClosedError: If input ends before every field is answered
    """
    if source is None:
        source = StdinSource()

    log_collection_start(len(ALL_PROMPTS))

    personal = collect_fields(PERSONAL_INFO_PROMPTS, source, echo)
    personal["age"] = parse_age(personal["age"])
    personal_info = PersonalInfo(**personal)

    education = (Education(**collect_fields(EDUCATION_PROMPTS, source, echo)),)
    experience = (Experience(**collect_fields(EXPERIENCE_PROMPTS, source, echo)),)

    resume = Resume(personal_info=personal_info, education=education, experience=experience)
    log_collection_result(resume)
    return resume

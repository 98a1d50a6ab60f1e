"""
Resume Data Structures

Immutable records produced by the intake context and consumed by rendering.
A Resume is assembled once per run and passed by value to the renderer.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from vitae.contexts.intake.patterns import DIGITS_RE, matches

# Age was historically stored as an unsigned 32-bit integer
MAX_AGE = 2**32 - 1


def parse_age(text: str) -> int:
    """
    Parse a collected age string.

    Anything that is not a plain digit string, or that overflows an unsigned
    32-bit integer, silently becomes 0.

    Examples:
        >>> parse_age("37")
        37
        >>> parse_age("thirty")
        0
    """
    if not matches(DIGITS_RE, text):
        return 0
    age = int(text)
    return age if age <= MAX_AGE else 0


@dataclass(frozen=True)
class PersonalInfo:
    """
    Personal details of the resume owner.

    All fields are trimmed text except age.
    """

    name: str
    sex: str
    age: int
    religion: str
    birthdate: str
    fathers_name: str
    mothers_name: str
    marital_status: str
    phone_number: str
    email: str
    address: str


@dataclass(frozen=True)
class Education:
    """
    One educational qualification.

    Attributes:
        degree: Degree name
        institution: Awarding institution
        year: Graduation year as a digit string
    """

    degree: str
    institution: str
    year: str


@dataclass(frozen=True)
class Experience:
    """One work experience entry."""

    job_title: str
    company: str
    duration: str
    responsibilities: str
    expected_salary: str


@dataclass(frozen=True)
class Resume:
    """
    Complete resume record.

    Attributes:
        personal_info: Personal details
        education: Ordered education entries
        experience: Ordered experience entries
    """

    personal_info: PersonalInfo
    education: Tuple[Education, ...] = ()
    experience: Tuple[Experience, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict of the record (tuples become lists)."""
        data = asdict(self)
        data["education"] = list(data["education"])
        data["experience"] = list(data["experience"])
        return data

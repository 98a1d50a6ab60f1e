"""Shared fixtures for vitae tests."""

import pytest
from loguru import logger

from vitae.contexts.intake import Education, Experience, PersonalInfo, Resume

ANSWERS = [
    "Ada Lovelace",
    "female",
    "36",
    "Anglican",
    "10 December 1815",
    "George Byron",
    "Anne Milbanke",
    "married",
    "+44-20-7946",
    "ada@example.com",
    "12 Queen Street, London",
    "Mathematics",
    "Kings College",
    "1835",
    "Analyst",
    "Analytical Engine Company",
    "1842 - 1843",
    "Wrote the first published algorithm",
    "negotiable",
]


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop sinks added during a test (they may point at captured streams)."""
    yield
    logger.remove()


@pytest.fixture
def answers():
    return list(ANSWERS)


@pytest.fixture
def sample_resume():
    return Resume(
        personal_info=PersonalInfo(
            name="Ada Lovelace",
            sex="female",
            age=36,
            religion="Anglican",
            birthdate="10 December 1815",
            fathers_name="George Byron",
            mothers_name="Anne Milbanke",
            marital_status="married",
            phone_number="+44-20-7946",
            email="ada@example.com",
            address="12 Queen Street, London",
        ),
        education=(Education(degree="Mathematics", institution="Kings College", year="1835"),),
        experience=(
            Experience(
                job_title="Analyst",
                company="Analytical Engine Company",
                duration="1842 - 1843",
                responsibilities="Wrote the first published algorithm",
                expected_salary="negotiable",
            ),
        ),
    )

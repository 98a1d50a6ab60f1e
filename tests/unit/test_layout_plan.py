"""Unit tests for page layout config and text placement planning."""

import dataclasses

import pytest
from omegaconf.errors import ConfigKeyError

from vitae.contexts.intake import Education, Experience
from vitae.contexts.rendering.layout import PageLayout, load_layout
from vitae.contexts.rendering.pdf_writer import (
    ATTESTATION,
    DATE_LINE,
    EDUCATION_HEADING,
    EXPERIENCE_HEADING,
    PERSONAL_HEADING,
    SIGNATURE_LINE,
    TITLE_TEXT,
    plan_resume,
)


def _index(placements, prefix):
    return next(i for i, p in enumerate(placements) if p.text.startswith(prefix))


@pytest.mark.unit
def test_packaged_layout_matches_schema_defaults():
    assert load_layout() == PageLayout()


@pytest.mark.unit
def test_section_order(sample_resume):
    placements = plan_resume(sample_resume, PageLayout())
    order = [
        TITLE_TEXT,
        "_____",
        PERSONAL_HEADING,
        "Name: ",
        "Address: ",
        EDUCATION_HEADING,
        "Degree: ",
        EXPERIENCE_HEADING,
        "Job Title: ",
        "Expected Salary: ",
        SIGNATURE_LINE,
        DATE_LINE,
        ATTESTATION,
    ]

    indices = [_index(placements, prefix) for prefix in order]

    assert indices == sorted(indices)
    assert placements[-1].text == ATTESTATION


@pytest.mark.unit
def test_cursor_only_moves_down(sample_resume):
    ys = [p.y for p in plan_resume(sample_resume, PageLayout())]

    assert ys == sorted(ys, reverse=True)


@pytest.mark.unit
def test_personal_fields_one_per_line(sample_resume):
    layout = PageLayout()
    placements = plan_resume(sample_resume, layout)
    start = _index(placements, "Name: ")
    personal = placements[start : start + 11]

    assert [p.text for p in personal] == [
        "Name: Ada Lovelace",
        "Sex: female",
        "Age: 36",
        "Religion: Anglican",
        "Birthdate: 10 December 1815",
        "Father's Name: George Byron",
        "Mother's Name: Anne Milbanke",
        "Marital Status: married",
        "Phone Number: +44-20-7946",
        "Email: ada@example.com",
        "Address: 12 Queen Street, London",
    ]
    assert all(p.x == layout.margin_x for p in personal)
    steps = [a.y - b.y for a, b in zip(personal, personal[1:])]
    assert steps == [layout.line_height] * 10


@pytest.mark.unit
def test_education_row_is_side_by_side(sample_resume):
    layout = PageLayout()
    placements = plan_resume(sample_resume, layout)
    start = _index(placements, "Degree: ")
    row = placements[start : start + 3]

    assert [p.text for p in row] == [
        "Degree: Mathematics",
        "Institution: Kings College",
        "Year: 1835",
    ]
    assert len({p.y for p in row}) == 1
    assert [p.x for p in row] == [
        layout.margin_x,
        layout.margin_x + layout.education_column_offset,
        layout.margin_x + 2 * layout.education_column_offset,
    ]


@pytest.mark.unit
def test_each_education_entry_gets_its_own_row(sample_resume):
    layout = PageLayout()
    resume = dataclasses.replace(
        sample_resume,
        education=sample_resume.education + (Education("Physics", "Cambridge", "1840"),),
    )
    placements = plan_resume(resume, layout)
    degrees = [p for p in placements if p.text.startswith("Degree: ")]

    assert len(degrees) == 2
    assert degrees[0].y - degrees[1].y == layout.education_row_gap
    assert degrees[1].x == layout.margin_x


@pytest.mark.unit
def test_experience_entries_stack_with_extra_gap(sample_resume):
    layout = PageLayout()
    second = Experience("Author", "Taylor", "1843", "Notes", "none")
    resume = dataclasses.replace(sample_resume, experience=sample_resume.experience + (second,))
    placements = plan_resume(resume, layout)
    titles = [p for p in placements if p.text.startswith("Job Title: ")]
    salaries = [p for p in placements if p.text.startswith("Expected Salary: ")]

    assert titles[0].y - salaries[0].y == 4 * layout.line_height
    assert salaries[0].y - titles[1].y == layout.experience_entry_gap


@pytest.mark.unit
def test_default_positions(sample_resume):
    placements = plan_resume(sample_resume, PageLayout())
    by_prefix = {prefix: placements[_index(placements, prefix)] for prefix in (
        TITLE_TEXT, "Name: ", EDUCATION_HEADING, "Degree: ", EXPERIENCE_HEADING,
        SIGNATURE_LINE, DATE_LINE, ATTESTATION,
    )}

    assert (by_prefix[TITLE_TEXT].x, by_prefix[TITLE_TEXT].y) == (55.0, 280.0)
    assert by_prefix["Name: "].y == 235.0
    assert by_prefix[EDUCATION_HEADING].y == 125.0
    assert by_prefix["Degree: "].y == 113.0
    assert by_prefix[EXPERIENCE_HEADING].y == 98.0
    assert by_prefix[SIGNATURE_LINE].y == 28.0
    assert by_prefix[DATE_LINE].y == 18.0
    assert by_prefix[ATTESTATION].y == 8.0
    assert by_prefix[ATTESTATION].font == "Times-Italic"


@pytest.mark.unit
def test_long_values_are_not_wrapped(sample_resume):
    long_address = "Flat 1, " * 40
    personal = dataclasses.replace(sample_resume.personal_info, address=long_address)
    resume = dataclasses.replace(sample_resume, personal_info=personal)

    placements = plan_resume(resume, PageLayout())

    assert f"Address: {long_address}" in [p.text for p in placements]
    assert len(placements) == len(plan_resume(sample_resume, PageLayout()))


@pytest.mark.integration
def test_layout_override_file(tmp_path):
    override = tmp_path / "layout.yaml"
    override.write_text("line_height: 8\nbody_size: 11\n", encoding="utf-8")

    layout = load_layout(override)

    assert layout.line_height == 8.0
    assert layout.body_size == 11.0
    assert layout.title_y == 280.0


@pytest.mark.integration
def test_layout_override_rejects_unknown_keys(tmp_path):
    override = tmp_path / "layout.yaml"
    override.write_text("gutter: 4\n", encoding="utf-8")

    with pytest.raises(ConfigKeyError):
        load_layout(override)

"""
Resume PDF Writer

Lays a Resume out on a single A4 page and writes it with reportlab.

Layout is absolute: every line is drawn at a fixed x and a cursor y that only
moves down the page. Nothing is wrapped or reflowed, so very long values run
past the right edge.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from vitae.contexts.intake.resume_data_structure import Resume
from vitae.contexts.rendering.layout import PageLayout, load_layout
from vitae.contexts.rendering.logger import _log_debug, log_render_result, log_render_start
from vitae.utils.pdf_processing import page_count

RESUME_PDF = Path("resume.pdf")

DOCUMENT_TITLE = "Resume"
TITLE_TEXT = "Professional Resume"
PERSONAL_HEADING = "Personal Information"
EDUCATION_HEADING = "Education"
EXPERIENCE_HEADING = "Experience"
SIGNATURE_LINE = "Signature: _________________________"
DATE_LINE = "Date: _____________________________"
ATTESTATION = (
    "I hereby declare that all the information provided above is true and accurate "
    "to the best of my knowledge."
)

# (label, attribute) in the order lines appear on the page
PERSONAL_FIELDS = (
    ("Name", "name"),
    ("Sex", "sex"),
    ("Age", "age"),
    ("Religion", "religion"),
    ("Birthdate", "birthdate"),
    ("Father's Name", "fathers_name"),
    ("Mother's Name", "mothers_name"),
    ("Marital Status", "marital_status"),
    ("Phone Number", "phone_number"),
    ("Email", "email"),
    ("Address", "address"),
)
EDUCATION_FIELDS = (
    ("Degree", "degree"),
    ("Institution", "institution"),
    ("Year", "year"),
)
EXPERIENCE_FIELDS = (
    ("Job Title", "job_title"),
    ("Company", "company"),
    ("Duration", "duration"),
    ("Responsibilities", "responsibilities"),
    ("Expected Salary", "expected_salary"),
)


@dataclass(frozen=True)
class TextPlacement:
    """
    One string drawn at an absolute position.

    Attributes:
        text: String to draw
        font: Built-in PDF font name
        size: Font size in points
        x: Distance from the left edge in mm
        y: Baseline distance from the bottom edge in mm
    """

    text: str
    font: str
    size: float
    x: float
    y: float


@dataclass
class RenderResult:
    """
    Result of rendering a resume.

    Attributes:
        success: Whether the PDF was fully written
        pdf_path: Path to the written PDF (None if failed)
        errors: Error messages (empty on success)
        page_count: Number of pages in the written PDF (None if not available)
    """

    success: bool
    pdf_path: Optional[Path] = None
    errors: List[str] = field(default_factory=list)
    page_count: Optional[int] = None


def plan_resume(resume: Resume, layout: PageLayout) -> List[TextPlacement]:
    """
    Compute every text placement for a resume, top of the page first.

    Sections appear in a fixed order: title, rule, personal information,
    education, experience, then signature, date and attestation. Each field
    gets its own line, except education rows which put degree, institution
    and year side by side.
    """
    bold, regular, italic = layout.bold_font, layout.regular_font, layout.italic_font
    left = layout.margin_x
    placements = [
        TextPlacement(TITLE_TEXT, bold, layout.title_size, layout.title_x, layout.title_y),
        TextPlacement("_" * layout.rule_length, bold, layout.rule_size, left, layout.rule_y),
        TextPlacement(
            PERSONAL_HEADING, bold, layout.personal_heading_size, left, layout.personal_heading_y
        ),
    ]

    y = layout.personal_start_y
    for label, attr in PERSONAL_FIELDS:
        value = getattr(resume.personal_info, attr)
        placements.append(TextPlacement(f"{label}: {value}", regular, layout.body_size, left, y))
        y -= layout.line_height

    placements.append(
        TextPlacement(EDUCATION_HEADING, bold, layout.section_heading_size, left, y)
    )
    y -= layout.education_heading_gap
    for entry in resume.education:
        x = left
        for label, attr in EDUCATION_FIELDS:
            value = getattr(entry, attr)
            placements.append(TextPlacement(f"{label}: {value}", regular, layout.body_size, x, y))
            x += layout.education_column_offset
        y -= layout.education_row_gap

    placements.append(
        TextPlacement(EXPERIENCE_HEADING, bold, layout.section_heading_size, left, y)
    )
    y -= layout.experience_heading_gap
    for entry in resume.experience:
        for i, (label, attr) in enumerate(EXPERIENCE_FIELDS):
            value = getattr(entry, attr)
            placements.append(TextPlacement(f"{label}: {value}", regular, layout.body_size, left, y))
            last = i == len(EXPERIENCE_FIELDS) - 1
            y -= layout.experience_entry_gap if last else layout.line_height

    placements.append(TextPlacement(SIGNATURE_LINE, regular, layout.body_size, left, y))
    y -= layout.line_height
    placements.append(TextPlacement(DATE_LINE, regular, layout.body_size, left, y))
    y -= layout.line_height
    placements.append(TextPlacement(ATTESTATION, italic, layout.attestation_size, left, y))

    return placements


def render_resume(
    resume: Resume,
    output_path: Path = RESUME_PDF,
    layout: Optional[PageLayout] = None,
) -> RenderResult:
    """
    Render a resume to a single-page PDF.

    Overwrites output_path without asking. Output is byte-for-byte
    reproducible for identical input (reportlab invariant mode).

    Args:
        resume: Completed resume record
        output_path: Where to write the PDF (default: resume.pdf in cwd)
        layout: Page layout (default: load_layout())

    Returns:
        RenderResult with success status; failures (including an unreadable
        layout override) are reported, never raised
    """
    output_path = Path(output_path)
    resume_name = resume.personal_info.name

    try:
        if layout is None:
            layout = load_layout()
        placements = plan_resume(resume, layout)
        log_render_start(resume_name, output_path, len(placements))

        pdf = canvas.Canvas(
            str(output_path),
            pagesize=(layout.page_width_mm * mm, layout.page_height_mm * mm),
            invariant=1,
        )
        pdf.setTitle(DOCUMENT_TITLE)
        for placement in placements:
            pdf.setFont(placement.font, placement.size)
            pdf.drawString(placement.x * mm, placement.y * mm, placement.text)
        pdf.showPage()
        pdf.save()
    except Exception as e:
        result = RenderResult(success=False, errors=[f"{type(e).__name__}: {e}"])
        log_render_result(resume_name, result)
        return result

    _log_debug(f"Wrote {output_path.stat().st_size} bytes")
    result = RenderResult(success=True, pdf_path=output_path, page_count=page_count(output_path))
    log_render_result(resume_name, result)
    return result

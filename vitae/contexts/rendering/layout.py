"""
Page layout configuration.

Every numeric constant used to place text on the resume page lives in
PageLayout. Defaults ship in layout.yaml next to this module; an override
file (VITAE_LAYOUT_PATH) is merged on top and validated against the schema.

Examples:
    >>> layout = load_layout()
    >>> layout.line_height
    10.0
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()

DEFAULT_LAYOUT_PATH = Path(__file__).parent / "layout.yaml"
LAYOUT_OVERRIDE_PATH = os.getenv("VITAE_LAYOUT_PATH")


@dataclass
class PageLayout:
    """
    Absolute layout of the resume page.

    Attributes:
        page_width_mm / page_height_mm: Page size (A4)
        bold_font / regular_font / italic_font: Built-in PDF font names
        margin_x: Left edge of every left-aligned line
        title_*: Title block size and position
        rule_*: Underscore rule below the title
        personal_*: "Personal Information" heading and first field line
        section_heading_size: Size of the Education / Experience headings
        body_size: Size of field lines, signature and date
        attestation_size: Size of the closing statement
        line_height: Vertical step between stacked lines
        education_*: Gap below heading, column offset within a row, row step
        experience_*: Gap below heading, extra step after each entry
    """

    page_width_mm: float = 210.0
    page_height_mm: float = 297.0

    bold_font: str = "Times-Bold"
    regular_font: str = "Times-Roman"
    italic_font: str = "Times-Italic"

    margin_x: float = 10.0

    title_size: float = 24.0
    title_x: float = 55.0
    title_y: float = 280.0

    rule_size: float = 24.0
    rule_y: float = 270.0
    rule_length: int = 45

    personal_heading_size: float = 18.0
    personal_heading_y: float = 250.0
    personal_start_y: float = 235.0

    section_heading_size: float = 14.0
    body_size: float = 12.0
    attestation_size: float = 10.0
    line_height: float = 10.0

    education_heading_gap: float = 12.0
    education_column_offset: float = 60.0
    education_row_gap: float = 15.0

    experience_heading_gap: float = 15.0
    experience_entry_gap: float = 15.0


def load_layout(override_path: Optional[Path] = None) -> PageLayout:
    """
    Load the page layout.

    Args:
        override_path: Optional YAML merged over the packaged defaults
            (defaults to VITAE_LAYOUT_PATH env variable)

    Returns:
        PageLayout instance

    Raises:
        omegaconf.errors.ConfigKeyError: If the override names an unknown key
        omegaconf.errors.ValidationError: If a value has the wrong type
    """
    if override_path is None and LAYOUT_OVERRIDE_PATH:
        override_path = Path(LAYOUT_OVERRIDE_PATH)

    conf = OmegaConf.merge(OmegaConf.structured(PageLayout), OmegaConf.load(DEFAULT_LAYOUT_PATH))
    if override_path is not None:
        conf = OmegaConf.merge(conf, OmegaConf.load(override_path))

    return OmegaConf.to_object(conf)

"""
Rendering Context

Responsibilities:
- Lays out a Resume on a single A4 page
- Writes the PDF to the fixed output path
- Opens the generated PDF in the platform's default viewer

Owns: Page layout, PDF generation, viewer launching
Never: Prompts for or modifies resume content
"""

from vitae.contexts.rendering.pdf_writer import RESUME_PDF, RenderResult, render_resume
from vitae.contexts.rendering.viewer import ViewerLaunchError, view_resume

__all__ = ["RESUME_PDF", "RenderResult", "ViewerLaunchError", "render_resume", "view_resume"]

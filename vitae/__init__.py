"""
vitae - interactive resume generator

Collects personal, education and employment details from a prompt session
and lays them out on a single A4 PDF page.

Architecture:
- Intake Context: Prompting, field validation and resume assembly
- Rendering Context: PDF layout, output management and viewer launching
"""

__version__ = "1.0"

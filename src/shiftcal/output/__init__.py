"""Output generation for calendars and statistics (text, PDF)."""

from shiftcal.output.pdf_generator import PDFGenerator
from shiftcal.output.text_report import TextReportGenerator

__all__ = [
    "PDFGenerator",
    "TextReportGenerator",
]

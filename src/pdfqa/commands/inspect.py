# src/pdfqa/commands/inspect.py
"""Inspect command - report what a PDF offers for chunking."""

from __future__ import annotations

from pathlib import Path

from pdfqa.commands.base import InspectResult
from pdfqa.exceptions import PdfQAError


def inspect(path: str | Path) -> InspectResult:
    """Open a PDF and report its page count, outline and text layer.

    Args:
        path: Path to the PDF file

    Returns:
        InspectResult describing the document
    """
    from pdfqa.document.pypdf_document import PyPDFDocument

    try:
        document = PyPDFDocument.open(path)
    except (OSError, PdfQAError) as e:
        return InspectResult(success=False, error=str(e))

    return InspectResult(
        success=True,
        name=document.name,
        page_count=document.page_count,
        has_outline=document.has_outline(),
        is_text_based=document.is_text_based(),
    )

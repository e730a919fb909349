# src/pdfqa/document/__init__.py
"""Source document access for pdfqa."""

from pdfqa.document.base import Document, OutlineItem

__all__ = ["Document", "OutlineItem"]


def __getattr__(name: str) -> type:
    """Lazy import the pypdf-backed document."""
    if name == "PyPDFDocument":
        from pdfqa.document.pypdf_document import PyPDFDocument

        return PyPDFDocument
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

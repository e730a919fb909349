# src/pdfqa/extraction.py
"""Content extraction for chunks: page text and standalone page ranges."""

from __future__ import annotations

import logging

from pdfqa.document.base import Document
from pdfqa.models import Attachment, ChunkRange

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


def extract_page_range(document: Document, start_page: int, end_page: int) -> bytes:
    """Copy an inclusive, 1-indexed page range into a new serialized PDF.

    The caller guarantees ``1 <= start_page <= end_page <= document.page_count``;
    errors from the underlying library propagate unchanged.
    """
    return document.extract_pages(start_page, end_page)


def extract_chunk_text(document: Document, chunk: ChunkRange) -> str:
    """Extract the text of every page in a chunk.

    Each page's fragments are joined with spaces and followed by a blank line.
    A page that fails to extract is replaced by an inline marker so the rest
    of the chunk still comes through.
    """
    parts: list[str] = []
    for page_number in range(chunk.start_page, chunk.end_page + 1):
        try:
            page_text = document.page_text(page_number)
        except Exception as e:
            logger.warning("Failed to extract text from page %d: %s", page_number, e)
            page_text = f"[Error extracting text from page {page_number}]"
        parts.append(page_text + PAGE_SEPARATOR)
    return "".join(parts)


def extract_chunk_attachment(document: Document, chunk: ChunkRange) -> Attachment | None:
    """Extract a chunk's pages as a PDF attachment, or None if that fails."""
    try:
        data = extract_page_range(document, chunk.start_page, chunk.end_page)
    except Exception as e:
        logger.error(
            "Failed to extract PDF for chunk (pages %d-%d): %s",
            chunk.start_page,
            chunk.end_page,
            e,
        )
        return None
    return Attachment(data=data, mime_type="application/pdf")

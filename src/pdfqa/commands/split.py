# src/pdfqa/commands/split.py
"""Split command - preview the chunks derived from a PDF outline."""

from __future__ import annotations

from pathlib import Path

from pdfqa.commands.base import ChunkInfo, SplitResult
from pdfqa.config import ConfigError, get_pdfqa_config
from pdfqa.exceptions import PdfQAError
from pdfqa.models import Chunk


def chunk_info(chunk: Chunk, pairs: int = 0) -> ChunkInfo:
    return ChunkInfo(
        id=chunk.id,
        start_page=chunk.start_page,
        end_page=chunk.end_page,
        context_title=chunk.context_title,
        pairs=pairs,
    )


def split(
    path: str | Path,
    max_pages_per_chunk: int | None = None,
    config_path: str | Path | None = None,
) -> SplitResult:
    """Auto-split a PDF by its outline without generating anything.

    Args:
        path: Path to the PDF file
        max_pages_per_chunk: Override the configured maximum chunk span
        config_path: Override config file path

    Returns:
        SplitResult with the derived chunks, or the auto-split error
    """
    from pdfqa.document.pypdf_document import PyPDFDocument
    from pdfqa.session import Session

    config = get_pdfqa_config(config_path)
    if isinstance(config, ConfigError):
        return SplitResult(success=False, error=config.message)

    settings = config.settings
    if max_pages_per_chunk is not None:
        settings = settings.model_copy(update={"max_pages_per_chunk": max_pages_per_chunk})

    try:
        document = PyPDFDocument.open(path)
    except (OSError, PdfQAError) as e:
        return SplitResult(success=False, error=str(e))

    session = Session(document, settings)
    try:
        chunks = session.auto_split()
    except PdfQAError as e:
        return SplitResult(
            success=False,
            error=f"Auto-split error: {e}",
            name=document.name,
            page_count=document.page_count,
        )

    return SplitResult(
        success=True,
        name=document.name,
        page_count=document.page_count,
        chunks=[chunk_info(chunk) for chunk in chunks],
    )

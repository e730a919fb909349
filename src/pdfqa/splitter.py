# src/pdfqa/splitter.py
"""Chunk splitting: section boundaries to bounded page-range chunks."""

from __future__ import annotations

from collections.abc import Sequence

from pdfqa.document.base import Document
from pdfqa.exceptions import NoOutlineError
from pdfqa.models import Bookmark, Chunk, ChunkRange
from pdfqa.outline import resolve_bookmarks

DEFAULT_MAX_PAGES_PER_CHUNK = 4


def section_ranges(bookmarks: Sequence[Bookmark], total_pages: int) -> list[ChunkRange]:
    """Turn page-ordered bookmarks into one range per section.

    A section runs from its bookmark's page up to the page before the next
    bookmark; the last section runs to the end of the document. Empty
    sections (and anything past ``total_pages``) are dropped.
    """
    sections: list[ChunkRange] = []
    for i, bookmark in enumerate(bookmarks):
        start_page = bookmark.page
        end_page = bookmarks[i + 1].page - 1 if i + 1 < len(bookmarks) else total_pages
        end_page = min(end_page, total_pages)
        if start_page <= end_page:
            sections.append(
                ChunkRange(start_page=start_page, end_page=end_page, context_title=bookmark.title)
            )
    return sections


def split_range(section: ChunkRange, max_pages_per_chunk: int) -> list[ChunkRange]:
    """Split a range greedily into consecutive pieces of at most ``max_pages_per_chunk`` pages."""
    pieces: list[ChunkRange] = []
    current_start = section.start_page
    while current_start <= section.end_page:
        current_end = min(current_start + max_pages_per_chunk - 1, section.end_page)
        pieces.append(
            ChunkRange(
                start_page=current_start,
                end_page=current_end,
                context_title=section.context_title,
            )
        )
        current_start = current_end + 1
    return pieces


def split_sections(
    bookmarks: Sequence[Bookmark],
    total_pages: int,
    max_pages_per_chunk: int = DEFAULT_MAX_PAGES_PER_CHUNK,
) -> list[ChunkRange]:
    """Convert section boundaries into bounded, non-overlapping page ranges.

    Args:
        bookmarks: Bookmarks sorted by page with unique pages
        total_pages: Page count of the document
        max_pages_per_chunk: Maximum span of a single range

    Returns:
        Ranges in page order, each carrying its section title
    """
    if max_pages_per_chunk < 1:
        raise ValueError("max_pages_per_chunk must be at least 1")

    ranges: list[ChunkRange] = []
    for section in section_ranges(bookmarks, total_pages):
        ranges.extend(split_range(section, max_pages_per_chunk))
    return ranges


def assign_chunk_ids(ranges: Sequence[ChunkRange], first_id: int = 1) -> list[Chunk]:
    """Number ranges sequentially in the given order."""
    return [
        Chunk(id=first_id + i, **chunk_range.model_dump()) for i, chunk_range in enumerate(ranges)
    ]


def auto_split(
    document: Document,
    max_pages_per_chunk: int = DEFAULT_MAX_PAGES_PER_CHUNK,
) -> list[Chunk]:
    """Derive chunks from a document's outline.

    Raises:
        NoOutlineError: If the document has no outline
        OutlineUnusableError: If the outline has no resolvable entries
    """
    bookmarks = resolve_bookmarks(document)
    if bookmarks is None:
        raise NoOutlineError()
    ranges = split_sections(bookmarks, document.page_count, max_pages_per_chunk)
    return assign_chunk_ids(ranges)

# src/pdfqa/outline.py
"""Outline resolution: turn a bookmark tree into ordered section boundaries."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pdfqa.document.base import Document, OutlineItem
from pdfqa.exceptions import OutlineUnusableError
from pdfqa.models import Bookmark

logger = logging.getLogger(__name__)


def resolve_bookmarks(document: Document) -> list[Bookmark] | None:
    """Resolve a document's outline into bookmarks sorted and deduplicated by page.

    Args:
        document: Document to read the outline from

    Returns:
        Bookmarks in page order with at most one bookmark per page, or None
        if the document has no outline (or an empty one).

    Raises:
        OutlineUnusableError: If an outline exists but no entry resolves to a page
    """
    outline = document.get_outline()
    if not outline:
        return None

    bookmarks: list[Bookmark] = []
    _walk(document, outline, bookmarks)

    if not bookmarks:
        raise OutlineUnusableError()

    return dedupe_by_page(bookmarks)


def dedupe_by_page(bookmarks: Sequence[Bookmark]) -> list[Bookmark]:
    """Sort bookmarks by page (stable) and keep the first bookmark for each page."""
    seen: set[int] = set()
    unique: list[Bookmark] = []
    for bookmark in sorted(bookmarks, key=lambda b: b.page):
        if bookmark.page in seen:
            continue
        seen.add(bookmark.page)
        unique.append(bookmark)
    return unique


def _walk(document: Document, items: Sequence[OutlineItem], out: list[Bookmark]) -> None:
    """Depth-first walk in document order, isolating failures per entry."""
    for item in items:
        bookmark = _resolve_item(document, item)
        if bookmark is not None:
            out.append(bookmark)
        if item.items:
            _walk(document, item.items, out)


def _resolve_item(document: Document, item: OutlineItem) -> Bookmark | None:
    """Resolve a single outline entry, or return None if it cannot be resolved."""
    try:
        dest = item.dest
        if isinstance(dest, str):
            dest = document.resolve_destination(dest)
        if isinstance(dest, (list, tuple)) and dest and dest[0] is not None:
            page_index = document.page_index(dest[0])
            return Bookmark(title=item.title, page=page_index + 1)
    except Exception as e:
        logger.warning("Could not resolve destination for bookmark %r: %s", item.title, e)
    return None

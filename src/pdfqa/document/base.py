# src/pdfqa/document/base.py
"""Document abstract base class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class OutlineItem:
    """One entry of a document outline (table of contents).

    Attributes:
        title: Display title of the entry.
        dest: Either a named destination (str) or an explicit destination
              sequence whose first element is a page reference. May be None
              or malformed; resolution failures are handled by the caller.
        items: Nested child entries, in document order.
    """

    title: str
    dest: Any = None
    items: list[OutlineItem] = field(default_factory=list)


class Document(ABC):
    """Read-only handle on a paginated source document.

    The pipeline never mutates a document. Page numbers are 1-based except
    for ``page_index``, which returns the 0-based index of a page reference.
    """

    name: str = "this document"

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Total number of pages."""
        ...

    @abstractmethod
    def page_text_fragments(self, page_number: int) -> list[str]:
        """Return the ordered text fragments of a page (1-based)."""
        ...

    @abstractmethod
    def get_outline(self) -> list[OutlineItem] | None:
        """Return the top-level outline entries, or None if there is no outline."""
        ...

    @abstractmethod
    def resolve_destination(self, name: str) -> list[Any] | None:
        """Resolve a named destination to an explicit destination sequence."""
        ...

    @abstractmethod
    def page_index(self, ref: Any) -> int:
        """Resolve a page reference to a 0-based page index."""
        ...

    @abstractmethod
    def extract_pages(self, start_page: int, end_page: int) -> bytes:
        """Copy pages ``start_page..end_page`` (inclusive) into a new serialized document."""
        ...

    def page_text(self, page_number: int, separator: str = " ") -> str:
        """Return the text of a page with its fragments joined by ``separator``."""
        return separator.join(self.page_text_fragments(page_number))

    def has_outline(self) -> bool:
        """True if the document exposes a non-empty outline."""
        outline = self.get_outline()
        return bool(outline)

    def is_text_based(self) -> bool:
        """Check whether the first page carries extractable text.

        A failure while reading the page counts as "not text-based".
        """
        if self.page_count == 0:
            return False
        try:
            fragments = self.page_text_fragments(1)
        except Exception as e:
            logger.warning("Could not perform text check on %s: %s", self.name, e)
            return False
        return any(fragment.strip() for fragment in fragments)

# src/pdfqa/document/pypdf_document.py
"""Document implementation backed by pypdf - lightweight, pure Python."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from pypdf.generic import Destination, IndirectObject, NullObject

from pdfqa.document.base import Document, OutlineItem
from pdfqa.exceptions import InvalidDocumentError


class PyPDFDocument(Document):
    """Read PDF files using pypdf.

    Example:
        doc = PyPDFDocument.open("manual.pdf")
        print(doc.page_count, doc.has_outline())
        chunk_bytes = doc.extract_pages(1, 4)
    """

    SUPPORTED_EXTENSIONS = {".pdf"}

    def __init__(self, reader: PdfReader, name: str = "this document") -> None:
        self._reader = reader
        self.name = name
        self._page_ids: dict[int, int] | None = None

    @classmethod
    def supports(cls, path: str | Path) -> bool:
        """Check if the given path looks like a PDF file."""
        return Path(path).suffix.lower() in cls.SUPPORTED_EXTENSIONS

    @classmethod
    def open(cls, path: str | Path) -> PyPDFDocument:
        """Open a PDF file from disk.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidDocumentError: If the file is not a PDF or cannot be parsed
        """
        file_path = Path(path)
        if not cls.supports(file_path):
            raise InvalidDocumentError("Please select a valid PDF file.")
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            reader = PdfReader(file_path)
            # Touch the page tree so structural errors surface here, not mid-pipeline.
            len(reader.pages)
        except (PdfReadError, ValueError, KeyError) as e:
            raise InvalidDocumentError(f"Error parsing PDF: {e}") from e

        return cls(reader, name=file_path.name)

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "this document") -> PyPDFDocument:
        """Open a PDF held in memory."""
        try:
            reader = PdfReader(io.BytesIO(data))
            len(reader.pages)
        except (PdfReadError, ValueError, KeyError) as e:
            raise InvalidDocumentError(f"Error parsing PDF: {e}") from e
        return cls(reader, name=name)

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    def page_text_fragments(self, page_number: int) -> list[str]:
        page = self._reader.pages[page_number - 1]
        text = page.extract_text() or ""
        return text.splitlines()

    def get_outline(self) -> list[OutlineItem] | None:
        outline = self._reader.outline
        if not outline:
            return None
        return self._convert_outline(outline)

    def _convert_outline(self, nodes: list[Any]) -> list[OutlineItem]:
        """Convert pypdf's flat "item, [children]" outline layout into a tree."""
        items: list[OutlineItem] = []
        for node in nodes:
            if isinstance(node, list):
                # Children belong to the entry immediately before them
                if items:
                    items[-1].items.extend(self._convert_outline(node))
                else:
                    items.extend(self._convert_outline(node))
            elif isinstance(node, Destination):
                items.append(OutlineItem(title=str(node.title), dest=self._destination_array(node)))
        return items

    @staticmethod
    def _destination_array(dest: Destination) -> list[Any] | None:
        page = dest.page
        if page is None or isinstance(page, NullObject):
            return None
        return [page, dest.typ]

    def resolve_destination(self, name: str) -> list[Any] | None:
        dest = self._reader.named_destinations.get(name)
        if dest is None:
            return None
        return self._destination_array(dest)

    def page_index(self, ref: Any) -> int:
        if isinstance(ref, IndirectObject):
            if self._page_ids is None:
                self._page_ids = {
                    page.indirect_reference.idnum: i
                    for i, page in enumerate(self._reader.pages)
                    if page.indirect_reference is not None
                }
            try:
                return self._page_ids[ref.idnum]
            except KeyError:
                raise ValueError(f"Reference {ref!r} does not point to a page") from None
        if isinstance(ref, int) and 0 <= ref < self.page_count:
            return ref
        raise ValueError(f"Unsupported page reference: {ref!r}")

    def extract_pages(self, start_page: int, end_page: int) -> bytes:
        if start_page < 1:
            raise IndexError(f"Page {start_page} is out of range")
        writer = PdfWriter()
        for index in range(start_page - 1, end_page):
            writer.add_page(self._reader.pages[index])
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()
